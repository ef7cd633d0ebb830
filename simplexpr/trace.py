"""
Rewrite tracing for SIMPLEXPR

Records which simplification rules fired, and on what, during one
simplify pass:

    from simplexpr import E, simplify

    result, trace = simplify(E.add("x", "x"), trace=True)
    print(trace.format("rules"))   # add-same

Steps are recorded bottom-up: the steps of a node's children come first,
then the step of the node itself. When a rule builds a node and simplifies
it again, the steps of that second pass follow the rule that built it.
"""

from typing import Dict, List


class SimplifyStep:
    """A single rule application in a simplification trace."""

    __slots__ = ('rule', 'before', 'after')

    def __init__(self, rule: str, before, after):
        self.rule = rule
        self.before = before
        self.after = after

    def __repr__(self) -> str:
        return f"{self.rule}: {self.before.pretty_print()} -> {self.after.pretty_print()}"

    def to_dict(self) -> Dict:
        """Convert step to dictionary for serialization."""
        return {
            "rule": self.rule,
            "before": self.before.pretty_print(),
            "after": self.after.pretty_print(),
        }


class SimplifyTrace:
    """
    A trace of all rule applications made by one simplify call.

    Provides multiple formatting options:
        - Default repr: verbose multi-line format
        - format("compact"): single line showing rule chain
        - format("rules"): just the rule names applied
        - format("chain"): before/after of every step, one per line
        - to_dict(): JSON-serializable dictionary
    """

    def __init__(self):
        self.steps: List[SimplifyStep] = []
        self.initial = None
        self.final = None

    def add_step(self, step: SimplifyStep):
        self.steps.append(step)

    def _render(self, expr) -> str:
        return "" if expr is None else expr.pretty_print()

    def format(self, style: str = "verbose") -> str:
        """
        Format the trace in different styles.

        Args:
            style: One of "verbose", "compact", "rules", "chain"

        Returns:
            Formatted string representation of the trace.
        """
        if style == "compact":
            rules = ", ".join(self.rules_applied())
            return f"{self._render(self.initial)} --[{rules}]--> {self._render(self.final)}"

        elif style == "rules":
            rules = self.rules_applied()
            return " -> ".join(rules) if rules else "(no rules applied)"

        elif style == "chain":
            if not self.steps:
                return self._render(self.initial)
            parts = [self._render(self.initial)]
            for step in self.steps:
                parts.append(f"  {step.before.pretty_print()}  --({step.rule})-->  "
                             f"{step.after.pretty_print()}")
            parts.append(self._render(self.final))
            return "\n".join(parts)

        elif style == "verbose":
            return repr(self)

        raise ValueError(f"Unknown trace format: {style}. "
                         "Use 'verbose', 'compact', 'rules' or 'chain'.")

    def __repr__(self) -> str:
        lines = [f"Initial: {self._render(self.initial)}"]
        for i, step in enumerate(self.steps, 1):
            lines.append(f"  {i}. {step}")
        lines.append(f"Final: {self._render(self.final)}")
        return "\n".join(lines)

    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self):
        """Iterate over rule applications."""
        return iter(self.steps)

    def __bool__(self) -> bool:
        """True if any rule fired."""
        return len(self.steps) > 0

    def to_dict(self) -> Dict:
        """Convert trace to dictionary for JSON serialization."""
        return {
            "initial": self._render(self.initial),
            "final": self._render(self.final),
            "steps": [step.to_dict() for step in self.steps],
            "step_count": len(self.steps),
        }

    def rule_counts(self) -> Dict[str, int]:
        """Count how many times each rule fired."""
        counts: Dict[str, int] = {}
        for step in self.steps:
            counts[step.rule] = counts.get(step.rule, 0) + 1
        return counts

    def rules_applied(self) -> List[str]:
        """Get list of rule names in order of application."""
        return [step.rule for step in self.steps]
