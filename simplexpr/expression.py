"""
Expression trees and their simplification rules.

SIMPLEXPR - Simplifying EXPRessions

An expression is an immutable tree of nodes. Leaves are variables,
constants and coefficient-variables (a constant fused onto a variable,
such as ``3.0x``); composites are the four binary operators.

Every node can render itself as text and simplify itself. Simplification
is a single bottom-up pass: a composite first simplifies its children,
then applies its own local rules to the simplified children, in a fixed
order. Only two rules re-simplify the node they build (like-term fusion
in an addition, squaring in a multiplication); nothing else iterates to
a fixpoint.

Text equality stands in for structural equality throughout: two subtrees
are "the same" when they print the same.
"""

import logging
from typing import Optional, Tuple, Union

from .trace import SimplifyStep, SimplifyTrace

_logger = logging.getLogger(__name__)

NumericType = Union[int, float]


class UndefinedOperationError(ZeroDivisionError):
    """Raised when simplification meets a mathematically undefined operation.

    The only such operation is zero raised to a negative power. This is a
    ZeroDivisionError because that is what Python raises for ``0.0 ** -2``.
    """


def format_number(value: float) -> str:
    """
    Render a float the way constants print.

    Special values keep a distinct spelling:

        format_number(7.0)           -> "7.0"
        format_number(float("nan"))  -> "nan"
        format_number(float("-inf")) -> "-inf"
    """
    return repr(float(value))


def _is_constant(expr: "Expression", value: float) -> bool:
    return isinstance(expr, Constant) and expr.value == value


# ============================================================
# Base class
# ============================================================

class Expression:
    """
    Base class for all expression nodes.

    Subclasses implement pretty_print() and simplify(). Nodes are never
    mutated after construction, so they can be shared freely.
    """

    __slots__ = ()

    def pretty_print(self) -> str:
        raise NotImplementedError

    def simplify(self, trace: Optional[SimplifyTrace] = None) -> "Expression":
        """
        Return a simplified equivalent of this expression.

        Args:
            trace: Optional SimplifyTrace that receives one step per fired rule

        Returns:
            A new expression, or this very node when nothing simplifies.

        Raises:
            UndefinedOperationError: If the tree contains 0 raised to a
                negative constant power.
        """
        raise NotImplementedError

    @property
    def children(self) -> Tuple["Expression", ...]:
        return ()

    def __eq__(self, other):
        if type(self) is type(other):
            return self.pretty_print() == other.pretty_print()
        return NotImplemented

    def __hash__(self):
        return hash((type(self).__name__, self.pretty_print()))

    def __str__(self) -> str:
        return self.pretty_print()


# ============================================================
# Leaves
# ============================================================

class Variable(Expression):
    """A named variable, e.g. x. Never simplifies."""

    __slots__ = ('_name',)

    def __init__(self, name: str):
        if not isinstance(name, str):
            raise TypeError(f"Variable name must be a string, got {type(name).__name__}")
        if not name:
            raise ValueError("Variable name must not be empty")
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def pretty_print(self) -> str:
        return self._name

    def simplify(self, trace=None) -> Expression:
        return self

    def __repr__(self) -> str:
        return f"Variable({self._name!r})"


class Constant(Expression):
    """A floating-point constant. NaN and infinities are allowed."""

    __slots__ = ('_value',)

    def __init__(self, value: NumericType):
        if not isinstance(value, (int, float)):
            raise TypeError(f"Constant value must be a number, got {type(value).__name__}")
        self._value = float(value)

    @property
    def value(self) -> float:
        return self._value

    def pretty_print(self) -> str:
        return format_number(self._value)

    def simplify(self, trace=None) -> Expression:
        return self

    def __repr__(self) -> str:
        return f"Constant({self._value!r})"


class CoefficientVariable(Expression):
    """
    A coefficient fused onto a variable, e.g. 3.0x.

    Produced by multiplying a variable by a constant. It is a leaf: it
    never simplifies further and does not combine with other terms.
    """

    __slots__ = ('_coefficient', '_variable')

    def __init__(self, coefficient: NumericType, variable: Variable):
        if not isinstance(variable, Variable):
            raise TypeError("CoefficientVariable requires a Variable")
        self._coefficient = float(coefficient)
        self._variable = variable

    @property
    def coefficient(self) -> float:
        return self._coefficient

    @property
    def variable(self) -> Variable:
        return self._variable

    def pretty_print(self) -> str:
        return format_number(self._coefficient) + self._variable.pretty_print()

    def simplify(self, trace=None) -> Expression:
        return self

    def __repr__(self) -> str:
        return f"CoefficientVariable({self._coefficient!r}, {self._variable!r})"


# ============================================================
# Binary operators
# ============================================================

class BinaryOperation(Expression):
    """A composite node owning a left and a right operand."""

    __slots__ = ('_left', '_right')

    OPERATOR = None

    def __init__(self, left: Expression, right: Expression):
        if not isinstance(left, Expression) or not isinstance(right, Expression):
            raise TypeError(f"{type(self).__name__} operands must be expressions")
        self._left = left
        self._right = right

    @property
    def left(self) -> Expression:
        return self._left

    @property
    def right(self) -> Expression:
        return self._right

    @property
    def children(self) -> Tuple[Expression, ...]:
        return (self._left, self._right)

    def pretty_print(self) -> str:
        return f"{self._left.pretty_print()} {self.OPERATOR} {self._right.pretty_print()}"

    def _rebuild(self, left: Expression, right: Expression) -> Expression:
        """Same operator over new operands; self when the operands are unchanged."""
        if left is self._left and right is self._right:
            return self
        return type(self)(left, right)

    def _rewritten(self, rule: str, left: Expression, right: Expression,
                   result: Expression, trace: Optional[SimplifyTrace]) -> Expression:
        """Report that rule rewrote this node (over left, right) into result."""
        before = self._rebuild(left, right)
        if _logger.isEnabledFor(logging.DEBUG):
            _logger.debug("%s: %s -> %s", rule, before.pretty_print(), result.pretty_print())
        if trace is not None:
            trace.add_step(SimplifyStep(rule, before, result))
        return result

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._left!r}, {self._right!r})"


class Addition(BinaryOperation):
    """left + right"""

    __slots__ = ()

    OPERATOR = "+"

    def simplify(self, trace=None) -> Expression:
        left = self._left.simplify(trace)
        right = self._right.simplify(trace)

        # c1 * t + c2 * t -> (c1 + c2) * t
        if (isinstance(left, Multiplication) and isinstance(right, Multiplication)
                and isinstance(left.left, Constant) and isinstance(right.left, Constant)
                and left.right.pretty_print() == right.right.pretty_print()):
            fused = Multiplication(Constant(left.left.value + right.left.value), left.right)
            return self._rewritten("add-like-terms", left, right, fused, trace).simplify(trace)

        if isinstance(left, Constant) and isinstance(right, Constant):
            return self._rewritten("add-constants", left, right,
                                   Constant(left.value + right.value), trace)

        # Not re-simplified: x + x stays 2.0 * x
        if left.pretty_print() == right.pretty_print():
            return self._rewritten("add-same", left, right,
                                   Multiplication(Constant(2.0), left), trace)

        if _is_constant(left, 0.0):
            return self._rewritten("add-zero", left, right, right, trace)
        if _is_constant(right, 0.0):
            return self._rewritten("add-zero", left, right, left, trace)

        return self._rebuild(left, right)


class Multiplication(BinaryOperation):
    """
    left * right

    A constant times a variable prints in coefficient form (2.0x), the same
    way a CoefficientVariable does.
    """

    __slots__ = ()

    OPERATOR = "*"

    def pretty_print(self) -> str:
        if isinstance(self._left, Constant) and isinstance(self._right, Variable):
            return self._left.pretty_print() + self._right.pretty_print()
        return super().pretty_print()

    def simplify(self, trace=None) -> Expression:
        left = self._left.simplify(trace)
        right = self._right.simplify(trace)

        if (isinstance(left, Variable) and isinstance(right, Variable)
                and left.pretty_print() == right.pretty_print()):
            square = Exponentiation(left, Constant(2.0))
            return self._rewritten("mul-square", left, right, square, trace).simplify(trace)

        if isinstance(left, Constant) and isinstance(right, Constant):
            return self._rewritten("mul-constants", left, right,
                                   Constant(left.value * right.value), trace)

        if _is_constant(left, 0.0) or _is_constant(right, 0.0):
            return self._rewritten("mul-zero", left, right, Constant(0.0), trace)

        if _is_constant(left, 1.0):
            return self._rewritten("mul-one", left, right, right, trace)
        if _is_constant(right, 1.0):
            return self._rewritten("mul-one", left, right, left, trace)

        if isinstance(left, Constant) and isinstance(right, Variable):
            return self._rewritten("mul-coefficient", left, right,
                                   CoefficientVariable(left.value, right), trace)
        if isinstance(left, Variable) and isinstance(right, Constant):
            return self._rewritten("mul-coefficient", left, right,
                                   CoefficientVariable(right.value, left), trace)

        return self._rebuild(left, right)


class Division(BinaryOperation):
    """numerator / denominator"""

    __slots__ = ()

    OPERATOR = "/"

    @property
    def numerator(self) -> Expression:
        return self._left

    @property
    def denominator(self) -> Expression:
        return self._right

    def simplify(self, trace=None) -> Expression:
        numerator = self._left.simplify(trace)
        denominator = self._right.simplify(trace)

        # Fires for 0 / 0 as well; a zero denominator is not special-cased.
        if _is_constant(numerator, 0.0):
            return self._rewritten("div-zero-numerator", numerator, denominator,
                                   Constant(0.0), trace)

        if _is_constant(denominator, 1.0):
            return self._rewritten("div-one", numerator, denominator, numerator, trace)

        if numerator.pretty_print() == denominator.pretty_print():
            return self._rewritten("div-same", numerator, denominator, Constant(1.0), trace)

        return self._rebuild(numerator, denominator)


class Exponentiation(BinaryOperation):
    """base ^ exponent"""

    __slots__ = ()

    OPERATOR = "^"

    @property
    def base(self) -> Expression:
        return self._left

    @property
    def exponent(self) -> Expression:
        return self._right

    def simplify(self, trace=None) -> Expression:
        base = self._left.simplify(trace)
        exponent = self._right.simplify(trace)

        if _is_constant(base, 1.0):
            return self._rewritten("pow-one-base", base, exponent, Constant(1.0), trace)

        if _is_constant(exponent, 0.0):
            return self._rewritten("pow-zero-exponent", base, exponent, Constant(1.0), trace)

        # A symbolic exponent on a zero base is left alone.
        if _is_constant(base, 0.0) and isinstance(exponent, Constant):
            if exponent.value > 0.0:
                return self._rewritten("pow-zero-base", base, exponent, Constant(0.0), trace)
            if exponent.value < 0.0:
                _logger.debug("pow-zero-base: 0.0 ^ %s is undefined", exponent.pretty_print())
                raise UndefinedOperationError(
                    f"zero raised to a negative power is undefined: "
                    f"{base.pretty_print()} ^ {exponent.pretty_print()}")

        if _is_constant(exponent, 1.0):
            return self._rewritten("pow-one-exponent", base, exponent, base, trace)

        return self._rebuild(base, exponent)


# ============================================================
# Entry point
# ============================================================

def simplify(expr: Expression, trace: bool = False):
    """
    Simplify an expression tree.

    Args:
        expr: Expression to simplify
        trace: If True, also return the SimplifyTrace of fired rules

    Returns:
        The simplified expression, or (expression, trace) if trace=True.

    Raises:
        UndefinedOperationError: If the tree contains 0 raised to a
            negative constant power.

    Example:
        result, steps = simplify(E.add("x", 0), trace=True)
        steps.rules_applied()  # => ["add-zero"]
    """
    if not isinstance(expr, Expression):
        raise TypeError(f"Cannot simplify {type(expr).__name__}: not an expression")
    if not trace:
        return expr.simplify()

    record = SimplifyTrace()
    record.initial = expr
    record.final = expr.simplify(record)
    return record.final, record
