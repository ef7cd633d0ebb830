#!/usr/bin/env python3
"""
SIMPLEXPR Feature Demonstration

This script demonstrates the major features of the SIMPLEXPR library.
"""

from simplexpr import (
    E, MinimalExpressionFactory, UndefinedOperationError, simplify,
)


def section(title: str):
    """Print a section header."""
    print(f"\n{'='*60}")
    print(f" {title}")
    print('='*60)


def show(expr):
    """Print an expression next to its simplified form."""
    try:
        result = simplify(expr).pretty_print()
    except UndefinedOperationError as e:
        result = f"error: {e}"
    print(f"  {expr.pretty_print()} => {result}")


def demo_factory():
    """Demonstrate building trees through a factory."""
    section("Expression Factory")

    factory = MinimalExpressionFactory()
    x = factory.create_variable("x")
    y = factory.create_variable("y")

    show(factory.create_addition(
        factory.create_multiplication(factory.create_constant(7), x),
        factory.create_multiplication(factory.create_constant(9), y)))
    show(factory.create_division(y, y))


def demo_rules():
    """Demonstrate the rules of each operator."""
    section("Simplification Rules")

    x, y, z = E.vars("x", "y", "z")

    examples = [
        E.add(x, x),
        E.add(0, E.div(x, y)),
        E.add(E.mul(2, E.pow(x, 2)), E.mul(3, E.pow(x, 2))),
        E.mul(z, z),
        E.mul(1, E.add(x, y)),
        E.mul(0, E.pow(z, y)),
        E.div(E.add(x, 0), 1),
        E.pow(E.add(x, y), 0),
        E.pow(E.mul(x, 1), 1),
    ]

    for expr in examples:
        show(expr)


def demo_limits():
    """Demonstrate what a single pass does not do."""
    section("Limits of One Pass")

    show(E.add(E.mul(4, "x"), "x"))
    show(E.add(E.mul(3, "x"), E.mul(5, "x")))
    show(E.mul(E.mul(3, "x"), E.mul(2, "x")))
    show(E.div(0, 0))


def demo_errors():
    """Demonstrate the undefined-operation error."""
    section("Undefined Operations")

    show(E.pow(0, -2))
    show(E.pow(0, "n"))


def demo_tracing():
    """Demonstrate trace formatting."""
    section("Tracing")

    expr = E.add(E.mul("x", 1), 0)
    result, trace = simplify(expr, trace=True)

    print("  Verbose format (default):")
    for line in str(trace).split('\n'):
        print(f"    {line}")

    print(f"\n  Compact: {trace.format('compact')}")
    print(f"  Rules: {trace.format('rules')}")
    print(f"  Counts: {trace.rule_counts()}")


if __name__ == "__main__":
    demo_factory()
    demo_rules()
    demo_limits()
    demo_errors()
    demo_tracing()
