"""
SIMPLEXPR - Simplifying EXPRessions

Arithmetic expression trees with one-pass, bottom-up algebraic
simplification.

Quick Start:
    from simplexpr import E

    expr = E.add(E.mul(7, "x"), E.mul(9, "y"))
    expr.simplify().pretty_print()          # => "7.0x + 9.0y"

    E.add("x", "x").simplify().pretty_print()   # => "2.0x"
    E.div("y", "y").simplify().pretty_print()   # => "1.0"

Node kinds:
    Variable, Constant, CoefficientVariable        - leaves, never simplify
    Addition, Multiplication, Division,
    Exponentiation                                 - binary operators

Rules (checked in this order, on already-simplified operands):
    +   like terms (c1*t + c2*t), constants, equal operands (2.0 * t), zero
    *   equal variables (v ^ 2.0), constants, zero, one, constant * variable
    /   zero numerator, unit denominator, equal operands
    ^   unit base, zero exponent, zero base, unit exponent

Tracing:
    result, trace = simplify(expr, trace=True)
    print(trace.format("chain"))

Errors:
    0 raised to a negative constant power raises UndefinedOperationError.
"""

__version__ = "0.1.0"

# Expression nodes and simplification
from .expression import (
    Expression,
    Variable,
    Constant,
    CoefficientVariable,
    BinaryOperation,
    Addition,
    Multiplication,
    Division,
    Exponentiation,
    UndefinedOperationError,
    NumericType,
    format_number,
    simplify,
)

# Construction
from .factory import (
    ExpressionFactory,
    MinimalExpressionFactory,
    OperandType,
    E,
)

# Tracing
from .trace import (
    SimplifyStep,
    SimplifyTrace,
)

# Public API
__all__ = [
    # Version
    "__version__",
    # Nodes
    "Expression",
    "Variable",
    "Constant",
    "CoefficientVariable",
    "BinaryOperation",
    "Addition",
    "Multiplication",
    "Division",
    "Exponentiation",
    # Errors
    "UndefinedOperationError",
    # Types
    "NumericType",
    "OperandType",
    # Simplification
    "simplify",
    "format_number",
    # Construction
    "ExpressionFactory",
    "MinimalExpressionFactory",
    "E",
    # Tracing
    "SimplifyStep",
    "SimplifyTrace",
]
