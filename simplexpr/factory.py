"""
Expression construction for SIMPLEXPR

Callers build trees through a factory instead of naming node classes, so
an alternative node representation only needs a factory of its own:

    factory = MinimalExpressionFactory()
    expr = factory.create_addition(
        factory.create_multiplication(factory.create_constant(7), factory.create_variable("x")),
        factory.create_multiplication(factory.create_constant(9), factory.create_variable("y")),
    )

The E builder wraps a factory with shorter names and accepts plain strings
and numbers as leaves:

    from simplexpr import E

    expr = E.add(E.mul(7, "x"), E.mul(9, "y"))
"""

from typing import Tuple, Union

from .expression import (
    Expression, Variable, Constant, CoefficientVariable,
    Addition, Multiplication, Division, Exponentiation, NumericType,
)

OperandType = Union[Expression, str, int, float]


class ExpressionFactory:
    """Interface for building each kind of expression node."""

    def create_variable(self, name: str) -> Expression:
        raise NotImplementedError

    def create_constant(self, value: NumericType) -> Expression:
        raise NotImplementedError

    def create_addition(self, left: Expression, right: Expression) -> Expression:
        raise NotImplementedError

    def create_multiplication(self, left: Expression, right: Expression) -> Expression:
        raise NotImplementedError

    def create_division(self, numerator: Expression, denominator: Expression) -> Expression:
        raise NotImplementedError

    def create_exponentiation(self, base: Expression, exponent: Expression) -> Expression:
        raise NotImplementedError


class MinimalExpressionFactory(ExpressionFactory):
    """Factory building the node classes of simplexpr.expression."""

    def create_variable(self, name: str) -> Expression:
        return Variable(name)

    def create_constant(self, value: NumericType) -> Expression:
        return Constant(value)

    def create_coefficient_variable(self, coefficient: NumericType,
                                    variable: Variable) -> Expression:
        return CoefficientVariable(coefficient, variable)

    def create_addition(self, left: Expression, right: Expression) -> Expression:
        return Addition(left, right)

    def create_multiplication(self, left: Expression, right: Expression) -> Expression:
        return Multiplication(left, right)

    def create_division(self, numerator: Expression, denominator: Expression) -> Expression:
        return Division(numerator, denominator)

    def create_exponentiation(self, base: Expression, exponent: Expression) -> Expression:
        return Exponentiation(base, exponent)


# ============================================================
# Expression Builder
# ============================================================

class _ExprBuilder:
    """
    Expression builder for SIMPLEXPR.

    Operands may be expressions, strings (variable names) or numbers
    (constants). Strings are never parsed: "x + 1" is a variable name.

    Examples:
        from simplexpr import E

        x, y = E.vars("x", "y")
        E.add(E.mul(2, x), y)          # 2.0x + y
        E.pow("z", 2)                  # z ^ 2.0
        E.div(E.add("x", 1), "x")      # x + 1.0 / x

        # Build with another factory
        E.using(my_factory).add("x", 0)
    """

    def __init__(self, factory: ExpressionFactory = None):
        self.factory = factory if factory is not None else MinimalExpressionFactory()

    def using(self, factory: ExpressionFactory) -> "_ExprBuilder":
        """Return a builder constructing nodes through another factory."""
        return _ExprBuilder(factory)

    def _operand(self, value: OperandType) -> Expression:
        if isinstance(value, Expression):
            return value
        if isinstance(value, str):
            return self.factory.create_variable(value)
        if isinstance(value, (int, float)):
            return self.factory.create_constant(value)
        raise TypeError(f"Cannot build an expression from {type(value).__name__}")

    def var(self, name: str) -> Expression:
        """
        Create a variable.

        Example:
            E.var("x") -> Variable('x')
        """
        return self.factory.create_variable(name)

    def vars(self, *names: str) -> Tuple[Expression, ...]:
        """
        Create multiple variables for unpacking.

        Example:
            x, y, z = E.vars("x", "y", "z")
        """
        return tuple(self.factory.create_variable(name) for name in names)

    def const(self, value: NumericType) -> Expression:
        """
        Create a constant.

        Example:
            E.const(5) -> Constant(5.0)
        """
        return self.factory.create_constant(value)

    def add(self, left: OperandType, right: OperandType) -> Expression:
        return self.factory.create_addition(self._operand(left), self._operand(right))

    def mul(self, left: OperandType, right: OperandType) -> Expression:
        return self.factory.create_multiplication(self._operand(left), self._operand(right))

    def div(self, numerator: OperandType, denominator: OperandType) -> Expression:
        return self.factory.create_division(self._operand(numerator), self._operand(denominator))

    def pow(self, base: OperandType, exponent: OperandType) -> Expression:
        return self.factory.create_exponentiation(self._operand(base), self._operand(exponent))

    def __repr__(self) -> str:
        return "E (expression builder)"


# Singleton instance
E = _ExprBuilder()
