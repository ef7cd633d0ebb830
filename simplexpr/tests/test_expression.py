"""Tests for expression nodes: construction, printing and equality."""

import math
import pytest
from simplexpr import (
    Variable, Constant, CoefficientVariable,
    Addition, Multiplication, Division, Exponentiation,
    format_number,
)


class TestFormatNumber:
    """Tests for constant rendering."""

    def test_whole_numbers_keep_decimal_point(self):
        """Whole floats print with a trailing .0."""
        assert format_number(7.0) == "7.0"
        assert format_number(7) == "7.0"
        assert format_number(-2) == "-2.0"

    def test_fractions(self):
        """Fractions print in shortest round-trip form."""
        assert format_number(0.5) == "0.5"
        assert format_number(-2.25) == "-2.25"

    def test_special_values_are_distinct(self):
        """NaN and infinities keep their own spelling."""
        assert format_number(float("nan")) == "nan"
        assert format_number(float("inf")) == "inf"
        assert format_number(float("-inf")) == "-inf"


class TestLeaves:
    """Tests for Variable, Constant and CoefficientVariable."""

    def test_variable(self):
        """Variable prints its name."""
        x = Variable("x")
        assert x.name == "x"
        assert x.pretty_print() == "x"
        assert x.children == ()

    def test_constant(self):
        """Constant stores a float and prints it."""
        c = Constant(3)
        assert c.value == 3.0
        assert isinstance(c.value, float)
        assert c.pretty_print() == "3.0"

    def test_constant_special_values(self):
        """Constants may hold NaN and infinities."""
        assert math.isnan(Constant(float("nan")).value)
        assert Constant(float("inf")).pretty_print() == "inf"

    def test_coefficient_variable(self):
        """CoefficientVariable prints coefficient and variable side by side."""
        term = CoefficientVariable(3, Variable("x"))
        assert term.coefficient == 3.0
        assert term.variable == Variable("x")
        assert term.pretty_print() == "3.0x"

    def test_leaf_simplify_is_identity(self):
        """Leaves simplify to themselves."""
        for leaf in [Variable("x"), Constant(0.0), Constant(float("nan")),
                     CoefficientVariable(2.5, Variable("y"))]:
            assert leaf.simplify() is leaf


class TestConstructionErrors:
    """Tests for malformed construction."""

    def test_empty_variable_name(self):
        """Variables need a name."""
        with pytest.raises(ValueError):
            Variable("")

    def test_non_string_variable_name(self):
        """Variable names are strings."""
        with pytest.raises(TypeError):
            Variable(1)

    def test_non_numeric_constant(self):
        """Constants are numbers, not numeric strings."""
        with pytest.raises(TypeError):
            Constant("1.0")
        with pytest.raises(TypeError):
            Constant(None)

    def test_coefficient_needs_variable(self):
        """A coefficient can only be fused onto a Variable."""
        with pytest.raises(TypeError):
            CoefficientVariable(2, Constant(1))

    def test_operands_must_be_expressions(self):
        """Composite nodes reject non-expression operands."""
        with pytest.raises(TypeError):
            Addition("x", Variable("y"))
        with pytest.raises(TypeError):
            Division(Variable("x"), 2)


class TestPrettyPrint:
    """Tests for rendering composite nodes."""

    def setup_method(self):
        self.x = Variable("x")
        self.y = Variable("y")

    def test_infix_operators(self):
        """Operators print padded with spaces."""
        assert Addition(self.x, self.y).pretty_print() == "x + y"
        assert Multiplication(self.x, self.y).pretty_print() == "x * y"
        assert Division(self.x, self.y).pretty_print() == "x / y"
        assert Exponentiation(self.x, self.y).pretty_print() == "x ^ y"

    def test_constant_times_variable(self):
        """A constant on the left of a variable prints as a coefficient."""
        assert Multiplication(Constant(2), self.x).pretty_print() == "2.0x"
        assert Multiplication(self.x, Constant(2)).pretty_print() == "x * 2.0"
        assert Multiplication(Constant(2), Constant(3)).pretty_print() == "2.0 * 3.0"

    def test_nested(self):
        """Nested nodes print without parentheses."""
        expr = Division(Addition(self.x, Constant(1)),
                        Exponentiation(self.y, Constant(2)))
        assert expr.pretty_print() == "x + 1.0 / y ^ 2.0"

    def test_str_is_pretty_print(self):
        """str() gives the same text."""
        expr = Addition(self.x, Constant(1))
        assert str(expr) == expr.pretty_print()

    def test_repr(self):
        """repr shows the node structure."""
        expr = Addition(self.x, Constant(1))
        assert repr(expr) == "Addition(Variable('x'), Constant(1.0))"

    def test_named_operands(self):
        """Division and Exponentiation name their operands."""
        div = Division(self.x, self.y)
        assert div.numerator is self.x
        assert div.denominator is self.y
        power = Exponentiation(self.x, self.y)
        assert power.base is self.x
        assert power.exponent is self.y
        assert power.children == (self.x, self.y)


class TestEquality:
    """Tests for structural equality."""

    def test_same_structure_is_equal(self):
        """Separately built identical trees are equal."""
        a = Addition(Variable("x"), Constant(1))
        b = Addition(Variable("x"), Constant(1))
        assert a == b
        assert hash(a) == hash(b)

    def test_different_structure(self):
        """Different trees are not equal."""
        assert Addition(Variable("x"), Constant(1)) != Addition(Constant(1), Variable("x"))
        assert Variable("x") != Variable("y")

    def test_different_kinds_are_not_equal(self):
        """Equal text is not enough across node kinds."""
        assert Multiplication(Constant(2), Variable("x")) != CoefficientVariable(2, Variable("x"))
        assert Constant(1) != Variable("x")

    def test_nan_constants_compare_by_text(self):
        """NaN constants are equal to each other."""
        assert Constant(float("nan")) == Constant(float("nan"))

    def test_usable_in_sets(self):
        """Expressions are hashable."""
        terms = {Variable("x"), Variable("x"), Variable("y")}
        assert len(terms) == 2


class TestImmutability:
    """Tests that nodes cannot be changed."""

    def test_properties_are_read_only(self):
        """Node parts cannot be reassigned."""
        x = Variable("x")
        with pytest.raises(AttributeError):
            x.name = "y"
        expr = Addition(x, Constant(1))
        with pytest.raises(AttributeError):
            expr.left = Constant(2)

    def test_no_new_attributes(self):
        """Nodes carry no instance dictionary."""
        with pytest.raises(AttributeError):
            Constant(1).extra = True

    def test_simplify_leaves_input_untouched(self):
        """Simplifying does not change the input tree."""
        left = Multiplication(Variable("x"), Constant(1))
        expr = Addition(left, Constant(0))
        before = expr.pretty_print()

        assert expr.simplify().pretty_print() == "x"
        assert expr.pretty_print() == before
        assert expr.left is left
        assert expr.simplify().pretty_print() == "x"
