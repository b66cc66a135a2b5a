"""Tests for structural comparison and simplification of condition trees."""

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

from filter_dsl.builder import and_, component, field, not_, or_, value, values
from filter_dsl.compare import compare_conditions
from filter_dsl.simplify import simplify_condition


def test_none_equals_none():
    assert compare_conditions(None, None)
    assert compare_conditions(None, None, True)


def test_none_and_condition():
    """Should only equal None when the other side simplifies to None and empty is treated as equal."""
    empty = and_(component(None, None), component(None, None))
    assert not compare_conditions(None, empty)
    assert compare_conditions(None, empty, True)
    assert compare_conditions(empty, None, True)
    assert not compare_conditions(None, field("x").is_null(), True)


def test_equal_conditions():
    """Should consider independently built trees with the same structure equal."""
    a = and_(field("age").gte(value("Int", 18)), field("name").eq(value("String", "Bob")))
    b = and_(field("age").gte(value("Int", 18)), field("name").eq(value("String", "Bob")))
    assert a is not b
    assert compare_conditions(a, b)


def test_operand_order_matters():
    """Should compare condition operands in order."""
    x = field("x").is_null()
    y = field("y").is_null()
    assert not compare_conditions(and_(x, y), and_(y, x))


def test_different_operator_or_operand_count():
    x = field("x").is_null()
    y = field("y").is_null()
    assert not compare_conditions(and_(x, y), or_(x, y))
    assert not compare_conditions(and_(x, y), and_(x))
    assert not compare_conditions(not_(x), x)


def test_different_node_kinds():
    """Should never consider nodes of different kinds equal."""
    assert not compare_conditions(field("x"), value("String", "x"))
    assert not compare_conditions(value("String", "x"), values("String", "x"))
    assert not compare_conditions(component("x"), field("x"))


def test_field_names():
    assert compare_conditions(field("owner.name"), field("owner.name"))
    assert not compare_conditions(field("owner.name"), field("owner.id"))


def test_values_order_sensitive():
    """Should compare value lists in order, not as sets."""
    assert not compare_conditions(values("String", "a", "b"), values("String", "b", "a"), False)
    assert compare_conditions(values("String", "a", "b"), values("String", "a", "b"))
    assert not compare_conditions(values("String", "a"), values("String", "a", "b"))


def test_value_scalar_type_must_match():
    assert not compare_conditions(value("Int", 1), value("Long", 1))


def test_value_equality_uses_scalar_type():
    """Should compare values with the semantics of their scalar type."""
    assert compare_conditions(value("BigDecimal", Decimal("1.0")), value("BigDecimal", Decimal("1.00")))
    assert compare_conditions(value("BigDecimal", "2.50"), value("BigDecimal", Decimal("2.5")))
    assert compare_conditions(value("Date", date(2024, 3, 1)), value("Date", "2024-03-01"))

    utc = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)
    cet = datetime(2024, 3, 1, 13, 0, tzinfo=timezone(timedelta(hours=1)))
    assert compare_conditions(value("Timestamp", utc), value("Timestamp", cet))
    assert not compare_conditions(value("Timestamp", utc), value("Timestamp", utc + timedelta(seconds=1)))


def test_numeric_value_edge_cases():
    """Should treat NaN floats as equal and never match an integer against a boolean."""
    assert compare_conditions(value("Float", float("nan")), value("Float", float("nan")))
    assert not compare_conditions(value("Int", 1), value("Int", True))


def test_values_equality_uses_scalar_type():
    assert compare_conditions(values("BigDecimal", Decimal("1.0"), "2"), values("BigDecimal", "1.00", Decimal("2.0")))


def test_unregistered_scalar_type_uses_plain_equality():
    assert compare_conditions(value("Color", "red"), value("Color", "red"))
    assert not compare_conditions(value("Color", "red"), value("Color", "blue"))


def test_invalid_scalar_value_uses_plain_equality():
    assert compare_conditions(value("Date", "not a date"), value("Date", "not a date"))
    assert not compare_conditions(value("Date", "not a date"), value("Date", "2024-03-01"))


def test_components():
    """Should compare component id and condition."""
    cond = field("x").is_null()
    assert compare_conditions(component("a", cond), component("a", field("x").is_null()))
    assert not compare_conditions(component("a", cond), component("b", cond))
    assert not compare_conditions(component("a", cond), component("a", None))


def test_component_empty_condition():
    """Should pass the empty flag down into component conditions."""
    empty = and_(component(None, None))
    assert not compare_conditions(component("a", None), component("a", empty))
    assert compare_conditions(component("a", None), component("a", empty), True)


class TestSimplifyCondition:
    """Test cases for simplify_condition."""

    def test_and_of_anonymous_components(self):
        """Should simplify an "and" of anonymous components to None."""
        assert simplify_condition(and_(component(None, None), component(None, None))) is None

    def test_anonymous_components_with_conditions(self):
        """Should only look at component ids."""
        assert simplify_condition(and_(component(None, field("x").is_null()))) is None

    def test_empty_and(self):
        assert simplify_condition(and_()) is None

    def test_named_component_is_kept(self):
        cond = and_(component(None, None), component("a", None))
        assert simplify_condition(cond) is cond

    def test_non_component_operand_is_kept(self):
        cond = and_(component(None, None), field("x").is_null())
        assert simplify_condition(cond) is cond

    def test_or_is_kept(self):
        cond = or_(component(None, None))
        assert simplify_condition(cond) is cond

    def test_other_nodes_are_kept(self):
        cond = field("x").is_null()
        assert simplify_condition(cond) is cond
        assert simplify_condition(None) is None
        marker = component(None, None)
        assert simplify_condition(marker) is marker

    def test_nested_condition_is_not_simplified(self):
        """Should only inspect the top level."""
        cond = and_(or_(component(None, None)))
        assert simplify_condition(cond) is cond
