"""Tests for the composite filter query state."""

import threading
from unittest.mock import Mock

import pytest
from pydantic import ValidationError

from filter_dsl.builder import and_, component, field, value
from filter_dsl.compare import compare_conditions
from filter_dsl.query import CompositeFilter, QueryConfig


@pytest.fixture
def composite_filter():
    return CompositeFilter(QueryConfig(page_size=20, offset=40, sort_fields=["name"]))


def test_query_config_defaults():
    """Should start without condition at the first page."""
    config = QueryConfig()
    assert config.condition is None
    assert config.offset == 0
    assert config.page_size == 10
    assert config.sort_fields == []


def test_query_config_validation():
    with pytest.raises(ValidationError):
        QueryConfig(offset=-1)
    with pytest.raises(ValidationError):
        QueryConfig(page_size=-5)


def test_update_changes_condition(composite_filter):
    """Should merge the component condition and reset the offset."""
    cond = field("age").gte(value("Int", 18))
    assert composite_filter.update("ageFilter", cond) is True

    config = composite_filter.query_config
    assert config.offset == 0
    assert config.page_size == 20
    assert config.sort_fields == ["name"]
    assert compare_conditions(composite_filter.get_component_condition("ageFilter"), cond)


def test_update_unchanged_condition(composite_filter):
    """Should report no change and keep the same condition object."""
    composite_filter.update("ageFilter", field("age").gte(value("Int", 18)))
    before = composite_filter.condition

    assert composite_filter.update("ageFilter", field("age").gte(value("Int", 18))) is False
    assert composite_filter.condition is before


def test_update_without_compare(composite_filter):
    composite_filter.update("ageFilter", field("age").gte(value("Int", 18)))
    before = composite_filter.condition

    assert composite_filter.update("ageFilter", field("age").gte(value("Int", 18)), compare_update=False) is True
    assert composite_filter.condition is not before


def test_listeners_called_on_change(composite_filter):
    """Should notify listeners only when the condition changed."""
    listener = Mock()
    unsubscribe = composite_filter.subscribe(listener)

    composite_filter.update("a", field("x").is_null())
    composite_filter.update("a", field("x").is_null())
    assert listener.call_count == 1
    assert listener.call_args[0][0] is composite_filter.query_config

    unsubscribe()
    composite_filter.update("a", None)
    assert listener.call_count == 1


def test_empty_component_condition_is_no_change(composite_filter):
    """Should treat an empty nested condition like no condition."""
    composite_filter.update("nested", None)
    listener = Mock()
    composite_filter.subscribe(listener)

    assert composite_filter.update("nested", and_(component(None, None))) is False
    listener.assert_not_called()


def test_get_component_condition_missing(composite_filter):
    assert composite_filter.get_component_condition("missing") is None
    assert composite_filter.get_component_node("missing") is None


def test_reset(composite_filter):
    """Should clear the condition and notify listeners once."""
    listener = Mock()
    composite_filter.subscribe(listener)

    composite_filter.reset()
    listener.assert_not_called()

    composite_filter.update("a", field("x").is_null())
    composite_filter.reset()
    assert composite_filter.condition is None
    assert listener.call_count == 2


def test_to_wire(composite_filter):
    composite_filter.update("a", field("x").eq(value("Int", 3)))
    wire = composite_filter.to_wire()

    assert wire["offset"] == 0
    assert wire["pageSize"] == 20
    assert wire["sortFields"] == ["name"]
    assert wire["condition"]["operands"][0]["condition"]["operands"][1]["value"] == 3


def test_concurrent_updates_are_not_lost():
    """Should keep every component when many threads update concurrently."""
    composite_filter = CompositeFilter()

    def worker(index):
        composite_filter.update(f"component-{index}", field(f"field{index}").is_not_null())

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(20)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    ids = {marker.id for marker in composite_filter.condition.operands}
    assert ids == {f"component-{i}" for i in range(20)}


def test_notifications_follow_merge_order():
    """Should deliver the latest config last when a second update races the first notification."""
    composite_filter = CompositeFilter()
    seen = []
    other_thread = []

    def listener(config):
        if not other_thread:
            # start a competing update while the first notification is still running
            thread = threading.Thread(target=composite_filter.update, args=("b", field("y").is_null()))
            other_thread.append(thread)
            thread.start()
            thread.join(timeout=0.2)
        seen.append([marker.id for marker in config.condition.operands])

    composite_filter.subscribe(listener)
    composite_filter.update("a", field("x").is_null())
    other_thread[0].join()

    current = [marker.id for marker in composite_filter.condition.operands]
    assert seen == [["a"], ["a", "b"]]
    assert seen[-1] == current


def test_listener_can_update_from_notification():
    """Should allow a listener to merge another component condition on the same thread."""
    composite_filter = CompositeFilter()

    def listener(config):
        if composite_filter.get_component_node("follow-up") is None:
            composite_filter.update("follow-up", field("z").is_not_null())

    composite_filter.subscribe(listener)
    composite_filter.update("a", field("x").is_null())

    assert [marker.id for marker in composite_filter.condition.operands] == ["a", "follow-up"]
