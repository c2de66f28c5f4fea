"""Tests for the node contract and store helpers."""

from collections import OrderedDict

import pytest

from nodeflow import (
    FunctionNode,
    NodeBase,
    NodeExecutionError,
    as_node,
    copy_store,
    create_node,
    node,
)

from conftest import always_fail, upper_summary


class AddGreeting(NodeBase):
    async def run(self, store):
        store["greeting"] = f"hello {store['who']}"
        return store


def test_decorator_wraps_function():
    assert isinstance(upper_summary, FunctionNode)
    assert upper_summary.name == "upper_summary"


def test_decorator_with_name():
    @node(name="custom")
    async def step(store):
        return store

    assert step.name == "custom"


def test_create_node_matches_decorator():
    async def step(store):
        return store

    wrapped = create_node(step)
    assert isinstance(wrapped, FunctionNode)
    assert wrapped.name == "step"
    assert create_node(step, name="renamed").name == "renamed"


def test_subclass_name_is_snake_case():
    assert AddGreeting().name == "add_greeting"


def test_as_node():
    greeting = AddGreeting()
    assert as_node(greeting) is greeting
    assert isinstance(as_node(lambda store: store), FunctionNode)
    with pytest.raises(TypeError):
        as_node(42)


@pytest.mark.asyncio
async def test_subclass_runs():
    result = await AddGreeting()({"who": "world"})
    assert result == {"who": "world", "greeting": "hello world"}


@pytest.mark.asyncio
async def test_node_may_return_new_store():
    @node
    async def fresh(store):
        return {"copied": store["value"]}

    original = {"value": 1}
    result = await fresh(original)
    assert result == {"copied": 1}
    assert original == {"value": 1}


@pytest.mark.asyncio
async def test_sync_function_node():
    def set_flag(store):
        store["flag"] = True
        return store

    result = await create_node(set_flag)({})
    assert result == {"flag": True}


@pytest.mark.asyncio
async def test_failure_wrapped_with_node_name():
    with pytest.raises(NodeExecutionError) as exc_info:
        await always_fail({})

    err = exc_info.value
    assert err.node_name == "always_fail"
    assert isinstance(err.cause, ValueError)
    assert err.__cause__ is err.cause
    assert "always fails" in str(err)


@pytest.mark.asyncio
async def test_non_mapping_result_rejected():
    @node
    async def no_return(store):
        store["x"] = 1

    with pytest.raises(NodeExecutionError) as exc_info:
        await no_return({})
    assert isinstance(exc_info.value.cause, TypeError)


@pytest.mark.asyncio
async def test_nested_failure_not_rewrapped():
    @node
    async def outer(store):
        return await always_fail(store)

    with pytest.raises(NodeExecutionError) as exc_info:
        await outer({})
    assert exc_info.value.node_name == "always_fail"


def test_copy_store_is_shallow():
    items = [1]
    store = {"items": items, "n": 1}
    copied = copy_store(store)

    copied["n"] = 2
    assert store["n"] == 1
    assert copied["items"] is items


def test_copy_store_keeps_mapping_type():
    store = OrderedDict(a=1)
    copied = copy_store(store)
    assert type(copied) is OrderedDict
    assert copied == store
    assert copied is not store
