"""Tests for Workflow construction and traversal."""

import pytest

from nodeflow import CANCEL, GraphConfigurationError, NodeExecutionError, Workflow, node

from conftest import always_fail


def _recorder(name: str, calls: list[str]):
    @node(name=name)
    async def step(store):
        calls.append(name)
        store[name] = store.get(name, 0) + 1
        store["last"] = name
        return store

    return step


def _linear(calls: list[str]) -> Workflow:
    wf = Workflow()
    for name in ("A", "B", "C"):
        wf.add_step(name, _recorder(name, calls))
    wf.connect("A", "B")
    wf.connect("B", "C")
    return wf


@pytest.mark.asyncio
async def test_default_path_runs_in_order():
    calls: list[str] = []
    result = await _linear(calls).run("A", {}, lambda step, store: "default")

    assert calls == ["A", "B", "C"]
    assert result["last"] == "C"


@pytest.mark.asyncio
async def test_cancel_stops_before_next_step():
    calls: list[str] = []
    wf = _linear(calls)

    result = await wf.run(
        "A", {}, lambda step, store: CANCEL if step == "B" else "default"
    )

    assert calls == ["A", "B"]
    assert result["last"] == "B"
    assert "C" not in result


@pytest.mark.asyncio
async def test_self_edge_reruns_step_with_current_store():
    calls: list[str] = []
    wf = _linear(calls)
    wf.connect("B", "B", action="revise")
    decisions = iter(["default", "revise", "revise", "default", "default"])

    result = await wf.run("A", {}, lambda step, store: next(decisions))

    assert calls == ["A", "B", "B", "B", "C"]
    assert result["B"] == 3


@pytest.mark.asyncio
async def test_unknown_action_ends_run_normally():
    calls: list[str] = []
    result = await _linear(calls).run("A", {}, lambda step, store: "approve")

    assert calls == ["A"]
    assert result["last"] == "A"


@pytest.mark.asyncio
async def test_async_choose_action_sees_step_output():
    calls: list[str] = []
    seen = []

    async def choose(step, store):
        seen.append((step, store["last"]))
        return "default"

    await _linear(calls).run("A", {}, choose)
    assert seen == [("A", "A"), ("B", "B"), ("C", "C")]


@pytest.mark.asyncio
async def test_branching_on_action_label():
    calls: list[str] = []
    wf = _linear(calls)
    wf.add_step("D", _recorder("D", calls))
    wf.connect("A", "D", action="escalate")

    await wf.run("A", {}, lambda step, store: "escalate" if step == "A" else "stop")
    assert calls == ["A", "D"]


def test_duplicate_edge_last_write_wins():
    wf = _linear([])
    wf.connect("A", "C")
    assert wf.next_step("A") == "C"
    assert wf.next_step("A", "missing") is None


def test_connect_undefined_step_raises():
    wf = _linear([])
    with pytest.raises(GraphConfigurationError):
        wf.connect("A", "Z")
    with pytest.raises(GraphConfigurationError):
        wf.connect("Z", "A")


@pytest.mark.asyncio
async def test_run_undefined_start_raises():
    with pytest.raises(GraphConfigurationError):
        await _linear([]).run("Z", {}, lambda step, store: "default")


@pytest.mark.asyncio
async def test_step_failure_propagates():
    wf = Workflow().add_step("broken", always_fail)
    with pytest.raises(NodeExecutionError):
        await wf.run("broken", {}, lambda step, store: "default")


def test_views_are_read_only():
    wf = _linear([])
    assert list(wf.steps) == ["A", "B", "C"]
    assert wf.edges["A"]["default"] == "B"
    with pytest.raises(TypeError):
        wf.steps["X"] = always_fail
    with pytest.raises(TypeError):
        wf.edges["A"]["default"] = "C"


def test_visualize_lists_steps_and_edges():
    diagram = _linear([]).visualize()
    assert diagram.splitlines()[0] == "graph TD"
    assert "A -->|default| B" in diagram
    assert "B -->|default| C" in diagram


def test_to_dict():
    wf = _linear([])
    assert wf.to_dict()["edges"] == {"A": {"default": "B"}, "B": {"default": "C"}}
