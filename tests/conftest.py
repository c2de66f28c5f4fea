"""Shared test fixtures."""

import asyncio

import pytest

from nodeflow import node


class Flaky:
    """Callable node body that fails until ``succeed_on`` attempts are made."""

    def __init__(self, succeed_on: int, key: str = "x"):
        self.succeed_on = succeed_on
        self.key = key
        self.calls = 0
        self.seen: list[dict] = []

    async def __call__(self, store):
        self.calls += 1
        self.seen.append(dict(store))
        store[self.key] = f"attempt-{self.calls}"
        if self.calls < self.succeed_on:
            raise RuntimeError(f"boom {self.calls}")
        return store


class MockProvider:
    """LLM provider returning canned content and recording requests."""

    def __init__(self, content: str = "ok"):
        self.content = content
        self.requests: list[tuple[list, dict]] = []

    async def complete(self, messages, **kwargs):
        self.requests.append((messages, kwargs))
        await asyncio.sleep(0)
        return {"role": "assistant", "content": self.content}


# Shared node definitions
@node
async def upper_summary(store):
    store["summary"] = store["doc"].upper()
    return store


@node
async def always_fail(store):
    raise ValueError("always fails")


@pytest.fixture
def flaky():
    """Factory for Flaky node bodies."""
    return Flaky


@pytest.fixture
def provider():
    return MockProvider("generated")
