"""Tests for FakeModelCaller implementation."""

import asyncio

import pytest

from dim.providers import FakeModelCaller, ModelCaller
from dim.types import ModelParameters, ModelRequest


def _request(prompt: str) -> ModelRequest:
    return ModelRequest(prompt=prompt, content=prompt, parameters=ModelParameters(model="fake"))


def test_fake_caller_satisfies_protocol() -> None:
    assert isinstance(FakeModelCaller({}), ModelCaller)


@pytest.mark.asyncio
async def test_fake_caller_answers_by_prompt() -> None:
    caller = FakeModelCaller({"a": '{"x": 1}', "b": '{"y": 2}'})

    assert await caller.call(_request("b")) == '{"y": 2}'
    assert await caller.call(_request("a")) == '{"x": 1}'
    assert [r.prompt for r in caller.requests] == ["b", "a"]
    assert caller.completed == ["b", "a"]


@pytest.mark.asyncio
async def test_fake_caller_raises_configured_exception() -> None:
    caller = FakeModelCaller({"boom": RuntimeError("provider down")})

    with pytest.raises(RuntimeError, match="provider down"):
        await caller.call(_request("boom"))
    assert caller.in_flight == 0


@pytest.mark.asyncio
async def test_fake_caller_unknown_prompt_raises_key_error() -> None:
    caller = FakeModelCaller({})

    with pytest.raises(KeyError):
        await caller.call(_request("missing"))


@pytest.mark.asyncio
async def test_fake_caller_records_cancellation() -> None:
    caller = FakeModelCaller({"slow": '{"x": 1}'}, delays={"slow": 5.0})

    task = asyncio.create_task(caller.call(_request("slow")))
    await asyncio.sleep(0)
    task.cancel()

    with pytest.raises(asyncio.CancelledError):
        await task
    assert caller.cancelled == ["slow"]
    assert caller.completed == []
