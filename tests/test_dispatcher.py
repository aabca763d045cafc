import asyncio

import pytest

from browser_agent_lib.executors import SimulatedPageExecutor, DEMO_PRICE_TEXT
from browser_agent_lib.llm_core.exceptions import ToolTimeoutError, ToolEmitError
from browser_agent_lib.llm_core.tools import (
    Action,
    RendezvousChannel,
    ToolDispatcher,
    ToolRequest,
    ToolResultStore,
    Expired,
)


@pytest.mark.asyncio
async def test_dispatch_returns_submitted_result(store: ToolResultStore) -> None:
    channel: RendezvousChannel

    def answer(request: ToolRequest) -> None:
        asyncio.get_running_loop().call_later(0.01, channel.submit, request.request_id, f"ran {request.tool}")

    channel = RendezvousChannel(answer, store)
    dispatcher = ToolDispatcher(channel, timeout=1.0)

    assert await dispatcher.dispatch("scrape_table") == "ran scrape_table"


@pytest.mark.asyncio
async def test_dispatch_times_out_without_response(channel: RendezvousChannel, emitter, store) -> None:
    dispatcher = ToolDispatcher(channel, timeout=0.05)

    with pytest.raises(ToolTimeoutError) as excinfo:
        await dispatcher.dispatch("extract_prices")

    request_id = emitter.requests[0].request_id
    assert excinfo.value.request_id == request_id
    assert "timed out" in str(excinfo.value)
    assert isinstance(excinfo.value, TimeoutError)
    assert store.state(request_id) == Expired()


@pytest.mark.asyncio
async def test_late_response_after_timeout_is_harmless(channel: RendezvousChannel, emitter) -> None:
    dispatcher = ToolDispatcher(channel, timeout=0.02)
    with pytest.raises(ToolTimeoutError):
        await dispatcher.dispatch("extract_prices")

    assert channel.submit(emitter.requests[0].request_id, "late") is False


@pytest.mark.asyncio
async def test_unrelated_response_does_not_resolve_other_request(channel: RendezvousChannel, emitter) -> None:
    dispatcher = ToolDispatcher(channel, timeout=0.2)

    first = asyncio.create_task(dispatcher.dispatch("search_dom", "alpha"))
    second = asyncio.create_task(dispatcher.dispatch("search_dom", "beta"))
    while len(emitter.requests) < 2:
        await asyncio.sleep(0)

    by_arg = {r.arg: r.request_id for r in emitter.requests}
    assert channel.submit("not-a-real-id", "stray") is False
    assert channel.submit(by_arg["beta"], "beta result") is True

    assert await second == "beta result"
    with pytest.raises(ToolTimeoutError):
        await first


@pytest.mark.asyncio
async def test_duplicate_response_keeps_first_result(channel: RendezvousChannel, emitter) -> None:
    dispatcher = ToolDispatcher(channel, timeout=1.0)
    task = asyncio.create_task(dispatcher.dispatch("extract_prices"))
    while not emitter.requests:
        await asyncio.sleep(0)
    request_id = emitter.requests[0].request_id

    assert channel.submit(request_id, "first") is True
    result = await task
    assert channel.submit(request_id, "second") is False

    assert result == "first"


@pytest.mark.asyncio
async def test_dispatch_with_threaded_executor() -> None:
    channel: RendezvousChannel
    executor = SimulatedPageExecutor(lambda rid, res: channel.submit(rid, res), delay=0.01, threaded=True)
    channel = RendezvousChannel(executor)
    dispatcher = ToolDispatcher(channel, timeout=1.0)

    assert await dispatcher.dispatch_action(Action(tool="extract_prices")) == DEMO_PRICE_TEXT


@pytest.mark.asyncio
async def test_dispatch_propagates_emit_failure(store: ToolResultStore) -> None:
    def broken(request: ToolRequest) -> None:
        raise ConnectionError("no page")

    dispatcher = ToolDispatcher(RendezvousChannel(broken, store), timeout=1.0)
    with pytest.raises(ToolEmitError):
        await dispatcher.dispatch("click_button")


@pytest.mark.asyncio
async def test_cancelled_dispatch_expires_request(channel: RendezvousChannel, emitter, store) -> None:
    dispatcher = ToolDispatcher(channel, timeout=5.0)
    task = asyncio.create_task(dispatcher.dispatch("scrape_table"))
    while not emitter.requests:
        await asyncio.sleep(0)

    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task
    assert store.state(emitter.requests[0].request_id) == Expired()


def test_timeout_must_be_positive(channel: RendezvousChannel) -> None:
    with pytest.raises(ValueError):
        ToolDispatcher(channel, timeout=0)
