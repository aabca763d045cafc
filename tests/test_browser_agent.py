import asyncio
from unittest.mock import AsyncMock

import pytest

from browser_agent_lib import BrowserAgent, AgentSettings
from browser_agent_lib.executors import SimulatedPageExecutor, DEMO_PRICE_TEXT
from browser_agent_lib.llm_core.exceptions import LLMTransportError
from browser_agent_lib.llm_core.tools import ToolRequest, ToolResultStore

FINAL_REPLY = "Thought: done.\nFinal Answer: $19.99 is the cheapest."


@pytest.mark.asyncio
async def test_demo_end_to_end_price() -> None:
    agent = BrowserAgent(settings=AgentSettings())
    assert agent.demo_mode is True

    output = await agent.run("what is the price?", "https://shop.example")

    lines = output.splitlines()
    thought = next(i for i, line in enumerate(lines) if line.startswith("Thought:"))
    action = lines.index("Action: extract_prices")
    observation = next(i for i, line in enumerate(lines) if line.startswith("Observation:"))
    final = next(i for i, line in enumerate(lines) if line.startswith("Final Answer:"))

    assert thought < action < observation < final
    assert DEMO_PRICE_TEXT in lines[observation]


@pytest.mark.asyncio
async def test_live_mode_with_simulated_page(scripted_llm) -> None:
    llm = scripted_llm(["Thought: check.\nAction: extract_prices", FINAL_REPLY])
    agent = BrowserAgent(settings=AgentSettings(), llm=llm)

    result = await agent.run_detailed("cheapest?", "https://shop.example")

    assert result.finished is True
    assert result.tool_calls == 1
    assert f"Observation: {DEMO_PRICE_TEXT}" in result.output
    assert agent._routes == {}


def test_live_settings_build_openai_model() -> None:
    agent = BrowserAgent(settings=AgentSettings(openai_api_key="sk-test", model="gpt-4o-mini"))
    assert agent.demo_mode is False
    assert agent.llm.model == "gpt-4o-mini"  # type: ignore[union-attr]


@pytest.mark.asyncio
async def test_llm_failure_returns_error_string(scripted_llm) -> None:
    llm = scripted_llm(["unused"])
    llm._complete_impl = AsyncMock(side_effect=LLMTransportError("Invalid API key"))  # type: ignore[method-assign]
    agent = BrowserAgent(settings=AgentSettings(), llm=llm)

    output = await agent.run("price?")
    assert output == "Error: Invalid API key"

    with pytest.raises(LLMTransportError):
        await agent.run_detailed("price?")


@pytest.mark.asyncio
async def test_external_emitter_and_inbound_submission() -> None:
    emitted = []
    agent: BrowserAgent

    def emit(request: ToolRequest) -> None:
        emitted.append(request.to_event())
        loop = asyncio.get_running_loop()
        loop.call_soon(agent.submit_tool_event, {"request_id": request.request_id, "result": "Table: a | b"})

    agent = BrowserAgent(settings=AgentSettings(), emitter=emit)

    output = await agent.run("show me the table")

    assert emitted[0]["tool"] == "scrape_table"
    assert emitted[0]["arg"] is None
    assert "Observation: Table: a | b" in output
    assert agent.submit_tool_response(emitted[0]["request_id"], "again") is False


def test_unknown_submission_is_ignored() -> None:
    agent = BrowserAgent(settings=AgentSettings())
    assert agent.submit_tool_response("missing", "result") is False
    assert agent.submit_tool_event({"result": "no id"}) is False


@pytest.mark.asyncio
async def test_concurrent_invocations_use_separate_stores() -> None:
    stores = set()
    agent: BrowserAgent

    def emit(request: ToolRequest) -> None:
        stores.add(id(agent._routes[request.request_id].store))
        executor(request)

    agent = BrowserAgent(settings=AgentSettings(), emitter=emit)
    executor = SimulatedPageExecutor(agent.submit_tool_response, delay=0.01, threaded=True)

    outputs = await asyncio.gather(agent.run("price?"), agent.run("table?"))

    assert DEMO_PRICE_TEXT in outputs[0]
    assert "Table data extracted" in outputs[1]
    assert len(stores) == 2


@pytest.mark.asyncio
async def test_injected_store_is_shared() -> None:
    store = ToolResultStore()
    agent = BrowserAgent(settings=AgentSettings(), store=store)

    await agent.run("price?")
    await agent.run("table?")

    assert len(store) == 2


@pytest.mark.asyncio
async def test_tool_timeout_setting_is_used() -> None:
    agent = BrowserAgent(
        settings=AgentSettings(tool_timeout=0.05),
        emitter=lambda request: None,
    )

    output = await agent.run("price?")
    assert "timed out after 0.05s" in output
