"""Entry point of the browser agent."""

from __future__ import annotations

import threading
from typing import Any, Dict, Optional

from openai import AsyncOpenAI

from .demo import DemoStrategy
from .loop import AgentLoop
from .models import AgentRunResult
from ..config import AgentSettings
from ..executors import SimulatedPageExecutor
from ..llm_core.base import GenericLLM
from ..llm_core.exceptions import LLMError
from ..llm_core.logger import get_logger
from ..llm_core.tools import RendezvousChannel, ToolDispatcher, ToolEmitter, ToolRequest, ToolResponse, ToolResultStore
from ..llm_impl import GenericOpenAI

logger = get_logger(__name__)


class BrowserAgent:
    """
    Answers requests about the current page, with a live model or in demo mode.

    Each invocation gets its own result store and channel unless a shared
    ``store`` is injected. Tool results reach the right invocation through
    ``submit_tool_response``, which routes by correlation id.
    """

    def __init__(
        self,
        settings: Optional[AgentSettings] = None,
        emitter: Optional[ToolEmitter] = None,
        llm: Optional[GenericLLM] = None,
        store: Optional[ToolResultStore] = None,
    ) -> None:
        """
        Initializes the agent.

        Args:
            settings: Runtime settings. Defaults are used when omitted.
            emitter: Outbound primitive delivering tool requests to the page. When
                omitted, a ``SimulatedPageExecutor`` answers the requests.
            llm: Language model to use. Built from ``settings`` when a credential
                is configured; without both the agent runs the demo strategy.
            store: Result store shared by all invocations instead of one per call.
        """
        self.settings = settings or AgentSettings()
        if llm is None and self.settings.live:
            llm = GenericOpenAI(
                client=AsyncOpenAI(api_key=self.settings.openai_api_key, base_url=self.settings.openai_base_url),
                model_name=self.settings.model,
                temp=self.settings.temperature,
                max_tokens=self.settings.max_tokens,
            )
        self.llm = llm

        if emitter is None:
            logger.info("No page executor attached; using the simulated page.")
            emitter = SimulatedPageExecutor(self.submit_tool_response)
        self.emitter = emitter
        self.shared_store = store

        self._routes: Dict[str, RendezvousChannel] = {}
        self._routes_lock = threading.Lock()

    @property
    def demo_mode(self) -> bool:
        return self.llm is None

    async def run(self, prompt: str, context_url: str = "unknown") -> str:
        """
        Runs one invocation and returns its transcript text.

        Returns:
            The assistant replies and observations, possibly partial when the
            iteration budget ran out, or a single ``Error: ...`` line when the
            language model call failed.
        """
        try:
            result = await self.run_detailed(prompt, context_url)
        except LLMError as e:
            logger.error("Agent invocation failed: %s", e)
            return f"Error: {e}"
        return result.output

    async def run_detailed(self, prompt: str, context_url: str = "unknown") -> AgentRunResult:
        """
        Runs one invocation and returns the structured result.

        Raises:
            LLMError: If a language model call fails.
        """
        channel = self._open_channel()
        dispatcher = ToolDispatcher(channel, timeout=self.settings.tool_timeout)
        try:
            if self.llm is None:
                return await DemoStrategy(dispatcher).run(prompt, context_url)
            return await AgentLoop(self.llm, dispatcher).run(prompt, context_url)
        finally:
            self._close_channel(channel)

    def submit_tool_response(self, request_id: str, result: str) -> bool:
        """
        Inbound call for the page executor. Safe from any thread.

        Returns:
            True if the result resolved a pending request. Late, duplicate and
            unknown submissions return False and are otherwise ignored.
        """
        with self._routes_lock:
            channel = self._routes.get(request_id)
        if channel is None:
            logger.warning("Ignoring tool result for request %s: no active invocation.", request_id)
            return False
        return channel.submit(request_id, result)

    def submit_tool_event(self, payload: Dict[str, Any]) -> bool:
        """Accepts a raw ``{request_id, result}`` payload from the page."""
        try:
            response = ToolResponse.from_event(payload)
        except ValueError as e:
            logger.warning("Ignoring malformed tool response %r: %s", payload, e)
            return False
        return self.submit_tool_response(response.request_id, response.result)

    def _open_channel(self) -> RendezvousChannel:
        channel: RendezvousChannel

        def emit(request: ToolRequest) -> Any:
            with self._routes_lock:
                self._routes[request.request_id] = channel
            return self.emitter(request)

        store = self.shared_store if self.shared_store is not None else ToolResultStore()
        channel = RendezvousChannel(emit, store)
        return channel

    def _close_channel(self, channel: RendezvousChannel) -> None:
        with self._routes_lock:
            stale = [rid for rid, ch in self._routes.items() if ch is channel]
            for rid in stale:
                del self._routes[rid]
