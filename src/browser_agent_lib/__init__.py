"""Browser Agent Library - a bounded reasoning loop driving tools inside a browser page."""

from .llm_core import (
    GenericLLM,
    Transcript,
    SystemMessage,
    UserMessage,
    AssistantMessage,
    Action,
    ToolRequest,
    ToolResponse,
    ToolResultStore,
    RendezvousChannel,
    ToolDispatcher,
    parse_action,
    LLMError,
    ToolTimeoutError,
)
from .config import AgentSettings, MAX_ITERATIONS
from .llm_impl import GenericOpenAI
from .executors import SimulatedPageExecutor
from .agent import AgentLoop, AgentRunResult, BrowserAgent, DemoStrategy

__all__ = [
    "GenericLLM",
    "Transcript",
    "SystemMessage",
    "UserMessage",
    "AssistantMessage",
    "Action",
    "ToolRequest",
    "ToolResponse",
    "ToolResultStore",
    "RendezvousChannel",
    "ToolDispatcher",
    "parse_action",
    "LLMError",
    "ToolTimeoutError",
    "AgentSettings",
    "MAX_ITERATIONS",
    "GenericOpenAI",
    "SimulatedPageExecutor",
    "AgentLoop",
    "AgentRunResult",
    "BrowserAgent",
    "DemoStrategy",
]
