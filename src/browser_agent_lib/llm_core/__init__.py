"""Public exports for the core agent abstractions and utilities."""

from .base import GenericLLM
from .exceptions import (
    BrowserAgentError,
    ConfigurationError,
    LLMError,
    LLMTransportError,
    LLMResponseError,
    ToolError,
    ToolTimeoutError,
    ToolEmitError,
)
from .logger import get_logger, setup_logging
from .messages import (
    Role,
    BaseMessage,
    SystemMessage,
    UserMessage,
    ObservationMessage,
    AssistantMessage,
    Transcript,
)
from .tools import (
    ToolDefinition,
    BROWSER_TOOLS,
    Action,
    ToolRequest,
    ToolResponse,
    parse_action,
    has_action_marker,
    has_final_answer,
    RendezvousChannel,
    ToolResultStore,
    ToolEmitter,
    RequestState,
    Pending,
    Resolved,
    Expired,
    ToolDispatcher,
)

__all__ = [
    "GenericLLM",
    "BrowserAgentError",
    "ConfigurationError",
    "LLMError",
    "LLMTransportError",
    "LLMResponseError",
    "ToolError",
    "ToolTimeoutError",
    "ToolEmitError",
    "get_logger",
    "setup_logging",
    "Role",
    "BaseMessage",
    "SystemMessage",
    "UserMessage",
    "ObservationMessage",
    "AssistantMessage",
    "Transcript",
    "ToolDefinition",
    "BROWSER_TOOLS",
    "Action",
    "ToolRequest",
    "ToolResponse",
    "parse_action",
    "has_action_marker",
    "has_final_answer",
    "RendezvousChannel",
    "ToolResultStore",
    "ToolEmitter",
    "RequestState",
    "Pending",
    "Resolved",
    "Expired",
    "ToolDispatcher",
]
