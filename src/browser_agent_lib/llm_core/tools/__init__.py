from .models import ToolDefinition, BROWSER_TOOLS, Action, ToolRequest, ToolResponse
from .parsing import parse_action, has_action_marker, has_final_answer, ACTION_MARKER, FINAL_ANSWER_MARKER
from .execution import (
    RendezvousChannel,
    ToolResultStore,
    ToolEmitter,
    RequestState,
    Pending,
    Resolved,
    Expired,
    ToolDispatcher,
    DEFAULT_TOOL_TIMEOUT,
)

__all__ = [
    "ToolDefinition",
    "BROWSER_TOOLS",
    "Action",
    "ToolRequest",
    "ToolResponse",
    "parse_action",
    "has_action_marker",
    "has_final_answer",
    "ACTION_MARKER",
    "FINAL_ANSWER_MARKER",
    "RendezvousChannel",
    "ToolResultStore",
    "ToolEmitter",
    "RequestState",
    "Pending",
    "Resolved",
    "Expired",
    "ToolDispatcher",
    "DEFAULT_TOOL_TIMEOUT",
]
