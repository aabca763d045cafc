"""Tool dispatch over the asynchronous rendezvous channel."""

from .rendezvous import (
    RendezvousChannel,
    ToolResultStore,
    ToolEmitter,
    RequestState,
    Pending,
    Resolved,
    Expired,
)
from .dispatcher import ToolDispatcher, DEFAULT_TOOL_TIMEOUT

__all__ = [
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
