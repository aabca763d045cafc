"""Data models for tool invocations travelling between the agent and the page executor."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Action:
    """A tool invocation parsed from a model reply."""

    tool: str
    argument: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.tool:
            raise ValueError("Action tool name must not be empty.")

    def render(self) -> str:
        if self.argument is None:
            return self.tool
        return f"{self.tool}({self.argument})"


def new_request_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class ToolRequest:
    """Represents one tool execution request sent to the external executor."""

    tool: str
    arg: Optional[str] = None
    request_id: str = field(default_factory=new_request_id)

    @classmethod
    def from_action(cls, action: Action) -> ToolRequest:
        return cls(tool=action.tool, arg=action.argument)

    def to_event(self) -> Dict[str, Any]:
        """Build the event payload emitted to the page executor."""
        return {"tool": self.tool, "arg": self.arg, "request_id": self.request_id}


@dataclass(frozen=True)
class ToolResponse:
    """Represents the result the external executor submits for a request."""

    request_id: str
    result: str

    @classmethod
    def from_event(cls, payload: Dict[str, Any]) -> ToolResponse:
        """Build a response from an inbound ``{request_id, result}`` payload.

        Raises:
            ValueError: If ``request_id`` is missing.
        """
        request_id = payload.get("request_id")
        if not request_id:
            raise ValueError("Tool response payload carries no request_id.")
        result = payload.get("result")
        return cls(request_id=str(request_id), result="" if result is None else str(result))
