"""Tool-related data models."""

from .models import ToolDefinition, BROWSER_TOOLS
from .tool_call import Action, ToolRequest, ToolResponse, new_request_id

__all__ = ["ToolDefinition", "BROWSER_TOOLS", "Action", "ToolRequest", "ToolResponse", "new_request_id"]
