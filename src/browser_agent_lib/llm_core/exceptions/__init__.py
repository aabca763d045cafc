"""Export the exception hierarchy shared by the model, dispatch and configuration layers."""

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

__all__ = [
    "BrowserAgentError",
    "ConfigurationError",
    "LLMError",
    "LLMTransportError",
    "LLMResponseError",
    "ToolError",
    "ToolTimeoutError",
    "ToolEmitError",
]
