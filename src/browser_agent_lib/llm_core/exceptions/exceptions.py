"""
Custom exception classes for the browser agent.

The hierarchy separates failures that end an invocation (language model
transport or payload errors) from failures the agent loop recovers from by
turning them into observations (tool timeouts and emit failures).
"""


class BrowserAgentError(Exception):
    """Base exception for all agent errors."""

    pass


class ConfigurationError(BrowserAgentError):
    """Raised when agent settings hold invalid values."""

    pass


class LLMError(BrowserAgentError):
    """Base exception for failures of the language model call. Never retried."""

    pass


class LLMTransportError(LLMError):
    """Raised when the model provider cannot be reached or rejects the credentials."""

    pass


class LLMResponseError(LLMError):
    """Raised when the model provider answers with a payload that carries no usable reply."""

    pass


class ToolError(BrowserAgentError):
    """Base exception for tool dispatch failures."""

    pass


class ToolTimeoutError(ToolError, TimeoutError):
    """Raised when no tool result arrives before the dispatch deadline."""

    def __init__(self, tool: str, request_id: str, timeout: float) -> None:
        self.tool = tool
        self.request_id = request_id
        self.timeout = timeout
        super().__init__(f"Tool '{tool}' timed out after {timeout:g}s waiting for request {request_id}")


class ToolEmitError(ToolError):
    """Raised when the tool request event could not be handed to the external executor."""

    pass
