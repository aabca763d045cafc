"""Result model shared by the agent strategies."""

from typing import List

from pydantic import BaseModel, Field

from ..llm_core.messages import BaseMessage


class AgentRunResult(BaseModel):
    """
    Outcome of one agent invocation.

    Attributes:
        output: Assistant replies and observations joined by blank lines.
        iterations: Number of model queries performed (demo runs count one).
        tool_calls: Number of tool dispatches performed.
        finished: Whether a ``Final Answer:`` was produced. False means the
            iteration budget ran out and ``output`` is partial.
        messages: Full transcript, system instruction first.
    """

    output: str
    iterations: int
    tool_calls: int
    finished: bool
    messages: List[BaseMessage] = Field(default_factory=list)
