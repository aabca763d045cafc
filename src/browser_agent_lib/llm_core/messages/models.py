"""Typed transcript models shared by the agent loop and model implementations."""

from enum import Enum
from typing import Iterator, List, Tuple

from pydantic import BaseModel, ConfigDict

OBSERVATION_PREFIX = "Observation:"


class Role(str, Enum):
    """Author of a transcript message."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


class BaseMessage(BaseModel):
    """Base model for messages exchanged with an LLM.

    Attributes:
        role: Role associated with the message.
        content: Text payload of the message.
    """

    model_config = ConfigDict(frozen=True)

    role: Role
    content: str


class SystemMessage(BaseMessage):
    """Message authored by the system to steer behavior."""

    role: Role = Role.SYSTEM


class UserMessage(BaseMessage):
    """Message authored by the end user."""

    role: Role = Role.USER


class ObservationMessage(UserMessage):
    """Tool result fed back to the model. Sent with the user role."""

    pass


class AssistantMessage(BaseMessage):
    """Message authored by the assistant."""

    role: Role = Role.ASSISTANT


class Transcript:
    """Append-only conversation of one agent invocation.

    The first message is always the system instruction. Messages are frozen and
    the transcript only grows, so earlier entries are never rewritten or reordered.
    """

    def __init__(self, system_prompt: str) -> None:
        self._messages: List[BaseMessage] = [SystemMessage(content=system_prompt)]

    def append(self, message: BaseMessage) -> None:
        if isinstance(message, SystemMessage) or message.role == Role.SYSTEM:
            raise ValueError("Only the first transcript message may be a system message.")
        self._messages.append(message)

    def add_user(self, content: str) -> UserMessage:
        message = UserMessage(content=content)
        self.append(message)
        return message

    def add_assistant(self, content: str) -> AssistantMessage:
        message = AssistantMessage(content=content)
        self.append(message)
        return message

    def add_observation(self, text: str) -> ObservationMessage:
        message = ObservationMessage(content=f"{OBSERVATION_PREFIX} {text}")
        self.append(message)
        return message

    @property
    def messages(self) -> Tuple[BaseMessage, ...]:
        return tuple(self._messages)

    @property
    def system_prompt(self) -> str:
        return self._messages[0].content

    def __iter__(self) -> Iterator[BaseMessage]:
        return iter(tuple(self._messages))

    def __len__(self) -> int:
        return len(self._messages)

    def render(self) -> str:
        """Join every assistant reply and every observation with blank lines.

        Returns:
            The chronological output of the invocation, without the system
            prompt and the original user request.
        """
        parts = [
            m.content
            for m in self._messages
            if isinstance(m, (AssistantMessage, ObservationMessage))
        ]
        return "\n\n".join(parts)
