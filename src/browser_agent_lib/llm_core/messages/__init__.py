"""Expose the typed transcript models used between the agent loop and the language model."""

from .models import (
    Role,
    BaseMessage,
    SystemMessage,
    UserMessage,
    ObservationMessage,
    AssistantMessage,
    Transcript,
    OBSERVATION_PREFIX,
)

__all__ = [
    "Role",
    "BaseMessage",
    "SystemMessage",
    "UserMessage",
    "ObservationMessage",
    "AssistantMessage",
    "Transcript",
    "OBSERVATION_PREFIX",
]
