import pytest
from pydantic import ValidationError

from browser_agent_lib.llm_core.messages import (
    Role,
    SystemMessage,
    UserMessage,
    AssistantMessage,
    ObservationMessage,
    Transcript,
)


def test_message_roles() -> None:
    assert SystemMessage(content="s").role == Role.SYSTEM
    assert UserMessage(content="u").role == Role.USER
    assert AssistantMessage(content="a").role == Role.ASSISTANT
    assert ObservationMessage(content="Observation: o").role == Role.USER


def test_messages_are_frozen() -> None:
    msg = UserMessage(content="hello")
    with pytest.raises(ValidationError):
        msg.content = "changed"  # type: ignore[misc]


def test_transcript_starts_with_system_prompt() -> None:
    transcript = Transcript("You are a browser assistant.")
    transcript.add_user("what is the price?")

    messages = transcript.messages
    assert len(transcript) == 2
    assert isinstance(messages[0], SystemMessage)
    assert transcript.system_prompt == "You are a browser assistant."
    assert messages[1].role == Role.USER


def test_transcript_rejects_second_system_message() -> None:
    transcript = Transcript("sys")
    with pytest.raises(ValueError):
        transcript.append(SystemMessage(content="another"))


def test_messages_snapshot_is_not_live() -> None:
    transcript = Transcript("sys")
    snapshot = transcript.messages
    transcript.add_user("later")
    assert len(snapshot) == 1
    assert len(transcript.messages) == 2


def test_observation_is_user_role_with_prefix() -> None:
    transcript = Transcript("sys")
    obs = transcript.add_observation("Found 3 prices")
    assert obs.role == Role.USER
    assert obs.content == "Observation: Found 3 prices"


def test_render_keeps_replies_and_observations_only() -> None:
    transcript = Transcript("sys")
    transcript.add_user("Observation: typed by the user")
    transcript.add_assistant("Thought: a\nAction: extract_prices")
    transcript.add_observation("$1.00")
    transcript.add_assistant("Final Answer: one dollar")

    assert transcript.render() == (
        "Thought: a\nAction: extract_prices\n\nObservation: $1.00\n\nFinal Answer: one dollar"
    )
