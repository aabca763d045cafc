from typing import Any, Callable, List, Sequence
from unittest.mock import AsyncMock, MagicMock

import pytest
from openai import AsyncOpenAI

from browser_agent_lib.llm_core import GenericLLM, BaseMessage, RendezvousChannel, ToolRequest, ToolResultStore


class ScriptedLLM(GenericLLM):
    """Replays canned replies; the last reply repeats once the script runs out."""

    def __init__(self, replies: Sequence[str]) -> None:
        self.replies = list(replies)
        self.calls: List[List[BaseMessage]] = []

    async def _complete_impl(self, transcript: Sequence[BaseMessage]) -> str:
        self.calls.append(list(transcript))
        index = min(len(self.calls), len(self.replies)) - 1
        return self.replies[index]


class RecordingEmitter:
    """Emitter that stores requests and optionally answers them on the loop."""

    def __init__(self, answer: Callable[[ToolRequest], Any] | None = None) -> None:
        self.requests: List[ToolRequest] = []
        self.answer = answer

    def __call__(self, request: ToolRequest) -> None:
        self.requests.append(request)
        if self.answer is not None:
            self.answer(request)


@pytest.fixture
def scripted_llm() -> Callable[[Sequence[str]], ScriptedLLM]:
    return ScriptedLLM


@pytest.fixture
def emitter() -> RecordingEmitter:
    return RecordingEmitter()


@pytest.fixture
def store() -> ToolResultStore:
    return ToolResultStore()


@pytest.fixture
def channel(emitter: RecordingEmitter, store: ToolResultStore) -> RendezvousChannel:
    return RendezvousChannel(emitter, store)


@pytest.fixture
def mock_openai_client() -> Any:
    client = MagicMock(spec=AsyncOpenAI)
    client.chat = MagicMock()
    client.chat.completions = MagicMock()
    client.chat.completions.create = AsyncMock()
    return client
