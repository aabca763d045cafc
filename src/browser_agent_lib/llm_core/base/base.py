"""Core abstraction for language model implementations."""

from abc import ABC, abstractmethod
from typing import Sequence

from ..exceptions import LLMError, LLMTransportError
from ..messages import BaseMessage, SystemMessage, UserMessage
from ..logger import get_logger

logger = get_logger(__name__)

DEFAULT_ASK_INSTRUCTION = "You are a helpful browser assistant."


class GenericLLM(ABC):
    """Abstract base class for LLM implementations.

    The agent loop hands over the full transcript and expects a single text
    reply. Failures are surfaced once as ``LLMError``; there is no retry policy,
    the invocation simply fails.
    """

    async def complete(self, transcript: Sequence[BaseMessage]) -> str:
        """
        Sends the transcript to the model and returns its reply.

        Args:
            transcript: Ordered, role-tagged messages, system instruction first.

        Returns:
            The text of the model reply.

        Raises:
            LLMError: If the provider could not be reached or returned no usable reply.
        """
        try:
            return await self._complete_impl(transcript)
        except LLMError:
            raise
        except Exception as e:
            msg = f"Language model call failed: {e}"
            logger.error(msg)
            raise LLMTransportError(msg) from e

    async def ask(self, prompt: str, sys_instruction: str = DEFAULT_ASK_INSTRUCTION) -> str:
        """
        Single-turn question without tools or history.

        Args:
            prompt: The question to ask.
            sys_instruction: System message sent ahead of the question.

        Returns:
            The text of the model reply.
        """
        return await self.complete([SystemMessage(content=sys_instruction), UserMessage(content=prompt)])

    @abstractmethod
    async def _complete_impl(self, transcript: Sequence[BaseMessage]) -> str:
        pass
