from openai import AsyncOpenAI, APIError
from openai.types.chat import ChatCompletion
from typing import List, Optional, Any, Dict, Iterable, Sequence, cast
from browser_agent_lib.llm_core import GenericLLM
from browser_agent_lib.llm_core.exceptions import LLMResponseError, LLMTransportError
from browser_agent_lib.llm_core.logger import get_logger
from browser_agent_lib.llm_core.messages import BaseMessage
from .models import OpenAITokens

logger = get_logger(__name__)


class GenericOpenAI(GenericLLM):
    """
    Implementation of GenericLLM for OpenAI chat completion models.
    Sends the whole transcript on every call and returns the reply text.
    """

    def __init__(
        self,
        client: AsyncOpenAI,
        model_name: str = "gpt-4o",
        temp: float = 0.3,
        max_tokens: int = 1500,
    ):
        """
        Initializes the GenericOpenAI LLM wrapper.

        Args:
            client: The initialized AsyncOpenAI client.
            model_name: The identifier for the OpenAI model to use (e.g., 'gpt-4o').
            temp: The temperature for text generation, controlling randomness.
            max_tokens: The maximum number of tokens to generate in the response.
        """
        self.model: str = model_name
        self.temperature = temp
        self.max_tokens = max_tokens
        self.client: AsyncOpenAI = client
        self.last_usage: Optional[OpenAITokens] = None

    async def _complete_impl(self, transcript: Sequence[BaseMessage]) -> str:
        messages = self._convert_history(transcript)
        logger.debug("Sending %d message(s) to OpenAI model %s.", len(messages), self.model)

        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=cast(Iterable[Any], messages),
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
        except APIError as e:
            msg = f"OpenAI request failed: {e}"
            logger.error(msg)
            raise LLMTransportError(msg) from e

        return self._extract_text(response)

    @staticmethod
    def _convert_history(history: Sequence[BaseMessage]) -> List[Dict[str, Any]]:
        """
        Converts typed transcript messages to OpenAI message dictionaries.

        Args:
            history: Transcript messages, system instruction first.

        Returns:
            List of OpenAI message dictionaries.
        """
        return [{"role": msg.role.value, "content": msg.content} for msg in history]

    def _extract_text(self, response: ChatCompletion) -> str:
        """
        Pulls the reply text out of a chat completion.

        Raises:
            LLMResponseError: If the completion carries no choices or no text.
        """
        if not response.choices:
            raise LLMResponseError("Failed to get response from AI service: completion has no choices.")

        content = response.choices[0].message.content
        if content is None:
            raise LLMResponseError("Failed to get response from AI service: reply has no text content.")

        usage = getattr(response, "usage", None)
        if usage is not None:
            self.last_usage = OpenAITokens(
                prompt_tokens=usage.prompt_tokens,
                completion_tokens=usage.completion_tokens,
                total_tokens=usage.total_tokens,
            )
            logger.debug("Token usage: %s", self.last_usage.model_dump())

        return content
