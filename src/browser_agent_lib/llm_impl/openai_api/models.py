from pydantic import BaseModel, Field
from typing import Optional


class OpenAITokens(BaseModel):
    """
    Represents the token counts for an OpenAI model response.

    Attributes:
        prompt_tokens: The number of tokens in the prompt.
        completion_tokens: The number of tokens in the completion response.
        total_tokens: The total number of tokens used.
    """

    prompt_tokens: Optional[int] = Field(default=None)
    completion_tokens: Optional[int] = Field(default=None)
    total_tokens: Optional[int] = Field(default=None)
