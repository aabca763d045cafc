"""Agent settings loaded from the environment."""

import os
from typing import Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from .llm_core.exceptions import ConfigurationError
from .llm_core.tools.execution import DEFAULT_TOOL_TIMEOUT

# Hard ceiling on reasoning iterations per invocation; not adaptive.
MAX_ITERATIONS = 5


class AgentSettings(BaseModel):
    """
    Runtime settings of the browser agent.

    Attributes:
        openai_api_key: Credential for the live model. Without it the agent runs the demo strategy.
        openai_base_url: Optional alternative endpoint for OpenAI compatible servers.
        model: Chat model name.
        temperature: Sampling temperature.
        max_tokens: Reply token cap.
        tool_timeout: Seconds to wait for each tool result.
    """

    openai_api_key: Optional[str] = None
    openai_base_url: Optional[str] = None
    model: str = "gpt-4o"
    temperature: float = Field(default=0.3, ge=0.0, le=2.0)
    max_tokens: int = Field(default=1500, gt=0)
    tool_timeout: float = Field(default=DEFAULT_TOOL_TIMEOUT, gt=0)

    @field_validator("openai_api_key", "openai_base_url")
    @classmethod
    def _blank_is_none(cls, value: Optional[str]) -> Optional[str]:
        if value is None or not value.strip():
            return None
        return value.strip()

    @property
    def live(self) -> bool:
        """Whether a live model credential is configured."""
        return self.openai_api_key is not None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, load_dotenv_file: bool = True) -> "AgentSettings":
        """
        Builds settings from environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ``.
            load_dotenv_file: Load a ``.env`` file into ``os.environ`` first.

        Raises:
            ConfigurationError: If a variable holds an invalid value.
        """
        if load_dotenv_file and environ is None:
            load_dotenv()
        env = os.environ if environ is None else environ

        values = {
            "openai_api_key": env.get("OPENAI_API_KEY"),
            "openai_base_url": env.get("OPENAI_BASE_URL"),
            "model": env.get("BROWSER_AGENT_MODEL"),
            "temperature": env.get("BROWSER_AGENT_TEMPERATURE"),
            "max_tokens": env.get("BROWSER_AGENT_MAX_TOKENS"),
            "tool_timeout": env.get("BROWSER_AGENT_TOOL_TIMEOUT"),
        }
        try:
            return cls(**{k: v for k, v in values.items() if v is not None})
        except ValidationError as e:
            raise ConfigurationError(f"Invalid agent settings: {e}") from e
