"""Re-export the language model interface used by the agent loop."""

from .base import GenericLLM

__all__ = [
    "GenericLLM",
]
