"""Expose the OpenAI-backed language model implementation."""

from .core import GenericOpenAI
from .models import OpenAITokens

__all__ = ["GenericOpenAI", "OpenAITokens"]
