"""Collect concrete language model provider implementations."""

from .openai_api import GenericOpenAI

__all__ = [
    "GenericOpenAI",
]
