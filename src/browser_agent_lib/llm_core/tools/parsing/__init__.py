"""Parsing of the Thought / Action / Final Answer reply grammar."""

from .action_parser import (
    ACTION_MARKER,
    FINAL_ANSWER_MARKER,
    parse_action,
    has_action_marker,
    has_final_answer,
)

__all__ = ["ACTION_MARKER", "FINAL_ANSWER_MARKER", "parse_action", "has_action_marker", "has_final_answer"]
