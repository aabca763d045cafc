"""Extract ``Action:`` lines from free-form model replies."""

from typing import Optional

from ..models import Action
from ...logger import get_logger

logger = get_logger(__name__)

ACTION_MARKER = "Action:"
FINAL_ANSWER_MARKER = "Final Answer:"


def has_action_marker(text: str) -> bool:
    """Whether the reply mentions an action at all, parsable or not."""
    return ACTION_MARKER in text


def has_final_answer(text: str) -> bool:
    return FINAL_ANSWER_MARKER in text


def parse_action(text: str) -> Optional[Action]:
    """
    Parses the first ``Action:`` line of a model reply.

    Accepted forms are ``Action: tool`` and ``Action: tool(argument)``. An empty
    argument, as in ``Action: tool()``, yields an action without argument.

    Args:
        text: Full text of the latest assistant message.

    Returns:
        The parsed action, or None when there is no ``Action:`` line or the
        first one is malformed (unclosed parenthesis or missing tool name).
        Use ``has_action_marker`` to tell the two apart.
    """
    for line in text.splitlines():
        stripped = line.strip()
        if not stripped.startswith(ACTION_MARKER):
            continue

        remainder = stripped[len(ACTION_MARKER) :].strip()
        open_idx = remainder.find("(")
        if open_idx == -1:
            tool, argument = remainder, None
        else:
            close_idx = remainder.find(")", open_idx + 1)
            if close_idx == -1:
                logger.debug("Unclosed argument list in action line: %r", stripped)
                return None
            tool = remainder[:open_idx].strip()
            argument = remainder[open_idx + 1 : close_idx].strip() or None

        if not tool:
            logger.debug("Action line without tool name: %r", stripped)
            return None

        return Action(tool=tool, argument=argument)

    return None
