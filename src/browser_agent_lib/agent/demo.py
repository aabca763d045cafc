"""Keyword-driven stand-in for the model, used when no credential is configured."""

from dataclasses import dataclass

from .models import AgentRunResult
from .prompt import build_system_prompt
from ..llm_core.exceptions import ToolError
from ..llm_core.logger import get_logger
from ..llm_core.messages import Transcript
from ..llm_core.tools import Action, ToolDispatcher

logger = get_logger(__name__)


@dataclass(frozen=True)
class _DemoScript:
    opening: str
    closing: str
    answer: str


_SCRIPTS = {
    "extract_prices": _DemoScript(
        opening="I need to look for any prices mentioned on this page.",
        closing="I found some pricing information on the page.",
        answer="These are the prices on {url}: {result}",
    ),
    "scrape_table": _DemoScript(
        opening="I'll extract any table data from this page.",
        closing="I extracted the table information.",
        answer="This is the table data on {url}:\n{result}",
    ),
    "search_dom": _DemoScript(
        opening="I need to understand what this page contains to answer the user's question.",
        closing="I can see what this page contains now.",
        answer="Based on my search of {url}: {result}",
    ),
}


class DemoStrategy:
    """
    Answers a request with exactly one tool call and no model.

    The tool is chosen from keywords in the request, in priority order:
    ``price``, then ``table``, then ``search`` or ``find``, else a generic
    page search. The transcript around the call is fixed text.
    """

    def __init__(self, dispatcher: ToolDispatcher) -> None:
        self.dispatcher = dispatcher

    @staticmethod
    def select_action(prompt: str) -> Action:
        text = prompt.lower()
        if "price" in text:
            return Action(tool="extract_prices")
        if "table" in text:
            return Action(tool="scrape_table")
        if "search" in text or "find" in text:
            return Action(tool="search_dom", argument="content")
        return Action(tool="search_dom", argument="html")

    async def run(self, prompt: str, context_url: str = "unknown") -> AgentRunResult:
        action = self.select_action(prompt)
        script = _SCRIPTS[action.tool]
        logger.info("Demo mode: running %s.", action.render())

        try:
            result = await self.dispatcher.dispatch_action(action)
        except ToolError as e:
            result = str(e)

        transcript = Transcript(build_system_prompt(context_url))
        transcript.add_user(prompt)
        transcript.add_assistant(f"Thought: {script.opening}\n\nAction: {action.render()}")
        transcript.add_observation(result)
        answer = script.answer.format(url=context_url or "this page", result=result)
        transcript.add_assistant(f"Thought: {script.closing}\n\nFinal Answer: {answer}")

        return AgentRunResult(
            output=transcript.render(),
            iterations=1,
            tool_calls=1,
            finished=True,
            messages=list(transcript.messages),
        )
