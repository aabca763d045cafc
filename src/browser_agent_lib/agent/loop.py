"""The bounded Thought / Action / Observation reasoning loop."""

from __future__ import annotations

from typing import Iterable

from .models import AgentRunResult
from .prompt import CORRECTIVE_OBSERVATION, build_system_prompt
from ..config import MAX_ITERATIONS
from ..llm_core.base import GenericLLM
from ..llm_core.exceptions import ToolError
from ..llm_core.logger import get_logger
from ..llm_core.messages import Transcript
from ..llm_core.tools import BROWSER_TOOLS, Action, ToolDefinition, ToolDispatcher
from ..llm_core.tools.parsing import has_action_marker, has_final_answer, parse_action

logger = get_logger(__name__)


class AgentLoop:
    """Drives a language model through tool use on the page until it answers.

    Every iteration queries the model once with the full transcript. A reply
    containing ``Final Answer:`` ends the loop; a parsable ``Action:`` is
    dispatched and its result appended as an observation. The loop stops after
    ``max_iterations`` queries at the latest, which is a normal outcome.

    Model failures propagate unchanged. Tool failures are fed back to the
    model as observations so it can try something else.
    """

    def __init__(
        self,
        llm: GenericLLM,
        dispatcher: ToolDispatcher,
        max_iterations: int = MAX_ITERATIONS,
        tools: Iterable[ToolDefinition] = BROWSER_TOOLS,
    ) -> None:
        if max_iterations < 1:
            raise ValueError("max_iterations must be at least 1.")
        self.llm = llm
        self.dispatcher = dispatcher
        self.max_iterations = max_iterations
        self.tools = tuple(tools)

    async def run(self, prompt: str, context_url: str = "unknown") -> AgentRunResult:
        """
        Runs one invocation.

        Args:
            prompt: The user's natural-language request.
            context_url: URL of the page the tools act on.

        Returns:
            The run result; ``finished`` is False when the budget ran out.

        Raises:
            LLMError: If a model call fails.
        """
        transcript = Transcript(build_system_prompt(context_url, self.tools))
        transcript.add_user(prompt)

        tool_calls = 0
        finished = False
        iteration = 0

        for iteration in range(1, self.max_iterations + 1):
            logger.info("Iteration %d/%d: querying model.", iteration, self.max_iterations)
            reply = await self.llm.complete(transcript.messages)
            transcript.add_assistant(reply)

            if has_final_answer(reply):
                finished = True
                break

            action = parse_action(reply)
            if action is None:
                if has_action_marker(reply):
                    logger.warning("Model produced an unparsable action; sending format correction.")
                    transcript.add_observation(CORRECTIVE_OBSERVATION)
                else:
                    logger.debug("Reply has neither an action nor a final answer.")
                continue

            observation = await self._act(action)
            tool_calls += 1
            transcript.add_observation(observation)

        if not finished:
            logger.warning("Iteration budget of %d exhausted without a final answer.", self.max_iterations)

        return AgentRunResult(
            output=transcript.render(),
            iterations=iteration,
            tool_calls=tool_calls,
            finished=finished,
            messages=list(transcript.messages),
        )

    async def _act(self, action: Action) -> str:
        logger.info("Executing action %s.", action.render())
        try:
            return await self.dispatcher.dispatch_action(action)
        except ToolError as e:
            return str(e)
