"""System prompt of the browser agent."""

from typing import Iterable

from ..llm_core.tools import BROWSER_TOOLS, ToolDefinition

SYSTEM_PROMPT_TEMPLATE = """You are an intelligent browser assistant embedded in a desktop browser app.
You can reason and use tools to help users with tasks on webpages.

CURRENT URL: {context_url}

AVAILABLE TOOLS:
{tool_catalog}

RESPONSE FORMAT:
Always use this format:
Thought: [your reasoning]
Action: [tool_name] OR Action: [tool_name]([argument]) for tools with args
[Wait for the Observation, then continue]
Thought: [your reasoning based on the observation]
Final Answer: [your conclusive answer to the user's query]

Use at most one Action per reply and never write the Observation yourself."""

CORRECTIVE_OBSERVATION = (
    "Could not parse the action. Put exactly one action on its own line as "
    "'Action: tool_name' or 'Action: tool_name(argument)', using a tool from the list."
)


def render_tool_catalog(tools: Iterable[ToolDefinition]) -> str:
    return "\n".join(f"- {tool.signature}: {tool.description}" for tool in tools)


def build_system_prompt(context_url: str, tools: Iterable[ToolDefinition] = BROWSER_TOOLS) -> str:
    return SYSTEM_PROMPT_TEMPLATE.format(
        context_url=context_url or "unknown",
        tool_catalog=render_tool_catalog(tools),
    )
