from typing import Optional
from pydantic import BaseModel


class ToolDefinition(BaseModel):
    """
    Describes a tool the external page executor offers.

    The core never runs tools itself. Definitions only feed the system prompt
    so the model knows which names it may put on an ``Action:`` line.

    Attributes:
        name: The unique name of the tool.
        description: A brief description of what the tool does.
        argument: Name of the single string argument, if the tool takes one.
        argument_required: Whether the argument must be given.
    """

    name: str
    description: str
    argument: Optional[str] = None
    argument_required: bool = False

    @property
    def signature(self) -> str:
        if self.argument is None:
            return self.name
        if self.argument_required:
            return f"{self.name}({self.argument})"
        return f"{self.name}({self.argument}?)"


BROWSER_TOOLS = (
    ToolDefinition(name="extract_prices", description="Extract all prices from the current page"),
    ToolDefinition(
        name="search_dom",
        description="Find text matching a keyword and return context",
        argument="keyword",
        argument_required=True,
    ),
    ToolDefinition(
        name="click_button",
        description="Click the first visible button on the page, or the first element matching a CSS selector",
        argument="selector",
    ),
    ToolDefinition(name="scrape_table", description="Extract and return table data"),
    ToolDefinition(
        name="navigate_to",
        description="Load another URL in the page",
        argument="url",
        argument_required=True,
    ),
)
