"""In-process stand-in for the browser page that executes tools.

The real executor lives in the GUI and answers tool requests from its own
thread. ``SimulatedPageExecutor`` behaves the same way from the agent's point
of view: it receives the request event and submits a result later, through the
inbound callback, either on the event loop or from a worker thread.
"""

from __future__ import annotations

import asyncio
import threading
from typing import Callable, Dict, Iterable, Optional

from ..llm_core.logger import get_logger
from ..llm_core.tools import ToolRequest

logger = get_logger(__name__)

DEMO_PRICE_TEXT = "Found 3 prices: $19.99, $29.99, $49.99"
DEMO_TABLE_TEXT = (
    "Table data extracted (3 rows):\n"
    "Header 1 | Header 2 | Header 3\n"
    "Value 1 | Value 2 | Value 3\n"
    "Data A | Data B | Data C"
)

SubmitCallback = Callable[[str, str], bool]


def _extract_prices(arg: Optional[str]) -> str:
    return DEMO_PRICE_TEXT


def _scrape_table(arg: Optional[str]) -> str:
    return DEMO_TABLE_TEXT


def _search_dom(arg: Optional[str]) -> str:
    keyword = arg or "content"
    return f'Found 5 matches for "{keyword}" including page headers and main text sections.'


def _click_button(arg: Optional[str]) -> str:
    if arg:
        return f"Successfully clicked element matching: {arg}"
    return "Successfully clicked element: button"


def _navigate_to(arg: Optional[str]) -> str:
    if not arg:
        return "Error: No URL provided"
    url = arg if arg.startswith("http") else f"https://{arg}"
    return f"Successfully navigated to: {url}"


_HANDLERS: Dict[str, Callable[[Optional[str]], str]] = {
    "extract_prices": _extract_prices,
    "scrape_table": _scrape_table,
    "search_dom": _search_dom,
    "click_button": _click_button,
    "navigate_to": _navigate_to,
}


class SimulatedPageExecutor:
    """
    Tool emitter that answers requests with canned page results.

    Args:
        submit: Inbound callback receiving ``(request_id, result)``.
        delay: Seconds before the result is submitted.
        threaded: Submit from a separate thread instead of the event loop.
        drop_tools: Tool names that never get an answer.
    """

    def __init__(
        self,
        submit: SubmitCallback,
        delay: float = 0.0,
        threaded: bool = False,
        drop_tools: Iterable[str] = (),
    ) -> None:
        self.submit = submit
        self.delay = delay
        self.threaded = threaded
        self.drop_tools = frozenset(drop_tools)
        self.requests: list[ToolRequest] = []

    def execute(self, request: ToolRequest) -> str:
        """Computes the canned result of a request."""
        handler = _HANDLERS.get(request.tool)
        if handler is None:
            return f"Error: Unknown tool '{request.tool}'"
        return handler(request.arg)

    def __call__(self, request: ToolRequest) -> None:
        self.requests.append(request)
        if request.tool in self.drop_tools:
            logger.debug("Dropping request %s for tool '%s'.", request.request_id, request.tool)
            return

        result = self.execute(request)
        if self.threaded:
            timer = threading.Timer(self.delay, self.submit, args=(request.request_id, result))
            timer.daemon = True
            timer.start()
        else:
            asyncio.get_running_loop().call_later(self.delay, self.submit, request.request_id, result)
