"""Send a tool request through the rendezvous channel and wait for its result."""

from __future__ import annotations

import asyncio
from typing import Optional

from .rendezvous import RendezvousChannel
from ..models import Action, ToolRequest
from ...exceptions import ToolTimeoutError
from ...logger import get_logger

logger = get_logger(__name__)

# 50 attempts at 100 ms in the polling design this replaces.
DEFAULT_TOOL_TIMEOUT = 5.0


class ToolDispatcher:
    """Executes tools on the external executor with a hard deadline per call."""

    def __init__(self, channel: RendezvousChannel, timeout: float = DEFAULT_TOOL_TIMEOUT) -> None:
        """
        Args:
            channel: Channel used to emit requests and receive results.
            timeout: Seconds to wait for each result before giving up.
        """
        if timeout <= 0:
            raise ValueError("Tool timeout must be positive.")
        self.channel = channel
        self.timeout = timeout

    async def dispatch(self, tool: str, argument: Optional[str] = None) -> str:
        """
        Runs one tool and suspends until its result arrives.

        Args:
            tool: Tool name, opaque to the dispatcher.
            argument: Optional single string argument.

        Returns:
            The result string submitted by the executor.

        Raises:
            ToolTimeoutError: If no result arrived within ``timeout`` seconds.
            ToolEmitError: If the request could not be emitted.
        """
        request = ToolRequest(tool=tool, arg=argument)
        store = self.channel.store
        logger.info("Dispatching tool '%s' (request %s).", request.tool, request.request_id)

        future = await self.channel.open(request)
        try:
            result = await asyncio.wait_for(future, timeout=self.timeout)
        except asyncio.TimeoutError:
            late = store.expire(request.request_id)
            if late is not None:
                logger.debug("Result for request %s arrived at the deadline.", request.request_id)
                return late
            error = ToolTimeoutError(request.tool, request.request_id, self.timeout)
            logger.warning(str(error))
            raise error from None
        except asyncio.CancelledError:
            store.expire(request.request_id)
            raise

        store.consume(request.request_id)
        logger.debug("Tool '%s' returned %d character(s).", request.tool, len(result))
        return result

    async def dispatch_action(self, action: Action) -> str:
        """Runs a parsed action; same errors as ``dispatch``."""
        return await self.dispatch(action.tool, action.argument)
