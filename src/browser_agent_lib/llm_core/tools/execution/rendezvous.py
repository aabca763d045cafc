"""Correlation-keyed rendezvous between the agent and an out-of-band tool executor.

The agent never calls tool code directly. It emits a ``ToolRequest`` event and
the executor (a browser page, usually living on a UI thread) answers later by
submitting a result under the same ``request_id``. ``ToolResultStore`` keeps
the state of every request; ``RendezvousChannel`` pairs the store with the
outbound emit primitive.
"""

from __future__ import annotations

import asyncio
import inspect
import threading
import time
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, Optional, Union

from ..models import ToolRequest, ToolResponse
from ...exceptions import ToolEmitError
from ...logger import get_logger

logger = get_logger(__name__)

DEFAULT_SETTLED_TTL = 60.0

ToolEmitter = Callable[[ToolRequest], Union[None, Awaitable[None]]]


@dataclass(frozen=True)
class Pending:
    """Request emitted, no result yet."""


@dataclass(frozen=True)
class Resolved:
    """Result delivered by the executor."""

    result: str


@dataclass(frozen=True)
class Expired:
    """Deadline passed before a result arrived."""


RequestState = Union[Pending, Resolved, Expired]


@dataclass
class _Entry:
    future: "asyncio.Future[str]"
    loop: asyncio.AbstractEventLoop
    state: RequestState = field(default_factory=Pending)
    settled_at: Optional[float] = None


class ToolResultStore:
    """
    Thread-safe map from correlation id to request state.

    Every entry is resolved at most once. Once a request is settled (its result
    consumed, or its deadline passed) the entry stays behind as a tombstone so
    late and duplicate submissions can be recognised, and is reclaimed after
    ``settled_ttl`` seconds.
    """

    def __init__(self, settled_ttl: float = DEFAULT_SETTLED_TTL, clock: Callable[[], float] = time.monotonic) -> None:
        """Initialize an empty store.

        Args:
            settled_ttl: Seconds a settled entry is kept before it is swept.
            clock: Monotonic time source, injectable for tests.
        """
        self._entries: Dict[str, _Entry] = {}
        self._lock = threading.Lock()
        self._settled_ttl = settled_ttl
        self._clock = clock

    def register(self, request_id: str) -> "asyncio.Future[str]":
        """
        Creates the pending entry for a new request.

        Must be called from the event loop that will await the returned future.

        Raises:
            ValueError: If the id is already known to the store.
        """
        loop = asyncio.get_running_loop()
        future: asyncio.Future[str] = loop.create_future()
        with self._lock:
            self._sweep_locked()
            if request_id in self._entries:
                raise ValueError(f"Request id '{request_id}' is already registered.")
            self._entries[request_id] = _Entry(future=future, loop=loop)
        logger.debug("Registered pending tool request %s.", request_id)
        return future

    def resolve(self, request_id: str, result: str) -> bool:
        """
        Delivers a result for a pending request. Safe to call from any thread.

        Returns:
            True if a pending request was resolved, False if the submission was
            unknown, late or a duplicate and has been ignored.
        """
        with self._lock:
            self._sweep_locked()
            entry = self._entries.get(request_id)
            if entry is None:
                logger.warning("Ignoring tool result for unknown request %s.", request_id)
                return False
            if not isinstance(entry.state, Pending):
                logger.warning(
                    "Ignoring tool result for request %s: already %s.",
                    request_id,
                    type(entry.state).__name__.lower(),
                )
                return False
            entry.state = Resolved(result)
            future, loop = entry.future, entry.loop
            if loop.is_closed():
                # Nobody will consume the result; let the sweep reclaim it.
                entry.settled_at = self._clock()
                logger.debug("Event loop of request %s is closed, result kept until swept.", request_id)
                return True

        try:
            loop.call_soon_threadsafe(_set_future_result, future, result)
        except RuntimeError:
            # Loop closed between the check above and the call.
            self._settle(request_id)
            logger.debug("Event loop of request %s is closed, result kept until swept.", request_id)
        logger.debug("Resolved tool request %s.", request_id)
        return True

    def _settle(self, request_id: str) -> None:
        with self._lock:
            entry = self._entries.get(request_id)
            if entry is not None and entry.settled_at is None:
                entry.settled_at = self._clock()

    def consume(self, request_id: str) -> Optional[str]:
        """
        Marks a resolved request as read and returns its result.

        Returns:
            The result, or None if the request is not resolved.
        """
        with self._lock:
            entry = self._entries.get(request_id)
            if entry is None or not isinstance(entry.state, Resolved):
                return None
            if entry.settled_at is None:
                entry.settled_at = self._clock()
            return entry.state.result

    def expire(self, request_id: str) -> Optional[str]:
        """
        Settles a request whose deadline has passed.

        If the result arrived between the deadline and this call it is consumed
        and returned instead, so no answer is lost to that race.

        Returns:
            The result that raced in, or None if the request is now expired.
        """
        with self._lock:
            entry = self._entries.get(request_id)
            if entry is None:
                return None
            if entry.settled_at is None:
                entry.settled_at = self._clock()
            if isinstance(entry.state, Resolved):
                return entry.state.result
            entry.state = Expired()
            future = entry.future
        if not future.done():
            future.cancel()
        logger.debug("Expired tool request %s.", request_id)
        return None

    def state(self, request_id: str) -> Optional[RequestState]:
        """Current state of a request, or None when unknown or already reclaimed."""
        with self._lock:
            entry = self._entries.get(request_id)
            return None if entry is None else entry.state

    def sweep(self) -> int:
        """Reclaims settled entries older than the TTL.

        Returns:
            Number of removed entries.
        """
        with self._lock:
            return self._sweep_locked()

    def _sweep_locked(self) -> int:
        now = self._clock()
        stale = [
            request_id
            for request_id, entry in self._entries.items()
            if entry.settled_at is not None and now - entry.settled_at >= self._settled_ttl
        ]
        for request_id in stale:
            del self._entries[request_id]
        if stale:
            logger.debug("Reclaimed %d settled tool request(s).", len(stale))
        return len(stale)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


def _set_future_result(future: "asyncio.Future[str]", result: str) -> None:
    if not future.done():
        future.set_result(result)


class RendezvousChannel:
    """
    Bridges the agent to an event-driven executor it cannot call directly.

    ``open`` registers the request and emits it; the executor later calls
    ``submit`` with the same correlation id. No ordering is guaranteed between
    requests beyond each id being resolved at most once.
    """

    def __init__(self, emitter: ToolEmitter, store: Optional[ToolResultStore] = None) -> None:
        """Initialize the channel.

        Args:
            emitter: Outbound primitive handing a request to the executor. May be
                a plain function or a coroutine function.
            store: Result store to use. A private store is created when omitted.
        """
        self.emitter = emitter
        self.store = store if store is not None else ToolResultStore()

    async def open(self, request: ToolRequest) -> "asyncio.Future[str]":
        """
        Registers and emits a request.

        Returns:
            A future completed with the result once the executor submits it.

        Raises:
            ToolEmitError: If the emitter failed. The request is expired.
        """
        future = self.store.register(request.request_id)
        logger.debug("Emitting tool request %s.", request.to_event())
        try:
            outcome: Any = self.emitter(request)
            if inspect.isawaitable(outcome):
                await outcome
        except Exception as e:
            self.store.expire(request.request_id)
            msg = f"Failed to emit tool request for '{request.tool}': {e}"
            logger.error(msg)
            raise ToolEmitError(msg) from e
        return future

    def submit(self, request_id: str, result: str) -> bool:
        """Inbound entry point for executor results. Never raises for late or duplicate ids."""
        return self.store.resolve(request_id, result)

    def submit_event(self, payload: Dict[str, Any]) -> bool:
        """Accepts a raw ``{request_id, result}`` payload.

        Malformed payloads are logged and ignored.
        """
        try:
            response = ToolResponse.from_event(payload)
        except ValueError as e:
            logger.warning("Ignoring malformed tool response %r: %s", payload, e)
            return False
        return self.submit(response.request_id, response.result)
