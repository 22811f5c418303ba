"""Per-call cancellation and deadline context.

Hey future me - every call that can suspend takes a Context explicitly. No
ambient state, no contextvars magic. A Context is just "give up at this
monotonic time" plus "give up when this event fires". Derive new ones with
with_timeout()/with_cancel(); they never mutate the parent.

    ctx, cancel = Context.background().with_timeout(5.0).with_cancel()
    album, resp = await client.albums.get(ctx, "302127")
    # somewhere else: cancel()
"""

from __future__ import annotations

import asyncio
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, replace
from typing import Any, TypeVar

from deezerapi.domain.exceptions import ContextCancelledError, DeadlineExceededError

T = TypeVar("T")


@dataclass(frozen=True)
class Context:
    """Deadline (``time.monotonic()`` based) and cancel signal for one call."""

    deadline: float | None = None
    cancel_event: asyncio.Event | None = None

    @classmethod
    def background(cls) -> Context:
        """Context that never expires and cannot be cancelled."""
        return cls()

    def with_timeout(self, seconds: float) -> Context:
        """Derive a Context that expires ``seconds`` from now (or earlier, if the parent does)."""
        deadline = time.monotonic() + seconds
        if self.deadline is not None:
            deadline = min(deadline, self.deadline)
        return replace(self, deadline=deadline)

    def with_cancel(self) -> tuple[Context, Callable[[], None]]:
        """Derive a cancellable Context; calling the returned function cancels it.

        A parent cancel signal is not chained: the derived Context only listens
        to its own event.
        """
        event = asyncio.Event()
        return replace(self, cancel_event=event), event.set

    def remaining(self) -> float | None:
        """Seconds left before the deadline, None when there is none."""
        if self.deadline is None:
            return None
        return max(0.0, self.deadline - time.monotonic())

    def err(self) -> ContextCancelledError | DeadlineExceededError | None:
        """Why this Context is done, or None while it is still live."""
        if self.cancel_event is not None and self.cancel_event.is_set():
            return ContextCancelledError()
        if self.deadline is not None and time.monotonic() >= self.deadline:
            return DeadlineExceededError()
        return None

    async def run(self, awaitable: Awaitable[T]) -> T:
        """Await ``awaitable`` unless the Context finishes first.

        When the Context wins, the pending work is cancelled and
        ContextCancelledError / DeadlineExceededError is raised. Cancelling
        the calling task cancels the work too and propagates as usual.
        """
        err = self.err()
        if err is not None:
            # Don't leak a never-awaited coroutine.
            if asyncio.iscoroutine(awaitable):
                awaitable.close()
            raise err

        if self.deadline is None and self.cancel_event is None:
            return await awaitable

        task = asyncio.ensure_future(awaitable)
        watchers: set[asyncio.Future[Any]] = {task}
        cancel_waiter: asyncio.Future[Any] | None = None
        if self.cancel_event is not None:
            cancel_waiter = asyncio.ensure_future(self.cancel_event.wait())
            watchers.add(cancel_waiter)

        try:
            done, _ = await asyncio.wait(
                watchers,
                timeout=self.remaining(),
                return_when=asyncio.FIRST_COMPLETED,
            )
        finally:
            if cancel_waiter is not None:
                cancel_waiter.cancel()
            if not task.done():
                task.cancel()

        if task in done:
            return task.result()
        if task.done() and not task.cancelled() and task.exception() is None:
            # Finished after losing the race; nobody will see the result, so
            # release whatever it holds (an open httpx.Response, usually).
            await _discard(task.result())
        # The loop clock may wake us a hair before monotonic() agrees.
        raise self.err() or DeadlineExceededError()


async def _discard(value: Any) -> None:
    close = getattr(value, "aclose", None)
    if close is not None:
        await close()
