"""
Paced delivery of traversal events for stepwise playback.

The expression core produces its event sequence synchronously and with no
timing attached. This module is the consumer side: it hands events to a
callback one at a time with a delay in between, and can be cancelled
between any two events. Events already delivered are never retracted.
"""

import asyncio
from typing import AsyncIterator, Awaitable, Callable, List, Optional, Union

from .config import AnimationConfig, DEFAULT_ANIMATION_CONFIG
from .expression_tree.core.node import Node
from .expression_tree.events import TraversalEvent
from .expression_tree.traversal import iter_events
from .logging_system import log_debug

EventCallback = Callable[[TraversalEvent], Union[None, Awaitable[None]]]


async def stream_events(root: Optional[Node], delay: float = 0.0) -> AsyncIterator[TraversalEvent]:
    """
    Yield the postorder events of a tree, sleeping ``delay`` seconds before each one.

    Closing the generator (or cancelling the task iterating it) stops the
    walk; the remaining events are never produced.

    Args:
        root: Root of the tree to walk (None yields nothing)
        delay: Seconds to wait before delivering each event

    Yields:
        TraversalEvent objects in postorder emission order
    """
    for event in iter_events(root):
        if delay > 0:
            await asyncio.sleep(delay)
        yield event


class StepAnimator:
    """
    Drives a callback with a tree's traversal events at a fixed pace.

    The callback may be a plain function or a coroutine function. A renderer
    can use ``event.node`` to highlight the node the event refers to.
    """

    def __init__(self, on_event: EventCallback, config: Optional[AnimationConfig] = None):
        self.on_event = on_event
        self.config = config or DEFAULT_ANIMATION_CONFIG
        self.delivered: List[TraversalEvent] = []
        self._cancelled = False
        self._task: Optional[asyncio.Task] = None

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def current_node(self) -> Optional[Node]:
        """Node referenced by the most recently delivered event"""
        return self.delivered[-1].node if self.delivered else None

    def cancel(self):
        """Stop before the next event; safe to call from the callback itself."""
        self._cancelled = True
        try:
            current = asyncio.current_task()
        except RuntimeError:
            current = None
        # A callback cancelling its own playback just stops at the next event
        if self._task is not None and self._task is not current and not self._task.done():
            self._task.cancel()

    async def play(self, root: Optional[Node]) -> List[TraversalEvent]:
        """
        Deliver every event of ``root`` unless cancelled first.

        Returns:
            The events delivered before completion or cancellation
        """
        self._cancelled = False
        self.delivered = []
        self._task = asyncio.current_task()
        stream = stream_events(root, self.config.step_delay)
        try:
            async for event in stream:
                if self._cancelled:
                    break
                self.delivered.append(event)
                outcome = self.on_event(event)
                if asyncio.iscoroutine(outcome):
                    await outcome
        except asyncio.CancelledError:
            if not self._cancelled:
                raise
            task = asyncio.current_task()
            if task is not None and hasattr(task, "uncancel"):
                task.uncancel()
            log_debug(f"Animation cancelled after {len(self.delivered)} event(s)")
        finally:
            self._task = None
            await stream.aclose()
        return self.delivered
