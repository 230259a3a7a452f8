from __future__ import annotations

import asyncio
import logging
from collections import defaultdict
from typing import Any, Awaitable, Callable, Dict, List, TypeAlias

EventPayload: TypeAlias = Dict[str, Any]
EventHandler: TypeAlias = Callable[[EventPayload], Awaitable[None]]


class EventBus:
    """Async pub/sub hub carrying user intents and change notices."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, List[EventHandler]] = defaultdict(list)
        self._logger = logging.getLogger(__name__)
        self._pending_tasks: set[asyncio.Task] = set()

    async def subscribe(self, topic: str, handler: EventHandler) -> None:
        """Register an async handler for a topic."""
        if handler not in self._subscribers[topic]:
            self._subscribers[topic].append(handler)

    async def unsubscribe(self, topic: str, handler: EventHandler) -> None:
        """Remove a handler from a topic."""
        if handler in self._subscribers.get(topic, []):
            self._subscribers[topic].remove(handler)

    def has_subscribers(self, topic: str) -> bool:
        return bool(self._subscribers.get(topic))

    async def publish(self, topic: str, payload: EventPayload) -> None:
        """Publish an event to all subscribers of ``topic``.

        Handlers run as tasks on the current loop in registration order; use
        :meth:`wait_until_idle` to wait for them.
        """
        handlers = list(self._subscribers.get(topic, []))

        if not handlers:
            # Change notices often have no listener yet
            self._logger.debug(f"No subscribers for topic '{topic}'")
            return

        self._logger.debug(f"Publishing to topic '{topic}' with {len(handlers)} handler(s)")
        for handler in handlers:
            task = asyncio.create_task(self._safe_dispatch(topic, handler, payload))
            self._pending_tasks.add(task)
            task.add_done_callback(self._pending_tasks.discard)

    async def wait_until_idle(self, timeout: float = 10.0) -> bool:
        """Wait for all pending handlers, including ones they spawn.

        Args:
            timeout: Maximum time to wait in seconds

        Returns:
            True if all tasks completed, False if the timeout was reached
        """
        if not self._pending_tasks:
            return True

        loop = asyncio.get_running_loop()
        start_time = loop.time()
        while self._pending_tasks:
            if loop.time() - start_time > timeout:
                self._logger.warning(
                    f"EventBus: Timeout reached while waiting for {len(self._pending_tasks)} tasks"
                )
                return False
            await asyncio.gather(*list(self._pending_tasks), return_exceptions=True)
            # Let freshly published handlers register
            await asyncio.sleep(0)

        return True

    async def _safe_dispatch(
        self,
        topic: str,
        handler: EventHandler,
        payload: EventPayload,
    ) -> None:
        """Keep one handler failure from stopping the bus."""
        handler_name = getattr(handler, "__name__", str(handler))
        self._logger.debug(f"Dispatching to handler '{handler_name}' for topic '{topic}'")
        try:
            await handler(payload)
        except Exception as exc:
            self._logger.exception(
                f"EventBus handler error in '{handler_name}' for topic '{topic}'",
                exc_info=exc,
            )

    def clear(self) -> None:
        """Remove all subscriptions."""
        self._subscribers.clear()
