"""Fan-out of fix messages from the polling thread to WebSocket clients."""

import asyncio

__all__ = ["Broadcaster"]


def _enqueue_message(queue: asyncio.Queue[str], message: str) -> None:
    """Put *message* on *queue*, dropping the oldest entry when it is full."""
    if queue.full():
        queue.get_nowait()
    queue.put_nowait(message)


class Broadcaster:
    """Hold one bounded queue per connected client.

    ``publish`` may be called from any thread; queue operations are handed
    to the event loop with ``call_soon_threadsafe``. Slow clients lose their
    oldest messages instead of stalling the polling thread.

    Args:
        loop: Event loop that owns the subscriber queues.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop) -> None:
        self._loop = loop
        self._queues: list[asyncio.Queue[str]] = []

    def subscribe(self, queue: asyncio.Queue[str]) -> None:
        self._queues.append(queue)

    def unsubscribe(self, queue: asyncio.Queue[str]) -> None:
        self._queues.remove(queue)

    @property
    def subscriber_count(self) -> int:
        return len(self._queues)

    def publish(self, message: str) -> None:
        """Deliver *message* to every subscriber queue."""
        for queue in list(self._queues):
            self._loop.call_soon_threadsafe(_enqueue_message, queue, message)
