"""Process-wide fan-out of post events to realtime subscribers"""

import asyncio
import logging
from typing import Optional

from ...domain.constants import PostActions
from ...domain.models.post_event import PostEvent
from ...domain.services.event_publisher import EventPublisher
from .broadcast_transport import BroadcastTransport

logger = logging.getLogger(__name__)


class RealtimePublisher(EventPublisher):
    """
    Fire-and-forget publisher backed by a bounded asyncio queue.

    ``publish`` only enqueues; a background task started with ``start`` hands
    each event to the transport in publish order. Events published while the
    queue is full are dropped. Nothing is persisted or replayed.
    """

    def __init__(
        self,
        transport: BroadcastTransport,
        topic: str = PostActions.TOPIC,
        max_queue_size: int = 1000,
    ) -> None:
        self.transport = transport
        self.topic = topic
        self._queue: asyncio.Queue = asyncio.Queue(maxsize=max_queue_size)
        self._task: Optional[asyncio.Task] = None

    def publish(self, event: PostEvent) -> None:
        try:
            self._queue.put_nowait(event)
        except asyncio.QueueFull:
            logger.warning(f"Realtime queue full, dropping {event.action} event")

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def start(self) -> None:
        if self.is_running:
            return
        self._task = asyncio.create_task(self._dispatch_loop())
        logger.info("Realtime publisher started")

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        logger.info("Realtime publisher stopped")

    async def flush(self) -> None:
        """
        Wait until every queued event has been handed to the transport.

        Returns immediately when the dispatch task is not running.
        """
        if not self.is_running:
            return
        await self._queue.join()

    async def _dispatch_loop(self) -> None:
        while True:
            event = await self._queue.get()
            try:
                sent_count = await self.transport.broadcast(self.topic, event.to_payload())
                logger.debug(f"Delivered {event.action} event to {sent_count} subscriber(s)")
            except asyncio.CancelledError:
                raise
            except Exception as e:
                logger.error(f"Error broadcasting {event.action} event: {e}", exc_info=True)
            finally:
                self._queue.task_done()
