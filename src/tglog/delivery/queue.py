"""Delivery – bounded DeliveryQueue and its single DeliveryWorker.

Producers call :meth:`DeliveryQueue.submit` from any thread; it never blocks.
Each submit schedules one enqueue task on the worker's event loop, and at
most ``max_pending`` such tasks may be in flight: beyond that the request is
dropped and counted.  Enqueue tasks wait while the channel is full.

Ordering caveat: requests are delivered in the order they enter the channel,
which is not necessarily the order in which log calls were made on different
threads.  Capacity caveat: ``maxsize`` bounds the channel depth only; the
producer-side backlog is bounded separately by ``max_pending``.
"""
from __future__ import annotations

import asyncio
import threading
from collections.abc import Sequence
from typing import Any, Callable

from tglog.config.validation import InvalidSettingValueError
from tglog.delivery.request import DeliveryRequest
from tglog.delivery.transport import BotTransport, ChatId
from tglog.kernel.errors import DeliveryError
from tglog.observability.logging.diagnostics import get_logger

DEFAULT_QUEUE_SIZE = 100
DEFAULT_FAILURE_DELAY = 60.0
DEFAULT_MAX_PENDING = 1000

log = get_logger(__name__)


class DeliveryQueue:
    """Bounded FIFO between log call sites and one delivery worker.

    The worker sends each request to every recipient in order.  A failed
    send is not retried: the worker sleeps ``failure_delay`` seconds and then
    continues with the next recipient or request, stalling everything queued
    behind it for that time.

    Parameters
    ----------
    transport:
        Bot transport used for every send.
    recipients:
        Non-empty ordered chat ids; one send per recipient per request.
    maxsize:
        Channel capacity.
    failure_delay:
        Seconds to pause after a failed send.
    max_pending:
        Cap on enqueue tasks in flight (waiting for channel space).
    """

    def __init__(
        self,
        transport: BotTransport,
        recipients: Sequence[ChatId],
        *,
        maxsize: int = DEFAULT_QUEUE_SIZE,
        failure_delay: float = DEFAULT_FAILURE_DELAY,
        max_pending: int = DEFAULT_MAX_PENDING,
        close_transport: bool = False,
    ) -> None:
        if not recipients:
            raise InvalidSettingValueError("chat_ids", list(recipients), "at least one chat id is required")
        if maxsize < 1:
            raise InvalidSettingValueError("queue_size", maxsize, "must be positive")
        self._transport = transport
        self._recipients: tuple[ChatId, ...] = tuple(recipients)
        self._maxsize = maxsize
        self._failure_delay = failure_delay
        self._max_pending = max_pending
        self._close_transport = close_transport
        self._queue: asyncio.Queue[DeliveryRequest] = asyncio.Queue(maxsize=maxsize)

        self._loop: asyncio.AbstractEventLoop | None = None
        self._thread: threading.Thread | None = None
        self._worker: asyncio.Task[None] | None = None
        self._tasks: set[asyncio.Task[None]] = set()
        self._lock = threading.Lock()
        self._pending = 0
        self._closed = False

        self.delivered = 0
        self.failed = 0
        self.dropped = 0

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def transport(self) -> BotTransport:
        return self._transport

    @property
    def recipients(self) -> tuple[ChatId, ...]:
        return self._recipients

    @property
    def maxsize(self) -> int:
        return self._maxsize

    @property
    def failure_delay(self) -> float:
        return self._failure_delay

    @property
    def qsize(self) -> int:
        return self._queue.qsize()

    @property
    def pending(self) -> int:
        """Enqueue tasks scheduled but not yet placed in the channel."""
        return self._pending

    @property
    def started(self) -> bool:
        return self._loop is not None

    @property
    def closed(self) -> bool:
        return self._closed

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self, loop: asyncio.AbstractEventLoop | None = None) -> "DeliveryQueue":
        """Spawn the worker.

        Runs on *loop* if given, else on the caller's running loop, else on
        a private event loop in a daemon thread.  Calling it again is a no-op.
        """
        if self._loop is not None:
            return self
        if loop is None:
            try:
                loop = asyncio.get_running_loop()
            except RuntimeError:
                loop = None
        if loop is None:
            self._start_thread()
        else:
            self._loop = loop
            self._call_in_loop(self._spawn_worker)
        return self

    def _start_thread(self) -> None:
        loop = asyncio.new_event_loop()

        def run() -> None:
            asyncio.set_event_loop(loop)
            try:
                loop.run_forever()
            finally:
                loop.run_until_complete(loop.shutdown_asyncgens())
                loop.close()

        self._loop = loop
        self._thread = threading.Thread(target=run, name="tglog-delivery", daemon=True)
        self._thread.start()
        loop.call_soon_threadsafe(self._spawn_worker)

    def _spawn_worker(self) -> None:
        assert self._loop is not None
        self._worker = self._loop.create_task(self._run(), name="tglog-delivery-worker")

    async def stop(self, timeout: float = 5.0) -> None:
        """Wait up to *timeout* seconds for the channel to drain, then stop the worker.

        Requests still queued afterwards are discarded.
        """
        if self._loop is None or self._closed:
            return
        self._closed = True
        if self._in_own_loop():
            await self._shutdown(timeout)
        else:
            await asyncio.wrap_future(asyncio.run_coroutine_threadsafe(self._shutdown(timeout), self._loop))
        self._stop_thread(timeout)

    def close(self, timeout: float = 5.0) -> None:
        """Synchronous :meth:`stop` for call sites outside the worker's loop.

        From inside the worker's own loop it cannot wait, so the worker is
        cancelled without draining.
        """
        if self._loop is None or self._closed:
            return
        self._closed = True
        if self._in_own_loop():
            self._abort()
            return
        if self._thread is None:
            try:
                self._loop.call_soon_threadsafe(self._abort)
            except RuntimeError:
                pass  # loop already closed
            return
        future = asyncio.run_coroutine_threadsafe(self._shutdown(timeout), self._loop)
        try:
            future.result(timeout + 1.0)
        except TimeoutError:
            log.warning("tglog.delivery.close_timeout", timeout=timeout, queued=self.qsize)
        self._stop_thread(timeout)

    async def _shutdown(self, timeout: float) -> None:
        loop = asyncio.get_running_loop()
        deadline = loop.time() + timeout
        if self._tasks:
            await asyncio.wait(set(self._tasks), timeout=timeout)
        try:
            await asyncio.wait_for(self._queue.join(), timeout=max(0.0, deadline - loop.time()))
        except asyncio.TimeoutError:
            log.warning("tglog.delivery.discarded", queued=self._queue.qsize(), pending=self._pending)
        tasks = self._cancel_all()
        await asyncio.gather(*tasks, return_exceptions=True)
        await self._release_transport()

    def _abort(self) -> None:
        assert self._loop is not None
        self._cancel_all()
        if self._close_transport:
            task = self._loop.create_task(self._release_transport())
            self._tasks.add(task)
            task.add_done_callback(self._tasks.discard)

    async def _release_transport(self) -> None:
        aclose = getattr(self._transport, "aclose", None)
        if not self._close_transport or aclose is None:
            return
        try:
            await aclose()
        except Exception as exc:  # noqa: BLE001
            log.warning("tglog.delivery.transport_close_failed", error=repr(exc))

    def _cancel_all(self) -> list[asyncio.Task[None]]:
        tasks = [t for t in (self._worker, *self._tasks) if t is not None]
        for task in tasks:
            task.cancel()
        return tasks

    def _stop_thread(self, timeout: float) -> None:
        if self._thread is None or self._loop is None:
            return
        self._loop.call_soon_threadsafe(self._loop.stop)
        self._thread.join(timeout)

    # ------------------------------------------------------------------
    # Producer side
    # ------------------------------------------------------------------

    def submit(self, request: DeliveryRequest) -> bool:
        """Schedule *request* for delivery without blocking the caller.

        Returns ``False`` when the request was dropped: the queue is not
        started or already closed, or ``max_pending`` enqueues are in flight.
        """
        if self._loop is None or self._closed:
            self._drop("not_running")
            return False
        with self._lock:
            admitted = self._pending < self._max_pending
            if admitted:
                self._pending += 1
        if not admitted:
            self._drop("max_pending")
            return False
        try:
            self._call_in_loop(self._spawn_enqueue, request)
        except RuntimeError:
            with self._lock:
                self._pending -= 1
            self._drop("loop_closed")
            return False
        return True

    async def enqueue(self, request: DeliveryRequest) -> None:
        """Put *request* in the channel, waiting while it is full."""
        await self._queue.put(request)

    def _spawn_enqueue(self, request: DeliveryRequest) -> None:
        assert self._loop is not None
        task = self._loop.create_task(self._enqueue_pending(request))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _enqueue_pending(self, request: DeliveryRequest) -> None:
        try:
            await self.enqueue(request)
        finally:
            with self._lock:
                self._pending -= 1

    def _drop(self, reason: str) -> None:
        with self._lock:
            self.dropped += 1
            dropped = self.dropped
        log.warning("tglog.delivery.dropped", reason=reason, dropped=dropped)

    # ------------------------------------------------------------------
    # Consumer side
    # ------------------------------------------------------------------

    async def _run(self) -> None:
        """Worker loop: one request at a time, strictly FIFO."""
        while True:
            request = await self._queue.get()
            try:
                await self._deliver(request)
            finally:
                self._queue.task_done()

    async def _deliver(self, request: DeliveryRequest) -> None:
        for chat_id in self._recipients:
            if await self._send(chat_id, request):
                self.delivered += 1
                continue
            self.failed += 1
            await asyncio.sleep(self._failure_delay)

    async def _send(self, chat_id: ChatId, request: DeliveryRequest) -> bool:
        try:
            result = await self._transport.send(chat_id, request.text, request.parse_mode)
        except Exception as exc:  # noqa: BLE001 – transport failures never reach log call sites
            error = DeliveryError(chat_id, str(exc) or type(exc).__name__, cause=exc)
        else:
            if result.success:
                return True
            error = DeliveryError(chat_id, result.error)
        log.warning("tglog.delivery.failed", delay=self._failure_delay, **error.to_dict())
        return False

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _in_own_loop(self) -> bool:
        try:
            return asyncio.get_running_loop() is self._loop
        except RuntimeError:
            return False

    def _call_in_loop(self, fn: Callable[..., Any], *args: Any) -> None:
        assert self._loop is not None
        if self._in_own_loop():
            fn(*args)
        else:
            self._loop.call_soon_threadsafe(fn, *args)

    def __repr__(self) -> str:
        return (
            f"DeliveryQueue(recipients={list(self._recipients)!r}, maxsize={self._maxsize}, "
            f"qsize={self.qsize}, pending={self._pending})"
        )


__all__ = [
    "DEFAULT_FAILURE_DELAY",
    "DEFAULT_MAX_PENDING",
    "DEFAULT_QUEUE_SIZE",
    "DeliveryQueue",
]
