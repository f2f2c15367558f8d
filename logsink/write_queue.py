"""
Purpose: Ordered, non-blocking writes to an already-open file descriptor.
Description: Serializes buffers onto a single background writer thread so writes land in
            the order they were enqueued, records failures without stopping the queue, and
            hands out wait handles that settle once every write enqueued before them is done.
Key Classes: WriteQueue, QueueState

AIDEV-NOTE: The descriptor is borrowed. Nothing here closes it; whoever opened it owns it.
"""

from __future__ import annotations

import enum
import logging
import os
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import List, Optional, Tuple

from .errors import LogSinkError
from .log_utils import get_logger, log_event

_LOG = get_logger("logsink.write_queue")


class QueueState(str, enum.Enum):
    IDLE = "idle"
    DRAINING = "draining"
    FAULTED = "faulted"


class WriteQueue:
    """
    FIFO write pipeline for one descriptor.

    Every enqueued buffer gets a sequence number. A wait handle covers the sequence
    range `[floor, end)`: `end` is the next sequence number when the handle is
    requested and `floor` is the end of the last handle that already settled, so a
    failure reported once is not reported again to handles requested afterwards.
    """

    def __init__(self, fd: int):
        self.fd = fd
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="logsink-writer")
        self._lock = threading.Lock()
        self._next_seq = 0
        self._outstanding = 0
        self._tail: Optional[Future] = None
        self._failures: List[Tuple[int, BaseException]] = []
        self._floor = 0
        self._live_floors: List[int] = []
        self._closed = False

    @property
    def outstanding(self) -> int:
        with self._lock:
            return self._outstanding

    @property
    def first_error(self) -> Optional[BaseException]:
        """First failure not yet surfaced by a settled wait handle."""
        with self._lock:
            for seq, exc in self._failures:
                if seq >= self._floor:
                    return exc
        return None

    @property
    def state(self) -> QueueState:
        with self._lock:
            if self._outstanding == 0:
                return QueueState.IDLE
            if any(seq >= self._floor for seq, _ in self._failures):
                return QueueState.FAULTED
            return QueueState.DRAINING

    def enqueue(self, data: bytes) -> Future:
        """Submit `data` for writing and return its pending-write future without waiting."""
        rejected: Optional[BaseException] = None
        with self._lock:
            seq = self._next_seq
            self._next_seq += 1
            previous = self._tail
            if self._closed:
                rejected = LogSinkError(f"write queue for descriptor {self.fd} is shut down")
                pending: Future = Future()
            else:
                self._outstanding += 1
                pending = self._executor.submit(self._write, seq, data)
            self._tail = pending
        if rejected is not None:
            # keep completion order behind writes still draining after shutdown(wait=False)
            if previous is None:
                self._reject(seq, pending, rejected)
            else:
                previous.add_done_callback(lambda _f: self._reject(seq, pending, rejected))
        return pending

    def _reject(self, seq: int, pending: Future, exc: BaseException) -> None:
        with self._lock:
            self._record_failure(seq, exc)
        pending.set_exception(exc)

    def _record_failure(self, seq: int, exc: BaseException) -> None:
        # caller holds the lock
        self._failures.append((seq, exc))
        self._prune_failures()

    def _prune_failures(self) -> None:
        # a handle only needs the first failure at or after its floor
        floors = set(self._live_floors)
        floors.add(self._floor)
        needed = set()
        for floor in floors:
            first = min((seq for seq, _ in self._failures if seq >= floor), default=None)
            if first is not None:
                needed.add(first)
        self._failures = [(seq, exc) for seq, exc in self._failures if seq in needed]

    def _write(self, seq: int, data: bytes) -> None:
        view = memoryview(data)
        try:
            while view:
                written = os.write(self.fd, view)
                view = view[written:]
        except Exception as exc:
            # the stored traceback keeps this frame alive; drop the buffer
            view.release()
            del view, data
            with self._lock:
                self._record_failure(seq, exc)
            log_event(_LOG, "write_failed", level=logging.DEBUG,
                      details={"fd": self.fd, "seq": seq, "error": repr(exc)})
            raise
        finally:
            with self._lock:
                self._outstanding -= 1

    def wait_handle(self) -> "Future[None]":
        """
        Return a future for every write enqueued so far.

        It resolves with `None` once they are all done, or fails with the first
        error among them. With nothing pending it is already resolved.
        """
        handle: Future = Future()
        with self._lock:
            floor, end, tail = self._floor, self._next_seq, self._tail
            self._live_floors.append(floor)
        if tail is None:
            self._settle(handle, floor, end)
        else:
            # runs inline when the tail is already done
            tail.add_done_callback(lambda _f: self._settle(handle, floor, end))
        return handle

    def _settle(self, handle: Future, floor: int, end: int) -> None:
        with self._lock:
            error = next((exc for seq, exc in self._failures if floor <= seq < end), None)
            self._live_floors.remove(floor)
            self._floor = max(self._floor, end)
            self._prune_failures()
        if error is None:
            handle.set_result(None)
        else:
            handle.set_exception(error)

    def shutdown(self, wait: bool = True) -> None:
        """Stop the writer thread. Later writes fail through the wait handle."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
        self._executor.shutdown(wait=wait)
        log_event(_LOG, "queue_shutdown", level=logging.DEBUG, details={"fd": self.fd, "wait": wait})
