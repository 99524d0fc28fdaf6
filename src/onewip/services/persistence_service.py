"""Background writer that persists board snapshots in submission order."""

from __future__ import annotations

import logging
import queue
import threading
import time

from ..models import BoardSnapshot
from ..repositories import BoardRepositoryProtocol, PersistenceError

logger = logging.getLogger(__name__)

# Sentinel put on the queue by close(); the worker exits after reaching it.
_STOP = object()


class PersistenceWorker:
    """Writes snapshots to a repository on a dedicated thread.

    The interactive loop only ever hands over immutable snapshots; the
    worker owns all storage I/O. ``submit`` blocks while the queue is full
    rather than dropping a snapshot, and ``close`` waits for every queued
    snapshot to be written.
    """

    def __init__(
        self,
        repository: BoardRepositoryProtocol,
        max_pending: int = 100,
        retries: int = 3,
        retry_delay: float = 0.1,
    ) -> None:
        self.repository = repository
        self._queue: queue.Queue[object] = queue.Queue(maxsize=max_pending)
        self._retries = retries
        self._retry_delay = retry_delay
        self._thread = threading.Thread(target=self._run, name="onewip-persistence", daemon=True)
        self._lock = threading.Lock()
        self._last_error: Exception | None = None
        self._saved_count = 0
        self._closed = False

    def start(self) -> PersistenceWorker:
        """Start the writer thread."""
        self._thread.start()
        return self

    def submit(self, snapshot: BoardSnapshot) -> None:
        """Queue a snapshot for writing.

        Raises:
            RuntimeError: if the worker has been closed.
        """
        if self._closed:
            raise RuntimeError("persistence worker is closed")
        self._queue.put(snapshot)

    def close(self) -> None:
        """Stop accepting snapshots and wait until all queued ones are written."""
        if self._closed:
            return
        self._closed = True
        self._queue.put(_STOP)
        if self._thread.is_alive():
            self._thread.join()
        logger.debug("Persistence worker stopped after %d saves", self._saved_count)

    def __enter__(self) -> PersistenceWorker:
        return self.start()

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def saved_count(self) -> int:
        """Number of snapshots written successfully."""
        with self._lock:
            return self._saved_count

    def take_error(self) -> Exception | None:
        """Return the most recent save failure and clear it."""
        with self._lock:
            error, self._last_error = self._last_error, None
            return error

    def _run(self) -> None:
        while True:
            item = self._queue.get()
            try:
                if item is _STOP:
                    return
                if isinstance(item, BoardSnapshot):
                    self._write(item)
            finally:
                self._queue.task_done()

    def _write(self, snapshot: BoardSnapshot) -> None:
        attempts = self._retries + 1
        for attempt in range(1, attempts + 1):
            try:
                self.repository.save(snapshot)
            except PersistenceError as e:
                if attempt < attempts:
                    logger.warning("Save failed (attempt %d/%d): %s", attempt, attempts, e)
                    time.sleep(self._retry_delay * attempt)
                    continue
                logger.error("Save failed after %d attempts: %s", attempts, e)
                with self._lock:
                    self._last_error = e
                return
            except Exception as e:
                logger.exception("Unexpected error while saving board")
                with self._lock:
                    self._last_error = e
                return
            with self._lock:
                self._saved_count += 1
            return
