from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod

from inputsview.core.topic import Topic

logger = logging.getLogger(__name__)


class Store[T](Topic[T], ABC):
    """A topic that knows how to fetch its own current value.

    request_refresh() is fire-and-forget: by default the fetch runs on a daemon
    thread and the result is sent to subscribers from there. Each request is
    numbered; a result is dropped if a later request has already been sent, so
    overlapping refreshes never leave subscribers on stale data. A failed fetch
    is logged and recorded in last_error; subscribers receive nothing.
    """

    def __init__(self, *, name: str | None = None, background: bool = True) -> None:
        super().__init__(name=name)
        self._background = background
        self._error: str | None = None
        self._refresh_lock = threading.RLock()
        self._requested = 0
        self._delivered = 0
        self._threads: list[threading.Thread] = []

    @property
    def last_error(self) -> str | None:
        return self._error

    @abstractmethod
    def fetch(self) -> T: ...

    def request_refresh(self) -> None:
        if self.closed:
            return
        with self._refresh_lock:
            self._requested += 1
            generation = self._requested
        if not self._background:
            self._safe_refresh(generation)
            return
        thread = threading.Thread(
            target=self._safe_refresh, args=(generation,), name=f"{self.name}-refresh-{generation}", daemon=True
        )
        with self._refresh_lock:
            self._threads = [t for t in self._threads if t.is_alive()]
            self._threads.append(thread)
        thread.start()

    def join(self, timeout: float | None = None) -> None:
        """Waits for every pending background refresh."""
        with self._refresh_lock:
            threads = list(self._threads)
        for thread in threads:
            thread.join(timeout)

    def _safe_refresh(self, generation: int) -> None:
        try:
            item = self.fetch()
            with self._refresh_lock:
                if generation < self._delivered:
                    logger.debug("%s: dropping refresh %d, %d already sent", self.name, generation, self._delivered)
                    return
                self._delivered = generation
                self._error = None
                self.send(item)
        except Exception as e:
            self._error = f"{type(e).__name__}: {e}"
            logger.exception("%s: refresh %d failed", self.name, generation)
