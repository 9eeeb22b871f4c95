from typing import Generic, Iterator, Optional, TypeVar
import threading


T = TypeVar("T")


class SnapshotChannel(Generic[T]):
    """Thread-safe, latest-wins channel. A single consumer sees the newest item."""

    def __init__(self) -> None:
        self._condition = threading.Condition()
        self._pending = False
        self._latest: Optional[T] = None
        self._published = 0
        self._closed = False

    @property
    def closed(self) -> bool:
        with self._condition:
            return self._closed

    @property
    def published(self) -> int:
        """Number of items published so far, including overwritten ones."""
        with self._condition:
            return self._published

    def publish(self, item: T) -> None:
        with self._condition:
            if self._closed:
                raise RuntimeError("publish() on a closed channel")
            self._latest = item
            self._pending = True
            self._published += 1
            self._condition.notify()

    def close(self) -> None:
        """No more items will be published. Pending items can still be read."""
        with self._condition:
            self._closed = True
            self._condition.notify_all()

    def get(self, timeout: Optional[float] = None) -> Optional[T]:
        """Block until a new item arrives or the channel closes. Returns None on close."""
        with self._condition:
            ok = self._condition.wait_for(lambda: self._pending or self._closed, timeout)
            if not ok:
                raise TimeoutError("channel get() timed out")
            if not self._pending:
                return None
            self._pending = False
            return self._latest

    def latest(self) -> Optional[T]:
        """The most recent item, without consuming it."""
        with self._condition:
            return self._latest

    def __iter__(self) -> Iterator[T]:
        while True:
            item = self.get()
            if item is None:
                return
            yield item
