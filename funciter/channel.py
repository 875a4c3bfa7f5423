"""A closable, thread-safe channel and iterators that read from or feed into one."""

from __future__ import annotations

import threading
from collections import deque
from typing import Any, Deque, Generic, Iterator as _PyIterator, TypeVar

from .iterators import Iterator
from .option import Option, none, some

T = TypeVar("T")


class Channel(Generic[T]):
    """A queue between threads that can be closed by its sender.

    With ``capacity`` 0 a send waits until the value has been received; with a
    positive capacity up to that many values are buffered. Receiving from a
    closed channel drains what is buffered and then yields None.
    """

    def __init__(self, capacity: int = 0) -> None:
        if capacity < 0:
            raise ValueError(f"channel capacity must not be negative, got {capacity}")
        self._capacity = capacity
        self._buffer: Deque[T] = deque()
        self._closed = False
        self._sent = 0
        self._received = 0
        self._condition = threading.Condition()

    def send(self, value: T) -> None:
        """Put ``value`` on the channel; raise RuntimeError if it is closed."""
        with self._condition:
            room = max(self._capacity, 1)
            while not self._closed and len(self._buffer) >= room:
                self._condition.wait()
            if self._closed:
                raise RuntimeError("send on closed channel")
            self._buffer.append(value)
            self._sent += 1
            ticket = self._sent
            self._condition.notify_all()
            if self._capacity == 0:
                while self._received < ticket and not self._closed:
                    self._condition.wait()

    def close(self) -> None:
        """Close the channel; raise RuntimeError if it is already closed."""
        with self._condition:
            if self._closed:
                raise RuntimeError("close of closed channel")
            self._closed = True
            self._condition.notify_all()

    def receive(self) -> Option[T]:
        """Wait for the next value; return Some(value), or None once closed and drained."""
        with self._condition:
            while not self._buffer and not self._closed:
                self._condition.wait()
            if not self._buffer:
                return none()
            value = self._buffer.popleft()
            self._received += 1
            self._condition.notify_all()
            return some(value)

    def __iter__(self) -> _PyIterator[T]:
        while True:
            value, present = self.receive().value()
            if not present:
                return
            yield value  # type: ignore[misc]


class ChannelIter(Iterator[T]):
    """Yields each value received from a channel until it is closed."""

    _name = "Channel"

    def __init__(self, channel: Channel[T]) -> None:
        self._channel = channel

    def next(self) -> Option[T]:
        return self._channel.receive()


def from_channel(channel: Channel[T]) -> ChannelIter[T]:
    """Yield each value from ``channel`` until it is closed."""
    return ChannelIter(channel)


def to_channel(iterator: Iterator[T]) -> Channel[T]:
    """Feed the items of ``iterator`` into a new channel from a background thread.

    The channel is closed once the iterator is exhausted.
    """
    channel: Channel[T] = Channel()

    def produce() -> None:
        try:
            while True:
                value, present = iterator.next().value()
                if not present:
                    return
                channel.send(value)  # type: ignore[arg-type]
        finally:
            channel.close()

    threading.Thread(target=produce, daemon=True).start()
    return channel


def _unused(_: Any) -> None:  # pragma: no cover
    return None