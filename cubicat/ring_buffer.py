"""Bounded FIFO buffers that drop the oldest items when full."""

from __future__ import annotations

from typing import BinaryIO, Generic, Iterable, TypeVar

T = TypeVar("T")


class RingBuffer(Generic[T]):
    """Fixed-capacity buffer; appending past capacity discards the oldest items."""

    def __init__(self) -> None:
        self.data = None
        self.capacity = 0
        self.managed = False

    def _new_storage(self):
        return []

    def allocate(self, capacity: int) -> None:
        """Reserve room for ``capacity`` items, keeping existing content."""
        if self.capacity == capacity:
            return
        if self.data is not None and self.managed:
            del self.data[capacity:]
        else:
            self.data = self._new_storage()
        self.managed = True
        self.capacity = capacity

    def release(self) -> None:
        """Drop the storage."""
        if self.data is not None and self.managed:
            self.data = None
            self.capacity = 0
            self.managed = False

    def shift(self, count: int) -> None:
        """Remove ``count`` items from the front."""
        if not self.managed or count == 0 or self.data is None:
            return
        del self.data[:count]

    def append(self, items: Iterable[T]) -> None:
        """Append items, discarding the oldest ones that no longer fit."""
        if self.data is None or items is None or not self.managed:
            return
        items = list(items) if not isinstance(items, (bytes, bytearray, list)) else items
        count = len(items)
        overflow = len(self.data) + count - self.capacity
        if overflow > 0:
            self.shift(overflow)
        if count > self.capacity:
            items = items[count - self.capacity:]
        self.data.extend(items)

    def clear(self) -> None:
        if self.data is not None:
            del self.data[:]

    def __len__(self) -> int:
        return 0 if self.data is None else len(self.data)


class ByteRingBuffer(RingBuffer[int]):
    """Byte buffer that can be topped up from a binary stream."""

    def _new_storage(self):
        return bytearray()

    def fill(self, stream: BinaryIO) -> int:
        """Read as many bytes as fit from ``stream``; return the number read."""
        if self.data is None or len(self) == self.capacity or not self.managed:
            return 0
        chunk = stream.read(self.capacity - len(self))
        if not chunk:
            return 0
        self.data.extend(chunk)
        return len(chunk)