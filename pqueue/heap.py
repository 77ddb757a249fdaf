import logging
from typing import Generic, NamedTuple, Optional, TypeVar

K = TypeVar("K")
V = TypeVar("V")

_logger = logging.getLogger(__name__)


class EmptyQueueError(IndexError):
    """Raised when an entry is requested from an empty queue."""


class HeapEntry(NamedTuple, Generic[K, V]):
    key: K
    value: V


class MinHeapQueue(Generic[K, V]):
    """
    Priority queue returning the entry with the smallest key first.

    Keys must support ``<`` and ``<=``. Values can be anything. The order in
    which entries with equal keys come out is unspecified.

    Not thread safe: callers sharing a queue between threads have to hold
    their own lock around every call.
    """

    heap: list[HeapEntry[K, V]]

    def __init__(self):
        self.heap = []

    def __len__(self):
        return len(self.heap)

    def __repr__(self):
        return f"{type(self).__name__}(count={len(self.heap)})"

    def count(self) -> int:
        return len(self.heap)

    def is_empty(self) -> bool:
        return len(self.heap) == 0

    def enqueue(self, key: K, value: V):
        self.heap.append(HeapEntry(key, value))

        _siftup(self.heap, len(self.heap) - 1)

    def dequeue(self) -> HeapEntry[K, V]:
        """
        Remove and return the entry with the smallest key.

        Raises EmptyQueueError if the queue is empty.
        """
        if self._root() is None:
            _logger.debug("dequeue performed on an empty priority queue")
            raise EmptyQueueError("dequeue performed on an empty priority queue")

        return self._pop_root()

    def try_dequeue(self) -> tuple[Optional[K], Optional[V], bool]:
        """Like dequeue, but returns (None, None, False) if the queue is empty."""
        if self._root() is None:
            return None, None, False

        key, value = self._pop_root()
        return key, value, True

    def peek(self) -> HeapEntry[K, V]:
        """
        Return the entry with the smallest key without removing it.

        Raises EmptyQueueError if the queue is empty.
        """
        root = self._root()
        if root is None:
            _logger.debug("peek performed on an empty priority queue")
            raise EmptyQueueError("peek performed on an empty priority queue")

        return root

    def try_peek(self) -> tuple[Optional[K], Optional[V], bool]:
        root = self._root()
        if root is None:
            return None, None, False

        return root.key, root.value, True

    def drain(self) -> list[HeapEntry[K, V]]:
        """Dequeue every entry, returning them in non-decreasing key order."""
        x = []
        while len(self.heap) > 0:
            x.append(self._pop_root())

        return x

    def _root(self) -> Optional[HeapEntry[K, V]]:
        return self.heap[0] if self.heap else None

    def _pop_root(self) -> HeapEntry[K, V]:
        head = self.heap[0]
        last = self.heap.pop()

        if len(self.heap) == 0:
            # head was the only entry
            return head

        self.heap[0] = last
        _siftdown(self.heap, 0)

        return head


def _siftup(heap: list[HeapEntry[K, V]], pos: int):
    # Swap the new leaf with its parent until the parent is not greater.
    while pos > 0:
        parentpos = (pos - 1) >> 1
        if heap[parentpos].key <= heap[pos].key:
            break
        heap[parentpos], heap[pos] = heap[pos], heap[parentpos]
        pos = parentpos


def _siftdown(heap: list[HeapEntry[K, V]], pos: int):
    endpos = len(heap)

    while True:
        smallest = pos
        leftpos = 2 * pos + 1  # leftmost child position
        rightpos = leftpos + 1

        # Ties keep the earlier candidate: self over children, left over right.
        if leftpos < endpos and heap[leftpos].key < heap[smallest].key:
            smallest = leftpos
        if rightpos < endpos and heap[rightpos].key < heap[smallest].key:
            smallest = rightpos

        if smallest == pos:
            break

        heap[pos], heap[smallest] = heap[smallest], heap[pos]
        pos = smallest
