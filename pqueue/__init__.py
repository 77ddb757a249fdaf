from .heap import EmptyQueueError, HeapEntry, MinHeapQueue

__all__ = ["EmptyQueueError", "HeapEntry", "MinHeapQueue"]
