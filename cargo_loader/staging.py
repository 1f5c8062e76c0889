# staging.py
# Ordered holding area for parsed input before anything gets loaded.

from typing import Generic, TypeVar

T = TypeVar("T")


class StagingList(Generic[T]):
    """
    Append-only list of items of one type.

    Items come back out in the order they were added.
    `staged += item` is the same as `staged.add(item)`.
    """

    def __init__(self):
        self._data = []

    def add(self, item):
        self._data.append(item)

    def get(self, index):
        if index < 0 or index >= len(self._data):
            raise IndexError(f"Staging index {index} out of range (size {len(self._data)}).")
        return self._data[index]

    def size(self):
        return len(self._data)

    def __iadd__(self, item):
        self.add(item)
        return self

    def __len__(self):
        return len(self._data)

    def __iter__(self):
        return iter(list(self._data))
