import numpy as np

from adaptable_pq.errors import InvalidArgument, OutOfRange
from adaptable_pq.handle import Handle
from adaptable_pq.logger import init_logger
from adaptable_pq.rendering import render_slots

logger = init_logger(__name__)

DEFAULT_CAPACITY = 9

class ExpandingArrayList:
    """ Fixed-capacity array of optional Handle slots that reallocates on demand.

    Every handle placed or moved by the array is stamped with the index of its slot. Growth is
    only performed by ensure_capacity, never as a side effect of set / swap, so indices held by
    the caller stay valid throughout an operation.
    """
    def __init__(self, capacity: int = DEFAULT_CAPACITY, growth_margin: int = 1) -> None:
        if capacity < 1:
            raise InvalidArgument(f"capacity must be positive, got {capacity}")

        if growth_margin < 0:
            raise InvalidArgument(f"growth_margin must be non-negative, got {growth_margin}")

        self.growth_margin = growth_margin
        self._occupied = 0
        self._data = np.empty(shape=capacity, dtype=object)

    def size(self) -> int:
        return self._occupied

    def length(self) -> int:
        return self._occupied

    def capacity(self) -> int:
        return self._data.shape[0]

    def is_empty(self) -> bool:
        return self._occupied <= 0

    def __len__(self) -> int:
        return self._occupied

    def _in_range(self, index: int) -> bool:
        return 0 <= index < self._data.shape[0]

    def clear(self) -> None:
        self._data[:] = None
        self._occupied = 0

    def ensure_capacity(self) -> bool:
        """ Reallocates to a strictly larger array once occupancy reaches capacity - growth_margin.

        returns:
            grown (bool): Whether a reallocation took place.
        """
        capacity = self._data.shape[0]

        if self._occupied < capacity - self.growth_margin:
            return False

        new_capacity = max(2 * (2 * self._occupied + 2), 2 * capacity)
        data = np.empty(shape=new_capacity, dtype=object)
        data[:capacity] = self._data
        self._data = data

        logger.debug(f"grew slot array from {capacity} to {new_capacity} ({self._occupied} occupied)")
        return True

    def get(self, index: int) -> Handle:
        if not self._in_range(index):
            return None

        return self._data[index]

    def set(self, index: int, handle: Handle) -> None:
        if handle is None:
            raise InvalidArgument("Cannot place an empty handle; use remove_at to vacate a slot")

        if not self._in_range(index):
            raise OutOfRange(index, capacity=self.capacity())

        if self._data[index] is None:
            self._occupied += 1

        self._data[index] = handle
        handle.position = index

    def set_new(self, index: int, key: any, value: any) -> Handle:
        handle = Handle(key, value)
        self.set(index, handle)

        return handle

    def swap(self, index: int, other_index: int) -> None:
        if not self._in_range(index) or not self._in_range(other_index):
            raise OutOfRange(index, other_index, capacity=self.capacity())

        handle, other_handle = self._data[index], self._data[other_index]
        self._data[index], self._data[other_index] = other_handle, handle

        if other_handle is not None:
            other_handle.position = index

        if handle is not None:
            handle.position = other_index

    def remove_at(self, index: int) -> Handle:
        """ Vacates the slot at index.

        returns:
            removed (Handle): A detached copy of the removed handle, None if the index is out of range
                    or the slot was already empty.
        """
        if not self._in_range(index) or self._data[index] is None:
            return None

        handle = self._data[index]
        self._data[index] = None
        self._occupied -= 1

        return handle.copy()

    def slots(self) -> any:
        # Read-only traversal: (index, detached copy or None) for every slot.
        for index in range(self._data.shape[0]):
            handle = self._data[index]
            yield index, (None if handle is None else handle.copy())

    def __str__(self) -> str:
        return render_slots(handle for _, handle in self.slots())

if __name__ == "__main__":
    pass
