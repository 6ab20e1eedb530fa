from adaptable_pq.array_list import ExpandingArrayList
from adaptable_pq.handle import Handle
from adaptable_pq.logger import init_logger
from adaptable_pq.priority_queue.heap_type import HeapType
from adaptable_pq.rendering import render_slots

logger = init_logger(__name__)

DEFAULT_CAPACITY = 8

class PriorityQueueHeap:
    """ Adaptable priority queue over a complete binary tree packed into an ExpandingArrayList.

    Occupied slots always form the prefix [0, size()) of the array; the children of slot i are
    2i + 1 and 2i + 2. Every removal swaps the target with the last occupied slot and truncates,
    so the last occupied slot (the frontier) is always size() - 1.

    Lookup misses are reported as None, never raised.
    """
    def __init__(self, heap_type: any = HeapType.MAX, capacity: int = DEFAULT_CAPACITY) -> None:
        """ Parameters:
            heap_type (HeapType | str, opt): HeapType.MAX / HeapType.MIN, or the labels "Max" / "Min".
            capacity (int, opt): The starting number of slots. Grows as needed on insert.
        """
        self._heap_type = HeapType.parse(heap_type)
        self._comparator = self._heap_type.comparator
        self._array = ExpandingArrayList(capacity)

    @property
    def mode(self) -> HeapType:
        return self._heap_type

    @property
    def frontier(self) -> int:
        return max(self._array.size() - 1, 0)

    def state(self) -> str:
        return self._heap_type.value

    def size(self) -> int:
        return self._array.size()

    def length(self) -> int:
        return self._array.size()

    def capacity(self) -> int:
        return self._array.capacity()

    def is_empty(self) -> bool:
        return self._array.is_empty()

    def clear(self) -> None:
        self._array.clear()

    def __len__(self) -> int:
        return self._array.size()

    def _outranks(self, pos: int, other_pos: int) -> bool:
        return self._comparator(self._array.get(pos).key, self._array.get(other_pos).key)

    def _sift_up(self, pos: int) -> int:
        while pos > 0:
            parent_pos = (pos - 1) >> 1

            if not self._outranks(pos, parent_pos):
                break

            self._array.swap(pos, parent_pos)
            logger.debug(f"sift up: {parent_pos} <-> {pos}")
            pos = parent_pos

        return pos

    def _sift_down(self, pos: int) -> int:
        end_pos = self._array.size()
        child_pos = 2 * pos + 1

        while child_pos < end_pos:
            right_pos = child_pos + 1

            if right_pos < end_pos and self._outranks(right_pos, child_pos):
                child_pos = right_pos

            if not self._outranks(child_pos, pos):
                break

            self._array.swap(pos, child_pos)
            logger.debug(f"sift down: {pos} <-> {child_pos}")
            pos = child_pos
            child_pos = 2 * pos + 1

        return pos

    def _heapify(self) -> None:
        for pos in range((self._array.size() - 2) >> 1, -1, -1):
            self._sift_down(pos)

    def _locate(self, target: any) -> int:
        """ Returns the slot holding target (a Handle or a key), None if it is not live. """
        if isinstance(target, Handle):
            position = target.position

            # A detached copy may still carry the slot its entry lives in.
            if isinstance(position, int) and position < self._array.size() \
                    and self._array.get(position) == target:
                return position

            for pos in range(self._array.size()):
                if self._array.get(pos) == target:
                    return pos

            return None

        for pos in range(self._array.size()):
            if self._array.get(pos).key == target:
                return pos

        return None

    def _remove_at(self, pos: int) -> Handle:
        last_pos = self._array.size() - 1
        removed = self._array.get(pos).copy()

        if pos != last_pos:
            self._array.swap(pos, last_pos)

        self._array.remove_at(last_pos)

        # The entry moved in from the frontier may violate order in either direction.
        if pos != last_pos:
            self._sift_up(self._sift_down(pos))

        logger.debug(f"removed {removed} from slot {pos}")
        return removed

    def insert(self, key: any, value: any = None) -> Handle:
        """ Inserts (key, value) and returns a detached copy of the new entry. """
        self._array.ensure_capacity()
        pos = self._array.size()
        self._array.set_new(pos, key, value)

        if pos > 0:
            pos = self._sift_up(pos)

        return self._array.get(pos).copy()

    def top(self) -> Handle:
        handle = self._array.get(0)
        return None if handle is None else handle.copy()

    def remove_top(self) -> Handle:
        if self._array.is_empty():
            return None

        return self._remove_at(0)

    def remove(self, target: any) -> Handle:
        """ Removes the first live entry matching target.

        params:
            target (Handle | any): A Handle matches on key and value; anything else is matched
                    against keys.

        returns:
            removed (Handle): A detached copy of the removed entry, None if nothing matched.
        """
        if target is None or self._array.is_empty():
            return None

        pos = self._locate(target)

        if pos is None:
            logger.debug(f"remove: no live entry matches {target!r}")
            return None

        return self._remove_at(pos)

    def replace_key(self, handle: Handle, new_key: any) -> any:
        """ Replaces the key of the live entry matching handle and re-establishes heap order.

        returns:
            old_key (any): The previous key, None if handle does not match a live entry.
        """
        if not isinstance(handle, Handle):
            return None

        pos = self._locate(handle)

        if pos is None:
            logger.debug(f"replace_key: no live entry matches {handle!r}")
            return None

        live = self._array.get(pos)
        old_key = live.key
        live.key = new_key
        self._sift_up(self._sift_down(pos))

        return old_key

    def replace_value(self, handle: Handle, new_value: any) -> any:
        """ Replaces the value of the live entry matching handle. Ordering is left untouched.

        returns:
            old_value (any): The previous value, None if handle does not match a live entry.
        """
        if not isinstance(handle, Handle):
            return None

        pos = self._locate(handle)

        if pos is None:
            logger.debug(f"replace_value: no live entry matches {handle!r}")
            return None

        live = self._array.get(pos)
        old_value = live.value
        live.value = new_value

        return old_value

    def toggle(self) -> None:
        """ Switches between Max and Min ordering and rebuilds the tree in place. """
        self._heap_type = self._heap_type.toggled()
        self._comparator = self._heap_type.comparator
        self._heapify()

        logger.debug(f"toggled to {self._heap_type.value} ({self._array.size()} entries)")

    def slots(self) -> any:
        return self._array.slots()

    def __iter__(self) -> any:
        for _, handle in self._array.slots():
            if handle is not None:
                yield handle

    def __contains__(self, target: any) -> bool:
        return target is not None and self._locate(target) is not None

    def __str__(self) -> str:
        return render_slots(handle for _, handle in self._array.slots())

    def __repr__(self) -> str:
        return f"PriorityQueueHeap({self.state()}, size={self.size()}, capacity={self.capacity()})"

if __name__ == "__main__":
    pass
