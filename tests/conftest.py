import pytest

from adaptable_pq import HeapType, PriorityQueueHeap

def assert_heap_invariants(heap: PriorityQueueHeap) -> None:
    slots = list(heap.slots())
    size = heap.size()

    assert size <= heap.capacity()
    assert len(slots) == heap.capacity()

    # Tree shape: occupied slots are exactly the prefix [0, size).
    for index, handle in slots:
        assert (handle is not None) == (index < size), f"slot {index} breaks the prefix"

        if handle is not None:
            assert handle.position == index

    # Heap order under the active mode.
    for index in range(1, size):
        parent, child = slots[(index - 1) // 2][1], slots[index][1]

        if heap.mode is HeapType.MAX:
            assert parent.key >= child.key, f"{parent} above {child} in Max mode"
        else:
            assert parent.key <= child.key, f"{parent} above {child} in Min mode"

    assert heap.frontier == max(size - 1, 0)

@pytest.fixture
def check_invariants() -> callable:
    return assert_heap_invariants

@pytest.fixture
def max_heap() -> PriorityQueueHeap:
    heap = PriorityQueueHeap(HeapType.MAX)

    for value, key in enumerate([50, 30, 20, 15, 10, 8, 16]):
        heap.insert(key, value)

    return heap
