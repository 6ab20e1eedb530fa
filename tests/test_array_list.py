import pytest

from adaptable_pq import ExpandingArrayList, Handle, InvalidArgument, OutOfRange
from adaptable_pq.array_list import DEFAULT_CAPACITY

def test_new_array_is_empty() -> None:
    array = ExpandingArrayList()

    assert array.capacity() == DEFAULT_CAPACITY
    assert array.size() == 0
    assert array.length() == 0
    assert array.is_empty()
    assert len(array) == 0

@pytest.mark.parametrize("capacity", [0, -3])
def test_non_positive_capacity_is_rejected(capacity: int) -> None:
    with pytest.raises(InvalidArgument):
        ExpandingArrayList(capacity)

def test_negative_growth_margin_is_rejected() -> None:
    with pytest.raises(InvalidArgument):
        ExpandingArrayList(4, growth_margin=-1)

def test_get_never_raises() -> None:
    array = ExpandingArrayList(4)
    array.set(1, Handle(1, "a"))

    assert array.get(0) is None
    assert array.get(1) == Handle(1, "a")
    assert array.get(-1) is None
    assert array.get(4) is None
    assert array.get(100) is None

def test_set_stamps_position_and_counts_new_slots_once() -> None:
    array = ExpandingArrayList(4)
    handle = Handle(1, "a")

    array.set(2, handle)
    assert handle.position == 2
    assert array.size() == 1

    array.set(2, Handle(3, "c"))
    assert array.size() == 1
    assert array.get(2) == Handle(3, "c")

def test_set_rejects_empty_handle() -> None:
    with pytest.raises(InvalidArgument):
        ExpandingArrayList(4).set(0, None)

@pytest.mark.parametrize("index", [-1, 4, 10])
def test_set_rejects_out_of_range(index: int) -> None:
    with pytest.raises(OutOfRange):
        ExpandingArrayList(4).set(index, Handle(1, "a"))

def test_out_of_range_is_an_index_error() -> None:
    with pytest.raises(IndexError):
        ExpandingArrayList(4).swap(0, 4)

def test_set_new_builds_handle() -> None:
    array = ExpandingArrayList(4)
    handle = array.set_new(3, 7, "seven")

    assert handle == Handle(7, "seven")
    assert handle.position == 3
    assert array.get(3) is handle

def test_swap_restamps_positions() -> None:
    array = ExpandingArrayList(4)
    first, second = array.set_new(0, 1, "a"), array.set_new(3, 2, "b")

    array.swap(0, 3)

    assert array.get(0) is second
    assert array.get(3) is first
    assert (second.position, first.position) == (0, 3)

def test_swap_with_itself_restamps() -> None:
    array = ExpandingArrayList(4)
    handle = array.set_new(1, 1, "a")
    handle.position = 99

    array.swap(1, 1)

    assert array.get(1) is handle
    assert handle.position == 1

def test_swap_with_empty_slot_moves_handle() -> None:
    array = ExpandingArrayList(4)
    handle = array.set_new(0, 1, "a")

    array.swap(0, 2)

    assert array.get(0) is None
    assert array.get(2) is handle
    assert handle.position == 2
    assert array.size() == 1

@pytest.mark.parametrize("indices", [(-1, 0), (0, 4), (5, 6)])
def test_swap_rejects_out_of_range(indices: tuple) -> None:
    array = ExpandingArrayList(4)

    with pytest.raises(OutOfRange) as exc_info:
        array.swap(*indices)

    assert exc_info.value.indices == indices
    assert exc_info.value.capacity == 4

def test_remove_at_returns_detached_copy() -> None:
    array = ExpandingArrayList(4)
    live = array.set_new(1, 5, "e")

    removed = array.remove_at(1)

    assert removed == live
    assert removed is not live
    assert array.get(1) is None
    assert array.size() == 0

def test_remove_at_misses_return_none() -> None:
    array = ExpandingArrayList(4)
    array.set_new(0, 5, "e")

    assert array.remove_at(-1) is None
    assert array.remove_at(4) is None
    assert array.remove_at(2) is None
    assert array.size() == 1

def test_ensure_capacity_grows_and_preserves_slots() -> None:
    array = ExpandingArrayList(4)

    for index in range(3):
        array.set_new(index, index, str(index))

    assert array.ensure_capacity()
    assert array.capacity() > 4

    for index in range(3):
        assert array.get(index) == Handle(index, str(index))
        assert array.get(index).position == index

def test_ensure_capacity_is_noop_below_margin() -> None:
    array = ExpandingArrayList(4)
    array.set_new(0, 1, "a")

    assert not array.ensure_capacity()
    assert array.capacity() == 4

def test_ensure_capacity_with_zero_margin_grows_only_when_full() -> None:
    array = ExpandingArrayList(2, growth_margin=0)
    array.set_new(0, 1, "a")

    assert not array.ensure_capacity()

    array.set_new(1, 2, "b")

    assert array.ensure_capacity()
    assert array.capacity() >= 4

def test_clear_empties_every_slot() -> None:
    array = ExpandingArrayList(4)
    array.set_new(0, 1, "a")
    array.set_new(1, 2, "b")

    array.clear()

    assert array.is_empty()
    assert all(handle is None for _, handle in array.slots())
    assert array.capacity() == 4

def test_slots_yield_copies() -> None:
    array = ExpandingArrayList(3)
    live = array.set_new(0, 1, "a")

    slots = list(array.slots())
    assert [index for index, _ in slots] == [0, 1, 2]
    assert slots[0][1] == live
    assert slots[1][1] is None

    slots[0][1].key = 42
    assert live.key == 1

def test_str_renders_every_slot() -> None:
    array = ExpandingArrayList(3)
    assert str(array) == "[ ]"

    array.set_new(0, 50, 0)
    array.set_new(2, 30, 1)
    assert str(array) == "[ (50,0) | ( , ) | (30,1) ]"
