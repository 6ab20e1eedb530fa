from collections.abc import Iterable

from adaptable_pq.handle import Handle

EMPTY_SLOT = "( , )"
SEPARATOR = " | "

def render_slot(handle: Handle) -> str:
    return EMPTY_SLOT if handle is None else repr(handle)

def render_slots(slots: Iterable) -> str:
    """ Renders a slot traversal as "[ (50,0) | (30,1) | ( , ) ]".

    params:
        slots (Iterable): Handles or None, in slot order.

    returns:
        rendering (str): "[ ]" when no slot is occupied.
    """
    slots = list(slots)

    if all(handle is None for handle in slots):
        return "[ ]"

    return f"[ {SEPARATOR.join(render_slot(handle) for handle in slots)} ]"

if __name__ == "__main__":
    pass
