class Handle:
    """ A (key, value) entry with the slot index it was last stamped with.

    Handles compare by key only (<, <=, >, >=) while equality compares the key and the value,
    so two entries holding equal key/value pairs cannot be told apart by an equality lookup.
    Handles handed out by a container are detached copies: mutating them does not touch the
    container.
    """
    def __init__(self, key: any, value: any = None, position: int = None) -> None:
        self._key = key
        self._value = value
        self._position = position

    @property
    def key(self) -> any:
        return self._key

    @key.setter
    def key(self, key: any) -> None:
        self._key = key

    @property
    def value(self) -> any:
        return self._value

    @value.setter
    def value(self, value: any) -> None:
        self._value = value

    @property
    def position(self) -> int:
        return self._position

    @position.setter
    def position(self, position: int) -> None:
        self._position = position

    def copy(self):
        return Handle(self._key, self._value, self._position)

    def __eq__(self, other: any) -> bool:
        if self is other:
            return True

        if not isinstance(other, Handle):
            return NotImplemented

        return self._key == other._key and self._value == other._value

    # Mutable: key and value change in place.
    __hash__ = None

    def __lt__(self, other: any) -> bool:
        if not isinstance(other, Handle):
            return NotImplemented

        return self._key < other._key

    def __le__(self, other: any) -> bool:
        if not isinstance(other, Handle):
            return NotImplemented

        return self._key <= other._key

    def __gt__(self, other: any) -> bool:
        if not isinstance(other, Handle):
            return NotImplemented

        return self._key > other._key

    def __ge__(self, other: any) -> bool:
        if not isinstance(other, Handle):
            return NotImplemented

        return self._key >= other._key

    def __repr__(self) -> str:
        return f"({self._key},{self._value})"

if __name__ == "__main__":
    pass
