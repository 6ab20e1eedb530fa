class HeapError (Exception):
    pass

class OutOfRange (HeapError, IndexError):
    """ Raised when a slot index falls outside [0, capacity). """
    def __init__(self, *indices: int, capacity: int = None) -> None:
        self.indices = indices
        self.capacity = capacity

        super().__init__(
            f"Index is out of range : ( {' | '.join(str(index) for index in indices)} ) "
            f"for capacity {capacity}."
        )

class InvalidArgument (HeapError, ValueError):
    pass

if __name__ == "__main__":
    pass
