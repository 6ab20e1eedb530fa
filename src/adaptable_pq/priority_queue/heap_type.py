from enum import Enum

from adaptable_pq.errors import InvalidArgument

def max_comparator(base: any, other: any) -> bool:
    # Descending
    return base > other

def min_comparator(base: any, other: any) -> bool:
    # Ascending
    return base < other

class HeapType (Enum):
    MAX = "Max"
    MIN = "Min"

    @staticmethod
    def parse(heap_type: any):
        if isinstance(heap_type, HeapType):
            return heap_type

        if isinstance(heap_type, str):
            for member in HeapType:
                if member.value.lower() == heap_type.lower():
                    return member

        raise InvalidArgument(f"Unrecognized heap type: {heap_type!r}")

    @property
    def comparator(self) -> callable:
        """ comparator(base, other) is True when base must sit above other in the tree. """
        return max_comparator if self is HeapType.MAX else min_comparator

    def toggled(self):
        return HeapType.MIN if self is HeapType.MAX else HeapType.MAX

    def __str__(self) -> str:
        return self.value

if __name__ == "__main__":
    pass
