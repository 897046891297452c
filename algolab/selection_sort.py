"""Selection sort of a sequence of numbers."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence, TypeVar

T = TypeVar("T")


def selection_sort(values: Iterable[T]) -> list[T]:
    """Return a new list with the values in ascending order, sorted by selection."""
    items = list(values)
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def _read_ints(count: int) -> list[int]:
    numbers: list[int] = []
    while len(numbers) < count:
        numbers.extend(int(token) for token in input().split())
    return numbers[:count]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read a count and that many integers, then print them sorted."""
    try:
        count = int(input("Enter number of elements: ").split()[0])
        if count < 0:
            raise ValueError("count must not be negative")
        print("Enter elements:")
        numbers = _read_ints(count)
    except (EOFError, ValueError, IndexError):
        print("Invalid input.")
        return 1
    print("Sorted array: " + "".join(f"{n} " for n in selection_sort(numbers)))
    return 0