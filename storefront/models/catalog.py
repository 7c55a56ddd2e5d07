from __future__ import annotations

from typing import Generic, Iterator, List, Tuple, TypeVar

T = TypeVar("T")


class Catalog(Generic[T]):
    def __init__(self) -> None:
        self._items: List[T] = []

    def add(self, item: T) -> None:
        self._items.append(item)

    def items(self) -> Tuple[T, ...]:
        return tuple(self._items)

    def size(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)
