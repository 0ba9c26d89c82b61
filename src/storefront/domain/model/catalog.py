"""Append-only catalog used for listing products."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class GenericCatalog(Generic[T]):
    """Ordered collection of shared references.

    Insertion order is kept and duplicates are allowed. There is no
    removal and no lookup by id.
    """

    def __init__(self) -> None:
        self._items: list[T] = []

    def add(self, item: T) -> None:
        self._items.append(item)

    @property
    def items(self) -> tuple[T, ...]:
        return tuple(self._items)

    def size(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)
