"""Provisional operation buffer used while searching for a transformation path."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Generic, TypeVar

T = TypeVar("T")


class PathCandidate(Generic[T]):
    """Append-only buffer split into a committed head and a provisional tail.

    Everything before ``commit_index`` is committed; everything from it onward
    is provisional and discarded by ``rollback`` and ``finalize``.
    """

    def __init__(self) -> None:
        self._path: list[T] = []
        self._commit_index = 0

    @property
    def commit_index(self) -> int:
        return self._commit_index

    def __len__(self) -> int:
        return len(self._path)

    def push(self, item: T) -> None:
        self._path.append(item)

    def rollback_to(self, index: int) -> None:
        del self._path[index:]
        self._commit_index = min(self._commit_index, len(self._path))

    def rollback(self) -> None:
        self.rollback_to(self._commit_index)

    def commit(self) -> None:
        self._commit_index = len(self._path)

    @contextmanager
    def transaction(self) -> Iterator[None]:
        """Commit pushes made inside the block, or undo them when it raises."""
        start = len(self._path)
        try:
            yield
        except Exception:
            self.rollback_to(start)
            raise
        self.commit()

    def finalize(self) -> list[T]:
        """Drop the provisional tail and return the committed items."""
        self.rollback()
        return list(self._path)
