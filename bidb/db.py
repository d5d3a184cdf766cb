"""A small in-memory database whose indexes are bitmaps over item positions."""

from __future__ import annotations

import threading
from enum import Enum
from typing import Generic, Iterable, TypeVar

from bidb.bits import WORD_BITS, set_pos, unpack

T = TypeVar("T")

ALL_INDEX = 0


class _Op(Enum):
    AND = "and"
    OR = "or"
    AND_NOT = "and_not"


class DB(Generic[T]):
    """In-memory store of items, each of which may belong to numbered indexes.

    Index 0 always holds every item.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._data: list[T] = []
        self._indexes: dict[int, list[int]] = {}

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def reset(self) -> None:
        """Remove all items and indexes."""
        with self._lock:
            self._data.clear()
            self._indexes.clear()

    def _append(self, item: T, indexes: Iterable[int]) -> None:
        self._data.append(item)
        pos = len(self._data) - 1
        self._indexes[ALL_INDEX] = set_pos(self._indexes.get(ALL_INDEX, []), pos)
        for idx in indexes:
            self._indexes[idx] = set_pos(self._indexes.get(idx, []), pos)

    def add_batch(self, items: Iterable[T], *indexes: int) -> DB[T]:
        """Add every item in ``items`` to the given indexes."""
        with self._lock:
            for item in items:
                self._append(item, indexes)
        return self

    def add(self, item: T, *indexes: int) -> DB[T]:
        """Add one item to the given indexes."""
        with self._lock:
            self._append(item, indexes)
        return self

    def fill_from(self, src: DB[T]) -> None:
        """Replace this database's contents with a copy of ``src``."""
        if src is self:
            return
        with self._lock, src._lock:
            self._data = list(src._data)
            self._indexes = {k: list(v) for k, v in src._indexes.items()}

    def index_values(self, words: Iterable[int]) -> list[T]:
        """Return the items whose positions are set in the bitmap ``words``."""
        found = []
        with self._lock:
            size = len(self._data)
            for group, word in enumerate(words):
                if not word:
                    continue
                base = group * WORD_BITS
                for bit in unpack(word):
                    pos = base + bit
                    if pos >= size:
                        break
                    found.append(self._data[pos])
        return found

    def index(self, index: int) -> Result[T]:
        """Start a query from the items in ``index``."""
        return Result(self, index)

    def all(self) -> Result[T]:
        """Start a query from every item."""
        return Result(self, ALL_INDEX)

    def release_result(self, result: Result[T]) -> None:
        """Clear a query so that it holds no operations."""
        result._start = ALL_INDEX
        result._ops.clear()


class Result(Generic[T]):
    """A query: a starting index combined with further indexes."""

    def __init__(self, db: DB[T], start: int) -> None:
        self._db = db
        self._start = start
        self._ops: list[tuple[_Op, int]] = []

    def __enter__(self) -> Result[T]:
        return self

    def __exit__(self, *exc_info) -> None:
        self._db.release_result(self)

    def and_(self, index: int) -> Result[T]:
        """Keep only items that are also in ``index``."""
        self._ops.append((_Op.AND, index))
        return self

    def or_(self, index: int) -> Result[T]:
        """Add the items in ``index``."""
        self._ops.append((_Op.OR, index))
        return self

    def and_not(self, index: int) -> Result[T]:
        """Drop the items that are in ``index``."""
        self._ops.append((_Op.AND_NOT, index))
        return self

    def get(self) -> list[T]:
        """Evaluate the query and return the matching items in insertion order.

        An empty list is returned when any index named by the query is unknown.
        """
        db = self._db
        with db._lock:
            start = db._indexes.get(self._start)
            if start is None:
                return []
            result = list(start)

            operands = []
            for op, idx in self._ops:
                words = db._indexes.get(idx)
                if words is None:
                    return []
                operands.append((op, words))

            for op, words in operands:
                _apply(op, result, words)

            return db.index_values(result)


def _apply(op: _Op, result: list[int], words: list[int]) -> None:
    if op is _Op.OR:
        for j, word in enumerate(words[: len(result)]):
            result[j] |= word
        result.extend(words[len(result):])
    elif op is _Op.AND:
        for j, word in enumerate(words[: len(result)]):
            result[j] &= word
    else:
        for j, word in enumerate(words[: len(result)]):
            result[j] &= ~word