from __future__ import annotations

from collections import deque
from typing import Deque, Generic, Iterable, Iterator, Optional, TypeVar

N = TypeVar("N")


class Frontier(Generic[N]):
    """Pending sibling groups awaiting expansion.

    Each entry is an iterator over the not-yet-visited siblings at one depth.
    The first entry is always the one being drained and an entry only leaves
    the frontier once it is exhausted. Entries are inserted at either end:
    the front for depth-first orders, the back for breadth-first order.
    """

    __slots__ = ("_entries",)

    def __init__(self) -> None:
        self._entries: Deque[Iterator[N]] = deque()

    def push(self, siblings: Iterable[N]) -> None:
        """Insert `siblings` at the front (stack discipline)."""

        self._entries.appendleft(iter(siblings))

    def append(self, siblings: Iterable[N]) -> None:
        """Insert `siblings` at the back (queue discipline)."""

        self._entries.append(iter(siblings))

    def first(self) -> Iterator[N]:
        if not self._entries:
            raise IndexError("first() on an empty frontier")
        return self._entries[0]

    def remove_first(self) -> None:
        self._entries.popleft()

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)


class PendingRoots(Generic[N]):
    """Post-order ancestors whose subtrees are still being expanded.

    Kept in lock step with a `Frontier`: every pushed root owns the frontier
    entry pushed alongside it, and is popped when that entry is exhausted.
    """

    __slots__ = ("_roots",)

    def __init__(self) -> None:
        self._roots: list[N] = []

    def push(self, node: N) -> None:
        self._roots.append(node)

    def pop(self) -> Optional[N]:
        """Return the most recently pushed root, or None when there is none."""

        if not self._roots:
            return None
        return self._roots.pop()

    def __len__(self) -> int:
        return len(self._roots)

    def __bool__(self) -> bool:
        return bool(self._roots)
