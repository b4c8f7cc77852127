"""Node trackers deciding whether a traversal may visit a node.

A tracker is called once per visit attempt and answers whether the node (and
its outgoing edges) should be traversed. Trackers are not pure predicates:
remembering previously admitted nodes is how they deduplicate and guard
against cycles, so most of them mutate state on every call.
"""

from __future__ import annotations

import math
import threading
from typing import Any, Callable, Hashable, Optional, Protocol, Set, TypeVar

import numpy as np

from graphwalker import config as gw_config

N = TypeVar("N")
N_contra = TypeVar("N_contra", contravariant=True)

_HASH_MASK = (1 << 64) - 1


class NodeTracker(Protocol[N_contra]):
    """Stateful admission test for traversal candidates.

    Returns False if the node should be skipped together with its edges.
    Implementations may record the node as a side effect; plain callables
    such as ``lambda node: True`` satisfy the protocol as well.
    """

    def __call__(self, node: N_contra) -> bool:
        ...


class TreeTracker:
    """Admits every node. Only safe when the walked structure is a tree."""

    __slots__ = ()

    def __call__(self, node: Any) -> bool:
        return True


class VisitedSet:
    """Admits a node the first time it is seen."""

    __slots__ = ("_visited",)

    def __init__(self) -> None:
        self._visited: Set[Hashable] = set()

    def __call__(self, node: Hashable) -> bool:
        if node in self._visited:
            return False
        self._visited.add(node)
        return True

    def __contains__(self, node: object) -> bool:
        return node in self._visited

    def __len__(self) -> int:
        return len(self._visited)


class KeyedVisitedSet:
    """Admits a node the first time its `key` is seen.

    Useful when nodes are unhashable or when several node values should be
    treated as the same vertex (case-insensitive paths, ids of records...).
    """

    __slots__ = ("_key", "_visited")

    def __init__(self, key: Callable[[Any], Hashable]) -> None:
        if not callable(key):
            raise TypeError("key must be callable")
        self._key = key
        self._visited: Set[Hashable] = set()

    def __call__(self, node: Any) -> bool:
        marker = self._key(node)
        if marker in self._visited:
            return False
        self._visited.add(marker)
        return True

    def __contains__(self, node: object) -> bool:
        return self._key(node) in self._visited

    def __len__(self) -> int:
        return len(self._visited)


class ConcurrentVisitedSet(VisitedSet):
    """`VisitedSet` that may be shared by traversals running on several threads.

    Traversals sharing one instance explore the graph collaboratively: each
    node is handed to exactly one of them.
    """

    __slots__ = ("_lock",)

    def __init__(self) -> None:
        super().__init__()
        self._lock = threading.Lock()

    def __call__(self, node: Hashable) -> bool:
        with self._lock:
            return super().__call__(node)

    def __contains__(self, node: object) -> bool:
        with self._lock:
            return super().__contains__(node)

    def __len__(self) -> int:
        with self._lock:
            return super().__len__()


class SingleParentTracker:
    """Admits each node once and fails when a node is reached again.

    Pairs with `Walker.in_graph` to walk something expected to be a tree
    while checking that expectation.
    """

    __slots__ = ("_visited",)

    def __init__(self) -> None:
        self._visited: Set[Hashable] = set()

    def __call__(self, node: Hashable) -> bool:
        if node in self._visited:
            raise ValueError(f"Node with multiple parents: {node!r}")
        self._visited.add(node)
        return True


def _bloom_dimensions(capacity: int, error_rate: float) -> tuple[int, int]:
    num_bits = math.ceil(-capacity * math.log(error_rate) / (math.log(2) ** 2))
    num_hashes = max(1, round(num_bits / capacity * math.log(2)))
    return num_bits, num_hashes


class BloomFilterTracker:
    """Probabilistic visited set with memory bounded by `capacity`.

    A Bloom filter has no false negatives, so a node that was admitted is
    never admitted again and cycles cannot be walked forever. False positives
    make the traversal skip roughly `error_rate` of the nodes once `capacity`
    distinct nodes have been recorded.
    """

    def __init__(
        self,
        capacity: Optional[int] = None,
        error_rate: Optional[float] = None,
        *,
        seed: Optional[int] = None,
    ) -> None:
        if capacity is None or error_rate is None or seed is None:
            defaults = gw_config.bloom_config()
            capacity = defaults.capacity if capacity is None else capacity
            error_rate = defaults.error_rate if error_rate is None else error_rate
            seed = defaults.resolved_seed if seed is None else seed
        capacity = int(capacity)
        error_rate = float(error_rate)
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}.")
        if not 0.0 < error_rate < 1.0:
            raise ValueError(f"error_rate must lie in (0, 1), got {error_rate}.")

        self.capacity = capacity
        self.error_rate = error_rate
        self.seed = int(seed)
        self.num_bits, self.num_hashes = _bloom_dimensions(capacity, error_rate)
        self._bits = np.zeros((self.num_bits + 7) // 8, dtype=np.uint8)
        self._count = 0

    def _positions(self, node: Hashable) -> np.ndarray:
        # Double hashing: position_i = h1 + i * h2 (mod num_bits).
        h1 = hash(node) & _HASH_MASK
        h2 = (hash((self.seed, node)) & _HASH_MASK) | 1
        return np.fromiter(
            ((h1 + i * h2) % self.num_bits for i in range(self.num_hashes)),
            dtype=np.int64,
            count=self.num_hashes,
        )

    def __call__(self, node: Hashable) -> bool:
        positions = self._positions(node)
        byte_index = positions >> 3
        masks = np.left_shift(1, positions & 7).astype(np.uint8)
        if np.all(self._bits[byte_index] & masks):
            return False
        np.bitwise_or.at(self._bits, byte_index, masks)
        self._count += 1
        return True

    def __contains__(self, node: object) -> bool:
        positions = self._positions(node)  # type: ignore[arg-type]
        masks = np.left_shift(1, positions & 7).astype(np.uint8)
        return bool(np.all(self._bits[positions >> 3] & masks))

    def __len__(self) -> int:
        """Number of nodes admitted so far."""

        return self._count
