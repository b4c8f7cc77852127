from __future__ import annotations

from itertools import chain
from typing import Dict, Generic, Hashable, Iterable, Iterator, Optional, Set, TypeVar

from graphwalker.algo.walker import SuccessorFunction, Walker, non_none_list
from graphwalker.logging import get_logger

LOGGER = get_logger("algo.cycles")

N = TypeVar("N", bound=Hashable)


class _CycleTracker(Generic[N]):
    """Tracks the open depth-first path and notices back edges into it."""

    def __init__(self) -> None:
        self.seen: Set[N] = set()  # Always a superset of `current_path`.
        self.current_path: Dict[N, None] = {}
        self.cyclic: Optional[N] = None

    def __call__(self, node: N) -> bool:
        # Once a back edge is found nothing else is admitted, so the next node
        # to finish is the one that edge leaves from.
        if self.cyclic is not None:
            return False
        if node not in self.seen:
            self.seen.add(node)
            self.current_path[node] = None
            return True
        if node in self.current_path:
            self.cyclic = node
        return False


class CycleDetector(Generic[N]):
    """Finds a cycle reachable from a set of start nodes.

    Nodes must be hashable; they are compared by equality.
    """

    def __init__(self, find_successors: SuccessorFunction) -> None:
        if not callable(find_successors):
            raise TypeError("find_successors must be callable")
        self._find_successors = find_successors

    @classmethod
    def for_graph(cls, find_successors: SuccessorFunction) -> "CycleDetector[N]":
        return cls(find_successors)

    def detect_cycle_from(self, *start_nodes: N) -> Optional[Iterator[N]]:
        return self.detect_cycle(start_nodes)

    def detect_cycle(self, start_nodes: Iterable[N]) -> Optional[Iterator[N]]:
        """Walk from the finite `start_nodes` and return the first cyclic path found.

        The returned iterator starts at the outermost node still open on the
        depth-first path that leads into the cycle and ends with the node that
        closes it; if `A` and `B` form a cycle the path ends ``A, B, A``.
        Returns None when no cycle is reachable.

        Never returns if the reachable graph is infinite and acyclic.
        """

        nodes = non_none_list(start_nodes)
        tracker: _CycleTracker[N] = _CycleTracker()
        walker: Walker[N] = Walker.in_graph(self._find_successors, tracker)
        for finished in walker.post_order(nodes):
            del tracker.current_path[finished]
            if tracker.cyclic is None:
                continue
            closing, tracker.cyclic = tracker.cyclic, None
            LOGGER.debug(
                "Cycle closed at %r after %d visited node(s).", closing, len(tracker.seen)
            )
            return chain(tuple(tracker.current_path), (finished, closing))
        return None
