from __future__ import annotations

from typing import Callable, Generic, Iterable, Iterator, List, Optional, TypeVar

from graphwalker.core.frontier import Frontier, PendingRoots
from graphwalker.core.trackers import NodeTracker, TreeTracker, VisitedSet
from graphwalker.logging import get_logger

LOGGER = get_logger("algo.walker")

N = TypeVar("N")

SuccessorFunction = Callable[[N], Optional[Iterable[N]]]


def non_none_list(nodes: Iterable[N]) -> List[N]:
    """Materialise `nodes`, failing on the first None."""

    result = list(nodes)
    for index, node in enumerate(result):
        if node is None:
            raise ValueError(f"Start node at position {index} is None.")
    return result


class _Traversal(Generic[N]):
    """Single-use traversal state: one frontier, one tracker."""

    def __init__(self, find_successors: SuccessorFunction, tracker: NodeTracker) -> None:
        self._find_successors = find_successors
        self._tracker = tracker
        self._frontier: Frontier[N] = Frontier()

    def _visit_next(self) -> Optional[N]:
        """Advance the first frontier entry to the next admitted node.

        Returns None, after dropping the entry, once the entry is exhausted.
        """

        for node in self._frontier.first():
            if node is None:
                raise ValueError("Successor function produced a None node.")
            if self._tracker(node):
                return node
        self._frontier.remove_first()
        return None

    def pre_order(self, start_nodes: List[N]) -> Iterator[N]:
        self._frontier.push(start_nodes)
        return self._top_down(self._frontier.push)

    def breadth_first(self, start_nodes: List[N]) -> Iterator[N]:
        self._frontier.append(start_nodes)
        return self._top_down(self._frontier.append)

    def _top_down(self, insert: Callable[[Iterable[N]], None]) -> Iterator[N]:
        while self._frontier:
            node = self._visit_next()
            if node is None:
                continue
            yield node
            successors = self._find_successors(node)
            if successors is not None:
                insert(successors)

    def post_order(self, start_nodes: List[N]) -> Iterator[N]:
        self._frontier.push(start_nodes)
        roots: PendingRoots[N] = PendingRoots()
        while self._frontier:
            node = self._visit_next()
            if node is None:
                # The exhausted entry held the children of the top root.
                root = roots.pop()
                if root is not None:
                    yield root
                continue
            successors = self._find_successors(node)
            if successors is None:
                yield node
                continue
            self._frontier.push(successors)
            roots.push(node)


class Walker(Generic[N]):
    """Lazy pre-order, post-order and breadth-first walks over a graph.

    The graph is never stored: edges are discovered on demand by calling
    `find_successors(node)`, which returns an iterable of successor nodes, or
    None when the node has none. Successor iterables are consumed one element
    at a time, so infinitely wide or deep graphs can be walked as long as the
    consumer stops pulling at some point.

    Every walk returns a fresh single-pass iterator. Iterators must not be
    shared between threads; a `Walker` may be, provided its tracker is
    thread-safe.

    Examples
    --------
    >>> edges = {"a": ["b", "c"], "b": ["d"]}
    >>> walker = Walker.in_graph(edges.get)
    >>> list(walker.pre_order_from("a"))
    ['a', 'b', 'd', 'c']
    >>> list(walker.post_order_from("a"))
    ['d', 'b', 'c', 'a']
    >>> list(walker.breadth_first_from("a"))
    ['a', 'b', 'c', 'd']
    """

    def __init__(
        self,
        find_successors: SuccessorFunction,
        new_tracker: Callable[[], NodeTracker],
    ) -> None:
        if not callable(find_successors):
            raise TypeError("find_successors must be callable")
        if not callable(new_tracker):
            raise TypeError("new_tracker must be callable")
        self._find_successors = find_successors
        self._new_tracker = new_tracker

    @classmethod
    def in_tree(cls, find_children: SuccessorFunction) -> "Walker[N]":
        """Walk a tree as observed by `find_children`.

        No visited nodes are remembered, which makes tree walks cheaper than
        graph walks but loops forever if `find_children` turns out to
        describe a cycle. Use `in_graph` with a `SingleParentTracker` to check
        the tree shape while walking.
        """

        return cls.in_graph(find_children, TreeTracker())

    @classmethod
    def in_graph(
        cls,
        find_successors: SuccessorFunction,
        tracker: Optional[NodeTracker] = None,
    ) -> "Walker[N]":
        """Walk a possibly cyclic graph as observed by `find_successors`.

        Without `tracker`, each walk remembers the nodes it visited in a fresh
        `VisitedSet` (memory linear in the visited nodes) and visits each node
        at most once. With `tracker`, that very instance is consulted by every
        walk started from the returned walker; a node is skipped, together
        with its edges, whenever the tracker returns False. Sharing a
        `ConcurrentVisitedSet` lets walks on several threads split the graph
        between them.
        """

        if tracker is None:
            return cls(find_successors, VisitedSet)
        if not callable(tracker):
            raise TypeError("tracker must be callable")
        return cls(find_successors, lambda: tracker)

    def _new_traversal(self, order: str, start_nodes: List[N]) -> _Traversal[N]:
        LOGGER.debug("Starting %s walk from %d start node(s).", order, len(start_nodes))
        return _Traversal(self._find_successors, self._new_tracker())

    def pre_order(self, start_nodes: Iterable[N]) -> Iterator[N]:
        """Walk depth first, yielding each node before its successors.

        `start_nodes` must be finite; it is read and checked for None before
        the walk is returned. The walk may be infinite if the graph is
        infinitely deep or wide.
        """

        nodes = non_none_list(start_nodes)
        return self._new_traversal("pre-order", nodes).pre_order(nodes)

    def post_order(self, start_nodes: Iterable[N]) -> Iterator[N]:
        """Walk depth first, yielding each node after all of its successors.

        May be infinite if the graph is infinitely wide; never yields anything
        below a node with infinite depth.
        """

        nodes = non_none_list(start_nodes)
        return self._new_traversal("post-order", nodes).post_order(nodes)

    def breadth_first(self, start_nodes: Iterable[N]) -> Iterator[N]:
        """Walk level by level, start nodes first and in the order given."""

        nodes = non_none_list(start_nodes)
        return self._new_traversal("breadth-first", nodes).breadth_first(nodes)

    def pre_order_from(self, *start_nodes: N) -> Iterator[N]:
        return self.pre_order(start_nodes)

    def post_order_from(self, *start_nodes: N) -> Iterator[N]:
        return self.post_order(start_nodes)

    def breadth_first_from(self, *start_nodes: N) -> Iterator[N]:
        return self.breadth_first(start_nodes)
