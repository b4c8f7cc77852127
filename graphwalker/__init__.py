"""Graphwalker: lazy traversal of implicitly defined graphs.

Quick Start
-----------
>>> from graphwalker import Walker, CycleDetector
>>>
>>> edges = {"a": ["b", "c"], "b": ["d"], "d": ["a"]}
>>>
>>> # Each node visited at most once, even with cycles
>>> list(Walker.in_graph(edges.get).pre_order_from("a"))
['a', 'b', 'd', 'c']
>>>
>>> # First cycle reachable from "a"
>>> list(CycleDetector.for_graph(edges.get).detect_cycle_from("a"))
['a', 'b', 'd', 'a']

Classes
-------
Walker : Pre-order, post-order and breadth-first walks.
CycleDetector : Reports the first cyclic path reachable from start nodes.
VisitedSet, TreeTracker, ... : Node trackers controlling which nodes are visited.
"""

from importlib.metadata import version as _pkg_version

try:
    __version__ = _pkg_version("graphwalker")
except Exception:  # pragma: no cover - best effort during local development
    __version__ = "0.0.1"

from .algo import CycleDetector, SuccessorFunction, Walker
from .config import (
    BloomConfig,
    RuntimeConfig,
    bloom_config,
    reset_runtime_config_cache,
    runtime_config,
)
from .core import (
    BloomFilterTracker,
    ConcurrentVisitedSet,
    Frontier,
    KeyedVisitedSet,
    NodeTracker,
    PendingRoots,
    SingleParentTracker,
    TreeTracker,
    VisitedSet,
)
from .logging import get_logger

__all__ = [
    "__version__",
    # Walks
    "Walker",
    "CycleDetector",
    "SuccessorFunction",
    # Trackers
    "NodeTracker",
    "TreeTracker",
    "VisitedSet",
    "KeyedVisitedSet",
    "ConcurrentVisitedSet",
    "SingleParentTracker",
    "BloomFilterTracker",
    # Internals
    "Frontier",
    "PendingRoots",
    # Runtime
    "RuntimeConfig",
    "BloomConfig",
    "bloom_config",
    "runtime_config",
    "reset_runtime_config_cache",
    "get_logger",
]
