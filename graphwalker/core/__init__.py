"""Core data structures: the traversal frontier and node trackers."""

from .frontier import Frontier, PendingRoots
from .trackers import (
    BloomFilterTracker,
    ConcurrentVisitedSet,
    KeyedVisitedSet,
    NodeTracker,
    SingleParentTracker,
    TreeTracker,
    VisitedSet,
)

__all__ = [
    "Frontier",
    "PendingRoots",
    "NodeTracker",
    "TreeTracker",
    "VisitedSet",
    "KeyedVisitedSet",
    "ConcurrentVisitedSet",
    "SingleParentTracker",
    "BloomFilterTracker",
]
