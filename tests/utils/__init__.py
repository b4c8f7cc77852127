"""Shared test utilities for graphwalker."""

from .graphs import (
    CountingSuccessors,
    adjacency,
    random_dags,
    random_graphs,
)

__all__ = ["CountingSuccessors", "adjacency", "random_dags", "random_graphs"]
