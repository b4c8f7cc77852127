import pytest

from graphwalker.core.frontier import Frontier, PendingRoots


def test_push_and_append_insert_at_opposite_ends():
    frontier = Frontier()
    frontier.append([1])
    frontier.push([2])
    frontier.append([3])

    drained = []
    while frontier:
        drained.extend(frontier.first())
        frontier.remove_first()

    assert drained == [2, 1, 3]


def test_first_entry_is_drained_in_place():
    frontier = Frontier()
    frontier.push(["a", "b", "c"])

    assert next(frontier.first()) == "a"
    assert next(frontier.first()) == "b"
    assert len(frontier) == 1


def test_entries_are_consumed_lazily():
    pulled = []

    def siblings():
        for node in "xyz":
            pulled.append(node)
            yield node

    frontier = Frontier()
    frontier.push(siblings())

    assert pulled == []
    next(frontier.first())
    assert pulled == ["x"]


def test_first_on_empty_frontier_raises():
    frontier = Frontier()

    assert not frontier
    with pytest.raises(IndexError):
        frontier.first()


def test_pending_roots_is_a_stack():
    roots = PendingRoots()
    roots.push("a")
    roots.push("b")

    assert len(roots) == 2
    assert roots.pop() == "b"
    assert roots.pop() == "a"
    assert roots.pop() is None
    assert not roots
