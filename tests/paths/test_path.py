from dataclasses import FrozenInstanceError

import pytest

from spforest.paths.path import Path


def test_path_init():
    """Basic initialization and derived sequences."""
    p = Path("A", "C", (("A", "eAB"), ("B", "eBC")), cost=10.0)

    assert p.cost == 10.0
    assert p.edges_seq == ("eAB", "eBC")
    assert p.nodes_seq == ("A", "B", "C")
    assert p.nodes == {"A", "B", "C"}
    assert p.edges == {"eAB", "eBC"}
    assert p.hop_count == 2


def test_path_indexing_iteration_len():
    p = Path("N1", "N3", (("N1", "e1"), ("N2", "e2")), 3)
    assert p[0] == ("N1", "e1")
    assert p[-1] == ("N2", "e2")
    assert list(p) == [("N1", "e1"), ("N2", "e2")]
    assert len(p) == 2


def test_empty_path():
    p = Path("A", "A", (), 0)
    assert len(p) == 0
    assert p.nodes_seq == ("A",)
    assert p.edges_seq == ()
    assert p.edges == frozenset()


def test_path_repr():
    p = Path("A", "B", (("A", "eAB"),), cost=5)
    assert "Path" in repr(p)
    assert "eAB" in repr(p)
    assert "cost=5" in repr(p)


def test_path_ordering():
    cheap = Path("A", "C", (("A", "x"), ("B", "y")), 2)
    short = Path("A", "C", (("A", "z"),), 2)
    pricey = Path("A", "C", (("A", "w"),), 5)
    assert sorted([pricey, cheap, short]) == [short, cheap, pricey]
    with pytest.raises(TypeError):
        cheap < 3  # noqa: B015


def test_path_equality_and_hash():
    p1 = Path("A", "B", (("A", "e"),), 1)
    p2 = Path("A", "B", (("A", "e"),), 1)
    p3 = Path("A", "B", (("A", "f"),), 1)
    assert p1 == p2
    assert p1 != p3
    assert len({p1, p2, p3}) == 2


def test_path_is_frozen():
    p = Path("A", "B", (("A", "e"),), 1)
    with pytest.raises(FrozenInstanceError):
        p.cost = 2  # type: ignore[misc]
