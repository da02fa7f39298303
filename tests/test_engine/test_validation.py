"""Tests for hull validation helpers."""

import pytest

from hullkit.engine.validation import contains_all, crossing_edges, validate_hull
from tests.conftest import SQUARE, SQUARE_WITH_CENTER

BOWTIE = [(0.0, 0.0), (2.0, 2.0), (2.0, 0.0), (0.0, 2.0)]


def test_square_is_valid():
    report = validate_hull(SQUARE, SQUARE_WITH_CENTER)
    assert report["valid"]
    assert report["simple"]
    assert report["area"] == pytest.approx(16.0)
    assert report["vertex_count"] == 4


def test_bowtie_crossing_reported():
    assert crossing_edges(BOWTIE) == [(0, 2)]
    report = validate_hull(BOWTIE)
    assert not report["valid"]
    assert not report["simple"]
    assert "Edge 0 crosses edge 2" in report["issues"]


def test_open_path_ignores_closing_edge():
    path = [(0.0, 0.0), (2.0, 0.0), (2.0, 2.0), (3.0, 1.0)]
    assert crossing_edges(path, closed=False) == []
    assert crossing_edges(path) == [(1, 3)]
    assert crossing_edges(BOWTIE, closed=False) == [(0, 2)]


def test_invented_vertex_reported():
    report = validate_hull(SQUARE, [(0.0, 0.0), (4.0, 0.0), (4.0, 4.0)])
    assert not report["valid"]
    assert any("not input points" in issue for issue in report["issues"])


def test_degenerate_hulls():
    assert validate_hull([(0.0, 0.0), (1.0, 1.0)])["valid"]
    assert not validate_hull([])["valid"]


def test_contains_all():
    assert contains_all(SQUARE, SQUARE_WITH_CENTER)
    assert not contains_all(SQUARE, [(5.0, 5.0)])
    assert contains_all([(0.0, 0.0), (2.0, 2.0)], [(1.0, 1.0)])
    assert not contains_all([(0.0, 0.0), (2.0, 2.0)], [(1.0, 0.0)])


def test_contains_all_tolerance():
    just_outside = [(4.0000001, 2.0)]
    assert not contains_all(SQUARE, just_outside)
    assert contains_all(SQUARE, just_outside, tolerance=1e-6)
