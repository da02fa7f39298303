"""Shared test fixtures."""

from __future__ import annotations

import math

import pytest


# Point sets from the demo view

POINTS_1 = [
    (43.019080134578765, 144.7073152274143),
    (134.6814073104601, 714.8075999924465),
    (156.45734513631493, 444.4761522159623),
    (220.21405908819617, 826.643071100964),
    (229.70594511849478, 273.3541207183977),
    (234.80897938688494, 66.11483188977346),
    (240.74277942714812, 591.5908375076463),
    (272.61688926620803, 717.1729678209342),
    (369.0258581815348, 282.3360639594812),
    (374.4740493701478, 723.403878344317),
]

POINTS_2 = [
    (59.74721456569322, 434.1786262139628),
    (145.66965169847703, 498.9742737933933),
    (176.11009471190863, 418.41754885050875),
    (216.01836431655528, 624.3671417304704),
    (268.5646889637142, 567.2903060457413),
    (283.2745892205915, 88.33622698051302),
    (283.37187745756745, 560.5320654263562),
    (298.2737767606214, 338.7065549790176),
    (315.6066835333143, 133.42196905762466),
    (323.7445285773707, 499.53053317324503),
]

POINTS_3 = [
    (59, 434), (145, 498), (176, 418), (216, 624), (268, 567),
    (283, 88), (283, 560), (298, 338), (315, 133), (323, 499),
]

DEMO_SETS = [POINTS_1, POINTS_2, POINTS_3]

SQUARE = [(0.0, 0.0), (4.0, 0.0), (4.0, 4.0), (0.0, 4.0)]
SQUARE_WITH_CENTER = SQUARE + [(2.0, 2.0)]

# Arrowhead pointing right with a notch at (1, 2)
CHEVRON = [(0.0, 0.0), (4.0, 2.0), (0.0, 4.0), (1.0, 2.0)]

# k=1 walk goes (0,0) -> (2,0) -> (2,2) -> (1.2,2.5), after which the only
# remaining point sits below the first edge.
TRAPPED = [(0.0, 0.0), (2.0, 0.0), (2.0, 2.0), (1.2, 2.5), (1.0, -4.0)]

# Convex position, but the start's lower neighbour is its 4th nearest point
UNEVEN_CONVEX = [(-1.0, 3.0), (0.1, 4.2), (0.8, 3.5), (1.0, 3.0), (1.2, 2.1)]

OCTAGON = [
    (1.0, 0.0), (2.0, 0.0), (3.0, 1.0), (3.0, 2.0),
    (2.0, 3.0), (1.0, 3.0), (0.0, 2.0), (0.0, 1.0),
]


def regular_polygon(n: int, radius: float = 1.0) -> list[tuple[float, float]]:
    return [
        (radius * math.cos(2 * math.pi * i / n), radius * math.sin(2 * math.pi * i / n))
        for i in range(n)
    ]


@pytest.fixture
def square_with_center() -> list[tuple[float, float]]:
    return list(SQUARE_WITH_CENTER)


@pytest.fixture
def chevron() -> list[tuple[float, float]]:
    return list(CHEVRON)


@pytest.fixture
def trapped() -> list[tuple[float, float]]:
    return list(TRAPPED)


@pytest.fixture
def hexagon() -> list[tuple[float, float]]:
    return regular_polygon(6)
