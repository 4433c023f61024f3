"""Tests for population ranking policies."""

import numpy as np
import pytest

from score import (
    GOOGLE_BLUE,
    circular_hue_distance,
    excited_proportions,
    material_score,
    score_population,
)

ORANGE = 0xFFE08020
TEAL = 0xFF20A0A0
AMBER = 0xFFE0A020
GREY = 0xFF808080
NAVY = 0xFF112233


def test_circular_hue_distance():
    assert circular_hue_distance(10.0, 350.0) == pytest.approx(20.0)
    assert circular_hue_distance(0.0, 180.0) == pytest.approx(180.0)
    assert circular_hue_distance(90.0, 90.0) == 0.0


def test_excited_proportions_wrap_around():
    hues = np.array([355.0, 5.0, 180.0])
    weights = np.array([1.0, 1.0, 2.0])
    proportions = excited_proportions(hues, weights)
    assert proportions[0] == pytest.approx(0.5)
    assert proportions[1] == pytest.approx(0.5)
    assert proportions[2] == pytest.approx(0.5)


def test_dominant_color_ranks_first(make_fake):
    fake = make_fake({ORANGE: (30.0, 50.0, 50.0), TEAL: (200.0, 60.0, 50.0)})
    assert score_population({TEAL: 10, ORANGE: 90}, fake.model) == [ORANGE, TEAL]


def test_near_hues_collapse_to_best(make_fake):
    fake = make_fake({ORANGE: (30.0, 50.0, 50.0), AMBER: (40.0, 60.0, 50.0)})
    # Same neighbourhood, so AMBER wins on chroma and ORANGE is a duplicate
    assert score_population({ORANGE: 60, AMBER: 40}, fake.model) == [AMBER]


def test_unusable_colors_fall_back(make_fake):
    fake = make_fake({GREY: (0.0, 2.0, 50.0), NAVY: (250.0, 30.0, 5.0)})
    assert score_population({GREY: 500, NAVY: 500}, fake.model) == [GOOGLE_BLUE]


def test_rare_hue_dropped(make_fake):
    fake = make_fake({ORANGE: (30.0, 50.0, 50.0), TEAL: (200.0, 90.0, 50.0)})
    assert score_population({ORANGE: 999, TEAL: 1}, fake.model) == [ORANGE]


def test_single_color_population(make_fake):
    fake = make_fake({NAVY: (250.0, 30.0, 20.0)})
    assert score_population({NAVY: 100}, fake.model) == [NAVY]


def test_insertion_order_does_not_matter(make_fake):
    fake = make_fake({ORANGE: (30.0, 50.0, 50.0), AMBER: (40.0, 50.0, 50.0)})
    # Equal scores: the lower ARGB value wins whatever the dict order
    first = score_population({ORANGE: 50, AMBER: 50}, fake.model)
    second = score_population({AMBER: 50, ORANGE: 50}, fake.model)
    assert first == second == [ORANGE]


def test_zero_population_falls_back(fake):
    assert score_population({}, fake.model) == [GOOGLE_BLUE]
    assert score_population({ORANGE: 0}, fake.model) == [GOOGLE_BLUE]


def test_material_score_ranks_saturated_color():
    ranked = material_score({0xFF1E88E5: 100}, None)
    assert ranked[0] == 0xFF1E88E5


def test_material_score_never_empty():
    assert material_score({GREY: 100}, None)
