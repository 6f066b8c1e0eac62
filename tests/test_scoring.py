"""Tests para la agregación de puntuaciones."""
import numpy as np
import pytest
from pydantic import ValidationError

from cvmatch.analyzer import (
    NO_REQUIREMENTS_SKILLS_SCORE,
    aggregate_scores,
    combine_scores,
    round_half_up,
    skills_score_for,
)
from cvmatch.models import ScoreBundle


def test_round_half_up():
    assert round_half_up(12.5) == 13
    assert round_half_up(62.5) == 63
    assert round_half_up(66.666) == 67
    assert round_half_up(0.49) == 0


@pytest.mark.parametrize(
    "required,matched,expected",
    [
        (3, 3, 100),
        (3, 2, 67),
        (8, 5, 63),
        (8, 1, 30),  # 13 -> suelo de 30
        (4, 0, 30),
    ],
)
def test_skills_score(required, matched, expected):
    assert skills_score_for(required, matched) == expected


def test_no_required_skills_gives_neutral_score(rng):
    bundle = aggregate_scores([], [], rng)
    assert bundle.skills_score == NO_REQUIREMENTS_SKILLS_SCORE == 75


def test_scores_stay_in_range_for_many_seeds():
    cases = [([], []), (["python"], []), (["python", "sql"], ["python"]), (["a"], ["a"])]
    for seed in range(200):
        rng = np.random.default_rng(seed)
        for required, matched in cases:
            b = aggregate_scores(required, matched, rng)
            for value in (b.skills_score, b.experience_score, b.education_score, b.overall_score):
                assert isinstance(value, int)
            assert 30 <= b.skills_score <= 100
            assert 65 <= b.experience_score < 85
            assert 70 <= b.education_score < 85
            assert 40 <= b.overall_score <= 95


def test_seeded_generator_is_reproducible():
    a = aggregate_scores(["x"], ["x"], np.random.default_rng(99))
    b = aggregate_scores(["x"], ["x"], np.random.default_rng(99))
    assert a == b


def test_combine_scores_weights():
    bundle = combine_scores(100, 70, 80)
    # 40 + 21 + 24
    assert bundle.overall_score == 85


def test_combine_scores_clamps_out_of_range_inputs():
    assert combine_scores(0, 0, 0).overall_score == 40
    assert combine_scores(100, 100, 100).overall_score == 95
    bundle = combine_scores(150, -5, 200)
    assert (bundle.skills_score, bundle.experience_score, bundle.education_score) == (100, 0, 100)
    assert bundle.overall_score == 70


def test_band_and_recommendation():
    def bundle(overall):
        return ScoreBundle(skills_score=50, experience_score=50, education_score=50, overall_score=overall)

    assert bundle(90).band == "Excellent"
    assert bundle(90).recommendation == "Highly Recommended"
    assert bundle(72).band == "Good"
    assert bundle(72).recommendation == "Recommended"
    assert bundle(55).band == "Fair"
    assert bundle(55).recommendation == "Consider"
    assert bundle(45).band == "Needs Review"
    assert bundle(45).recommendation == "Not Recommended"


def test_score_bundle_rejects_out_of_range():
    with pytest.raises(ValidationError):
        ScoreBundle(skills_score=101, experience_score=70, education_score=70, overall_score=70)
