"""Tests for the readiness scoring engine."""

import itertools

import pytest

from app.core.schemas_quiz import ScoreBand
from app.core.scoring import (
    MAX_POINTS,
    calculate_score,
    get_score_band_description,
    get_score_band_label,
    score_band_for,
)

BAND_ORDER = [ScoreBand.EARLY_STAGE, ScoreBand.DEVELOPING, ScoreBand.STRONG, ScoreBand.READY]


def _answers_summing_to(answers_factory, total: int, q2: int = 3):
    """Spread ``total`` over q1..q9 with q2 fixed, keeping every value in {1,2,3}."""
    rest = total - q2
    values = [1] * 8
    remaining = rest - 8
    for i in range(8):
        bump = min(2, remaining)
        values[i] += bump
        remaining -= bump
    assert remaining == 0
    scored = [values[0], q2] + values[1:]
    return answers_factory(scored)


class TestCalculateScore:
    def test_all_top_answers(self, answers_factory):
        result = calculate_score(answers_factory([3] * 9))
        assert result.total_points == 27
        assert result.base_score == 100
        assert result.score_band == ScoreBand.READY
        assert result.max_points == 27

    def test_all_bottom_answers(self, answers_factory):
        result = calculate_score(answers_factory([1] * 9))
        assert result.total_points == 9
        assert result.base_score == 33
        assert result.score_band == ScoreBand.EARLY_STAGE

    def test_total_21_is_strong(self, answers_factory):
        result = calculate_score(_answers_summing_to(answers_factory, 21))
        assert result.total_points == 21
        assert result.base_score == 78
        assert result.score_band == ScoreBand.STRONG

    def test_total_12_is_developing(self, answers_factory):
        result = calculate_score(_answers_summing_to(answers_factory, 12, q2=1))
        assert result.total_points == 12
        assert result.base_score == 44
        assert result.score_band == ScoreBand.DEVELOPING

    def test_preference_does_not_affect_score(self, answers_factory):
        a = calculate_score(answers_factory([2, 3, 2, 2, 2, 2, 2, 2, 2], "lessons"))
        b = calculate_score(answers_factory([2, 3, 2, 2, 2, 2, 2, 2, 2], "debates"))
        assert a == b

    def test_idempotent(self, answers_factory):
        answers = answers_factory([3, 1, 2, 3, 1, 2, 3, 2, 1])
        assert calculate_score(answers) == calculate_score(answers)

    def test_result_is_frozen(self, all_yes_answers):
        result = calculate_score(all_yes_answers)
        with pytest.raises(Exception):
            result.base_score = 5

    @pytest.mark.parametrize("total", range(9, 28))
    def test_every_reachable_total(self, answers_factory, total):
        q2 = 1 if total < 11 else 3
        result = calculate_score(_answers_summing_to(answers_factory, total, q2=q2))
        assert result.total_points == total
        assert result.max_points == MAX_POINTS
        assert 0 <= result.base_score <= 100
        assert result.base_score == int(total * 100 / 27 + 0.5)
        assert result.score_band == score_band_for(result.base_score)


class TestScoreBandFor:
    @pytest.mark.parametrize(
        "score,band",
        [
            (0, ScoreBand.EARLY_STAGE),
            (40, ScoreBand.EARLY_STAGE),
            (41, ScoreBand.DEVELOPING),
            (70, ScoreBand.DEVELOPING),
            (71, ScoreBand.STRONG),
            (90, ScoreBand.STRONG),
            (91, ScoreBand.READY),
            (100, ScoreBand.READY),
        ],
    )
    def test_boundaries(self, score, band):
        assert score_band_for(score) == band

    def test_monotonic(self):
        ranks = [BAND_ORDER.index(score_band_for(s)) for s in range(101)]
        for lower, higher in itertools.pairwise(ranks):
            assert higher >= lower


class TestBandMetadata:
    def test_ready_label(self):
        assert get_score_band_label(ScoreBand.READY) == "Ready"

    def test_label_accepts_raw_value(self):
        assert get_score_band_label("early-stage") == "Early-Stage"

    def test_labels_are_distinct(self):
        labels = {get_score_band_label(b) for b in ScoreBand}
        assert len(labels) == 4

    @pytest.mark.parametrize("band", list(ScoreBand))
    def test_description_non_empty(self, band):
        assert get_score_band_description(band).strip()
