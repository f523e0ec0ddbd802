"""Founder readiness scoring.

Pure functions: the nine scored answers are summed, normalized against the
maximum reachable total, rounded to a 0-100 ``base_score`` and mapped to
one of four ordered bands.

    base_score   band
    0  - 40      early-stage
    41 - 70      developing
    71 - 90      strong
    91 - 100     ready
"""

from app.core.schemas_quiz import QuizAnswers, ScoreBand, ScoreResult

MAX_POINTS = 27

# Inclusive upper bound of each band, lowest band first.
BAND_CEILINGS: tuple[tuple[int, ScoreBand], ...] = (
    (40, ScoreBand.EARLY_STAGE),
    (70, ScoreBand.DEVELOPING),
    (90, ScoreBand.STRONG),
    (100, ScoreBand.READY),
)

SCORE_BAND_LABELS: dict[ScoreBand, str] = {
    ScoreBand.EARLY_STAGE: "Early-Stage",
    ScoreBand.DEVELOPING: "Developing",
    ScoreBand.STRONG: "Strong",
    ScoreBand.READY: "Ready",
}

SCORE_BAND_DESCRIPTIONS: dict[ScoreBand, str] = {
    ScoreBand.EARLY_STAGE: (
        "You're just getting started. Focus on clarifying your problem "
        "and talking to potential customers."
    ),
    ScoreBand.DEVELOPING: (
        "You're making progress! Continue validating your idea and building your prototype."
    ),
    ScoreBand.STRONG: "You're on a solid path. Keep executing and building traction.",
    ScoreBand.READY: "You're ready to take the next big step. Time to accelerate!",
}


def _round_half_up(numerator: int, denominator: int) -> int:
    # Exact integer rounding of numerator / denominator, ties away from zero.
    return (2 * numerator + denominator) // (2 * denominator)


def score_band_for(base_score: int) -> ScoreBand:
    """Map a 0-100 base score to its band."""
    for ceiling, band in BAND_CEILINGS:
        if base_score <= ceiling:
            return band
    return ScoreBand.READY


def calculate_score(answers: QuizAnswers) -> ScoreResult:
    """
    Compute the readiness score for a complete answer set.

    Each scored answer contributes its raw value as points. The preference
    question (q10) is ignored.

    Args:
        answers: Validated answer set

    Returns:
        ScoreResult with base_score, score_band, total_points and max_points
    """
    total_points = sum(answers.scored_values())
    base_score = _round_half_up(total_points * 100, MAX_POINTS)

    return ScoreResult(
        base_score=base_score,
        score_band=score_band_for(base_score),
        total_points=total_points,
        max_points=MAX_POINTS,
    )


def get_score_band_label(score_band: ScoreBand) -> str:
    return SCORE_BAND_LABELS[ScoreBand(score_band)]


def get_score_band_description(score_band: ScoreBand) -> str:
    return SCORE_BAND_DESCRIPTIONS[ScoreBand(score_band)]
