"""Ex Aequo tiebreaking between teams with equal totals."""

from __future__ import annotations

from quizboard.core.models import QuizConfig, TeamResult

TOTAL_PRECISION_DIGITS: int = 9


def totals_equal(first: float, second: float) -> bool:
    """Compare totals after rounding away floating-point noise."""
    return round(first, TOTAL_PRECISION_DIGITS) == round(second, TOTAL_PRECISION_DIGITS)


def compare_tied(a: TeamResult, b: TeamResult, config: QuizConfig) -> int:
    """Order two tied results by closeness of their tiebreak value to the target.

    Returns -1 when ``a`` ranks higher, 1 when ``b`` does, and 0 when the teams
    stay tied (Ex Aequo disabled, no target configured, or equal distances).
    The caller settles remaining ties by display number.
    """
    if not config.ex_aequo_enabled or config.ex_aequo_target_value is None:
        return 0

    target = config.ex_aequo_target_value
    distance_a = round(abs(a.tiebreak_value - target), TOTAL_PRECISION_DIGITS)
    distance_b = round(abs(b.tiebreak_value - target), TOTAL_PRECISION_DIGITS)
    if distance_a < distance_b:
        return -1
    if distance_a > distance_b:
        return 1
    return 0
