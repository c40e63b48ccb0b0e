"""Conversion of raw round points onto the quiz's standard scale."""

from __future__ import annotations

import logging

from quizboard.core.models import QuizConfig, RoundDescriptor

logger = logging.getLogger(__name__)


def _uses_conversion(round_: RoundDescriptor, config: QuizConfig) -> bool:
    if not config.scale_conversion_enabled:
        return False
    if round_.exclude_from_scale or round_.is_tiebreak_round:
        return False
    if config.standard_scale is None or config.standard_scale <= 0:
        return False
    return round_.max_score > 0


def _clamp_points(points: float, round_: RoundDescriptor) -> float:
    clamped = max(0.0, points)
    if round_.max_score > 0:
        clamped = min(clamped, round_.max_score)
    if clamped != points:
        logger.warning(
            "Clamped %s points to %s for round %s (max %s)",
            points,
            clamped,
            round_.id,
            round_.max_score,
        )
    return clamped


def convert_points(points: float, round_: RoundDescriptor, config: QuizConfig) -> float:
    """Map raw points for one round onto the common scale.

    Points are returned unchanged when conversion does not apply to the round.
    Values outside ``[0, max_score]`` are clamped rather than rejected; the
    data-access layer is responsible for refusing them at ingestion.
    """
    points = _clamp_points(points, round_)
    if not _uses_conversion(round_, config):
        return points
    return (points / round_.max_score) * config.standard_scale


def converted_max_score(round_: RoundDescriptor, config: QuizConfig) -> float:
    """Return the most a round can contribute to a total after conversion."""
    if _uses_conversion(round_, config):
        return float(config.standard_scale)
    return round_.max_score
