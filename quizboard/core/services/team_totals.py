"""Aggregation of a team's round scores into a single total."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
import math

from quizboard.core.models import QuizConfig, RoundDescriptor, ScoreRecord
from quizboard.core.services.score_converter import convert_points, converted_max_score

ScoreIndex = Mapping[tuple[int, int], float]


def index_scores(scores: Iterable[ScoreRecord] | ScoreIndex) -> ScoreIndex:
    """Key points by ``(round_id, team_entry_id)`` so lookups do not rescan every record.

    An existing index is returned unchanged.
    """
    if isinstance(scores, Mapping):
        return scores
    return {(score.round_id, score.team_entry_id): score.points for score in scores}


def scoring_rounds(rounds: Iterable[RoundDescriptor]) -> list[RoundDescriptor]:
    """Return the rounds that count towards totals, in sequence order."""
    return sorted(
        (round_ for round_ in rounds if not round_.is_tiebreak_round),
        key=lambda r: (r.sequence_nr, r.id),
    )


def find_tiebreak_round(rounds: Iterable[RoundDescriptor]) -> RoundDescriptor | None:
    tiebreak_rounds = [round_ for round_ in rounds if round_.is_tiebreak_round]
    # Ingestion guarantees at most one; duplicates are a data-access bug.
    assert len(tiebreak_rounds) <= 1, "A quiz may define at most one tiebreak round."
    return tiebreak_rounds[0] if tiebreak_rounds else None


def compute_total(
    team_entry_id: int,
    rounds: Sequence[RoundDescriptor],
    scores: Iterable[ScoreRecord] | ScoreIndex,
    config: QuizConfig,
) -> float:
    """Sum a team's converted points over every scoring round.

    Missing score records count as 0. ``math.fsum`` keeps the result
    independent of the order rounds and scores arrive in.
    """
    points = index_scores(scores)
    return math.fsum(
        convert_points(points.get((round_.id, team_entry_id), 0.0), round_, config)
        for round_ in scoring_rounds(rounds)
    )


def compute_tiebreak_value(
    team_entry_id: int,
    rounds: Sequence[RoundDescriptor],
    scores: Iterable[ScoreRecord] | ScoreIndex,
) -> float:
    """Return the raw points recorded against the tiebreak round, or 0."""
    tiebreak_round = find_tiebreak_round(rounds)
    if tiebreak_round is None:
        return 0.0
    return float(index_scores(scores).get((tiebreak_round.id, team_entry_id), 0.0))


def round_breakdown(
    team_entry_id: int,
    rounds: Sequence[RoundDescriptor],
    scores: Iterable[ScoreRecord] | ScoreIndex,
    config: QuizConfig,
) -> list[tuple[RoundDescriptor, float]]:
    """Return converted points per scoring round, ordered by sequence number."""
    points = index_scores(scores)
    return [
        (round_, convert_points(points.get((round_.id, team_entry_id), 0.0), round_, config))
        for round_ in scoring_rounds(rounds)
    ]


def max_possible_total(rounds: Sequence[RoundDescriptor], config: QuizConfig) -> float:
    return math.fsum(converted_max_score(round_, config) for round_ in scoring_rounds(rounds))
