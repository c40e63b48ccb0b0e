"""Ranking of teams by normalized total with deterministic tiebreaking."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import replace
from functools import cmp_to_key
import logging

from quizboard.core.models import (
    QuizConfig,
    QuizSnapshot,
    RoundDescriptor,
    ScoreRecord,
    TeamEntry,
    TeamResult,
)
from quizboard.core.services.team_totals import compute_tiebreak_value, compute_total, index_scores
from quizboard.core.services.tiebreak_resolver import compare_tied, totals_equal

logger = logging.getLogger(__name__)


def _sign(value: float) -> int:
    return (value > 0) - (value < 0)


def _compare_results(a: TeamResult, b: TeamResult, config: QuizConfig) -> int:
    if not totals_equal(a.total, b.total):
        return -1 if a.total > b.total else 1
    outcome = compare_tied(a, b, config)
    if outcome:
        return outcome
    if a.display_nr != b.display_nr:
        return _sign(a.display_nr - b.display_nr)
    return _sign(a.team_entry_id - b.team_entry_id)


def rank_teams(
    team_entries: Iterable[TeamEntry],
    rounds: Sequence[RoundDescriptor],
    scores: Sequence[ScoreRecord],
    config: QuizConfig,
) -> list[TeamResult]:
    """Return every non-excluded team ordered best first with dense ranks 1..N.

    Tied totals never share a rank: the Ex Aequo rule decides first, then the
    lower display number, then the lower id.
    """
    points = index_scores(scores)
    unranked = [
        TeamResult(
            team_entry_id=entry.id,
            total=compute_total(entry.id, rounds, points, config),
            tiebreak_value=compute_tiebreak_value(entry.id, rounds, points),
            display_nr=entry.display_nr,
            name=entry.name,
        )
        for entry in team_entries
        if not entry.excluded
    ]
    ordered = sorted(unranked, key=cmp_to_key(lambda a, b: _compare_results(a, b, config)))
    logger.debug("Ranked %d teams over %d rounds", len(ordered), len(rounds))
    return [replace(result, rank=index + 1) for index, result in enumerate(ordered)]


def rank_snapshot(snapshot: QuizSnapshot) -> list[TeamResult]:
    return rank_teams(snapshot.teams, snapshot.rounds, snapshot.scores, snapshot.config)
