"""View models for the board, chart, showcase and reveal presentations.

Every builder takes one snapshot and at most one ranking computed from it,
so all four views agree on totals, ranks and colors. Renderers (the API and
the Qt console) only format these objects.
"""

from __future__ import annotations

from dataclasses import dataclass

from quizboard.constants.quiz_constants import DEFAULT_REVEAL_TIER_SIZE, DEFAULT_SHOWCASE_SIZE
from quizboard.core.models import QuizSnapshot, RoundDescriptor, TeamResult
from quizboard.core.services.gradient_color_mapper import RGBColor, color_for, podium_color
from quizboard.core.services.ranking_engine import rank_snapshot
from quizboard.core.services.reveal_sequencer import RevealSequencer
from quizboard.core.services.team_totals import (
    find_tiebreak_round,
    index_scores,
    max_possible_total,
    round_breakdown,
    scoring_rounds,
)


@dataclass(slots=True, frozen=True)
class BoardRow:
    result: TeamResult
    round_points: tuple[float, ...]
    color: RGBColor


@dataclass(slots=True, frozen=True)
class Board:
    """Tabular board: one row per ranked team, one column per scoring round."""

    rounds: tuple[RoundDescriptor, ...]
    tiebreak_round: RoundDescriptor | None
    rows: tuple[BoardRow, ...]


@dataclass(slots=True, frozen=True)
class ChartBar:
    result: TeamResult
    color: RGBColor


@dataclass(slots=True, frozen=True)
class Chart:
    bars: tuple[ChartBar, ...]
    max_possible_total: float


@dataclass(slots=True, frozen=True)
class ShowcaseEntry:
    result: TeamResult
    color: RGBColor


@dataclass(slots=True, frozen=True)
class RevealView:
    revealed: tuple[ShowcaseEntry, ...]
    revealed_count: int
    team_count: int
    tier_size: int
    next_rank: int | None

    @property
    def is_complete(self) -> bool:
        return self.revealed_count >= self.team_count


def _ranking(snapshot: QuizSnapshot, ranking: list[TeamResult] | None) -> list[TeamResult]:
    return rank_snapshot(snapshot) if ranking is None else ranking


def build_board(snapshot: QuizSnapshot, ranking: list[TeamResult] | None = None) -> Board:
    ranking = _ranking(snapshot, ranking)
    field_size = len(ranking)
    gradient = snapshot.config.gradient_enabled
    points_index = index_scores(snapshot.scores)
    rows = tuple(
        BoardRow(
            result=result,
            round_points=tuple(
                points
                for _, points in round_breakdown(
                    result.team_entry_id, snapshot.rounds, points_index, snapshot.config
                )
            ),
            color=color_for(result.rank, field_size, gradient),
        )
        for result in ranking
    )
    return Board(
        rounds=tuple(scoring_rounds(snapshot.rounds)),
        tiebreak_round=find_tiebreak_round(snapshot.rounds),
        rows=rows,
    )


def build_chart(snapshot: QuizSnapshot, ranking: list[TeamResult] | None = None) -> Chart:
    ranking = _ranking(snapshot, ranking)
    field_size = len(ranking)
    bars = tuple(
        ChartBar(result=result, color=color_for(result.rank, field_size, snapshot.config.gradient_enabled))
        for result in ranking
    )
    return Chart(bars=bars, max_possible_total=max_possible_total(snapshot.rounds, snapshot.config))


def build_showcase(
    snapshot: QuizSnapshot,
    limit: int = DEFAULT_SHOWCASE_SIZE,
    ranking: list[TeamResult] | None = None,
) -> list[ShowcaseEntry]:
    """Top ``limit`` teams with podium colors."""
    if limit < 0:
        raise ValueError("Showcase limit must not be negative.")
    ranking = _ranking(snapshot, ranking)
    return [
        ShowcaseEntry(result=result, color=podium_color(result.rank, snapshot.config.gradient_enabled))
        for result in ranking[:limit]
    ]


def build_reveal(
    snapshot: QuizSnapshot,
    revealed_count: int = 0,
    tier_size: int = DEFAULT_REVEAL_TIER_SIZE,
    ranking: list[TeamResult] | None = None,
) -> RevealView:
    """Describe what a reveal screen shows after ``revealed_count`` advances."""
    ranking = _ranking(snapshot, ranking)
    sequencer = RevealSequencer(ranking, top_tier_size=tier_size, revealed_count=revealed_count)
    gradient = snapshot.config.gradient_enabled
    upcoming = sequencer.next_result()
    return RevealView(
        revealed=tuple(
            ShowcaseEntry(result=result, color=podium_color(result.rank, gradient))
            for result in sequencer.revealed_results()
        ),
        revealed_count=sequencer.revealed_count,
        team_count=sequencer.team_count,
        tier_size=sequencer.tier_size,
        next_rank=upcoming.rank if upcoming is not None else None,
    )
