"""Domain models for quiz scoring and ranking."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True, frozen=True)
class QuizConfig:
    """Quiz-level scoring configuration, read-only to the engine."""

    scale_conversion_enabled: bool = False
    standard_scale: float | None = None
    gradient_enabled: bool = True
    ex_aequo_enabled: bool = False
    ex_aequo_target_value: float | None = None


@dataclass(slots=True, frozen=True)
class RoundDescriptor:
    """One scored segment of the quiz."""

    id: int
    sequence_nr: int
    max_score: float
    exclude_from_scale: bool = False
    is_tiebreak_round: bool = False  # Raw comparison value, never part of the total
    title: str = ""


@dataclass(slots=True, frozen=True)
class TeamEntry:
    """A team taking part in the quiz."""

    id: int
    display_nr: int
    name: str
    excluded: bool = False


@dataclass(slots=True, frozen=True)
class ScoreRecord:
    """Points a team earned in one round. Unique per (round_id, team_entry_id)."""

    round_id: int
    team_entry_id: int
    points: float


@dataclass(slots=True, frozen=True)
class TeamResult:
    """Derived ranking entry; rank is 0 until the ranking engine assigns it."""

    team_entry_id: int
    total: float
    tiebreak_value: float
    rank: int = 0
    display_nr: int = 0
    name: str = ""


@dataclass(slots=True, frozen=True)
class QuizSnapshot:
    """Consistent copy of every input the engine needs for one computation."""

    config: QuizConfig = field(default_factory=QuizConfig)
    rounds: tuple[RoundDescriptor, ...] = ()
    teams: tuple[TeamEntry, ...] = ()
    scores: tuple[ScoreRecord, ...] = ()
