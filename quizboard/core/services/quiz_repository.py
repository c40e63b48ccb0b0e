"""Service for storing and validating the rounds, teams and scores of a quiz."""

from __future__ import annotations

from dataclasses import fields, replace

from quizboard.core.models import (
    QuizConfig,
    QuizSnapshot,
    RoundDescriptor,
    ScoreRecord,
    TeamEntry,
)
from quizboard.core.services.sequencing import resequence, sequence_numbers

_CONFIG_FIELDS = frozenset(f.name for f in fields(QuizConfig))
_ROUND_UPDATE_FIELDS = frozenset({"title", "max_score", "exclude_from_scale", "is_tiebreak_round"})


class QuizRepository:
    """Holds one quiz's records and rejects data the ranking engine must never see.

    Scores are keyed by ``(round_id, team_entry_id)`` so a second record for
    the same pair replaces the first.
    """

    def __init__(self) -> None:
        self._config = QuizConfig()
        self._rounds: dict[int, RoundDescriptor] = {}
        self._teams: dict[int, TeamEntry] = {}
        self._scores: dict[tuple[int, int], ScoreRecord] = {}
        self._round_counter: int = 0
        self._team_counter: int = 0

    # --- Configuration ---

    def get_config(self) -> QuizConfig:
        return self._config

    def update_config(self, **changes: object) -> QuizConfig:
        unknown = set(changes) - _CONFIG_FIELDS
        if unknown:
            raise ValueError(f"Unknown configuration field(s): {', '.join(sorted(unknown))}.")
        standard_scale = changes.get("standard_scale", self._config.standard_scale)
        if standard_scale is not None and standard_scale < 0:
            raise ValueError("Standard scale must not be negative.")
        self._config = replace(self._config, **changes)
        return self._config

    # --- Rounds ---

    def get_rounds(self) -> list[RoundDescriptor]:
        return sorted(self._rounds.values(), key=lambda r: r.sequence_nr)

    def get_round(self, round_id: int) -> RoundDescriptor:
        try:
            return self._rounds[round_id]
        except KeyError:
            raise KeyError(f"Round {round_id} not found") from None

    def add_round(
        self,
        title: str,
        max_score: float,
        exclude_from_scale: bool = False,
        is_tiebreak_round: bool = False,
    ) -> RoundDescriptor:
        self._validate_max_score(max_score)
        if is_tiebreak_round:
            self._ensure_no_other_tiebreak_round(None)
        self._round_counter += 1
        round_ = RoundDescriptor(
            id=self._round_counter,
            sequence_nr=len(self._rounds) + 1,
            max_score=max_score,
            exclude_from_scale=exclude_from_scale,
            is_tiebreak_round=is_tiebreak_round,
            title=title.strip() or f"Round {len(self._rounds) + 1}",
        )
        self._rounds[round_.id] = round_
        return round_

    def update_round(self, round_id: int, **changes: object) -> RoundDescriptor:
        current = self.get_round(round_id)
        unknown = set(changes) - _ROUND_UPDATE_FIELDS
        if unknown:
            raise ValueError(f"Unknown round field(s): {', '.join(sorted(unknown))}.")
        if "max_score" in changes:
            max_score = changes["max_score"]
            self._validate_max_score(max_score)
            over_limit = [
                score for score in self._scores.values()
                if score.round_id == round_id and score.points > max_score
            ]
            if over_limit:
                raise ValueError("Existing scores exceed the new maximum score for this round.")
        if changes.get("is_tiebreak_round"):
            self._ensure_no_other_tiebreak_round(round_id)
        updated = replace(current, **changes)
        self._rounds[round_id] = updated
        return updated

    def delete_round(self, round_id: int) -> None:
        self.get_round(round_id)
        del self._rounds[round_id]
        self._scores = {key: score for key, score in self._scores.items() if key[0] != round_id}
        self._renumber_rounds([r.id for r in self.get_rounds()])

    def move_round(self, round_id: int, target_index: int) -> list[RoundDescriptor]:
        self.get_round(round_id)
        order = resequence([r.id for r in self.get_rounds()], round_id, target_index)
        self._renumber_rounds(order)
        return self.get_rounds()

    # --- Teams ---

    def get_teams(self) -> list[TeamEntry]:
        return sorted(self._teams.values(), key=lambda t: t.display_nr)

    def get_team(self, team_entry_id: int) -> TeamEntry:
        try:
            return self._teams[team_entry_id]
        except KeyError:
            raise KeyError(f"Team {team_entry_id} not found") from None

    def add_team(self, name: str) -> TeamEntry:
        cleaned = name.strip()
        if not cleaned:
            raise ValueError("Team name must not be empty.")
        self._team_counter += 1
        team = TeamEntry(id=self._team_counter, display_nr=len(self._teams) + 1, name=cleaned)
        self._teams[team.id] = team
        return team

    def set_team_excluded(self, team_entry_id: int, excluded: bool) -> TeamEntry:
        team = replace(self.get_team(team_entry_id), excluded=excluded)
        self._teams[team_entry_id] = team
        return team

    def delete_team(self, team_entry_id: int) -> None:
        self.get_team(team_entry_id)
        del self._teams[team_entry_id]
        self._scores = {
            key: score for key, score in self._scores.items() if key[1] != team_entry_id
        }
        self._renumber_teams([t.id for t in self.get_teams()])

    def move_team(self, team_entry_id: int, target_index: int) -> list[TeamEntry]:
        self.get_team(team_entry_id)
        order = resequence([t.id for t in self.get_teams()], team_entry_id, target_index)
        self._renumber_teams(order)
        return self.get_teams()

    # --- Scores ---

    def get_scores(self) -> list[ScoreRecord]:
        return list(self._scores.values())

    def get_score(self, round_id: int, team_entry_id: int) -> ScoreRecord | None:
        return self._scores.get((round_id, team_entry_id))

    def record_score(self, round_id: int, team_entry_id: int, points: float) -> ScoreRecord:
        round_ = self.get_round(round_id)
        self.get_team(team_entry_id)
        if points < 0:
            raise ValueError("Points must not be negative.")
        if points > round_.max_score:
            raise ValueError(
                f"Points {points} exceed the maximum score {round_.max_score} of round {round_id}."
            )
        record = ScoreRecord(round_id=round_id, team_entry_id=team_entry_id, points=points)
        self._scores[(round_id, team_entry_id)] = record
        return record

    def clear_score(self, round_id: int, team_entry_id: int) -> None:
        self.get_round(round_id)
        self.get_team(team_entry_id)
        self._scores.pop((round_id, team_entry_id), None)

    # --- Snapshot ---

    def snapshot(self) -> QuizSnapshot:
        return QuizSnapshot(
            config=self._config,
            rounds=tuple(self.get_rounds()),
            teams=tuple(self.get_teams()),
            scores=tuple(self._scores.values()),
        )

    def clear(self) -> None:
        self._rounds.clear()
        self._teams.clear()
        self._scores.clear()

    def _renumber_rounds(self, ordered_ids: list[int]) -> None:
        for round_id, nr in sequence_numbers(ordered_ids).items():
            self._rounds[round_id] = replace(self._rounds[round_id], sequence_nr=nr)

    def _renumber_teams(self, ordered_ids: list[int]) -> None:
        for team_id, nr in sequence_numbers(ordered_ids).items():
            self._teams[team_id] = replace(self._teams[team_id], display_nr=nr)

    def _ensure_no_other_tiebreak_round(self, round_id: int | None) -> None:
        for existing in self._rounds.values():
            if existing.is_tiebreak_round and existing.id != round_id:
                raise ValueError(
                    f"Round {existing.id} is already the tiebreak round; a quiz may have only one."
                )

    @staticmethod
    def _validate_max_score(max_score: object) -> None:
        if not isinstance(max_score, (int, float)) or isinstance(max_score, bool):
            raise ValueError("Maximum score must be a number.")
        if max_score <= 0:
            raise ValueError("Maximum score must be positive.")
