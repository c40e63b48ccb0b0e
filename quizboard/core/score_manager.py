"""Business logic for managing quiz scores shared between UI and API."""

from __future__ import annotations

import logging
from threading import Lock

from quizboard.constants.quiz_constants import DEFAULT_REVEAL_TIER_SIZE, DEFAULT_SHOWCASE_SIZE
from quizboard.core.leaderboard_views import (
    Board,
    Chart,
    RevealView,
    ShowcaseEntry,
    build_board,
    build_chart,
    build_reveal,
    build_showcase,
)
from quizboard.core.models import (
    QuizConfig,
    QuizSnapshot,
    RoundDescriptor,
    ScoreRecord,
    TeamEntry,
    TeamResult,
)
from quizboard.core.services.quiz_repository import QuizRepository
from quizboard.core.services.ranking_engine import rank_snapshot

logger = logging.getLogger(__name__)


class ScoreManager:
    """Facade over the quiz repository and the ranking engine.

    The Qt thread and the API thread share one instance. Mutations go through
    the lock; read views take a snapshot under the lock and compute outside it.
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._repository = QuizRepository()

    # --- Configuration ---

    def get_config(self) -> QuizConfig:
        with self._lock:
            return self._repository.get_config()

    def update_config(self, **changes: object) -> QuizConfig:
        with self._lock:
            config = self._repository.update_config(**changes)
        logger.info("Quiz configuration updated: %s", changes)
        return config

    # --- Rounds ---

    def get_rounds(self) -> list[RoundDescriptor]:
        with self._lock:
            return self._repository.get_rounds()

    def add_round(
        self,
        title: str,
        max_score: float,
        exclude_from_scale: bool = False,
        is_tiebreak_round: bool = False,
    ) -> RoundDescriptor:
        with self._lock:
            round_ = self._repository.add_round(title, max_score, exclude_from_scale, is_tiebreak_round)
        logger.info("Added round %s (%s, max %s)", round_.id, round_.title, round_.max_score)
        return round_

    def update_round(self, round_id: int, **changes: object) -> RoundDescriptor:
        with self._lock:
            round_ = self._repository.update_round(round_id, **changes)
        logger.info("Updated round %s: %s", round_id, changes)
        return round_

    def delete_round(self, round_id: int) -> None:
        with self._lock:
            self._repository.delete_round(round_id)
        logger.info("Deleted round %s", round_id)

    def move_round(self, round_id: int, target_index: int) -> list[RoundDescriptor]:
        with self._lock:
            return self._repository.move_round(round_id, target_index)

    # --- Teams ---

    def get_teams(self) -> list[TeamEntry]:
        with self._lock:
            return self._repository.get_teams()

    def add_team(self, name: str) -> TeamEntry:
        with self._lock:
            team = self._repository.add_team(name)
        logger.info("Added team %s (%s)", team.id, team.name)
        return team

    def set_team_excluded(self, team_entry_id: int, excluded: bool) -> TeamEntry:
        with self._lock:
            team = self._repository.set_team_excluded(team_entry_id, excluded)
        logger.info("Team %s %s ranking", team_entry_id, "excluded from" if excluded else "included in")
        return team

    def delete_team(self, team_entry_id: int) -> None:
        with self._lock:
            self._repository.delete_team(team_entry_id)
        logger.info("Deleted team %s", team_entry_id)

    def move_team(self, team_entry_id: int, target_index: int) -> list[TeamEntry]:
        with self._lock:
            return self._repository.move_team(team_entry_id, target_index)

    # --- Scores ---

    def record_score(self, round_id: int, team_entry_id: int, points: float) -> ScoreRecord:
        with self._lock:
            return self._repository.record_score(round_id, team_entry_id, points)

    def get_score(self, round_id: int, team_entry_id: int) -> ScoreRecord | None:
        with self._lock:
            return self._repository.get_score(round_id, team_entry_id)

    def clear_score(self, round_id: int, team_entry_id: int) -> None:
        with self._lock:
            self._repository.clear_score(round_id, team_entry_id)
        logger.info("Cleared score of team %s in round %s", team_entry_id, round_id)

    def reset_quiz(self) -> None:
        with self._lock:
            self._repository.clear()
        logger.info("Quiz reset")

    # --- Ranking views ---

    def snapshot(self) -> QuizSnapshot:
        with self._lock:
            return self._repository.snapshot()

    def get_ranking(self) -> list[TeamResult]:
        return rank_snapshot(self.snapshot())

    def get_board(self) -> Board:
        return build_board(self.snapshot())

    def get_chart(self) -> Chart:
        return build_chart(self.snapshot())

    def get_showcase(self, limit: int = DEFAULT_SHOWCASE_SIZE) -> list[ShowcaseEntry]:
        return build_showcase(self.snapshot(), limit)

    def get_reveal(
        self,
        revealed_count: int = 0,
        tier_size: int = DEFAULT_REVEAL_TIER_SIZE,
    ) -> RevealView:
        return build_reveal(self.snapshot(), revealed_count, tier_size)
