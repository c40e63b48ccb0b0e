"""Shared fixtures for the scoring engine tests."""

from __future__ import annotations

import pytest

from quizboard.core.models import QuizConfig, RoundDescriptor, ScoreRecord, TeamEntry
from quizboard.core.score_manager import ScoreManager


@pytest.fixture
def scaled_config() -> QuizConfig:
    """Scale conversion onto 10 points per round, Ex Aequo off."""
    return QuizConfig(scale_conversion_enabled=True, standard_scale=10)


@pytest.fixture
def example_rounds() -> list[RoundDescriptor]:
    """Round A out of 20, round B out of 10 kept raw, and a tiebreak round."""
    return [
        RoundDescriptor(id=1, sequence_nr=1, max_score=20, title="A"),
        RoundDescriptor(id=2, sequence_nr=2, max_score=10, exclude_from_scale=True, title="B"),
        RoundDescriptor(id=3, sequence_nr=3, max_score=100, is_tiebreak_round=True, title="Ex Aequo"),
    ]


@pytest.fixture
def tied_teams() -> list[TeamEntry]:
    return [
        TeamEntry(id=1, display_nr=1, name="Team X"),
        TeamEntry(id=2, display_nr=2, name="Team Y"),
    ]


@pytest.fixture
def tied_scores() -> list[ScoreRecord]:
    """Both teams total 10 on the standard scale; tiebreak answers 9 and 6."""
    return [
        ScoreRecord(round_id=1, team_entry_id=1, points=10),
        ScoreRecord(round_id=2, team_entry_id=1, points=5),
        ScoreRecord(round_id=3, team_entry_id=1, points=9),
        ScoreRecord(round_id=1, team_entry_id=2, points=20),
        ScoreRecord(round_id=3, team_entry_id=2, points=6),
    ]


@pytest.fixture
def manager() -> ScoreManager:
    return ScoreManager()
