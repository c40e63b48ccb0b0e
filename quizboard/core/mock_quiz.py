"""Generation of demo quizzes with random teams, rounds and scores."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import random

from quizboard.constants.quiz_constants import (
    MOCK_QUIZ_MAX_SCORES,
    MOCK_QUIZ_ROUND_COUNT,
    MOCK_QUIZ_STANDARD_SCALE,
    MOCK_QUIZ_TEAM_COUNT,
)
from quizboard.core.score_manager import ScoreManager

logger = logging.getLogger(__name__)

_TEAM_NAMES = [
    "Quizzly Bears",
    "The Know-It-Owls",
    "Trivia Newton John",
    "Les Quizerables",
    "Agatha Quiztie",
    "Universally Challenged",
    "The Smarty Pints",
    "Quiz Khalifa",
    "Tequila Mockingbird",
    "Let's Get Quizzical",
    "The Brainy Bunch",
    "Sherlock Homies",
]


@dataclass(slots=True)
class MockQuizOptions:
    """Parameters for a generated quiz."""

    team_count: int = MOCK_QUIZ_TEAM_COUNT
    round_count: int = MOCK_QUIZ_ROUND_COUNT
    with_scores: bool = True
    use_standard_scale: bool = False
    standard_scale: float = MOCK_QUIZ_STANDARD_SCALE
    seed: int | None = None


def generate_mock_quiz(manager: ScoreManager, options: MockQuizOptions | None = None) -> None:
    """Replace the manager's quiz with a generated one.

    With ``use_standard_scale`` the rounds get varying maximum scores and
    scale conversion is switched on; otherwise every round is out of 10.
    """
    options = options or MockQuizOptions()
    if options.team_count < 1 or options.round_count < 1:
        raise ValueError("A mock quiz needs at least one team and one round.")

    rng = random.Random(options.seed)
    manager.reset_quiz()
    manager.update_config(
        scale_conversion_enabled=options.use_standard_scale,
        standard_scale=options.standard_scale if options.use_standard_scale else None,
    )

    rounds = []
    for index in range(options.round_count):
        max_score = rng.choice(MOCK_QUIZ_MAX_SCORES) if options.use_standard_scale else 10
        rounds.append(manager.add_round(f"Round {index + 1}", max_score))

    teams = []
    for index in range(options.team_count):
        name = _TEAM_NAMES[index % len(_TEAM_NAMES)]
        if index >= len(_TEAM_NAMES):
            name = f"{name} {index // len(_TEAM_NAMES) + 1}"
        teams.append(manager.add_team(name))

    if options.with_scores:
        for round_ in rounds:
            for team in teams:
                manager.record_score(round_.id, team.id, rng.randint(0, int(round_.max_score)))

    logger.info(
        "Generated mock quiz with %d teams and %d rounds",
        options.team_count,
        options.round_count,
    )
