"""Quiz-related constants shared across UI and core layers."""

DEFAULT_REVEAL_TIER_SIZE: int = 5
DEFAULT_SHOWCASE_SIZE: int = 5
MOCK_QUIZ_TEAM_COUNT: int = 8
MOCK_QUIZ_ROUND_COUNT: int = 5
MOCK_QUIZ_STANDARD_SCALE: float = 10.0
MOCK_QUIZ_MAX_SCORES: tuple[int, ...] = (5, 10, 15, 20)
