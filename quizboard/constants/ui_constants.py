"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "QuizBoard Console"
API_URL_PLACEHOLDER: str = "http://<host-ip>:8000/"
BOARD_REFRESH_INTERVAL_MS: int = 1000
BOARD_ROW_ALPHA: float = 0.15

MODE_BUTTON_BOARD: str = "Scoreboard"
MODE_BUTTON_SCORES: str = "Enter Scores"
MODE_BUTTON_REVEAL: str = "Reveal"
MODE_BUTTON_MOCK: str = "Generate Mock Quiz"

REVEAL_NEXT_BUTTON: str = "Reveal Next Team"
REVEAL_RESET_BUTTON: str = "Start Over"
REVEAL_HINT: str = "Click to reveal the next team..."
REVEAL_COMPLETE_MESSAGE: str = "All teams revealed."
REVEAL_EMPTY_STATE: str = "No teams available yet."

SCORES_ROUND_LABEL: str = "Round:"
SCORES_SAVE_BUTTON: str = "Save Scores"
SCORES_NO_ROUNDS_MESSAGE: str = "Add at least one round before entering scores."
SCORES_SAVED_MESSAGE: str = "Scores saved for {round_title}."

CONFIRM_MOCK_QUIZ_MESSAGE: str = "Generating a mock quiz will replace the current quiz. Continue?"
EX_AEQUO_NO_TIEBREAK_MESSAGE: str = (
    "Ex Aequo is enabled but the quiz has no tiebreak round. Tied teams will be "
    "ordered by team number until one is added."
)
