"""Static metadata describing QuizBoard."""

APP_NAME = "QuizBoard"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "QuizBoard scores team quizzes: it normalizes round scores onto a common scale, "
    "ranks teams with Ex Aequo tiebreaking, and presents the standings as a board, "
    "a chart, a top-N showcase and a click-to-reveal ceremony."
)

HELP_TEXT = (
    "Enter points per round in the Score Entry view. Rounds flagged 'exclude from scale' keep "
    "their raw points when scale conversion is on. The tiebreak round never counts towards the "
    "total; with Ex Aequo enabled, tied teams are ordered by how close their tiebreak answer is "
    "to the target value.\n\n"
    "In the Reveal view every click discloses one team: the top five from fifth place up to the "
    "winner, then the rest of the field from sixth place down."
)
