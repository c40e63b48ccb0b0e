"""Application entry point for the QuizBoard console."""

from __future__ import annotations

import socket
import sys

from PySide6.QtWidgets import QApplication

from quizboard.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from quizboard.core.mock_quiz import generate_mock_quiz
from quizboard.core.score_manager import ScoreManager
from quizboard.server.api_server import start_api_server
from quizboard.ui.scoreboard_window import ScoreboardWindow
from quizboard.utils.logging_config import configure_logging


def _determine_api_url(port: int) -> str:
    """Best-effort determination of the local IP for the presentation API URL."""
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            sock.connect(("8.8.8.8", 80))
            ip_address = sock.getsockname()[0]
    except OSError:
        ip_address = "127.0.0.1"
    return f"http://{ip_address}:{port}/"


def main() -> None:
    """Initialize logging, start the API server, and launch the Qt console."""
    logger = configure_logging()
    logger.info("Starting QuizBoard console...")

    score_manager = ScoreManager()
    generate_mock_quiz(score_manager)
    start_api_server(score_manager=score_manager, host=DEFAULT_HOST, port=DEFAULT_PORT)
    api_url = _determine_api_url(DEFAULT_PORT)
    logger.info("Presentation API available at %s", api_url)

    app = QApplication(sys.argv)
    window = ScoreboardWindow(score_manager=score_manager, api_url=api_url)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
