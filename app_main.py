"""Application entry point for DevOps QuizMaster."""

from __future__ import annotations

import sys

from quizmaster.config import Settings, get_settings
from quizmaster.core.quiz_manager import QuizManager
from quizmaster.core.services.gemini_service import GeminiService
from quizmaster.core.services.history_store import HistoryStore
from quizmaster.core.services.local_storage import LocalStorage
from quizmaster.server.api_server import run_api_server, start_api_server
from quizmaster.utils.logging_config import configure_logging


def build_quiz_manager(settings: Settings) -> QuizManager:
    """Wire the Gemini client and the local history store into a QuizManager."""
    gemini = GeminiService(
        api_key=settings.GEMINI_API_KEY,
        model=settings.MODEL,
        temperature=settings.TEMPERATURE,
        question_count=settings.QUESTION_COUNT,
    )
    history = HistoryStore(LocalStorage(settings.storage_path), limit=settings.HISTORY_LIMIT)
    return QuizManager(gemini=gemini, history=history)


def _app_url(settings: Settings) -> str:
    host = "127.0.0.1" if settings.HOST in ("0.0.0.0", "") else settings.HOST
    return f"http://{host}:{settings.PORT}/"


def main() -> None:
    """Initialize logging, start the API server, and open the desktop window."""
    settings = get_settings()
    logger = configure_logging(settings.LOG_LEVEL)
    logger.info("Starting DevOps QuizMaster…")
    if not settings.GEMINI_API_KEY:
        logger.warning("No Gemini API key configured; quiz generation will fail until one is set.")
    logger.info("Quiz history stored in %s", settings.storage_path)

    quiz_manager = build_quiz_manager(settings)
    app_url = _app_url(settings)

    if not settings.DESKTOP_WINDOW:
        logger.info("Quiz page available at %s", app_url)
        run_api_server(quiz_manager=quiz_manager, host=settings.HOST, port=settings.PORT)
        return

    from PySide6.QtWidgets import QApplication

    from quizmaster.ui.main_window import QuizMasterWindow

    start_api_server(quiz_manager=quiz_manager, host=settings.HOST, port=settings.PORT)
    logger.info("Quiz page available at %s", app_url)

    app = QApplication(sys.argv)
    window = QuizMasterWindow(quiz_manager=quiz_manager, app_url=app_url)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
