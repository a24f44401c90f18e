"""Qt window that hosts the quiz page in an embedded browser."""

from __future__ import annotations

import logging

from PySide6.QtCore import QUrl
from PySide6.QtGui import QAction, QDesktopServices
from PySide6.QtWebEngineWidgets import QWebEngineView
from PySide6.QtWidgets import QMainWindow, QToolBar

from quizmaster.constants.about import APP_ABOUT_TEXT, APP_LICENSE, APP_NAME, APP_VERSION
from quizmaster.constants.ui_constants import (
    ABOUT_ACTION,
    CLEAR_HISTORY_BUTTON,
    OPEN_IN_BROWSER_ACTION,
    RELOAD_ACTION,
    WINDOW_MIN_HEIGHT,
    WINDOW_MIN_WIDTH,
    WINDOW_TITLE,
)
from quizmaster.core.quiz_manager import QuizManager
from quizmaster.styling import Styles
from quizmaster.ui.dialog_helpers import confirm_clear_history, show_error, show_info

logger = logging.getLogger(__name__)


class QuizMasterWindow(QMainWindow):
    """Desktop shell around the served page; all quiz logic stays in the server."""

    def __init__(self, quiz_manager: QuizManager, app_url: str) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.setMinimumSize(WINDOW_MIN_WIDTH, WINDOW_MIN_HEIGHT)

        self.quiz_manager = quiz_manager
        self.app_url = app_url

        self._build_ui()
        self.setStyleSheet(Styles.get_main_window_style())

    def _build_ui(self) -> None:
        self.web_view = QWebEngineView(self)
        self.web_view.loadFinished.connect(self._handle_load_finished)
        self.setCentralWidget(self.web_view)

        toolbar = QToolBar(self)
        toolbar.setMovable(False)
        self.addToolBar(toolbar)

        reload_action = QAction(RELOAD_ACTION, self)
        reload_action.triggered.connect(self.web_view.reload)
        toolbar.addAction(reload_action)

        browser_action = QAction(OPEN_IN_BROWSER_ACTION, self)
        browser_action.triggered.connect(self._open_in_browser)
        toolbar.addAction(browser_action)

        clear_action = QAction(f"{CLEAR_HISTORY_BUTTON} History", self)
        clear_action.triggered.connect(self._handle_clear_history)
        toolbar.addAction(clear_action)

        about_action = QAction(ABOUT_ACTION, self)
        about_action.triggered.connect(self._show_about)
        toolbar.addAction(about_action)

        self.web_view.load(QUrl(self.app_url))

    def _handle_load_finished(self, ok: bool) -> None:
        if not ok:
            logger.error("Could not load %s", self.app_url)
            show_error(self, APP_NAME, f"Could not reach the quiz server at {self.app_url}.")

    def _open_in_browser(self) -> None:
        QDesktopServices.openUrl(QUrl(self.app_url))

    def _handle_clear_history(self) -> None:
        if not confirm_clear_history(self):
            return
        self.quiz_manager.clear_history()
        self.web_view.reload()

    def _show_about(self) -> None:
        show_info(
            self,
            f"About {APP_NAME}",
            f"{APP_NAME} {APP_VERSION}\n\n{APP_ABOUT_TEXT}\n\n{APP_LICENSE}",
        )
