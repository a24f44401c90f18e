"""Helper functions for common dialog patterns in the desktop window."""

from __future__ import annotations

from PySide6.QtWidgets import QMessageBox, QWidget

from quizmaster.constants.ui_constants import CLEAR_HISTORY_CONFIRM


def confirm_clear_history(parent: QWidget) -> bool:
    """Ask before deleting every stored quiz result.

    Returns:
        True if user confirmed, False otherwise
    """
    reply = QMessageBox.question(
        parent,
        "Confirm Clear History",
        CLEAR_HISTORY_CONFIRM,
        QMessageBox.Yes | QMessageBox.No,
        QMessageBox.No
    )
    return reply == QMessageBox.Yes


def show_error(parent: QWidget, title: str, message: str) -> None:
    QMessageBox.critical(parent, title, message)


def show_info(parent: QWidget, title: str, message: str) -> None:
    """Show information dialog.

    Args:
        parent: Parent widget for the dialog
        title: Dialog title
        message: Information message
    """
    msg_box = QMessageBox(parent)
    msg_box.setIcon(QMessageBox.Information)
    msg_box.setWindowTitle(title)
    msg_box.setText(message)
    msg_box.setStandardButtons(QMessageBox.Ok)
    msg_box.exec()
