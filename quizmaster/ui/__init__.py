"""Qt desktop window for QuizMaster."""

from .dialog_helpers import confirm_clear_history, show_error, show_info
from .main_window import QuizMasterWindow

__all__ = [
    "QuizMasterWindow",
    "confirm_clear_history",
    "show_error",
    "show_info",
]
