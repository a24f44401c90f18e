"""UI strings shared by the web page and the desktop window."""

WINDOW_TITLE: str = "DevOps QuizMaster"
WINDOW_MIN_WIDTH: int = 960
WINDOW_MIN_HEIGHT: int = 720

TOPIC_PLACEHOLDER: str = "e.g. Kubernetes Networking"
GENERATE_BUTTON: str = "Generate Quiz"
GENERATING_BUTTON: str = "Generating Quiz..."
NEXT_QUESTION_BUTTON: str = "Next Question"
FINISH_QUIZ_BUTTON: str = "Finish Quiz"
BACK_TO_DASHBOARD_BUTTON: str = "Back to Dashboard"
NEW_QUIZ_BUTTON_TEMPLATE: str = "New Quiz on {topic}"
HISTORY_BUTTON: str = "History"
CLEAR_HISTORY_BUTTON: str = "Clear"
CLEAR_HISTORY_CONFIRM: str = "Are you sure you want to delete all quiz history?"
HISTORY_EMPTY_MESSAGE: str = "No quiz history yet. Complete a quiz to see it here."
FEEDBACK_LOADING_MESSAGE: str = "Analyzing your performance..."

OPEN_IN_BROWSER_ACTION: str = "Open in Browser"
RELOAD_ACTION: str = "Reload"
ABOUT_ACTION: str = "About"
