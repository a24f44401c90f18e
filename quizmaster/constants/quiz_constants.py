"""Quiz-related constants shared across the core and server layers."""

DEFAULT_MODEL: str = "gemini-2.5-flash"
DEFAULT_TEMPERATURE: float = 0.7
DEFAULT_QUESTION_COUNT: int = 5
OPTIONS_PER_QUESTION: int = 4

SYSTEM_INSTRUCTION: str = "You are a senior technical interviewer creating rigorous test questions."

PASS_THRESHOLD_PERCENT: int = 70
VERDICT_PASS: str = "Great Job!"
VERDICT_FAIL: str = "Keep Practicing"

GENERATION_ERROR_MESSAGE: str = "Failed to generate quiz. Please check your API key and try again."
FEEDBACK_EMPTY_MESSAGE: str = "Analysis unavailable."
FEEDBACK_ERROR_MESSAGE: str = "Could not generate AI analysis at this time."

TOPIC_SUGGESTIONS: tuple[str, ...] = (
    "Kubernetes Pod Lifecycle",
    "Docker Multi-stage Builds",
    "Jenkins Groovy Pipelines",
    "Terraform State Management",
    "Git Branching Strategies",
)
