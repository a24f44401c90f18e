"""Input rules for the quiz generation form."""

from __future__ import annotations

from dataclasses import dataclass

from quizmaster.constants.quiz_constants import TOPIC_SUGGESTIONS
from quizmaster.core.models import Difficulty


@dataclass(slots=True)
class GenerationForm:
    """Topic text plus a difficulty choice."""

    topic: str = ""
    difficulty: Difficulty = Difficulty.INTERMEDIATE

    @property
    def normalized_topic(self) -> str:
        return self.topic.strip()

    def can_submit(self, is_generating: bool) -> bool:
        return bool(self.normalized_topic) and not is_generating

    def apply_suggestion(self, suggestion: str) -> None:
        """Replace the topic with a suggestion."""
        self.topic = suggestion


def form_options() -> dict[str, object]:
    """Static choices the page needs to draw the form."""
    return {
        "difficulties": [difficulty.value for difficulty in Difficulty],
        "default_difficulty": GenerationForm().difficulty.value,
        "suggestions": list(TOPIC_SUGGESTIONS),
    }
