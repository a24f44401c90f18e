"""Service for stepping through a quiz one question at a time."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from quizmaster.core.models import AnswerRecord, Difficulty, Question, Quiz

CompletionCallback = Callable[[list[AnswerRecord]], None]


class QuizTaker:
    """Linear question flow: select an option, then advance.

    Advancing past the last question hands the full answer list to the
    completion callback exactly once. There is no way back.
    """

    def __init__(self, quiz: Quiz, on_complete: CompletionCallback | None = None) -> None:
        if not quiz.questions:
            raise ValueError("Quiz must contain at least one question.")
        self._quiz = quiz
        self._on_complete = on_complete
        self._current_index: int = 0
        self._selected_option: int | None = None
        self._answers: list[AnswerRecord] = []
        self._complete: bool = False

    @property
    def quiz(self) -> Quiz:
        return self._quiz

    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def current_question(self) -> Question:
        return self._quiz.questions[self._current_index]

    @property
    def question_number(self) -> int:
        return self._current_index + 1

    @property
    def question_count(self) -> int:
        return len(self._quiz.questions)

    @property
    def selected_option(self) -> int | None:
        return self._selected_option

    @property
    def is_last_question(self) -> bool:
        return self._current_index == self.question_count - 1

    @property
    def is_complete(self) -> bool:
        return self._complete

    @property
    def progress(self) -> float:
        """Fraction of the quiz reached, for display only."""
        return self.question_number / self.question_count

    @property
    def answers(self) -> list[AnswerRecord]:
        return list(self._answers)

    def select_option(self, option_index: int) -> None:
        if self._complete:
            raise RuntimeError("Quiz is already complete.")
        if not 0 <= option_index < len(self.current_question.options):
            raise ValueError(f"Option index {option_index} out of range")
        self._selected_option = option_index

    def advance(self) -> bool:
        """Confirm the pending selection. Returns False when there is none."""
        if self._complete or self._selected_option is None:
            return False

        question = self.current_question
        self._answers.append(
            AnswerRecord(
                question_id=question.id,
                selected_option_index=self._selected_option,
                is_correct=self._selected_option == question.correct_answer_index,
            )
        )
        self._selected_option = None

        if not self.is_last_question:
            self._current_index += 1
            return True

        self._complete = True
        if self._on_complete is not None:
            self._on_complete(self.answers)
        return True

    def snapshot(self) -> QuizStep:
        return QuizStep(
            topic=self._quiz.topic,
            difficulty=self._quiz.difficulty,
            question=self.current_question,
            question_number=self.question_number,
            question_count=self.question_count,
            progress=self.progress,
            selected_option=self._selected_option,
            is_last_question=self.is_last_question,
        )


@dataclass(frozen=True, slots=True)
class QuizStep:
    """Read-only view of where a QuizTaker currently is."""

    topic: str
    difficulty: Difficulty
    question: Question
    question_number: int
    question_count: int
    progress: float
    selected_option: int | None
    is_last_question: bool
