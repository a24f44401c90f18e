"""Domain models for the quiz application.

Records serialize to the camelCase field names used by the persisted history
format, so ``to_dict``/``from_dict`` pairs are the only place that naming leaks in.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import time


class Difficulty(Enum):
    """Ordered difficulty levels offered by the generation form."""

    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    EXPERT = "Expert"

    @classmethod
    def parse(cls, value: str) -> "Difficulty":
        cleaned = value.strip().lower()
        for member in cls:
            if member.value.lower() == cleaned:
                return member
        raise ValueError(f"Unknown difficulty: {value!r}")


def now_ms() -> int:
    """Current time as epoch milliseconds."""
    return int(time.time() * 1000)


@dataclass(frozen=True, slots=True)
class Question:
    """Multiple-choice question with exactly four options."""

    id: int
    text: str
    options: tuple[str, ...]
    correct_answer_index: int
    explanation: str

    @property
    def correct_option(self) -> str:
        return self.options[self.correct_answer_index]

    def option_text(self, index: int) -> str | None:
        if 0 <= index < len(self.options):
            return self.options[index]
        return None

    def to_dict(self) -> dict[str, object]:
        return {
            "id": self.id,
            "text": self.text,
            "options": list(self.options),
            "correctAnswerIndex": self.correct_answer_index,
            "explanation": self.explanation,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Question":
        return cls(
            id=int(data["id"]),
            text=str(data["text"]),
            options=tuple(str(option) for option in data["options"]),
            correct_answer_index=int(data["correctAnswerIndex"]),
            explanation=str(data["explanation"]),
        )


@dataclass(frozen=True, slots=True)
class Quiz:
    """A generated quiz. Lives for one session and is never persisted."""

    id: str
    topic: str
    difficulty: Difficulty
    questions: tuple[Question, ...]
    created_at: int

    def find_question(self, question_id: int) -> Question | None:
        return next((q for q in self.questions if q.id == question_id), None)

    def to_dict(self) -> dict[str, object]:
        return {
            "id": self.id,
            "topic": self.topic,
            "difficulty": self.difficulty.value,
            "questions": [question.to_dict() for question in self.questions],
            "createdAt": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Quiz":
        return cls(
            id=str(data["id"]),
            topic=str(data["topic"]),
            difficulty=Difficulty.parse(data["difficulty"]),
            questions=tuple(Question.from_dict(q) for q in data["questions"]),
            created_at=int(data["createdAt"]),
        )


@dataclass(frozen=True, slots=True)
class AnswerRecord:
    """The confirmed answer to one question."""

    question_id: int
    selected_option_index: int
    is_correct: bool

    def to_dict(self) -> dict[str, object]:
        return {
            "questionId": self.question_id,
            "selectedOptionIndex": self.selected_option_index,
            "isCorrect": self.is_correct,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "AnswerRecord":
        return cls(
            question_id=int(data["questionId"]),
            selected_option_index=int(data["selectedOptionIndex"]),
            is_correct=bool(data["isCorrect"]),
        )


@dataclass(frozen=True, slots=True)
class QuizResult:
    """Outcome of a completed quiz, as stored in the history."""

    quiz_id: str
    quiz_topic: str
    score: int
    total_questions: int
    date: int
    answers: tuple[AnswerRecord, ...]
    ai_feedback: str | None = None

    def find_answer(self, question_id: int) -> AnswerRecord | None:
        return next((a for a in self.answers if a.question_id == question_id), None)

    def to_dict(self) -> dict[str, object]:
        payload: dict[str, object] = {
            "quizId": self.quiz_id,
            "quizTopic": self.quiz_topic,
            "score": self.score,
            "totalQuestions": self.total_questions,
            "date": self.date,
            "answers": [answer.to_dict() for answer in self.answers],
        }
        if self.ai_feedback is not None:
            payload["aiFeedback"] = self.ai_feedback
        return payload

    @classmethod
    def from_dict(cls, data: dict) -> "QuizResult":
        feedback = data.get("aiFeedback")
        return cls(
            quiz_id=str(data["quizId"]),
            quiz_topic=str(data["quizTopic"]),
            score=int(data["score"]),
            total_questions=int(data["totalQuestions"]),
            date=int(data["date"]),
            answers=tuple(AnswerRecord.from_dict(a) for a in data["answers"]),
            ai_feedback=str(feedback) if feedback is not None else None,
        )
