"""Scoring plus the view models for the results and history screens."""

from __future__ import annotations

from datetime import datetime, timezone
import math
from typing import Iterable

from quizmaster.constants.quiz_constants import PASS_THRESHOLD_PERCENT, VERDICT_FAIL, VERDICT_PASS
from quizmaster.core.markdown_renderer import renderer
from quizmaster.core.models import AnswerRecord, Quiz, QuizResult, now_ms


def build_result(quiz: Quiz, answers: Iterable[AnswerRecord], date: int | None = None) -> QuizResult:
    """Score a completed quiz."""
    answer_list = tuple(answers)
    return QuizResult(
        quiz_id=quiz.id,
        quiz_topic=quiz.topic,
        score=sum(1 for answer in answer_list if answer.is_correct),
        total_questions=len(quiz.questions),
        date=now_ms() if date is None else date,
        answers=answer_list,
    )


def score_percentage(score: int, total_questions: int) -> int:
    """Whole-number percentage, halves rounded up (3/8 -> 38)."""
    if total_questions <= 0:
        return 0
    return math.floor(100 * score / total_questions + 0.5)


def verdict_for(percentage: int) -> str:
    return VERDICT_PASS if percentage >= PASS_THRESHOLD_PERCENT else VERDICT_FAIL


def is_passing(percentage: int) -> bool:
    return percentage >= PASS_THRESHOLD_PERCENT


def format_timestamp(timestamp_ms: int) -> str:
    return datetime.fromtimestamp(timestamp_ms / 1000, tz=timezone.utc).isoformat()


def build_results_view(quiz: Quiz, result: QuizResult) -> dict[str, object]:
    """Everything the results screen shows apart from the AI feedback."""
    percentage = score_percentage(result.score, result.total_questions)
    breakdown = []
    for number, question in enumerate(quiz.questions, start=1):
        answer = result.find_answer(question.id)
        is_correct = bool(answer and answer.is_correct)
        chosen = question.option_text(answer.selected_option_index) if answer else None
        breakdown.append(
            {
                "number": number,
                "question_id": question.id,
                "question_html": renderer.render_fragment(question.text),
                "selected_option_html": renderer.render_inline(chosen) if chosen is not None else None,
                "is_correct": is_correct,
                "correct_option_html": None if is_correct else renderer.render_inline(question.correct_option),
                "explanation_html": renderer.render_fragment(question.explanation),
            }
        )
    return {
        "quiz_id": result.quiz_id,
        "topic": quiz.topic,
        "difficulty": quiz.difficulty.value,
        "score": result.score,
        "total_questions": result.total_questions,
        "percentage": percentage,
        "verdict": verdict_for(percentage),
        "is_passing": is_passing(percentage),
        "chart": {
            "correct": result.score,
            "incorrect": result.total_questions - result.score,
        },
        "breakdown": breakdown,
    }


def build_history_rows(history: Iterable[QuizResult]) -> list[dict[str, object]]:
    rows = []
    for entry in history:
        percentage = score_percentage(entry.score, entry.total_questions)
        rows.append(
            {
                "quiz_id": entry.quiz_id,
                "topic": entry.quiz_topic,
                "score": entry.score,
                "total_questions": entry.total_questions,
                "percentage": percentage,
                "is_passing": is_passing(percentage),
                "date": entry.date,
                "date_iso": format_timestamp(entry.date),
            }
        )
    return rows
