"""Tests for scoring and the results/history view models."""

import pytest

from quizmaster.core.models import AnswerRecord, QuizResult
from quizmaster.core.results import (
    build_history_rows,
    build_result,
    build_results_view,
    score_percentage,
    verdict_for,
)


def _answers(quiz, correct_count):
    answers = []
    for position, question in enumerate(quiz.questions):
        if position < correct_count:
            chosen = question.correct_answer_index
        else:
            chosen = (question.correct_answer_index + 1) % 4
        answers.append(
            AnswerRecord(
                question_id=question.id,
                selected_option_index=chosen,
                is_correct=chosen == question.correct_answer_index,
            )
        )
    return answers


class TestScoring:
    @pytest.mark.parametrize(
        "score,total,expected",
        [(3, 5, 60), (4, 5, 80), (3, 8, 38), (1, 8, 13), (2, 3, 67), (0, 5, 0), (5, 5, 100), (0, 0, 0)],
    )
    def test_percentage_rounds_half_up(self, score, total, expected):
        assert score_percentage(score, total) == expected

    def test_verdict_threshold(self):
        assert verdict_for(69) == "Keep Practicing"
        assert verdict_for(70) == "Great Job!"

    def test_build_result_counts_correct_answers(self, sample_quiz):
        result = build_result(sample_quiz, _answers(sample_quiz, 3), date=42)
        assert result.score == 3
        assert result.total_questions == 5
        assert result.quiz_id == sample_quiz.id
        assert result.quiz_topic == sample_quiz.topic
        assert result.date == 42
        assert result.ai_feedback is None


class TestResultsView:
    def test_failing_summary(self, sample_quiz):
        view = build_results_view(sample_quiz, build_result(sample_quiz, _answers(sample_quiz, 3)))
        assert view["percentage"] == 60
        assert view["verdict"] == "Keep Practicing"
        assert view["is_passing"] is False
        assert view["chart"] == {"correct": 3, "incorrect": 2}

    def test_passing_summary(self, sample_quiz):
        view = build_results_view(sample_quiz, build_result(sample_quiz, _answers(sample_quiz, 4)))
        assert view["verdict"] == "Great Job!"
        assert view["is_passing"] is True

    def test_breakdown_shows_correct_option_only_when_wrong(self, sample_quiz):
        view = build_results_view(sample_quiz, build_result(sample_quiz, _answers(sample_quiz, 3)))
        rows = view["breakdown"]
        assert [row["number"] for row in rows] == [1, 2, 3, 4, 5]
        assert rows[0]["is_correct"] is True
        assert rows[0]["correct_option_html"] is None
        assert rows[0]["selected_option_html"] == "Option 1-A"
        assert rows[4]["is_correct"] is False
        assert rows[4]["correct_option_html"] == "Option 5-A"
        assert rows[4]["selected_option_html"] == "Option 5-B"

    def test_breakdown_renders_markdown(self, sample_quiz):
        view = build_results_view(sample_quiz, build_result(sample_quiz, _answers(sample_quiz, 5)))
        row = view["breakdown"][0]
        assert "<code>step 1</code>" in row["question_html"]
        assert "Step 1 is explained here." in row["explanation_html"]

    def test_unanswered_question_counts_as_wrong(self, sample_quiz):
        result = QuizResult(sample_quiz.id, sample_quiz.topic, 0, 5, 0, ())
        row = build_results_view(sample_quiz, result)["breakdown"][0]
        assert row["is_correct"] is False
        assert row["selected_option_html"] is None


class TestHistoryRows:
    def test_rows_follow_history_order(self):
        history = [
            QuizResult("b", "Ansible", 4, 5, 1_700_000_000_000, ()),
            QuizResult("a", "Helm", 1, 4, 0, ()),
        ]
        rows = build_history_rows(history)
        assert [row["topic"] for row in rows] == ["Ansible", "Helm"]
        assert rows[0]["percentage"] == 80
        assert rows[0]["is_passing"] is True
        assert rows[1]["percentage"] == 25
        assert rows[1]["date_iso"] == "1970-01-01T00:00:00+00:00"
