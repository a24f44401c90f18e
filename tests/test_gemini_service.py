"""Tests for the Gemini-backed quiz generation and feedback clients."""

import pytest

from quizmaster.constants.quiz_constants import FEEDBACK_EMPTY_MESSAGE, FEEDBACK_ERROR_MESSAGE
from quizmaster.core.exceptions import GenerationError, MalformedQuizError
from quizmaster.core.models import AnswerRecord, Difficulty, QuizResult
from quizmaster.core.services.gemini_service import build_feedback_prompt, build_quiz_prompt


class TestGenerateQuiz:
    def test_returns_stamped_quiz(self, gemini_service):
        quiz = gemini_service.generate_quiz("  Terraform State  ", Difficulty.ADVANCED)
        assert quiz.topic == "Terraform State"
        assert quiz.difficulty is Difficulty.ADVANCED
        assert len(quiz.questions) == 5
        assert quiz.id
        assert quiz.created_at > 0

    def test_each_quiz_gets_a_new_id(self, gemini_service):
        first = gemini_service.generate_quiz("Git", Difficulty.BEGINNER)
        second = gemini_service.generate_quiz("Git", Difficulty.BEGINNER)
        assert first.id != second.id

    def test_request_uses_schema_and_temperature(self, gemini_service, genai_client):
        gemini_service.generate_quiz("Docker", Difficulty.EXPERT)
        kwargs = genai_client.models.generate_content.call_args.kwargs
        assert kwargs["model"] == "gemini-2.5-flash"
        assert '"Docker"' in kwargs["contents"]
        assert "Expert" in kwargs["contents"]
        config = kwargs["config"]
        assert config.temperature == 0.7
        assert config.response_mime_type == "application/json"
        assert config.response_schema.required == ["questions"]

    def test_remote_exception_becomes_generation_error(self, gemini_service, genai_client):
        genai_client.models.generate_content.side_effect = ConnectionError("network down")
        with pytest.raises(GenerationError) as excinfo:
            gemini_service.generate_quiz("Docker", Difficulty.BEGINNER)
        assert isinstance(excinfo.value.__cause__, ConnectionError)

    def test_empty_text_is_a_failure(self, gemini_service, genai_client, make_response):
        genai_client.models.generate_content.return_value = make_response(None)
        with pytest.raises(GenerationError):
            gemini_service.generate_quiz("Docker", Difficulty.BEGINNER)

    def test_missing_questions_key_is_rejected(self, gemini_service, genai_client, make_response):
        genai_client.models.generate_content.return_value = make_response('{"items": []}')
        with pytest.raises(MalformedQuizError):
            gemini_service.generate_quiz("Docker", Difficulty.BEGINNER)


class TestAnalyzePerformance:
    @pytest.fixture
    def result(self, sample_quiz):
        answers = (
            AnswerRecord(question_id=1, selected_option_index=0, is_correct=True),
            AnswerRecord(question_id=2, selected_option_index=3, is_correct=False),
        )
        return QuizResult(sample_quiz.id, sample_quiz.topic, 1, 2, 0, answers)

    def test_returns_model_text(self, gemini_service, genai_client, make_response, result, sample_quiz):
        genai_client.models.generate_content.return_value = make_response("You know pods well.")
        assert gemini_service.analyze_performance(result, sample_quiz) == "You know pods well."
        kwargs = genai_client.models.generate_content.call_args.kwargs
        assert "config" not in kwargs

    def test_exception_returns_fallback(self, gemini_service, genai_client, result, sample_quiz):
        genai_client.models.generate_content.side_effect = RuntimeError("quota")
        assert gemini_service.analyze_performance(result, sample_quiz) == FEEDBACK_ERROR_MESSAGE

    def test_empty_text_returns_unavailable(self, gemini_service, genai_client, make_response, result, sample_quiz):
        genai_client.models.generate_content.return_value = make_response("")
        assert gemini_service.analyze_performance(result, sample_quiz) == FEEDBACK_EMPTY_MESSAGE


class TestPrompts:
    def test_quiz_prompt_mentions_count_and_level(self):
        prompt = build_quiz_prompt("Jenkins", Difficulty.BEGINNER, 7)
        assert "exactly 7 multiple-choice questions" in prompt
        assert "Beginner level" in prompt

    def test_feedback_prompt_lists_chosen_option_text(self, sample_quiz):
        answers = (
            AnswerRecord(question_id=1, selected_option_index=0, is_correct=True),
            AnswerRecord(question_id=2, selected_option_index=3, is_correct=False),
        )
        result = QuizResult(sample_quiz.id, sample_quiz.topic, 1, 2, 0, answers)
        prompt = build_feedback_prompt(result, sample_quiz)
        assert "Score: 1/2." in prompt
        assert "User Answer: Option 1-A\nCorrect: Yes" in prompt
        assert "User Answer: Option 2-D\nCorrect: No" in prompt
        assert 'Address the user directly as "You"' in prompt
