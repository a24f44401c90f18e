"""Google Gemini integration: quiz generation and performance feedback."""

from __future__ import annotations

import logging
from uuid import uuid4

from google import genai
from google.genai import types

from quizmaster.constants.quiz_constants import (
    DEFAULT_MODEL,
    DEFAULT_QUESTION_COUNT,
    DEFAULT_TEMPERATURE,
    FEEDBACK_EMPTY_MESSAGE,
    FEEDBACK_ERROR_MESSAGE,
    OPTIONS_PER_QUESTION,
    SYSTEM_INSTRUCTION,
)
from quizmaster.core.exceptions import GenerationError
from quizmaster.core.models import Difficulty, Quiz, QuizResult, now_ms
from quizmaster.core.quiz_parser import parse_quiz_payload

logger = logging.getLogger(__name__)

QUIZ_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "questions": types.Schema(
            type=types.Type.ARRAY,
            items=types.Schema(
                type=types.Type.OBJECT,
                properties={
                    "id": types.Schema(type=types.Type.INTEGER),
                    "text": types.Schema(type=types.Type.STRING, description="The question text"),
                    "options": types.Schema(
                        type=types.Type.ARRAY,
                        items=types.Schema(type=types.Type.STRING),
                        min_items=OPTIONS_PER_QUESTION,
                        max_items=OPTIONS_PER_QUESTION,
                        description="An array of 4 possible answers",
                    ),
                    "correctAnswerIndex": types.Schema(
                        type=types.Type.INTEGER,
                        description="0-based index of the correct option",
                    ),
                    "explanation": types.Schema(
                        type=types.Type.STRING,
                        description="Brief explanation of why the answer is correct",
                    ),
                },
                required=["id", "text", "options", "correctAnswerIndex", "explanation"],
            ),
        )
    },
    required=["questions"],
)


def build_quiz_prompt(topic: str, difficulty: Difficulty, question_count: int) -> str:
    return (
        f'Create a challenging technical quiz about "{topic}".\n'
        f"Difficulty Level: {difficulty.value}.\n"
        f"Generate exactly {question_count} multiple-choice questions.\n"
        f"Ensure the questions are suitable for a {difficulty.value} level software engineer "
        "or DevOps professional.\n"
        "The output must be valid JSON matching the schema."
    )


def build_feedback_prompt(result: QuizResult, quiz: Quiz) -> str:
    blocks = []
    for answer in result.answers:
        question = quiz.find_question(answer.question_id)
        question_text = question.text if question else "(unknown question)"
        chosen = question.option_text(answer.selected_option_index) if question else None
        blocks.append(
            f"Question: {question_text}\n"
            f"User Answer: {chosen if chosen is not None else '(no answer)'}\n"
            f"Correct: {'Yes' if answer.is_correct else 'No'}"
        )
    summary = "\n\n".join(blocks)
    return (
        f'Analyze this quiz performance for the topic "{quiz.topic}".\n'
        f"Score: {result.score}/{result.total_questions}.\n\n"
        f"Details:\n{summary}\n\n"
        "Provide a brief, encouraging, but technical 3-sentence summary of their knowledge "
        'gaps or strengths.\nAddress the user directly as "You".'
    )


class GeminiService:
    """Wraps a google-genai client for the two AI-backed operations.

    The client is created on first use so a missing API key only fails the
    request that needs it.
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str = DEFAULT_MODEL,
        temperature: float = DEFAULT_TEMPERATURE,
        question_count: int = DEFAULT_QUESTION_COUNT,
        client: genai.Client | None = None,
    ) -> None:
        self._api_key = api_key
        self.model = model
        self.temperature = temperature
        self.question_count = question_count
        self._client = client

    def _get_client(self) -> genai.Client:
        if self._client is None:
            self._client = genai.Client(api_key=self._api_key)
        return self._client

    def generate_quiz(self, topic: str, difficulty: Difficulty) -> Quiz:
        """Ask the model for a quiz; raise ``GenerationError`` on any failure."""
        cleaned_topic = topic.strip()
        prompt = build_quiz_prompt(cleaned_topic, difficulty, self.question_count)
        try:
            response = self._get_client().models.generate_content(
                model=self.model,
                contents=prompt,
                config=types.GenerateContentConfig(
                    response_mime_type="application/json",
                    response_schema=QUIZ_SCHEMA,
                    system_instruction=SYSTEM_INSTRUCTION,
                    temperature=self.temperature,
                ),
            )
            text = response.text
        except Exception as exc:
            logger.exception("Gemini quiz generation failed for topic %r", cleaned_topic)
            raise GenerationError("Quiz generation request failed.") from exc

        if not text:
            logger.error("Gemini returned no text for topic %r", cleaned_topic)
            raise GenerationError("No response text received from Gemini.")

        try:
            questions = parse_quiz_payload(text)
        except GenerationError:
            logger.exception("Gemini returned an unusable quiz for topic %r", cleaned_topic)
            raise

        quiz = Quiz(
            id=uuid4().hex,
            topic=cleaned_topic,
            difficulty=difficulty,
            questions=questions,
            created_at=now_ms(),
        )
        logger.info("Generated quiz %s with %d questions on %r", quiz.id, len(questions), cleaned_topic)
        return quiz

    def analyze_performance(self, result: QuizResult, quiz: Quiz) -> str:
        """Return short feedback text; never raises."""
        prompt = build_feedback_prompt(result, quiz)
        try:
            response = self._get_client().models.generate_content(model=self.model, contents=prompt)
            text = response.text
        except Exception:
            logger.exception("Gemini performance analysis failed for quiz %s", quiz.id)
            return FEEDBACK_ERROR_MESSAGE
        return text or FEEDBACK_EMPTY_MESSAGE
