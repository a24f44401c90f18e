"""Parse and validate the JSON quiz payload returned by the AI backend.

Expected shape (enforced by the response schema on the request side, and
checked again here because the model is free to ignore it):

    {
      "questions": [
        {
          "id": 1,
          "text": "Which command lists pods?",
          "options": ["kubectl get pods", "kubectl ls", "kube pods", "pods list"],
          "correctAnswerIndex": 0,
          "explanation": "kubectl get is the read verb."
        }
      ]
    }

Anything else raises ``MalformedQuizError`` so callers never hold a quiz whose
correct answer cannot be looked up.
"""

from __future__ import annotations

import json

from quizmaster.constants.quiz_constants import OPTIONS_PER_QUESTION
from quizmaster.core.exceptions import MalformedQuizError
from quizmaster.core.models import Question

_REQUIRED_FIELDS = ("id", "text", "options", "correctAnswerIndex", "explanation")


def parse_quiz_payload(raw_text: str) -> tuple[Question, ...]:
    """Decode the response text and return validated questions."""
    try:
        data = json.loads(raw_text)
    except (TypeError, ValueError) as exc:
        raise MalformedQuizError("Response is not valid JSON.") from exc

    if not isinstance(data, dict):
        raise MalformedQuizError("Response must be a JSON object.")
    raw_questions = data.get("questions")
    if not isinstance(raw_questions, list):
        raise MalformedQuizError("Response is missing the 'questions' array.")
    if not raw_questions:
        raise MalformedQuizError("Response contained no questions.")

    questions = [_parse_question(item, position) for position, item in enumerate(raw_questions, start=1)]

    seen_ids: set[int] = set()
    for question in questions:
        if question.id in seen_ids:
            raise MalformedQuizError(f"Duplicate question id {question.id}.")
        seen_ids.add(question.id)
    return tuple(questions)


def _parse_question(item: object, position: int) -> Question:
    if not isinstance(item, dict):
        raise MalformedQuizError(f"Question {position} is not an object.")
    missing = [name for name in _REQUIRED_FIELDS if name not in item]
    if missing:
        raise MalformedQuizError(f"Question {position} is missing: {', '.join(missing)}.")

    question_id = item["id"]
    if not _is_int(question_id):
        raise MalformedQuizError(f"Question {position} has a non-integer id.")

    text = item["text"]
    if not isinstance(text, str) or not text.strip():
        raise MalformedQuizError(f"Question {position} has no text.")

    options = item["options"]
    if not isinstance(options, list) or len(options) != OPTIONS_PER_QUESTION:
        raise MalformedQuizError(
            f"Question {position} must have exactly {OPTIONS_PER_QUESTION} options."
        )
    if any(not isinstance(option, str) for option in options):
        raise MalformedQuizError(f"Question {position} has a non-text option.")

    correct_index = item["correctAnswerIndex"]
    if not _is_int(correct_index) or not 0 <= correct_index < len(options):
        raise MalformedQuizError(f"Question {position} has an out-of-range correctAnswerIndex.")

    explanation = item["explanation"]
    if not isinstance(explanation, str):
        raise MalformedQuizError(f"Question {position} has a non-text explanation.")

    return Question(
        id=question_id,
        text=text,
        options=tuple(options),
        correct_answer_index=correct_index,
        explanation=explanation,
    )


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
