import json
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from quizmaster.core.models import Difficulty, Question, Quiz
from quizmaster.core.quiz_manager import QuizManager
from quizmaster.core.services.gemini_service import GeminiService
from quizmaster.core.services.history_store import HistoryStore
from quizmaster.core.services.local_storage import LocalStorage
from quizmaster.server.api_server import create_api_app

QUESTION_COUNT = 5


def _question_dict(question_id):
    return {
        "id": question_id,
        "text": f"What does `step {question_id}` do?",
        "options": [f"Option {question_id}-{letter}" for letter in "ABCD"],
        "correctAnswerIndex": (question_id - 1) % 4,
        "explanation": f"Step {question_id} is explained here.",
    }


@pytest.fixture
def quiz_payload():
    """Raw JSON object in the shape the model is asked to return."""
    return {"questions": [_question_dict(i) for i in range(1, QUESTION_COUNT + 1)]}


@pytest.fixture
def sample_quiz(quiz_payload):
    return Quiz(
        id="quiz-1",
        topic="Kubernetes Pod Lifecycle",
        difficulty=Difficulty.INTERMEDIATE,
        questions=tuple(Question.from_dict(q) for q in quiz_payload["questions"]),
        created_at=1_700_000_000_000,
    )


@pytest.fixture
def make_response():
    """Build a fake google-genai response object carrying ``text``."""

    def _make(text):
        return SimpleNamespace(text=text)

    return _make


@pytest.fixture
def genai_client(quiz_payload, make_response):
    client = MagicMock()
    client.models.generate_content.return_value = make_response(json.dumps(quiz_payload))
    return client


@pytest.fixture
def gemini_service(genai_client):
    return GeminiService(api_key="test-key", client=genai_client)


@pytest.fixture
def storage(tmp_path):
    return LocalStorage(tmp_path / "local_storage.json")


@pytest.fixture
def history_store(storage):
    return HistoryStore(storage)


@pytest.fixture
def quiz_manager(gemini_service, history_store):
    return QuizManager(gemini=gemini_service, history=history_store)


@pytest.fixture
def api_client(quiz_manager):
    return TestClient(create_api_app(quiz_manager))
