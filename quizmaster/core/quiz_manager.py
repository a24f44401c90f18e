"""Business logic for the quiz session shared by the API and the desktop window."""

from __future__ import annotations

from concurrent.futures import Future
import itertools
import logging
from threading import Lock

from quizmaster.constants.quiz_constants import GENERATION_ERROR_MESSAGE
from quizmaster.core.app_state import (
    AppState,
    Back,
    Event,
    GenerationFailed,
    GenerationStarted,
    GenerationSucceeded,
    GoHome,
    QuizCompleted,
    Retry,
    View,
    ViewHistory,
    can_start_generation,
    reduce,
)
from quizmaster.core.exceptions import GenerationError, GenerationInProgressError
from quizmaster.core.models import AnswerRecord, Difficulty, Quiz, QuizResult
from quizmaster.core.results import build_history_rows, build_result, build_results_view
from quizmaster.core.services.gemini_service import GeminiService
from quizmaster.core.services.history_store import HistoryStore
from quizmaster.core.services.quiz_taker import QuizStep, QuizTaker

logger = logging.getLogger(__name__)


class QuizManager:
    """Facade over the navigation reducer, the quiz flow, Gemini and the history.

    State changes happen under one lock; AI calls run outside it so the page
    can keep polling ``get_state`` while a request is in flight.
    """

    def __init__(self, gemini: GeminiService, history: HistoryStore) -> None:
        self._lock = Lock()
        self._gemini = gemini
        self._history = history

        self._state = AppState()
        self._taker: QuizTaker | None = None
        self._generation_tokens = itertools.count(1)

        self._feedback: dict[str, str] = {}
        self._feedback_pending: dict[str, Future[str]] = {}

    def _dispatch(self, event: Event) -> AppState:
        previous = self._state
        self._state = reduce(previous, event)
        if self._state.quiz is not previous.quiz:
            self._taker = None
            self._feedback.clear()
        if self._state.view is not previous.view:
            logger.info("View %s -> %s", previous.view.value, self._state.view.value)
        return self._state

    def get_state(self) -> AppState:
        with self._lock:
            return self._state

    # --- Generation ---

    def generate(self, topic: str, difficulty: Difficulty) -> AppState:
        """Generate a quiz and move to it; failures leave an error on the home screen."""
        with self._lock:
            if self._state.is_generating:
                raise GenerationInProgressError("A quiz is already being generated.")
            if not can_start_generation(self._state):
                raise RuntimeError("Quizzes can only be generated from the home screen.")
            token = next(self._generation_tokens)
            self._dispatch(GenerationStarted(token))

        quiz: Quiz | None = None
        try:
            quiz = self._gemini.generate_quiz(topic, difficulty)
        except GenerationError as exc:
            logger.warning("Quiz generation failed: %s", exc)
        finally:
            with self._lock:
                if quiz is None:
                    self._dispatch(GenerationFailed(token, GENERATION_ERROR_MESSAGE))
                else:
                    self._dispatch(GenerationSucceeded(token, quiz))
                    if self._state.quiz is quiz:
                        self._taker = QuizTaker(quiz, on_complete=self._complete_locked)
                state = self._state
        return state

    # --- Quiz taking ---

    def get_current_step(self) -> QuizStep | None:
        with self._lock:
            if self._state.view is not View.QUIZ or self._taker is None:
                return None
            return self._taker.snapshot()

    def select_option(self, option_index: int) -> QuizStep:
        with self._lock:
            taker = self._require_taker()
            taker.select_option(option_index)
            return taker.snapshot()

    def advance(self) -> AppState:
        """Confirm the pending answer; a no-op when nothing is selected."""
        with self._lock:
            self._require_taker().advance()
            return self._state

    def complete(self, answers: list[AnswerRecord]) -> QuizResult:
        with self._lock:
            return self._complete_locked(answers)

    def _complete_locked(self, answers: list[AnswerRecord]) -> QuizResult:
        quiz = self._state.quiz
        if self._state.view is not View.QUIZ or quiz is None:
            raise RuntimeError("No quiz is in progress.")
        result = build_result(quiz, answers)
        self._history.save_result(result)
        self._dispatch(QuizCompleted(result))
        logger.info("Quiz %s completed: %d/%d", quiz.id, result.score, result.total_questions)
        return result

    def _require_taker(self) -> QuizTaker:
        if self._state.view is not View.QUIZ or self._taker is None:
            raise RuntimeError("No quiz is in progress.")
        return self._taker

    # --- Results ---

    def get_results_view(self) -> dict[str, object] | None:
        with self._lock:
            quiz, result = self._state.quiz, self._state.result
            if self._state.view is not View.RESULTS or quiz is None or result is None:
                return None
        return build_results_view(quiz, result)

    def request_feedback(self) -> str:
        """AI feedback for the shown result, requested from Gemini at most once."""
        with self._lock:
            quiz, result = self._state.quiz, self._state.result
            if self._state.view is not View.RESULTS or quiz is None or result is None:
                raise RuntimeError("There are no results to analyze.")
            key = result.quiz_id
            cached = self._feedback.get(key)
            if cached is not None:
                return cached
            pending = self._feedback_pending.get(key)
            if pending is None:
                pending = Future()
                self._feedback_pending[key] = pending
                is_owner = True
            else:
                is_owner = False

        if not is_owner:
            return pending.result()

        try:
            text = self._gemini.analyze_performance(result, quiz)
        except BaseException as exc:
            with self._lock:
                self._feedback_pending.pop(key, None)
            pending.set_exception(exc)
            raise

        with self._lock:
            self._feedback_pending.pop(key, None)
            if self._state.result is result:
                self._feedback[key] = text
            else:
                logger.info("Discarding feedback for quiz %s; its results are no longer shown", key)
        pending.set_result(text)
        return text

    # --- Navigation ---

    def retry(self) -> AppState:
        with self._lock:
            return self._dispatch(Retry())

    def go_home(self) -> AppState:
        with self._lock:
            return self._dispatch(GoHome())

    def view_history(self) -> AppState:
        with self._lock:
            return self._dispatch(ViewHistory())

    def back(self) -> AppState:
        with self._lock:
            return self._dispatch(Back())

    # --- History ---

    def get_history(self) -> list[QuizResult]:
        return self._history.get_history()

    def get_history_rows(self) -> list[dict[str, object]]:
        return build_history_rows(self._history.get_history())

    def clear_history(self) -> None:
        self._history.clear_history()
        logger.info("Quiz history cleared")
