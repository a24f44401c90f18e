"""FastAPI server that exposes the quiz page and its JSON API."""

from __future__ import annotations

import logging
from threading import Thread
import time

from fastapi import Depends, FastAPI, HTTPException
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, field_validator
import uvicorn

from quizmaster.constants.about import APP_NAME, APP_VERSION
from quizmaster.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from quizmaster.core.app_state import View
from quizmaster.core.generation_form import GenerationForm, form_options
from quizmaster.core.markdown_renderer import renderer
from quizmaster.core.models import Difficulty
from quizmaster.core.quiz_manager import QuizManager
from quizmaster.core.services.quiz_taker import QuizStep
from quizmaster.server.page import render_page

logger = logging.getLogger(__name__)


class GeneratePayload(BaseModel):
    """Payload schema for the generation form."""

    topic: str
    difficulty: str = GenerationForm().difficulty.value

    @field_validator("topic")
    @classmethod
    def _topic_not_blank(cls, value: str) -> str:
        form = GenerationForm(topic=value)
        if not form.can_submit(is_generating=False):
            raise ValueError("Topic must not be empty.")
        return form.normalized_topic

    @field_validator("difficulty")
    @classmethod
    def _known_difficulty(cls, value: str) -> str:
        return Difficulty.parse(value).value


class SelectPayload(BaseModel):
    """Payload schema for choosing an answer option."""

    option_index: int


def _get_quiz_manager_dependency(quiz_manager: QuizManager):
    def dependency() -> QuizManager:
        return quiz_manager

    return dependency


def _serialize_step(step: QuizStep) -> dict[str, object]:
    return {
        "topic": step.topic,
        "difficulty": step.difficulty.value,
        "question_id": step.question.id,
        "question_number": step.question_number,
        "question_count": step.question_count,
        "progress": step.progress,
        "question_html": renderer.render_fragment(step.question.text),
        "options_html": [renderer.render_inline(option) for option in step.question.options],
        "selected_option": step.selected_option,
        "is_last_question": step.is_last_question,
    }


def _serialize_state(manager: QuizManager) -> dict[str, object]:
    state = manager.get_state()
    step = manager.get_current_step()
    quiz_payload = None
    if state.view is View.QUIZ and state.quiz is not None and step is not None:
        quiz_payload = _serialize_step(step)
    has_results = state.view is View.RESULTS and state.quiz is not None and state.result is not None
    return {
        "view": state.view.value,
        "is_generating": state.is_generating,
        "error": state.error,
        "form": form_options(),
        "quiz": quiz_payload,
        "has_results": has_results,
        "result_id": state.result.quiz_id if has_results else None,
    }


def create_api_app(quiz_manager: QuizManager) -> FastAPI:
    """Create a FastAPI application wired to the provided quiz manager."""
    app = FastAPI(title=f"{APP_NAME} API", version=APP_VERSION)
    quiz_manager_dep = _get_quiz_manager_dependency(quiz_manager)

    @app.get("/", response_class=HTMLResponse)
    def serve_page() -> str:
        return render_page()

    @app.get("/state")
    def get_state(manager: QuizManager = Depends(quiz_manager_dep)) -> dict[str, object]:
        return _serialize_state(manager)

    @app.post("/generate")
    def generate_quiz(
        payload: GeneratePayload,
        manager: QuizManager = Depends(quiz_manager_dep),
    ) -> dict[str, object]:
        try:
            manager.generate(payload.topic, Difficulty.parse(payload.difficulty))
        except RuntimeError as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc
        return _serialize_state(manager)

    @app.post("/quiz/select")
    def select_option(
        payload: SelectPayload,
        manager: QuizManager = Depends(quiz_manager_dep),
    ) -> dict[str, object]:
        try:
            step = manager.select_option(payload.option_index)
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        except RuntimeError as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc
        return _serialize_step(step)

    @app.post("/quiz/advance")
    def advance(manager: QuizManager = Depends(quiz_manager_dep)) -> dict[str, object]:
        try:
            manager.advance()
        except RuntimeError as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc
        return _serialize_state(manager)

    @app.get("/results")
    def get_results(manager: QuizManager = Depends(quiz_manager_dep)) -> dict[str, object]:
        view = manager.get_results_view()
        if view is None:
            raise HTTPException(status_code=404, detail="No results to show.")
        return view

    @app.get("/results/feedback")
    def get_feedback(manager: QuizManager = Depends(quiz_manager_dep)) -> dict[str, object]:
        try:
            feedback = manager.request_feedback()
        except RuntimeError as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc
        return {"feedback": feedback, "feedback_html": renderer.render_fragment(feedback)}

    @app.post("/retry")
    def retry(manager: QuizManager = Depends(quiz_manager_dep)) -> dict[str, object]:
        manager.retry()
        return _serialize_state(manager)

    @app.post("/home")
    def go_home(manager: QuizManager = Depends(quiz_manager_dep)) -> dict[str, object]:
        manager.go_home()
        return _serialize_state(manager)

    @app.post("/history/open")
    def open_history(manager: QuizManager = Depends(quiz_manager_dep)) -> dict[str, object]:
        manager.view_history()
        return _serialize_state(manager)

    @app.post("/history/back")
    def close_history(manager: QuizManager = Depends(quiz_manager_dep)) -> dict[str, object]:
        manager.back()
        return _serialize_state(manager)

    @app.get("/history")
    def get_history(manager: QuizManager = Depends(quiz_manager_dep)) -> dict[str, object]:
        return {"entries": manager.get_history_rows()}

    @app.delete("/history")
    def clear_history(manager: QuizManager = Depends(quiz_manager_dep)) -> dict[str, object]:
        manager.clear_history()
        return {"entries": []}

    return app


def start_api_server(
    quiz_manager: QuizManager,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
    startup_timeout: float = 5.0,
) -> Thread:
    """Start the FastAPI server in a background daemon thread and wait until it listens."""
    app = create_api_app(quiz_manager)
    config = uvicorn.Config(app=app, host=host, port=port, log_level="info")
    server = uvicorn.Server(config)

    def run_server() -> None:
        server.run()

    thread = Thread(target=run_server, name="QuizApiServer", daemon=True)
    thread.start()
    deadline = time.monotonic() + startup_timeout
    while not server.started and thread.is_alive() and time.monotonic() < deadline:
        time.sleep(0.05)
    if not server.started:
        logger.warning("API server did not report ready within %.1fs", startup_timeout)
    return thread


def run_api_server(
    quiz_manager: QuizManager,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
) -> None:
    """Serve in the foreground until interrupted."""
    uvicorn.run(create_api_app(quiz_manager), host=host, port=port, log_level="info")
