"""Top-level navigation state and the pure reducer that drives it."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from quizmaster.core.models import Quiz, QuizResult


class View(Enum):
    """Screen currently shown by the page."""

    HOME = "HOME"
    QUIZ = "QUIZ"
    RESULTS = "RESULTS"
    HISTORY = "HISTORY"


@dataclass(frozen=True, slots=True)
class AppState:
    view: View = View.HOME
    quiz: Quiz | None = None
    result: QuizResult | None = None
    is_generating: bool = False
    error: str | None = None
    generation_token: int | None = None


@dataclass(frozen=True, slots=True)
class GenerationStarted:
    token: int


@dataclass(frozen=True, slots=True)
class GenerationSucceeded:
    token: int
    quiz: Quiz


@dataclass(frozen=True, slots=True)
class GenerationFailed:
    token: int
    message: str


@dataclass(frozen=True, slots=True)
class QuizCompleted:
    result: QuizResult


@dataclass(frozen=True, slots=True)
class Retry:
    pass


@dataclass(frozen=True, slots=True)
class ViewHistory:
    pass


@dataclass(frozen=True, slots=True)
class Back:
    pass


@dataclass(frozen=True, slots=True)
class GoHome:
    pass


Event = (
    GenerationStarted
    | GenerationSucceeded
    | GenerationFailed
    | QuizCompleted
    | Retry
    | ViewHistory
    | Back
    | GoHome
)


def can_start_generation(state: AppState) -> bool:
    return state.view is View.HOME and not state.is_generating


def reduce(state: AppState, event: Event) -> AppState:
    """Return the state that follows ``event``; invalid events are ignored."""
    if isinstance(event, GenerationStarted):
        if not can_start_generation(state):
            return state
        return replace(state, is_generating=True, error=None, generation_token=event.token)

    if isinstance(event, GenerationSucceeded):
        if not state.is_generating or event.token != state.generation_token:
            return state
        return replace(
            state,
            view=View.QUIZ,
            quiz=event.quiz,
            result=None,
            is_generating=False,
            generation_token=None,
        )

    if isinstance(event, GenerationFailed):
        if not state.is_generating or event.token != state.generation_token:
            return state
        return replace(
            state,
            error=event.message,
            is_generating=False,
            generation_token=None,
        )

    if isinstance(event, QuizCompleted):
        if state.view is not View.QUIZ or state.quiz is None:
            return state
        return replace(state, view=View.RESULTS, result=event.result)

    if isinstance(event, Retry):
        if state.view is not View.RESULTS:
            return state
        return replace(state, view=View.HOME, quiz=None, result=None)

    if isinstance(event, ViewHistory):
        if state.view is not View.HOME:
            return state
        return replace(state, view=View.HISTORY)

    if isinstance(event, Back):
        if state.view is not View.HISTORY:
            return state
        return replace(state, view=View.HOME)

    if isinstance(event, GoHome):
        return replace(state, view=View.HOME, quiz=None, result=None)

    return state
