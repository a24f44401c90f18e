"""Exceptions raised by the quiz core."""

from __future__ import annotations


class GenerationError(Exception):
    """Raised when the AI backend does not produce a usable quiz."""


class MalformedQuizError(GenerationError):
    """Raised when the AI response parses but does not describe a valid quiz."""


class GenerationInProgressError(RuntimeError):
    """Raised when a quiz is requested while another request is in flight."""
