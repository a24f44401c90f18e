"""Service for persisting completed quiz results."""

from __future__ import annotations

import json
import logging

from quizmaster.constants.storage_constants import DEFAULT_HISTORY_LIMIT, HISTORY_KEY
from quizmaster.core.models import QuizResult
from quizmaster.core.services.local_storage import LocalStorage

logger = logging.getLogger(__name__)


class HistoryStore:
    """Keeps the most-recent-first list of quiz results under one storage key.

    Storage problems are logged and swallowed: a failed save drops the entry,
    a failed read looks like an empty history.
    """

    def __init__(
        self,
        storage: LocalStorage,
        key: str = HISTORY_KEY,
        limit: int = DEFAULT_HISTORY_LIMIT,
    ) -> None:
        self._storage = storage
        self._key = key
        self._limit = limit

    def save_result(self, result: QuizResult) -> None:
        """Prepend a result and write the whole list back."""
        try:
            updated = [result, *self.get_history()]
            if self._limit > 0:
                updated = updated[: self._limit]
            payload = json.dumps([entry.to_dict() for entry in updated], ensure_ascii=False)
            self._storage.set_item(self._key, payload)
        except (OSError, TypeError, ValueError):
            logger.exception("Failed to save quiz result %s to local storage", result.quiz_id)

    def get_history(self) -> list[QuizResult]:
        try:
            raw = self._storage.get_item(self._key)
        except (OSError, ValueError):
            logger.exception("Failed to read quiz history from local storage")
            return []
        if not raw:
            return []

        try:
            entries = json.loads(raw)
        except ValueError:
            logger.error("Stored quiz history is not valid JSON; ignoring it")
            return []
        if not isinstance(entries, list):
            logger.error("Stored quiz history is not a list; ignoring it")
            return []

        history: list[QuizResult] = []
        for entry in entries:
            try:
                history.append(QuizResult.from_dict(entry))
            except (KeyError, TypeError, ValueError, AttributeError):
                logger.warning("Skipping malformed history entry: %r", entry)
        return history

    def clear_history(self) -> None:
        try:
            self._storage.remove_item(self._key)
        except (OSError, ValueError):
            logger.exception("Failed to clear quiz history")
