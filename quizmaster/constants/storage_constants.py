"""Local persistence constants."""

HISTORY_KEY: str = "quizmaster_history_v1"
STORAGE_FILE_NAME: str = "local_storage.json"
DEFAULT_DATA_DIR: str = "~/.quizmaster"
DEFAULT_HISTORY_LIMIT: int = 100
