"""Application configuration."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettings(BaseModel):
    """File-backed storage configuration.

    Each entity type is stored as one JSON array in its own file under `path`.
    """

    path: Path = Path("storage")

    users_file_name: str = "users.json"
    topics_file_name: str = "topics.json"
    questions_file_name: str = "questions.json"
    question_answers_file_name: str = "questionAnswers.json"
    question_likes_file_name: str = "questionLikes.json"

    # Pretty-print JSON files (2-space indent)
    write_indented: bool = True

    # Field casing used when writing. Reads accept either casing.
    naming_policy: Literal["camel", "snake"] = "camel"

    @property
    def users_path(self) -> Path:
        return self.path / self.users_file_name

    @property
    def topics_path(self) -> Path:
        return self.path / self.topics_file_name

    @property
    def questions_path(self) -> Path:
        return self.path / self.questions_file_name

    @property
    def question_answers_path(self) -> Path:
        return self.path / self.question_answers_file_name

    @property
    def question_likes_path(self) -> Path:
        return self.path / self.question_likes_file_name


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Set environment variables to override, nested values use `__`:

        ENVIRONMENT=production
        PORT=8080
        STORAGE__PATH=/var/lib/icebreaker
        STORAGE__NAMING_POLICY=snake
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows STORAGE__PATH syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    # Git commit SHA (loaded from version.txt file or defaults to "unknown")
    git_sha: str = "unknown"

    host: str = "0.0.0.0"
    port: int = 8000

    # Origins allowed by the CORS middleware
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]

    storage: StorageSettings = StorageSettings()
    observability: ObservabilitySettings = ObservabilitySettings()

    @model_validator(mode="after")
    def load_git_sha(self) -> "Settings":
        """Load git SHA from the version file when one is deployed."""
        if self.git_sha == "unknown":
            self.git_sha = self._load_git_sha()
        return self

    @staticmethod
    def _load_git_sha() -> str:
        """Load git SHA from version file.

        Returns:
            Git SHA if version file exists, otherwise "unknown"
        """
        version_file = Path("/app/version.txt")
        if version_file.exists():
            try:
                return version_file.read_text().strip()
            except OSError:
                return "unknown"
        return "unknown"
