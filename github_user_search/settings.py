"""Client settings loaded from environment variables and .env file."""

from dataclasses import dataclass, field
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

API_BASE = "https://api.github.com"
ACCEPT_HEADER = "application/vnd.github+json"
API_VERSION = "2022-11-28"
USER_AGENT = "github-user-search"
DEFAULT_TIMEOUT_MS = 8000
MAX_WORKERS = 10


class Settings(BaseSettings):
    """Settings for the user search client."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    github_token: str | None = None
    github_api_base: str = API_BASE
    github_timeout_ms: int = DEFAULT_TIMEOUT_MS
    github_max_workers: int = MAX_WORKERS


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


@dataclass(frozen=True)
class ClientConfig:
    """Immutable per-client configuration, fixed at construction."""

    base_url: str = API_BASE
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    token: str | None = None
    max_workers: int = MAX_WORKERS
    extra_headers: tuple[tuple[str, str], ...] = field(default_factory=tuple)

    def __post_init__(self):
        if self.timeout_ms <= 0:
            raise ValueError(f"timeout_ms must be positive, got {self.timeout_ms}")
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {self.max_workers}")

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "ClientConfig":
        settings = settings or get_settings()
        return cls(
            base_url=settings.github_api_base,
            timeout_ms=settings.github_timeout_ms,
            token=settings.github_token,
            max_workers=settings.github_max_workers,
        )

    def headers(self) -> dict[str, str]:
        """Headers sent on every request for the life of the client."""
        headers = {
            "Accept": ACCEPT_HEADER,
            "X-GitHub-Api-Version": API_VERSION,
            "User-Agent": USER_AGENT,
        }
        headers.update(dict(self.extra_headers))
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers
