"""Data models and constants for user search."""

import time
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Generic, TypeVar
from urllib.parse import quote

if TYPE_CHECKING:
    from .errors import ClientError

GITHUB_SEARCH_RESULT_LIMIT = 1000  # GitHub Search API hard limit per query
MAX_PER_PAGE = 100
DEFAULT_PER_PAGE = 10

T = TypeVar("T")


@dataclass(frozen=True)
class SearchCriteria:
    """What the caller is looking for. At least one filter must be set."""

    login_fragment: str | None = None
    location: str | None = None
    min_repositories: int | None = None
    page: int = 1
    per_page: int = DEFAULT_PER_PAGE
    sort: str | None = None
    order: str | None = None


@dataclass(frozen=True)
class SearchQuery:
    """A provider-syntax query plus the pagination that travels beside it."""

    q: str
    page: int = 1
    per_page: int = DEFAULT_PER_PAGE
    sort: str | None = None
    order: str | None = None

    def params(self) -> dict[str, str]:
        """Query parameters for GET /search/users."""
        params = {"q": self.q, "page": str(self.page), "per_page": str(self.per_page)}
        if self.sort:
            params["sort"] = self.sort
        if self.order:
            params["order"] = self.order
        return params

    def encoded(self) -> str:
        return quote(self.q, safe="")


@dataclass(frozen=True)
class UserSummary:
    id: int
    login: str
    avatar_url: str
    profile_url: str
    display_name: str | None = None
    bio: str | None = None
    location: str | None = None
    company: str | None = None
    blog: str | None = None
    account_type: str | None = None
    public_repo_count: int | None = None
    follower_count: int | None = None
    following_count: int | None = None
    created_at: datetime | None = None


@dataclass(frozen=True)
class SearchResultPage:
    items: tuple[UserSummary, ...]
    total_count: int
    page: int
    per_page: int
    incomplete_results: bool = False

    @property
    def has_next_page(self) -> bool:
        """Whether another page exists within the search window."""
        reachable = min(self.total_count, GITHUB_SEARCH_RESULT_LIMIT)
        return self.page * self.per_page < reachable


@dataclass(frozen=True)
class RateLimitStatus:
    limit: int
    remaining: int
    reset_at: datetime

    def seconds_until_reset(self, now: float | None = None) -> int:
        """Seconds until the quota resets, 0 if already past."""
        now = time.time() if now is None else now
        return max(0, int(self.reset_at.timestamp() - now))


@dataclass(frozen=True)
class ApiResponse:
    """Raw response handed from the transport to the normalizer or classifier."""

    status: int
    body: dict | list | None
    headers: Mapping[str, str] = field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        return 200 <= self.status < 300


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a public client operation: either a value or a ClientError."""

    value: T | None = None
    error: "ClientError | None" = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: "ClientError") -> "Result[T]":
        return cls(error=error)
