"""Project raw GitHub JSON onto UserSummary and SearchResultPage.

Missing optional fields become None. Present-but-invalid values raise
MalformedResponseError instead of being coerced.
"""

from datetime import datetime

from .errors import MalformedResponseError
from .models import SearchResultPage, UserSummary


def _required_str(raw: dict, key: str) -> str:
    value = raw.get(key)
    if not isinstance(value, str) or not value:
        raise MalformedResponseError(f"{key!r} must be a non-empty string, got {value!r}")
    return value


def _optional_str(raw: dict, key: str) -> str | None:
    value = raw.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise MalformedResponseError(f"{key!r} must be a string, got {value!r}")
    return value


def _count(raw: dict, key: str, required: bool = False) -> int | None:
    value = raw.get(key)
    if value is None and not required:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise MalformedResponseError(f"{key!r} must be a non-negative integer, got {value!r}")
    return value


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp as GitHub sends it. An offset (or trailing Z) is required."""
    if not isinstance(value, str):
        raise MalformedResponseError(f"timestamp must be a string, got {value!r}")
    text = value[:-1] + "+00:00" if value.endswith("Z") else value
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as e:
        raise MalformedResponseError(f"invalid timestamp {value!r}") from e
    if parsed.tzinfo is None:
        raise MalformedResponseError(f"timestamp {value!r} has no UTC offset")
    return parsed


def normalize_user(raw) -> UserSummary:
    if not isinstance(raw, dict):
        raise MalformedResponseError(f"user must be an object, got {type(raw).__name__}")

    user_id = raw.get("id")
    if isinstance(user_id, bool) or not isinstance(user_id, int):
        raise MalformedResponseError(f"'id' must be an integer, got {user_id!r}")

    created_at = raw.get("created_at")
    return UserSummary(
        id=user_id,
        login=_required_str(raw, "login"),
        avatar_url=_required_str(raw, "avatar_url"),
        profile_url=_required_str(raw, "html_url"),
        display_name=_optional_str(raw, "name"),
        bio=_optional_str(raw, "bio"),
        location=_optional_str(raw, "location"),
        company=_optional_str(raw, "company"),
        # GitHub sends "" for an unset blog
        blog=_optional_str(raw, "blog") or None,
        account_type=_optional_str(raw, "type"),
        public_repo_count=_count(raw, "public_repos"),
        follower_count=_count(raw, "followers"),
        following_count=_count(raw, "following"),
        created_at=parse_timestamp(created_at) if created_at is not None else None,
    )


def normalize_search_page(raw, page: int, per_page: int) -> SearchResultPage:
    if not isinstance(raw, dict):
        raise MalformedResponseError("search response must be an object")
    items = raw.get("items")
    if not isinstance(items, list):
        raise MalformedResponseError(f"'items' must be a list, got {type(items).__name__}")
    incomplete = raw.get("incomplete_results")
    if incomplete is None:
        incomplete = False
    elif not isinstance(incomplete, bool):
        raise MalformedResponseError(f"'incomplete_results' must be a boolean, got {incomplete!r}")

    return SearchResultPage(
        items=tuple(normalize_user(item) for item in items),
        total_count=_count(raw, "total_count", required=True),
        page=page,
        per_page=per_page,
        incomplete_results=incomplete,
    )
