"""Build GitHub user-search query strings from SearchCriteria."""

import re

from .errors import ErrorKind, InvalidArgumentError, error
from .models import GITHUB_SEARCH_RESULT_LIMIT, MAX_PER_PAGE, Result, SearchCriteria, SearchQuery

SORT_FIELDS = ("followers", "repositories", "joined")
ORDERS = ("asc", "desc")

_WHITESPACE = re.compile(r"\s")


def _escape_value(value: str) -> str:
    """Quote a literal for the search syntax when it contains whitespace."""
    if _WHITESPACE.search(value):
        return f'"{value}"'
    return value


def _text(value, name: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise InvalidArgumentError(f"{name} must be a string, got {type(value).__name__}")
    # Double quotes would break out of the quoted literal
    return value.replace('"', "").strip()


def _integer(value, name: str, minimum: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} must be an integer, got {value!r}")
    if value < minimum:
        raise InvalidArgumentError(f"{name} must be >= {minimum}, got {value}")
    return value


def _validate_paging(criteria: SearchCriteria) -> None:
    page = _integer(criteria.page, "page", 1)
    per_page = _integer(criteria.per_page, "per_page", 1)
    if per_page > MAX_PER_PAGE:
        raise InvalidArgumentError(f"per_page must be <= {MAX_PER_PAGE}, got {per_page}")
    # Pages past the first 1000 results are rejected by GitHub with a 422
    if (page - 1) * per_page >= GITHUB_SEARCH_RESULT_LIMIT:
        raise InvalidArgumentError(
            f"page {page} with per_page {per_page} is beyond the first {GITHUB_SEARCH_RESULT_LIMIT} results"
        )
    if criteria.sort is not None and criteria.sort not in SORT_FIELDS:
        raise InvalidArgumentError(f"sort must be one of {', '.join(SORT_FIELDS)}, got {criteria.sort!r}")
    if criteria.order is not None:
        if criteria.order not in ORDERS:
            raise InvalidArgumentError(f"order must be one of {', '.join(ORDERS)}, got {criteria.order!r}")
        if criteria.sort is None:
            raise InvalidArgumentError("order requires sort")


def build_clauses(criteria: SearchCriteria) -> list[str]:
    """Return the query clauses in fixed order: login, location, repos.

    Raises InvalidArgumentError for values of the wrong type or range.
    """
    clauses = []
    fragment = _text(criteria.login_fragment, "login_fragment")
    if fragment:
        clauses.append(f"{_escape_value(fragment)} in:login")
    location = _text(criteria.location, "location")
    if location:
        clauses.append(f"location:{_escape_value(location)}")
    if criteria.min_repositories is not None:
        min_repos = _integer(criteria.min_repositories, "min_repositories", 0)
        if min_repos > 0:
            clauses.append(f"repos:>{min_repos}")
    return clauses


def build_query(criteria: SearchCriteria) -> Result[SearchQuery]:
    """Turn SearchCriteria into a SearchQuery, or an EmptyQuery/InvalidArgument error."""
    try:
        clauses = build_clauses(criteria)
        _validate_paging(criteria)
    except InvalidArgumentError as e:
        return Result.failure(error(ErrorKind.INVALID_ARGUMENT, str(e)))

    if not clauses:
        return Result.failure(error(ErrorKind.EMPTY_QUERY))

    return Result.success(
        SearchQuery(
            q=" ".join(clauses),
            page=criteria.page,
            per_page=criteria.per_page,
            sort=criteria.sort,
            order=criteria.order,
        )
    )
