"""Search GitHub users through the REST API.

Builds search queries, normalizes results into stable types, classifies
failures into a closed set of error kinds, and enriches users in bulk.
"""

from .cli import main
from .client import UserSearchClient
from .errors import ClientError, ErrorKind
from .models import RateLimitStatus, Result, SearchCriteria, SearchQuery, SearchResultPage, UserSummary
from .query import build_query
from .settings import ClientConfig

__all__ = [
    "main",
    "UserSearchClient",
    "ClientConfig",
    "ClientError",
    "ErrorKind",
    "RateLimitStatus",
    "Result",
    "SearchCriteria",
    "SearchQuery",
    "SearchResultPage",
    "UserSummary",
    "build_query",
]

if __name__ == "__main__":
    main()
