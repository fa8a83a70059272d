"""CLI commands for user search."""

import argparse
import json
import logging
import sys
from dataclasses import asdict, replace
from datetime import datetime

from .models import SearchCriteria, SearchResultPage


def _jsonable(value):
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, dict):
        return {k: _jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    return value


def _to_json(value):
    if value is None:
        return None
    data = _jsonable(asdict(value))
    if isinstance(value, SearchResultPage):
        data["has_next_page"] = value.has_next_page
    return data


def _emit(data) -> None:
    json.dump(data, sys.stdout, indent=2)
    sys.stdout.write("\n")


def _fail(err) -> int:
    json.dump(err.to_dict(), sys.stderr, indent=2)
    sys.stderr.write("\n")
    return 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Search GitHub users",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--base-url", default=None, help="API root (default: GITHUB_API_BASE or https://api.github.com)")
    parser.add_argument("--timeout-ms", type=int, default=None, help="Request timeout in milliseconds")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log each request")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # search subcommand
    search_parser = subparsers.add_parser("search", help="Search users by login, location and repo count")
    search_parser.add_argument("--login", default=None, help="Fragment of the login to match")
    search_parser.add_argument("--location", default=None, help="Location to match")
    search_parser.add_argument("--min-repos", type=int, default=None, help="Only users with more public repos than this")
    search_parser.add_argument("--page", type=int, default=1, help="Page number (default: 1)")
    search_parser.add_argument("--per-page", type=int, default=10, help="Results per page, 1-100 (default: 10)")
    search_parser.add_argument("--sort", default=None, choices=["followers", "repositories", "joined"])
    search_parser.add_argument("--order", default=None, choices=["asc", "desc"])

    # user subcommand
    user_parser = subparsers.add_parser("user", help="Fetch one user's profile")
    user_parser.add_argument("login", help="GitHub login")

    # users subcommand
    users_parser = subparsers.add_parser("users", help="Fetch several profiles concurrently")
    users_parser.add_argument("logins", nargs="+", help="GitHub logins")

    subparsers.add_parser("rate-limit", help="Show the core API quota")

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    from .client import UserSearchClient
    from .settings import ClientConfig

    config = ClientConfig.from_settings()
    if args.base_url:
        config = replace(config, base_url=args.base_url)
    if args.timeout_ms:
        config = replace(config, timeout_ms=args.timeout_ms)

    with UserSearchClient(config) as client:
        if args.command == "search":
            criteria = SearchCriteria(
                login_fragment=args.login,
                location=args.location,
                min_repositories=args.min_repos,
                page=args.page,
                per_page=args.per_page,
                sort=args.sort,
                order=args.order,
            )
            result = client.search_users(criteria)
        elif args.command == "user":
            result = client.get_user(args.login)
        elif args.command == "users":
            _emit([_to_json(user) for user in client.fetch_many(args.logins)])
            return 0
        else:
            result = client.check_rate_limit()

    if not result.ok:
        return _fail(result.error)
    _emit(_to_json(result.value))
    return 0


if __name__ == "__main__":
    sys.exit(main())
