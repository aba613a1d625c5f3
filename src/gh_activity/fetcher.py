"""GitHub activity queries via the gh CLI."""

import datetime as dt
from typing import Optional

from pydantic import TypeAdapter, ValidationError

from gh_activity.analysis.synthetic import generate_mock_metrics
from gh_activity.gh import GhParseError, GhRunner
from gh_activity.models import (
    DetailedPullRequest,
    SearchItem,
    SearchKind,
    SearchQuery,
    SearchRole,
)

_items = TypeAdapter(list[SearchItem])


def parse_urls(output: str) -> list[str]:
    """Decode a `--json=url` array into its URLs, preserving order."""
    try:
        items = _items.validate_json(output)
    except ValidationError as e:
        raise GhParseError(f"Failed to parse JSON: {e}") from e
    return [item.url for item in items]


class ActivityFetcher:
    """Resolves the current user and searches their PRs, issues and reviews."""

    def __init__(self, runner: Optional[GhRunner] = None, limit: int = 1000) -> None:
        self.runner = runner or GhRunner()
        self.limit = limit

    # ── Identity ──────────────────────────────────────────────────────────

    def current_user(self) -> str:
        """Login of the account gh is authenticated as."""
        return self.runner.run(["api", "user", "--jq", ".login"]).strip()

    # ── Searches ──────────────────────────────────────────────────────────

    def search(self, query: SearchQuery) -> list[str]:
        return parse_urls(self.runner.run(query.to_args()))

    def search_prs(self, username: str, filter: str, since: dt.date) -> list[str]:
        """PRs authored by `username` matching the qualifier `filter`."""
        return self.search(
            SearchQuery(
                kind=SearchKind.prs,
                username=username,
                filter=filter,
                since=since,
                limit=self.limit,
            )
        )

    def search_issues(self, username: str, filter: str, since: dt.date) -> list[str]:
        """Issues authored by `username` matching the qualifier `filter`."""
        return self.search(
            SearchQuery(
                kind=SearchKind.issues,
                username=username,
                filter=filter,
                since=since,
                limit=self.limit,
            )
        )

    def pr_reviews(self, username: str, since: dt.date) -> list[str]:
        """PRs reviewed by `username` and updated since `since`."""
        return self.search(
            SearchQuery(
                kind=SearchKind.prs,
                role=SearchRole.reviewed_by,
                username=username,
                filter="--updated",
                since=since,
                limit=self.limit,
            )
        )

    def comments(self, username: str, since: dt.date) -> list[str]:
        """Issues and PRs `username` commented on, created since `since`."""
        return self.search(
            SearchQuery(
                kind=SearchKind.issues,
                role=SearchRole.commenter,
                username=username,
                filter="--created",
                since=since,
                limit=self.limit,
            )
        )

    def search_prs_detailed(
        self,
        username: str,
        filter: str,
        since: dt.date,
        today: Optional[dt.date] = None,
    ) -> list[DetailedPullRequest]:
        """PRs with code metrics.

        The metrics are placeholders from `generate_mock_metrics`, not diff
        statistics; every record comes back with `synthetic=True`.
        """
        urls = self.search_prs(username, filter, since)
        return generate_mock_metrics(urls, today or dt.date.today())
