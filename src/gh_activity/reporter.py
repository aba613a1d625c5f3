"""Runs the queries for one report and hands the results to the printer.

Every category is independent: a failed query is reported on stderr and the
next category still runs. Only failing to resolve the current user aborts
the report.
"""

import datetime as dt
import logging
from typing import Optional

from rich.markup import escape

from gh_activity.config import Settings
from gh_activity.fetcher import ActivityFetcher
from gh_activity.gh import GhError
from gh_activity.models import Category, SearchKind, SearchRole
from gh_activity.report import ReportPrinter

logger = logging.getLogger(__name__)

AUTH_HINT = "Make sure you're authenticated with 'gh auth login'"

CATEGORIES: list[Category] = [
    Category(label="PRs opened:", what="PRs opened", kind=SearchKind.prs, filter="--created"),
    Category(
        label="PRs closed:", what="PRs closed", kind=SearchKind.prs, filter="--closed",
        optional=True,
    ),
    Category(
        label="Issues opened:", what="issues opened", kind=SearchKind.issues, filter="--created"
    ),
    Category(
        label="Issues closed:", what="issues closed", kind=SearchKind.issues, filter="--closed"
    ),
    Category(
        label="PR reviews given:", what="PR reviews", kind=SearchKind.prs,
        role=SearchRole.reviewed_by, filter="--updated",
    ),
    Category(
        label="Comments written:", what="comments", kind=SearchKind.issues,
        role=SearchRole.commenter, filter="--created", optional=True,
    ),
]


def default_since(lookback_days: int = 7, today: Optional[dt.date] = None) -> dt.date:
    """Start of the default reporting window."""
    return (today or dt.date.today()) - dt.timedelta(days=lookback_days)


class ActivityReporter:
    """Produces the full activity report for the authenticated gh user."""

    def __init__(
        self,
        fetcher: Optional[ActivityFetcher] = None,
        printer: Optional[ReportPrinter] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self.settings = settings or Settings()
        self.fetcher = fetcher or ActivityFetcher(limit=self.settings.limit)
        self.printer = printer or ReportPrinter(host=self.settings.host)

    def run(
        self,
        since: Optional[dt.date] = None,
        verbose: bool = False,
        metrics: bool = False,
        include_all: bool = False,
        today: Optional[dt.date] = None,
    ) -> int:
        """Print the report and return the process exit code."""
        today = today or dt.date.today()
        since = since or default_since(self.settings.lookback_days, today)
        p = self.printer

        p.line(f"Fetching your GitHub activity since {since:%Y-%m-%d}...")
        p.line()

        try:
            username = self.fetcher.current_user()
        except GhError as e:
            logger.debug("identity resolution failed", exc_info=True)
            p.print_error(f"Error: {e}")
            p.print_error(AUTH_HINT)
            return 1

        p.line(f"User: [bold]{escape(username)}[/]")
        p.line()
        p.line(f"Activity since {since:%Y-%m-%d}:")
        p.rule()

        for category in CATEGORIES:
            if category.optional and not include_all:
                continue
            self._report_category(category, username, since, verbose)

        if metrics:
            self._report_metrics(username, since, today)

        p.rule()
        return 0

    def _report_category(
        self, category: Category, username: str, since: dt.date, verbose: bool
    ) -> None:
        query = category.query(username, since, self.fetcher.limit)
        try:
            urls = self.fetcher.search(query)
        except GhError as e:
            self.printer.print_error(f"Error fetching {category.what}: {e}")
            return
        logger.debug("%s: %d results", category.what, len(urls))
        self.printer.print_items(category.label, urls, verbose)

    def _report_metrics(self, username: str, since: dt.date, today: dt.date) -> None:
        try:
            prs = self.fetcher.search_prs_detailed(username, "--created", since, today)
        except GhError as e:
            self.printer.print_error(f"Error fetching PR metrics: {e}")
            return
        p = self.printer
        items = [pr.metrics for pr in prs]
        synthetic = all(pr.synthetic for pr in prs)
        p.line()
        p.line("[dim]Code metrics below are synthetic placeholders, not real diff stats.[/]")
        p.print_code_metrics("PRs opened:", items)
        p.print_metrics_summary(items, synthetic=synthetic)
