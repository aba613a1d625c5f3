"""CLI entry point for gh-activity."""

import logging
import sys
from datetime import datetime
from typing import Optional

import click
from pydantic import ValidationError

from gh_activity import __version__


def _configure_logging(debug: bool) -> None:
    from rich.logging import RichHandler

    from gh_activity.report import make_console

    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=make_console(stderr=True), show_path=False)],
    )


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("-v", "--verbose", is_flag=True, help="List every URL instead of per-repository counts.")
@click.option(
    "--since",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    metavar="DATE",
    help="Report activity since DATE (YYYY-MM-DD). Defaults to one week ago.",
)
@click.option("-m", "--metrics", is_flag=True, help="Add the code metrics section (synthetic values).")
@click.option("-a", "--all", "include_all", is_flag=True, help="Also report PRs closed and comments written.")
@click.option("--debug", is_flag=True, help="Log every gh invocation to stderr.")
@click.version_option(__version__, prog_name="gh-activity")
def main(
    verbose: bool,
    since: Optional[datetime],
    metrics: bool,
    include_all: bool,
    debug: bool,
) -> None:
    """Summarize your recent GitHub activity using the gh CLI."""
    from dotenv import load_dotenv

    load_dotenv()  # Load .env file (e.g. GH_ACTIVITY_LOOKBACK_DAYS)
    _configure_logging(debug)

    from gh_activity.config import Settings
    from gh_activity.fetcher import ActivityFetcher
    from gh_activity.gh import GhRunner
    from gh_activity.report import ReportPrinter
    from gh_activity.reporter import ActivityReporter

    try:
        settings = Settings.from_env()
    except ValidationError as e:
        raise click.UsageError(f"Invalid GH_ACTIVITY_* setting:\n{e}") from e

    reporter = ActivityReporter(
        fetcher=ActivityFetcher(GhRunner(settings.gh_binary), limit=settings.limit),
        printer=ReportPrinter(host=settings.host),
        settings=settings,
    )
    code = reporter.run(
        since=since.date() if since else None,
        verbose=verbose,
        metrics=metrics,
        include_all=include_all,
    )
    sys.exit(code)


if __name__ == "__main__":
    main()
