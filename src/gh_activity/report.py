"""Console rendering of the activity report."""

from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape

from gh_activity.analysis.metrics import summarize_metrics
from gh_activity.analysis.repositories import count_repositories
from gh_activity.models import CodeMetrics

LABEL_WIDTH = 19
RULE_WIDTH = 50


def make_console(stderr: bool = False) -> Console:
    """Console that never wraps URLs and leaves number highlighting to us."""
    return Console(stderr=stderr, soft_wrap=True, highlight=False, emoji=False)


def _label(label: str) -> str:
    return f"[bold cyan]{escape(label):<{LABEL_WIDTH}}[/]"


class ReportPrinter:
    """Writes report lines to `console` and errors to `err_console`."""

    def __init__(
        self,
        console: Optional[Console] = None,
        err_console: Optional[Console] = None,
        host: str = "github.com",
    ) -> None:
        self.console = console or make_console()
        self.err_console = err_console or make_console(stderr=True)
        self.host = host

    def line(self, text: str = "") -> None:
        self.console.print(text)

    def rule(self) -> None:
        self.console.print("=" * RULE_WIDTH)

    def print_error(self, message: str) -> None:
        self.err_console.print(f"[red]{escape(message)}[/]")

    # ── Activity ──────────────────────────────────────────────────────────

    def print_items(self, label: str, urls: Sequence[str], verbose: bool) -> None:
        """Compact: count plus distinct repositories. Verbose: every URL, sorted."""
        count = f"[bold green]{len(urls)}[/]"
        if verbose:
            self.console.print(f"{_label(label)}{count}")
            for url in sorted(urls):
                self.console.print(f"  - [bright_blue]{escape(url)}[/]")
            return

        repos = count_repositories(urls, self.host)
        suffix = "repository" if repos == 1 else "repositories"
        self.console.print(
            f"{_label(label)}{count} across [yellow]{repos}[/] [dim]{suffix}[/]"
        )

    # ── Metrics ───────────────────────────────────────────────────────────

    def print_code_metrics(self, label: str, metrics: Sequence[CodeMetrics]) -> None:
        """One line of totals for a category."""
        s = summarize_metrics(metrics)
        self.console.print(
            f"{_label(label)}"
            f"[green]+[/] [bold green]{s.additions}[/]  "
            f"[red]-[/] [bold red]{s.deletions}[/]  "
            f"[dim]files:[/] [bold yellow]{s.changed_files}[/]"
        )

    def print_metrics_summary(
        self, metrics: Sequence[CodeMetrics], synthetic: bool = False
    ) -> None:
        """Totals plus the signed net contribution."""
        title = "📊 Code Metrics Summary"
        if synthetic:
            title += " (synthetic placeholder values)"
        self.console.print()
        self.console.print(f"[bold underline cyan]{title}[/]")

        s = summarize_metrics(metrics)
        self.console.print(f"Total lines added:   [bold green]{s.additions}[/]")
        self.console.print(f"Total lines deleted: [bold red]{s.deletions}[/]")
        self.console.print(f"Total files changed: [bold yellow]{s.changed_files}[/]")
        if s.is_positive:
            self.console.print(f"Net contribution:    [green]+[/] [bold green]{s.net}[/]")
        else:
            self.console.print(
                f"Net contribution:    [bold red]{s.net}[/][dim] (cleanup/refactoring)[/]"
            )
