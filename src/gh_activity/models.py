"""Data models for gh-activity."""

import datetime as dt
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt


# ── Raw gh output ─────────────────────────────────────────────────────────

class SearchItem(BaseModel):
    """One record of `gh search ... --json=url` output."""

    model_config = ConfigDict(extra="ignore")

    url: str


# ── Queries ───────────────────────────────────────────────────────────────

class SearchKind(str, Enum):
    """What `gh search` looks for."""

    prs = "prs"
    issues = "issues"


class SearchRole(str, Enum):
    """How the user relates to the searched items."""

    author = "author"
    reviewed_by = "reviewed-by"
    commenter = "commenter"


class SearchQuery(BaseModel):
    """A single `gh search` invocation."""

    kind: SearchKind
    role: SearchRole = SearchRole.author
    username: str
    filter: str  # qualifier flag, e.g. "--created"
    since: dt.date
    limit: int = Field(default=1000, gt=0)

    def to_args(self) -> list[str]:
        """Argument vector for the gh binary."""
        return [
            "search",
            self.kind.value,
            f"--{self.role.value}={self.username}",
            self.filter,
            f">={self.since:%Y-%m-%d}",
            "--json=url",
            f"--limit={self.limit}",
        ]


# ── Report layout ─────────────────────────────────────────────────────────

class Category(BaseModel):
    """One row of the activity report."""

    label: str
    what: str  # used in "Error fetching <what>: ..."
    kind: SearchKind
    role: SearchRole = SearchRole.author
    filter: str
    optional: bool = False  # only shown with --all

    def query(self, username: str, since: dt.date, limit: int = 1000) -> SearchQuery:
        return SearchQuery(
            kind=self.kind,
            role=self.role,
            username=username,
            filter=self.filter,
            since=since,
            limit=limit,
        )


# ── Code metrics ──────────────────────────────────────────────────────────

class CodeMetrics(BaseModel):
    """Lines added, lines deleted and files changed for one PR."""

    additions: NonNegativeInt = 0
    deletions: NonNegativeInt = 0
    changed_files: NonNegativeInt = 0


class DetailedPullRequest(BaseModel):
    """A pull request URL paired with a date and code metrics."""

    url: str
    date: dt.date
    metrics: CodeMetrics = Field(default_factory=CodeMetrics)
    synthetic: bool = False  # True when metrics are placeholders, not measured


class MetricsSummary(BaseModel):
    """Totals across a list of CodeMetrics."""

    additions: int = 0
    deletions: int = 0
    changed_files: int = 0

    @property
    def net(self) -> int:
        return self.additions - self.deletions

    @property
    def is_positive(self) -> bool:
        """True when more lines were added than deleted."""
        return self.net > 0
