"""Pytest configuration and fixtures."""

import io
import json

import pytest
from rich.console import Console

from gh_activity.report import ReportPrinter


class FakeRunner:
    """Stands in for GhRunner.

    Responses are keyed by the first four arguments, e.g.
    ("search", "prs", "--author=alice", "--created"). A value is either raw
    stdout, a list of URLs (encoded as gh would), or an exception to raise.
    Unknown searches return an empty array.
    """

    def __init__(self, responses=None, user="alice"):
        self.responses = dict(responses or {})
        self.responses.setdefault(("api", "user", "--jq", ".login"), f"{user}\n")
        self.calls: list[list[str]] = []

    def run(self, args):
        self.calls.append(list(args))
        value = self.responses.get(tuple(args[:4]), "[]")
        if isinstance(value, Exception):
            raise value
        if isinstance(value, list):
            return json.dumps([{"url": u} for u in value])
        return value


def plain_console(buf: io.StringIO) -> Console:
    return Console(
        file=buf,
        force_terminal=False,
        soft_wrap=True,
        highlight=False,
        emoji=False,
        width=200,
    )


@pytest.fixture
def out():
    return io.StringIO()


@pytest.fixture
def err():
    return io.StringIO()


@pytest.fixture
def printer(out, err):
    return ReportPrinter(console=plain_console(out), err_console=plain_console(err))


@pytest.fixture
def sample_urls():
    """Three PRs across two repositories, deliberately unsorted."""
    return [
        "https://github.com/octo/widgets/pull/12",
        "https://github.com/alice/dotfiles/pull/3",
        "https://github.com/octo/widgets/pull/7",
    ]


@pytest.fixture
def make_runner():
    return FakeRunner


@pytest.fixture
def make_printer(out, err):
    def _make(**kwargs):
        return ReportPrinter(
            console=plain_console(out), err_console=plain_console(err), **kwargs
        )

    return _make
