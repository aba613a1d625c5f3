"""Placeholder code metrics.

Nothing here is measured. Values are a function of each URL's position in
the list so the metrics section of the report has something to render until
real diff statistics are fetched. Every record is flagged ``synthetic``.
"""

import datetime as dt
from typing import Sequence

from gh_activity.models import CodeMetrics, DetailedPullRequest


def mock_metrics_for_index(i: int) -> CodeMetrics:
    return CodeMetrics(
        additions=50 + i * 23,
        deletions=20 + i * 7,
        changed_files=3 + i % 5,
    )


def generate_mock_metrics(
    urls: Sequence[str], today: dt.date
) -> list[DetailedPullRequest]:
    """One synthetic record per URL, dated one day further back per index."""
    return [
        DetailedPullRequest(
            url=url,
            date=today - dt.timedelta(days=i),
            metrics=mock_metrics_for_index(i),
            synthetic=True,
        )
        for i, url in enumerate(urls)
    ]
