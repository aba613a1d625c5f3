"""Code metrics totals."""

from typing import Iterable

from gh_activity.models import CodeMetrics, MetricsSummary


def summarize_metrics(metrics: Iterable[CodeMetrics]) -> MetricsSummary:
    summary = MetricsSummary()
    for m in metrics:
        summary.additions += m.additions
        summary.deletions += m.deletions
        summary.changed_files += m.changed_files
    return summary
