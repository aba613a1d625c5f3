"""Repository grouping for activity URLs."""

from collections import defaultdict
from typing import Iterable, Optional


def extract_repo(url: str, host: str = "github.com") -> Optional[str]:
    """Return "owner/repo" for https://<host>/owner/repo/... URLs, else None."""
    parts = url.split("/")
    if len(parts) >= 5 and parts[2] == host:
        return f"{parts[3]}/{parts[4]}"
    return None


def group_by_repository(
    urls: Iterable[str], host: str = "github.com"
) -> dict[str, list[str]]:
    """Map "owner/repo" -> sorted URLs, keys sorted. Unparseable URLs are dropped."""
    groups: dict[str, list[str]] = defaultdict(list)
    for url in urls:
        repo = extract_repo(url, host)
        if repo:
            groups[repo].append(url)
    return {repo: sorted(groups[repo]) for repo in sorted(groups)}


def count_repositories(urls: Iterable[str], host: str = "github.com") -> int:
    """Number of distinct repositories among `urls`."""
    return len(group_by_repository(urls, host))
