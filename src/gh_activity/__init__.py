"""gh-activity — weekly GitHub activity report built on the gh CLI.

Counts the pull requests, issues and reviews you touched recently, grouped
by repository, with an optional (synthetic) code metrics section.
"""

__version__ = "0.1.0"
