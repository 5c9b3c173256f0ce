"""GitHub client package for API interaction."""

from .client import GitHubClient
from .models import Commit, PullRequest, Repository, summary_line

__all__ = [
    "GitHubClient",
    "Commit",
    "PullRequest",
    "Repository",
    "summary_line",
]
