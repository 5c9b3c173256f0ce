"""Aggregation of release commits into pull requests and tickets."""

import logging

from .errors import PullRequestLookupError
from .github_client.client import GitHubClient
from .github_client.models import Repository
from .jira_client.client import JiraClient
from .models import ReleaseNotes, ReleasePullRequests
from .version import previous_version

logger = logging.getLogger(__name__)


class ReleaseNoteAggregator:
    """Collects the pull requests and tickets that make up a release.

    Runs sequentially: one comparison, one pull request lookup per commit and
    one ticket search per distinct pull request.
    """

    def __init__(self, github: GitHubClient, jira: JiraClient | None = None):
        """Initialize aggregator with its API clients.

        Args:
            github: Client used for commit ranges and pull request lookups
            jira: Optional client used for ticket lookups
        """
        self.github = github
        self.jira = jira

    def collect(self, repo: Repository, version: str) -> ReleasePullRequests:
        """Map each pull request in a release to the summaries of its commits.

        A failed comparison propagates as ComparisonError. A failed lookup for
        a single commit is logged and the commit is skipped.
        """
        base = previous_version(version)
        logger.info(f"Collecting pull requests for {repo} {base}...{version}")
        commits = self.github.compare_commits(repo, base, version)

        result = ReleasePullRequests(
            repository=repo, version=version, previous_version=base
        )
        for commit in commits:
            try:
                pulls = self.github.list_pull_requests_for_commit(repo, commit.sha)
            except PullRequestLookupError as e:
                logger.warning(f"Skipping commit {commit.sha}: {e}")
                result.skipped_commits.append(commit.sha)
                continue

            summary = commit.summary
            for pull in pulls:
                result.pull_requests.setdefault(pull.url, []).append(summary)

        logger.info(
            f"Found {len(result.pull_requests)} pull requests "
            f"({len(result.skipped_commits)} commits skipped)"
        )
        return result

    def build_pr_list(self, repo: Repository, version: str) -> dict[str, list[str]]:
        """Return pull request URL to commit summaries for a release."""
        return self.collect(repo, version).pull_requests

    def tickets_for_pull_requests(self, pr_urls: list[str]) -> dict[str, list[str]]:
        """Look up tickets once per pull request, keeping the given order."""
        if self.jira is None:
            return {}

        tickets: dict[str, list[str]] = {}
        for url in pr_urls:
            if url not in tickets:
                tickets[url] = self.jira.tickets_for_pr(url)
        return tickets

    def build_release_notes(self, repo: Repository, version: str) -> ReleaseNotes:
        """Collect pull requests for a release and their linked tickets."""
        collected = self.collect(repo, version)
        return ReleaseNotes(
            **collected.model_dump(),
            tickets=self.tickets_for_pull_requests(list(collected.pull_requests)),
        )
