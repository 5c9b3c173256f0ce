"""GitHub API client using PyGitHub."""

import logging

from github import Auth, Github
from github.Commit import Commit as GithubCommit
from github.GithubException import GithubException
from github.PullRequest import PullRequest as GithubPullRequest
from github.Repository import Repository as GithubRepository
from requests.exceptions import RequestException

from ..config import GitHubConfig
from ..errors import ComparisonError, PullRequestLookupError
from .models import Commit, PullRequest, Repository

logger = logging.getLogger(__name__)


class GitHubClient:
    """GitHub API client for commit ranges and their pull requests."""

    def __init__(self, config: GitHubConfig | None = None):
        """Initialize GitHub client with authentication.

        Args:
            config: GitHub configuration. If None, read from the environment.

        Raises:
            ValueError: If no token is configured.
        """
        self.config = config or GitHubConfig.from_env()
        self.config.validate()
        assert self.config.token is not None

        self.github = Github(
            auth=Auth.Token(self.config.token), base_url=self.config.base_url
        )

    def _convert_commit(self, github_commit: GithubCommit) -> Commit:
        """Convert PyGitHub commit to our model."""
        return Commit(sha=github_commit.sha, message=github_commit.commit.message or "")

    def _convert_pull_request(self, github_pull: GithubPullRequest) -> PullRequest:
        """Convert PyGitHub pull request to our model."""
        return PullRequest(
            url=github_pull.html_url,
            number=github_pull.number,
            title=github_pull.title,
        )

    def get_repository(self, repo: Repository) -> GithubRepository:
        """Get a lazy repository object; no request is made until it is used."""
        return self.github.get_repo(repo.full_name, lazy=True)

    def compare_commits(self, repo: Repository, base: str, head: str) -> list[Commit]:
        """List the commits between two refs, oldest first.

        Args:
            repo: Repository to compare in
            base: Base ref (tag, branch or SHA)
            head: Head ref

        Returns:
            Commits reachable from head but not from base, in compare order

        Raises:
            ComparisonError: If either ref is unknown or the request fails
        """
        logger.debug(f"Comparing {repo}: {base}...{head}")
        try:
            comparison = self.get_repository(repo).compare(base, head)
            commits = [self._convert_commit(commit) for commit in comparison.commits]
        except (GithubException, RequestException) as e:
            raise ComparisonError(base, head, _describe(e)) from e

        logger.info(f"Found {len(commits)} commits between {base} and {head}")
        return commits

    def list_pull_requests_for_commit(
        self, repo: Repository, sha: str
    ) -> list[PullRequest]:
        """List the pull requests that introduced a commit.

        Raises:
            PullRequestLookupError: If the lookup fails for this commit
        """
        try:
            github_commit = self.get_repository(repo).get_commit(sha)
            pulls = [
                self._convert_pull_request(pull) for pull in github_commit.get_pulls()
            ]
        except (GithubException, RequestException) as e:
            raise PullRequestLookupError(sha, _describe(e)) from e

        logger.debug(f"Commit {sha} belongs to {len(pulls)} pull request(s)")
        return pulls


def _describe(error: GithubException | RequestException) -> str:
    """Render a PyGitHub or transport exception as a short reason string."""
    if isinstance(error, RequestException):
        return f"{type(error).__name__}: {error}"

    message = None
    if isinstance(error.data, dict):
        message = error.data.get("message")
    return f"{error.status} {message}" if message else str(error)
