"""Configuration for the GitHub and Jira integrations."""

import os
from urllib.parse import urlparse

DEFAULT_GITHUB_API_URL = "https://api.github.com"
DEFAULT_JIRA_PR_FIELD = "Git Pull Request"


class GitHubConfig:
    """Configuration for GitHub API access."""

    def __init__(
        self, token: str | None = None, base_url: str = DEFAULT_GITHUB_API_URL
    ) -> None:
        self.token = token
        self.base_url = base_url

    @classmethod
    def from_env(cls, token: str | None = None) -> "GitHubConfig":
        """Build configuration from environment variables.

        Args:
            token: Explicit token overriding GITHUB_TOKEN.
        """
        return cls(
            token=token or os.getenv("GITHUB_TOKEN"),
            base_url=os.getenv("GITHUB_API_URL", DEFAULT_GITHUB_API_URL),
        )

    def validate(self) -> None:
        """Validate configuration and raise error if invalid."""
        if not self.token:
            raise ValueError(
                "GitHub token is required. Set GITHUB_TOKEN environment variable."
            )


class JiraConfig:
    """Configuration for Jira issue search.

    ``host`` is the bare Jira hostname (``issues.example.com``); a value
    given with a scheme is reduced to its network location.
    """

    def __init__(
        self,
        host: str | None = None,
        token: str | None = None,
        pr_field: str = DEFAULT_JIRA_PR_FIELD,
    ) -> None:
        self.host = _strip_scheme(host) if host else None
        self.token = token
        self.pr_field = pr_field

    @classmethod
    def from_env(cls, token: str | None = None) -> "JiraConfig":
        """Build configuration from JIRA_URL, JIRA_TOKEN and JIRA_PR_FIELD."""
        return cls(
            host=os.getenv("JIRA_URL"),
            token=token or os.getenv("JIRA_TOKEN"),
            pr_field=os.getenv("JIRA_PR_FIELD", DEFAULT_JIRA_PR_FIELD),
        )

    @property
    def server_url(self) -> str:
        """Base URL of the Jira server."""
        return f"https://{self.host}"

    def is_configured(self) -> bool:
        """Check if Jira is properly configured."""
        return bool(self.host) and bool(self.token)

    def validate(self) -> None:
        """Validate configuration and raise error if invalid."""
        missing = []
        if not self.host:
            missing.append("JIRA_URL")
        if not self.token:
            missing.append("JIRA_TOKEN")

        if missing:
            raise ValueError(
                f"Environment variables required for Jira ticket lookup: "
                f"{', '.join(missing)}"
            )


def _strip_scheme(host: str) -> str:
    if "://" not in host:
        return host.rstrip("/")
    return urlparse(host).netloc
