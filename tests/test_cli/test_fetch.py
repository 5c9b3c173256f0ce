"""Tests for CLI prs command."""

import json
import os
from unittest.mock import Mock, patch

from requests.exceptions import ConnectionError as RequestsConnectionError
from rich.console import Console
from typer.testing import CliRunner

from release_fetcher.cli.main import app
from release_fetcher.errors import ComparisonError, PullRequestLookupError
from release_fetcher.github_client.models import Commit, PullRequest, Repository

PR_1 = "https://github.com/testorg/testrepo/pull/1"


def mock_github_client(mock_client_class: Mock) -> Mock:
    """Configure the patched GitHubClient with one commit and one PR."""
    mock_client = Mock()
    mock_client.compare_commits.return_value = [
        Commit(sha="c1", message="Add feature\n\nLong description"),
        Commit(sha="c2", message="Broken lookup"),
    ]
    mock_client.list_pull_requests_for_commit.side_effect = [
        [PullRequest(url=PR_1, number=1)],
        PullRequestLookupError("c2", "500 Server Error"),
    ]
    mock_client_class.return_value = mock_client
    return mock_client


class TestPrsCommand:
    """Test the prs CLI command."""

    def setup_method(self) -> None:
        """Set up test fixtures."""
        self.runner = CliRunner()

    @patch.dict(os.environ, {"GITHUB_TOKEN": "test_token"}, clear=True)
    @patch("release_fetcher.cli.fetch.GitHubClient")
    def test_json_output(self, mock_client_class: Mock) -> None:
        """Test JSON output of a release without Jira."""
        mock_client = Mock()
        mock_client.compare_commits.return_value = [
            Commit(sha="c1", message="Add feature\n\nLong description"),
            Commit(sha="c2", message="Follow-up"),
        ]
        mock_client.list_pull_requests_for_commit.return_value = [
            PullRequest(url=PR_1, number=1)
        ]
        mock_client_class.return_value = mock_client

        result = self.runner.invoke(
            app,
            [
                "prs",
                "release-v1.2.0",
                "--repo",
                "testorg/testrepo",
                "--format",
                "json",
                "--no-tickets",
            ],
        )

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["repository"] == {"owner": "testorg", "name": "testrepo"}
        assert data["previous_version"] == "release-v1.1.0"
        assert data["pull_requests"] == {PR_1: ["Add feature", "Follow-up"]}
        assert data["skipped_commits"] == []
        assert data["tickets"] == {}
        mock_client.compare_commits.assert_called_once_with(
            Repository(owner="testorg", name="testrepo"),
            "release-v1.1.0",
            "release-v1.2.0",
        )

    @patch.dict(
        os.environ,
        {
            "GITHUB_TOKEN": "test_token",
            "JIRA_URL": "issues.example.com",
            "JIRA_TOKEN": "jira_token",
        },
        clear=True,
    )
    @patch("release_fetcher.cli.fetch.JiraClient")
    @patch("release_fetcher.cli.fetch.GitHubClient")
    def test_table_output_with_tickets(
        self, mock_client_class: Mock, mock_jira_class: Mock
    ) -> None:
        """Test table output includes tickets and skipped commits."""
        mock_github_client(mock_client_class)
        mock_jira_class.return_value.tickets_for_pr.return_value = [
            "https://issues.example.com/browse/PROJ-1"
        ]

        with patch("release_fetcher.cli.fetch.console", Console(width=200)):
            result = self.runner.invoke(
                app, ["prs", "release-v1.2.0", "-o", "testorg", "-r", "testrepo"]
            )

        assert result.exit_code == 0
        mock_jira_class.return_value.tickets_for_pr.assert_called_once_with(PR_1)
        assert "PROJ-1" in result.stdout
        assert "Add feature" in result.stdout
        assert "Skipped 1 commits" in result.stdout
        assert "c2" in result.stdout

    @patch.dict(os.environ, {"GITHUB_TOKEN": "test_token"}, clear=True)
    @patch("release_fetcher.cli.fetch.JiraClient")
    @patch("release_fetcher.cli.fetch.GitHubClient")
    def test_jira_not_configured(
        self, mock_client_class: Mock, mock_jira_class: Mock
    ) -> None:
        """Test ticket lookup is skipped without Jira settings."""
        mock_github_client(mock_client_class)

        result = self.runner.invoke(
            app, ["prs", "release-v1.2.0", "--repo", "testorg/testrepo"]
        )

        assert result.exit_code == 0
        mock_jira_class.assert_not_called()
        assert "Jira is not configured" in result.output

    @patch.dict(
        os.environ,
        {
            "GITHUB_TOKEN": "test_token",
            "JIRA_URL": "issues.example.com",
            "JIRA_TOKEN": "jira_token",
        },
        clear=True,
    )
    @patch("release_fetcher.cli.fetch.JiraClient")
    @patch("release_fetcher.cli.fetch.GitHubClient")
    def test_no_tickets_flag(
        self, mock_client_class: Mock, mock_jira_class: Mock
    ) -> None:
        """Test --no-tickets never builds a Jira client."""
        mock_github_client(mock_client_class)

        result = self.runner.invoke(
            app, ["prs", "release-v1.2.0", "-r", "testorg/testrepo", "--no-tickets"]
        )

        assert result.exit_code == 0
        mock_jira_class.assert_not_called()

    @patch.dict(os.environ, {"GITHUB_TOKEN": "test_token"}, clear=True)
    @patch("release_fetcher.cli.fetch.GitHubClient")
    def test_comparison_failure_exits(self, mock_client_class: Mock) -> None:
        """Test a failed comparison exits with an error."""
        mock_client_class.return_value.compare_commits.side_effect = ComparisonError(
            "release-v1.1.0", "release-v1.2.0", "404 Not Found"
        )

        result = self.runner.invoke(
            app, ["prs", "release-v1.2.0", "-r", "testorg/testrepo", "--no-tickets"]
        )

        assert result.exit_code == 1
        assert "404 Not Found" in result.output

    @patch.dict(os.environ, {}, clear=True)
    def test_missing_token_exits(self) -> None:
        """Test missing GitHub token is a fatal error."""
        result = self.runner.invoke(
            app, ["prs", "release-v1.2.0", "-r", "testorg/testrepo"]
        )

        assert result.exit_code == 1
        assert "GitHub token is required" in result.output

    @patch.dict(os.environ, {"GITHUB_TOKEN": "test_token"}, clear=True)
    def test_invalid_repository(self) -> None:
        """Test --repo without owner must be owner/name."""
        result = self.runner.invoke(app, ["prs", "release-v1.2.0", "-r", "testrepo"])

        assert result.exit_code == 1
        assert "Expected format: owner/name" in result.output

    def test_invalid_format(self) -> None:
        """Test unknown output formats are rejected."""
        result = self.runner.invoke(
            app, ["prs", "release-v1.2.0", "-r", "testorg/testrepo", "-f", "xml"]
        )

        assert result.exit_code == 1
        assert "--format must be one of" in result.output

    @patch.dict(os.environ, {"GITHUB_TOKEN": "test_token"}, clear=True)
    @patch("release_fetcher.github_client.client.Github")
    def test_unreachable_service_exits(self, mock_github_class: Mock) -> None:
        """Test an unreachable GitHub exits with an error instead of a traceback."""
        mock_repo = mock_github_class.return_value.get_repo.return_value
        mock_repo.compare.side_effect = RequestsConnectionError("down")

        with patch(
            "release_fetcher.cli.fetch.err_console", Console(stderr=True, width=200)
        ):
            result = self.runner.invoke(
                app,
                ["prs", "release-v1.2.0", "-r", "testorg/testrepo", "--no-tickets"],
            )

        assert result.exit_code == 1
        assert "ConnectionError: down" in result.output
