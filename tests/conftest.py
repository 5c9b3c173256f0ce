"""Test configuration and fixtures."""

import pytest

from release_fetcher.config import GitHubConfig, JiraConfig


@pytest.fixture
def github_config() -> GitHubConfig:
    """GitHub configuration with a dummy token."""
    return GitHubConfig(token="test_token")


@pytest.fixture
def jira_config() -> JiraConfig:
    """Jira configuration for a test host."""
    return JiraConfig(host="issues.example.com", token="jira_token")
