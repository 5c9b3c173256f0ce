"""Jira client for finding tickets that reference a pull request."""

import logging

from jira import JIRA
from jira.exceptions import JIRAError
from requests.exceptions import RequestException

from ..config import JiraConfig
from ..errors import TicketSearchError
from .models import TicketReference

logger = logging.getLogger(__name__)

MAX_RESULTS = 50


def build_pr_query(field: str, pr_url: str) -> str:
    """Build a JQL query matching issues whose ``field`` contains ``pr_url``.

    Example:
        >>> build_pr_query("Git Pull Request", "https://github.com/o/r/pull/1")
        '"Git Pull Request" ~ "https://github.com/o/r/pull/1"'
    """
    return f"{_quote(field)} ~ {_quote(pr_url)}"


def _quote(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class JiraClient:
    """Jira client authenticated with a bearer (personal access) token."""

    def __init__(self, config: JiraConfig | None = None):
        """Initialize Jira client.

        Args:
            config: Jira configuration. If None, read from the environment.

        Raises:
            ValueError: If host or token are missing.
        """
        self.config = config or JiraConfig.from_env()
        self.config.validate()

        self.jira = JIRA(
            server=self.config.server_url,
            token_auth=self.config.token,
            get_server_info=False,
        )

    def ticket_url(self, key: str) -> str:
        """Return the browse URL of a Jira issue."""
        return f"https://{self.config.host}/browse/{key}"

    def search_tickets(self, pr_url: str) -> list[TicketReference]:
        """Search for tickets referencing a pull request.

        Args:
            pr_url: Pull request URL to look for

        Returns:
            Tickets in the order returned by Jira

        Raises:
            TicketSearchError: If the search fails
        """
        query = build_pr_query(self.config.pr_field, pr_url)
        logger.debug(f"Searching Jira with query: {query}")
        try:
            issues = self.jira.search_issues(query, maxResults=MAX_RESULTS)
        except (JIRAError, RequestException) as e:
            raise TicketSearchError(query, str(e)) from e

        return [
            TicketReference(key=issue.key, url=self.ticket_url(issue.key))
            for issue in issues
        ]

    def tickets_for_pr(self, pr_url: str) -> list[str]:
        """Return browse URLs of tickets referencing a pull request.

        Best effort: a failed search is logged and yields an empty list.
        """
        try:
            return [ticket.url for ticket in self.search_tickets(pr_url)]
        except TicketSearchError as e:
            logger.error(f"Error searching tickets for {pr_url}: {e}")
            return []
