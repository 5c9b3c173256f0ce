"""Shared CLI option definitions."""

import typer

OWNER_OPTION = typer.Option(
    None,
    "--owner",
    "-o",
    help="Repository owner (optional when --repo is given as owner/name)",
)

REPO_OPTION = typer.Option(
    ..., "--repo", "-r", help="GitHub repository name or owner/name"
)

TICKETS_OPTION = typer.Option(
    True,
    "--tickets/--no-tickets",
    help="Look up Jira tickets for each pull request (needs JIRA_URL, JIRA_TOKEN)",
)

FORMAT_OPTION = typer.Option(
    "table", "--format", "-f", help="Output format: table or json"
)

TOKEN_OPTION = typer.Option(
    None, "--token", help="GitHub API token (defaults to GITHUB_TOKEN env var)"
)

JIRA_TOKEN_OPTION = typer.Option(
    None, "--jira-token", help="Jira API token (defaults to JIRA_TOKEN env var)"
)

VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Enable debug logging")
