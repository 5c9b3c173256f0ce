"""CLI commands for fetching release pull requests and tickets."""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from ..aggregator import ReleaseNoteAggregator
from ..config import GitHubConfig, JiraConfig
from ..errors import ComparisonError
from ..github_client.client import GitHubClient
from ..github_client.models import Repository
from ..jira_client.client import JiraClient
from ..models import ReleaseNotes
from ..version import previous_version
from .options import (
    FORMAT_OPTION,
    JIRA_TOKEN_OPTION,
    OWNER_OPTION,
    REPO_OPTION,
    TICKETS_OPTION,
    TOKEN_OPTION,
    VERBOSE_OPTION,
)

console = Console()
err_console = Console(stderr=True)

OUTPUT_FORMATS = ("table", "json")


def setup_logging(verbose: bool) -> None:
    """Route library logging through rich on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


def resolve_repository(owner: str | None, repo: str) -> Repository:
    """Build a Repository from --owner/--repo, accepting owner/name in --repo."""
    if owner is None:
        return Repository.parse(repo)
    return Repository(owner=owner, name=repo)


def prs(
    release: str = typer.Argument(..., help="Release identifier, e.g. release-v1.4.2"),
    owner: str | None = OWNER_OPTION,
    repo: str = REPO_OPTION,
    tickets: bool = TICKETS_OPTION,
    output_format: str = FORMAT_OPTION,
    token: str | None = TOKEN_OPTION,
    jira_token: str | None = JIRA_TOKEN_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """List the pull requests merged since the previous release.

    The previous release is derived from RELEASE: the patch is decremented,
    or the minor when the patch is 0 or x. Commits whose pull request lookup
    fails are skipped and reported.

    Examples:
        release-fetcher prs release-v1.4.2 --repo myorg/myrepo
        release-fetcher prs release-v1.4.x -o myorg -r myrepo --no-tickets
        release-fetcher prs release-v2.1.0 -r myorg/myrepo --format json
    """
    setup_logging(verbose)

    if output_format not in OUTPUT_FORMATS:
        err_console.print(
            f"❌ Error: --format must be one of: {', '.join(OUTPUT_FORMATS)}"
        )
        raise typer.Exit(1)

    try:
        repository = resolve_repository(owner, repo)
        github = GitHubClient(GitHubConfig.from_env(token=token))

        jira = None
        if tickets:
            jira_config = JiraConfig.from_env(token=jira_token)
            if jira_config.is_configured():
                jira = JiraClient(jira_config)
            else:
                err_console.print(
                    "⚠️  Jira is not configured (JIRA_URL, JIRA_TOKEN), "
                    "skipping ticket lookup"
                )

        notes = ReleaseNoteAggregator(github, jira).build_release_notes(
            repository, release
        )
    except (ComparisonError, ValueError) as e:
        err_console.print(f"❌ Error: {escape(str(e))}")
        raise typer.Exit(1)

    if output_format == "json":
        typer.echo(notes.model_dump_json(indent=2))
    else:
        print_release_notes(notes, show_tickets=jira is not None)


def print_release_notes(notes: ReleaseNotes, show_tickets: bool) -> None:
    """Render release notes as a rich table."""
    console.print(
        f"📦 {notes.repository}: {notes.previous_version} → {notes.version}"
    )

    if not notes.pull_requests:
        console.print("❌ No pull requests found for this release")
    else:
        table = Table(title="Pull Requests")
        table.add_column("Pull Request", style="cyan", overflow="fold")
        table.add_column("Commits", style="white")
        if show_tickets:
            table.add_column("Tickets", style="green", overflow="fold")

        for url, summaries in notes.pull_requests.items():
            row = [escape(url), escape("\n".join(summaries))]
            if show_tickets:
                row.append(escape("\n".join(notes.tickets.get(url, []))) or "-")
            table.add_row(*row)

        console.print(table)
        console.print(f"✅ Found {len(notes.pull_requests)} pull requests")

    if notes.skipped_commits:
        console.print(
            f"⚠️  Skipped {len(notes.skipped_commits)} commits whose pull requests "
            f"could not be listed:"
        )
        for sha in notes.skipped_commits:
            console.print(f"   {sha}")


def previous(
    release: str = typer.Argument(..., help="Release identifier"),
) -> None:
    """Show the release identifier preceding RELEASE."""
    typer.echo(previous_version(release))
