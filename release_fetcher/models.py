"""Result models for release aggregation runs."""

from pydantic import BaseModel, Field

from .github_client.models import Repository


class ReleasePullRequests(BaseModel):
    """Pull requests merged between a release and its predecessor."""

    repository: Repository = Field(..., description="Repository that was compared")
    version: str = Field(..., description="Release identifier used as head")
    previous_version: str = Field(..., description="Release identifier used as base")
    pull_requests: dict[str, list[str]] = Field(
        default_factory=dict,
        description="Pull request URL to the summaries of its commits, in "
        "discovery order",
    )
    skipped_commits: list[str] = Field(
        default_factory=list,
        description="SHAs of commits whose pull request lookup failed",
    )


class ReleaseNotes(ReleasePullRequests):
    """Release pull requests with their linked Jira tickets."""

    tickets: dict[str, list[str]] = Field(
        default_factory=dict,
        description="Pull request URL to browse URLs of referencing tickets",
    )
