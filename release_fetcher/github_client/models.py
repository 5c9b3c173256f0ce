"""Pydantic models for GitHub data used in release notes.

These models map to the GitHub REST API compare and commit/pulls responses.
API Reference: https://docs.github.com/en/rest/commits/commits
"""

from pydantic import BaseModel, ConfigDict, Field

SUMMARY_SEPARATOR = "\n\n"


def summary_line(message: str) -> str:
    """Return the subject of a commit message.

    The subject is everything before the first blank-line separator, so a
    wrapped multi-line subject is kept whole.

    Example:
        >>> summary_line("Fix race\\n\\nDetails about the fix")
        'Fix race'
    """
    return message.split(SUMMARY_SEPARATOR, 1)[0]


class Repository(BaseModel):
    """GitHub repository coordinates."""

    model_config = ConfigDict(frozen=True)

    owner: str = Field(..., min_length=1, description="Repository owner or org")
    name: str = Field(..., min_length=1, description="Repository name")

    @classmethod
    def parse(cls, full_name: str) -> "Repository":
        """Parse an ``owner/name`` string."""
        owner, sep, name = full_name.partition("/")
        if not sep or not owner or not name or "/" in name:
            raise ValueError(
                f"Invalid repository '{full_name}'. Expected format: owner/name"
            )
        return cls(owner=owner, name=name)

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"

    def __str__(self) -> str:
        return self.full_name


class Commit(BaseModel):
    """Commit from a compare response.

    Maps to the GitHub REST API Commit object.
    API Reference: https://docs.github.com/en/rest/commits/commits
    """

    sha: str = Field(..., description="Commit SHA (string)")
    message: str = Field("", description="Full commit message, may be multi-line")

    @property
    def summary(self) -> str:
        return summary_line(self.message)


class PullRequest(BaseModel):
    """Pull request associated with a commit.

    Maps to the GitHub REST API Pull Request object. ``url`` is the
    ``html_url`` and identifies the pull request.
    API Reference: https://docs.github.com/en/rest/commits/commits#list-pull-requests-associated-with-a-commit
    """

    url: str = Field(..., description="Canonical web URL of the pull request")
    number: int | None = Field(None, description="Pull request number (integer)")
    title: str | None = Field(None, description="Pull request title (string)")
