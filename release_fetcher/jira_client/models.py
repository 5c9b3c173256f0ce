"""Pydantic models for Jira search results."""

from pydantic import BaseModel, Field


class TicketReference(BaseModel):
    """Jira issue linked to a pull request."""

    key: str = Field(..., description="Issue key, e.g. PROJ-123")
    url: str = Field(..., description="Browse URL of the issue")
