"""Jira client package for ticket lookup."""

from .client import JiraClient, build_pr_query
from .models import TicketReference

__all__ = ["JiraClient", "TicketReference", "build_pr_query"]
