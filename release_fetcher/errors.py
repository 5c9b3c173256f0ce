"""Exception hierarchy for release fetching."""


class ReleaseFetcherError(Exception):
    """Base class for errors raised while fetching release data."""


class ComparisonError(ReleaseFetcherError):
    """Raised when the commit range between two releases cannot be resolved.

    Either ref may be unknown to the repository or the service may be
    unreachable. There is no partial result for a failed comparison.
    """

    def __init__(self, base: str, head: str, reason: str):
        super().__init__(f"Cannot compare {base}...{head}: {reason}")
        self.base = base
        self.head = head


class PullRequestLookupError(ReleaseFetcherError, LookupError):
    """Raised when the pull requests for a single commit cannot be listed."""

    def __init__(self, sha: str, reason: str):
        super().__init__(f"Cannot list pull requests for commit {sha}: {reason}")
        self.sha = sha


class TicketSearchError(ReleaseFetcherError):
    """Raised when the issue tracker search fails."""

    def __init__(self, query: str, reason: str):
        super().__init__(f"Ticket search failed for query {query!r}: {reason}")
        self.query = query
