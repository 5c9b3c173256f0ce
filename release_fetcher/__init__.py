"""Release note material fetcher: pull requests and Jira tickets per release."""

__version__ = "0.1.0"
