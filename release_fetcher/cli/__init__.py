"""Command line interface for release-fetcher."""
