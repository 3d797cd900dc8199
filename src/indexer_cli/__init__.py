"""Command-line client for the indexer management API."""

__version__ = "0.1.0"
