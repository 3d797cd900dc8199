class IndexerCliError(Exception):
    """Base class for errors raised by the indexer CLI."""


class ConfigError(IndexerCliError):
    """The CLI configuration is missing or invalid."""


class IndexerManagementError(IndexerCliError):
    """The indexer management API could not be reached or rejected a request."""
