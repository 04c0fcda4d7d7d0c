class Error(Exception):
    """Base error type for this module."""


class UnsupportedError(Error):
    """Exception raised when an operation is not supported."""


class UnsupportedPredicateError(UnsupportedError):
    """Exception raised when a filter is evaluated with a predicate its column type does not support."""

    def __init__(self, predicate, message: str = None):
        self.predicate = predicate
        super().__init__(message or f"Filter predicate {predicate.verb} is not supported")


class InvalidParametersError(Error, ValueError):
    """Exception raised when a filter is constructed with parameters that do not fit its predicate."""


class BadConfigError(Error):
    """Exception when an error is due to bad configuration."""
