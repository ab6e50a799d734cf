"""
Exception hierarchy for chainnotes.

Business outcomes of a write (missing profile, wrong id, missing note) are
returned as structured results, not raised. Exceptions are reserved for
caller misuse and upstream I/O failures. All of them inherit from
ChainNotesError.
"""


class ChainNotesError(Exception):
    """
    Base exception for all chainnotes errors.
    """

    def __init__(self, message: str, context: dict | None = None):
        """
        Initialize chainnotes error.
        Args:
            message: Error message
            context: Optional context dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}


class ValidationError(ChainNotesError):
    """
    Validation errors.
    Raised when a caller passes input the note registry cannot accept.
    """

    pass


class UnsupportedActionError(ValidationError):
    """Raised when a write is requested with an unknown action tag."""

    pass


class NotFoundError(ChainNotesError):
    """
    Resource not found errors.
    Raised by providers when a lookup must not silently return nothing.
    """

    pass


class ConfigurationError(ChainNotesError):
    """
    Configuration errors.
    Raised when configuration is invalid or missing required values.
    """

    pass


class StoreError(ChainNotesError):
    """
    Base exception for upstream service operations.
    """

    pass


class ContentStoreError(StoreError):
    """
    Content store errors.
    Raised when an upload fails after all retry attempts.
    """

    pass


class IndexerError(StoreError):
    """
    Indexer errors.
    Raised when querying committed notes fails.
    """

    pass


class LedgerError(StoreError):
    """
    Ledger errors.
    Raised when a transaction cannot be submitted or its receipt is unusable.
    """

    pass
