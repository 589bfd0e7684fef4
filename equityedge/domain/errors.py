"""
Domain exceptions.

Validation problems raise ValidationError, a ValueError subclass; any other
ValueError is an internal fault.  The remaining classes mark the outcomes the
HTTP layer maps to distinct status codes.
"""


class ValidationError(ValueError):
    """A request field is missing or blank; correctable by the caller."""


class NotFoundError(LookupError):
    """Base class for "nothing stored or supplied for this key" outcomes."""


class StockDataNotFoundError(NotFoundError):
    pass


class NoteNotFoundError(NotFoundError):
    pass


class WatchlistEntryNotFoundError(NotFoundError):
    pass


class DuplicateEntryError(ValueError):
    """Raised when a (user, symbol) record already exists."""


class DuplicateNoteError(DuplicateEntryError):
    pass


class DuplicateWatchlistEntryError(DuplicateEntryError):
    pass


class UpstreamProviderError(RuntimeError):
    """A third-party provider failed and no partial result is possible."""
