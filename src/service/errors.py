"""Exceptions raised by the application service."""


class BingoError(Exception):
    """Base class for service errors."""


class NotFoundError(BingoError, LookupError):
    """A phrase set or session does not exist."""


class ForbiddenError(BingoError, PermissionError):
    """The caller does not own the record it tried to change."""


class InvalidInputError(BingoError, ValueError):
    """Input failed validation."""


class SuggestionError(BingoError, RuntimeError):
    """Phrase suggestion failed."""
