class EduMigrateError(Exception):
    """Base class for domain errors raised by the services layer."""


class ValidationError(EduMigrateError):
    """Raised when a record is missing a required field (e.g. no name)."""


class NotFoundError(EduMigrateError):
    """Raised when no record matches the requested identifier or slug."""


class StorageError(EduMigrateError):
    """Raised when the underlying database read or write fails."""


class TelegramError(EduMigrateError):
    """Raised when the Telegram Bot API rejects or cannot receive a message."""
