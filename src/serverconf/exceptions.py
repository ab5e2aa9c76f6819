"""Custom exception types for the serverconf package."""


class ServerConfError(Exception):
    """Base exception class for all package-specific errors."""

    pass


class ConversionError(ServerConfError):
    """Raised when a connection string cannot be turned into a server config.

    The error carries a single human-readable usage message describing what a
    valid input for the failing parser looks like.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message
