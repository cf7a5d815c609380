"""Exceptions raised by wimm."""


class WimmError(Exception):
    """Base class for all wimm errors."""


class DbError(WimmError):
    """A failure while reading or writing the task database."""

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return f"Database error: {self.message}"