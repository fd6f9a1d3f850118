"""
Core exceptions for the application.
"""


class APIException(Exception):
    """Base class for API exceptions."""
    def __init__(self, message: str = "An error occurred"):
        self.message = message
        super().__init__(self.message)


class DecodeError(APIException):
    """Raised when a global ID cannot be decoded into a type tag and a local ID."""
    def __init__(self, message: str = "Invalid global ID"):
        super().__init__(message)


class UnknownTypeError(APIException):
    """Raised when a type tag is not registered."""
    def __init__(self, message: str = "Unknown type"):
        super().__init__(message)


class InvalidArgumentError(APIException):
    """Raised when a field argument is present but unusable."""
    def __init__(self, message: str = "Invalid argument", argument: str | None = None):
        self.argument = argument
        super().__init__(message)


class MissingArgumentError(APIException):
    """Raised when none of the accepted arguments were supplied."""
    def __init__(self, message: str = "Missing argument"):
        super().__init__(message)


class SwapiClientError(APIException):
    """Raised when the backing REST catalog fails or answers with garbage."""
    def __init__(self, message: str = "SWAPI request failed", status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)
