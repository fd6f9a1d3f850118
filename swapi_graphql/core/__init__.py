"""
Core application components including configuration and custom exceptions.
"""

from .config import Settings, settings
from .exceptions import (
    APIException,
    DecodeError,
    InvalidArgumentError,
    MissingArgumentError,
    SwapiClientError,
    UnknownTypeError,
)

__all__ = [
    # config
    "Settings",
    "settings",
    # exceptions
    "APIException",
    "DecodeError",
    "InvalidArgumentError",
    "MissingArgumentError",
    "SwapiClientError",
    "UnknownTypeError",
]
