"""
Core infrastructure for the map client: errors, logging, startup wiring.
"""

from .exceptions import (
    ErrorCode,
    H2OkException,
    QueryError,
    NetworkError,
    DecodeError,
    GeolocationUnavailable,
    ServiceNotInitializedError,
)
from .logging import configure_logging, JsonFormatter

__all__ = [
    "ErrorCode",
    "H2OkException",
    "QueryError",
    "NetworkError",
    "DecodeError",
    "GeolocationUnavailable",
    "ServiceNotInitializedError",
    "configure_logging",
    "JsonFormatter",
]
