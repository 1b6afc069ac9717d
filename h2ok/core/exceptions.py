"""
Custom exceptions for the H2Ok map client.

Point-query failures are shown inline by the coordinator; geolocation and
announcement failures are logged and swallowed.
"""

from typing import Optional, Dict, Any
from enum import Enum


class ErrorCode(str, Enum):
    """Standardized error codes for the application."""

    # Remote service errors
    NETWORK_ERROR = "NETWORK_ERROR"
    DECODE_ERROR = "DECODE_ERROR"

    # Device capabilities
    GEOLOCATION_UNAVAILABLE = "GEOLOCATION_UNAVAILABLE"

    # System errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    SERVICE_NOT_INITIALIZED = "SERVICE_NOT_INITIALIZED"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


class H2OkException(Exception):
    """Base exception for the map client."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code


class QueryError(H2OkException):
    """Raised when a request to the remote data service fails."""


class NetworkError(QueryError):
    """Raised on transport failure or a non-success HTTP status."""

    def __init__(self, message: str = "Remote service unreachable", details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            error_code=ErrorCode.NETWORK_ERROR,
            details=details,
            status_code=502
        )


class DecodeError(QueryError):
    """Raised when the response body is not well-formed."""

    def __init__(self, message: str = "Malformed response from remote service", details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            error_code=ErrorCode.DECODE_ERROR,
            details=details,
            status_code=502
        )


class GeolocationUnavailable(H2OkException):
    """Raised when the location capability is missing, denied or failing."""

    def __init__(self, reason: str = "unavailable", details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=f"Geolocation {reason}",
            error_code=ErrorCode.GEOLOCATION_UNAVAILABLE,
            details=details or {"reason": reason},
            status_code=503
        )


class ServiceNotInitializedError(H2OkException):
    """Raised when the view surface is used before startup completed."""

    def __init__(self, service_name: str):
        super().__init__(
            message=f"Service '{service_name}' is not initialized",
            error_code=ErrorCode.SERVICE_NOT_INITIALIZED,
            details={"service_name": service_name},
            status_code=503
        )
