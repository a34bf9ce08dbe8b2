"""
Client Errors

This module defines the exceptions raised by the client. Every failure that
originates on the remote side or in the network surfaces as a subclass of
ClientError so callers can decide their own retry policy.

Hierarchy:
    ClientError
        TransportError      - could not talk to the server
        ResponseReadError   - connection dropped while reading the body
        DecodeError         - body did not match the expected schema
        HttpStatusError     - server answered with a non-2xx status
"""

from typing import Optional


class ClientError(Exception):
    """Base class for all client errors."""


class TransportError(ClientError, ConnectionError):
    """Raised when the request could not be sent or no response arrived."""


class ResponseReadError(ClientError, IOError):
    """Raised when reading the response stream fails."""


class DecodeError(ClientError, ValueError):
    """Raised when a response body is malformed or does not fit the schema."""


class HttpStatusError(ClientError):
    """
    Raised when the server responds with a non-success status code.

    Attributes:
        status_code: Numeric HTTP status code
        reason: Reason phrase reported for the status
        url: URL of the failed request
    """

    def __init__(
        self, status_code: int, reason: str = "", url: Optional[str] = None
    ):
        self.status_code = status_code
        self.reason = reason
        self.url = url
        message = f"Unexpected status code: {status_code}"
        if reason:
            message = f"{message} {reason}"
        super().__init__(message)
