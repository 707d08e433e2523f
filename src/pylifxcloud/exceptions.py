"""Custom exceptions for pylifxcloud library."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any


if TYPE_CHECKING:
    from pylifxcloud.models import ErrorEnvelope


class LifxError(Exception):
    """Base exception for all LIFX cloud errors."""


class LifxAPIError(LifxError):
    """Exception raised when the API replies with a non-success status.

    Attributes:
        status: HTTP status code returned by the API.
        envelope: Decoded error body, or None if the body was not a valid envelope.
        body: Raw response body text.
    """

    def __init__(
        self,
        message: str = "",
        status: int | None = None,
        envelope: ErrorEnvelope | None = None,
        body: str = "",
    ) -> None:
        """Initialize LifxAPIError.

        Args:
            message: Error message.
            status: HTTP status code.
            envelope: Decoded vendor error envelope, if any.
            body: Raw response body text.
        """
        super().__init__(message)
        self.status = status
        self.envelope = envelope
        self.body = body


class AuthenticationError(LifxAPIError):
    """Exception raised when the access token is missing, invalid or lacks scope."""


class RateLimitError(LifxAPIError):
    """Exception raised when API rate limit is exceeded.

    Attributes:
        retry_after: Optional number of seconds to wait before retrying.
    """

    def __init__(
        self,
        message: str = "",
        status: int | None = None,
        envelope: ErrorEnvelope | None = None,
        body: str = "",
        retry_after: int | None = None,
    ) -> None:
        """Initialize RateLimitError.

        Args:
            message: Error message.
            status: HTTP status code.
            envelope: Decoded vendor error envelope, if any.
            body: Raw response body text.
            retry_after: Optional number of seconds to wait before retrying.
        """
        super().__init__(message, status=status, envelope=envelope, body=body)
        self.retry_after = retry_after


class LifxDecodeError(LifxError):
    """Exception raised when a success response does not match the expected schema."""


class InvalidParameterError(LifxError):
    """Exception raised for invalid parameter values.

    Attributes:
        parameter_name: Optional name of the invalid parameter.
        value: Optional value that was invalid.
    """

    def __init__(
        self,
        message: str = "",
        parameter_name: str | None = None,
        value: Any = None,
    ) -> None:
        """Initialize InvalidParameterError.

        Args:
            message: Error message.
            parameter_name: Optional name of the invalid parameter.
            value: Optional value that was invalid.
        """
        super().__init__(message)
        self.parameter_name = parameter_name
        self.value = value
