"""
Custom exception classes for the Cognito fetch client.

Transport, signing and JSON decoding failures are not wrapped in these;
they reach the caller as raised by requests and botocore.
"""
from typing import Optional


class CognitoFetchError(Exception):
    """Base class for errors raised by this package."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class RequestCancelledError(CognitoFetchError):
    """Exception raised when a cancelled request reaches the transport."""

    def __init__(
        self,
        message: str,
        target: Optional[str] = None,
        url: Optional[str] = None
    ):
        """
        Initialize cancellation error.

        Args:
            message: Error message
            target: x-amz-target of the cancelled request if available
            url: Endpoint URL of the cancelled request if available
        """
        super().__init__(message)
        self.target = target
        self.url = url
