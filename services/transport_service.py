"""
HTTP transport for request descriptors.
"""
from typing import Optional

import requests

from logger_config import get_logger
from models import CognitoRequest

logger = get_logger(__name__)


class RequestsTransport:
    """Sends one descriptor per call over a fresh requests connection."""

    def __init__(self, timeout: Optional[float] = None) -> None:
        """
        Initialize transport.

        Args:
            timeout: Optional socket timeout in seconds; None waits
                indefinitely
        """
        self.timeout = timeout

    def send(self, request: CognitoRequest) -> requests.Response:
        """
        Send the descriptor and return the raw response.

        The response status is not checked; error responses are returned
        like any other.

        Raises:
            RequestCancelledError: If the descriptor's token was cancelled
            requests.RequestException: If the request fails at the network level
        """
        request.cancel_token.raise_if_cancelled(
            target=request.headers.get('x-amz-target'),
            url=request.url,
        )

        response = requests.request(
            request.method,
            request.url,
            headers=request.headers,
            data=request.body.encode('utf-8'),
            timeout=self.timeout,
        )
        logger.debug(
            f'{request.method} {request.url} returned {response.status_code}'
        )
        return response
