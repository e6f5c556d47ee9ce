"""
Cooperative cancellation for outbound requests.
"""
import threading
from typing import Optional

from utils.exceptions import RequestCancelledError


class CancellationToken:
    """
    Thread-safe flag observed by the transport before a request is sent.

    The dispatcher attaches one token per request and never triggers it
    itself; cancelling is left to the caller. The flag is only checked
    before the request goes out: a request already in flight is not
    interrupted by cancel().
    """

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(
        self,
        target: Optional[str] = None,
        url: Optional[str] = None
    ) -> None:
        """
        Raise if cancel() has been called on this token.

        Raises:
            RequestCancelledError: If the token was cancelled
        """
        if self.cancelled:
            raise RequestCancelledError(
                "Request was cancelled before it was sent",
                target=target,
                url=url,
            )
