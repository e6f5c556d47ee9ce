"""
Data structures passed between the resolver, signer and transport.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from utils.cancellation import CancellationToken


@dataclass(frozen=True)
class FetchOptions:
    """Per-call options for a Cognito Identity Provider request."""

    body: Any
    region: Optional[str] = None
    access_key_id: Optional[str] = None
    secret_access_key: Optional[str] = None
    session_token: Optional[str] = None
    signed: bool = False

    # camelCase spellings used by the JavaScript SDK family
    _ALIASES = {
        "accessKeyId": "access_key_id",
        "secretAccessKey": "secret_access_key",
        "sessionToken": "session_token",
    }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FetchOptions":
        """
        Build options from a plain mapping.

        Args:
            data: Mapping with a required "body" key and optional region,
                credential and signed keys (snake_case or camelCase)

        Raises:
            KeyError: If "body" is missing
        """
        kwargs = {cls._ALIASES.get(key, key): value for key, value in data.items()}
        return cls(
            body=kwargs["body"],
            region=kwargs.get("region"),
            access_key_id=kwargs.get("access_key_id"),
            secret_access_key=kwargs.get("secret_access_key"),
            session_token=kwargs.get("session_token"),
            signed=bool(kwargs.get("signed")),
        )


@dataclass(frozen=True)
class ResolvedCredentials:
    region: Optional[str]
    access_key_id: Optional[str]
    secret_access_key: Optional[str]
    session_token: Optional[str] = None

    @property
    def has_keys(self) -> bool:
        return bool(self.access_key_id and self.secret_access_key)


@dataclass
class CognitoRequest:
    """Outbound request descriptor, alive for the duration of one call."""

    service: str
    region: Optional[str]
    url: str
    body: str
    headers: Dict[str, str] = field(default_factory=dict)
    method: str = "POST"
    cancel_token: CancellationToken = field(default_factory=CancellationToken)
