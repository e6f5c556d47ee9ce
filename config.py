"""
Configuration module for AWS region and credential defaults.

This module snapshots the AWS environment variables into a dataclass and
overlays per-call overrides on top of that snapshot.
"""
import os
from dataclasses import dataclass
from typing import Optional

from models import FetchOptions, ResolvedCredentials


def _env(name: str) -> Optional[str]:
    return os.environ.get(name) or None


@dataclass(frozen=True)
class Config:
    """Snapshot of environment-sourced AWS defaults."""

    aws_region: Optional[str] = None
    aws_default_region: Optional[str] = None
    aws_access_key_id: Optional[str] = None
    aws_secret_access_key: Optional[str] = None
    aws_session_token: Optional[str] = None

    @classmethod
    def from_env(cls) -> "Config":
        """
        Create Config instance from environment variables.

        Missing or empty variables are treated as "no default", never as
        an error.
        """
        return cls(
            aws_region=_env("AWS_REGION"),
            aws_default_region=_env("AWS_DEFAULT_REGION"),
            aws_access_key_id=_env("AWS_ACCESS_KEY_ID"),
            aws_secret_access_key=_env("AWS_SECRET_ACCESS_KEY"),
            aws_session_token=_env("AWS_SESSION_TOKEN"),
        )

    def resolve(self, options: FetchOptions) -> ResolvedCredentials:
        """
        Overlay call-time options onto this snapshot.

        Args:
            options: Request options for a single call

        Returns:
            ResolvedCredentials: region, access key id and secret, any of
            which may be None when neither source supplies it
        """
        # An env session token only belongs to env keys
        session_token = options.session_token
        if not options.access_key_id:
            session_token = session_token or self.aws_session_token

        return ResolvedCredentials(
            region=options.region or self.aws_region or self.aws_default_region,
            access_key_id=options.access_key_id or self.aws_access_key_id,
            secret_access_key=(
                options.secret_access_key or self.aws_secret_access_key
            ),
            session_token=session_token,
        )
