"""
SigV4 signing service backed by botocore.
"""
from typing import Optional

from botocore.auth import SigV4Auth
from botocore.awsrequest import AWSRequest
from botocore.credentials import Credentials

from logger_config import get_logger
from models import CognitoRequest, ResolvedCredentials

logger = get_logger(__name__)


class SigV4Signer:
    """Adds AWS Signature Version 4 headers to a request descriptor."""

    def __init__(self, service_name: Optional[str] = None) -> None:
        """
        Initialize signer.

        Args:
            service_name: Signing name to scope signatures to (defaults to
                the descriptor's own service name)
        """
        self.service_name = service_name

    @staticmethod
    def _credentials(credentials: ResolvedCredentials) -> Optional[Credentials]:
        # botocore raises NoCredentialsError itself when handed None
        if not credentials.has_keys:
            return None
        return Credentials(
            access_key=credentials.access_key_id,
            secret_key=credentials.secret_access_key,
            token=credentials.session_token,
        )

    def sign(
        self,
        request: CognitoRequest,
        credentials: ResolvedCredentials
    ) -> None:
        """
        Sign the request in place.

        The signature covers the exact body text that will be sent.
        Authorization and X-Amz-Date (plus X-Amz-Security-Token for
        temporary credentials) are written into request.headers.

        Args:
            request: Descriptor to sign
            credentials: Resolved region and key pair

        Raises:
            botocore.exceptions.NoCredentialsError: If either key is missing
        """
        aws_request = AWSRequest(
            method=request.method,
            url=request.url,
            data=request.body.encode('utf-8'),
            headers=dict(request.headers),
        )

        SigV4Auth(
            self._credentials(credentials),
            self.service_name or request.service,
            # Same pass-through as the URL: a missing region signs as "None"
            str(request.region),
        ).add_auth(aws_request)

        for name, value in aws_request.headers.items():
            request.headers[name] = value

        logger.debug(f'Signed {request.method} request to {request.url}')
