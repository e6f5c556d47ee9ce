"""
Cognito Identity Provider service for raw JSON-RPC calls.

Builds a POST against the regional cognito-idp endpoint, optionally signs
it with SigV4 and returns the decoded JSON body unchanged, including error
payloads such as {"__type": "NotAuthorizedException", ...}.
"""
import json
from typing import Any, Mapping, Optional, Union

from config import Config
from logger_config import get_logger
from models import CognitoRequest, FetchOptions, ResolvedCredentials
from services.signing_service import SigV4Signer
from services.transport_service import RequestsTransport
from utils.cancellation import CancellationToken

logger = get_logger(__name__)

SERVICE_NAME = 'cognito-idp'
URL_TEMPLATE = 'https://cognito-idp.{region}.amazonaws.com/'
CONTENT_TYPE = 'application/x-amz-json-1.1'
TARGET_PREFIX = 'AWSCognitoIdentityProviderService'


def build_url(region: Optional[str]) -> str:
    """Substitute region into the endpoint template, verbatim."""
    return URL_TEMPLATE.format(region=region)


def serialize_body(body: Any) -> str:
    """
    Serialize body as compact JSON text.

    Raises:
        ValueError: If body contains NaN or Infinity, which JSON cannot encode
        TypeError: If body is not JSON-serializable
    """
    # Compact separators match JSON.stringify byte-for-byte
    return json.dumps(
        body, separators=(',', ':'), ensure_ascii=False, allow_nan=False
    )


def cognito_target(action: str) -> str:
    """
    Build an x-amz-target value for a Cognito action.

    Example:
        cognito_target('InitiateAuth')
        -> 'AWSCognitoIdentityProviderService.InitiateAuth'
    """
    return f'{TARGET_PREFIX}.{action}'


class CognitoService:
    """Service for single-shot Cognito Identity Provider requests."""

    def __init__(
        self,
        transport: Optional[RequestsTransport] = None,
        signer: Optional[SigV4Signer] = None,
        config: Optional[Config] = None
    ) -> None:
        """
        Initialize Cognito service.

        Args:
            transport: Object with send(request) -> response
                (defaults to RequestsTransport)
            signer: Object with sign(request, credentials)
                (defaults to SigV4Signer)
            config: Fixed environment snapshot; when omitted, the
                environment is re-read on every fetch
        """
        self.transport = transport or RequestsTransport()
        self.signer = signer or SigV4Signer()
        self.config = config

    def resolve(self, options: FetchOptions) -> ResolvedCredentials:
        config = self.config or Config.from_env()
        return config.resolve(options)

    def build_request(
        self,
        target: str,
        options: FetchOptions,
        credentials: ResolvedCredentials,
        cancel_token: Optional[CancellationToken] = None
    ) -> CognitoRequest:
        """
        Build the unsigned request descriptor.

        Args:
            target: x-amz-target value, passed through verbatim
            options: Request options carrying the body
            credentials: Resolved region and keys
            cancel_token: Token to attach (a fresh one when omitted)

        Returns:
            CognitoRequest with the target and content-type headers set
            and the body serialized
        """
        if credentials.region is None:
            logger.warning(
                f'No region resolved for {target}; '
                f'set AWS_REGION or pass region explicitly'
            )

        return CognitoRequest(
            service=SERVICE_NAME,
            region=credentials.region,
            url=build_url(credentials.region),
            headers={
                'x-amz-target': target,
                'content-type': CONTENT_TYPE,
            },
            body=serialize_body(options.body),
            cancel_token=cancel_token or CancellationToken(),
        )

    def fetch(
        self,
        target: str,
        options: FetchOptions,
        cancel_token: Optional[CancellationToken] = None
    ) -> Any:
        """
        Send one request and return the decoded JSON response body.

        Args:
            target: x-amz-target value, e.g. 'AWSCognitoIdentityProviderService.InitiateAuth'
            options: Request options
            cancel_token: Optional token the caller may cancel

        Returns:
            The decoded response body, whatever the HTTP status

        Raises:
            botocore.exceptions.NoCredentialsError: If signing without keys
            RequestCancelledError: If cancel_token was cancelled before sending
            requests.RequestException: If the transport fails
            ValueError: If the response body is not valid JSON
        """
        credentials = self.resolve(options)
        request = self.build_request(target, options, credentials, cancel_token)

        if options.signed:
            self.signer.sign(request, credentials)

        logger.debug(
            f'Dispatching {target} to {request.url} (signed={bool(options.signed)})'
        )
        response = self.transport.send(request)
        return response.json()


def cognito_fetch(
    target: str,
    options: Union[FetchOptions, Mapping[str, Any]],
    transport: Optional[RequestsTransport] = None,
    signer: Optional[SigV4Signer] = None,
    config: Optional[Config] = None,
    cancel_token: Optional[CancellationToken] = None
) -> Any:
    """
    Make a single request to the Cognito Identity Provider endpoint.

    Region and credentials come from options first, then from AWS_REGION,
    AWS_DEFAULT_REGION, AWS_ACCESS_KEY_ID and AWS_SECRET_ACCESS_KEY.

    Args:
        target: x-amz-target value
        options: FetchOptions or a mapping accepted by FetchOptions.from_dict
        transport: Optional transport override
        signer: Optional signer override
        config: Optional environment snapshot override
        cancel_token: Optional token the caller may cancel

    Returns:
        The decoded response body
    """
    if not isinstance(options, FetchOptions):
        options = FetchOptions.from_dict(options)

    service = CognitoService(transport=transport, signer=signer, config=config)
    return service.fetch(target, options, cancel_token=cancel_token)
