"""
Bittrex REST API client.

Public endpoints are called anonymously. Private endpoints need the client
to be logged in: the URL gets ``apikey`` and ``nonce`` parameters and the
request carries an ``apisign`` HMAC-SHA512 header.
"""

import logging
from typing import Any, Callable, Dict, NamedTuple, Optional, Sequence, Tuple, Union
from urllib.parse import urljoin, urlsplit

import requests

from .constants import DEFAULT_CONFIG, HEADER_API_SIGN
from .envelope import decode_envelope
from .exceptions import ConfigurationError, HTTPError, NotAuthenticatedError
from .signing import NonceSource, append_query, sign_url

logger = logging.getLogger(__name__)

Params = Union[Dict[str, Any], Sequence[Tuple[str, Any]], None]


class PreparedCall(NamedTuple):
    """Ready-to-send request: final URL and headers."""
    url: str
    headers: Dict[str, str]


class BittrexClient:
    """
    Client for the Bittrex v1.1 REST API.

    Credentials are set once with ``login``. Changing them while signed
    requests are in flight on other threads is not supported.
    """

    def __init__(self, **config):
        """
        Initialize the client with no credentials.

        Args:
            **config: Configuration options (base_url, timeout)

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        # Merge default config with user overrides
        self.config = {**DEFAULT_CONFIG, **config}
        self._validate_config()
        self.base_url = self.config['base_url']

        self.api_key: Optional[str] = None
        self.api_secret: Optional[str] = None
        self._nonces = NonceSource()

        self.session = requests.Session()

    def _validate_config(self):
        """Validate client configuration."""
        base_url = self.config['base_url']
        if not isinstance(base_url, str):
            raise ConfigurationError("base_url must be a string")

        if not base_url:
            raise ConfigurationError("base_url cannot be empty")

        if urlsplit(base_url).scheme not in ('http', 'https'):
            raise ConfigurationError(f"base_url must be an http(s) URL: {base_url}")

        timeout = self.config['timeout']
        if timeout is not None and (isinstance(timeout, bool) or not isinstance(timeout, (int, float))):
            raise ConfigurationError("timeout must be a number")

        if timeout is not None and timeout <= 0:
            raise ConfigurationError("timeout must be positive")

    def login(self, api_key: str, api_secret: str):
        """
        Store credentials for private endpoint access.

        No request is sent to Bittrex. Calling it again replaces the
        previous credentials.
        """
        self.api_key = api_key
        self.api_secret = api_secret

    @property
    def is_logged_in(self) -> bool:
        return self.api_key is not None and self.api_secret is not None

    def _build_url(self, path: str, params: Params = None) -> str:
        """Join the endpoint path to the base URL and append public parameters."""
        url = urljoin(self.base_url.rstrip('/') + '/', path.lstrip('/'))
        if isinstance(params, dict):
            params = list(params.items())
        return append_query(url, params)

    def _prepare(self, url: str, auth: bool = False) -> PreparedCall:
        """
        Turn a URL into a ready-to-send request.

        Raises:
            NotAuthenticatedError: If auth is required and the client is not logged in
        """
        if not auth:
            return PreparedCall(url, {})

        if not self.is_logged_in:
            raise NotAuthenticatedError("the client was not logged in")

        signed = sign_url(url, self.api_key, self.api_secret, self._nonces.next())
        return PreparedCall(signed.url, {HEADER_API_SIGN: signed.signature})

    def _make_request(self, prepared: PreparedCall, method: str = 'GET') -> requests.Response:
        """
        Send a prepared request.

        Raises:
            HTTPError: If the request fails or returns an error status
        """
        try:
            response = self.session.request(
                method,
                prepared.url,
                headers=prepared.headers,
                timeout=self.config['timeout']
            )
            response.raise_for_status()
            return response
        except requests.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else None
            raise HTTPError(f"HTTP request failed: {e}", status_code=status_code) from e
        except requests.RequestException as e:
            raise HTTPError(f"HTTP request failed: {e}") from e

    def call(self, path: str, params: Params = None, auth: bool = False,
             parser: Optional[Callable[[Any], Any]] = None) -> Any:
        """
        Call an endpoint and unwrap its response envelope.

        Args:
            path: Endpoint path relative to the base URL (e.g. ``public/getmarkets``)
            params: Query parameters, kept in the given order
            auth: Whether the endpoint is private and must be signed
            parser: Optional converter for the raw ``result`` value

        Returns:
            The endpoint result

        Raises:
            NotAuthenticatedError: If auth is required and the client is not logged in
            HTTPError: If the HTTP request fails
            ApiError: If the response is not a valid envelope
            ResultError: If Bittrex reports the call failed
        """
        prepared = self._prepare(self._build_url(path, params), auth=auth)
        logger.debug("GET %s (signed=%s)", path, auth)

        response = self._make_request(prepared)
        return decode_envelope(response.text, parser=parser).into_result()

    def public_call(self, path: str, params: Params = None,
                    parser: Optional[Callable[[Any], Any]] = None) -> Any:
        """Call a public (unsigned) endpoint."""
        return self.call(path, params, auth=False, parser=parser)

    def private_call(self, path: str, params: Params = None,
                     parser: Optional[Callable[[Any], Any]] = None) -> Any:
        """Call a private endpoint; requires ``login``."""
        return self.call(path, params, auth=True, parser=parser)

    def close(self):
        """Close HTTP session."""
        if self.session:
            self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
