"""
Request signing for Bittrex private endpoints.

A private request carries the API key and a nonce as the last two query
parameters, and an ``apisign`` header holding the hex HMAC-SHA512 of the
complete URL keyed with the API secret.
"""

import hashlib
import hmac
import time
from typing import NamedTuple, Optional
from urllib.parse import urlencode, urlsplit, urlunsplit

from .constants import PARAM_API_KEY, PARAM_NONCE
from .exceptions import EncodingError, InternalError, NotAuthenticatedError


class SignedRequest(NamedTuple):
    """URL with login parameters appended, plus its signature."""
    url: str
    nonce: int
    signature: str


class NonceSource:
    """
    Issues nonces from the wall clock in whole Unix seconds.

    Values never decrease for a given source, even if the clock steps back.
    Two calls within the same second share a nonce.
    """

    def __init__(self):
        self._last = 0

    def next(self) -> int:
        nonce = max(int(time.time()), self._last)
        self._last = nonce
        return nonce


def append_query(url: str, params) -> str:
    """Append query parameters to a URL, after any it already has."""
    if not params:
        return url

    scheme, netloc, path, query, fragment = urlsplit(url)
    extra = urlencode(params)
    query = f"{query}&{extra}" if query else extra
    return urlunsplit((scheme, netloc, path, query, fragment))


def append_login(url: str, api_key: str, nonce: int) -> str:
    """Append the ``apikey`` and ``nonce`` parameters to a URL."""
    return append_query(url, [(PARAM_API_KEY, api_key), (PARAM_NONCE, str(nonce))])


def hash_uri(url: str, api_secret: str) -> str:
    """
    Compute the HMAC-SHA512 signature of a URL.

    Args:
        url: Fully assembled URL, query string included
        api_secret: API secret used as the HMAC key

    Returns:
        Lowercase hex-encoded signature

    Raises:
        EncodingError: If the URL or secret cannot be encoded as UTF-8
        InternalError: If the HMAC cannot be built from the secret
    """
    try:
        key = api_secret.encode('utf-8')
        message = url.encode('utf-8')
    except UnicodeEncodeError as e:
        raise EncodingError(f"cannot encode signing input: {e}") from e

    try:
        mac = hmac.new(key, message, hashlib.sha512)
    except (TypeError, ValueError) as e:
        raise InternalError("invalid key length") from e

    return mac.hexdigest()


def sign_url(url: str, api_key: Optional[str], api_secret: Optional[str],
             nonce: int) -> SignedRequest:
    """
    Append login parameters to a URL and sign the result.

    Raises:
        NotAuthenticatedError: If either credential is missing
    """
    if api_key is None or api_secret is None:
        raise NotAuthenticatedError("the client was not logged in")

    signed_url = append_login(url, api_key, nonce)
    return SignedRequest(signed_url, nonce, hash_uri(signed_url, api_secret))
