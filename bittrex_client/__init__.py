"""
Bittrex API Client Library

A Python client for the Bittrex v1.1 REST API. Private requests are signed
with HMAC-SHA512 over the request URL, and every response envelope is
unwrapped into its result or a typed exception.

Example usage:
    from bittrex_client import BittrexClient

    client = BittrexClient()
    markets = client.public_call("public/getmarkets")

    client.login("your-api-key", "your-api-secret")
    balances = client.private_call("account/getbalances")
"""

from .client import BittrexClient, PreparedCall
from .envelope import ApiResult, decode_envelope
from .signing import SignedRequest, NonceSource, append_login, hash_uri, sign_url
from .exceptions import (
    BittrexClientError,
    ApiError,
    ResultError,
    HTTPError,
    EncodingError,
    InternalError,
    NotAuthenticatedError,
    ConfigurationError
)
from .constants import (
    API_URL,
    HEADER_API_SIGN,
    DEFAULT_CONFIG
)

__version__ = "1.0.0"
__all__ = [
    "BittrexClient",
    "PreparedCall",
    "ApiResult",
    "decode_envelope",
    "SignedRequest",
    "NonceSource",
    "append_login",
    "hash_uri",
    "sign_url",
    "BittrexClientError",
    "ApiError",
    "ResultError",
    "HTTPError",
    "EncodingError",
    "InternalError",
    "NotAuthenticatedError",
    "ConfigurationError",
    "API_URL",
    "HEADER_API_SIGN",
    "DEFAULT_CONFIG"
]
