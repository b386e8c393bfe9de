"""
Constants for the Bittrex client library.
Values follow the Bittrex v1.1 REST API.
"""

# API endpoint
API_URL = "https://bittrex.com/api/v1.1/"

# Authentication (header carries the hex HMAC-SHA512 of the signed URL)
HEADER_API_SIGN = "apisign"
PARAM_API_KEY = "apikey"
PARAM_NONCE = "nonce"

# Default configuration values
DEFAULT_CONFIG = {
    'base_url': API_URL,
    'timeout': 30,              # HTTP timeout in seconds
}

# Diagnostic used when a successful response carries no result
INVALID_RESULT_MESSAGE = "invalid result in success response"
