"""
Response envelope decoding.

Every Bittrex response is wrapped in ``{"success", "message", "result"}``.
This module turns that wrapper into either the inner result or an exception.
"""

import json
from typing import Any, Callable, Dict, Generic, Optional, TypeVar

from .constants import INVALID_RESULT_MESSAGE
from .exceptions import ApiError, ResultError

R = TypeVar('R')


class ApiResult(Generic[R]):
    """
    Decoded API envelope.

    The optional parser converts the raw ``result`` JSON value into the
    endpoint's own result type; without one the raw value is returned.
    """

    def __init__(self, success: bool, message: str = "", result: Optional[Any] = None,
                 parser: Optional[Callable[[Any], R]] = None):
        self.success = success
        self.message = message
        self.result = result
        self.parser = parser

    @classmethod
    def from_dict(cls, data: Any, parser: Optional[Callable[[Any], R]] = None) -> 'ApiResult[R]':
        """
        Build an envelope from a decoded JSON value.

        Raises:
            ApiError: If the value is not an object with a boolean ``success``
        """
        if not isinstance(data, dict):
            raise ApiError(f"expected JSON object, got {type(data).__name__}")

        success = data.get('success')
        if not isinstance(success, bool):
            raise ApiError("missing or invalid 'success' field in response")

        message = data.get('message')
        if message is not None and not isinstance(message, str):
            raise ApiError("invalid 'message' field in response")

        return cls(
            success=success,
            message="" if message is None else message,
            result=data.get('result'),
            parser=parser
        )

    def into_result(self) -> R:
        """
        Unwrap the envelope.

        Returns:
            The result value, passed through the parser if one was given

        Raises:
            ApiError: If the call succeeded but the result is missing or rejected by the parser
            ResultError: If the server reported failure
        """
        if not self.success:
            raise ResultError(self.message)

        if self.result is None:
            raise ApiError(INVALID_RESULT_MESSAGE)

        if self.parser is None:
            return self.result

        try:
            return self.parser(self.result)
        except Exception as e:
            raise ApiError(f"invalid result: {e}") from e

    def __repr__(self):
        return (f"ApiResult(success={self.success!r}, message={self.message!r}, "
                f"result={self.result!r})")


def decode_envelope(body: str, parser: Optional[Callable[[Any], R]] = None) -> ApiResult[R]:
    """
    Decode a raw JSON response body into an envelope.

    Raises:
        ApiError: If the body is not valid JSON or not an envelope
    """
    try:
        data: Dict[str, Any] = json.loads(body)
    except ValueError as e:
        raise ApiError(f"invalid JSON in response: {e}") from e

    return ApiResult.from_dict(data, parser=parser)
