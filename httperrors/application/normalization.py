"""
Normalization engine.

Turns any exception into an HTTP error in place: validates the status
code, sets the classification flags, rebuilds ``output`` and composes
the final message.

Input: an exception, a status code and an optional message prefix.
Output: the same exception object, mutated.
Side effects: mutates its argument. Never logs.
Failure cases: InvalidArgumentError for status codes that are not
numbers or are below 400.
"""

import math
import re
import types
from typing import Any, Optional

from httperrors.core.config import settings
from httperrors.domain.entities import ErrorType, Level, Output
from httperrors.domain.errors import InvalidArgumentError
from httperrors.domain.status import machine_code, reason_phrase

INTERNAL_SERVER_ERROR_MESSAGE = "An internal server error occurred"
MIN_ERROR_STATUS = 400
SERVER_ERROR_STATUS = 500

_LEADING_INTEGER = re.compile(r"\s*([+-]?\d+)")


def get_message(err: BaseException) -> str:
    """Return the message of an exception, or "" when it has none.

    Prefers a string ``message`` attribute and falls back to ``str(err)``.
    """
    message = getattr(err, "message", None)
    if isinstance(message, str):
        return message
    if err.args:
        return str(err)
    return ""


def set_message(err: BaseException, message: str) -> None:
    """Replace the message of an exception, keeping ``str(err)`` in sync."""
    err.message = message
    err.args = (message,)


def coerce_status_code(value: Any) -> Optional[int]:
    """Coerce a status code to an integer.

    Floats are truncated and strings are parsed from their leading
    digits ("404.1" -> 404). Returns None when no integer can be read.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, str):
        match = _LEADING_INTEGER.match(value)
        return int(match.group(1)) if match else None
    return None


def _render(value: Any) -> str:
    if isinstance(value, str):
        return value
    if value is None or (isinstance(value, float) and not math.isfinite(value)):
        return "null"
    return str(value)


def initialize(
    err: BaseException,
    status_code: Any,
    message: Optional[str] = None,
    level: Optional[Level] = None,
    error_type: Optional[ErrorType] = None,
) -> BaseException:
    """Normalize ``err`` into an HTTP error and return the same object.

    ``output`` is always rebuilt. When ``message`` is given it becomes a
    prefix of the existing message ("prefix: existing"); when neither
    is present the reason phrase of the status code is used.

    Args:
        err: The exception to normalize. Mutated in place.
        status_code: HTTP status code, 400 or above. Numeric strings
            and floats are accepted and truncated.
        message: Optional message prefix.
        level: Severity tag. Defaults to the configured level.
        error_type: Failure classification. Defaults to the configured type.

    Returns:
        ``err`` itself.

    Raises:
        InvalidArgumentError: If the status code is not a number or is
            below 400.
    """
    number_code = coerce_status_code(status_code)
    if number_code is None or number_code < MIN_ERROR_STATUS:
        raise InvalidArgumentError(
            f"First argument must be a number (400+): {_render(status_code)}",
            status_code,
        )

    err.is_http_error = True
    err.is_server = number_code >= SERVER_ERROR_STATUS
    err.level = Level(level) if level else settings.default_level
    err.type = ErrorType(error_type) if error_type else settings.default_type

    if not hasattr(err, "data"):
        err.data = None

    if not callable(getattr(err, "reformat", None)):
        err.reformat = types.MethodType(reformat, err)

    err.output = Output(status_code=number_code)

    existing = get_message(err)
    if not message and not existing:
        reformat(err)
        message = err.output.payload["error"]

    if message:
        set_message(err, f"{message}: {existing}" if existing else str(message))
    else:
        err.message = existing

    reformat(err)
    return err


def reformat(err: BaseException) -> None:
    """Recompute the payload of a normalized error from its output.

    ``payload["code"]`` is written only when the payload has none yet.
    Server errors with status 500 never expose their real message.
    """
    output: Output = err.output
    payload = output.payload

    payload["statusCode"] = output.status_code
    payload["error"] = reason_phrase(output.status_code)

    if not payload.get("code"):
        payload["code"] = machine_code(output.status_code)
        err.code = payload["code"]

    if output.status_code == SERVER_ERROR_STATUS:
        payload["message"] = INTERNAL_SERVER_ERROR_MESSAGE
    else:
        message = get_message(err)
        if message:
            payload["message"] = message
