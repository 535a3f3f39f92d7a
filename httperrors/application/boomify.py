"""
Upgrade contract: turn an existing exception into an HTTP error.

Input: any exception plus optional status code, message and data.
Output: the same exception object, normalized.
Side effects: mutates its argument; never clones.
Failure cases: InvalidArgumentError for values that are not exceptions
or for invalid status codes.
"""

from typing import Any, Mapping, Optional

from httperrors.application.normalization import initialize
from httperrors.domain.entities import UNSET, ErrorType, Level
from httperrors.domain.errors import InvalidArgumentError


def is_http_error(value: Any) -> bool:
    """Return True if ``value`` is an exception normalized by this library."""
    return isinstance(value, BaseException) and getattr(value, "is_http_error", False) is True


def decorate_error(err: BaseException, decorate: Optional[Mapping[str, Any]]) -> None:
    """Copy every key of ``decorate`` onto ``err`` as an attribute."""
    if not decorate:
        return
    for name, value in decorate.items():
        setattr(err, name, value)


def boomify(
    err: BaseException,
    *,
    status_code: Any = None,
    message: Optional[str] = None,
    data: Any = UNSET,
    decorate: Optional[Mapping[str, Any]] = None,
    override: bool = True,
    level: Optional[Level] = None,
    error_type: Optional[ErrorType] = None,
) -> BaseException:
    """Normalize ``err`` in place and return it.

    An exception that is already an HTTP error is left untouched unless
    a new status code or message is given and ``override`` is true.

    Args:
        err: The exception to upgrade.
        status_code: Target status code. Defaults to 500 for plain
            exceptions and to the current status for HTTP errors.
        message: Message prefix, joined to the existing message by ": ".
        data: Replaces ``err.data`` when given, None included.
        decorate: Extra attributes copied onto ``err``.
        override: When False, an existing HTTP error keeps its status
            and message.
        level: Severity tag passed to the normalization engine.
        error_type: Failure classification passed to the normalization engine.

    Returns:
        ``err`` itself.

    Raises:
        InvalidArgumentError: If ``err`` is not an exception.
    """
    if not isinstance(err, BaseException):
        raise InvalidArgumentError(f"Cannot wrap non-Error object: {err!r}", err)

    if data is not UNSET:
        err.data = data

    decorate_error(err, decorate)

    if not getattr(err, "is_http_error", False):
        return initialize(
            err,
            status_code or 500,
            message,
            level=level,
            error_type=error_type,
        )

    if override is False or (not status_code and not message):
        return err

    return initialize(
        err,
        status_code or err.output.status_code,
        message,
        level=level,
        error_type=error_type,
    )
