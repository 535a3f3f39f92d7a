"""
Construction of HTTP errors.

``HttpError`` is the exception type produced for fresh errors.
``create`` is the general entry point: it also accepts an existing
exception, which is cloned and upgraded so the caller's original stays
untouched.
"""

import copy
import os
import traceback
from typing import Any, Callable, Mapping, Optional

from httperrors.application.boomify import boomify, decorate_error
from httperrors.application.normalization import initialize, reformat
from httperrors.domain.entities import UNSET, ErrorType, Level, Output

DEFAULT_STATUS = 500

_PACKAGE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__))) + os.sep


def clone_error(err: BaseException) -> BaseException:
    """Return a deep copy of an exception that keeps its identity.

    The clone is built without calling ``__init__``, so exceptions whose
    constructor signature differs from their ``args`` clone fine. Its
    attributes are deep-copied; traceback, cause and context are shared
    with the original.
    """
    cls = type(err)
    clone = cls.__new__(cls)
    memo = {id(err): clone}
    clone.args = copy.deepcopy(err.args, memo)
    clone.__dict__.update(copy.deepcopy(err.__dict__, memo))
    clone.__traceback__ = err.__traceback__
    clone.__cause__ = err.__cause__
    clone.__context__ = err.__context__
    clone.__suppress_context__ = err.__suppress_context__
    return clone


def capture_stack() -> traceback.StackSummary:
    """Return the current stack without the frames of this package.

    The innermost frames belong to the library call chain (factory,
    ``create``, ``HttpError.__init__``); trimming them makes the stack
    look like it starts at the caller.
    """
    frames = traceback.extract_stack()
    while frames and frames[-1].filename.startswith(_PACKAGE_DIR):
        frames.pop()
    return traceback.StackSummary.from_list(frames)


class HttpError(Exception):
    """An exception carrying an HTTP status, payload and headers.

    Attributes:
        message: Human-readable message ("" when none was given before
            normalization filled in the reason phrase).
        data: Caller-supplied context, None by default.
        output: The response view (status code, payload, headers).
        code: Machine-readable code, mirrored in the payload.
        is_http_error: Always True once constructed.
        is_server: True for status codes of 500 and above.
        level: Severity tag.
        type: Failure classification.
        typeof: The factory (or ``HttpError``) that produced the error.
        stack: Frames of the caller that created the error.
    """

    output: Output

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        status_code: Any = DEFAULT_STATUS,
        data: Any = None,
        ctor: Optional[Callable[..., Any]] = None,
        decorate: Optional[Mapping[str, Any]] = None,
        level: Optional[Level] = None,
        error_type: Optional[ErrorType] = None,
    ) -> None:
        if message:
            super().__init__(message)
        else:
            super().__init__()
        self.message = str(message) if message else ""
        self.stack = capture_stack()
        self.data = data
        initialize(self, status_code, level=level, error_type=error_type)
        self.typeof = ctor or HttpError
        decorate_error(self, decorate)

    def reformat(self) -> None:
        """Recompute the payload from ``output`` and ``message``."""
        reformat(self)


def create(
    source: Any = None,
    *,
    status_code: Any = None,
    message: Optional[str] = None,
    data: Any = UNSET,
    ctor: Optional[Callable[..., Any]] = None,
    decorate: Optional[Mapping[str, Any]] = None,
    override: bool = True,
    level: Optional[Level] = None,
    error_type: Optional[ErrorType] = None,
) -> BaseException:
    """Build an HTTP error from a message or from an existing exception.

    Args:
        source: A message string, or an exception to clone and upgrade.
        status_code: HTTP status code. Defaults to 500 for new errors.
        message: Prefix for the message of a cloned exception
            ("prefix: original"). Ignored for new errors.
        data: Context attached as ``data``. For a cloned exception,
            leaving it out keeps the clone's own ``data``.
        ctor: Identity recorded in ``typeof`` for new errors.
        decorate: Extra attributes copied onto the result.
        override: When False, a cloned exception that is already an
            HTTP error keeps its status and message.
        level: Severity tag.
        error_type: Failure classification.

    Returns:
        A new HttpError, or the upgraded clone of ``source``.

    Raises:
        InvalidArgumentError: If the status code is invalid.
    """
    if isinstance(source, BaseException):
        return boomify(
            clone_error(source),
            status_code=status_code,
            message=message,
            data=data,
            decorate=decorate,
            override=override,
            level=level,
            error_type=error_type,
        )

    return HttpError(
        source,
        status_code=DEFAULT_STATUS if status_code is None else status_code,
        data=None if data is UNSET else data,
        ctor=ctor,
        decorate=decorate,
        level=level,
        error_type=error_type,
    )
