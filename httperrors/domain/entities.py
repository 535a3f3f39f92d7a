"""
Domain types shared by the normalization engine and the factories.

No framework imports and no IO operations.
"""

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any


class Level(str, Enum):
    """Severity tag carried by a normalized error."""

    CRITICAL = "CRITICAL"
    WARNING = "WARNING"


class ErrorType(str, Enum):
    """Classification of the failure that produced the error."""

    PROGRAMMING = "PROGRAMMING"
    OPERATIONAL = "OPERATIONAL"


class _Unset:
    """Marker for an option that was not passed at all."""

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()


@dataclass
class Output:
    """Response view of a normalized error.

    Rebuilt from scratch on every normalization. ``payload`` is the
    wire body and keeps the wire key names (``statusCode``, ``error``,
    ``message``, ``code`` and optionally ``attributes``).

    Attributes:
        status_code: The HTTP status code of the response.
        payload: JSON-serializable response body.
        headers: Extra response headers, e.g. WWW-Authenticate or Allow.
    """

    status_code: int
    payload: dict[str, Any] = field(default_factory=dict)
    headers: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Return the output as a plain dict with wire key names."""
        data = asdict(self)
        return {
            "statusCode": data["status_code"],
            "payload": data["payload"],
            "headers": data["headers"],
        }
