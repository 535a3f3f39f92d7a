"""
Header value helpers.

Used when building WWW-Authenticate challenges so attribute values
cannot break out of their quoted segment.
"""

import re

from httperrors.domain.errors import InvalidArgumentError

_ALLOWED_ATTRIBUTE = re.compile(r"[ -~]*")


def escape_header_attribute(value: str) -> str:
    """Escape a value for use inside a quoted header attribute.

    Args:
        value: The raw attribute value.

    Returns:
        The value with backslashes and double quotes escaped.

    Raises:
        InvalidArgumentError: If the value contains characters outside
            printable ASCII.
    """
    if not _ALLOWED_ATTRIBUTE.fullmatch(value):
        raise InvalidArgumentError(
            f"Bad attribute value ({value})", value
        )
    return value.replace("\\", "\\\\").replace('"', '\\"')


def join_header_values(values: list[str]) -> str:
    """Join several header values into one comma-separated value."""
    return ", ".join(values)
