"""
HTTP status table.

Maps numeric status codes to their canonical reason phrase and to a
machine-readable upper-snake-case error code derived from that phrase.
Both mappings are computed once at import time and are read-only.
"""

import re
from types import MappingProxyType
from typing import Mapping

UNKNOWN_REASON = "Unknown"
UNKNOWN_CODE = "UNKNOWN"

_WORD_PATTERN = re.compile(r"[A-Za-z0-9]+")

REASON_PHRASES: Mapping[int, str] = MappingProxyType(
    {
        100: "Continue",
        101: "Switching Protocols",
        102: "Processing",
        200: "OK",
        201: "Created",
        202: "Accepted",
        203: "Non-Authoritative Information",
        204: "No Content",
        205: "Reset Content",
        206: "Partial Content",
        207: "Multi-Status",
        300: "Multiple Choices",
        301: "Moved Permanently",
        302: "Moved Temporarily",
        303: "See Other",
        304: "Not Modified",
        305: "Use Proxy",
        307: "Temporary Redirect",
        400: "Bad Request",
        401: "Unauthorized",
        402: "Payment Required",
        403: "Forbidden",
        404: "Not Found",
        405: "Method Not Allowed",
        406: "Not Acceptable",
        407: "Proxy Authentication Required",
        408: "Request Time-out",
        409: "Conflict",
        410: "Gone",
        411: "Length Required",
        412: "Precondition Failed",
        413: "Request Entity Too Large",
        414: "Request-URI Too Large",
        415: "Unsupported Media Type",
        416: "Requested Range Not Satisfiable",
        417: "Expectation Failed",
        418: "I'm a teapot",
        422: "Unprocessable Entity",
        423: "Locked",
        424: "Failed Dependency",
        425: "Unordered Collection",
        426: "Upgrade Required",
        428: "Precondition Required",
        429: "Too Many Requests",
        431: "Request Header Fields Too Large",
        451: "Unavailable For Legal Reasons",
        500: "Internal Server Error",
        501: "Not Implemented",
        502: "Bad Gateway",
        503: "Service Unavailable",
        504: "Gateway Time-out",
        505: "HTTP Version Not Supported",
        506: "Variant Also Negotiates",
        507: "Insufficient Storage",
        509: "Bandwidth Limit Exceeded",
        510: "Not Extended",
        511: "Network Authentication Required",
    }
)


def to_machine_code(phrase: str) -> str:
    """Derive the upper-snake-case machine code for a reason phrase.

    Apostrophes are dropped before splitting so that contractions stay
    a single word ("I'm a teapot" -> "IM_A_TEAPOT").

    Args:
        phrase: A reason phrase such as "Bad Request".

    Returns:
        The machine code, e.g. "BAD_REQUEST".
    """
    words = _WORD_PATTERN.findall(phrase.replace("'", ""))
    return "_".join(word.upper() for word in words)


MACHINE_CODES: Mapping[int, str] = MappingProxyType(
    {status: to_machine_code(phrase) for status, phrase in REASON_PHRASES.items()}
)


def reason_phrase(status_code: int) -> str:
    """Return the reason phrase for a status code, or "Unknown"."""
    return REASON_PHRASES.get(status_code, UNKNOWN_REASON)


def machine_code(status_code: int) -> str:
    """Return the machine code for a status code, or "UNKNOWN"."""
    return MACHINE_CODES.get(status_code, UNKNOWN_CODE)
