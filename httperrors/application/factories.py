"""
Status-specific error factories.

Each factory builds an HTTP error for one status code and records
itself in ``typeof``. Every factory also accepts an existing exception
as ``message``; it is cloned and upgraded instead.

401 and 405 add protocol headers. The 5xx factories upgrade a plain
exception passed as ``data`` in place, using ``message`` as prefix.
"""

from typing import Any, Callable, Mapping, Optional, Sequence, Union

from httperrors.application.boomify import boomify, is_http_error
from httperrors.application.construction import create
from httperrors.domain.entities import UNSET
from httperrors.shared.headers import escape_header_attribute, join_header_values

Attributes = Union[str, Mapping[str, Any]]


# 4xx Client Errors


def bad_request(message: Any = None, data: Any = UNSET) -> BaseException:
    """400 Bad Request."""
    return create(message, status_code=400, data=data, ctor=bad_request)


def unauthorized(
    message: Any = None,
    scheme: Union[str, Sequence[str], None] = None,
    attributes: Optional[Attributes] = None,
) -> BaseException:
    """401 Unauthorized, optionally with a WWW-Authenticate header.

    Two call shapes are supported:

    - ``unauthorized(message, scheme, attributes)`` with ``scheme`` a
      string builds a single challenge. ``attributes`` is either a raw
      string appended as-is (e.g. a Negotiate token) or a mapping
      rendered as ``key="value"`` pairs. A message is added as the
      ``error`` attribute; without one ``is_missing`` is set.
    - ``unauthorized(message, challenges)`` with a list of
      pre-formatted challenges joins them with ", ".

    Args:
        message: Error message, also used as the challenge ``error``.
        scheme: Authentication scheme name, or a list of challenges.
        attributes: Challenge attributes for the string form.

    Returns:
        The 401 error. No header is set when ``scheme`` is empty.
    """
    err = create(message, status_code=401, ctor=unauthorized)

    if not scheme:
        return err

    if isinstance(scheme, str):
        www_authenticate = _build_challenge(err, message, scheme, attributes)
    else:
        www_authenticate = join_header_values([str(challenge) for challenge in scheme])

    err.output.headers["WWW-Authenticate"] = www_authenticate
    return err


def _build_challenge(
    err: BaseException,
    message: Any,
    scheme: str,
    attributes: Optional[Attributes],
) -> str:
    payload = err.output.payload
    challenge = scheme

    if attributes or message:
        payload["attributes"] = {}

    if attributes:
        if isinstance(attributes, str):
            challenge = f"{challenge} {escape_header_attribute(attributes)}"
            payload["attributes"] = attributes
        else:
            pairs = []
            for name, value in attributes.items():
                if value is None:
                    value = ""
                pairs.append(f'{name}="{escape_header_attribute(str(value))}"')
                payload["attributes"][name] = value
            challenge = f"{challenge} {', '.join(pairs)}"

    if message:
        reason = str(message)
        if attributes:
            challenge = f"{challenge},"
        challenge = f'{challenge} error="{escape_header_attribute(reason)}"'
        if isinstance(payload["attributes"], dict):
            payload["attributes"]["error"] = reason
    else:
        err.is_missing = True

    return challenge


def payment_required(message: Any = None, data: Any = UNSET) -> BaseException:
    """402 Payment Required."""
    return create(message, status_code=402, data=data, ctor=payment_required)


def forbidden(message: Any = None, data: Any = UNSET) -> BaseException:
    """403 Forbidden."""
    return create(message, status_code=403, data=data, ctor=forbidden)


def not_found(message: Any = None, data: Any = UNSET) -> BaseException:
    """404 Not Found."""
    return create(message, status_code=404, data=data, ctor=not_found)


def method_not_allowed(
    message: Any = None,
    data: Any = UNSET,
    allow: Union[str, Sequence[str], None] = None,
) -> BaseException:
    """405 Method Not Allowed, with an Allow header when ``allow`` is given.

    Args:
        message: Error message.
        data: Context attached as ``data``.
        allow: A method name or a list of method names.
    """
    err = create(message, status_code=405, data=data, ctor=method_not_allowed)

    if isinstance(allow, str):
        allow = [allow]

    if isinstance(allow, (list, tuple)):
        err.output.headers["Allow"] = join_header_values([str(method) for method in allow])

    return err


def not_acceptable(message: Any = None, data: Any = UNSET) -> BaseException:
    """406 Not Acceptable."""
    return create(message, status_code=406, data=data, ctor=not_acceptable)


def proxy_auth_required(message: Any = None, data: Any = UNSET) -> BaseException:
    """407 Proxy Authentication Required."""
    return create(message, status_code=407, data=data, ctor=proxy_auth_required)


def client_timeout(message: Any = None, data: Any = UNSET) -> BaseException:
    """408 Request Time-out."""
    return create(message, status_code=408, data=data, ctor=client_timeout)


def conflict(message: Any = None, data: Any = UNSET) -> BaseException:
    """409 Conflict."""
    return create(message, status_code=409, data=data, ctor=conflict)


def resource_gone(message: Any = None, data: Any = UNSET) -> BaseException:
    """410 Gone."""
    return create(message, status_code=410, data=data, ctor=resource_gone)


def length_required(message: Any = None, data: Any = UNSET) -> BaseException:
    """411 Length Required."""
    return create(message, status_code=411, data=data, ctor=length_required)


def precondition_failed(message: Any = None, data: Any = UNSET) -> BaseException:
    """412 Precondition Failed."""
    return create(message, status_code=412, data=data, ctor=precondition_failed)


def entity_too_large(message: Any = None, data: Any = UNSET) -> BaseException:
    """413 Request Entity Too Large."""
    return create(message, status_code=413, data=data, ctor=entity_too_large)


def uri_too_long(message: Any = None, data: Any = UNSET) -> BaseException:
    """414 Request-URI Too Large."""
    return create(message, status_code=414, data=data, ctor=uri_too_long)


def unsupported_media_type(message: Any = None, data: Any = UNSET) -> BaseException:
    """415 Unsupported Media Type."""
    return create(message, status_code=415, data=data, ctor=unsupported_media_type)


def range_not_satisfiable(message: Any = None, data: Any = UNSET) -> BaseException:
    """416 Requested Range Not Satisfiable."""
    return create(message, status_code=416, data=data, ctor=range_not_satisfiable)


def expectation_failed(message: Any = None, data: Any = UNSET) -> BaseException:
    """417 Expectation Failed."""
    return create(message, status_code=417, data=data, ctor=expectation_failed)


def teapot(message: Any = None, data: Any = UNSET) -> BaseException:
    """418 I'm a teapot."""
    return create(message, status_code=418, data=data, ctor=teapot)


def bad_data(message: Any = None, data: Any = UNSET) -> BaseException:
    """422 Unprocessable Entity."""
    return create(message, status_code=422, data=data, ctor=bad_data)


def locked(message: Any = None, data: Any = UNSET) -> BaseException:
    """423 Locked."""
    return create(message, status_code=423, data=data, ctor=locked)


def failed_dependency(message: Any = None, data: Any = UNSET) -> BaseException:
    """424 Failed Dependency."""
    return create(message, status_code=424, data=data, ctor=failed_dependency)


def precondition_required(message: Any = None, data: Any = UNSET) -> BaseException:
    """428 Precondition Required."""
    return create(message, status_code=428, data=data, ctor=precondition_required)


def too_many_requests(message: Any = None, data: Any = UNSET) -> BaseException:
    """429 Too Many Requests."""
    return create(message, status_code=429, data=data, ctor=too_many_requests)


def illegal(message: Any = None, data: Any = UNSET) -> BaseException:
    """451 Unavailable For Legal Reasons."""
    return create(message, status_code=451, data=data, ctor=illegal)


# 5xx Server Errors


def _server_error(
    message: Any,
    data: Any,
    status_code: int,
    ctor: Callable[..., BaseException],
) -> BaseException:
    # A plain exception given as data is the failure being reported.
    if isinstance(data, BaseException) and not is_http_error(data):
        return boomify(data, status_code=status_code, message=message)

    return create(message, status_code=status_code, data=data, ctor=ctor)


def internal(message: Any = None, data: Any = UNSET, status_code: int = 500) -> BaseException:
    """500 Internal Server Error (or another 5xx via ``status_code``)."""
    return _server_error(message, data, status_code, internal)


def not_implemented(message: Any = None, data: Any = UNSET) -> BaseException:
    """501 Not Implemented."""
    return _server_error(message, data, 501, not_implemented)


def bad_gateway(message: Any = None, data: Any = UNSET) -> BaseException:
    """502 Bad Gateway."""
    return _server_error(message, data, 502, bad_gateway)


def server_unavailable(message: Any = None, data: Any = UNSET) -> BaseException:
    """503 Service Unavailable."""
    return _server_error(message, data, 503, server_unavailable)


def gateway_timeout(message: Any = None, data: Any = UNSET) -> BaseException:
    """504 Gateway Time-out."""
    return _server_error(message, data, 504, gateway_timeout)


def bad_implementation(message: Any = None, data: Any = UNSET) -> BaseException:
    """500 caused by a bug in the calling code.

    Same as ``internal`` but flags the error with ``is_developer_error``.
    The payload message is redacted like any other 500.
    """
    err = _server_error(message, data, 500, bad_implementation)
    err.is_developer_error = True
    return err
