"""
HTTP-semantic errors.

Build exceptions that carry an HTTP status, a JSON-serializable payload
and protocol headers, or upgrade any existing exception in place.
"""

from httperrors.application.boomify import boomify, is_http_error
from httperrors.application.construction import HttpError, create
from httperrors.application.factories import (
    bad_data,
    bad_gateway,
    bad_implementation,
    bad_request,
    client_timeout,
    conflict,
    entity_too_large,
    expectation_failed,
    failed_dependency,
    forbidden,
    gateway_timeout,
    illegal,
    internal,
    length_required,
    locked,
    method_not_allowed,
    not_acceptable,
    not_found,
    not_implemented,
    payment_required,
    precondition_failed,
    precondition_required,
    proxy_auth_required,
    range_not_satisfiable,
    resource_gone,
    server_unavailable,
    teapot,
    too_many_requests,
    unauthorized,
    unsupported_media_type,
    uri_too_long,
)
from httperrors.application.normalization import INTERNAL_SERVER_ERROR_MESSAGE
from httperrors.domain.entities import UNSET, ErrorType, Level, Output
from httperrors.domain.errors import InvalidArgumentError

__all__ = [
    "HttpError",
    "INTERNAL_SERVER_ERROR_MESSAGE",
    "ErrorType",
    "InvalidArgumentError",
    "Level",
    "Output",
    "UNSET",
    "bad_data",
    "bad_gateway",
    "bad_implementation",
    "bad_request",
    "boomify",
    "client_timeout",
    "conflict",
    "create",
    "entity_too_large",
    "expectation_failed",
    "failed_dependency",
    "forbidden",
    "gateway_timeout",
    "illegal",
    "internal",
    "is_http_error",
    "length_required",
    "locked",
    "method_not_allowed",
    "not_acceptable",
    "not_found",
    "not_implemented",
    "payment_required",
    "precondition_failed",
    "precondition_required",
    "proxy_auth_required",
    "range_not_satisfiable",
    "resource_gone",
    "server_unavailable",
    "teapot",
    "too_many_requests",
    "unauthorized",
    "unsupported_media_type",
    "uri_too_long",
]
