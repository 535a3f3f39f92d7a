"""
Pydantic schema of the error response body.

Mirrors ``output.payload`` and defines the wire contract.
No business logic belongs here.
"""

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class ErrorPayload(BaseModel):
    """Response body of an HTTP error.

    Attributes:
        status_code: HTTP status code, serialized as ``statusCode``.
        error: Reason phrase of the status code.
        message: Client-facing message. Redacted for 500.
        code: Machine-readable error code.
        attributes: WWW-Authenticate attributes of a 401, if any.

    Extra keys a caller adds to the payload are passed through.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    status_code: int = Field(..., alias="statusCode", ge=400)
    error: str
    message: Optional[str] = None
    code: str
    attributes: Optional[Union[str, dict[str, Any]]] = None
