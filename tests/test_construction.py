"""
Tests for HttpError and create().

Covers fresh construction, cloning of existing exceptions,
decoration and the caller-facing stack.
"""

import os
import re

import pytest

import httperrors
from httperrors import HttpError, InvalidArgumentError, bad_request, create

PACKAGE_DIR = os.path.dirname(os.path.abspath(httperrors.__file__)) + os.sep


class InsufficientStockError(Exception):
    """Exception whose constructor arguments differ from its args."""

    def __init__(self, required: int, available: int) -> None:
        super().__init__(f"Insufficient stock: required {required}, available {available}")
        self.required = required
        self.available = available


class TestCreate:
    """Tests for building errors from a message."""

    def test_constructs_error(self) -> None:
        """A message and status code produce a full payload."""
        err = create("oops", status_code=400)
        assert isinstance(err, HttpError)
        assert err.output.payload["message"] == "oops"
        assert err.output.payload["code"] == "BAD_REQUEST"
        assert err.output.status_code == 400

    def test_defaults_to_500(self) -> None:
        """Without a status code the error is a 500."""
        err = create("oops")
        assert err.output.status_code == 500
        assert err.is_server is True
        assert err.data is None

    def test_empty_message_uses_reason_phrase(self) -> None:
        """Falsy messages are treated as missing."""
        assert create("", status_code=404).message == "Not Found"
        assert create(None, status_code=404).message == "Not Found"

    def test_sets_data(self) -> None:
        """Data is attached as-is."""
        assert create("oops", status_code=400, data={"id": 7}).data == {"id": 7}

    def test_decorates(self) -> None:
        """Decorations are copied onto the new error."""
        err = create("oops", status_code=400, decorate={"x": 1})
        assert err.output.payload["message"] == "oops"
        assert err.x == 1

    def test_invalid_status(self) -> None:
        """A non-numeric status code is rejected."""
        with pytest.raises(
            InvalidArgumentError,
            match=re.escape("First argument must be a number (400+): x"),
        ):
            create("message", status_code="x")

    def test_non_finite_status(self) -> None:
        """An infinite status code is rejected and rendered as null."""
        with pytest.raises(
            InvalidArgumentError,
            match=re.escape("First argument must be a number (400+): null"),
        ):
            create("", status_code=float("inf"))

    @pytest.mark.parametrize(
        ("value", "expected"), [("404", 404), ("404.1", 404), (400, 400), (400.123, 400)]
    )
    def test_casts_status(self, value: object, expected: int) -> None:
        """Numeric strings and floats are truncated."""
        assert create("", status_code=value).output.status_code == expected

    def test_unknown_status(self) -> None:
        """Statuses outside the table are Unknown."""
        assert create("", status_code=999).output.payload["error"] == "Unknown"

    def test_can_be_raised(self) -> None:
        """HttpError is a regular exception."""
        with pytest.raises(HttpError) as excinfo:
            raise create("nope", status_code=403)
        assert str(excinfo.value) == "nope"

    def test_typeof_defaults_to_class(self) -> None:
        """Errors built directly record HttpError as their origin."""
        assert create("oops").typeof is HttpError

    def test_reformat_method(self) -> None:
        """reformat() recomputes the payload from output and message."""
        err = create("oops", status_code=400)
        err.output.payload.clear()
        err.reformat()
        assert err.output.payload == {
            "statusCode": 400,
            "error": "Bad Request",
            "code": "BAD_REQUEST",
            "message": "oops",
        }


class TestCreateFromException:
    """Tests for building errors from an existing exception."""

    def test_clones_error(self) -> None:
        """The original exception is left untouched."""
        oops = ValueError("oops")
        err = create(oops, status_code=400)

        assert err is not oops
        assert isinstance(err, ValueError)
        assert err.output.payload["message"] == "oops"
        assert err.output.status_code == 400
        assert not hasattr(oops, "output")

    def test_keeps_clone_data(self) -> None:
        """Without a data option the cloned data is kept."""
        oops = ValueError("oops")
        oops.data = {"field": "name"}
        err = create(oops, status_code=422)
        assert err.data == {"field": "name"}
        assert err.data is not oops.data

    def test_clones_http_error(self) -> None:
        """Cloning a normalized error keeps its status unless overridden."""
        original = bad_request("bad input")
        clone = create(original)
        assert clone is not original
        assert clone.output is not original.output
        assert clone.output.status_code == 400

    def test_clone_with_new_status(self) -> None:
        """A status option re-normalizes the clone only."""
        original = bad_request("bad input")
        clone = create(original, status_code=409)
        assert clone.output.status_code == 409
        assert original.output.status_code == 400

    def test_clones_exception_with_custom_signature(self) -> None:
        """Exceptions whose __init__ does not take their args still clone."""
        oops = InsufficientStockError(10, 5)
        err = bad_request(oops)

        assert err is not oops
        assert isinstance(err, InsufficientStockError)
        assert (err.required, err.available) == (10, 5)
        assert err.output.payload["message"] == "Insufficient stock: required 10, available 5"
        assert not hasattr(oops, "output")

    def test_clone_keeps_traceback_and_cause(self) -> None:
        """The clone shares the traceback and cause of the original."""
        try:
            try:
                raise KeyError("widget")
            except KeyError as cause:
                raise InsufficientStockError(3, 0) from cause
        except InsufficientStockError as caught:
            oops = caught

        err = create(oops, status_code=409)
        assert err.__traceback__ is oops.__traceback__
        assert err.__cause__ is oops.__cause__
        assert err.__suppress_context__ is True

    def test_clone_reformat_targets_clone(self) -> None:
        """A bound reformat() follows the clone, not the original."""
        original = create(ValueError("oops"), status_code=400)
        clone = create(original)
        assert clone.reformat.__self__ is clone

    def test_message_prefix(self) -> None:
        """A message option prefixes the cloned exception's message."""
        oops = ValueError("orig")
        err = create(oops, status_code=400, message="New")
        assert err.message == "New: orig"
        assert str(err) == "New: orig"
        assert err.output.payload["message"] == "New: orig"
        assert str(oops) == "orig"

    def test_override_false_keeps_http_error(self) -> None:
        """override=False leaves a cloned HTTP error's status and message."""
        original = bad_request("bad input")
        clone = create(original, status_code=409, message="New", override=False)
        assert clone.output.status_code == 400
        assert clone.message == "bad input"


class TestStack:
    """Tests for the caller-facing stack."""

    def test_stack_starts_at_caller(self) -> None:
        """Library frames are trimmed off the recorded stack."""
        err = bad_request("oops")
        assert err.stack[-1].filename.endswith("test_construction.py")
        assert err.stack[-1].name == "test_stack_starts_at_caller"
        assert not any(frame.filename.startswith(PACKAGE_DIR) for frame in err.stack)
