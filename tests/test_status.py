"""
Tests for the HTTP status table.

Pure data lookups; no IO required.
"""

import pytest

from httperrors.domain.status import (
    MACHINE_CODES,
    REASON_PHRASES,
    machine_code,
    reason_phrase,
    to_machine_code,
)


class TestReasonPhrase:
    """Tests for reason phrase lookups."""

    def test_known_status(self) -> None:
        """Known status codes map to their canonical phrase."""
        assert reason_phrase(404) == "Not Found"
        assert reason_phrase(418) == "I'm a teapot"

    def test_unknown_status(self) -> None:
        """Codes outside the table fall back to Unknown."""
        assert reason_phrase(999) == "Unknown"

    def test_table_is_read_only(self) -> None:
        """The table cannot be modified after import."""
        with pytest.raises(TypeError):
            REASON_PHRASES[499] = "Client Closed Request"  # type: ignore[index]


class TestMachineCode:
    """Tests for the derived machine codes."""

    @pytest.mark.parametrize(
        ("phrase", "expected"),
        [
            ("Bad Request", "BAD_REQUEST"),
            ("OK", "OK"),
            ("I'm a teapot", "IM_A_TEAPOT"),
            ("Request Time-out", "REQUEST_TIME_OUT"),
            ("Request-URI Too Large", "REQUEST_URI_TOO_LARGE"),
            ("Non-Authoritative Information", "NON_AUTHORITATIVE_INFORMATION"),
        ],
    )
    def test_derivation(self, phrase: str, expected: str) -> None:
        """Reason phrases are upper-snake-cased."""
        assert to_machine_code(phrase) == expected

    def test_every_status_has_a_code(self) -> None:
        """Each table entry gets a code derived from its phrase."""
        assert set(MACHINE_CODES) == set(REASON_PHRASES)
        assert MACHINE_CODES[422] == "UNPROCESSABLE_ENTITY"

    def test_unknown_status(self) -> None:
        """Codes outside the table fall back to UNKNOWN."""
        assert machine_code(599) == "UNKNOWN"
