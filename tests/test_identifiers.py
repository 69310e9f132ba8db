"""Tests for the identifier codec."""

import uuid

import pytest

from items_api.app.core.errors import ErrorKind, InvalidIdentifierError
from items_api.app.core.identifiers import CANONICAL_LENGTH, format_id, new_id, parse_id


class TestParseID:
    @pytest.mark.parametrize(
        "raw",
        [
            "7c9e6679-7425-40de-944b-e07fc1f90ae7",
            "00000000-0000-0000-0000-000000000000",
            "ffffffff-ffff-ffff-ffff-ffffffffffff",
        ],
    )
    def test_canonical_strings_round_trip(self, raw):
        key = parse_id(raw)

        assert isinstance(key, uuid.UUID)
        assert format_id(key) == raw

    def test_generated_ids_round_trip(self):
        for _ in range(50):
            key = new_id()
            assert parse_id(format_id(key)) == key

    @pytest.mark.parametrize(
        "raw",
        ["", "abc", "7c9e6679742540de944be07fc1f90ae7", "7c9e6679-7425-40de-944b-e07fc1f90ae7-00"],
    )
    def test_wrong_length(self, raw):
        with pytest.raises(InvalidIdentifierError) as exc_info:
            parse_id(raw)

        assert exc_info.value.reason == "incorrect length"
        assert exc_info.value.raw == raw

    @pytest.mark.parametrize(
        "raw",
        [
            "7C9E6679-7425-40DE-944B-E07FC1F90AE7",
            "7c9e6679-7425-40de-944b-e07fc1f90aez",
            "7c9e6679_7425_40de_944b_e07fc1f90ae7",
            "{c9e6679-7425-40de-944b-e07fc1f90ae}",
        ],
    )
    def test_wrong_format(self, raw):
        assert len(raw) == CANONICAL_LENGTH

        with pytest.raises(InvalidIdentifierError) as exc_info:
            parse_id(raw)

        assert exc_info.value.reason == "invalid format"

    @pytest.mark.parametrize("raw", [None, 123, b"7c9e6679-7425-40de-944b-e07fc1f90ae7"])
    def test_non_string(self, raw):
        with pytest.raises(InvalidIdentifierError):
            parse_id(raw)

    def test_error_kind_and_equality_ignore_reason(self):
        short = InvalidIdentifierError("abc", "incorrect length")
        other = InvalidIdentifierError("abc", "invalid format")

        assert short.kind is ErrorKind.INVALID_IDENTIFIER
        assert short == other
        assert short != InvalidIdentifierError("abd")
