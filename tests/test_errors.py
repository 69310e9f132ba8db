"""Tests for the error taxonomy and the status classifier."""

import uuid

import pytest

from items_api.app.core.errors import (
    ConflictError,
    ErrorKind,
    GenericError,
    InvalidIdentifierError,
    NotFoundError,
    ServiceError,
    StatusClass,
    ValidationFailedError,
    http_status_of,
    public_message,
    status_of,
)


class TestStatusOf:
    @pytest.mark.parametrize(
        "err, expected",
        [
            (InvalidIdentifierError("x"), StatusClass.BAD_REQUEST),
            (ValidationFailedError(), StatusClass.BAD_REQUEST),
            (NotFoundError(), StatusClass.NOT_FOUND),
            (GenericError(), StatusClass.INTERNAL_ERROR),
            (ConflictError(), StatusClass.INTERNAL_ERROR),
            (RuntimeError("boom"), StatusClass.INTERNAL_ERROR),
            (None, StatusClass.INTERNAL_ERROR),
        ],
    )
    def test_mapping(self, err, expected):
        assert status_of(err) is expected

    def test_unknown_kind_attribute_defaults_to_internal(self):
        class Odd(Exception):
            kind = "something else"

        assert status_of(Odd()) is StatusClass.INTERNAL_ERROR

    @pytest.mark.parametrize(
        "err, code",
        [
            (InvalidIdentifierError("x"), 400),
            (ValidationFailedError(), 400),
            (NotFoundError(), 404),
            (GenericError(), 500),
            (ValueError(), 500),
        ],
    )
    def test_http_status(self, err, code):
        assert http_status_of(err) == code


class TestErrorEquality:
    def test_equal_on_kind_and_fields(self):
        key = uuid.uuid4()

        assert NotFoundError(id=key) == NotFoundError("other text", id=key)
        assert NotFoundError(id=key) != NotFoundError(id=uuid.uuid4())
        assert NotFoundError(id=key) != GenericError(id=key)

    def test_cause_is_kept_but_not_compared(self):
        cause = OSError("disk")
        err = GenericError("write failed", cause=cause)

        assert err.cause is cause
        assert err.__cause__ is cause
        assert err == GenericError()

    def test_conflict_is_generic(self):
        assert isinstance(ConflictError(), GenericError)
        assert ConflictError().kind is ErrorKind.GENERIC

    def test_all_are_service_errors(self):
        for cls in (NotFoundError, GenericError, ConflictError, ValidationFailedError):
            assert issubclass(cls, ServiceError)


class TestPublicMessage:
    def test_internal_errors_are_masked(self):
        assert public_message(GenericError("password=hunter2")) == "internal server error"
        assert public_message(KeyError("secret")) == "internal server error"

    def test_client_errors_keep_message(self):
        assert public_message(NotFoundError()) == "item not found"
        assert "abc" in public_message(InvalidIdentifierError("abc"))
