"""Tests for the roster error hierarchy."""

from __future__ import annotations

import pytest

from roster.core.errors import (
    ConflictError,
    DatabaseError,
    EntityNotFoundError,
    ErrorCategory,
    RosterError,
    ValidationError,
)


class TestRosterError:
    def test_defaults(self):
        err = RosterError("boom")
        assert err.message == "boom"
        assert err.category == ErrorCategory.INTERNAL
        assert err.code == "INTERNAL"
        assert err.context == {}
        assert str(err) == "boom"

    def test_with_context_is_fluent(self):
        err = RosterError("boom").with_context(coach_id=1)
        assert err.context == {"coach_id": 1}

    def test_cause_chained(self):
        cause = ValueError("inner")
        err = RosterError("outer", cause=cause)
        assert err.__cause__ is cause
        assert err.to_dict()["cause"] == "inner"

    def test_to_dict(self):
        err = ConflictError("taken", context={"team_id": 2})
        assert err.to_dict() == {
            "error_type": "ConflictError",
            "code": "CONFLICT",
            "message": "taken",
            "category": "CONFLICT",
            "context": {"team_id": 2},
        }

    def test_repr(self):
        assert repr(ValidationError("bad")) == "ValidationError('bad', category=VALIDATION)"


class TestSubclasses:
    @pytest.mark.parametrize(
        "cls, code, category",
        [
            (EntityNotFoundError, "NOT_FOUND", ErrorCategory.NOT_FOUND),
            (ValidationError, "VALIDATION_FAILED", ErrorCategory.VALIDATION),
            (ConflictError, "CONFLICT", ErrorCategory.CONFLICT),
            (DatabaseError, "INTERNAL", ErrorCategory.DATABASE),
        ],
    )
    def test_codes_and_categories(self, cls, code, category):
        err = cls("x")
        assert isinstance(err, RosterError)
        assert err.code == code
        assert err.category == category

    def test_not_found_carries_entity(self):
        err = EntityNotFoundError("Don't know coach", entity={"id": 9})
        assert err.entity == {"id": 9}
        assert err.to_dict()["entity"] == {"id": 9}

    def test_not_found_without_entity(self):
        assert "entity" not in EntityNotFoundError("gone").to_dict()

    def test_category_override(self):
        assert ValidationError("x", category=ErrorCategory.CONFLICT).category == ErrorCategory.CONFLICT
