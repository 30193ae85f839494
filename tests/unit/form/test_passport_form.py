"""Tests for PassportForm."""

import pytest
from pydantic import ValidationError

from passport import FormRequest, InMemoryValueStore, PassportForm, ScopeType, ValueType
from passport.exceptions import MissingValueError
from tests.factories import ValueFactory


class TestFormRequest:
    """Tests for FormRequest."""

    def test_empty_request_rejected(self) -> None:
        """A request must ask for at least one type."""
        with pytest.raises(ValidationError):
            FormRequest(required_types=[])

    def test_types_from_strings(self) -> None:
        """Requested types may be given by value."""
        request = FormRequest(required_types=["passport", "phone"])
        assert request.required_types == [ValueType.PASSPORT, ValueType.PHONE]
        assert request.identity_selfie_required is False


class TestPassportForm:
    """Tests for scope and row computation through the form."""

    def test_compute_rows(self) -> None:
        """Rows follow scope order and reflect readiness."""
        request = FormRequest(
            required_types=[ValueType.EMAIL, ValueType.PASSPORT, ValueType.PHONE]
        )
        form = PassportForm(request, ValueFactory.full_store())
        rows = form.compute_rows()
        assert [row.title for row in rows] == ["Passport", "Phone number", "Email"]
        assert all(row.ready for row in rows)

    def test_selfie_flag_passed_through(self) -> None:
        """The request's selfie flag reaches the identity scope."""
        request = FormRequest(
            required_types=[ValueType.PASSPORT], identity_selfie_required=True
        )
        form = PassportForm(request, ValueFactory.full_store())
        (scope,) = form.compute_scopes()
        assert scope.type == ScopeType.IDENTITY
        assert scope.selfie_required is True
        assert form.compute_rows()[0].ready_summary == ""

    def test_rows_follow_value_edits(self) -> None:
        """Rows are recomputed from the current values on every call."""
        store = ValueFactory.full_store()
        form = PassportForm(FormRequest(required_types=[ValueType.PHONE]), store)
        assert form.compute_rows()[0].ready is True

        store.get(ValueType.PHONE).fields.clear()
        assert form.compute_rows()[0].ready is False

    def test_missing_types(self) -> None:
        """Lists needed types the store does not hold."""
        store = InMemoryValueStore([ValueFactory.document(ValueType.UTILITY_BILL)])
        form = PassportForm(
            FormRequest(required_types=[ValueType.UTILITY_BILL, ValueType.EMAIL]), store
        )
        assert form.missing_types() == [ValueType.ADDRESS, ValueType.EMAIL]
        with pytest.raises(MissingValueError):
            form.compute_scopes()

    def test_nothing_missing(self) -> None:
        """A complete store lacks nothing."""
        form = PassportForm(
            FormRequest(required_types=list(ValueType)), ValueFactory.full_store()
        )
        assert form.missing_types() == []
        assert len(form.compute_scopes()) == len(ScopeType)
