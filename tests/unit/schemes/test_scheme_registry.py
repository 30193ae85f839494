"""Tests for scheme models and the scheme registry."""

import pytest
from pydantic import ValidationError

from passport.exceptions import UnexpectedStateError
from passport.schemes import (
    ContactScheme,
    DocumentScheme,
    SchemeRegistry,
    SchemeRow,
    ValueClass,
    default_scheme_registry,
)
from passport.scopes import ScopeType
from passport.values import ValueType


class TestSchemeRow:
    """Tests for SchemeRow."""

    def test_row_without_callables(self) -> None:
        """A bare row accepts any value and shows it unchanged."""
        row = SchemeRow(key="state", value_class=ValueClass.FIELDS)
        assert row.accepts("") is True
        assert row.render("Bavaria") == "Bavaria"

    def test_row_with_callables(self) -> None:
        """Validator and formatter are applied."""
        row = SchemeRow(
            key="gender",
            value_class=ValueClass.FIELDS,
            formatter=str.upper,
            validator=lambda value: value in {"male", "female"},
        )
        assert row.accepts("other") is False
        assert row.render("male") == "MALE"

    def test_empty_key_rejected(self) -> None:
        """Rows must name a field key."""
        with pytest.raises(ValidationError):
            SchemeRow(key="", value_class=ValueClass.FIELDS)

    def test_non_callable_rejected(self) -> None:
        """Formatter must be callable."""
        with pytest.raises(ValidationError):
            SchemeRow(key="city", value_class=ValueClass.FIELDS, formatter="upper")


class TestDocumentScheme:
    """Tests for DocumentScheme."""

    def test_has_document_rows(self) -> None:
        """Reports whether any row reads the chosen document."""
        fields_only = DocumentScheme(
            scope_type=ScopeType.ADDRESS,
            rows=(SchemeRow(key="city", value_class=ValueClass.FIELDS),),
        )
        with_document = DocumentScheme(
            scope_type=ScopeType.IDENTITY,
            rows=(SchemeRow(key="document_no", value_class=ValueClass.DOCUMENT),),
        )
        assert fields_only.has_document_rows is False
        assert with_document.has_document_rows is True


class TestDefaultRegistry:
    """Tests for the built-in schemes."""

    def test_identity_rows(self) -> None:
        """The identity scheme lists personal fields, then document fields."""
        scheme = default_scheme_registry().document_scheme(ScopeType.IDENTITY)
        assert [row.key for row in scheme.rows] == [
            "first_name",
            "last_name",
            "birth_date",
            "gender",
            "country_code",
            "residence_country_code",
            "document_no",
            "expiry_date",
        ]
        assert scheme.has_document_rows is True

    def test_address_has_no_document_rows(self) -> None:
        """The address scheme reads only the address fields."""
        scheme = default_scheme_registry().document_scheme(ScopeType.ADDRESS)
        assert scheme.has_document_rows is False

    def test_contact_schemes(self) -> None:
        """Phone has a formatter, email has none."""
        registry = default_scheme_registry()
        assert registry.contact_scheme(ScopeType.PHONE).formatter is not None
        assert registry.contact_scheme(ScopeType.EMAIL).formatter is None

    def test_registry_is_shared(self) -> None:
        """The default registry is built once."""
        assert default_scheme_registry() is default_scheme_registry()

    def test_wrong_kind_lookup_raises(self) -> None:
        """Contact scopes have no document scheme and vice versa."""
        registry = default_scheme_registry()
        with pytest.raises(UnexpectedStateError):
            registry.document_scheme(ScopeType.PHONE)
        with pytest.raises(UnexpectedStateError):
            registry.contact_scheme(ScopeType.IDENTITY)


class TestRegistryConstruction:
    """Tests for registering schemes."""

    def test_contact_scheme_under_document_scope_rejected(self) -> None:
        """A contact scheme cannot describe an identity scope."""
        with pytest.raises(ValueError):
            SchemeRegistry(
                document_schemes={},
                contact_schemes={
                    ScopeType.IDENTITY: ContactScheme(
                        scope_type=ScopeType.IDENTITY, value_type=ValueType.PERSONAL_DETAILS
                    )
                },
            )

    def test_mismatched_scope_type_rejected(self) -> None:
        """A scheme must be registered under its own scope type."""
        with pytest.raises(ValueError):
            SchemeRegistry(
                document_schemes={
                    ScopeType.ADDRESS: DocumentScheme(scope_type=ScopeType.IDENTITY)
                },
                contact_schemes={},
            )
