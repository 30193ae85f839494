"""Lookup of the scheme that applies to each scope type."""

from collections.abc import Mapping
from functools import lru_cache
from types import MappingProxyType

from passport.exceptions import UnexpectedStateError
from passport.observability.logging import get_logger
from passport.schemes.defaults import (
    ADDRESS_SCHEME,
    EMAIL_SCHEME,
    IDENTITY_SCHEME,
    PHONE_SCHEME,
)
from passport.schemes.models import ContactScheme, DocumentScheme
from passport.scopes.enums import ScopeType

logger = get_logger(__name__)

DOCUMENT_SCOPES: frozenset[ScopeType] = frozenset({ScopeType.IDENTITY, ScopeType.ADDRESS})
CONTACT_SCOPES: frozenset[ScopeType] = frozenset({ScopeType.PHONE, ScopeType.EMAIL})


class SchemeRegistry:
    """Read-only mapping of scope types to their schemes.

    Identity and address scopes take a DocumentScheme, phone and email
    scopes a ContactScheme. Construction fails on a scheme registered
    under the wrong scope type.
    """

    def __init__(
        self,
        document_schemes: Mapping[ScopeType, DocumentScheme],
        contact_schemes: Mapping[ScopeType, ContactScheme],
    ) -> None:
        for scope_type, scheme in document_schemes.items():
            if scope_type not in DOCUMENT_SCOPES or scheme.scope_type != scope_type:
                raise ValueError(f"Document scheme registered for {scope_type.value!r}")
        for scope_type, contact in contact_schemes.items():
            if scope_type not in CONTACT_SCOPES or contact.scope_type != scope_type:
                raise ValueError(f"Contact scheme registered for {scope_type.value!r}")

        self._documents: Mapping[ScopeType, DocumentScheme] = MappingProxyType(
            dict(document_schemes)
        )
        self._contacts: Mapping[ScopeType, ContactScheme] = MappingProxyType(
            dict(contact_schemes)
        )

    def document_scheme(self, scope_type: ScopeType) -> DocumentScheme:
        """Get the document scheme of an identity or address scope.

        Raises:
            UnexpectedStateError: If no document scheme is registered
        """
        scheme = self._documents.get(scope_type)
        if scheme is None:
            logger.error("document_scheme_missing", scope_type=scope_type.value)
            raise UnexpectedStateError(
                f"No document scheme for scope type {scope_type.value!r}"
            )
        return scheme

    def contact_scheme(self, scope_type: ScopeType) -> ContactScheme:
        """Get the contact scheme of a phone or email scope.

        Raises:
            UnexpectedStateError: If no contact scheme is registered
        """
        scheme = self._contacts.get(scope_type)
        if scheme is None:
            logger.error("contact_scheme_missing", scope_type=scope_type.value)
            raise UnexpectedStateError(
                f"No contact scheme for scope type {scope_type.value!r}"
            )
        return scheme


@lru_cache(maxsize=1)
def default_scheme_registry() -> SchemeRegistry:
    """Get the registry of the built-in schemes."""
    return SchemeRegistry(
        document_schemes={
            ScopeType.IDENTITY: IDENTITY_SCHEME,
            ScopeType.ADDRESS: ADDRESS_SCHEME,
        },
        contact_schemes={
            ScopeType.PHONE: PHONE_SCHEME,
            ScopeType.EMAIL: EMAIL_SCHEME,
        },
    )
