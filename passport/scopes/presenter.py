"""Checklist rows of computed scopes."""

from collections.abc import Mapping
from types import MappingProxyType

from passport.exceptions import UnexpectedStateError
from passport.lang.keys import LangKey
from passport.lang.localizer import Localizer
from passport.observability.logging import get_logger
from passport.schemes.registry import SchemeRegistry
from passport.scopes.enums import ScopeType
from passport.scopes.models import Scope, ScopeRow
from passport.scopes.readiness import compute_ready_summary
from passport.values.enums import ValueType

logger = get_logger(__name__)

TextKeys = tuple[LangKey, LangKey]

# Scope without documents, or a contact scope
SCOPE_TEXTS: Mapping[ScopeType, TextKeys] = MappingProxyType({
    ScopeType.IDENTITY: (LangKey.PERSONAL_DETAILS, LangKey.PERSONAL_DETAILS_ENTER),
    ScopeType.ADDRESS: (LangKey.ADDRESS, LangKey.ADDRESS_ENTER),
    ScopeType.PHONE: (LangKey.PHONE_TITLE, LangKey.PHONE_DESCRIPTION),
    ScopeType.EMAIL: (LangKey.EMAIL_TITLE, LangKey.EMAIL_DESCRIPTION),
})

# Scope accepting several alternative documents
GROUP_TEXTS: Mapping[ScopeType, TextKeys] = MappingProxyType({
    ScopeType.IDENTITY: (LangKey.IDENTITY_TITLE, LangKey.IDENTITY_DESCRIPTION),
    ScopeType.ADDRESS: (LangKey.ADDRESS_TITLE, LangKey.ADDRESS_DESCRIPTION),
})

# Scope accepting exactly one document
DOCUMENT_TEXTS: Mapping[tuple[ScopeType, ValueType], TextKeys] = MappingProxyType({
    (ScopeType.IDENTITY, ValueType.PASSPORT): (
        LangKey.IDENTITY_PASSPORT,
        LangKey.IDENTITY_PASSPORT_UPLOAD,
    ),
    (ScopeType.IDENTITY, ValueType.IDENTITY_CARD): (
        LangKey.IDENTITY_CARD,
        LangKey.IDENTITY_CARD_UPLOAD,
    ),
    (ScopeType.IDENTITY, ValueType.DRIVER_LICENSE): (
        LangKey.IDENTITY_LICENSE,
        LangKey.IDENTITY_LICENSE_UPLOAD,
    ),
    (ScopeType.ADDRESS, ValueType.BANK_STATEMENT): (
        LangKey.ADDRESS_STATEMENT,
        LangKey.ADDRESS_STATEMENT_UPLOAD,
    ),
    (ScopeType.ADDRESS, ValueType.UTILITY_BILL): (
        LangKey.ADDRESS_BILL,
        LangKey.ADDRESS_BILL_UPLOAD,
    ),
    (ScopeType.ADDRESS, ValueType.RENTAL_AGREEMENT): (
        LangKey.ADDRESS_AGREEMENT,
        LangKey.ADDRESS_AGREEMENT_UPLOAD,
    ),
})


def scope_text_keys(scope: Scope) -> TextKeys:
    """Select the title and description keys of a scope.

    Raises:
        UnexpectedStateError: If the scope and document combination is unknown
    """
    if scope.type in GROUP_TEXTS and len(scope.documents) > 1:
        return GROUP_TEXTS[scope.type]

    if scope.type in GROUP_TEXTS and len(scope.documents) == 1:
        document_type = scope.documents[0].type
        keys = DOCUMENT_TEXTS.get((scope.type, document_type))
        if keys is None:
            logger.error(
                "unexpected_scope_document",
                scope_type=scope.type.value,
                document_type=document_type.value,
            )
            raise UnexpectedStateError(
                f"Document type {document_type.value!r} in {scope.type.value!r} scope"
            )
        return keys

    keys = SCOPE_TEXTS.get(scope.type)
    if keys is None:
        logger.error("unexpected_scope_type", scope_type=str(scope.type))
        raise UnexpectedStateError(f"Scope type {scope.type!r} has no row texts")
    return keys


def compute_scope_row(
    scope: Scope,
    schemes: SchemeRegistry | None = None,
    lang: Localizer | None = None,
) -> ScopeRow:
    """Build the checklist row of a scope.

    Args:
        scope: Scope to present
        schemes: Schemes for the ready summary (built-in schemes by default)
        lang: Display string lookup (built-in English by default)

    Returns:
        Row with localized title and description and the current ready summary
    """
    lang = lang or Localizer()
    title, description = scope_text_keys(scope)
    return ScopeRow(
        title=lang(title),
        description=lang(description),
        ready_summary=compute_ready_summary(scope, schemes=schemes, lang=lang),
    )
