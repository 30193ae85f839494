"""Ready summary of a scope.

A scope is either complete, in which case its summary lists the values of
its scheme rows, or it is not, in which case the summary is empty. There
is no partial summary.
"""

from collections.abc import Mapping
from types import MappingProxyType

from passport.exceptions import UnexpectedStateError
from passport.lang.keys import LangKey
from passport.lang.localizer import Localizer
from passport.observability.logging import get_logger
from passport.schemes.enums import ValueClass
from passport.schemes.registry import SchemeRegistry, default_scheme_registry
from passport.scopes.enums import ScopeType
from passport.scopes.models import Scope
from passport.values.enums import ValueType
from passport.values.models import Value

logger = get_logger(__name__)

SUMMARY_SEPARATOR = ", "

DOCUMENT_LABELS: Mapping[ValueType, LangKey] = MappingProxyType({
    ValueType.PASSPORT: LangKey.IDENTITY_PASSPORT,
    ValueType.DRIVER_LICENSE: LangKey.IDENTITY_LICENSE,
    ValueType.IDENTITY_CARD: LangKey.IDENTITY_CARD,
    ValueType.BANK_STATEMENT: LangKey.ADDRESS_STATEMENT,
    ValueType.UTILITY_BILL: LangKey.ADDRESS_BILL,
    ValueType.RENTAL_AGREEMENT: LangKey.ADDRESS_AGREEMENT,
})


def choose_document(scope: Scope) -> Value | None:
    """Get the first document of the scope that has a scan attached."""
    for document in scope.documents:
        if document.has_scans:
            return document
    return None


def document_label(value_type: ValueType) -> LangKey:
    """Get the display label key of an alternative document type.

    Raises:
        UnexpectedStateError: If the type is not a document type
    """
    key = DOCUMENT_LABELS.get(value_type)
    if key is None:
        logger.error("document_label_missing", value_type=value_type.value)
        raise UnexpectedStateError(f"No label for document type {value_type.value!r}")
    return key


def _document_summary(scope: Scope, schemes: SchemeRegistry, lang: Localizer) -> str:
    scheme = schemes.document_scheme(scope.type)
    document = choose_document(scope)

    parts: list[str] = []
    if document is not None and len(scope.documents) > 1:
        parts.append(lang(document_label(document.type)))

    if (
        document is not None
        and scheme.has_document_rows
        and (not document.has_scans or (scope.selfie_required and document.selfie is None))
    ):
        return ""

    for row in scheme.rows:
        if row.value_class == ValueClass.FIELDS:
            source = scope.fields
        elif document is None:
            return ""
        else:
            source = document

        value = source.fields.get(row.key)
        if value is None or not row.accepts(value):
            return ""
        parts.append(row.render(value))

    return SUMMARY_SEPARATOR.join(parts)


def _contact_summary(scope: Scope, schemes: SchemeRegistry) -> str:
    scheme = schemes.contact_scheme(scope.type)
    value = scope.fields.fields.get("value")
    if value is None:
        return ""
    if scheme.validator is not None and not scheme.validator(value):
        return ""
    return scheme.render(value)


def compute_ready_summary(
    scope: Scope,
    schemes: SchemeRegistry | None = None,
    lang: Localizer | None = None,
) -> str:
    """Compute the completeness summary of a scope.

    Args:
        scope: Scope to summarize
        schemes: Schemes to check against (built-in schemes by default)
        lang: Display string lookup (built-in English by default)

    Returns:
        Comma-joined summary, or an empty string when the scope is not ready
    """
    schemes = schemes or default_scheme_registry()
    lang = lang or Localizer()

    if scope.type in (ScopeType.IDENTITY, ScopeType.ADDRESS):
        return _document_summary(scope, schemes, lang)
    if scope.type in (ScopeType.PHONE, ScopeType.EMAIL):
        return _contact_summary(scope, schemes)

    logger.error("unexpected_scope_type", scope_type=str(scope.type))
    raise UnexpectedStateError(f"Scope type {scope.type!r} has no ready summary")
