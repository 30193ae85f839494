"""Scope builder: groups requested values into verification scopes."""

from collections.abc import Iterable

from passport.exceptions import MissingValueError
from passport.observability.logging import get_logger
from passport.scopes.enums import ScopeType
from passport.scopes.models import Scope
from passport.scopes.resolver import (
    fields_type_for_scope_type,
    scope_type_for_value_type,
)
from passport.values.enums import ValueType
from passport.values.models import Value
from passport.values.store import ValueStore

logger = get_logger(__name__)


def _find_value(store: ValueStore, value_type: ValueType) -> Value:
    value = store.get(value_type)
    if value is None:
        logger.error("requested_value_missing", value_type=value_type.value)
        raise MissingValueError(
            f"No value of type {value_type.value!r} in the form store",
            value_type=value_type.value,
        )
    return value


def compute_scopes(
    requested_types: Iterable[ValueType],
    store: ValueStore,
    identity_selfie_required: bool = False,
) -> list[Scope]:
    """Group the requested value types into scopes.

    Every requested type joins the scope it resolves to. The scope's
    primary fields type is never listed as a document; any other type is
    appended to ``documents`` unless a document of that type is already
    there, in which case the repeat is logged and skipped.

    Args:
        requested_types: Value types in request order
        store: Form store holding a value for every requested type
        identity_selfie_required: Whether identity documents need a selfie

    Returns:
        One scope per distinct scope type, in ScopeType declaration order

    Raises:
        MissingValueError: If a requested or primary fields value is absent
        UnknownTypeError: If a type is missing from the resolution tables
    """
    scopes: dict[ScopeType, Scope] = {}

    for value_type in requested_types:
        scope_type = scope_type_for_value_type(value_type)
        fields_type = fields_type_for_scope_type(scope_type)

        scope = scopes.get(scope_type)
        if scope is None:
            scope = Scope(type=scope_type, fields=_find_value(store, fields_type))
            scopes[scope_type] = scope
        scope.selfie_required = (
            scope_type == ScopeType.IDENTITY and identity_selfie_required
        )

        if value_type == fields_type:
            continue
        if scope.has_document(value_type):
            logger.warning(
                "duplicate_value_type_in_request",
                value_type=value_type.value,
                scope_type=scope_type.value,
            )
            continue
        scope.documents.append(_find_value(store, value_type))

    return [scopes[scope_type] for scope_type in ScopeType if scope_type in scopes]
