"""Closed resolution tables between value types and scope types.

Both tables are exhaustive over the known enums. A lookup miss means the
enums and the tables went out of sync, so it raises instead of guessing.
"""

from collections.abc import Mapping
from types import MappingProxyType

from passport.exceptions import UnknownTypeError
from passport.observability.logging import get_logger
from passport.scopes.enums import ScopeType
from passport.values.enums import ValueType

logger = get_logger(__name__)

SCOPE_TYPES: Mapping[ValueType, ScopeType] = MappingProxyType({
    ValueType.PERSONAL_DETAILS: ScopeType.IDENTITY,
    ValueType.PASSPORT: ScopeType.IDENTITY,
    ValueType.DRIVER_LICENSE: ScopeType.IDENTITY,
    ValueType.IDENTITY_CARD: ScopeType.IDENTITY,
    ValueType.ADDRESS: ScopeType.ADDRESS,
    ValueType.UTILITY_BILL: ScopeType.ADDRESS,
    ValueType.BANK_STATEMENT: ScopeType.ADDRESS,
    ValueType.RENTAL_AGREEMENT: ScopeType.ADDRESS,
    ValueType.PHONE: ScopeType.PHONE,
    ValueType.EMAIL: ScopeType.EMAIL,
})

FIELDS_TYPES: Mapping[ScopeType, ValueType] = MappingProxyType({
    ScopeType.IDENTITY: ValueType.PERSONAL_DETAILS,
    ScopeType.ADDRESS: ValueType.ADDRESS,
    ScopeType.PHONE: ValueType.PHONE,
    ScopeType.EMAIL: ValueType.EMAIL,
})


def scope_type_for_value_type(value_type: ValueType) -> ScopeType:
    """Get the scope a value type belongs to.

    Raises:
        UnknownTypeError: If the value type is missing from the table
    """
    scope_type = SCOPE_TYPES.get(value_type)
    if scope_type is None:
        logger.error("unknown_value_type", value_type=str(value_type))
        raise UnknownTypeError(
            f"Value type {value_type!r} has no scope", type_name=str(value_type)
        )
    return scope_type


def fields_type_for_scope_type(scope_type: ScopeType) -> ValueType:
    """Get the value type holding the primary fields of a scope.

    Raises:
        UnknownTypeError: If the scope type is missing from the table
    """
    fields_type = FIELDS_TYPES.get(scope_type)
    if fields_type is None:
        logger.error("unknown_scope_type", scope_type=str(scope_type))
        raise UnknownTypeError(
            f"Scope type {scope_type!r} has no fields type", type_name=str(scope_type)
        )
    return fields_type


def document_types_for_scope_type(scope_type: ScopeType) -> list[ValueType]:
    """List the alternative document types a scope accepts."""
    fields_type = fields_type_for_scope_type(scope_type)
    return [
        value_type
        for value_type, owner in SCOPE_TYPES.items()
        if owner == scope_type and value_type != fields_type
    ]
