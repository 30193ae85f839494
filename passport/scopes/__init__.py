"""Verification scopes: grouping of submitted values into requirements.

The operations live in their own modules:

- ``passport.scopes.builder.compute_scopes``
- ``passport.scopes.readiness.compute_ready_summary``
- ``passport.scopes.presenter.compute_scope_row``
"""

from passport.scopes.enums import ScopeType
from passport.scopes.models import Scope, ScopeRow
from passport.scopes.resolver import (
    document_types_for_scope_type,
    fields_type_for_scope_type,
    scope_type_for_value_type,
)

__all__ = [
    "Scope",
    "ScopeRow",
    "ScopeType",
    "document_types_for_scope_type",
    "fields_type_for_scope_type",
    "scope_type_for_value_type",
]
