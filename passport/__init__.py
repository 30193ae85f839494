"""Passport scopes.

Groups the values submitted in a passport form into verification scopes
(identity, address, phone, email), decides per scope whether it is
complete, and produces the checklist rows shown to the user.
"""

from passport.exceptions import (
    InvariantViolationError,
    MissingValueError,
    PassportError,
    UnexpectedStateError,
    UnknownTypeError,
)
from passport.form import FormRequest, PassportForm
from passport.lang import LangKey, Localizer
from passport.schemes import SchemeRegistry, default_scheme_registry
from passport.scopes import Scope, ScopeRow, ScopeType
from passport.scopes.builder import compute_scopes
from passport.scopes.presenter import compute_scope_row
from passport.scopes.readiness import compute_ready_summary
from passport.values import InMemoryValueStore, ScanFile, Value, ValueStore, ValueType

__all__ = [
    # Errors
    "InvariantViolationError",
    "MissingValueError",
    "PassportError",
    "UnexpectedStateError",
    "UnknownTypeError",
    # Models
    "FormRequest",
    "InMemoryValueStore",
    "LangKey",
    "Localizer",
    "PassportForm",
    "ScanFile",
    "SchemeRegistry",
    "Scope",
    "ScopeRow",
    "ScopeType",
    "Value",
    "ValueStore",
    "ValueType",
    # Operations
    "compute_ready_summary",
    "compute_scope_row",
    "compute_scopes",
    "default_scheme_registry",
]
