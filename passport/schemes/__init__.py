"""Field schemes: which fields make a scope complete and how they show."""

from passport.schemes.enums import ValueClass
from passport.schemes.models import ContactScheme, DocumentScheme, SchemeRow
from passport.schemes.registry import SchemeRegistry, default_scheme_registry

__all__ = [
    "ContactScheme",
    "DocumentScheme",
    "SchemeRegistry",
    "SchemeRow",
    "ValueClass",
    "default_scheme_registry",
]
