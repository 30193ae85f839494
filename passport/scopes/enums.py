"""Enums for verification scopes."""

from enum import Enum


class ScopeType(str, Enum):
    """Logical verification requirement.

    Declaration order is the order in which computed scopes are listed.
    """

    IDENTITY = "identity"
    ADDRESS = "address"
    PHONE = "phone"
    EMAIL = "email"
