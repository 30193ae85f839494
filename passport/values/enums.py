"""Enums for submitted values."""

from enum import Enum


class ValueType(str, Enum):
    """Kind of a single submitted datum.

    Declaration order is significant: it is the order in which
    alternative document types are listed for a scope.
    """

    PERSONAL_DETAILS = "personal_details"
    PASSPORT = "passport"
    DRIVER_LICENSE = "driver_license"
    IDENTITY_CARD = "identity_card"
    ADDRESS = "address"
    UTILITY_BILL = "utility_bill"
    BANK_STATEMENT = "bank_statement"
    RENTAL_AGREEMENT = "rental_agreement"
    PHONE = "phone"
    EMAIL = "email"
