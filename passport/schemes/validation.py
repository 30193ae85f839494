"""Validators and formatters used by the default schemes.

Validators take the raw field string and return whether it is
acceptable; formatters turn an accepted string into its display form.
"""

import re
from datetime import datetime

DATE_FORMAT = "%d.%m.%Y"
MAX_NAME_LENGTH = 255
MAX_DOCUMENT_NUMBER_LENGTH = 24

DATE_PATTERN = re.compile(r"[0-9]{2}\.[0-9]{2}\.[0-9]{4}")
COUNTRY_CODE_PATTERN = re.compile(r"[A-Za-z]{2}")
POSTCODE_PATTERN = re.compile(r"[A-Za-z0-9\-]{2,12}")
PHONE_DIGITS_PATTERN = re.compile(r"[0-9]+")

GENDERS: frozenset[str] = frozenset({"male", "female"})


def not_empty(value: str) -> bool:
    return bool(value.strip())


def name_valid(value: str) -> bool:
    """Non-empty and at most MAX_NAME_LENGTH characters."""
    return not_empty(value) and len(value) <= MAX_NAME_LENGTH


def document_number_valid(value: str) -> bool:
    return not_empty(value) and len(value) <= MAX_DOCUMENT_NUMBER_LENGTH


def date_valid(value: str) -> bool:
    """Calendar date written as DD.MM.YYYY."""
    if not DATE_PATTERN.fullmatch(value):
        return False
    try:
        datetime.strptime(value, DATE_FORMAT)
    except ValueError:
        return False
    return True


def date_or_empty_valid(value: str) -> bool:
    return not value or date_valid(value)


def gender_valid(value: str) -> bool:
    return value in GENDERS


def country_code_valid(value: str) -> bool:
    """ISO 3166-1 alpha-2 shaped code."""
    return bool(COUNTRY_CODE_PATTERN.fullmatch(value))


def city_valid(value: str) -> bool:
    return len(value.strip()) >= 2


def postcode_valid(value: str) -> bool:
    return bool(POSTCODE_PATTERN.fullmatch(value))


def format_gender(value: str) -> str:
    return value.capitalize()


def format_country_code(value: str) -> str:
    return value.upper()


def format_phone(value: str) -> str:
    """Show a bare digit string as an international number."""
    if PHONE_DIGITS_PATTERN.fullmatch(value):
        return f"+{value}"
    return value
