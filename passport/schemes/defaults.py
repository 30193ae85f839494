"""Default schemes of the four scope types."""

from passport.lang.keys import LangKey
from passport.schemes import validation
from passport.schemes.enums import ValueClass
from passport.schemes.models import ContactScheme, DocumentScheme, SchemeRow
from passport.scopes.enums import ScopeType
from passport.values.enums import ValueType

IDENTITY_SCHEME = DocumentScheme(
    scope_type=ScopeType.IDENTITY,
    rows=(
        SchemeRow(
            key="first_name",
            value_class=ValueClass.FIELDS,
            title=LangKey.FIRST_NAME,
            validator=validation.name_valid,
        ),
        SchemeRow(
            key="last_name",
            value_class=ValueClass.FIELDS,
            title=LangKey.LAST_NAME,
            validator=validation.name_valid,
        ),
        SchemeRow(
            key="birth_date",
            value_class=ValueClass.FIELDS,
            title=LangKey.BIRTH_DATE,
            validator=validation.date_valid,
        ),
        SchemeRow(
            key="gender",
            value_class=ValueClass.FIELDS,
            title=LangKey.GENDER,
            formatter=validation.format_gender,
            validator=validation.gender_valid,
        ),
        SchemeRow(
            key="country_code",
            value_class=ValueClass.FIELDS,
            title=LangKey.COUNTRY,
            formatter=validation.format_country_code,
            validator=validation.country_code_valid,
        ),
        SchemeRow(
            key="residence_country_code",
            value_class=ValueClass.FIELDS,
            title=LangKey.RESIDENCE,
            formatter=validation.format_country_code,
            validator=validation.country_code_valid,
        ),
        SchemeRow(
            key="document_no",
            value_class=ValueClass.DOCUMENT,
            title=LangKey.DOCUMENT_NUMBER,
            validator=validation.document_number_valid,
        ),
        SchemeRow(
            key="expiry_date",
            value_class=ValueClass.DOCUMENT,
            title=LangKey.EXPIRY_DATE,
            validator=validation.date_or_empty_valid,
        ),
    ),
)

ADDRESS_SCHEME = DocumentScheme(
    scope_type=ScopeType.ADDRESS,
    rows=(
        SchemeRow(
            key="street_line1",
            value_class=ValueClass.FIELDS,
            title=LangKey.STREET,
            validator=validation.not_empty,
        ),
        SchemeRow(
            key="street_line2",
            value_class=ValueClass.FIELDS,
            title=LangKey.STREET,
        ),
        SchemeRow(
            key="city",
            value_class=ValueClass.FIELDS,
            title=LangKey.CITY,
            validator=validation.city_valid,
        ),
        SchemeRow(
            key="state",
            value_class=ValueClass.FIELDS,
            title=LangKey.STATE,
        ),
        SchemeRow(
            key="country_code",
            value_class=ValueClass.FIELDS,
            title=LangKey.COUNTRY,
            formatter=validation.format_country_code,
            validator=validation.country_code_valid,
        ),
        SchemeRow(
            key="post_code",
            value_class=ValueClass.FIELDS,
            title=LangKey.POSTCODE,
            validator=validation.postcode_valid,
        ),
    ),
)

PHONE_SCHEME = ContactScheme(
    scope_type=ScopeType.PHONE,
    value_type=ValueType.PHONE,
    formatter=validation.format_phone,
)

EMAIL_SCHEME = ContactScheme(
    scope_type=ScopeType.EMAIL,
    value_type=ValueType.EMAIL,
)
