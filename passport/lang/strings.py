"""Default English display strings."""

from types import MappingProxyType

from passport.lang.keys import LangKey

DEFAULT_STRINGS = MappingProxyType({
    LangKey.PERSONAL_DETAILS: "Personal details",
    LangKey.PERSONAL_DETAILS_ENTER: "Enter your personal details",
    LangKey.IDENTITY_TITLE: "Identity document",
    LangKey.IDENTITY_DESCRIPTION: "Upload a scan of your passport or other ID",
    LangKey.IDENTITY_PASSPORT: "Passport",
    LangKey.IDENTITY_PASSPORT_UPLOAD: "Upload a scan of your passport",
    LangKey.IDENTITY_CARD: "Identity card",
    LangKey.IDENTITY_CARD_UPLOAD: "Upload a scan of your identity card",
    LangKey.IDENTITY_LICENSE: "Driver's license",
    LangKey.IDENTITY_LICENSE_UPLOAD: "Upload a scan of your driver's license",
    LangKey.ADDRESS: "Address",
    LangKey.ADDRESS_ENTER: "Enter your home address",
    LangKey.ADDRESS_TITLE: "Residential address",
    LangKey.ADDRESS_DESCRIPTION: "Upload a proof of your address",
    LangKey.ADDRESS_STATEMENT: "Bank statement",
    LangKey.ADDRESS_STATEMENT_UPLOAD: "Upload a scan of your bank statement",
    LangKey.ADDRESS_BILL: "Utility bill",
    LangKey.ADDRESS_BILL_UPLOAD: "Upload a scan of your utility bill",
    LangKey.ADDRESS_AGREEMENT: "Tenancy agreement",
    LangKey.ADDRESS_AGREEMENT_UPLOAD: "Upload a scan of your tenancy agreement",
    LangKey.PHONE_TITLE: "Phone number",
    LangKey.PHONE_DESCRIPTION: "Enter your phone number",
    LangKey.EMAIL_TITLE: "Email",
    LangKey.EMAIL_DESCRIPTION: "Enter your email address",
    LangKey.FIRST_NAME: "First name",
    LangKey.LAST_NAME: "Last name",
    LangKey.BIRTH_DATE: "Date of birth",
    LangKey.GENDER: "Gender",
    LangKey.COUNTRY: "Citizenship",
    LangKey.RESIDENCE: "Residence",
    LangKey.DOCUMENT_NUMBER: "Card number",
    LangKey.EXPIRY_DATE: "Expiry date",
    LangKey.STREET: "Street",
    LangKey.CITY: "City",
    LangKey.STATE: "Region",
    LangKey.POSTCODE: "Postcode",
})

# Base tables by locale; other languages come in through overrides.
LOCALE_STRINGS = MappingProxyType({
    "en": DEFAULT_STRINGS,
})
