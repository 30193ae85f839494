"""Symbolic keys of the display strings."""

from enum import Enum


class LangKey(str, Enum):
    """Display string keys used by scope rows and ready summaries."""

    # Identity
    PERSONAL_DETAILS = "lng_passport_personal_details"
    PERSONAL_DETAILS_ENTER = "lng_passport_personal_details_enter"
    IDENTITY_TITLE = "lng_passport_identity_title"
    IDENTITY_DESCRIPTION = "lng_passport_identity_description"
    IDENTITY_PASSPORT = "lng_passport_identity_passport"
    IDENTITY_PASSPORT_UPLOAD = "lng_passport_identity_passport_upload"
    IDENTITY_CARD = "lng_passport_identity_card"
    IDENTITY_CARD_UPLOAD = "lng_passport_identity_card_upload"
    IDENTITY_LICENSE = "lng_passport_identity_license"
    IDENTITY_LICENSE_UPLOAD = "lng_passport_identity_license_upload"

    # Address
    ADDRESS = "lng_passport_address"
    ADDRESS_ENTER = "lng_passport_address_enter"
    ADDRESS_TITLE = "lng_passport_address_title"
    ADDRESS_DESCRIPTION = "lng_passport_address_description"
    ADDRESS_STATEMENT = "lng_passport_address_statement"
    ADDRESS_STATEMENT_UPLOAD = "lng_passport_address_statement_upload"
    ADDRESS_BILL = "lng_passport_address_bill"
    ADDRESS_BILL_UPLOAD = "lng_passport_address_bill_upload"
    ADDRESS_AGREEMENT = "lng_passport_address_agreement"
    ADDRESS_AGREEMENT_UPLOAD = "lng_passport_address_agreement_upload"

    # Contacts
    PHONE_TITLE = "lng_passport_phone_title"
    PHONE_DESCRIPTION = "lng_passport_phone_description"
    EMAIL_TITLE = "lng_passport_email_title"
    EMAIL_DESCRIPTION = "lng_passport_email_description"

    # Scheme row titles
    FIRST_NAME = "lng_passport_first_name"
    LAST_NAME = "lng_passport_last_name"
    BIRTH_DATE = "lng_passport_birth_date"
    GENDER = "lng_passport_gender"
    COUNTRY = "lng_passport_country"
    RESIDENCE = "lng_passport_residence"
    DOCUMENT_NUMBER = "lng_passport_document_number"
    EXPIRY_DATE = "lng_passport_expiry_date"
    STREET = "lng_passport_street"
    CITY = "lng_passport_city"
    STATE = "lng_passport_state"
    POSTCODE = "lng_passport_postcode"
