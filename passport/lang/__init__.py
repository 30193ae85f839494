"""Localization: symbolic display string keys and their lookup."""

from passport.lang.keys import LangKey
from passport.lang.localizer import Localizer
from passport.lang.strings import DEFAULT_STRINGS, LOCALE_STRINGS

__all__ = ["DEFAULT_STRINGS", "LOCALE_STRINGS", "LangKey", "Localizer"]
