"""Display string lookup."""

from collections.abc import Mapping
from typing import TYPE_CHECKING

from passport.lang.keys import LangKey
from passport.lang.strings import LOCALE_STRINGS

if TYPE_CHECKING:
    from passport.config.settings import Settings


class Localizer:
    """Resolves symbolic string keys to display strings.

    The base table is picked by locale, and overrides win over it. Both the
    locale and the override keys are checked up front, so a typo in
    configuration fails at startup instead of silently showing English.
    """

    def __init__(
        self,
        overrides: Mapping[str, str] | None = None,
        locale: str = "en",
    ) -> None:
        base = LOCALE_STRINGS.get(locale)
        if base is None:
            raise ValueError(
                f"No display strings for locale {locale!r}; "
                f"available: {', '.join(sorted(LOCALE_STRINGS))}"
            )
        self.locale = locale
        self._strings: dict[LangKey, str] = dict(base)
        for key, text in (overrides or {}).items():
            try:
                lang_key = LangKey(key)
            except ValueError:
                raise ValueError(f"Unknown display string key: {key!r}") from None
            self._strings[lang_key] = text

    @classmethod
    def from_settings(cls, settings: "Settings") -> "Localizer":
        return cls(
            settings.localization.overrides,
            locale=settings.localization.locale,
        )

    def __call__(self, key: LangKey) -> str:
        return self._strings[key]
