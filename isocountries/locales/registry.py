"""Localized country names: registration, lookup and reverse lookup.

A LocaleRegistry maps a locale tag ("en", "pt", ...) to that locale's
alpha-2 -> name(s) table. Registries are plain objects owned by the caller;
nothing is registered until register_locale() is called.
"""

import logging
from collections.abc import Callable, Mapping
from typing import Any

from isocountries.codes.index import CodeIndex, default_code_index
from isocountries.locales.selection import NameSelect, select_name, validate_select
from isocountries.schemas.locale import LocaleData
from isocountries.text.normalize import fold_name

logger = logging.getLogger(__name__)

CountryNames = dict[str, str | list[str]]


def _exact(name: str) -> str:
    return name.lower()


class LocaleRegistry:
    def __init__(self, code_index: CodeIndex | None = None):
        self.code_index = code_index if code_index is not None else default_code_index()
        self._locales: dict[str, CountryNames] = {}

    def register_locale(self, locale_data: LocaleData | Mapping[str, Any]) -> None:
        """Register (or replace) the names for one locale.

        Raises pydantic.ValidationError if locale or countries is missing.
        """
        if not isinstance(locale_data, LocaleData):
            locale_data = LocaleData.model_validate(locale_data)

        replaced = locale_data.locale in self._locales
        self._locales[locale_data.locale] = {
            alpha2: names if isinstance(names, str) else list(names)
            for alpha2, names in locale_data.countries.items()
        }
        logger.info(
            "%s locale '%s' (%d countries)",
            "Replaced" if replaced else "Registered",
            locale_data.locale,
            len(locale_data.countries),
        )

    def langs(self) -> list[str]:
        return list(self._locales)

    def __contains__(self, lang: object) -> bool:
        return self._countries(lang) is not None

    def _countries(self, lang: object) -> CountryNames | None:
        if not isinstance(lang, str):
            return None
        return self._locales.get(lang.lower())

    def get_name(self, code: object, lang: object, select: NameSelect = "official") -> str | list[str] | None:
        """Name of a country (any code form) in the given language, or None."""
        validate_select(select)

        countries = self._countries(lang)
        if countries is None:
            return None
        names = countries.get(self.code_index.to_alpha2(code))
        if names is None:
            return None
        return select_name(names, select)

    def get_names(self, lang: object, select: NameSelect = "official") -> dict[str, str | list[str]]:
        """Every country name in the given language, keyed by alpha-2 code."""
        validate_select(select)

        countries = self._countries(lang)
        if countries is None:
            logger.debug("No names registered for locale %r", lang)
            return {}
        return {alpha2: select_name(names, select) for alpha2, names in countries.items()}

    def _find_alpha2(self, name: object, lang: object, normalize: Callable[[str], str]) -> str | None:
        countries = self._countries(lang)
        if countries is None or not isinstance(name, str):
            return None

        wanted = normalize(name)
        for alpha2, names in countries.items():
            candidates = [names] if isinstance(names, str) else names
            if any(normalize(candidate) == wanted for candidate in candidates):
                return alpha2
        return None

    def get_alpha2_code(self, name: object, lang: object) -> str | None:
        """Alpha-2 code for a country name, matched case-insensitively."""
        return self._find_alpha2(name, lang, _exact)

    def get_simple_alpha2_code(self, name: object, lang: object) -> str | None:
        """Alpha-2 code for a country name, ignoring case and diacritics."""
        return self._find_alpha2(name, lang, fold_name)

    def get_alpha3_code(self, name: object, lang: object) -> str | None:
        alpha2 = self.get_alpha2_code(name, lang)
        return self.code_index.to_alpha3(alpha2) if alpha2 else None

    def get_simple_alpha3_code(self, name: object, lang: object) -> str | None:
        alpha2 = self.get_simple_alpha2_code(name, lang)
        return self.code_index.to_alpha3(alpha2) if alpha2 else None
