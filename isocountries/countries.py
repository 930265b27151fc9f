import logging
from collections.abc import Iterable, Mapping
from typing import Any

from isocountries.codes.index import CodeIndex, default_code_index
from isocountries.config import settings
from isocountries.locales.loader import get_supported_languages, load_locale
from isocountries.locales.registry import LocaleRegistry
from isocountries.locales.selection import NameSelect
from isocountries.schemas.locale import LocaleData

logger = logging.getLogger(__name__)

ALL_LOCALES = "*"


class Countries:
    """Code conversion plus localized names behind a single object.

    Holds a CodeIndex and a LocaleRegistry; build one per application (or per
    test) and register the locales it needs.
    """

    def __init__(self, code_index: CodeIndex | None = None, registry: LocaleRegistry | None = None):
        self.codes = code_index if code_index is not None else default_code_index()
        self.registry = registry if registry is not None else LocaleRegistry(self.codes)

    # Locales

    def register_locale(self, locale_data: LocaleData | Mapping[str, Any]) -> None:
        self.registry.register_locale(locale_data)

    def register_locales(self, langs: Iterable[str]) -> None:
        """Load bundled locales by tag and register them."""
        for lang in langs:
            self.registry.register_locale(load_locale(lang))

    def register_supported_locales(self) -> None:
        self.register_locales(get_supported_languages())

    def langs(self) -> list[str]:
        return self.registry.langs()

    @staticmethod
    def get_supported_languages() -> list[str]:
        return get_supported_languages()

    # Code conversion

    def to_alpha2(self, code: object) -> str | None:
        return self.codes.to_alpha2(code)

    def to_alpha3(self, code: object) -> str | None:
        return self.codes.to_alpha3(code)

    def alpha2_to_alpha3(self, code: object) -> str | None:
        return self.codes.alpha2_to_alpha3(code)

    def alpha3_to_alpha2(self, code: object) -> str | None:
        return self.codes.alpha3_to_alpha2(code)

    def alpha2_to_numeric(self, code: object) -> str | None:
        return self.codes.alpha2_to_numeric(code)

    def alpha3_to_numeric(self, code: object) -> str | None:
        return self.codes.alpha3_to_numeric(code)

    def numeric_to_alpha2(self, code: str | int | None) -> str | None:
        return self.codes.numeric_to_alpha2(code)

    def numeric_to_alpha3(self, code: str | int | None) -> str | None:
        return self.codes.numeric_to_alpha3(code)

    def is_valid(self, code: object) -> bool:
        return self.codes.is_valid(code)

    def get_alpha2_codes(self) -> Mapping[str, str]:
        return self.codes.get_alpha2_codes()

    def get_alpha3_codes(self) -> Mapping[str, str]:
        return self.codes.get_alpha3_codes()

    def get_numeric_codes(self) -> Mapping[str, str]:
        return self.codes.get_numeric_codes()

    # Names

    def get_name(self, code: object, lang: object, select: NameSelect = "official") -> str | list[str] | None:
        return self.registry.get_name(code, lang, select=select)

    def get_names(self, lang: object, select: NameSelect = "official") -> dict[str, str | list[str]]:
        return self.registry.get_names(lang, select=select)

    def get_alpha2_code(self, name: object, lang: object) -> str | None:
        return self.registry.get_alpha2_code(name, lang)

    def get_simple_alpha2_code(self, name: object, lang: object) -> str | None:
        return self.registry.get_simple_alpha2_code(name, lang)

    def get_alpha3_code(self, name: object, lang: object) -> str | None:
        return self.registry.get_alpha3_code(name, lang)

    def get_simple_alpha3_code(self, name: object, lang: object) -> str | None:
        return self.registry.get_simple_alpha3_code(name, lang)


def create_countries(locales: Iterable[str] | None = None) -> Countries:
    """Build a Countries with the given locales registered.

    Falls back to settings.DEFAULT_LOCALES; "*" stands for every supported
    locale.
    """
    if isinstance(locales, str):
        locales = [locales]
    langs = list(settings.DEFAULT_LOCALES if locales is None else locales)
    if ALL_LOCALES in langs:
        langs = get_supported_languages()

    countries = Countries()
    countries.register_locales(langs)
    logger.info("Countries ready with locales: %s", ", ".join(countries.langs()) or "none")
    return countries
