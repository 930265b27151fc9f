"""ISO 3166-1 code conversion and localized country names.

The bundled code table covers the 249 ISO 3166-1 countries plus Kosovo
(XK / XKX / 412). Names ship for six locales only: de, en, es, fr, nl and
pt. Other locales can be added with LocaleRegistry.register_locale() or by
pointing ISOCOUNTRIES_LOCALES_DIR at a directory of locale JSON files.
"""

from isocountries.codes.dataset import CodeEntry
from isocountries.codes.index import CodeIndex, default_code_index
from isocountries.countries import Countries, create_countries
from isocountries.locales.loader import get_supported_languages, load_locale
from isocountries.locales.registry import LocaleRegistry
from isocountries.schemas.locale import LocaleData

__all__ = [
    "CodeEntry",
    "CodeIndex",
    "Countries",
    "LocaleData",
    "LocaleRegistry",
    "create_countries",
    "default_code_index",
    "get_supported_languages",
    "load_locale",
]
