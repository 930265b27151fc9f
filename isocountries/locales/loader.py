import json
import logging
import os
from collections.abc import Iterable

from isocountries.config import settings
from isocountries.schemas.locale import LocaleData

logger = logging.getLogger(__name__)


def get_supported_languages() -> list[str]:
    """Locale tags that load_locale() can read.

    The bundled list, or the JSON files found in LOCALES_DIR when it is set.
    """
    if settings.LOCALES_DIR:
        return sorted(
            os.path.splitext(filename)[0]
            for filename in os.listdir(settings.LOCALES_DIR)
            if filename.endswith(".json")
        )
    with open(os.path.join(settings.DATA_DIR, "supported_locales.json"), encoding="utf-8") as f:
        return json.load(f)


def load_locale(lang: str) -> LocaleData:
    """Read and validate the locale file for a tag, e.g. load_locale("en")."""
    tag = lang.lower()
    if tag not in get_supported_languages():
        raise ValueError(f"Unsupported locale '{lang}'")

    path = os.path.join(settings.locales_path, f"{tag}.json")
    with open(path, encoding="utf-8") as f:
        data = LocaleData.model_validate(json.load(f))
    logger.debug("Loaded locale '%s' from %s", tag, path)
    return data


def load_locales(langs: Iterable[str]) -> list[LocaleData]:
    return [load_locale(lang) for lang in langs]
