import pytest
from pydantic import ValidationError

from isocountries.codes.index import default_code_index
from isocountries.locales.loader import load_locales
from isocountries.locales.registry import LocaleRegistry
from isocountries.schemas.locale import LocaleData

VI = {
    "locale": "vi",
    "countries": {
        "EG": "Ai Cập",
        "RU": ["Liên bang Nga", "Nga"],
        "US": ["Hợp chủng quốc Hoa Kỳ", "Mỹ"],
    },
}


@pytest.fixture
def registry():
    registry = LocaleRegistry()
    for locale in load_locales(["de", "en", "fr", "nl", "pt"]):
        registry.register_locale(locale)
    registry.register_locale(VI)
    return registry


def test_registry_starts_empty():
    registry = LocaleRegistry()
    assert registry.langs() == []
    assert registry.get_name("DE", "de") is None


def test_end_to_end():
    registry = LocaleRegistry(default_code_index())
    registry.register_locale({"locale": "de", "countries": {"DE": "Deutschland", "CL": "Chile"}})
    assert registry.get_name("de", "de") == "Deutschland"
    assert registry.get_alpha2_code("Chile", "de") == "CL"
    assert registry.code_index.to_alpha3("CL") == "CHL"


def test_register_requires_locale():
    registry = LocaleRegistry()
    with pytest.raises(ValidationError):
        registry.register_locale({"countries": {"DE": "Deutschland"}})
    with pytest.raises(ValidationError):
        registry.register_locale({"locale": "", "countries": {"DE": "Deutschland"}})


def test_register_requires_countries():
    registry = LocaleRegistry()
    with pytest.raises(ValidationError):
        registry.register_locale({"locale": "de"})
    with pytest.raises(ValidationError):
        registry.register_locale({"locale": "de", "countries": None})


def test_register_rejects_bad_name_lists():
    registry = LocaleRegistry()
    with pytest.raises(ValidationError):
        registry.register_locale({"locale": "de", "countries": {"DE": []}})
    with pytest.raises(ValidationError):
        registry.register_locale({"locale": "de", "countries": {"DE": ["a", "b", "c"]}})


def test_last_registration_wins():
    registry = LocaleRegistry()
    registry.register_locale({"locale": "de", "countries": {"DE": "Deutschland", "CL": "Chile"}})
    registry.register_locale({"locale": "de", "countries": {"DE": "BRD"}})
    assert registry.langs() == ["de"]
    assert registry.get_name("DE", "de") == "BRD"
    assert registry.get_name("CL", "de") is None


def test_registries_are_independent(registry):
    other = LocaleRegistry()
    assert other.langs() == []
    assert registry.get_name("DE", "de") == "Deutschland"
    assert other.get_name("DE", "de") is None


def test_langs(registry):
    assert registry.langs() == ["de", "en", "fr", "nl", "pt", "vi"]
    assert "EN" in registry
    assert "xx" not in registry


def test_get_name_de(registry):
    assert registry.get_name("de", "de") == "Deutschland"
    assert registry.get_name("cl", "de") == "Chile"
    assert registry.get_name("CL", "de") == "Chile"
    assert registry.get_name("cy", "de") == "Zypern"
    assert registry.get_name("af", "de") == "Afghanistan"


def test_get_name_accepts_any_code_form(registry):
    assert registry.get_name("DEU", "en") == "Germany"
    assert registry.get_name(276, "en") == "Germany"
    assert registry.get_name("276", "EN") == "Germany"


def test_get_name_en(registry):
    assert registry.get_name("de", "en") == "Germany"
    assert registry.get_name("cl", "en") == "Chile"
    assert registry.get_name("cy", "en") == "Cyprus"
    assert registry.get_name("af", "en") == "Afghanistan"


def test_get_name_fr_and_pt(registry):
    assert registry.get_name("fr", "fr") == "France"
    assert registry.get_name("br", "pt") == "Brasil"
    assert registry.get_name("si", "pt") == "Eslovénia"
    assert registry.get_name("us", "pt") == "Estados Unidos"


def test_get_name_select(registry):
    assert registry.get_name("eg", "vi") == "Ai Cập"
    assert registry.get_name("eg", "vi", select="official") == "Ai Cập"
    assert registry.get_name("eg", "vi", select="alias") == "Ai Cập"
    assert registry.get_name("eg", "vi", select="all") == ["Ai Cập"]
    assert registry.get_name("ru", "vi", select="alias") == "Nga"
    assert registry.get_name("us", "vi", select="all") == ["Hợp chủng quốc Hoa Kỳ", "Mỹ"]
    assert registry.get_name("us", "vi", select="official") == "Hợp chủng quốc Hoa Kỳ"
    assert registry.get_name("us", "vi", select="alias") == "Mỹ"


def test_get_name_invalid_select(registry):
    with pytest.raises(ValueError):
        registry.get_name("us", "vi", select="short")
    with pytest.raises(ValueError):
        registry.get_name("us", "unsupported", select="short")


def test_get_name_misses(registry):
    assert registry.get_name("XX", "en") is None
    assert registry.get_name("DE", "vi") is None
    assert registry.get_name(True, "en") is None
    assert registry.get_name("DE", None) is None


def test_get_names(registry):
    names = registry.get_names("vi", select="all")
    assert names == {
        "EG": ["Ai Cập"],
        "RU": ["Liên bang Nga", "Nga"],
        "US": ["Hợp chủng quốc Hoa Kỳ", "Mỹ"],
    }
    assert list(registry.get_names("VI")) == ["EG", "RU", "US"]
    assert registry.get_names("vi", select="alias")["RU"] == "Nga"


def test_get_names_does_not_expose_registry(registry):
    names = registry.get_names("vi", select="all")
    names["US"].append("USA")
    assert registry.get_name("us", "vi", select="all") == ["Hợp chủng quốc Hoa Kỳ", "Mỹ"]


def test_unsupported_language(registry):
    assert registry.get_name("en", "unsupported") is None
    assert registry.get_names("unsupported") == {}


def test_get_alpha2_code_en(registry):
    assert registry.get_alpha2_code("United States of America", "en") == "US"
    assert registry.get_alpha2_code("United States", "en") == "US"
    assert registry.get_alpha2_code("united states", "en") == "US"
    assert registry.get_alpha2_code("Brazil", "en") == "BR"


def test_get_alpha2_code_pt(registry):
    assert registry.get_alpha2_code("Estados Unidos", "pt") == "US"
    assert registry.get_alpha2_code("Estados Unidos da América", "pt") == "US"


def test_get_alpha2_code_is_accent_sensitive(registry):
    assert registry.get_alpha2_code("België", "nl") == "BE"
    assert registry.get_alpha2_code("belgie", "nl") is None


def test_get_alpha2_code_misses(registry):
    assert registry.get_alpha2_code("XXX", "de") is None
    assert registry.get_alpha2_code("Deutschland", "xx") is None
    assert registry.get_alpha2_code(None, "de") is None


def test_get_simple_alpha2_code(registry):
    assert registry.get_simple_alpha2_code("belgie", "nl") == "BE"
    assert registry.get_simple_alpha2_code("België", "nl") == "BE"
    assert registry.get_simple_alpha2_code("Republic of Korea", "en") == "KR"
    assert registry.get_simple_alpha2_code("South Korea", "en") == "KR"
    assert registry.get_simple_alpha2_code("Estados Unidos da America", "pt") == "US"
    assert registry.get_simple_alpha2_code("cote d'ivoire", "fr") == "CI"


def test_get_simple_alpha2_code_misses(registry):
    assert registry.get_simple_alpha2_code("XXX", "de") is None
    assert registry.get_simple_alpha2_code("Deutschland", "xx") is None


def test_reverse_lookup_returns_first_match():
    registry = LocaleRegistry()
    registry.register_locale({"locale": "xx", "countries": {"CG": ["Congo"], "CD": ["Kongo", "Congo"]}})
    assert registry.get_alpha2_code("congo", "xx") == "CG"


def test_get_alpha3_code(registry):
    assert registry.get_alpha3_code("United States of America", "en") == "USA"
    assert registry.get_alpha3_code("Brazil", "en") == "BRA"
    assert registry.get_alpha3_code("Estados Unidos", "pt") == "USA"
    assert registry.get_alpha3_code("XXX", "de") is None
    assert registry.get_alpha3_code("Deutschland", "xx") is None


def test_get_simple_alpha3_code(registry):
    assert registry.get_simple_alpha3_code("belgie", "nl") == "BEL"
    assert registry.get_simple_alpha3_code("Estados Unidos da America", "pt") == "USA"
    assert registry.get_simple_alpha3_code("XXX", "de") is None
    assert registry.get_simple_alpha3_code("Deutschland", "xx") is None


def test_tag_is_stored_as_given():
    registry = LocaleRegistry()
    registry.register_locale({"locale": "DE", "countries": {"DE": "Deutschland"}})
    assert registry.langs() == ["DE"]
    assert registry.get_name("DE", "de") is None
    assert registry.get_name("DE", "DE") is None


def test_registered_names_are_copied():
    registry = LocaleRegistry()
    locale = LocaleData(locale="vi", countries={"US": ["Hợp chủng quốc Hoa Kỳ", "Mỹ"]})
    registry.register_locale(locale)

    locale.countries["US"].append("USA")
    locale.countries["RU"] = "Nga"
    assert registry.get_name("US", "vi", select="all") == ["Hợp chủng quốc Hoa Kỳ", "Mỹ"]
    assert registry.get_name("RU", "vi") is None


def test_kosovo_has_a_name(registry):
    assert registry.get_name("XK", "en") == "Kosovo"
    assert registry.get_alpha3_code("Kosovo", "de") == "XKX"
