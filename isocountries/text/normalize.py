import unicodedata

# Letters that carry no combining mark after NFKD decomposition
_FOLD_TABLE = str.maketrans(
    {
        "ø": "o",
        "Ø": "O",
        "ł": "l",
        "Ł": "L",
        "đ": "d",
        "Đ": "D",
        "ð": "d",
        "Ð": "D",
        "ß": "ss",
        "æ": "ae",
        "Æ": "AE",
        "œ": "oe",
        "Œ": "OE",
        "þ": "th",
        "Þ": "TH",
        "ı": "i",
    }
)


def remove_diacritics(text: str) -> str:
    """Strip diacritical marks, e.g. "België" -> "Belgie"."""
    decomposed = unicodedata.normalize("NFKD", text.translate(_FOLD_TABLE))
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def fold_name(text: str) -> str:
    """Comparison key for accent-insensitive name matching."""
    return remove_diacritics(text.lower())
