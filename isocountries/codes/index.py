"""Conversion between ISO 3166-1 alpha-2, alpha-3 and numeric codes.

All codes map to alpha-2. Every lookup returns None on a miss instead of
raising, since callers typically feed unvalidated user input through here.
"""

import re
from collections.abc import Iterable, Iterator, Mapping
from functools import lru_cache
from types import MappingProxyType

from isocountries.codes.dataset import CodeEntry, load_entries, validate_no_duplicate_codes

_DIGITS = re.compile(r"[0-9]*")


def format_numeric_code(code: str | int | None) -> str:
    """Zero-pad a numeric code to three characters: 4 -> "004", "" -> "000"."""
    return ("000" + (str(code) if code else ""))[-3:]


def _is_number(code: object) -> bool:
    return isinstance(code, int) and not isinstance(code, bool)


class CodeIndex:
    def __init__(self, entries: Iterable[CodeEntry]):
        self._entries = tuple(entries)
        validate_no_duplicate_codes(self._entries)

        alpha2: dict[str, str] = {}
        alpha3: dict[str, str] = {}
        numeric: dict[str, str] = {}
        inverted_numeric: dict[str, str] = {}
        for entry in self._entries:
            alpha2[entry.alpha2] = entry.alpha3
            alpha3[entry.alpha3] = entry.alpha2
            numeric[entry.numeric] = entry.alpha2
            inverted_numeric[entry.alpha2] = entry.numeric

        self._alpha2 = MappingProxyType(alpha2)
        self._alpha3 = MappingProxyType(alpha3)
        self._numeric = MappingProxyType(numeric)
        self._inverted_numeric = MappingProxyType(inverted_numeric)

    @classmethod
    def from_file(cls, path: str | None = None) -> "CodeIndex":
        return cls(load_entries(path))

    @property
    def entries(self) -> tuple[CodeEntry, ...]:
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[CodeEntry]:
        return iter(self._entries)

    def __contains__(self, code: object) -> bool:
        return self.is_valid(code)

    # -- direct conversions --------------------------------------------------

    def alpha3_to_alpha2(self, code: object) -> str | None:
        if not isinstance(code, str):
            return None
        return self._alpha3.get(code)

    def alpha2_to_alpha3(self, code: object) -> str | None:
        if not isinstance(code, str):
            return None
        return self._alpha2.get(code)

    def alpha3_to_numeric(self, code: object) -> str | None:
        alpha2 = self.alpha3_to_alpha2(code)
        if alpha2 is None:
            return None
        return self._inverted_numeric.get(alpha2)

    def alpha2_to_numeric(self, code: object) -> str | None:
        if not isinstance(code, str):
            return None
        return self._inverted_numeric.get(code)

    def numeric_to_alpha3(self, code: str | int | None) -> str | None:
        return self.alpha2_to_alpha3(self.numeric_to_alpha2(code))

    def numeric_to_alpha2(self, code: str | int | None) -> str | None:
        if code is not None and not isinstance(code, str) and not _is_number(code):
            return None
        return self._numeric.get(format_numeric_code(code))

    # -- polymorphic conversions ---------------------------------------------

    def to_alpha3(self, code: object) -> str | None:
        """Convert an alpha-2, alpha-3 or numeric code to alpha-3.

        Three-letter input is upper-cased and returned without checking that
        it is a known code.
        """
        if isinstance(code, str):
            if _DIGITS.fullmatch(code):
                return self.numeric_to_alpha3(code)
            if len(code) == 2:
                return self.alpha2_to_alpha3(code.upper())
            if len(code) == 3:
                return code.upper()
        if _is_number(code):
            return self.numeric_to_alpha3(code)
        return None

    def to_alpha2(self, code: object) -> str | None:
        """Convert an alpha-2, alpha-3 or numeric code to alpha-2.

        Two-letter input is upper-cased and returned as-is.
        """
        if isinstance(code, str):
            if _DIGITS.fullmatch(code):
                return self.numeric_to_alpha2(code)
            if len(code) == 2:
                return code.upper()
            if len(code) == 3:
                return self.alpha3_to_alpha2(code.upper())
        if _is_number(code):
            return self.numeric_to_alpha2(code)
        return None

    def is_valid(self, code: object) -> bool:
        if not code:
            return False

        coerced = str(code).upper()
        return coerced in self._alpha3 or coerced in self._alpha2 or coerced in self._numeric

    # -- enumeration ---------------------------------------------------------

    def get_alpha2_codes(self) -> Mapping[str, str]:
        """Alpha-2 codes mapped to alpha-3 codes."""
        return self._alpha2

    def get_alpha3_codes(self) -> Mapping[str, str]:
        """Alpha-3 codes mapped to alpha-2 codes."""
        return self._alpha3

    def get_numeric_codes(self) -> Mapping[str, str]:
        """Numeric codes mapped to alpha-2 codes."""
        return self._numeric


@lru_cache(maxsize=1)
def default_code_index() -> CodeIndex:
    """The index built from the configured (by default bundled) code table.

    Cached after the first call; a later change to settings.CODES_FILE needs
    default_code_index.cache_clear() to take effect.
    """
    return CodeIndex.from_file()
