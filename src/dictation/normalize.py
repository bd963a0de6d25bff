from __future__ import annotations
import unicodedata
from types import MappingProxyType

_ACCENTED = "áàâãäéèêëíìîïóòôõöúùûüçÁÀÂÃÄÉÈÊËÍÌÎÏÓÒÔÕÖÚÙÛÜÇ"
_UNACCENTED = "aaaaaeeeeiiiiooooouuuucAAAAAEEEEIIIIOOOOOUUUUC"

# Portuguese-only table; other scripts pass through untouched.
DIACRITIC_MAP = MappingProxyType(dict(zip(_ACCENTED, _UNACCENTED)))
_DIACRITIC_TABLE = str.maketrans(dict(DIACRITIC_MAP))

def _nfc(s: str) -> str:
    # Decomposed input (e.g. "a" + U+0301) must hit the table as one char.
    if not s:
        return ""
    return unicodedata.normalize("NFC", s)

def norm_answer(s: str | None) -> str:
    return _nfc(s or "").strip().casefold()

def is_blank_answer(s: str | None) -> bool:
    return not norm_answer(s)

def strip_diacritics(s: str) -> str:
    return (s or "").translate(_DIACRITIC_TABLE)
