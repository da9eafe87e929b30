from __future__ import annotations

import re
import unicodedata
from typing import Any, Union

# Letters NFKD leaves intact.
_LATIN_EXTRA = str.maketrans(
    {
        "ß": "ss",
        "ẞ": "SS",
        "æ": "ae",
        "Æ": "AE",
        "œ": "oe",
        "Œ": "OE",
        "ø": "o",
        "Ø": "O",
        "đ": "d",
        "Đ": "D",
        "ł": "l",
        "Ł": "L",
        "þ": "th",
        "Þ": "TH",
        "ð": "d",
        "Ð": "D",
        "ı": "i",
    }
)

_NON_KEY_CHARS = re.compile(r"[^a-z0-9 ]")
_MULTI_SPACE = re.compile(r"\s\s+")
_STOP_WORDS = ("and_", "of_", "the_")

BOM = "\ufeff"


def latinize(text: str) -> str:
    """Replace accented and ligature letters with their plain latin form."""

    decomposed = unicodedata.normalize("NFKD", text.translate(_LATIN_EXTRA))
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def transform_string_to_key(text: str) -> str:
    """Turn free text into an identifier-safe key.

    "The Code.gov Project" -> "code_gov_project"

    Each stop word is removed once, wherever it first appears.
    """

    key = latinize(str(text)).lower()
    key = _NON_KEY_CHARS.sub(" ", key)
    key = _MULTI_SPACE.sub(" ", key)
    key = key.replace(" ", "_")
    for word in _STOP_WORDS:
        key = key.replace(word, "", 1)
    return key


def strip_bom(data: Union[str, bytes, bytearray, Any]) -> str:
    """Return data as text without a leading byte-order mark."""

    if isinstance(data, (bytes, bytearray)):
        text = bytes(data).decode("utf-8")
    else:
        text = str(data)

    if text.startswith(BOM):
        return text[1:]
    return text
