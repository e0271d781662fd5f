"""Character vocabularies for random strings.

A vocabulary is an immutable tuple of distinct single characters.  Order only
matters for reproducibility of a seeded :class:`random.Random`; sampling is
uniform over the members.

The ``UNICODE`` sample mixes several scripts with symbols and characters
outside the Basic Multilingual Plane.  The latter need two code units in
UTF-16 and four bytes in UTF-8, which shakes out code that equates one
displayed character with one storage unit.
"""

from __future__ import annotations

import string
from collections.abc import Iterable
from typing import TYPE_CHECKING, Final

from datagen.utils.errors import InvalidArgument

if TYPE_CHECKING:  # pragma: no cover
    from datagen.config import ConfigModel

__all__ = [
    "ALPHANUMERIC",
    "DEFAULT_SPECIAL_SYMBOLS",
    "ENGLISH",
    "NUMERIC",
    "UNICODE",
    "VOCABULARY_NAMES",
    "as_vocabulary",
    "named_vocabulary",
    "supplementary",
]

Vocabulary = tuple[str, ...]

_BMP_MAX: Final = 0xFFFF


def as_vocabulary(chars: Iterable[str]) -> Vocabulary:
    """Return ``chars`` as a duplicate-free tuple, keeping first occurrences.

    ``chars`` may be a string or any iterable of one-character strings.
    """

    seen: dict[str, None] = {}
    for ch in chars:
        if not isinstance(ch, str) or len(ch) != 1:
            raise InvalidArgument(f"vocabulary members must be single characters, got {ch!r}")
        seen.setdefault(ch, None)
    if not seen:
        raise InvalidArgument("vocabulary cannot be empty")
    return tuple(seen)


def supplementary(text: str) -> list[str]:
    """Return the characters of ``text`` lying outside the BMP."""

    return [ch for ch in text if ord(ch) > _BMP_MAX]


# ---------------------------------------------------------------------------
# Presets
# ---------------------------------------------------------------------------

NUMERIC: Final[Vocabulary] = as_vocabulary(string.digits)
ENGLISH: Final[Vocabulary] = as_vocabulary(string.ascii_letters)
ALPHANUMERIC: Final[Vocabulary] = as_vocabulary(string.ascii_letters + string.digits)

DEFAULT_SPECIAL_SYMBOLS: Final[str] = "!@#$%^&*()_+-=[]{}|;':\",./<>?`~\\"

UNICODE: Final[Vocabulary] = as_vocabulary(
    "abcxyzABCXYZ019"
    "äöüßéèñçøå"  # Latin-1 supplement
    "ąćęłńśźżőű"  # Latin extended
    "абвгдеёжзий"  # Cyrillic
    "αβγδεζηθλμπω"  # Greek
    "אבגדהוזחט"  # Hebrew
    "ابتثجحخدذ"  # Arabic
    "अआइईउकखगघ"  # Devanagari
    "กขคงจฉช"  # Thai
    "你好世界中文字"  # CJK
    "あいうえおアイウエオ"  # Kana
    "한국어글자"  # Hangul
    "€£¥₹©®™§¶†‡•…‰"  # symbols
    "\u00a0\u2009\u200b"  # odd spaces
    "𝄞𝔘𝕌😀😱🚀🎉𠜎𠜱𐐷"  # supplementary
)

VOCABULARY_NAMES: Final[tuple[str, ...]] = (
    "alphanumeric",
    "numeric",
    "english",
    "special",
    "unicode",
)


def named_vocabulary(name: str, cfg: ConfigModel | None = None) -> Vocabulary:
    """Resolve a preset by name.

    ``special`` reads ``cfg.vocabulary.special_symbols`` and falls back to the
    process default configuration when ``cfg`` is ``None``.
    """

    key = name.strip().lower()
    if key == "alphanumeric":
        return ALPHANUMERIC
    if key == "numeric":
        return NUMERIC
    if key == "english":
        return ENGLISH
    if key == "unicode":
        return UNICODE
    if key == "special":
        if cfg is None:
            from datagen.config import get_default_config

            cfg = get_default_config()
        return as_vocabulary(cfg.vocabulary.special_symbols)
    raise InvalidArgument(
        f"unknown vocabulary {name!r}; expected one of {', '.join(VOCABULARY_NAMES)}"
    )
