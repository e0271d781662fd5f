"""Modifier variants and the factories that build them.

Every variant draws randomness from an injectable :class:`random.Random`,
defaulting to :func:`datagen.utils.rng.shared_rng`.  Validation happens before
any character is touched so a failing call never yields partial output.
"""

from __future__ import annotations

import random
from collections.abc import Iterable

from datagen.config import ConfigModel, get_default_config
from datagen.strings.vocabulary import as_vocabulary
from datagen.utils.errors import InvalidArgument
from datagen.utils.logging import get_logger
from datagen.utils.rng import shared_rng

from .base import StringModifier

logger = get_logger(__name__)

__all__ = [
    "OccasionalScatter",
    "Prefix",
    "ScatterChars",
    "SingleReplace",
    "Suffix",
    "WhitespaceEscape",
    "escape_whitespace",
    "occasionally",
    "one_of",
    "prefix_with",
    "scatter_chars",
    "space_left",
    "space_right",
    "spaces",
    "spaces_left",
    "spaces_right",
    "special_symbol",
    "special_symbols",
    "suffix_with",
]


# ---------------------------------------------------------------------------
# Literal overwrite
# ---------------------------------------------------------------------------


class Prefix(StringModifier):
    """Overwrite the leading characters with ``text``."""

    def __init__(self, text: str) -> None:
        self.text = text

    def modify_one(self, original: str) -> str:
        if len(original) < len(self.text):
            raise InvalidArgument(
                f"prefix {self.text!r} is longer than the string it overwrites ({len(original)})"
            )
        return self.text + original[len(self.text) :]

    def __repr__(self) -> str:
        return f"Prefix({self.text!r})"


class Suffix(StringModifier):
    """Overwrite the trailing characters with ``text``."""

    def __init__(self, text: str) -> None:
        self.text = text

    def modify_one(self, original: str) -> str:
        if len(original) < len(self.text):
            raise InvalidArgument(
                f"suffix {self.text!r} is longer than the string it overwrites ({len(original)})"
            )
        return original[: len(original) - len(self.text)] + self.text

    def __repr__(self) -> str:
        return f"Suffix({self.text!r})"


# ---------------------------------------------------------------------------
# Random replacement
# ---------------------------------------------------------------------------


def _require_text(original: str) -> None:
    if not original:
        raise InvalidArgument("cannot replace characters of an empty string")


class _RandomReplace(StringModifier):
    def __init__(self, charset: Iterable[str], *, rng: random.Random | None = None) -> None:
        self.charset = as_vocabulary(charset)
        self.rng = rng if rng is not None else shared_rng()

    def _replace(self, chars: list[str], times: int) -> None:
        last = len(chars) - 1
        for _ in range(times):
            chars[self.rng.randint(0, last)] = self.rng.choice(self.charset)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({''.join(self.charset)!r})"


class SingleReplace(_RandomReplace):
    """Overwrite one random position with a member of ``charset``."""

    def modify_one(self, original: str) -> str:
        _require_text(original)
        chars = list(original)
        self._replace(chars, 1)
        return "".join(chars)


class ScatterChars(_RandomReplace):
    """Overwrite ``N`` random positions, ``N`` uniform in ``[1, len(original)]``.

    Positions are drawn with replacement; hitting the same index twice still
    counts toward ``N``.
    """

    def modify_one(self, original: str) -> str:
        _require_text(original)
        chars = list(original)
        times = self.rng.randint(1, len(chars))
        self._replace(chars, times)
        logger.debug("Scattered %d replacements over %d characters", times, len(chars))
        return "".join(chars)


class OccasionalScatter(StringModifier):
    """Leave the input untouched with ``probability``, otherwise scatter."""

    def __init__(
        self,
        charset: Iterable[str],
        *,
        probability: float = 0.5,
        rng: random.Random | None = None,
    ) -> None:
        if not 0.0 <= probability <= 1.0:
            raise InvalidArgument(f"probability must be within [0, 1], got {probability}")
        self.scatter = ScatterChars(charset, rng=rng)
        self.probability = probability

    @property
    def rng(self) -> random.Random:
        return self.scatter.rng

    def modify_one(self, original: str) -> str:
        _require_text(original)
        if self.rng.random() < self.probability:
            return original
        return self.scatter.modify_one(original)

    def __repr__(self) -> str:
        charset = "".join(self.scatter.charset)
        return f"OccasionalScatter({charset!r}, probability={self.probability})"


# ---------------------------------------------------------------------------
# Whitespace
# ---------------------------------------------------------------------------


# Non-breaking spaces glue words together and are not escaped.
_NON_BREAKING = frozenset("\u00a0\u2007\u202f")


def _is_whitespace(ch: str) -> bool:
    return ch.isspace() and ch not in _NON_BREAKING


class WhitespaceEscape(StringModifier):
    """Insert ``replacement`` in front of every whitespace character.

    Unlike the other modifiers this one grows the string by
    ``len(replacement)`` per whitespace character.
    """

    def __init__(self, replacement: str) -> None:
        self.replacement = replacement

    def modify_one(self, original: str) -> str:
        return "".join(self.replacement + ch if _is_whitespace(ch) else ch for ch in original)

    def __repr__(self) -> str:
        return f"WhitespaceEscape({self.replacement!r})"


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------


def prefix_with(text: str) -> StringModifier:
    return Prefix(text)


def suffix_with(text: str) -> StringModifier:
    return Suffix(text)


def one_of(charset: Iterable[str], *, rng: random.Random | None = None) -> StringModifier:
    """Replace exactly one random character with a member of ``charset``."""

    return SingleReplace(charset, rng=rng)


def scatter_chars(charset: Iterable[str], *, rng: random.Random | None = None) -> StringModifier:
    """Replace one or more random characters with members of ``charset``.

    The same character may be inserted several times.

    See Also
    --------
    occasionally
    """

    return ScatterChars(charset, rng=rng)


def occasionally(
    charset: Iterable[str],
    *,
    cfg: ConfigModel | None = None,
    rng: random.Random | None = None,
) -> StringModifier:
    """Like :func:`scatter_chars`, but a coin flip may leave the input unchanged.

    The chance of a no-op is ``cfg.modifiers.occasional_probability``.
    """

    cfg = cfg if cfg is not None else get_default_config()
    return OccasionalScatter(charset, probability=cfg.modifiers.occasional_probability, rng=rng)


def escape_whitespace(replacement: str) -> StringModifier:
    return WhitespaceEscape(replacement)


# -- Presets -------------------------------------------------------------


def spaces(*, rng: random.Random | None = None) -> StringModifier:
    return scatter_chars(" ", rng=rng)


def space_left() -> StringModifier:
    return prefix_with(" ")


def spaces_left(n: int) -> StringModifier:
    if n < 0:
        raise InvalidArgument(f"number of spaces cannot be negative, got {n}")
    return prefix_with(" " * n)


def space_right() -> StringModifier:
    return suffix_with(" ")


def spaces_right(n: int) -> StringModifier:
    if n < 0:
        raise InvalidArgument(f"number of spaces cannot be negative, got {n}")
    return suffix_with(" " * n)


def special_symbol(
    cfg: ConfigModel | None = None, *, rng: random.Random | None = None
) -> StringModifier:
    """Replace one character with a configured special symbol."""

    cfg = cfg if cfg is not None else get_default_config()
    return one_of(cfg.vocabulary.special_symbols, rng=rng)


def special_symbols(
    cfg: ConfigModel | None = None, *, rng: random.Random | None = None
) -> StringModifier:
    """Scatter configured special symbols across the string."""

    cfg = cfg if cfg is not None else get_default_config()
    return scatter_chars(cfg.vocabulary.special_symbols, rng=rng)
