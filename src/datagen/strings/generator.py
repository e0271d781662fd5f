"""Random string generator.

:class:`RandomString` turns a vocabulary and a length specification into fresh
random strings.  Every character is sampled independently and uniformly, with
replacement, from the vocabulary.  Generators hold no state besides their
configuration and random source, so a single instance can be shared freely by
single-threaded test code.

The module-level helpers (:func:`alphanumeric`, :func:`batch` ...) delegate to
a process default generator bound to :func:`datagen.config.get_default_config`.
Swapping the default configuration with
:func:`datagen.config.set_default_config` is picked up on the next call.

No seeding contract is offered: callers may inject a :class:`random.Random`
for their own purposes, but the library never seeds or resets one.
"""

from __future__ import annotations

import random
from collections.abc import Iterable, Sequence

from datagen.config import ConfigModel, get_default_config
from datagen.config.schema import RangeSettings
from datagen.modify.base import StringModifier, apply_modifiers
from datagen.utils.errors import InvalidArgument
from datagen.utils.logging import get_logger
from datagen.utils.rng import shared_rng

from .lengths import LengthSpec
from .vocabulary import ALPHANUMERIC, ENGLISH, NUMERIC, UNICODE, as_vocabulary

logger = get_logger(__name__)

Modifiers = Sequence[StringModifier] | None


def _fill_range(defaults: RangeSettings, lo: int | None, hi: int | None) -> LengthSpec:
    if lo is None and hi is None:
        return LengthSpec.between(defaults.min, defaults.max)
    if hi is None:
        return LengthSpec.between(lo, max(lo, defaults.max))
    if lo is None:
        return LengthSpec.between(min(hi, defaults.min), hi)
    return LengthSpec.between(lo, hi)


class RandomString:
    """Generate random strings from vocabularies."""

    def __init__(
        self,
        cfg: ConfigModel | None = None,
        *,
        rng: random.Random | None = None,
    ) -> None:
        """Initialize the generator.

        Parameters
        ----------
        cfg:
            Configuration supplying the special-symbol set and the default
            length and batch ranges.  ``None`` follows the process default,
            resolved on every call.
        rng:
            Random source.  Defaults to :func:`datagen.utils.rng.shared_rng`.
        """

        self._cfg = cfg
        self.rng: random.Random = rng if rng is not None else shared_rng()

    @property
    def cfg(self) -> ConfigModel:
        return self._cfg if self._cfg is not None else get_default_config()

    # -- Core -------------------------------------------------------------

    def fixed_length(self, vocabulary: Iterable[str], n: int) -> str:
        """Return exactly ``n`` characters drawn from ``vocabulary``."""

        vocab = as_vocabulary(vocabulary)
        if n < 0:
            raise InvalidArgument(f"length cannot be negative, got {n}")
        return "".join(self.rng.choices(vocab, k=n))

    def range_length(self, vocabulary: Iterable[str], min_length: int, max_length: int) -> str:
        """Return a string whose length is uniform in ``[min_length, max_length]``."""

        return self.generate(vocabulary, LengthSpec.between(min_length, max_length))

    def generate(self, vocabulary: Iterable[str], length: LengthSpec) -> str:
        vocab = as_vocabulary(vocabulary)
        return self.fixed_length(vocab, length.pick(self.rng))

    def batch(self, vocabulary: Iterable[str], length: LengthSpec, count: int) -> list[str]:
        """Return ``count`` independent strings; duplicates are possible."""

        if count < 0:
            raise InvalidArgument(f"count cannot be negative, got {count}")
        vocab = as_vocabulary(vocabulary)
        logger.debug(
            "Generating %d strings of length %d..%d from %d characters",
            count,
            length.min_length,
            length.max_length,
            len(vocab),
        )
        return [self.generate(vocab, length) for _ in range(count)]

    # -- Length and count resolution ---------------------------------------

    def length_spec(
        self,
        length: int | None = None,
        min_length: int | None = None,
        max_length: int | None = None,
    ) -> LengthSpec:
        """Build a :class:`LengthSpec` from keyword options.

        An exact ``length`` wins.  A missing bound of a range is taken from the
        configured default length range, widened so that it never contradicts
        the bound that was given: ``min_length=150`` with a default maximum
        of 100 yields ``[150, 150]``.
        """

        if length is not None:
            return LengthSpec.exact(length)
        return _fill_range(self.cfg.lengths, min_length, max_length)

    def _count(
        self,
        count: int | None,
        min_count: int | None,
        max_count: int | None,
    ) -> int:
        if count is not None:
            if count < 0:
                raise InvalidArgument(f"count cannot be negative, got {count}")
            return count
        return _fill_range(self.cfg.batch, min_count, max_count).pick(self.rng)

    # -- Named vocabularies ------------------------------------------------

    def string(
        self,
        vocabulary: Iterable[str],
        length: int | None = None,
        *,
        min_length: int | None = None,
        max_length: int | None = None,
        modifiers: Modifiers = None,
    ) -> str:
        """Return a random string over ``vocabulary`` with optional modifiers."""

        value = self.generate(vocabulary, self.length_spec(length, min_length, max_length))
        return apply_modifiers(value, modifiers)

    def alphanumeric(
        self,
        length: int | None = None,
        *,
        min_length: int | None = None,
        max_length: int | None = None,
        modifiers: Modifiers = None,
    ) -> str:
        return self.string(
            ALPHANUMERIC, length, min_length=min_length, max_length=max_length, modifiers=modifiers
        )

    def numeric(
        self,
        length: int | None = None,
        *,
        min_length: int | None = None,
        max_length: int | None = None,
        modifiers: Modifiers = None,
    ) -> str:
        return self.string(
            NUMERIC, length, min_length=min_length, max_length=max_length, modifiers=modifiers
        )

    def english(
        self,
        length: int | None = None,
        *,
        min_length: int | None = None,
        max_length: int | None = None,
        modifiers: Modifiers = None,
    ) -> str:
        return self.string(
            ENGLISH, length, min_length=min_length, max_length=max_length, modifiers=modifiers
        )

    def unicode(
        self,
        length: int | None = None,
        *,
        min_length: int | None = None,
        max_length: int | None = None,
        modifiers: Modifiers = None,
    ) -> str:
        """Return characters from several scripts, symbols and non-BMP characters.

        Lengths count code points, so the UTF-16 or UTF-8 size of the result
        is usually larger than ``len(result)``.
        """

        return self.string(
            UNICODE, length, min_length=min_length, max_length=max_length, modifiers=modifiers
        )

    def special_symbols(
        self,
        length: int | None = None,
        *,
        min_length: int | None = None,
        max_length: int | None = None,
        modifiers: Modifiers = None,
    ) -> str:
        """Return a string made of the configured special symbols only."""

        return self.string(
            self.cfg.vocabulary.special_symbols,
            length,
            min_length=min_length,
            max_length=max_length,
            modifiers=modifiers,
        )

    # -- Batches -----------------------------------------------------------

    def strings(
        self,
        vocabulary: Iterable[str],
        count: int | None = None,
        *,
        min_count: int | None = None,
        max_count: int | None = None,
        length: int | None = None,
        min_length: int | None = None,
        max_length: int | None = None,
        modifiers: Modifiers = None,
    ) -> list[str]:
        """Return a batch of strings over ``vocabulary``.

        The batch size is ``count`` or, when omitted, uniform in
        ``[min_count, max_count]`` with missing bounds taken from
        ``cfg.batch``.  Each element's length is resolved like
        :meth:`string`.
        """

        n = self._count(count, min_count, max_count)
        values = self.batch(vocabulary, self.length_spec(length, min_length, max_length), n)
        if not modifiers:
            return values
        return [apply_modifiers(value, modifiers) for value in values]

    def alphanumerics(
        self,
        count: int | None = None,
        *,
        min_count: int | None = None,
        max_count: int | None = None,
        **kwargs: object,
    ) -> list[str]:
        return self.strings(
            ALPHANUMERIC, count, min_count=min_count, max_count=max_count, **kwargs  # type: ignore[arg-type]
        )

    def numerics(
        self,
        count: int | None = None,
        *,
        min_count: int | None = None,
        max_count: int | None = None,
        **kwargs: object,
    ) -> list[str]:
        return self.strings(
            NUMERIC, count, min_count=min_count, max_count=max_count, **kwargs  # type: ignore[arg-type]
        )


# ---------------------------------------------------------------------------
# Process default helpers
# ---------------------------------------------------------------------------

_default = RandomString()


def default_generator() -> RandomString:
    """Return the generator bound to the process default configuration."""

    return _default


def fixed_length(vocabulary: Iterable[str], n: int) -> str:
    return _default.fixed_length(vocabulary, n)


def range_length(vocabulary: Iterable[str], min_length: int, max_length: int) -> str:
    return _default.range_length(vocabulary, min_length, max_length)


def batch(vocabulary: Iterable[str], length: LengthSpec, count: int) -> list[str]:
    return _default.batch(vocabulary, length, count)


def alphanumeric(length: int | None = None, **kwargs: object) -> str:
    return _default.alphanumeric(length, **kwargs)  # type: ignore[arg-type]


def numeric(length: int | None = None, **kwargs: object) -> str:
    return _default.numeric(length, **kwargs)  # type: ignore[arg-type]


def english(length: int | None = None, **kwargs: object) -> str:
    return _default.english(length, **kwargs)  # type: ignore[arg-type]


def unicode(length: int | None = None, **kwargs: object) -> str:
    return _default.unicode(length, **kwargs)  # type: ignore[arg-type]


def special_symbols(length: int | None = None, **kwargs: object) -> str:
    return _default.special_symbols(length, **kwargs)  # type: ignore[arg-type]


def alphanumerics(count: int | None = None, **kwargs: object) -> list[str]:
    return _default.alphanumerics(count, **kwargs)


def numerics(count: int | None = None, **kwargs: object) -> list[str]:
    return _default.numerics(count, **kwargs)


__all__ = [
    "RandomString",
    "alphanumeric",
    "alphanumerics",
    "batch",
    "default_generator",
    "english",
    "fixed_length",
    "numeric",
    "numerics",
    "range_length",
    "special_symbols",
    "unicode",
]
