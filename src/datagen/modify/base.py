"""Modifier protocol and composition.

A :class:`StringModifier` rewrites an already generated string.  Callers pick
the length of a random string explicitly, so modifiers *replace* characters
instead of adding them and the output has the same length as the input.
:class:`~datagen.modify.impls.WhitespaceEscape` is the single documented
exception.

When several modifiers are chained they may overwrite each other's work: a
special symbol scattered by one can be replaced by a space from the next.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from typing import overload

__all__ = ["ChainedModifier", "StringModifier", "apply_modifiers", "chain"]


class StringModifier(ABC):
    """Transformation applied to one string or element-wise to a batch."""

    @abstractmethod
    def modify_one(self, original: str) -> str:
        """Return the transformed copy of ``original``."""

    @overload
    def modify(self, original: str) -> str: ...

    @overload
    def modify(self, original: Iterable[str]) -> list[str]: ...

    def modify(self, original: str | Iterable[str]) -> str | list[str]:
        """Modify a single string, or each string of a batch in order."""

        if isinstance(original, str):
            return self.modify_one(original)
        return [self.modify_one(item) for item in original]

    def __call__(self, original: str) -> str:
        return self.modify_one(original)

    def then(self, other: StringModifier) -> ChainedModifier:
        """Return a modifier applying ``self`` and then ``other``."""

        return chain(self, other)


class ChainedModifier(StringModifier):
    """Sequential application of several modifiers."""

    def __init__(self, modifiers: Sequence[StringModifier]) -> None:
        self.modifiers: tuple[StringModifier, ...] = tuple(modifiers)

    def modify_one(self, original: str) -> str:
        value = original
        for modifier in self.modifiers:
            value = modifier.modify_one(value)
        return value

    def __repr__(self) -> str:
        return f"ChainedModifier({list(self.modifiers)!r})"


def chain(*modifiers: StringModifier) -> ChainedModifier:
    """Compose ``modifiers`` left to right, flattening nested chains."""

    flat: list[StringModifier] = []
    for modifier in modifiers:
        if isinstance(modifier, ChainedModifier):
            flat.extend(modifier.modifiers)
        else:
            flat.append(modifier)
    return ChainedModifier(flat)


def apply_modifiers(value: str, modifiers: Sequence[StringModifier] | None) -> str:
    """Run ``value`` through ``modifiers`` in order; ``None`` leaves it as is."""

    for modifier in modifiers or ():
        value = modifier.modify_one(value)
    return value
