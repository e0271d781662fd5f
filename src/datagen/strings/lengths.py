"""Length specifications for generated strings and batches."""

from __future__ import annotations

import random
from dataclasses import dataclass

from datagen.utils.errors import InvalidArgument

__all__ = ["LengthSpec"]


@dataclass(frozen=True)
class LengthSpec:
    """Inclusive ``[min_length, max_length]`` range; equal bounds mean exact."""

    min_length: int
    max_length: int

    def __post_init__(self) -> None:
        if self.min_length < 0:
            raise InvalidArgument(f"length cannot be negative, got {self.min_length}")
        if self.min_length > self.max_length:
            raise InvalidArgument(
                f"min length ({self.min_length}) > max length ({self.max_length})"
            )

    @classmethod
    def exact(cls, n: int) -> "LengthSpec":
        return cls(n, n)

    @classmethod
    def between(cls, min_length: int, max_length: int) -> "LengthSpec":
        return cls(min_length, max_length)

    @property
    def is_exact(self) -> bool:
        return self.min_length == self.max_length

    def pick(self, rng: random.Random) -> int:
        """Return a length chosen uniformly from the inclusive range."""

        if self.is_exact:
            return self.min_length
        return rng.randint(self.min_length, self.max_length)

    def __contains__(self, length: object) -> bool:
        return isinstance(length, int) and self.min_length <= length <= self.max_length
