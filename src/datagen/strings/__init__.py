"""Random string generation: vocabularies, length specs and the generator."""

from .vocabulary import (
    ALPHANUMERIC,
    DEFAULT_SPECIAL_SYMBOLS,
    ENGLISH,
    NUMERIC,
    UNICODE,
    VOCABULARY_NAMES,
    as_vocabulary,
    named_vocabulary,
    supplementary,
)
from .lengths import LengthSpec
from .generator import (
    RandomString,
    alphanumeric,
    alphanumerics,
    batch,
    default_generator,
    english,
    fixed_length,
    numeric,
    numerics,
    range_length,
    special_symbols,
    unicode,
)

__all__ = [
    "ALPHANUMERIC",
    "DEFAULT_SPECIAL_SYMBOLS",
    "ENGLISH",
    "LengthSpec",
    "NUMERIC",
    "RandomString",
    "UNICODE",
    "VOCABULARY_NAMES",
    "alphanumeric",
    "alphanumerics",
    "as_vocabulary",
    "batch",
    "default_generator",
    "english",
    "fixed_length",
    "named_vocabulary",
    "numeric",
    "numerics",
    "range_length",
    "special_symbols",
    "supplementary",
    "unicode",
]
