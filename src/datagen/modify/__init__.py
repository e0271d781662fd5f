"""String modifiers that inject spaces, symbols and fixed affixes."""

from .base import ChainedModifier, StringModifier, apply_modifiers, chain
from .impls import (
    OccasionalScatter,
    Prefix,
    ScatterChars,
    SingleReplace,
    Suffix,
    WhitespaceEscape,
    escape_whitespace,
    occasionally,
    one_of,
    prefix_with,
    scatter_chars,
    space_left,
    space_right,
    spaces,
    spaces_left,
    spaces_right,
    special_symbol,
    special_symbols,
    suffix_with,
)

__all__ = [
    "ChainedModifier",
    "OccasionalScatter",
    "Prefix",
    "ScatterChars",
    "SingleReplace",
    "StringModifier",
    "Suffix",
    "WhitespaceEscape",
    "apply_modifiers",
    "chain",
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
