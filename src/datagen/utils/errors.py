"""Typed exceptions raised by generators and modifiers."""


class InvalidArgument(ValueError):
    """Raised when a call site passes arguments no output can satisfy.

    Covers empty vocabularies, negative or inverted lengths, negative counts,
    patterns longer than the string they overwrite and empty scatter inputs.
    """
