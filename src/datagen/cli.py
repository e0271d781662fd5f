"""Typer-based command line interface for the string generators.

``datagen generate`` prints random strings, one per line, optionally passed
through modifiers in a fixed order: prefix, suffix, scatter, occasional,
spaces, special, whitespace escape.  ``datagen vocabularies`` lists the named
vocabularies.

Exit codes
----------
0 success
4 configuration error (unreadable file or schema violation)
5 invalid argument (empty vocabulary, bad lengths, affix too long ...)
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

from .config import ConfigModel, load_config
from .modify import (
    StringModifier,
    escape_whitespace,
    occasionally,
    prefix_with,
    scatter_chars,
    spaces,
    special_symbols,
    suffix_with,
)
from .strings import VOCABULARY_NAMES, RandomString, named_vocabulary
from .utils.errors import InvalidArgument
from .utils.logging import configure_logging, get_logger

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")

logger = get_logger("cli")

app = typer.Typer(
    name="datagen",
    help="Random test-data strings. Use 'datagen generate' to print some.",
)

EXIT_CONFIG = 4
EXIT_INVALID = 5


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> None:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _load(config_path: Path | None) -> ConfigModel:
    try:
        return load_config(config_path)
    except (OSError, ValidationError) as exc:
        _safe_exit(EXIT_CONFIG, f"Configuration error: {exc}")
        raise  # pragma: no cover - _safe_exit always raises


def _build_modifiers(
    cfg: ConfigModel,
    *,
    prefix: str | None,
    suffix: str | None,
    scatter: str | None,
    occasional: str | None,
    with_spaces: bool,
    special: bool,
    escape: str | None,
) -> list[StringModifier]:
    modifiers: list[StringModifier] = []
    if prefix:
        modifiers.append(prefix_with(prefix))
    if suffix:
        modifiers.append(suffix_with(suffix))
    if scatter:
        modifiers.append(scatter_chars(scatter))
    if occasional:
        modifiers.append(occasionally(occasional, cfg=cfg))
    if with_spaces:
        modifiers.append(spaces())
    if special:
        modifiers.append(special_symbols(cfg))
    if escape is not None:
        modifiers.append(escape_whitespace(escape))
    return modifiers


@app.callback()
def main() -> None:
    """Entry point for the datagen command group."""
    pass


@app.command()
def generate(  # noqa: PLR0913
    vocab: str = typer.Option(  # noqa: B008
        "alphanumeric",
        "--vocab",
        help=f"Named vocabulary [{'|'.join(VOCABULARY_NAMES)}]",
    ),
    chars: Optional[str] = typer.Option(  # noqa: B008
        None, "--chars", help="Explicit characters; overrides --vocab"
    ),
    length: Optional[int] = typer.Option(  # noqa: B008
        None, "--length", "-n", help="Exact length of each string"
    ),
    min_length: Optional[int] = typer.Option(None, "--min", help="Minimum length"),  # noqa: B008
    max_length: Optional[int] = typer.Option(None, "--max", help="Maximum length"),  # noqa: B008
    count: int = typer.Option(1, "--count", "-c", help="Number of strings to print"),  # noqa: B008
    prefix: Optional[str] = typer.Option(None, "--prefix", help="Overwrite the start"),  # noqa: B008
    suffix: Optional[str] = typer.Option(None, "--suffix", help="Overwrite the end"),  # noqa: B008
    scatter: Optional[str] = typer.Option(  # noqa: B008
        None, "--scatter", help="Scatter these characters over each string"
    ),
    occasional: Optional[str] = typer.Option(  # noqa: B008
        None, "--occasional", help="Scatter these characters about half of the time"
    ),
    with_spaces: bool = typer.Option(False, "--spaces", help="Scatter spaces"),  # noqa: B008
    special: bool = typer.Option(  # noqa: B008
        False, "--special", help="Scatter configured special symbols"
    ),
    escape: Optional[str] = typer.Option(  # noqa: B008
        None, "--escape-whitespace", help="Insert this text before every whitespace"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit debug messages to stderr"
    ),
) -> None:
    """Print ``--count`` random strings, one per line."""

    cfg = _load(config_path)
    configure_logging(cfg.logging.level, verbose=verbose)

    gen = RandomString(cfg)
    try:
        vocabulary = chars if chars is not None else named_vocabulary(vocab, cfg)
        modifiers = _build_modifiers(
            cfg,
            prefix=prefix,
            suffix=suffix,
            scatter=scatter,
            occasional=occasional,
            with_spaces=with_spaces,
            special=special,
            escape=escape,
        )
        values = gen.strings(
            vocabulary,
            count,
            length=length,
            min_length=min_length,
            max_length=max_length,
            modifiers=modifiers,
        )
    except InvalidArgument as exc:
        _safe_exit(EXIT_INVALID, f"Invalid argument: {exc}")
        return

    logger.debug("Printing %d strings", len(values))
    for value in values:
        typer.echo(value)


@app.command()
def vocabularies(
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
) -> None:
    """List named vocabularies and their sizes."""

    cfg = _load(config_path)
    for name in VOCABULARY_NAMES:
        vocab = named_vocabulary(name, cfg)
        typer.echo(f"{name}\t{len(vocab)}")


if __name__ == "__main__":  # pragma: no cover
    app()
