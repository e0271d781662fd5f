"""Tests for the individual modifier variants."""

from __future__ import annotations

import random

import pytest

from datagen import InvalidArgument
from datagen.config import load_config
from datagen.modify import (
    OccasionalScatter,
    ScatterChars,
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


def test_prefix() -> None:
    assert prefix_with("ab").modify("xyz") == "abz"
    assert prefix_with("").modify("xyz") == "xyz"
    assert prefix_with("xy").modify("ab") == "xy"
    with pytest.raises(InvalidArgument):
        prefix_with("abcd").modify("xy")


def test_suffix() -> None:
    assert suffix_with("Z").modify("hello") == "hellZ"
    assert suffix_with("").modify("hello") == "hello"
    with pytest.raises(InvalidArgument):
        suffix_with("long").modify("abc")


def test_space_padding_presets() -> None:
    assert space_left().modify("abc") == " bc"
    assert space_right().modify("abc") == "ab "
    assert spaces_left(2).modify("abcd") == "  cd"
    assert spaces_right(3).modify("abcd") == "a   "
    with pytest.raises(InvalidArgument):
        spaces_left(-1)
    with pytest.raises(InvalidArgument):
        spaces_right(5).modify("abc")


@pytest.mark.parametrize("text", ["a", "ab", "abcdefghij", "x" * 100])
def test_scatter_preserves_length(text: str) -> None:
    modifier = scatter_chars("#$")
    for _ in range(50):
        out = modifier.modify(text)
        assert len(out) == len(text)
        assert set(out) <= set(text) | {"#", "$"}


def test_scatter_always_inserts_at_least_once() -> None:
    modifier = scatter_chars("#")
    for _ in range(100):
        assert "#" in modifier.modify("abcdef")


def test_scatter_count_varies() -> None:
    modifier = scatter_chars("#", rng=random.Random())
    counts = {modifier.modify("a" * 10).count("#") for _ in range(500)}
    assert min(counts) >= 1
    assert max(counts) <= 10
    assert len(counts) > 3


def test_scatter_empty_input() -> None:
    with pytest.raises(InvalidArgument):
        scatter_chars("#").modify("")
    with pytest.raises(InvalidArgument):
        one_of("#").modify("")


def test_scatter_empty_charset() -> None:
    with pytest.raises(InvalidArgument):
        scatter_chars("")


def test_one_of_replaces_single_position() -> None:
    modifier = one_of("#")
    for _ in range(100):
        out = modifier.modify("abcdef")
        assert len(out) == 6
        assert out.count("#") == 1


def test_spaces() -> None:
    out = spaces().modify("abcdef")
    assert len(out) == 6
    assert " " in out


def test_occasionally_is_noop_about_half_the_time() -> None:
    modifier = occasionally("#", cfg=load_config(env={}))
    trials = 2000
    unchanged = sum(modifier.modify("abcdefghij") == "abcdefghij" for _ in range(trials))
    assert 800 < unchanged < 1200


def test_occasionally_probability_from_config(tmp_path) -> None:
    cfg_file = tmp_path / "cfg.yml"
    cfg_file.write_text("modifiers:\n  occasional_probability: 0.0\n")
    modifier = occasionally("#", cfg=load_config(cfg_file, env={}))
    assert all("#" in modifier.modify("abc") for _ in range(50))


def test_special_symbol_presets() -> None:
    cfg = load_config(env={"DATAGEN_SPECIAL_SYMBOLS": "%"})
    assert special_symbol(cfg).modify("abc").count("%") == 1
    out = special_symbols(cfg).modify("abcdef")
    assert "%" in out and len(out) == 6


def test_escape_whitespace_grows_string() -> None:
    modifier = escape_whitespace("\\")
    assert modifier.modify("a b\tc") == "a\\ b\\\tc"
    assert modifier.modify("abc") == "abc"
    assert modifier.modify("  ") == "\\ \\ "
    assert len(escape_whitespace("__").modify("a b")) == 5


def test_batch_modify_preserves_order() -> None:
    out = prefix_with("#").modify(["abc", "def", "ghi"])
    assert out == ["#bc", "#ef", "#hi"]
    assert suffix_with("!").modify(("ab", "cd")) == ["a!", "c!"]
    assert prefix_with("#").modify([]) == []


def test_modifier_is_callable() -> None:
    assert suffix_with("Z")("hello") == "hellZ"


def test_occasionally_rejects_empty_input_every_time() -> None:
    modifier = occasionally("#", cfg=load_config(env={}))
    for _ in range(50):
        with pytest.raises(InvalidArgument):
            modifier.modify("")


def test_occasionally_delegates_to_scatter() -> None:
    modifier = OccasionalScatter("#", probability=0.0, rng=random.Random())
    assert not isinstance(modifier, ScatterChars)
    assert isinstance(modifier.scatter, ScatterChars)
    assert modifier.rng is modifier.scatter.rng
    out = modifier.modify("abcdef")
    assert "#" in out and len(out) == 6
    assert OccasionalScatter("#", probability=1.0).modify("abc") == "abc"
    with pytest.raises(InvalidArgument):
        OccasionalScatter("#", probability=1.5)


def test_escape_whitespace_skips_non_breaking_spaces() -> None:
    modifier = escape_whitespace("_")
    assert modifier.modify("a\u00a0b\u2007c\u202fd") == "a\u00a0b\u2007c\u202fd"
    assert modifier.modify("a b\nc") == "a_ b_\nc"
    assert modifier.modify("a b") == "a_ b"
