from __future__ import annotations

import pytest

from datagen import InvalidArgument
from datagen.testing import alphanumeric, generate_param, generate_params


@alphanumeric(length=12)
def test_single_param_exact_length(value: str) -> None:
    assert len(value) == 12
    assert value.isalnum() and value.isascii()


@alphanumeric(min_length=3, max_length=7, name="short login")
def test_pair_of_params(value: str, case_name: str) -> None:
    assert 3 <= len(value) <= 7
    assert case_name == "short login"


class TestInsideClass:
    @alphanumeric(length=4)
    def test_method(self, value: str) -> None:
        assert len(value) == 4


@alphanumeric(length=2)
def test_extra_params_are_fixtures(value: str, tmp_path, capsys) -> None:
    assert len(value) == 2
    assert tmp_path.exists()


def _marks(func) -> list[pytest.Mark]:
    return [m for m in getattr(func, "pytestmark", []) if m.name == "parametrize"]


def test_decorator_marks_single() -> None:
    @alphanumeric(length=5, name="five")
    def sample(value: str) -> None: ...

    (mark,) = _marks(sample)
    argnames, values = mark.args
    assert argnames == "value"
    assert len(values) == 1 and len(values[0]) == 5
    assert mark.kwargs["ids"] == ["five"]


def test_decorator_marks_pair() -> None:
    @alphanumeric(length=1, name="n")
    def sample(value: str, name: str) -> None: ...

    (mark,) = _marks(sample)
    argnames, values = mark.args
    assert list(argnames) == ["value", "name"]
    generated, name = values[0]
    assert len(generated) == 1 and name == "n"


def test_decorator_without_params() -> None:
    def sample() -> None: ...

    with pytest.raises(InvalidArgument):
        alphanumeric(length=3)(sample)


def test_helpers() -> None:
    assert len(generate_param(8)) == 8
    assert 0 <= len(generate_param(min_length=0, max_length=2)) <= 2
    value, name = generate_params(3, name="x")
    assert len(value) == 3 and name == "x"
    with pytest.raises(InvalidArgument):
        generate_param(min_length=4, max_length=1)
