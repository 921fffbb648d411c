import pytest

from hexcalc.driver import run
from hexcalc.report import format_error_pointer, format_outcome, format_tokens, format_variables, to_hex_literal


@pytest.mark.parametrize(
    "value, expected",
    [
        pytest.param(0, "0"),
        pytest.param(10, "0a"),
        pytest.param(16, "10"),
        pytest.param(255, "0ff"),
        pytest.param(0x1D4, "1d4"),
        pytest.param(-26, "-1a"),
        pytest.param(-1, "-1"),
    ],
)
def test_to_hex_literal(value: int, expected: str) -> None:
    assert to_hex_literal(value) == expected


def test_format_variables() -> None:
    assert format_variables({"b": -1, "abc": 0x1D4}) == "abc = 468 (1d4)\nb   = -1 (-1)"
    assert format_variables({}) == "(no variables)"


def test_format_outcome() -> None:
    accepted, warned, rejected = run("2 + 3 * 4; x; x := 1 +;").outcomes
    assert format_outcome(accepted) == "2 + 3 * 4; -> ACCEPTED = 14 (0e)"
    assert format_outcome(warned) == "x; -> ACCEPTED: Undefined variable 'x'"
    assert format_outcome(rejected, with_pointer=True) == "\n".join(
        [
            "x := 1 +; -> REJECTED: Expression is incomplete",
            "x := 1 +;",
            "        ^",
        ]
    )


def test_format_error_pointer_elides_long_lines() -> None:
    code = "0123456789abcdefghijklmnopqrstuvwxyz"
    assert format_error_pointer(code, 20) == "...abcdefghijklmnopqrst...\n" + " " * 13 + "^"


def test_format_tokens() -> None:
    (outcome,) = run("a := (1 + b);").outcomes
    assert format_tokens(outcome) == "(:lparen 1:hex +:op b:identifier ):rparen"
