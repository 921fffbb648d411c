import pytest

from hexcalc.errors import CalcError, ErrorKind
from hexcalc.parser import BinaryOperation, BinaryOperator, Number, parse
from hexcalc.runtime import VariableTable, evaluate
from hexcalc.tokenizer import tokenize


@pytest.mark.parametrize(
    "code, variables, expected_ret_val",
    [
        pytest.param("1", {}, 1),
        pytest.param("0ff", {}, 255),
        pytest.param("1a5 + 2f", {}, 0x1D4),
        pytest.param("(((1)))", {}, 1),
        pytest.param("2 + 3 * 4", {}, 14),
        pytest.param("(2 + 3) * 4", {}, 20),
        pytest.param("3 * 4 + 2", {}, 14),
        pytest.param("10 - 4 - 2", {}, 10),
        pytest.param("40 / 4 / 2", {}, 8),
        pytest.param("0 - 1a", {}, -26),
        pytest.param("10 + 2 * (5 + 3 - 1)", {}, 30),
        # floor division
        pytest.param("10 / 3", {}, 5),
        pytest.param("(0 - 1) / 2", {}, -1),
        pytest.param("(0 - 7) / 2", {}, -4),
        pytest.param("7 / (0 - 2)", {}, -4),
        pytest.param("(0 - 6) / (0 - 4)", {}, 1),
        # variables
        pytest.param("a", {"a": 1}, 1),
        pytest.param("a * 2 + b", {"a": 3, "b": 1}, 7),
        pytest.param("_x / aB_1", {"_x": 100, "aB_1": 7}, 14),
    ],
)
def test_eval_arithmetic(code: str, variables: VariableTable, expected_ret_val: int) -> None:
    assert evaluate(tokenize(code), variables) == expected_ret_val


@pytest.mark.parametrize(
    "code, variables, expected_kind, expected_errmsg",
    [
        pytest.param("x + 1", {}, ErrorKind.SEMANTIC, "Undefined variable 'x'"),
        pytest.param("a + b * 2", {}, ErrorKind.SEMANTIC, "Undefined variable 'a'"),
        pytest.param("a + b * 2", {"a": 1}, ErrorKind.SEMANTIC, "Undefined variable 'b'"),
        pytest.param("1 / 0", {}, ErrorKind.SEMANTIC, "Division by zero"),
        pytest.param("1 / (2 - 2)", {}, ErrorKind.SEMANTIC, "Division by zero"),
        pytest.param("x / 0", {}, ErrorKind.SEMANTIC, "Undefined variable 'x'"),
        pytest.param("1 / 0 + x", {}, ErrorKind.SEMANTIC, "Division by zero"),
        # the whole expression is parsed before anything is evaluated
        pytest.param("x +", {}, ErrorKind.SYNTAX, "Expression is incomplete"),
        pytest.param("x / 0)", {}, ErrorKind.SYNTAX, "Missing opening parenthesis"),
        pytest.param("(1 / 0", {}, ErrorKind.SYNTAX, "Missing closing parenthesis"),
    ],
)
def test_eval_errors(code: str, variables: VariableTable, expected_kind: ErrorKind, expected_errmsg: str) -> None:
    with pytest.raises(CalcError) as exc_info:
        evaluate(tokenize(code), variables)
    assert exc_info.value.kind is expected_kind
    assert exc_info.value.errmsg == expected_errmsg


def test_evaluate_does_not_touch_variables() -> None:
    variables = {"a": 1}
    evaluate(tokenize("a + 1"), variables)
    assert variables == {"a": 1}


def test_parse_precedence_and_associativity() -> None:
    tokens = tokenize("1 - 2 - 3 * 4")
    one, _, two, _, three, _, four = tokens
    assert parse(tokens) == BinaryOperation(
        operator=BinaryOperator.SUB,
        left=BinaryOperation(operator=BinaryOperator.SUB, left=Number(1, one), right=Number(2, two), token=tokens[1]),
        right=BinaryOperation(
            operator=BinaryOperator.MUL, left=Number(3, three), right=Number(4, four), token=tokens[5]
        ),
        token=tokens[3],
    )


def test_eval_long_chain() -> None:
    assert evaluate(tokenize(" - ".join(["0"] + ["1"] * 3000)), {}) == -3000
    assert evaluate(tokenize(" / ".join(["0ffff"] + ["2"] * 20)), {}) == 0


def test_eval_deep_nesting_is_syntax_error() -> None:
    tokens = tokenize("(" * 5000 + "1" + ")" * 5000)
    with pytest.raises(CalcError) as exc_info:
        evaluate(tokens, {})
    assert exc_info.value.kind is ErrorKind.SYNTAX
    assert exc_info.value.errmsg == "Expression is too deeply nested"
    assert exc_info.value.token == tokens[0]
