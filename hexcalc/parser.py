from dataclasses import dataclass, field
from typing import Optional

from hexcalc.errors import syntax_error
from hexcalc.tokenizer import Token, TokenKind
from hexcalc.utils import PrintableEnum
from hexcalc.validator import check_lexemes, check_operand


class BinaryOperator(PrintableEnum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"


ADDITIVE = (BinaryOperator.ADD, BinaryOperator.SUB)
MULTIPLICATIVE = (BinaryOperator.MUL, BinaryOperator.DIV)


@dataclass
class Number:
    value: int
    token: Token = field(repr=False, compare=False)


@dataclass
class Variable:
    name: str
    token: Token = field(repr=False, compare=False)


@dataclass
class BinaryOperation:
    operator: BinaryOperator
    left: "Expression"
    right: "Expression"
    token: Token = field(repr=False, compare=False)


Expression = Number | Variable | BinaryOperation


def parse(tokens: list[Token]) -> Expression:
    """Parse a whole statement's tokens into a single expression.

    Grammar, loosest binding first::

        add_sub := mul_div (("+" | "-") mul_div)*
        mul_div := factor (("*" | "/") factor)*
        factor  := HEX_NUMBER | IDENTIFIER | "(" add_sub ")"

    Every failure is a SYNTAX error, reported on the first offending token in
    the same words ``validate`` would use. Only parentheses nest calls, so
    running out of stack means the statement nests them too deeply.
    """
    check_lexemes(tokens)
    try:
        expr, i = _consume_add_sub(tokens, 0, depth=0)
    except RecursionError:
        raise syntax_error("Expression is too deeply nested", tokens[0]) from None
    if i < len(tokens):
        if tokens[i].kind is TokenKind.BRACKET_CLOSE:
            raise syntax_error("Missing opening parenthesis", tokens[i])
        raise syntax_error(f"Unexpected token '{tokens[i].text}'", tokens[i])
    return expr


def _peek_operator(tokens: list[Token], i: int) -> Optional[BinaryOperator]:
    if i < len(tokens) and tokens[i].kind is TokenKind.OPERATOR:
        return BinaryOperator(tokens[i].text)
    return None


def _consume_add_sub(tokens: list[Token], i: int, depth: int) -> tuple[Expression, int]:
    left, i = _consume_mul_div(tokens, i, depth)
    operator = _peek_operator(tokens, i)
    while operator in ADDITIVE:
        operator_token = tokens[i]
        right, i = _consume_mul_div(tokens, i + 1, depth)
        left = BinaryOperation(operator=operator, left=left, right=right, token=operator_token)
        operator = _peek_operator(tokens, i)
    return left, i


def _consume_mul_div(tokens: list[Token], i: int, depth: int) -> tuple[Expression, int]:
    left, i = _consume_factor(tokens, i, depth)
    operator = _peek_operator(tokens, i)
    while operator in MULTIPLICATIVE:
        operator_token = tokens[i]
        right, i = _consume_factor(tokens, i + 1, depth)
        left = BinaryOperation(operator=operator, left=left, right=right, token=operator_token)
        operator = _peek_operator(tokens, i)
    return left, i


def _consume_factor(tokens: list[Token], i: int, depth: int) -> tuple[Expression, int]:
    if i >= len(tokens):
        if depth > 0:
            raise syntax_error("Missing closing parenthesis")
        raise syntax_error("Expression is incomplete")
    first = tokens[i]
    if first.kind is TokenKind.HEX_NUMBER:
        check_operand(first)
        return Number(value=int(first.text, 16), token=first), i + 1
    elif first.kind is TokenKind.IDENTIFIER:
        check_operand(first)
        return Variable(name=first.text, token=first), i + 1
    elif first.kind is TokenKind.BRACKET_OPEN:
        expr, j = _consume_add_sub(tokens, i + 1, depth + 1)
        if j >= len(tokens):
            raise syntax_error("Missing closing parenthesis", first)
        if tokens[j].kind is not TokenKind.BRACKET_CLOSE:
            raise syntax_error(f"Unexpected token '{tokens[j].text}'", tokens[j])
        return expr, j + 1
    else:
        raise syntax_error(f"Unexpected token '{first.text}'", first)
