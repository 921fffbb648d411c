import re

from hexcalc.errors import syntax_error
from hexcalc.tokenizer import Token, TokenKind

HEX_LITERAL_RE = re.compile(r"[0-9][0-9a-f]*")
IDENTIFIER_RE = re.compile(r"[a-z_][A-Za-z0-9_]*")


def is_valid_hex_literal(text: str) -> bool:
    return HEX_LITERAL_RE.fullmatch(text) is not None


def is_valid_identifier(text: str) -> bool:
    return IDENTIFIER_RE.fullmatch(text) is not None


def starts_uppercase(text: str) -> bool:
    return text[:1].isascii() and text[:1].isupper()


def check_lexemes(tokens: list[Token]) -> None:
    """Reject tokens that can never be part of an expression"""
    for t in tokens:
        if t.kind is TokenKind.UNKNOWN:
            raise syntax_error(f"Unknown token '{t.text}'", t)
        if t.kind is TokenKind.COMMENT:
            raise syntax_error("Comment inside expression is not allowed (must end with ';')", t)


def check_operand(token: Token) -> None:
    """Literal and identifier rules shared by the validator, the parser and single-token statements"""
    if token.kind is TokenKind.HEX_NUMBER and not is_valid_hex_literal(token.text):
        raise syntax_error(f"Invalid hex literal '{token.text}'", token)
    if token.kind is TokenKind.IDENTIFIER and starts_uppercase(token.text):
        raise syntax_error(f"Identifier '{token.text}' cannot start with uppercase letter", token)


def validate(tokens: list[Token]) -> None:
    """Check that tokens form a well-formed expression, without evaluating it.

    Raises a SYNTAX ``CalcError`` describing the first problem found.
    """
    check_lexemes(tokens)
    if not tokens:
        raise syntax_error("Expression is incomplete")

    expect_operand = True
    depth = 0
    for t in tokens:
        if expect_operand:
            if t.kind in (TokenKind.HEX_NUMBER, TokenKind.IDENTIFIER):
                check_operand(t)
                expect_operand = False
            elif t.kind is TokenKind.BRACKET_OPEN:
                depth += 1
            else:
                raise syntax_error(f"Unexpected token '{t.text}'", t)
        else:
            if t.kind is TokenKind.OPERATOR:
                expect_operand = True
            elif t.kind is TokenKind.BRACKET_CLOSE:
                if depth == 0:
                    raise syntax_error("Missing opening parenthesis", t)
                depth -= 1
            else:
                raise syntax_error(f"Unexpected token '{t.text}'", t)

    if depth != 0:
        raise syntax_error("Missing closing parenthesis")
    if expect_operand:
        raise syntax_error("Expression is incomplete")
