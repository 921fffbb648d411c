from dataclasses import dataclass

from hexcalc.utils import PrintableEnum


class TokenKind(PrintableEnum):
    IDENTIFIER = "identifier"
    HEX_NUMBER = "hex"
    OPERATOR = "op"
    ASSIGN = "assign"
    BRACKET_OPEN = "lparen"
    BRACKET_CLOSE = "rparen"
    COMMENT = "comment"
    UNKNOWN = "unknown"

    @property
    def label(self) -> str:
        return self.value


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str
    offset: int

    def __str__(self) -> str:
        return f"<{self.kind}>{self.text}"


WHITESPACE = " \t\r\n"
OPERATORS = "+-*/"
HEX_LETTERS = "abcdef"

SINGLE_CHAR_TOKENS = {
    "(": TokenKind.BRACKET_OPEN,
    ")": TokenKind.BRACKET_CLOSE,
    **{op: TokenKind.OPERATOR for op in OPERATORS},
}


def _is_digit(s: str) -> bool:
    return "0" <= s <= "9"


def _is_identifier_start(s: str) -> bool:
    return s == "_" or "a" <= s <= "z"


def _is_valid_in_identifier(s: str) -> bool:
    return s == "_" or _is_digit(s) or "a" <= s <= "z" or "A" <= s <= "Z"


def _is_valid_in_hex(s: str) -> bool:
    return _is_digit(s) or s in HEX_LETTERS


def _scan_while(code: str, start: int, predicate) -> int:
    end = start
    while end < len(code) and predicate(code[end]):
        end += 1
    return end


def tokenize(code: str, base_offset: int = 0, comment_marker: str = "//") -> list[Token]:
    """Split one statement into tokens.

    Never fails: a character that starts no known token becomes a one-character
    UNKNOWN token. A comment, starting at ``comment_marker``, swallows the rest
    of the input.
    """
    i = 0
    tokens: list[Token] = []
    while i < len(code):
        ch = code[i]
        if ch in WHITESPACE:
            i += 1
        elif code.startswith(comment_marker, i):
            tokens.append(Token(kind=TokenKind.COMMENT, text=code[i:], offset=base_offset + i))
            break
        elif ch == ":":
            if code.startswith(":=", i):
                tokens.append(Token(kind=TokenKind.ASSIGN, text=":=", offset=base_offset + i))
                i += 2
            else:
                tokens.append(Token(kind=TokenKind.UNKNOWN, text=ch, offset=base_offset + i))
                i += 1
        elif ch in SINGLE_CHAR_TOKENS:
            tokens.append(Token(kind=SINGLE_CHAR_TOKENS[ch], text=ch, offset=base_offset + i))
            i += 1
        elif _is_identifier_start(ch):
            ident_end_idx = _scan_while(code, i + 1, _is_valid_in_identifier)
            tokens.append(Token(kind=TokenKind.IDENTIFIER, text=code[i:ident_end_idx], offset=base_offset + i))
            i = ident_end_idx
        elif _is_digit(ch):
            number_end_idx = _scan_while(code, i + 1, _is_valid_in_hex)
            tokens.append(Token(kind=TokenKind.HEX_NUMBER, text=code[i:number_end_idx], offset=base_offset + i))
            i = number_end_idx
        else:
            tokens.append(Token(kind=TokenKind.UNKNOWN, text=ch, offset=base_offset + i))
            i += 1
    return tokens


def untokenize(tokens: list[Token]) -> str:
    """Lay tokens back out at their offsets, relative to the first one.

    Whitespace between tokens becomes plain spaces, so a single-line statement
    without leading whitespace comes back unchanged.
    """
    if not tokens:
        return ""
    start = tokens[0].offset
    result = ""
    for t in tokens:
        result += " " * (t.offset - start - len(result)) + t.text
    return result
