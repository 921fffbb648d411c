import enum
from dataclasses import dataclass
from typing import Optional

from hexcalc.tokenizer import Token
from hexcalc.utils import PrintableEnum


class ErrorKind(PrintableEnum):
    SYNTAX = enum.auto()
    SEMANTIC = enum.auto()


@dataclass
class CalcError(Exception):
    """Any failure to analyse a statement.

    ``kind`` decides what happens to the statement: SYNTAX rejects it, SEMANTIC
    accepts it with a warning but discards its value. ``token`` is the offending
    token, or None when the input ran out.
    """

    kind: ErrorKind
    errmsg: str
    token: Optional[Token] = None

    def __str__(self) -> str:
        return self.errmsg


def syntax_error(errmsg: str, token: Optional[Token] = None) -> CalcError:
    return CalcError(kind=ErrorKind.SYNTAX, errmsg=errmsg, token=token)


def semantic_error(errmsg: str, token: Optional[Token] = None) -> CalcError:
    return CalcError(kind=ErrorKind.SEMANTIC, errmsg=errmsg, token=token)
