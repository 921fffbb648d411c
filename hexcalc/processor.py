import enum
import logging
from dataclasses import dataclass
from typing import Optional

from hexcalc.config import DEFAULT_CONFIG, LanguageConfig
from hexcalc.errors import CalcError, ErrorKind
from hexcalc.parser import Variable
from hexcalc.runtime import VariableTable, evaluate, evaluate_expression
from hexcalc.tokenizer import Token, TokenKind, tokenize
from hexcalc.utils import PrintableEnum
from hexcalc.validator import check_lexemes, is_valid_identifier, starts_uppercase, validate

logger = logging.getLogger(__name__)


class StatementStatus(PrintableEnum):
    ACCEPTED = enum.auto()
    REJECTED = enum.auto()


@dataclass(frozen=True)
class StatementOutcome:
    """Verdict on one statement.

    An ACCEPTED outcome may still carry a ``message``: the statement was
    well-formed but could not be evaluated (undefined variable, division by
    zero), and any assignment it makes was NOT applied.
    """

    raw_text: str
    status: StatementStatus
    message: Optional[str] = None
    tokens: tuple[Token, ...] = ()
    value: Optional[int] = None
    error_offset: Optional[int] = None

    @property
    def accepted(self) -> bool:
        return self.status is StatementStatus.ACCEPTED


def _accepted(raw_text: str, tokens: list[Token], value: Optional[int] = None) -> StatementOutcome:
    return StatementOutcome(
        raw_text=raw_text, status=StatementStatus.ACCEPTED, tokens=tuple(tokens), value=value
    )


def _rejected(
    raw_text: str, message: str, tokens: Optional[list[Token]] = None, error_offset: int = 0
) -> StatementOutcome:
    return StatementOutcome(
        raw_text=raw_text,
        status=StatementStatus.REJECTED,
        message=message,
        tokens=tuple(tokens or ()),
        error_offset=error_offset,
    )


def _from_error(raw_text: str, error: CalcError, tokens: list[Token]) -> StatementOutcome:
    error_offset = error.token.offset if error.token is not None else len(raw_text)
    if error.kind is ErrorKind.SEMANTIC:
        return StatementOutcome(
            raw_text=raw_text,
            status=StatementStatus.ACCEPTED,
            message=error.errmsg,
            tokens=tuple(tokens),
            error_offset=error_offset,
        )
    return _rejected(raw_text, error.errmsg, tokens, error_offset)


def process(
    statement: str, variables: VariableTable, config: LanguageConfig = DEFAULT_CONFIG
) -> StatementOutcome:
    """Analyse one statement (without its terminator), updating ``variables`` on a successful assignment"""
    trimmed = statement.strip()
    if trimmed.startswith(config.comment_marker):
        return _accepted(trimmed, tokens=[])

    assign_idx = trimmed.find(config.assign_marker)
    if assign_idx >= 0:
        outcome = _process_assignment(trimmed, assign_idx, variables, config)
    else:
        outcome = _process_expression(trimmed, variables, config)
    logger.debug("Statement %r: %s %s", trimmed, outcome.status, outcome.message or "")
    return outcome


def _process_assignment(
    trimmed: str, assign_idx: int, variables: VariableTable, config: LanguageConfig
) -> StatementOutcome:
    target = trimmed[:assign_idx].strip()
    if not is_valid_identifier(target):
        return _rejected(trimmed, f"Left side of {config.assign_marker} must be identifier (got '{target}')")
    if starts_uppercase(target):
        return _rejected(trimmed, f"Identifier '{target}' cannot start with uppercase letter")

    right_start = assign_idx + len(config.assign_marker)
    tokens = tokenize(trimmed[right_start:], base_offset=right_start, comment_marker=config.comment_marker)
    try:
        check_lexemes(tokens)
        value = evaluate(tokens, variables)
    except CalcError as e:
        return _from_error(trimmed, e, tokens)

    variables[target] = value
    logger.debug("Assigned %s = %d", target, value)
    return _accepted(trimmed, tokens, value)


def _process_expression(trimmed: str, variables: VariableTable, config: LanguageConfig) -> StatementOutcome:
    tokens = tokenize(trimmed, comment_marker=config.comment_marker)
    if not tokens:
        return _accepted(trimmed, tokens)

    try:
        if len(tokens) == 1:
            value = _evaluate_single_token(tokens[0], variables)
        else:
            value = evaluate(tokens, variables)
    except CalcError as e:
        return _from_error(trimmed, e, tokens)
    return _accepted(trimmed, tokens, value)


def _evaluate_single_token(token: Token, variables: VariableTable) -> int:
    # a lone operand needs no parser, only the literal/identifier rules and a table lookup
    validate([token])
    if token.kind is TokenKind.HEX_NUMBER:
        return int(token.text, 16)
    return evaluate_expression(Variable(name=token.text, token=token), variables)
