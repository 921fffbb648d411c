from hexcalc.processor import StatementOutcome
from hexcalc.runtime import VariableTable


def to_hex_literal(value: int) -> str:
    """Render a value the way it would be written in a program: 255 => 0ff, -26 => -1a"""
    digits = format(abs(value), "x")
    if not digits[0].isdigit():
        digits = "0" + digits
    return ("-" if value < 0 else "") + digits


def format_error_pointer(code: str, error_char_idx: int) -> str:
    print_start_idx = max(0, error_char_idx - 10)
    print_ellipsis_pre = print_start_idx > 0
    print_end_idx = min(len(code), error_char_idx + 10)
    print_ellipsis_post = print_end_idx < len(code)
    return "\n".join(
        [
            (
                ("..." if print_ellipsis_pre else "")
                + f"{code[print_start_idx:print_end_idx]}"
                + ("..." if print_ellipsis_post else "")
            ),
            " " * (error_char_idx - print_start_idx + (3 if print_ellipsis_pre else 0)) + "^",
        ]
    )


def format_tokens(outcome: StatementOutcome) -> str:
    return " ".join(f"{t.text}:{t.kind.label}" for t in outcome.tokens)


def format_outcome(outcome: StatementOutcome, with_pointer: bool = False) -> str:
    line = f"{outcome.raw_text} -> {outcome.status}"
    if outcome.message:
        line += f": {outcome.message}"
    elif outcome.value is not None:
        line += f" = {outcome.value} ({to_hex_literal(outcome.value)})"
    if with_pointer and outcome.message and outcome.error_offset is not None:
        line += "\n" + format_error_pointer(outcome.raw_text, outcome.error_offset)
    return line


def format_variables(variables: VariableTable) -> str:
    if not variables:
        return "(no variables)"
    width = max(len(name) for name in variables)
    return "\n".join(
        f"{name: <{width}} = {value} ({to_hex_literal(value)})" for name, value in sorted(variables.items())
    )
