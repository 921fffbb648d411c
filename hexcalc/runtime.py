from typing import Callable

from hexcalc.errors import semantic_error
from hexcalc.parser import BinaryOperation, BinaryOperator, Expression, Number, Variable, parse
from hexcalc.tokenizer import Token

VariableTable = dict[str, int]

BinaryOperationImpl = Callable[[int, int], int]


def _div(a: int, b: int) -> int:
    # floors toward negative infinity, not toward zero
    return a // b


binary_operation_impls: dict[BinaryOperator, BinaryOperationImpl] = {
    BinaryOperator.ADD: lambda a, b: a + b,
    BinaryOperator.SUB: lambda a, b: a - b,
    BinaryOperator.MUL: lambda a, b: a * b,
    BinaryOperator.DIV: _div,
}


def evaluate(tokens: list[Token], variables: VariableTable) -> int:
    """Parse and evaluate one expression.

    The whole expression is parsed before anything is evaluated, so a SYNTAX
    error anywhere wins over a SEMANTIC one. ``variables`` is only read.
    """
    return evaluate_expression(parse(tokens), variables)


def evaluate_expression(expression: Expression, variables: VariableTable) -> int:
    """Walk the tree with an explicit stack, left operand first.

    Long operator chains parse into deep left spines, so the walk must not
    recurse.
    """
    results: list[int] = []
    pending: list[tuple[Expression, bool]] = [(expression, False)]
    while pending:
        expr, operands_done = pending.pop()
        if isinstance(expr, Number):
            results.append(expr.value)
        elif isinstance(expr, Variable):
            if expr.name not in variables:
                raise semantic_error(f"Undefined variable '{expr.name}'", expr.token)
            results.append(variables[expr.name])
        elif isinstance(expr, BinaryOperation):
            if not operands_done:
                pending.append((expr, True))
                pending.append((expr.right, False))
                pending.append((expr.left, False))
                continue
            right_res = results.pop()
            left_res = results.pop()
            if expr.operator is BinaryOperator.DIV and right_res == 0:
                raise semantic_error("Division by zero", expr.token)
            results.append(binary_operation_impls[expr.operator](left_res, right_res))
        else:
            raise RuntimeError(f"Unexpected expression type: {expr}")
    return results.pop()
