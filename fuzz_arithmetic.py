import random

from hexcalc.driver import run
from hexcalc.report import to_hex_literal


def eval_py(code: str) -> int | str:
    try:
        return eval(code)
    except Exception as e:
        return str(e)


def eval_my(code: str) -> int | str:
    outcome = run(code).outcomes[0]
    if outcome.message is not None:
        return outcome.message
    return outcome.value


if __name__ == "__main__":
    operators = ["+", "-", "*", "/"]

    def generate(length: int) -> tuple[str, str]:
        """Returns the same random expression in hexcalc syntax and in Python syntax"""
        my_parts: list[str] = []
        py_parts: list[str] = []
        depth = 0
        for i in range(length):
            if depth < 3 and random.random() < 0.2:
                my_parts.append("(")
                py_parts.append("(")
                depth += 1
            value = random.randint(0, 0x1ff)
            my_parts.append(to_hex_literal(value))
            py_parts.append(str(value))
            while depth > 0 and random.random() < 0.4:
                my_parts.append(")")
                py_parts.append(")")
                depth -= 1
            if i < length - 1:
                op = random.choice(operators)
                my_parts.append(op)
                py_parts.append("//" if op == "/" else op)
        my_parts.extend(")" * depth)
        py_parts.extend(")" * depth)
        return " ".join(my_parts), " ".join(py_parts)

    while True:
        my_code, py_code = generate(random.randint(1, 8))
        res_py = eval_py(py_code)
        res_my = eval_my(my_code)
        if res_py == res_my:
            continue
        if isinstance(res_py, str) and res_my == "Division by zero":
            continue
        print(f"{my_code!r}\n{py_code!r}\npy: {res_py}\nmy: {res_my}\n\n")
