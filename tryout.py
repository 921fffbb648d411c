from hexcalc.driver import run, split_statements
from hexcalc.report import format_outcome, format_tokens, format_variables
from hexcalc.tokenizer import untokenize

SAMPLE = """abc := 1a5 + 2f;
_var := 0ff * (x - 1b);
// This is a comment;
new := a + b * 2;
undef := 5 + ;
"""

for code in [
    SAMPLE,
    "10 / 3; (0 - 1) / 2; 2 + 3 * 4",
    "a := 0ff; b := a / 0; c := a - 100; c",
    "Abc := 1; x := 1 +* 2; y := (1; z := 1); w := 1 : 2",
]:
    print("=" * 10)
    print(f"code: {code!r}")
    print(f"statements: {[s.text for s in split_statements(code)]}")

    result = run(code)
    for i, outcome in enumerate(result.outcomes):
        print(f" {i + 1:> 2}: {format_outcome(outcome, with_pointer=True)}")
        if outcome.tokens:
            print(f"     expression: {untokenize(list(outcome.tokens))}")
            print(f"     tokens: {format_tokens(outcome)}")
    print(f"variables:\n{format_variables(result.variables)}")
