import re

VARIABLE_SUBSTITUTION_FORMAT = r"\$\([_a-zA-Z0-9.-]+(\[([0-9]+|\*)\])?\)"

_variable_substitution_regex = re.compile(VARIABLE_SUBSTITUTION_FORMAT)


def extract_variable_expressions(value: str) -> list[str]:
    return [m.group(0)[2:-1] for m in _variable_substitution_regex.finditer(value)]
