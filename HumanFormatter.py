"""
Number formatting for the result line.

Two styles are supported:

- human: scaled to a magnitude suffix with a fixed number of decimals,
  e.g. 1000 -> "1.00k", 2500000 -> "2.50M", 910 -> "910.00".
- real: the exact value, without a trailing ".0" for whole numbers.

Suffixes follow SI prefixes (k, M, G, T, ...) with base 1000 and no
separator between the number and the suffix.
"""

SUFFIXES = ["", "k", "M", "G", "T", "P", "E", "Z", "Y"]
BASE = 1000.0


def format_human(value: float, decimals: int = 2) -> str:
    magnitude = 0
    scaled = abs(value)
    while scaled >= BASE and magnitude < len(SUFFIXES) - 1:
        scaled /= BASE
        magnitude += 1
    scaled = value / BASE ** magnitude
    return f"{scaled:.{decimals}f}{SUFFIXES[magnitude]}"


def format_real(value: float) -> str:
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)
