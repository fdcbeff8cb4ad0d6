"""
Amount string parsing with magnitude suffixes.

Accepted grammar
----------------
    digits [ "." digits ] [ k | m | b | t ]

The suffix is case-insensitive and scales the number by powers of one
thousand. No whitespace, sign, thousands separators or exponent notation
are accepted.

Examples
--------
- "100"  -> 100.0
- "1k"   -> 1000.0
- "2.5M" -> 2500000.0
"""

import math
import re

from ConvertErrors import InvalidFormat, InvalidNumber, InvalidSuffix


# ASCII digits only; `\d` would also accept other Unicode digits.
AMOUNT_PATTERN = re.compile(r"([0-9]+(?:\.[0-9]+)?)([kmbt]?)", re.IGNORECASE)

MAGNITUDES = {
    "": 1.0,
    "k": 1_000.0,
    "m": 1_000_000.0,
    "b": 1_000_000_000.0,
    "t": 1_000_000_000_000.0,
}


def parse_amount(text):
    """
    Convert a human-entered amount such as "2.5k" into a float.

    Parameters
    ----------
    text : str
        Amount as typed by the user.

    Returns
    -------
    float
        The numeric part multiplied by the suffix's magnitude.

    Raises
    ------
    InvalidFormat
        If `text` does not match the amount grammar.
    InvalidSuffix
        If the suffix is not one of k/m/b/t. The pattern already restricts
        the suffix, so this only guards the magnitude table.
    InvalidNumber
        If the numeric part, or the number after scaling by the suffix,
        overflows a double.
    """
    match = AMOUNT_PATTERN.fullmatch(text)
    if match is None:
        raise InvalidFormat(text)

    number = float(match.group(1))
    if math.isinf(number):
        raise InvalidNumber(text)

    multiplier = MAGNITUDES.get(match.group(2).lower())
    if multiplier is None:
        raise InvalidSuffix(text)

    result = number * multiplier
    if math.isinf(result):
        raise InvalidNumber(text)
    return result
