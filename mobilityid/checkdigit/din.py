"""DIN SPEC 91286 check digit: weighted positional sum modulo 11.

Letters count as two decimal digits (A=10 ... Z=35), each weighted by the
next power of two. A remainder of 10 is written as 'X'.
"""

from __future__ import annotations

_ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_VALUES: dict[str, int] = {c: i for i, c in enumerate(_ALPHABET)}


def din_check_digit(code: str) -> str:
    """Compute the DIN check character for country+party+instance.

    Never fails. Only ASCII letters are upper-cased; characters outside
    0-9/A-Z weigh as 0.
    """
    total = 0
    coeff = 0
    for c in code:
        value = _VALUES.get(c.upper() if c.isascii() else c, 0)
        if value < 10:
            total += value << coeff
            coeff += 1
        else:
            tens, units = divmod(value, 10)
            total += (tens << coeff) + (units << (coeff + 1))
            coeff += 2

    mod = total % 11
    if mod >= 10:
        return "X"
    return str(mod)
