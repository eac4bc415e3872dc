"""ISO 15118-1 / eMI3 check digit over 14 characters.

Each character is enciphered into a 2x2 matrix. The top row is weighted by
powers of p1 = [[0,1],[1,1]] and reduced mod 2, the bottom row by powers of
p2 = [[0,1],[1,2]] and reduced mod 3. The resulting matrix is deciphered
back into the check character.

Tables are built once at import and never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import final

from mobilityid.core.errors import CheckDigitComputationError
from mobilityid.core.result import Err, Ok

CODE_LENGTH = 14


@final
@dataclass(frozen=True, slots=True)
class _Matrix:
    m11: int
    m12: int
    m21: int
    m22: int

    def __matmul__(self, other: _Matrix) -> _Matrix:
        return _Matrix(
            m11=self.m11 * other.m11 + self.m12 * other.m21,
            m12=self.m11 * other.m12 + self.m12 * other.m22,
            m21=self.m21 * other.m11 + self.m22 * other.m21,
            m22=self.m21 * other.m12 + self.m22 * other.m22,
        )

    @staticmethod
    def decode(x: int) -> _Matrix:
        return _Matrix(x & 1, (x >> 1) & 1, (x >> 2) & 3, x >> 4)


@final
@dataclass(frozen=True, slots=True)
class _Vec:
    v1: int
    v2: int

    def __add__(self, other: _Vec) -> _Vec:
        return _Vec(self.v1 + other.v1, self.v2 + other.v2)

    def __matmul__(self, m: _Matrix) -> _Vec:
        # row vector times matrix
        return _Vec(
            self.v1 * m.m11 + self.v2 * m.m21,
            self.v1 * m.m12 + self.v2 * m.m22,
        )


_CIPHER: dict[str, int] = {
    "0": 0, "1": 16, "2": 32,
    "3": 4, "4": 20, "5": 36,
    "6": 8, "7": 24, "8": 40,
    "9": 2, "A": 18, "B": 34,
    "C": 6, "D": 22, "E": 38,
    "F": 10, "G": 26, "H": 42,
    "I": 1, "J": 17, "K": 33,
    "L": 5, "M": 21, "N": 37,
    "O": 9, "P": 25, "Q": 41,
    "R": 3, "S": 19, "T": 35,
    "U": 7, "V": 23, "W": 39,
    "X": 11, "Y": 27, "Z": 43,
}

_ENCODING: dict[str, _Matrix] = {c: _Matrix.decode(x) for c, x in _CIPHER.items()}
_DECODING: dict[_Matrix, str] = {m: c for c, m in _ENCODING.items()}

# -p2^(-15)
_NEG_P2_MINUS_15 = _Matrix(0, 2, 2, 1)


def _powers(seed: _Matrix, count: int) -> tuple[_Matrix, ...]:
    result = [seed]
    for _ in range(count - 1):
        result.append(result[-1] @ seed)
    return tuple(result)


_P1S = _powers(_Matrix(0, 1, 1, 1), CODE_LENGTH)
_P2S = _powers(_Matrix(0, 1, 1, 2), CODE_LENGTH)

_ALLOWED = frozenset(_CIPHER)


def _comp_err(message: str, code: str, value: str) -> Err[CheckDigitComputationError]:
    return Err(CheckDigitComputationError(
        message=message, code=code,
        source="checkdigit.iso.iso_check_digit", value=value,
    ))


def iso_check_digit(code: str) -> Ok[str] | Err[CheckDigitComputationError]:
    """Compute the ISO/eMI3 check character for a 14-character code.

    code must be exactly 14 uppercase ASCII letters or digits, e.g.
    "NLTNMC00122045" (EMI3, marker included) or "NLTNM001234567" (ISO).
    """
    if len(code) != CODE_LENGTH:
        return _comp_err(
            f"code must have a length of {CODE_LENGTH}, got {len(code)}",
            "CHECK_DIGIT_LENGTH", code,
        )
    if not all(c in _ALLOWED for c in code):
        return _comp_err(
            f"code must consist of uppercase ASCII letters and digits only, got '{code}'",
            "CHECK_DIGIT_CHARSET", code,
        )

    matrices = [_ENCODING[c] for c in code]

    t1 = _Vec(0, 0)
    t2 = _Vec(0, 0)
    for m, p1, p2 in zip(matrices, _P1S, _P2S, strict=True):
        t1 = t1 + (_Vec(m.m11, m.m12) @ p1)
        t2 = t2 + (_Vec(m.m21, m.m22) @ p2)

    t2m = t2 @ _NEG_P2_MINUS_15
    m15 = _Matrix(t1.v1 & 1, t1.v2 & 1, t2m.v1 % 3, t2m.v2 % 3)

    check = _DECODING.get(m15)
    if check is None:
        return _comp_err(
            f"undecodable check matrix {m15} for '{code}'", "CHECK_DIGIT_UNDECODABLE", code,
        )
    return Ok(check)
