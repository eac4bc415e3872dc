"""Regular grammars for the three contract ID formats.

Patterns are applied with fullmatch. Character classes are spelled out in
ASCII so Unicode digits and letters never match.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import final

from mobilityid.contract.types import ContractFormat

COUNTRY = r"(?P<country>[A-Za-z]{2})"
PARTY = r"(?P<party>[A-Za-z0-9]{3})"
CHECK = r"(?P<check>[A-Za-z0-9])"


def _instance(length: int) -> str:
    return rf"(?P<instance>[A-Za-z0-9]{{{length}}})"


_PATTERNS: dict[ContractFormat, re.Pattern[str]] = {
    ContractFormat.DIN: re.compile(
        rf"{COUNTRY}[*-]?{PARTY}[*-]?{_instance(6)}(?:[*-]?{CHECK})?"
    ),
    ContractFormat.EMI3: re.compile(
        rf"{COUNTRY}-?{PARTY}-?[Cc]{_instance(8)}(?:-?{CHECK})?"
    ),
    ContractFormat.ISO: re.compile(
        rf"{COUNTRY}-?{PARTY}-?{_instance(9)}(?:-?{CHECK})?"
    ),
}


@final
@dataclass(frozen=True, slots=True)
class ContractFields:
    """Upper-cased groups extracted from a matching input."""

    country_code: str
    party_code: str
    instance_value: str
    check_digit: str | None


def match_contract(raw: str, fmt: ContractFormat) -> ContractFields | None:
    """Match raw against fmt's grammar; None when it does not match."""
    m = _PATTERNS[fmt].fullmatch(raw)
    if m is None:
        return None
    check = m.group("check")
    return ContractFields(
        country_code=m.group("country").upper(),
        party_code=m.group("party").upper(),
        instance_value=m.group("instance").upper(),
        check_digit=check.upper() if check is not None else None,
    )
