"""Regular grammars for DIN and ISO EVSE IDs (applied with fullmatch)."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import final

from mobilityid.evse.types import EvseFormat

DIN_OUTLET_MAX = 32
ISO_OUTLET_MAX = 31

_PATTERNS: dict[EvseFormat, re.Pattern[str]] = {
    EvseFormat.DIN: re.compile(
        r"\+?(?P<country>[0-9]{1,3})\*(?P<operator>[0-9]{3,6})\*"
        rf"(?P<outlet>[0-9*]{{1,{DIN_OUTLET_MAX}}})"
    ),
    EvseFormat.ISO: re.compile(
        r"(?P<country>[A-Za-z]{2})\*?(?P<operator>[A-Za-z0-9]{3})\*?[Ee]"
        rf"(?P<outlet>[A-Za-z0-9*]{{1,{ISO_OUTLET_MAX}}})"
    ),
}


@final
@dataclass(frozen=True, slots=True)
class EvseFields:
    """Upper-cased groups of a matching input. DIN country has no '+'."""

    country_code: str
    operator_code: str
    power_outlet_id: str


def match_evse(raw: str, fmt: EvseFormat) -> EvseFields | None:
    m = _PATTERNS[fmt].fullmatch(raw)
    if m is None:
        return None
    return EvseFields(
        country_code=m.group("country").upper(),
        operator_code=m.group("operator").upper(),
        power_outlet_id=m.group("outlet").upper(),
    )
