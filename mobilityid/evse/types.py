"""EVSE (charge point) identifiers: DIN SPEC 91286 and ISO 15118 / eMI3.

  DIN  +49*810*000*438      phone country code, 3-6 digit operator
  ISO  DE*AB7*E840*6487     alpha-2 country, 3 character operator, 'E' marker

No check digit in either format.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import final

SEPARATOR = "*"
PARTY_SEPARATOR = "-"


class EvseFormat(Enum):
    """EVSE ID standard."""

    DIN = "DIN"
    ISO = "ISO"

    @property
    def marker(self) -> str:
        return "E" if self is EvseFormat.ISO else ""


@final
@dataclass(frozen=True, slots=True)
class EvseId:
    """A validated EVSE identifier.

    Build through new_*_evse_id / parse_*_evse_id. For DIN IDs country_code
    always carries its leading '+'.
    """

    format: EvseFormat
    country_code: str
    operator_code: str
    power_outlet_id: str

    @property
    def party_id(self) -> str:
        return f"{self.country_code}{PARTY_SEPARATOR}{self.operator_code}"

    @property
    def compact_party_id(self) -> str:
        return f"{self.country_code}{self.operator_code}"

    def to_string(self) -> str:
        return SEPARATOR.join(
            (self.country_code, self.operator_code, f"{self.format.marker}{self.power_outlet_id}")
        )

    def compact_string(self) -> str:
        """All '*' removed, including those inside the outlet ID."""
        return self.to_string().replace(SEPARATOR, "")

    def __str__(self) -> str:
        return self.to_string()
