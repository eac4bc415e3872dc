"""Contract identifiers (eMA IDs): DIN SPEC 91286, eMI3 and ISO 15118-1.

One immutable record, ContractId, tagged by ContractFormat. Format-specific
rules (instance length, marker letter, check-digit algorithm) live in
ContractLayout as data.

  DIN   IN-TNM-000071-9       instance 6,  DIN check digit
  EMI3  NL-TNM-C00122045-K    instance 8,  'C' marker, ISO check digit
  ISO   NL-TNM-001234567-X    instance 9,  ISO check digit
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Literal, final

SEPARATOR = "-"

type CheckDigitAlgorithm = Literal["DIN", "ISO"]


@final
@dataclass(frozen=True, slots=True)
class ContractLayout:
    """Rendering and validation rules for one contract ID format."""

    instance_length: int
    marker: str  # "" when the format has no marker letter
    algorithm: CheckDigitAlgorithm


class ContractFormat(Enum):
    """Contract ID standard."""

    DIN = "DIN"
    EMI3 = "EMI3"
    ISO = "ISO"

    @property
    def layout(self) -> ContractLayout:
        return _LAYOUTS[self]


_LAYOUTS: dict[ContractFormat, ContractLayout] = {
    ContractFormat.DIN: ContractLayout(instance_length=6, marker="", algorithm="DIN"),
    ContractFormat.EMI3: ContractLayout(instance_length=8, marker="C", algorithm="ISO"),
    ContractFormat.ISO: ContractLayout(instance_length=9, marker="", algorithm="ISO"),
}


@final
@dataclass(frozen=True, slots=True)
class ContractId:
    """A validated contract identifier.

    Build through new_*_contract_id / parse_*_contract_id; the fields are
    assumed normalized (upper case) and valid. check_digit is None when the
    identifier was parsed without one and the parser was told not to attach it.
    """

    format: ContractFormat
    country_code: str
    party_code: str
    instance_value: str
    check_digit: str | None

    @property
    def party_id(self) -> str:
        return f"{self.country_code}{SEPARATOR}{self.party_code}"

    @property
    def compact_party_id(self) -> str:
        return f"{self.country_code}{self.party_code}"

    @property
    def marked_instance(self) -> str:
        """Instance value with the format's marker letter in front ('C' for EMI3)."""
        return f"{self.format.layout.marker}{self.instance_value}"

    def to_string(self) -> str:
        """Canonical form: fields joined by '-', check digit last if present."""
        parts = [self.country_code, self.party_code, self.marked_instance]
        if self.check_digit is not None:
            parts.append(self.check_digit)
        return SEPARATOR.join(parts)

    def compact_string(self) -> str:
        return self.to_string().replace(SEPARATOR, "")

    def compact_string_no_check_digit(self) -> str:
        return f"{self.compact_party_id}{self.marked_instance}"

    def __str__(self) -> str:
        return self.to_string()
