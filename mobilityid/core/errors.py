"""Error values returned by mobilityid — nothing here is raised.

Every error is a frozen dataclass that can be pattern-matched, compared
and serialized. Errors carry no timestamp: identical input always produces
an equal error. Base class MobilityIdError, five @final subclasses.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import final


@dataclass(frozen=True, slots=True)
class MobilityIdError:
    """Base error value. NOT @final — has subclasses."""

    message: str
    code: str
    source: str  # "module.function" that produced this error

    def with_context(self, context: str) -> MobilityIdError:
        """Return a copy with context prepended to message."""
        return replace(self, message=f"{context}: {self.message}")

    def to_dict(self) -> dict[str, object]:
        return {
            "message": self.message,
            "code": self.code,
            "source": self.source,
        }

    def __str__(self) -> str:
        return self.message


@final
@dataclass(frozen=True, slots=True)
class FieldViolation:
    """A single field that failed validation."""

    path: str  # e.g. "party_code"
    constraint: str  # e.g. "exactly 3 alphanumeric characters"
    actual_value: str


@final
@dataclass(frozen=True, slots=True)
class FormatError(MobilityIdError):
    """Input does not match the format's grammar at all."""

    format_name: str
    raw: str

    def to_dict(self) -> dict[str, object]:
        return {
            **MobilityIdError.to_dict(self),
            "format_name": self.format_name,
            "raw": self.raw,
        }


@final
@dataclass(frozen=True, slots=True)
class FieldValidationError(MobilityIdError):
    """One or more fields are out of range or fail the country lookup."""

    fields: tuple[FieldViolation, ...]

    def to_dict(self) -> dict[str, object]:
        return {
            **MobilityIdError.to_dict(self),
            "fields": [
                {"path": f.path, "constraint": f.constraint, "actual_value": f.actual_value}
                for f in self.fields
            ],
        }


@final
@dataclass(frozen=True, slots=True)
class CheckDigitMismatchError(MobilityIdError):
    """Supplied check digit differs from the recomputed one."""

    expected: str
    actual: str

    def to_dict(self) -> dict[str, object]:
        return {
            **MobilityIdError.to_dict(self),
            "expected": self.expected,
            "actual": self.actual,
        }


@final
@dataclass(frozen=True, slots=True)
class CheckDigitComputationError(MobilityIdError):
    """The ISO/EMI3 check digit cannot be computed for this input."""

    value: str

    def to_dict(self) -> dict[str, object]:
        return {**MobilityIdError.to_dict(self), "value": self.value}


@final
@dataclass(frozen=True, slots=True)
class ConversionError(MobilityIdError):
    """Source identifier cannot be expressed in the target format."""

    from_format: str
    to_format: str

    def to_dict(self) -> dict[str, object]:
        return {
            **MobilityIdError.to_dict(self),
            "from_format": self.from_format,
            "to_format": self.to_format,
        }
