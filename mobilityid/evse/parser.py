"""Smart constructors and parsers for EVSE IDs.

Total functions: Ok[EvseId] or Err[MobilityIdError], never raise.
"""

from __future__ import annotations

import logging

from mobilityid.core.config import DEFAULT_CONFIG, ParserConfig
from mobilityid.core.errors import FieldValidationError, FieldViolation, FormatError, MobilityIdError
from mobilityid.core.registry import CountryRegistry
from mobilityid.core.result import Err, Ok
from mobilityid.evse.grammar import DIN_OUTLET_MAX, ISO_OUTLET_MAX, match_evse
from mobilityid.evse.types import EvseFormat, EvseId

logger = logging.getLogger(__name__)

_SOURCE = "evse.parser"
_DIGITS = frozenset("0123456789")

# Built DIN EVSE IDs allow one outlet character less than parsed ones.
_DIN_NEW_OUTLET_MAX = DIN_OUTLET_MAX - 1


def _upper_ascii(value: str) -> str:
    """Upper-case ASCII input; non-ASCII is left as given for validation to reject."""
    return value.upper() if value.isascii() else value


def _only(value: str, allowed: frozenset[str] | None = None, *, star: bool = False) -> bool:
    """True when every character is an ASCII digit/letter (or '*' if star)."""
    for c in value:
        if c == "*" and star:
            continue
        if allowed is not None:
            if c not in allowed:
                return False
        elif not (c.isascii() and c.isalnum()):
            return False
    return True


def _din_violations(
    country_code: str, operator_code: str, power_outlet_id: str, outlet_max: int,
) -> list[FieldViolation]:
    violations: list[FieldViolation] = []
    digits = country_code.removeprefix("+")
    if not (1 <= len(digits) <= 3) or not _only(digits, _DIGITS):
        violations.append(FieldViolation(
            path="country_code", constraint="optional '+' followed by 1 to 3 digits",
            actual_value=country_code,
        ))
    if not (3 <= len(operator_code) <= 6) or not _only(operator_code, _DIGITS):
        violations.append(FieldViolation(
            path="operator_code", constraint="3 to 6 digits", actual_value=operator_code,
        ))
    if not (1 <= len(power_outlet_id) <= outlet_max) or not _only(
        power_outlet_id, _DIGITS, star=True,
    ):
        violations.append(FieldViolation(
            path="power_outlet_id",
            constraint=f"1 to {outlet_max} digits or '*'",
            actual_value=power_outlet_id,
        ))
    return violations


def _iso_violations(
    country_code: str, operator_code: str, power_outlet_id: str, registry: CountryRegistry,
) -> list[FieldViolation]:
    violations: list[FieldViolation] = []
    if len(country_code) != 2 or not (country_code.isascii() and country_code.isalpha()):
        violations.append(FieldViolation(
            path="country_code", constraint="exactly 2 ASCII letters", actual_value=country_code,
        ))
    elif not registry.is_valid_country_code(country_code):
        violations.append(FieldViolation(
            path="country_code", constraint="assigned ISO 3166-1 alpha-2 code",
            actual_value=country_code,
        ))
    if len(operator_code) != 3 or not _only(operator_code):
        violations.append(FieldViolation(
            path="operator_code", constraint="exactly 3 alphanumeric characters",
            actual_value=operator_code,
        ))
    if not (1 <= len(power_outlet_id) <= ISO_OUTLET_MAX) or not _only(power_outlet_id, star=True):
        violations.append(FieldViolation(
            path="power_outlet_id",
            constraint=f"1 to {ISO_OUTLET_MAX} alphanumeric characters or '*'",
            actual_value=power_outlet_id,
        ))
    return violations


def _build(
    fmt: EvseFormat,
    country_code: str,
    operator_code: str,
    power_outlet_id: str,
    *,
    registry: CountryRegistry,
    source: str,
    din_outlet_max: int,
) -> Ok[EvseId] | Err[MobilityIdError]:
    country_code = _upper_ascii(country_code)
    operator_code = _upper_ascii(operator_code)
    power_outlet_id = _upper_ascii(power_outlet_id)

    if fmt is EvseFormat.DIN:
        violations = _din_violations(
            country_code, operator_code, power_outlet_id, din_outlet_max,
        )
    else:
        violations = _iso_violations(country_code, operator_code, power_outlet_id, registry)

    if violations:
        return Err(FieldValidationError(
            message=f"{fmt.value} EVSE ID validation failed: "
            + "; ".join(f"{v.path} '{v.actual_value}' must be {v.constraint}" for v in violations),
            code="FIELD_INVALID",
            source=source,
            fields=tuple(violations),
        ))

    if fmt is EvseFormat.DIN and not country_code.startswith("+"):
        country_code = f"+{country_code}"

    return Ok(EvseId(
        format=fmt,
        country_code=country_code,
        operator_code=operator_code,
        power_outlet_id=power_outlet_id,
    ))


def new_evse_id(
    fmt: EvseFormat,
    country_code: str,
    operator_code: str,
    power_outlet_id: str,
    *,
    config: ParserConfig = DEFAULT_CONFIG,
) -> Ok[EvseId] | Err[MobilityIdError]:
    """Build an EVSE ID of either format from its fields."""
    return _build(
        fmt, country_code, operator_code, power_outlet_id,
        registry=config.registry, source=f"{_SOURCE}.new_{fmt.value.lower()}_evse_id",
        din_outlet_max=_DIN_NEW_OUTLET_MAX,
    )


def new_din_evse_id(
    country_code: str,
    operator_code: str,
    power_outlet_id: str,
    *,
    config: ParserConfig = DEFAULT_CONFIG,
) -> Ok[EvseId] | Err[MobilityIdError]:
    """country_code is a dialing code with or without '+', e.g. '+49' or '49'."""
    return new_evse_id(EvseFormat.DIN, country_code, operator_code, power_outlet_id, config=config)


def new_iso_evse_id(
    country_code: str,
    operator_code: str,
    power_outlet_id: str,
    *,
    config: ParserConfig = DEFAULT_CONFIG,
) -> Ok[EvseId] | Err[MobilityIdError]:
    """power_outlet_id excludes the 'E' marker."""
    return new_evse_id(EvseFormat.ISO, country_code, operator_code, power_outlet_id, config=config)


def parse_evse_id(
    raw: str,
    fmt: EvseFormat,
    *,
    config: ParserConfig = DEFAULT_CONFIG,
) -> Ok[EvseId] | Err[MobilityIdError]:
    source = f"{_SOURCE}.parse_{fmt.value.lower()}_evse_id"
    fields = match_evse(raw, fmt)
    if fields is None:
        logger.debug("Rejected %s EVSE ID %r: no grammar match", fmt.value, raw)
        article = "a" if fmt is EvseFormat.DIN else "an"
        return Err(FormatError(
            message=f"not {article} {fmt.value} EVSE ID: {raw}",
            code="FORMAT_MISMATCH",
            source=source,
            format_name=fmt.value,
            raw=raw,
        ))

    result = _build(
        fmt, fields.country_code, fields.operator_code, fields.power_outlet_id,
        registry=config.registry, source=source,
        din_outlet_max=DIN_OUTLET_MAX,
    )
    if isinstance(result, Err):
        logger.debug("Rejected %s EVSE ID %r: %s", fmt.value, raw, result.error.code)
    return result


def parse_din_evse_id(
    raw: str, *, config: ParserConfig = DEFAULT_CONFIG,
) -> Ok[EvseId] | Err[MobilityIdError]:
    """Parse e.g. '+49*810*000*438' or '49*810*000*438'."""
    return parse_evse_id(raw, EvseFormat.DIN, config=config)


def parse_iso_evse_id(
    raw: str, *, config: ParserConfig = DEFAULT_CONFIG,
) -> Ok[EvseId] | Err[MobilityIdError]:
    """Parse e.g. 'DE*AB7*E840*6487' or 'DEAB7E8406487'."""
    return parse_evse_id(raw, EvseFormat.ISO, config=config)
