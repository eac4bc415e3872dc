"""Smart constructors and parsers for contract IDs.

new_*_contract_id builds from separate fields; parse_*_contract_id reads a
string in canonical, compact or mixed-case form. Both are total: they return
Ok[ContractId] or Err[MobilityIdError], never raise.
"""

from __future__ import annotations

import logging

from mobilityid.checkdigit.din import din_check_digit
from mobilityid.checkdigit.iso import iso_check_digit
from mobilityid.contract.grammar import match_contract
from mobilityid.contract.types import ContractFormat, ContractId
from mobilityid.core.config import DEFAULT_CONFIG, ParserConfig
from mobilityid.core.errors import (
    CheckDigitMismatchError,
    FieldValidationError,
    FieldViolation,
    FormatError,
    MobilityIdError,
)
from mobilityid.core.registry import CountryRegistry
from mobilityid.core.result import Err, Ok

logger = logging.getLogger(__name__)

_SOURCE = "contract.parser"


def _is_ascii_alnum(value: str) -> bool:
    return value.isascii() and value.isalnum()


def _upper_ascii(value: str) -> str:
    """Upper-case ASCII input; non-ASCII is left as given for validation to reject."""
    return value.upper() if value.isascii() else value


def _field_violations(
    fmt: ContractFormat,
    country_code: str,
    party_code: str,
    instance: str,
    check_digit: str | None,
    registry: CountryRegistry,
) -> list[FieldViolation]:
    violations: list[FieldViolation] = []

    if len(country_code) != 2 or not (country_code.isascii() and country_code.isalpha()):
        violations.append(FieldViolation(
            path="country_code", constraint="exactly 2 ASCII letters",
            actual_value=country_code,
        ))
    elif not registry.is_valid_country_code(country_code):
        violations.append(FieldViolation(
            path="country_code", constraint="assigned ISO 3166-1 alpha-2 code",
            actual_value=country_code,
        ))

    if len(party_code) != 3 or not _is_ascii_alnum(party_code):
        violations.append(FieldViolation(
            path="party_code", constraint="exactly 3 alphanumeric characters",
            actual_value=party_code,
        ))

    length = fmt.layout.instance_length
    if len(instance) != length or not _is_ascii_alnum(instance):
        violations.append(FieldViolation(
            path="instance_value", constraint=f"exactly {length} alphanumeric characters",
            actual_value=instance,
        ))

    if check_digit is not None and (len(check_digit) != 1 or not _is_ascii_alnum(check_digit)):
        violations.append(FieldViolation(
            path="check_digit", constraint="a single alphanumeric character",
            actual_value=check_digit,
        ))

    return violations


def compute_check_digit(
    fmt: ContractFormat, country_code: str, party_code: str, instance: str,
) -> Ok[str] | Err[MobilityIdError]:
    """Check digit for already-validated, upper-case fields of the given format."""
    layout = fmt.layout
    if layout.algorithm == "DIN":
        return Ok(din_check_digit(f"{country_code}{party_code}{instance}"))
    match iso_check_digit(f"{country_code}{party_code}{layout.marker}{instance}"):
        case Err(e):
            return Err(e.with_context(f"{fmt.value} contract ID"))
        case Ok(digit):
            return Ok(digit)


def _build(
    fmt: ContractFormat,
    country_code: str,
    party_code: str,
    instance: str,
    check_digit: str | None,
    *,
    attach: bool,
    registry: CountryRegistry,
    source: str,
) -> Ok[ContractId] | Err[MobilityIdError]:
    country_code = _upper_ascii(country_code)
    party_code = _upper_ascii(party_code)
    instance = _upper_ascii(instance)
    if check_digit is not None:
        check_digit = _upper_ascii(check_digit)

    violations = _field_violations(fmt, country_code, party_code, instance, check_digit, registry)
    if violations:
        return Err(FieldValidationError(
            message=f"{fmt.value} contract ID validation failed: "
            + "; ".join(f"{v.path} '{v.actual_value}' must be {v.constraint}" for v in violations),
            code="FIELD_INVALID",
            source=source,
            fields=tuple(violations),
        ))

    match compute_check_digit(fmt, country_code, party_code, instance):
        case Err() as err:
            return err
        case Ok(computed):
            pass

    if check_digit is not None and check_digit != computed:
        return Err(CheckDigitMismatchError(
            message=f"check digit '{check_digit}' doesn't match computed one '{computed}'",
            code="CHECK_DIGIT_MISMATCH",
            source=source,
            expected=computed,
            actual=check_digit,
        ))

    if check_digit is None and not attach:
        final_digit: str | None = None
    else:
        final_digit = computed

    return Ok(ContractId(
        format=fmt,
        country_code=country_code,
        party_code=party_code,
        instance_value=instance,
        check_digit=final_digit,
    ))


# ---------------------------------------------------------------------------
# Construction from fields
# ---------------------------------------------------------------------------


def new_contract_id(
    fmt: ContractFormat,
    country_code: str,
    party_code: str,
    instance: str,
    check_digit: str | None = None,
    *,
    config: ParserConfig = DEFAULT_CONFIG,
) -> Ok[ContractId] | Err[MobilityIdError]:
    """Build a contract ID of any format from its fields.

    With check_digit=None the check digit is computed and attached.
    A supplied check digit must match the computed one.
    """
    return _build(
        fmt, country_code, party_code, instance, check_digit,
        attach=True, registry=config.registry,
        source=f"{_SOURCE}.new_{fmt.value.lower()}_contract_id",
    )


def new_din_contract_id(
    country_code: str,
    party_code: str,
    instance: str,
    check_digit: str | None = None,
    *,
    config: ParserConfig = DEFAULT_CONFIG,
) -> Ok[ContractId] | Err[MobilityIdError]:
    return new_contract_id(
        ContractFormat.DIN, country_code, party_code, instance, check_digit, config=config,
    )


def new_emi3_contract_id(
    country_code: str,
    party_code: str,
    instance: str,
    check_digit: str | None = None,
    *,
    config: ParserConfig = DEFAULT_CONFIG,
) -> Ok[ContractId] | Err[MobilityIdError]:
    """instance is the 8 characters after the 'C' marker."""
    return new_contract_id(
        ContractFormat.EMI3, country_code, party_code, instance, check_digit, config=config,
    )


def new_iso_contract_id(
    country_code: str,
    party_code: str,
    instance: str,
    check_digit: str | None = None,
    *,
    config: ParserConfig = DEFAULT_CONFIG,
) -> Ok[ContractId] | Err[MobilityIdError]:
    return new_contract_id(
        ContractFormat.ISO, country_code, party_code, instance, check_digit, config=config,
    )


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


_FORMAT_ARTICLE = {
    ContractFormat.DIN: "a DIN",
    ContractFormat.EMI3: "an EMI3",
    ContractFormat.ISO: "an ISO",
}


def parse_contract_id(
    raw: str,
    fmt: ContractFormat,
    *,
    config: ParserConfig = DEFAULT_CONFIG,
) -> Ok[ContractId] | Err[MobilityIdError]:
    """Parse raw as a contract ID of format fmt.

    Separators and the check digit are optional. A present check digit is
    verified; an absent one is computed and attached unless
    config.attach_missing_check_digit is False.
    """
    source = f"{_SOURCE}.parse_{fmt.value.lower()}_contract_id"
    fields = match_contract(raw, fmt)
    if fields is None:
        logger.debug("Rejected %s contract ID %r: no grammar match", fmt.value, raw)
        return Err(FormatError(
            message=f"not {_FORMAT_ARTICLE[fmt]} contract ID: {raw}",
            code="FORMAT_MISMATCH",
            source=source,
            format_name=fmt.value,
            raw=raw,
        ))

    result = _build(
        fmt, fields.country_code, fields.party_code, fields.instance_value, fields.check_digit,
        attach=config.attach_missing_check_digit, registry=config.registry, source=source,
    )
    if isinstance(result, Err):
        logger.debug("Rejected %s contract ID %r: %s", fmt.value, raw, result.error.code)
    return result


def parse_din_contract_id(
    raw: str, *, config: ParserConfig = DEFAULT_CONFIG,
) -> Ok[ContractId] | Err[MobilityIdError]:
    """Parse e.g. 'IN-TNM-000071-9', 'INTNM0000719' or 'IN*TNM*000071'."""
    return parse_contract_id(raw, ContractFormat.DIN, config=config)


def parse_emi3_contract_id(
    raw: str, *, config: ParserConfig = DEFAULT_CONFIG,
) -> Ok[ContractId] | Err[MobilityIdError]:
    """Parse e.g. 'NL-TNM-C00122045-K' or 'nltnmc00122045'."""
    return parse_contract_id(raw, ContractFormat.EMI3, config=config)


def parse_iso_contract_id(
    raw: str, *, config: ParserConfig = DEFAULT_CONFIG,
) -> Ok[ContractId] | Err[MobilityIdError]:
    """Parse e.g. 'NL-TNM-001234567-X'."""
    return parse_contract_id(raw, ContractFormat.ISO, config=config)
