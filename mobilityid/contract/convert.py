"""Conversions between DIN, EMI3 and ISO contract IDs.

EMI3 is the hub: a DIN ID fits into an EMI3 instance as
"0" + DIN instance + DIN check digit, and an EMI3 ID is an ISO ID whose
instance starts with 'C'. DIN <-> ISO goes through EMI3.
"""

from __future__ import annotations

import logging

from mobilityid.contract.parser import compute_check_digit, new_contract_id
from mobilityid.contract.types import ContractFormat, ContractId
from mobilityid.core.config import DEFAULT_CONFIG, ParserConfig
from mobilityid.core.errors import ConversionError, MobilityIdError
from mobilityid.core.result import Err, Ok

logger = logging.getLogger(__name__)

_EMI3_DIN_PREFIX = "0"
_ISO_EMI3_MARKER = "C"


def _conv_err(
    message: str, source: str, from_fmt: ContractFormat, to_fmt: ContractFormat,
) -> Err[ConversionError]:
    return Err(ConversionError(
        message=f"cannot convert to {to_fmt.value}: {message}",
        code="CONVERSION_IMPOSSIBLE",
        source=f"contract.convert.{source}",
        from_format=from_fmt.value,
        to_format=to_fmt.value,
    ))


def _expect_format(
    cid: ContractId, expected: ContractFormat, to_fmt: ContractFormat, source: str,
) -> Err[ConversionError] | None:
    if cid.format is expected:
        return None
    return _conv_err(
        f"expected a {expected.value} contract ID, got {cid.format.value}",
        source, cid.format, to_fmt,
    )


def _logged(
    result: Ok[ContractId] | Err[MobilityIdError], cid: ContractId, to_fmt: ContractFormat,
) -> Ok[ContractId] | Err[MobilityIdError]:
    match result:
        case Ok(converted):
            logger.debug("Converted %s to %s %s", cid, to_fmt.value, converted)
        case Err(e):
            logger.debug("Could not convert %s to %s: %s", cid, to_fmt.value, e.code)
    return result


def din_to_emi3(
    cid: ContractId, *, config: ParserConfig = DEFAULT_CONFIG,
) -> Ok[ContractId] | Err[MobilityIdError]:
    """DIN 'NL-TNM-012204-5' -> EMI3 'NL-TNM-C00122045-K'.

    The EMI3 check digit is recomputed, never carried over.
    """
    if (err := _expect_format(cid, ContractFormat.DIN, ContractFormat.EMI3, "din_to_emi3")):
        return err

    din_digit = cid.check_digit
    if din_digit is None:
        match compute_check_digit(
            ContractFormat.DIN, cid.country_code, cid.party_code, cid.instance_value,
        ):
            case Err() as e:
                return e
            case Ok(din_digit):
                pass

    instance = f"{_EMI3_DIN_PREFIX}{cid.instance_value}{din_digit}"
    return _logged(
        new_contract_id(
            ContractFormat.EMI3, cid.country_code, cid.party_code, instance, config=config,
        ),
        cid, ContractFormat.EMI3,
    )


def emi3_to_din(
    cid: ContractId, *, config: ParserConfig = DEFAULT_CONFIG,
) -> Ok[ContractId] | Err[MobilityIdError]:
    """EMI3 'NL-TNM-C00122045-K' -> DIN 'NL-TNM-012204-5'.

    Only EMI3 instances starting with '0' fit into DIN's six characters; the
    last instance character becomes the (verified) DIN check digit.
    """
    if (err := _expect_format(cid, ContractFormat.EMI3, ContractFormat.DIN, "emi3_to_din")):
        return err

    instance = cid.instance_value
    if not instance.startswith(_EMI3_DIN_PREFIX):
        return _logged(
            _conv_err(
                f"instance value '{instance}' is too long (no leading '0')",
                "emi3_to_din", ContractFormat.EMI3, ContractFormat.DIN,
            ),
            cid, ContractFormat.DIN,
        )

    return _logged(
        new_contract_id(
            ContractFormat.DIN, cid.country_code, cid.party_code,
            instance[1:7], instance[7], config=config,
        ).map_err(lambda e: e.with_context(f"EMI3 {cid} holds no valid DIN ID")),
        cid, ContractFormat.DIN,
    )


def emi3_to_iso(
    cid: ContractId, *, config: ParserConfig = DEFAULT_CONFIG,
) -> Ok[ContractId] | Err[MobilityIdError]:
    """EMI3 'NL-TNM-C00122045-K' -> ISO 'NL-TNM-C00122045-K'.

    Both formats share the check-digit algorithm over the same 14 characters,
    so the check digit carries through unchanged.
    """
    if (err := _expect_format(cid, ContractFormat.EMI3, ContractFormat.ISO, "emi3_to_iso")):
        return err

    return _logged(
        new_contract_id(
            ContractFormat.ISO, cid.country_code, cid.party_code,
            f"{_ISO_EMI3_MARKER}{cid.instance_value}", cid.check_digit, config=config,
        ),
        cid, ContractFormat.ISO,
    )


def iso_to_emi3(
    cid: ContractId, *, config: ParserConfig = DEFAULT_CONFIG,
) -> Ok[ContractId] | Err[MobilityIdError]:
    """ISO IDs whose instance starts with 'C' are EMI3 IDs."""
    if (err := _expect_format(cid, ContractFormat.ISO, ContractFormat.EMI3, "iso_to_emi3")):
        return err

    instance = cid.instance_value
    if not instance.startswith(_ISO_EMI3_MARKER):
        return _logged(
            _conv_err(
                f"instance value '{instance}' has no leading 'C'",
                "iso_to_emi3", ContractFormat.ISO, ContractFormat.EMI3,
            ),
            cid, ContractFormat.EMI3,
        )

    return _logged(
        new_contract_id(
            ContractFormat.EMI3, cid.country_code, cid.party_code,
            instance[1:], cid.check_digit, config=config,
        ),
        cid, ContractFormat.EMI3,
    )


def din_to_iso(
    cid: ContractId, *, config: ParserConfig = DEFAULT_CONFIG,
) -> Ok[ContractId] | Err[MobilityIdError]:
    """DIN -> EMI3 -> ISO."""
    return din_to_emi3(cid, config=config).bind(lambda e: emi3_to_iso(e, config=config))


def iso_to_din(
    cid: ContractId, *, config: ParserConfig = DEFAULT_CONFIG,
) -> Ok[ContractId] | Err[MobilityIdError]:
    """ISO -> EMI3 -> DIN."""
    return iso_to_emi3(cid, config=config).bind(lambda e: emi3_to_din(e, config=config))
