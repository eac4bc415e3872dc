"""Tests for mobilityid.contract — construction, parsing and rendering."""

from __future__ import annotations

import dataclasses
import logging

import pytest

from mobilityid.contract.parser import (
    new_contract_id,
    new_din_contract_id,
    new_emi3_contract_id,
    new_iso_contract_id,
    parse_contract_id,
    parse_din_contract_id,
    parse_emi3_contract_id,
    parse_iso_contract_id,
)
from mobilityid.contract.types import ContractFormat, ContractId
from mobilityid.core.config import ParserConfig
from mobilityid.core.errors import (
    CheckDigitMismatchError,
    FieldValidationError,
    FormatError,
)
from mobilityid.core.registry import StaticCountryRegistry
from mobilityid.core.result import Err, Ok, unwrap

_NO_ATTACH = ParserConfig(attach_missing_check_digit=False)


def _din() -> ContractId:
    return ContractId(ContractFormat.DIN, "IN", "TNM", "000071", "9")


def _emi3() -> ContractId:
    return ContractId(ContractFormat.EMI3, "NL", "TNM", "00122045", "K")


def _iso() -> ContractId:
    return ContractId(ContractFormat.ISO, "NL", "TNM", "001234567", "X")


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


class TestRendering:
    def test_din_string(self) -> None:
        assert str(_din()) == "IN-TNM-000071-9"

    def test_din_compact(self) -> None:
        assert _din().compact_string() == "INTNM0000719"

    def test_din_compact_no_check_digit(self) -> None:
        assert _din().compact_string_no_check_digit() == "INTNM000071"

    def test_emi3_string_has_marker(self) -> None:
        assert _emi3().to_string() == "NL-TNM-C00122045-K"

    def test_emi3_compact_keeps_marker(self) -> None:
        assert _emi3().compact_string() == "NLTNMC00122045K"
        assert _emi3().compact_string_no_check_digit() == "NLTNMC00122045"

    def test_iso_string(self) -> None:
        assert str(_iso()) == "NL-TNM-001234567-X"
        assert _iso().compact_string() == "NLTNM001234567X"
        assert _iso().compact_string_no_check_digit() == "NLTNM001234567"

    def test_party_ids(self) -> None:
        assert _emi3().party_id == "NL-TNM"
        assert _emi3().compact_party_id == "NLTNM"

    def test_absent_check_digit_not_rendered(self) -> None:
        cid = dataclasses.replace(_emi3(), check_digit=None)
        assert str(cid) == "NL-TNM-C00122045"
        assert cid.compact_string() == "NLTNMC00122045"
        assert cid.compact_string_no_check_digit() == "NLTNMC00122045"

    def test_frozen(self) -> None:
        cid = _din()
        with pytest.raises(dataclasses.FrozenInstanceError):
            cid.party_code = "ABC"  # type: ignore[misc]

    def test_hashable(self) -> None:
        assert len({_din(), _din(), _emi3()}) == 2


# ---------------------------------------------------------------------------
# Construction from fields
# ---------------------------------------------------------------------------


class TestNewDinContractId:
    def test_with_check_digit(self) -> None:
        assert new_din_contract_id("IN", "TNM", "000071", "9") == Ok(_din())

    def test_computes_check_digit(self) -> None:
        assert new_din_contract_id("IN", "TNM", "000071") == Ok(_din())

    def test_normalizes_case(self) -> None:
        assert new_din_contract_id("in", "tnm", "000071") == Ok(_din())

    def test_zero_check_digit_is_present(self) -> None:
        cid = unwrap(new_din_contract_id("IN", "TNM", "000124"))
        assert cid.check_digit == "0"
        assert str(cid) == "IN-TNM-000124-0"

    def test_x_check_digit(self) -> None:
        assert str(unwrap(new_din_contract_id("IN", "TNM", "000110"))) == "IN-TNM-000110-X"

    def test_invalid_country(self) -> None:
        result = new_din_contract_id("ZZ", "TNM", "000071", "9")
        assert isinstance(result, Err)
        assert isinstance(result.error, FieldValidationError)
        assert result.error.fields[0].path == "country_code"

    def test_country_too_long(self) -> None:
        assert isinstance(new_din_contract_id("XYZ", "TNM", "000071", "9"), Err)

    def test_party_too_long(self) -> None:
        assert isinstance(new_din_contract_id("IN", "TNMA", "000071", "9"), Err)

    def test_instance_too_long(self) -> None:
        assert isinstance(new_din_contract_id("IN", "TNM", "001234567890", "9"), Err)

    def test_instance_too_short(self) -> None:
        assert isinstance(new_din_contract_id("IN", "TNM", "00071"), Err)

    def test_empty_instance(self) -> None:
        assert isinstance(new_din_contract_id("IN", "TNM", ""), Err)

    def test_wrong_check_digit(self) -> None:
        result = new_din_contract_id("IN", "TNM", "000071", "A")
        assert isinstance(result, Err)
        assert isinstance(result.error, CheckDigitMismatchError)
        assert result.error.expected == "9"
        assert result.error.actual == "A"

    def test_collects_all_violations(self) -> None:
        result = new_din_contract_id("ZZ", "TN", "0000711", "99")
        assert isinstance(result, Err)
        assert isinstance(result.error, FieldValidationError)
        assert {f.path for f in result.error.fields} == {
            "country_code", "party_code", "instance_value", "check_digit",
        }

    def test_non_ascii_instance(self) -> None:
        assert isinstance(new_din_contract_id("IN", "TNM", "٠٠٠٠٧١"), Err)

    @pytest.mark.parametrize(
        ("country", "party", "instance", "path", "actual"),
        [
            ("ın", "TNM", "000071", "country_code", "ın"),
            ("IN", "TNſ", "000071", "party_code", "TNſ"),
            ("IN", "TNM", "0000ﬁ", "instance_value", "0000ﬁ"),
            ("IN", "TNM", "0000ß", "instance_value", "0000ß"),
        ],
    )
    def test_non_ascii_not_folded_to_ascii(
        self, country: str, party: str, instance: str, path: str, actual: str,
    ) -> None:
        # upper() would turn each of these into valid ASCII of the right length
        result = new_din_contract_id(country, party, instance)
        assert isinstance(result, Err)
        assert isinstance(result.error, FieldValidationError)
        assert [(f.path, f.actual_value) for f in result.error.fields] == [(path, actual)]


class TestNewEmi3ContractId:
    def test_with_check_digit(self) -> None:
        assert new_emi3_contract_id("NL", "TNM", "00122045", "K") == Ok(_emi3())

    def test_computes_check_digit(self) -> None:
        assert new_emi3_contract_id("NL", "TNM", "00122045") == Ok(_emi3())

    def test_lowercase_check_digit(self) -> None:
        assert new_emi3_contract_id("nl", "tnm", "00122045", "k") == Ok(_emi3())

    def test_instance_with_marker_rejected(self) -> None:
        assert isinstance(new_emi3_contract_id("NL", "TNM", "C001234567890", "K"), Err)

    def test_wrong_check_digit(self) -> None:
        result = new_emi3_contract_id("NL", "TNM", "00122045", "A")
        assert isinstance(result, Err)
        assert isinstance(result.error, CheckDigitMismatchError)


class TestNewIsoContractId:
    def test_with_check_digit(self) -> None:
        assert new_iso_contract_id("NL", "TNM", "001234567", "X") == Ok(_iso())

    def test_computes_check_digit(self) -> None:
        assert new_iso_contract_id("NL", "TNM", "001234567") == Ok(_iso())

    def test_zero_check_digit_is_present(self) -> None:
        cid = unwrap(new_iso_contract_id("DE", "8AA", "001234567"))
        assert cid.check_digit == "0"
        assert str(cid) == "DE-8AA-001234567-0"

    def test_instance_too_long(self) -> None:
        assert isinstance(new_iso_contract_id("NL", "TNM", "001234567890"), Err)

    def test_wrong_check_digit(self) -> None:
        assert isinstance(new_iso_contract_id("NL", "TNM", "001234567", "A"), Err)


class TestNewContractIdDispatch:
    @pytest.mark.parametrize(
        ("fmt", "instance", "expected"),
        [
            (ContractFormat.DIN, "000071", "IN-TNM-000071-9"),
            (ContractFormat.EMI3, "00122045", None),
            (ContractFormat.ISO, "001234567", None),
        ],
    )
    def test_matches_specific_constructor(
        self, fmt: ContractFormat, instance: str, expected: str | None,
    ) -> None:
        cid = unwrap(new_contract_id(fmt, "IN", "TNM", instance))
        assert cid.format is fmt
        if expected is not None:
            assert str(cid) == expected


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


class TestParseDin:
    @pytest.mark.parametrize(
        "raw",
        ["IN-TNM-000071-9", "INTNM0000719", "IN*TNM*000071*9", "in-tnm-000071-9", "IN-TNM000071-9"],
    )
    def test_valid_with_check_digit(self, raw: str) -> None:
        assert parse_din_contract_id(raw) == Ok(_din())

    @pytest.mark.parametrize("raw", ["IN-TNM-000071", "INTNM000071"])
    def test_missing_check_digit_is_attached(self, raw: str) -> None:
        assert parse_din_contract_id(raw) == Ok(_din())

    def test_missing_check_digit_kept_absent(self) -> None:
        cid = unwrap(parse_din_contract_id("IN-TNM-000071", config=_NO_ATTACH))
        assert cid.check_digit is None
        assert str(cid) == "IN-TNM-000071"

    def test_invalid_country(self) -> None:
        result = parse_din_contract_id("ZZ-TNM-000071-9")
        assert isinstance(result, Err)
        assert isinstance(result.error, FieldValidationError)

    def test_not_a_din(self) -> None:
        result = parse_din_contract_id("XYZ")
        assert isinstance(result, Err)
        assert isinstance(result.error, FormatError)
        assert result.error.raw == "XYZ"
        assert result.error.message == "not a DIN contract ID: XYZ"

    def test_wrong_check_digit(self) -> None:
        result = parse_din_contract_id("IN-TNM-000071-8")
        assert isinstance(result, Err)
        assert isinstance(result.error, CheckDigitMismatchError)

    def test_trailing_newline_rejected(self) -> None:
        assert isinstance(parse_din_contract_id("IN-TNM-000071-9\n"), Err)


class TestParseEmi3:
    @pytest.mark.parametrize(
        "raw", ["NL-TNM-C00122045-K", "NLTNMC00122045K", "NltNMc00122045k"],
    )
    def test_valid(self, raw: str) -> None:
        assert parse_emi3_contract_id(raw) == Ok(_emi3())

    def test_fields(self) -> None:
        cid = unwrap(parse_emi3_contract_id("NL-TNM-C00122045-K"))
        assert cid.country_code == "NL"
        assert cid.party_code == "TNM"
        assert cid.instance_value == "00122045"
        assert cid.check_digit == "K"
        assert cid.compact_string() == "NLTNMC00122045K"

    @pytest.mark.parametrize("raw", ["NL-TNM-C00122045", "NLTNMC00122045"])
    def test_missing_check_digit(self, raw: str) -> None:
        assert parse_emi3_contract_id(raw) == Ok(_emi3())
        cid = unwrap(parse_emi3_contract_id(raw, config=_NO_ATTACH))
        assert cid.check_digit is None

    def test_invalid_country(self) -> None:
        assert isinstance(parse_emi3_contract_id("ZZ-TNM-C00122045"), Err)

    def test_missing_marker(self) -> None:
        result = parse_emi3_contract_id("NL-TNM-00122045-K")
        assert isinstance(result, Err)
        assert isinstance(result.error, FormatError)

    def test_not_an_emi3(self) -> None:
        result = parse_emi3_contract_id("XYZ")
        assert isinstance(result, Err)
        assert result.error.message == "not an EMI3 contract ID: XYZ"


class TestParseIso:
    @pytest.mark.parametrize("raw", ["NL-TNM-001234567-X", "NLTNM001234567X", "nl-tnm-001234567-x"])
    def test_valid(self, raw: str) -> None:
        assert parse_iso_contract_id(raw) == Ok(_iso())

    @pytest.mark.parametrize("raw", ["NL-TNM-001234567", "NLTNM001234567"])
    def test_missing_check_digit(self, raw: str) -> None:
        assert parse_iso_contract_id(raw) == Ok(_iso())

    def test_invalid_country(self) -> None:
        assert isinstance(parse_iso_contract_id("ZZ-TNM-001234567-X"), Err)

    def test_not_an_iso(self) -> None:
        result = parse_iso_contract_id("XYZ")
        assert isinstance(result, Err)
        assert isinstance(result.error, FormatError)
        assert result.error.format_name == "ISO"

    def test_dispatch(self) -> None:
        assert parse_contract_id("NL-TNM-001234567-X", ContractFormat.ISO) == Ok(_iso())


class TestInjectedRegistry:
    def test_static_registry_accepts_listed_codes(self) -> None:
        config = ParserConfig(registry=StaticCountryRegistry.of("NL"))
        assert isinstance(parse_emi3_contract_id("NL-TNM-C00122045-K", config=config), Ok)

    def test_static_registry_rejects_unlisted_codes(self) -> None:
        config = ParserConfig(registry=StaticCountryRegistry.of("DE"))
        result = parse_emi3_contract_id("NL-TNM-C00122045-K", config=config)
        assert isinstance(result, Err)
        assert isinstance(result.error, FieldValidationError)


class TestLogging:
    def test_rejected_parse_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="mobilityid")
        parse_emi3_contract_id("XYZ")
        assert "Rejected EMI3 contract ID 'XYZ'" in caplog.text

    def test_valid_parse_not_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="mobilityid")
        parse_emi3_contract_id("NL-TNM-C00122045-K")
        assert caplog.text == ""
