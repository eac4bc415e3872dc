"""Hypothesis strategies and pytest fixtures for mobilityid.

Every identifier type has a strategy built through its smart constructor,
so generated values are valid by construction.
"""

from __future__ import annotations

from hypothesis import HealthCheck, settings
from hypothesis import strategies as st
from hypothesis.strategies import SearchStrategy

from mobilityid.contract.parser import (
    new_din_contract_id,
    new_emi3_contract_id,
    new_iso_contract_id,
)
from mobilityid.contract.types import ContractId
from mobilityid.core.result import unwrap
from mobilityid.evse.parser import new_din_evse_id, new_iso_evse_id
from mobilityid.evse.types import EvseId

# ---------------------------------------------------------------------------
# Hypothesis global settings
# ---------------------------------------------------------------------------

settings.register_profile(
    "ci",
    max_examples=200,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.register_profile(
    "dev",
    max_examples=50,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.load_profile("dev")


# ===================================================================
# PRIMITIVE STRATEGIES
# ===================================================================

UPPER_ALNUM = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
MIXED_ALNUM = UPPER_ALNUM + "abcdefghijklmnopqrstuvwxyz"
DIGITS = "0123456789"

COUNTRIES = ("NL", "DE", "FR", "BE", "IN", "GB", "US", "IT", "ES", "PT", "AT", "CH")


def country_codes() -> SearchStrategy[str]:
    """Assigned ISO 3166-1 alpha-2 codes, random case."""
    return st.sampled_from(COUNTRIES).flatmap(
        lambda c: st.sampled_from((c, c.lower(), c[0] + c[1].lower()))
    )


def alnum(size: int, alphabet: str = MIXED_ALNUM) -> SearchStrategy[str]:
    """Fixed-length ASCII alphanumeric strings."""
    return st.text(alphabet=alphabet, min_size=size, max_size=size)


def upper_codes(size: int) -> SearchStrategy[str]:
    return alnum(size, UPPER_ALNUM)


# ===================================================================
# CONTRACT ID STRATEGIES
# ===================================================================


@st.composite
def din_contract_ids(draw: st.DrawFn) -> ContractId:
    return unwrap(new_din_contract_id(draw(country_codes()), draw(alnum(3)), draw(alnum(6))))


@st.composite
def emi3_contract_ids(draw: st.DrawFn) -> ContractId:
    return unwrap(new_emi3_contract_id(draw(country_codes()), draw(alnum(3)), draw(alnum(8))))


@st.composite
def iso_contract_ids(draw: st.DrawFn) -> ContractId:
    return unwrap(new_iso_contract_id(draw(country_codes()), draw(alnum(3)), draw(alnum(9))))


def contract_ids() -> SearchStrategy[ContractId]:
    return st.one_of(din_contract_ids(), emi3_contract_ids(), iso_contract_ids())


# ===================================================================
# EVSE ID STRATEGIES
# ===================================================================


@st.composite
def din_evse_ids(draw: st.DrawFn) -> EvseId:
    country = draw(st.text(alphabet=DIGITS, min_size=1, max_size=3))
    plus = draw(st.booleans())
    operator = draw(st.text(alphabet=DIGITS, min_size=3, max_size=6))
    outlet = draw(st.text(alphabet=DIGITS + "*", min_size=1, max_size=31))
    return unwrap(new_din_evse_id(f"+{country}" if plus else country, operator, outlet))


@st.composite
def iso_evse_ids(draw: st.DrawFn) -> EvseId:
    outlet = draw(st.text(alphabet=MIXED_ALNUM + "*", min_size=1, max_size=31))
    return unwrap(new_iso_evse_id(draw(country_codes()), draw(alnum(3)), outlet))
