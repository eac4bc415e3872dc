"""Country registry capability.

Identifier code depends on the CountryRegistry protocol only. The default
adapter answers from the pycountry ISO 3166-1 database; StaticCountryRegistry
pins an explicit table (tests, or deployments that freeze the code list).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, final, runtime_checkable

import pycountry


@runtime_checkable
class CountryRegistry(Protocol):
    """Answers whether a 2-letter code is an assigned ISO 3166-1 alpha-2 code."""

    def is_valid_country_code(self, code: str) -> bool: ...


def _is_alpha2_shape(code: str) -> bool:
    return len(code) == 2 and code.isascii() and code.isalpha()


@final
@dataclass(frozen=True, slots=True)
class Iso3166CountryRegistry:
    """Registry backed by pycountry's ISO 3166-1 table. Case-insensitive."""

    def is_valid_country_code(self, code: str) -> bool:
        if not _is_alpha2_shape(code):
            return False
        return pycountry.countries.get(alpha_2=code.upper()) is not None


@final
@dataclass(frozen=True, slots=True)
class StaticCountryRegistry:
    """Registry over a fixed set of alpha-2 codes."""

    codes: frozenset[str]

    @staticmethod
    def of(*codes: str) -> StaticCountryRegistry:
        return StaticCountryRegistry(codes=frozenset(c.upper() for c in codes))

    def is_valid_country_code(self, code: str) -> bool:
        return _is_alpha2_shape(code) and code.upper() in self.codes


DEFAULT_REGISTRY: CountryRegistry = Iso3166CountryRegistry()


def is_valid_country_code(code: str, registry: CountryRegistry = DEFAULT_REGISTRY) -> bool:
    """Check a country code against the given registry (pycountry by default)."""
    return registry.is_valid_country_code(code)
