"""Parser configuration for identifier construction and parsing.

Pure configuration data, passed explicitly to every new_*/parse_* call.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import final

from mobilityid.core.registry import DEFAULT_REGISTRY, CountryRegistry


@final
@dataclass(frozen=True, slots=True)
class ParserConfig:
    """Capabilities and switches consumed by the identifier parsers.

    registry: country lookup used by every format except DIN EVSE IDs.
    attach_missing_check_digit: when a parsed contract ID has no check digit,
        compute and attach it (True) or keep it absent (False, the behaviour
        of older EMI3/ISO parsers).
    """

    registry: CountryRegistry = DEFAULT_REGISTRY
    attach_missing_check_digit: bool = True


DEFAULT_CONFIG = ParserConfig()
