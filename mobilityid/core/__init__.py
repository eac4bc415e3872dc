"""mobilityid.core — results, error values, country registry, configuration."""

from mobilityid.core.config import (
    DEFAULT_CONFIG as DEFAULT_CONFIG,
)
from mobilityid.core.config import (
    ParserConfig as ParserConfig,
)
from mobilityid.core.errors import (
    CheckDigitComputationError as CheckDigitComputationError,
)
from mobilityid.core.errors import (
    CheckDigitMismatchError as CheckDigitMismatchError,
)
from mobilityid.core.errors import (
    ConversionError as ConversionError,
)
from mobilityid.core.errors import (
    FieldValidationError as FieldValidationError,
)
from mobilityid.core.errors import (
    FieldViolation as FieldViolation,
)
from mobilityid.core.errors import (
    FormatError as FormatError,
)
from mobilityid.core.errors import (
    MobilityIdError as MobilityIdError,
)
from mobilityid.core.registry import (
    DEFAULT_REGISTRY as DEFAULT_REGISTRY,
)
from mobilityid.core.registry import (
    CountryRegistry as CountryRegistry,
)
from mobilityid.core.registry import (
    Iso3166CountryRegistry as Iso3166CountryRegistry,
)
from mobilityid.core.registry import (
    StaticCountryRegistry as StaticCountryRegistry,
)
from mobilityid.core.registry import (
    is_valid_country_code as is_valid_country_code,
)
from mobilityid.core.result import (
    Err as Err,
)
from mobilityid.core.result import (
    Ok as Ok,
)
from mobilityid.core.result import (
    Result as Result,
)
from mobilityid.core.result import (
    unwrap as unwrap,
)
