"""mobilityid — e-mobility contract and EVSE identifiers.

Parse, build, validate and convert DIN / EMI3 / ISO contract IDs and
DIN / ISO EVSE IDs. Every entry point returns Ok[T] | Err[MobilityIdError].
"""

from mobilityid.checkdigit import din_check_digit as din_check_digit
from mobilityid.checkdigit import iso_check_digit as iso_check_digit
from mobilityid.contract import ContractFormat as ContractFormat
from mobilityid.contract import ContractId as ContractId
from mobilityid.contract import din_to_emi3 as din_to_emi3
from mobilityid.contract import din_to_iso as din_to_iso
from mobilityid.contract import emi3_to_din as emi3_to_din
from mobilityid.contract import emi3_to_iso as emi3_to_iso
from mobilityid.contract import iso_to_din as iso_to_din
from mobilityid.contract import iso_to_emi3 as iso_to_emi3
from mobilityid.contract import new_contract_id as new_contract_id
from mobilityid.contract import new_din_contract_id as new_din_contract_id
from mobilityid.contract import new_emi3_contract_id as new_emi3_contract_id
from mobilityid.contract import new_iso_contract_id as new_iso_contract_id
from mobilityid.contract import parse_contract_id as parse_contract_id
from mobilityid.contract import parse_din_contract_id as parse_din_contract_id
from mobilityid.contract import parse_emi3_contract_id as parse_emi3_contract_id
from mobilityid.contract import parse_iso_contract_id as parse_iso_contract_id
from mobilityid.core import DEFAULT_CONFIG as DEFAULT_CONFIG
from mobilityid.core import CheckDigitComputationError as CheckDigitComputationError
from mobilityid.core import CheckDigitMismatchError as CheckDigitMismatchError
from mobilityid.core import ConversionError as ConversionError
from mobilityid.core import CountryRegistry as CountryRegistry
from mobilityid.core import Err as Err
from mobilityid.core import FieldValidationError as FieldValidationError
from mobilityid.core import FieldViolation as FieldViolation
from mobilityid.core import FormatError as FormatError
from mobilityid.core import MobilityIdError as MobilityIdError
from mobilityid.core import Ok as Ok
from mobilityid.core import ParserConfig as ParserConfig
from mobilityid.core import StaticCountryRegistry as StaticCountryRegistry
from mobilityid.core import unwrap as unwrap
from mobilityid.evse import EvseFormat as EvseFormat
from mobilityid.evse import EvseId as EvseId
from mobilityid.evse import new_din_evse_id as new_din_evse_id
from mobilityid.evse import new_evse_id as new_evse_id
from mobilityid.evse import new_iso_evse_id as new_iso_evse_id
from mobilityid.evse import parse_din_evse_id as parse_din_evse_id
from mobilityid.evse import parse_evse_id as parse_evse_id
from mobilityid.evse import parse_iso_evse_id as parse_iso_evse_id
