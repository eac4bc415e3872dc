"""mobilityid.contract — DIN, EMI3 and ISO contract IDs and conversions."""

from mobilityid.contract.convert import din_to_emi3 as din_to_emi3
from mobilityid.contract.convert import din_to_iso as din_to_iso
from mobilityid.contract.convert import emi3_to_din as emi3_to_din
from mobilityid.contract.convert import emi3_to_iso as emi3_to_iso
from mobilityid.contract.convert import iso_to_din as iso_to_din
from mobilityid.contract.convert import iso_to_emi3 as iso_to_emi3
from mobilityid.contract.parser import compute_check_digit as compute_check_digit
from mobilityid.contract.parser import new_contract_id as new_contract_id
from mobilityid.contract.parser import new_din_contract_id as new_din_contract_id
from mobilityid.contract.parser import new_emi3_contract_id as new_emi3_contract_id
from mobilityid.contract.parser import new_iso_contract_id as new_iso_contract_id
from mobilityid.contract.parser import parse_contract_id as parse_contract_id
from mobilityid.contract.parser import parse_din_contract_id as parse_din_contract_id
from mobilityid.contract.parser import parse_emi3_contract_id as parse_emi3_contract_id
from mobilityid.contract.parser import parse_iso_contract_id as parse_iso_contract_id
from mobilityid.contract.types import ContractFormat as ContractFormat
from mobilityid.contract.types import ContractId as ContractId
from mobilityid.contract.types import ContractLayout as ContractLayout
