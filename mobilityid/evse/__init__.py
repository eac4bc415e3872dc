"""mobilityid.evse — DIN and ISO EVSE IDs."""

from mobilityid.evse.parser import new_din_evse_id as new_din_evse_id
from mobilityid.evse.parser import new_evse_id as new_evse_id
from mobilityid.evse.parser import new_iso_evse_id as new_iso_evse_id
from mobilityid.evse.parser import parse_din_evse_id as parse_din_evse_id
from mobilityid.evse.parser import parse_evse_id as parse_evse_id
from mobilityid.evse.parser import parse_iso_evse_id as parse_iso_evse_id
from mobilityid.evse.types import EvseFormat as EvseFormat
from mobilityid.evse.types import EvseId as EvseId
