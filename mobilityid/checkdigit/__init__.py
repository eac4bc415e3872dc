"""mobilityid.checkdigit — DIN and ISO/eMI3 check-digit algorithms."""

from mobilityid.checkdigit.din import din_check_digit as din_check_digit
from mobilityid.checkdigit.iso import CODE_LENGTH as CODE_LENGTH
from mobilityid.checkdigit.iso import iso_check_digit as iso_check_digit
