"""
Date and date-range parsing for profile sections
"""
import re
from datetime import date, datetime
from typing import Optional, Tuple

from profile_parser.core.exceptions import ParseError

PRESENT = "Present"

MONTH_YEAR_RE = re.compile(r"^\w+\s\d{4}$")
YEAR_RE = re.compile(r"^\d{4}$")

# English month names only; "%B" and "%b" are read in the default C locale
MONTH_YEAR_FORMATS = ("%B %Y", "%b %Y")


def parse_date(value: str) -> date:
    """
    Parse "June 2019" to 2019-06-01 and "2019" to 2019-01-01.

    Raises:
        ParseError: For any other shape
    """
    value = value.strip()

    if MONTH_YEAR_RE.match(value):
        for fmt in MONTH_YEAR_FORMATS:
            try:
                return datetime.strptime(value, fmt).date()
            except ValueError:
                continue
    elif YEAR_RE.match(value):
        return date(int(value), 1, 1)

    raise ParseError(f"Unable to parse a valid date from '{value}'", line=value)


def parse_date_range(value: str, separator: str = " - ") -> Tuple[date, Optional[date]]:
    """
    Split `value` on `separator` into a (start, end) pair.

    An end of "Present" gives None, meaning the range is still ongoing.

    Raises:
        ParseError: If there are not exactly two parts or either date is unparseable
    """
    parts = [part.strip() for part in value.split(separator)]
    if len(parts) != 2:
        raise ParseError(f"There was an error parsing the date range from the line '{value}'", line=value)

    start = parse_date(parts[0])
    end = None if parts[1] == PRESENT else parse_date(parts[1])
    return start, end
