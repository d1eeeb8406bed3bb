"""
Certification extraction
"""
import re
from typing import Callable, List, Sequence, Tuple

from profile_parser.core.exceptions import ParseError
from profile_parser.profiles.dates import parse_date
from profile_parser.profiles.schemas import Certification
from profile_parser.profiles.tokens import TextToken


def _license_with_validity(certification: Certification, match: re.Match) -> None:
    certification.authority = match.group(1)
    certification.license = match.group(2)
    certification.obtained_on = parse_date(match.group(3))
    certification.valid_until = parse_date(match.group(4))


def _license_obtained(certification: Certification, match: re.Match) -> None:
    certification.authority = match.group(1)
    certification.license = match.group(2)
    certification.obtained_on = parse_date(match.group(3))


def _authority_obtained(certification: Certification, match: re.Match) -> None:
    certification.authority = match.group(1)
    certification.obtained_on = parse_date(match.group(2))


def _authority_license(certification: Certification, match: re.Match) -> None:
    certification.authority = match.group(1)
    certification.license = match.group(2)


def _authority_only(certification: Certification, match: re.Match) -> None:
    certification.authority = match.group(1)


# The export pads the detail columns with a fixed number of spaces
DETAIL_SHAPES: List[Tuple[re.Pattern, Callable[[Certification, re.Match], None]]] = [
    (re.compile(r"(.*?)\s{3}License\s(.*?)\s{4}(.*?\s\d{4})\sto\s(.*\d{4}$)"), _license_with_validity),
    (re.compile(r"(.*?)\s{3}License\s(.*?)\s{4}(.*?\s\d{4}$)"), _license_obtained),
    (re.compile(r"(.*?)\s{3}\s{4}(.*?\s\d{4}$)"), _authority_obtained),
    (re.compile(r"(.*?)\s{3}License\s(.*?)\s{3}$"), _authority_license),
    (re.compile(r"(.*?)\s{6,}$"), _authority_only),
]


def apply_details(certification: Certification, line: str) -> Certification:
    """Fill authority, license and dates from a certification's detail line"""
    for pattern, apply in DETAIL_SHAPES:
        match = pattern.search(line)
        if match:
            apply(certification, match)
            return certification
    raise ParseError(f"Unable to parse certification parts from the string '{line}'", line=line)


def extract_certifications(lines: Sequence[TextToken]) -> List[Certification]:
    """Certifications come as (title, details) line pairs"""
    certifications = []
    for i in range(0, len(lines), 2):
        certification = Certification(title=lines[i].text)
        if i + 1 >= len(lines):
            raise ParseError(
                f"Certification '{lines[i].text}' has no detail line",
                line=lines[i].text,
            )
        certifications.append(apply_details(certification, lines[i + 1].text))
    return certifications
