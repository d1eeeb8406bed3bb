"""
Education extraction

Each line is tried against an ordered list of shapes; the first one that
matches wins, so the most specific shapes come first.
"""
import re
from typing import Callable, List, Optional, Sequence, Tuple

import structlog

from profile_parser.core.exceptions import ParseError
from profile_parser.profiles.dates import parse_date
from profile_parser.profiles.schemas import EducationEntry
from profile_parser.profiles.tokens import TextToken

logger = structlog.get_logger()

LEADING_SPACE_RE = re.compile(r"^\s")
ACTIVITIES_RE = re.compile(r"Activities .*and .*Societies:")
GRADE_LINE = "Grade:"


def _level_course_range(entry: EducationEntry, match: re.Match) -> None:
    # "Bachelor of Arts, Theatre Management, 2006 - 2010"
    entry.level = match.group(1)
    entry.course_title = match.group(2)
    entry.start = parse_date(match.group(3))
    entry.end = parse_date(match.group(4))


def _level_course_year(entry: EducationEntry, match: re.Match) -> None:
    # "Bachelor's Degree, Biomedical Engineering, 2014"
    entry.level = match.group(1)
    entry.course_title = match.group(2)
    entry.end = parse_date(match.group(3))


def _level_range(entry: EducationEntry, match: re.Match) -> None:
    # "High School, 2002 - 2004"
    entry.level = match.group(1)
    entry.start = parse_date(match.group(2))
    entry.end = parse_date(match.group(3))


def _level_year(entry: EducationEntry, match: re.Match) -> None:
    # "High School, 2009"
    entry.level = match.group(1)
    entry.end = parse_date(match.group(2))


def _range_only(entry: EducationEntry, match: re.Match) -> None:
    # "2002 - 2006"
    entry.start = parse_date(match.group(1))
    entry.end = parse_date(match.group(2))


LINE_SHAPES: List[Tuple[re.Pattern, Callable[[EducationEntry, re.Match], None]]] = [
    (re.compile(r"(.*?),\s(.*?),\s(\d{4})\s-\s(\d{4})$"), _level_course_range),
    (re.compile(r"(.*?),\s(.*?),\s(\d{4})$"), _level_course_year),
    (re.compile(r"(.*?),\s(\d{4})\s-\s(\d{4})"), _level_range),
    (re.compile(r"(.*?),\s(\d{4})"), _level_year),
    (re.compile(r"(\d{4})\s-\s(\d{4})"), _range_only),
]


def match_shape(text: str):
    """First matching (match, apply) pair from LINE_SHAPES, or None"""
    for pattern, apply in LINE_SHAPES:
        match = pattern.search(text)
        if match:
            return match, apply
    return None


def _following_line(lines: Sequence[TextToken], index: int, label: str) -> str:
    if index + 1 >= len(lines):
        raise ParseError(f"Expected a line after '{label}'", line=lines[index].text)
    return lines[index + 1].text


def extract_education(lines: Sequence[TextToken]) -> List[EducationEntry]:
    """Build education entries from the merged lines of the Education section"""
    entries: List[EducationEntry] = []
    entry: Optional[EducationEntry] = None

    i = 0
    while i < len(lines):
        text = lines[i].text

        shape = match_shape(text)

        if shape is not None:
            match, apply = shape
            if entry is None:
                # Detail lines always follow an institution line in the export
                raise ParseError(f"Education detail line before any institution: '{text}'", line=text)
            apply(entry, match)
        elif ACTIVITIES_RE.search(text):
            activities = _following_line(lines, i, text)
            i += 1
            while i + 1 < len(lines) and LEADING_SPACE_RE.match(lines[i + 1].text):
                activities += lines[i + 1].text
                i += 1
            if entry is None:
                raise ParseError(f"Activities before any institution: '{text}'", line=text)
            entry.activities_and_societies = activities
        elif text.strip() == GRADE_LINE:
            if entry is None:
                raise ParseError(f"Grade before any institution: '{text}'", line=text)
            entry.grade = _following_line(lines, i, text)
            i += 1
        else:
            if entry is not None:
                entries.append(entry)
            entry = EducationEntry(institution=text)
            logger.debug("education_entry_started", institution=text)

        i += 1

    if entry is not None:
        entries.append(entry)

    return entries
