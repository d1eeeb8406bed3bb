"""
Experience and volunteer experience extraction
"""
import re
from typing import List, Optional, Sequence, Tuple, Type, TypeVar

import structlog

from profile_parser.profiles.dates import parse_date_range
from profile_parser.profiles.schemas import RoleEntry
from profile_parser.profiles.tokens import TextToken

logger = structlog.get_logger()

R = TypeVar("R", bound=RoleEntry)

# "2019 - Present", "June 2019  -  May 2020"; the range must open the line
DATE_LINE_RE = re.compile(r"^[\s\x00]*(?:\w+[\s\x00]+)?\d{4}[\s\x00]+-")
WHITESPACE_RE = re.compile(r"[\s\x00]+")
DURATION_RE = re.compile(r"^\(.*\)$")
ROLE_SEPARATOR = " at "


class _RoleGroup:
    """Lines collected for one role before they are interpreted"""

    def __init__(self, title: str = ""):
        self.title = title
        self.date = ""
        self.summary = ""


def split_role_line(line: str) -> Tuple[str, str]:
    """
    Split "Engineer at Acme" into (title, organisation).

    A line without the separator is used for both; with more than one
    separator the first and last parts are kept.
    """
    parts = [part.strip() for part in line.split(ROLE_SEPARATOR)]
    if len(parts) == 1:
        return parts[0], parts[0]
    return parts[0], parts[-1]


def _group_lines(lines: Sequence[TextToken]) -> List[_RoleGroup]:
    groups: List[_RoleGroup] = []

    def current() -> _RoleGroup:
        if not groups:
            groups.append(_RoleGroup())
        return groups[-1]

    for line in lines:
        text = line.text
        if DATE_LINE_RE.match(text):
            current().date = WHITESPACE_RE.sub(" ", text).strip()
        elif ROLE_SEPARATOR in text and line.bold:
            groups.append(_RoleGroup(title=text))
        elif not DURATION_RE.match(text) and "Page" not in text and len(text) > 1:
            current().summary += text + "\n"

    return groups


def extract_roles(lines: Sequence[TextToken], role_class: Type[R]) -> List[R]:
    """
    Build role-like entries from the merged lines of an experience section.

    Content seen before the first bold "<title> at <organisation>" line
    yields an empty placeholder entry so list positions are kept.
    """
    roles: List[R] = []
    for group in _group_lines(lines):
        role = role_class()
        if group.title:
            role.title, role.organisation = split_role_line(group.title)
            if group.date:
                role.start, role.end = parse_date_range(group.date, " - ")
            if group.summary:
                role.summary = group.summary
        else:
            logger.debug("role_placeholder", summary_length=len(group.summary))
        roles.append(role)
    return roles


def split_current_role(roles: List[R]) -> Tuple[Optional[R], List[R]]:
    """Lift the first open-ended entry out of the list"""
    for index, role in enumerate(roles):
        if role.is_open:
            return role, roles[:index] + roles[index + 1:]
    return None, list(roles)
