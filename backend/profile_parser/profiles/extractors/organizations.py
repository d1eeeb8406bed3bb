"""
Organization and honor/award extraction

Both sections are walked with a small state machine: the kind of the
current line and the state left by the previous line decide what the line
means. Combinations missing from a transition table are malformed input.
"""
import re
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

import structlog

from profile_parser.core.exceptions import ParseError
from profile_parser.profiles.dates import parse_date, parse_date_range
from profile_parser.profiles.schemas import HonorAward, Organization
from profile_parser.profiles.tokens import TextToken

logger = structlog.get_logger()

ORGANIZATION_DATES_RE = re.compile(r"^\w+\s\d{4}\sto\s(?:Present|\w+\s\d{4})$")
HONOR_DATE_RE = re.compile(r"^\w+\s\d{4}$")


class LineKind(Enum):
    BOLD = "bold"
    DATES = "dates"
    TEXT = "text"


class OrganizationState(Enum):
    NONE = "none"
    NAME = "name"
    TITLE = "title"
    DATES = "dates"
    SUMMARY = "summary"


class HonorState(Enum):
    NONE = "none"
    TITLE = "title"
    INSTITUTION = "institution"
    DATE = "date"
    SUMMARY = "summary"


def _with_bold(states, target) -> Dict[Tuple[Enum, LineKind], Enum]:
    return {(state, LineKind.BOLD): target for state in states}


ORGANIZATION_TRANSITIONS: Dict[Tuple[OrganizationState, LineKind], OrganizationState] = {
    **_with_bold(OrganizationState, OrganizationState.NAME),
    (OrganizationState.NAME, LineKind.DATES): OrganizationState.DATES,
    (OrganizationState.TITLE, LineKind.DATES): OrganizationState.DATES,
    (OrganizationState.DATES, LineKind.DATES): OrganizationState.DATES,
    (OrganizationState.SUMMARY, LineKind.DATES): OrganizationState.DATES,
    (OrganizationState.NAME, LineKind.TEXT): OrganizationState.TITLE,
    (OrganizationState.DATES, LineKind.TEXT): OrganizationState.SUMMARY,
    (OrganizationState.SUMMARY, LineKind.TEXT): OrganizationState.SUMMARY,
}

HONOR_TRANSITIONS: Dict[Tuple[HonorState, LineKind], HonorState] = {
    **_with_bold(HonorState, HonorState.TITLE),
    (HonorState.TITLE, LineKind.DATES): HonorState.DATE,
    (HonorState.INSTITUTION, LineKind.DATES): HonorState.DATE,
    (HonorState.DATE, LineKind.DATES): HonorState.DATE,
    (HonorState.SUMMARY, LineKind.DATES): HonorState.DATE,
    (HonorState.TITLE, LineKind.TEXT): HonorState.INSTITUTION,
    (HonorState.DATE, LineKind.TEXT): HonorState.SUMMARY,
    (HonorState.SUMMARY, LineKind.TEXT): HonorState.SUMMARY,
}


def _classify(line: TextToken, dates_re: re.Pattern) -> LineKind:
    if line.bold:
        return LineKind.BOLD
    if dates_re.match(line.text):
        return LineKind.DATES
    return LineKind.TEXT


def extract_organizations(lines: Sequence[TextToken]) -> List[Organization]:
    organizations: List[Organization] = []
    organization: Optional[Organization] = None
    state = OrganizationState.NONE

    for line in lines:
        text = line.text
        kind = _classify(line, ORGANIZATION_DATES_RE)
        next_state = ORGANIZATION_TRANSITIONS.get((state, kind))
        if next_state is None:
            raise ParseError(f"Unable to parse organization line '{text}'", line=text)

        if next_state is OrganizationState.NAME:
            if organization is not None:
                organizations.append(organization)
            organization = Organization(name=text)
        elif next_state is OrganizationState.DATES:
            organization.start, organization.end = parse_date_range(text, " to ")
        elif next_state is OrganizationState.TITLE:
            organization.title = text
        else:
            organization.append_summary(text)

        logger.debug("organization_line", state=next_state.value, line=text)
        state = next_state

    if organization is not None:
        organizations.append(organization)

    return organizations


def extract_honors_and_awards(lines: Sequence[TextToken]) -> List[HonorAward]:
    honors: List[HonorAward] = []
    honor: Optional[HonorAward] = None
    state = HonorState.NONE

    for line in lines:
        text = line.text
        kind = _classify(line, HONOR_DATE_RE)
        next_state = HONOR_TRANSITIONS.get((state, kind))
        if next_state is None:
            raise ParseError(f"Unable to parse honor/award line '{text}'", line=text)

        if next_state is HonorState.TITLE:
            if honor is not None:
                honors.append(honor)
            honor = HonorAward(title=text)
        elif next_state is HonorState.DATE:
            honor.awarded_on = parse_date(text)
        elif next_state is HonorState.INSTITUTION:
            honor.institution = text
        else:
            honor.append_summary(text)

        state = next_state

    if honor is not None:
        honors.append(honor)

    return honors
