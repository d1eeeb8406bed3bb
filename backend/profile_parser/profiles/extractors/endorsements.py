"""
Recommendation extraction from the tail of the document

Recommendations are not a titled section. They follow the last occurrence
of the member's own name, after a "<N> people have recommended <name>"
line, and end at "Profile Notes and Activity" or at the end of the tail.
"""
import re
from enum import Enum
from typing import List, Optional, Sequence

import structlog

from profile_parser.core.exceptions import ParseError
from profile_parser.profiles.schemas import Endorsement
from profile_parser.profiles.tokens import TextToken

logger = structlog.get_logger()

RECOMMENDED_RE = re.compile(r" (?:person|people) (?:has|have) recommended .*")
STOP_MARKER = "Profile Notes and Activity"

# Typographic characters are folded to ASCII before the line is forced into latin-1
TYPOGRAPHIC = str.maketrans({
    "\u201c": '"',
    "\u201d": '"',
    "\u201e": '"',
    "\u2018": "'",
    "\u2019": "'",
    "\u2014": "--",
    "\u2013": "-",
    "\u2026": "...",
    "\u00a0": " ",
})

QUOTE_OPEN_RE = re.compile(r'^(?:"|&#34;)(.*)$')
QUOTE_CLOSE_RE = re.compile(r'^(.*)(?:"|&#34;)$')
DASH_NAME_RE = re.compile(r"(?:^|\s)--\s*(.+)$")
COMMA_PREFIX_RE = re.compile(r"^,\s(.*)")


class EndorsementState(Enum):
    NONE = "none"
    SUMMARY = "summary"
    NAME = "name"
    POSITION = "position"
    RELATION = "relation"


def clean_line(text: str) -> str:
    """Trim, force into latin-1 and drop the '?' left by unmappable characters"""
    text = text.strip().translate(TYPOGRAPHIC)
    text = text.encode("latin-1", errors="replace").decode("latin-1")
    return text.replace("?", "").strip()


def recommendation_lines(tail: Sequence[TextToken]) -> List[TextToken]:
    """
    Lines after the last "... have recommended ..." marker.

    The final line of the tail is the "Contact <name> on LinkedIn" footer and
    is never part of a recommendation.
    """
    lines = list(tail[:-1])

    start = None
    for index, line in enumerate(lines):
        if RECOMMENDED_RE.search(line.text):
            start = index

    if start is None:
        return []
    return lines[start + 1:]


def _strip_closing_quote(text: str) -> str:
    match = QUOTE_CLOSE_RE.match(text)
    return match.group(1) if match else text


def extract_endorsements(tail: Sequence[TextToken]) -> List[Endorsement]:
    endorsements: List[Endorsement] = []
    endorsement: Optional[Endorsement] = None
    state = EndorsementState.NONE

    for line in recommendation_lines(tail):
        text = clean_line(line.text)

        if text.startswith(STOP_MARKER):
            break

        quote = QUOTE_OPEN_RE.match(text)
        if quote:
            if endorsement is not None:
                endorsements.append(endorsement)
            endorsement = Endorsement(summary=_strip_closing_quote(quote.group(1)))
            state = EndorsementState.SUMMARY
            continue

        if endorsement is None:
            raise ParseError(f"Unable to parse recommendation line '{text}'", line=text)

        dash_name = DASH_NAME_RE.search(text)
        comma = COMMA_PREFIX_RE.match(text)

        if dash_name or line.bold:
            endorsement.name = text if line.bold else dash_name.group(1)
            state = EndorsementState.NAME
        elif line.italic and comma:
            endorsement.position = comma.group(1)
            state = EndorsementState.POSITION
        elif state in (EndorsementState.NAME, EndorsementState.POSITION) and comma:
            relation = comma.group(1)
            endorsement.relation = relation[:1].upper() + relation[1:]
            state = EndorsementState.RELATION
        else:
            endorsement.append_summary(_strip_closing_quote(text), separator=" ")
            state = EndorsementState.SUMMARY

        logger.debug("recommendation_line", state=state.value)

    if endorsement is not None:
        endorsements.append(endorsement)

    return endorsements
