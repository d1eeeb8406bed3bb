"""
Section identifiers and section segmentation
"""
from enum import Enum
from typing import Iterable, List, Optional, Sequence, Tuple

import structlog

from profile_parser.core.exceptions import ValidationError
from profile_parser.profiles.tokens import TextToken

logger = structlog.get_logger()


class Section(str, Enum):
    """Parts of the profile that can be requested for parsing"""

    SUMMARY = "Summary"
    EXPERIENCE = "Experience"
    SKILLS_EXPERTISE = "Skills & Expertise"
    EDUCATION = "Education"
    CERTIFICATIONS = "Certifications"
    VOLUNTEER_EXPERIENCE = "Volunteer Experience"
    LANGUAGES = "Languages"
    INTERESTS = "Interests"
    ORGANIZATIONS = "Organizations"
    COURSES = "Courses"
    PROJECTS = "Projects"
    HONORS_AND_AWARDS = "Honors and Awards"
    TEST_SCORES = "Test Scores"
    URL = "URL"

    # Not titled sections, only used to select what gets parsed
    NAME = "Name"
    EMAIL_ADDRESS = "Email Address"
    RECOMMENDATIONS = "Recommendations"

    @classmethod
    def parse(cls, value: str) -> "Section":
        """Look a section up by its title or its enum name"""
        for section in cls:
            if value == section.value or value.upper().replace(" ", "_") == section.name:
                return section
        raise ValidationError(
            f"Unknown section '{value}'",
            details={"allowed": [section.value for section in cls]},
        )


SECTION_TITLES: Tuple[str, ...] = tuple(
    section.value
    for section in Section
    if section not in (Section.NAME, Section.EMAIL_ADDRESS, Section.RECOMMENDATIONS)
)


def should_parse(section: Section, requested: Iterable[Section]) -> bool:
    """An empty request means every section"""
    requested = set(requested)
    return not requested or section in requested


def find_title(title: str, tokens: Sequence[TextToken]) -> Optional[int]:
    for index, token in enumerate(tokens):
        if token.text == title:
            return index
    return None


def find_section_end(start: int, tokens: Sequence[TextToken]) -> int:
    """Index of the next section title after `start`, or the end of the stream"""
    for index in range(start + 1, len(tokens)):
        if tokens[index].text in SECTION_TITLES:
            return index
    return len(tokens)


def merge_paragraphs(tokens: Sequence[TextToken]) -> List[TextToken]:
    """Join continuation lines (those starting with a space) onto the previous line"""
    merged: List[TextToken] = []
    for token in tokens:
        if merged and token.text.startswith(" "):
            merged[-1] = merged[-1].append(token.text)
        else:
            merged.append(token)
    return merged


def find_section_tokens(title: str, tokens: Sequence[TextToken]) -> List[TextToken]:
    """Raw body tokens of the section titled `title`, empty if the title never occurs"""
    start = find_title(title, tokens)
    if start is None:
        logger.debug("section_missing", section=title)
        return []

    end = find_section_end(start, tokens)
    logger.debug("section_found", section=title, lines=end - start - 1)
    return list(tokens[start + 1:end])


def find_section(title: str, tokens: Sequence[TextToken]) -> List[TextToken]:
    """Paragraph-merged body of the section titled `title`"""
    return merge_paragraphs(find_section_tokens(title, tokens))


def section_text(title: str, tokens: Sequence[TextToken]) -> str:
    return "".join(token.text for token in find_section(title, tokens))
