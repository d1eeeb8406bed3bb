"""
Profile parsing service
"""
from typing import Callable, Iterable, List, Optional, Sequence, Set, Tuple, TypeVar, Union

import structlog

from profile_parser.core.config import settings
from profile_parser.core.exceptions import ParseError
from profile_parser.profiles.extractors import (
    extract_certifications,
    extract_courses,
    extract_education,
    extract_endorsements,
    extract_honors_and_awards,
    extract_languages,
    extract_organizations,
    extract_projects,
    extract_roles,
    extract_test_scores,
    find_email,
    full_name,
    name_from_contact,
    split_current_role,
    split_full_name,
)
from profile_parser.profiles.pdf_extractor import check_readable, extract_tokens, find_hyperlink
from profile_parser.profiles.schemas import ParsedProfile, Role, VolunteerExperienceEntry
from profile_parser.profiles.sections import Section, find_section, section_text, should_parse
from profile_parser.profiles.tokens import TextToken, drop_page_markers

logger = structlog.get_logger()

T = TypeVar("T")


def split_tail(tokens: Sequence[TextToken], name: str) -> Tuple[List[TextToken], List[TextToken]]:
    """
    Split the document at the last occurrence of the member's name.

    Everything before it holds the titled sections, everything after it the
    recommendations. A name that only appears as the first token leaves the
    tail empty.
    """
    for index in range(len(tokens) - 1, 0, -1):
        if tokens[index].text == name:
            return list(tokens[:index]), list(tokens[index + 1:])
    return list(tokens), []


class ProfileParser:
    """Parse LinkedIn profile exports into a ParsedProfile"""

    def __init__(self, email_lookahead: Optional[int] = None, page_marker: Optional[str] = None):
        self.email_lookahead = email_lookahead or settings.EMAIL_LOOKAHEAD
        self.page_marker = page_marker or settings.PAGE_MARKER

    def parse_file(self, file_path: str, sections: Iterable[Union[Section, str]] = ()) -> ParsedProfile:
        """Parse a profile PDF from disk"""
        requested = self._requested(sections)
        path = check_readable(file_path)
        tokens = extract_tokens(str(path))
        content = path.read_bytes() if should_parse(Section.URL, requested) else None
        return self.parse(tokens, content, requested)

    def parse(
        self,
        tokens: Sequence[TextToken],
        raw_content: Optional[bytes] = None,
        sections: Iterable[Union[Section, str]] = (),
    ) -> ParsedProfile:
        """
        Parse an extracted token stream.

        Args:
            tokens: Text tokens in document order
            raw_content: Unparsed file bytes, scanned for the profile URL
            sections: Sections to parse; empty means all of them

        Raises:
            ParseError: If any requested section holds content that cannot be interpreted
        """
        requested = self._requested(sections)
        tokens = drop_page_markers(tokens, self.page_marker)
        if not tokens:
            raise ParseError("The document contains no text")

        def wanted(section: Section) -> bool:
            return should_parse(section, requested)

        profile = ParsedProfile()
        name = full_name(tokens)
        head, tail = split_tail(tokens, name)

        if wanted(Section.NAME):
            profile.name, profile.surname = split_full_name(name, name_from_contact(tokens))

        if wanted(Section.EMAIL_ADDRESS):
            profile.email_address = find_email(head, self.email_lookahead)

        if wanted(Section.SKILLS_EXPERTISE):
            profile.skills = self._section(Section.SKILLS_EXPERTISE, head, lambda lines: [line.text for line in lines])

        if wanted(Section.SUMMARY):
            profile.summary = section_text(Section.SUMMARY.value, head) or None

        if wanted(Section.EXPERIENCE):
            roles = self._section(Section.EXPERIENCE, head, lambda lines: extract_roles(lines, Role))
            if roles is not None:
                profile.current_role, profile.previous_roles = split_current_role(roles)

        if wanted(Section.VOLUNTEER_EXPERIENCE):
            profile.volunteer_experience_entries = self._section(
                Section.VOLUNTEER_EXPERIENCE, head, lambda lines: extract_roles(lines, VolunteerExperienceEntry)
            )

        if wanted(Section.EDUCATION):
            profile.education_entries = self._section(Section.EDUCATION, head, extract_education)

        if wanted(Section.CERTIFICATIONS):
            profile.certifications = self._section(Section.CERTIFICATIONS, head, extract_certifications)

        if wanted(Section.LANGUAGES):
            profile.languages = self._section(Section.LANGUAGES, head, extract_languages)

        if wanted(Section.INTERESTS):
            profile.interests = section_text(Section.INTERESTS.value, head) or None

        if wanted(Section.HONORS_AND_AWARDS):
            profile.honors_and_awards = self._section(Section.HONORS_AND_AWARDS, head, extract_honors_and_awards)

        if wanted(Section.ORGANIZATIONS):
            profile.organizations = self._section(Section.ORGANIZATIONS, head, extract_organizations)

        if wanted(Section.COURSES):
            profile.courses = self._section(Section.COURSES, head, extract_courses)

        if wanted(Section.PROJECTS):
            profile.projects = self._section(Section.PROJECTS, head, extract_projects)

        if wanted(Section.TEST_SCORES):
            profile.test_scores = self._section(Section.TEST_SCORES, head, extract_test_scores)

        if wanted(Section.RECOMMENDATIONS) and tail:
            profile.recommendations = self._guarded(Section.RECOMMENDATIONS, extract_endorsements, tail) or None

        if wanted(Section.URL) and raw_content is not None:
            profile.url = find_hyperlink(raw_content)

        logger.info(
            "profile_parsed",
            tokens=len(tokens),
            sections=sorted(section.value for section in requested) or "all",
        )
        return profile

    @staticmethod
    def _requested(sections: Iterable[Union[Section, str]]) -> Set[Section]:
        return {section if isinstance(section, Section) else Section.parse(section) for section in sections}

    def _section(
        self,
        section: Section,
        tokens: Sequence[TextToken],
        extract: Callable[[List[TextToken]], T],
    ) -> Optional[T]:
        """Run `extract` over a titled section; None when the section is absent or has no body"""
        lines = find_section(section.value, tokens)
        if not lines:
            return None
        return self._guarded(section, extract, lines)

    @staticmethod
    def _guarded(section: Section, extract: Callable[[List[TextToken]], T], lines: List[TextToken]) -> T:
        try:
            return extract(lines)
        except ParseError as e:
            e.details.setdefault("section", section.value)
            logger.error("profile_parse_failed", section=section.value, error=e.message, line=e.line)
            raise
