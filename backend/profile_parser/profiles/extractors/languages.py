"""
Language extraction
"""
import re
from typing import List, Sequence

from profile_parser.profiles.schemas import Language
from profile_parser.profiles.tokens import TextToken

PROFICIENCY_RE = re.compile(r"^\((.*)\sproficiency\)$")


def extract_languages(lines: Sequence[TextToken]) -> List[Language]:
    """A language line is optionally followed by "(<level> proficiency)" """
    languages = []
    i = 0
    while i < len(lines):
        level = None
        if i + 1 < len(lines):
            match = PROFICIENCY_RE.match(lines[i + 1].text)
            if match:
                level = match.group(1)

        languages.append(Language(language=lines[i].text, level=level))
        i += 2 if level is not None else 1
    return languages
