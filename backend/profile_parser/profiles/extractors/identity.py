"""
Name, surname and email extraction
"""
import re
from typing import Optional, Sequence, Tuple

from pydantic import EmailStr, TypeAdapter, ValidationError

from profile_parser.profiles.tokens import TextToken

CONTACT_RE = re.compile(r"Contact (.*) on LinkedIn")

_email_adapter = TypeAdapter(EmailStr)


def full_name(tokens: Sequence[TextToken]) -> Optional[str]:
    return tokens[0].text if tokens else None


def is_email(text: str) -> bool:
    try:
        _email_adapter.validate_python(text)
    except ValidationError:
        return False
    return True


def find_email(tokens: Sequence[TextToken], lookahead: int = 4) -> Optional[str]:
    """First valid address among the `lookahead` tokens after the full name"""
    for token in tokens[1:1 + lookahead]:
        candidate = token.text.strip()
        if is_email(candidate):
            return candidate
    return None


def name_from_contact(tokens: Sequence[TextToken]) -> Optional[str]:
    """The <name> in the "Contact <name> on LinkedIn" footer, searching from the end"""
    for token in reversed(tokens):
        match = CONTACT_RE.search(token.text)
        if match:
            return match.group(1)
    return None


def split_full_name(name: str, pivot: Optional[str] = None) -> Tuple[str, str]:
    """
    Split a full name into (name, surname) around `pivot`.

    Without a pivot the first word of the full name is used.
    """
    name = name.strip()
    if not pivot:
        words = name.split()
        if not words:
            return name, ""
        pivot = words[0]
    _, _, surname = name.partition(pivot)
    return pivot, surname.strip()
