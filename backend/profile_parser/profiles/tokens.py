"""
Text tokens and page-marker filtering
"""
import re
from typing import List, Optional, Sequence

from pydantic import BaseModel

from profile_parser.core.config import settings

NUMERIC_RE = re.compile(r"^\s*\d+(?:\.\d+)?\s*$")


class TextToken(BaseModel):
    """A run of extracted text sharing one font"""
    text: str
    bold: bool = False
    italic: bool = False
    position: int = 0

    class Config:
        frozen = True

    def __str__(self) -> str:
        return self.text

    def append(self, text: str) -> "TextToken":
        """Return a copy with `text` appended, keeping this token's style and position"""
        return self.model_copy(update={"text": self.text + text})


def make_tokens(lines: Sequence, start: int = 0) -> List[TextToken]:
    """
    Build tokens in document order from plain strings or (text, bold, italic) tuples.

    Mostly a convenience for callers that already hold decoded text.
    """
    tokens = []
    for offset, line in enumerate(lines):
        if isinstance(line, TextToken):
            tokens.append(line.model_copy(update={"position": start + offset}))
            continue
        if isinstance(line, str):
            text, bold, italic = line, False, False
        else:
            text, bold, italic = (tuple(line) + (False, False))[:3]
        tokens.append(TextToken(text=text, bold=bold, italic=italic, position=start + offset))
    return tokens


def is_page_marker(token: TextToken, marker: Optional[str] = None) -> bool:
    marker = marker or settings.PAGE_MARKER
    return token.text.strip() == marker


def is_numeric(token: TextToken) -> bool:
    return bool(NUMERIC_RE.match(token.text))


def drop_page_markers(tokens: Sequence[TextToken], marker: Optional[str] = None) -> List[TextToken]:
    """
    Remove "Page" / <number> token pairs.

    A kept page marker that ends up directly before a numeric token is dropped
    together with it, so the output never contains such a pair and a second
    pass is a no-op.
    """
    kept: List[TextToken] = []
    for token in tokens:
        if kept and is_numeric(token) and is_page_marker(kept[-1], marker):
            kept.pop()
            continue
        kept.append(token)
    return kept
