"""
PDF access for profile parsing: styled text tokens and embedded hyperlinks
"""
import os
import re
from itertools import groupby
from pathlib import Path
from typing import Any, Dict, List, Optional

import pdfplumber
import structlog

from profile_parser.core.exceptions import ExtractionError, InputNotFoundError, InputNotReadableError
from profile_parser.profiles.tokens import TextToken

logger = structlog.get_logger()

BOLD_FONT_RE = re.compile(r"bold|black|heavy|semibold|demi", re.IGNORECASE)
ITALIC_FONT_RE = re.compile(r"italic|oblique", re.IGNORECASE)
URI_RE = re.compile(rb"URI \(([^,]*?)\)")


def check_readable(file_path: str) -> Path:
    """
    Raises:
        InputNotFoundError: If nothing exists at `file_path`
        InputNotReadableError: If the file cannot be opened for reading
    """
    path = Path(file_path)
    if not path.is_file():
        raise InputNotFoundError(file_path)
    if not os.access(path, os.R_OK):
        raise InputNotReadableError(file_path)
    return path


def _font_run_token(chars: List[Dict[str, Any]], position: int) -> TextToken:
    fontname = chars[0].get("fontname", "")
    return TextToken(
        text="".join(char["text"] for char in chars),
        bold=bool(BOLD_FONT_RE.search(fontname)),
        italic=bool(ITALIC_FONT_RE.search(fontname)),
        position=position,
    )


def extract_tokens(file_path: str) -> List[TextToken]:
    """
    Extract text tokens in reading order.

    Every text line is split into runs of characters sharing one font, and
    each run becomes a token styled from its font name.
    """
    path = check_readable(file_path)
    tokens: List[TextToken] = []

    try:
        with pdfplumber.open(path) as pdf:
            for page in pdf.pages:
                for line in page.extract_text_lines(strip=False, return_chars=True):
                    for _, run in groupby(line["chars"], key=lambda char: char.get("fontname", "")):
                        token = _font_run_token(list(run), len(tokens))
                        if token.text:
                            tokens.append(token)
    except Exception as e:
        logger.error("token_extraction_failed", file_path=str(path), error=str(e))
        raise ExtractionError(f"Unable to extract text from {path.name}", details={"error": str(e)}) from e

    logger.info("tokens_extracted", file_path=str(path), tokens=len(tokens))
    return tokens


def find_hyperlink(content: bytes) -> Optional[str]:
    """The last `URI (<value>)` entry in the raw file content"""
    matches = URI_RE.findall(content)
    if not matches or not matches[-1]:
        return None
    url = matches[-1].decode("latin-1")
    logger.debug("hyperlink_found", url=url, candidates=len(matches))
    return url
