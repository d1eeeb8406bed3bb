"""
Custom exception classes for the profile parser
"""
from typing import Optional, Dict, Any


class ProfileParserException(Exception):
    """Base exception for the profile parser"""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class InputNotFoundError(ProfileParserException):
    """The document to parse does not exist"""

    def __init__(self, path: str):
        super().__init__(f"The file at {path} does not exist.", status_code=404, details={"path": path})


class InputNotReadableError(ProfileParserException):
    """The document to parse exists but cannot be read"""

    def __init__(self, path: str):
        super().__init__(f"The file at {path} is not readable.", status_code=422, details={"path": path})


class ParseError(ProfileParserException):
    """Section content that none of the extractor's patterns recognise"""

    def __init__(
        self,
        message: str,
        line: Optional[str] = None,
        section: Optional[str] = None,
    ):
        details: Dict[str, Any] = {}
        if line is not None:
            details["line"] = line
        if section is not None:
            details["section"] = section
        super().__init__(message, status_code=422, details=details)

    def __str__(self) -> str:
        if self.section:
            return f"{self.message} (while parsing section '{self.section}')"
        return self.message

    @property
    def section(self) -> Optional[str]:
        return self.details.get("section")

    @property
    def line(self) -> Optional[str]:
        return self.details.get("line")


class ValidationError(ProfileParserException):
    """Validation errors"""

    def __init__(self, message: str = "Validation failed", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status_code=422, details=details)


class ExtractionError(ProfileParserException):
    """Text could not be decoded from the document"""

    def __init__(self, message: str = "Text extraction failed", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status_code=422, details=details)
