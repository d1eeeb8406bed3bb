"""
Profile parsing routes
"""
import os
import uuid
from pathlib import Path
from typing import List
from fastapi import APIRouter, UploadFile, File, Query
import structlog

from profile_parser.core.config import settings
from profile_parser.core.exceptions import ValidationError
from profile_parser.profiles.parser import ProfileParser
from profile_parser.profiles.schemas import ParsedProfile
from profile_parser.profiles.sections import Section

router = APIRouter(prefix="/api/v1/profiles", tags=["Profiles"])
logger = structlog.get_logger()
parser = ProfileParser()


@router.get("/sections", response_model=List[str])
def list_sections():
    """Section names accepted by the `sections` filter"""
    return [section.value for section in Section]


@router.post("/parse", response_model=ParsedProfile)
def parse_profile(
    file: UploadFile = File(...),
    sections: List[str] = Query(default=[]),
):
    """Parse an uploaded profile PDF"""
    requested = [Section.parse(name) for name in sections]

    file_ext = Path(file.filename or "").suffix.lower().lstrip('.')
    if file_ext not in settings.ALLOWED_FILE_EXTENSIONS:
        raise ValidationError(
            f"File type not allowed. Allowed types: {', '.join(settings.ALLOWED_FILE_EXTENSIONS)}"
        )

    file_content = file.file.read()
    file_size_mb = len(file_content) / (1024 * 1024)
    if file_size_mb > settings.MAX_UPLOAD_SIZE_MB:
        raise ValidationError(
            f"File size exceeds maximum allowed size of {settings.MAX_UPLOAD_SIZE_MB}MB"
        )

    os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
    file_path = os.path.join(settings.UPLOAD_DIR, f"{uuid.uuid4()}.{file_ext}")
    with open(file_path, "wb") as f:
        f.write(file_content)

    logger.info("profile_uploaded", file_name=file.filename, size=len(file_content))

    try:
        return parser.parse_file(file_path, requested)
    finally:
        os.remove(file_path)
