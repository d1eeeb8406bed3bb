"""
Profile Pydantic schemas
"""
from typing import Optional, List
from datetime import date
from pydantic import BaseModel, Field


class RoleEntry(BaseModel):
    """Shared shape of employment and volunteer entries"""
    title: Optional[str] = None
    organisation: Optional[str] = None
    start: Optional[date] = None
    end: Optional[date] = None  # None with a start date means ongoing
    summary: Optional[str] = None

    @property
    def is_open(self) -> bool:
        return self.start is not None and self.end is None


class Role(RoleEntry):
    """Employment role"""


class VolunteerExperienceEntry(RoleEntry):
    """Volunteer experience entry"""


class EducationEntry(BaseModel):
    """Education entry, filled in line by line"""
    institution: Optional[str] = None
    level: Optional[str] = None
    course_title: Optional[str] = None
    start: Optional[date] = None
    end: Optional[date] = None
    grade: Optional[str] = None
    activities_and_societies: Optional[str] = None


class Certification(BaseModel):
    """Certification or license"""
    title: str
    authority: Optional[str] = None
    license: Optional[str] = None
    obtained_on: Optional[date] = None
    valid_until: Optional[date] = None


class Language(BaseModel):
    """Spoken language"""
    language: str
    level: Optional[str] = None


class SummaryMixin:
    """Accumulates unrecognised lines into `summary`"""

    def append_summary(self, text: str, separator: str = "\n") -> None:
        self.summary = text if self.summary is None else self.summary + separator + text


class Organization(SummaryMixin, BaseModel):
    """Organization membership"""
    name: str
    title: Optional[str] = None
    start: Optional[date] = None
    end: Optional[date] = None
    summary: Optional[str] = None


class HonorAward(SummaryMixin, BaseModel):
    """Honor or award"""
    title: str
    institution: Optional[str] = None
    awarded_on: Optional[date] = None
    summary: Optional[str] = None


class Course(BaseModel):
    """Course, possibly with a name spread over several lines"""
    name: Optional[str] = None

    def append_name(self, text: str) -> None:
        self.name = text if self.name is None else f"{self.name} {text}"


class Project(SummaryMixin, BaseModel):
    """Project"""
    name: str
    start: Optional[date] = None
    end: Optional[date] = None
    members: List[str] = Field(default_factory=list)
    summary: Optional[str] = None

    def append_name(self, text: str) -> None:
        self.name = f"{self.name} {text}"


class TestScore(BaseModel):
    """Test score"""
    __test__ = False  # not a pytest test class

    name: str
    score: Optional[str] = None


class Endorsement(SummaryMixin, BaseModel):
    """Free-text recommendation written by another member"""
    name: Optional[str] = None
    position: Optional[str] = None
    relation: Optional[str] = None
    summary: Optional[str] = None


class ParsedProfile(BaseModel):
    """Everything extracted from one exported profile"""
    name: Optional[str] = None
    surname: Optional[str] = None
    email_address: Optional[str] = None
    summary: Optional[str] = None
    skills: Optional[List[str]] = None
    current_role: Optional[Role] = None
    previous_roles: Optional[List[Role]] = None
    volunteer_experience_entries: Optional[List[VolunteerExperienceEntry]] = None
    education_entries: Optional[List[EducationEntry]] = None
    certifications: Optional[List[Certification]] = None
    languages: Optional[List[Language]] = None
    interests: Optional[str] = None
    honors_and_awards: Optional[List[HonorAward]] = None
    organizations: Optional[List[Organization]] = None
    courses: Optional[List[Course]] = None
    projects: Optional[List[Project]] = None
    test_scores: Optional[List[TestScore]] = None
    recommendations: Optional[List[Endorsement]] = None
    url: Optional[str] = None
