"""
Course, project and test score extraction
"""
import re
from enum import Enum
from typing import List, Optional, Sequence

from profile_parser.core.exceptions import ParseError
from profile_parser.profiles.dates import parse_date_range
from profile_parser.profiles.schemas import Course, Project, TestScore
from profile_parser.profiles.tokens import TextToken

PROJECT_DATES_RE = re.compile(r"^(?:\w+\s\d{4}\sto\s(?:Present|\w+\s\d{4})|\d{4}\sto\s(?:Present|\d{4}))$")
MEMBERS_RE = re.compile(r"^Members:(.*)")
SCORE_RE = re.compile(r"(?:^|\s)Score:(.*)")
SKIPPED_COURSE_LINES = ("", ".")


class CourseState(Enum):
    NONE = "none"
    NAME = "name"
    MISC = "misc"


class ProjectState(Enum):
    NONE = "none"
    NAME = "name"
    DATES = "dates"
    MEMBERS = "members"
    SUMMARY = "summary"


def extract_courses(lines: Sequence[TextToken]) -> List[Course]:
    """
    Bold lines make up a course name; the first plain line after a name
    closes the course.
    """
    courses: List[Course] = []
    course: Optional[Course] = None
    state = CourseState.NONE

    for line in lines:
        if line.text in SKIPPED_COURSE_LINES:
            continue

        if line.bold:
            if course is None:
                course = Course()
            course.append_name(line.text)
            state = CourseState.NAME
        elif state is CourseState.NAME:
            courses.append(course)
            course = Course()
            state = CourseState.MISC

    if course is not None and course.name is not None:
        courses.append(course)

    return courses


def _project_dates_shape(text: str) -> bool:
    # "June 2015 to Present", "June 2015 to May 2016", "2015 to 2016", "2015 to Present"
    return bool(PROJECT_DATES_RE.match(text))


def extract_projects(lines: Sequence[TextToken]) -> List[Project]:
    projects: List[Project] = []
    project: Optional[Project] = None
    state = ProjectState.NONE

    for line in lines:
        text = line.text

        if line.bold and state is ProjectState.NAME:
            project.append_name(text)
            continue

        if line.bold:
            if project is not None:
                projects.append(project)
            project = Project(name=text)
            state = ProjectState.NAME
            continue

        if project is None:
            raise ParseError(f"Unable to parse project line '{text}'", line=text)

        members = MEMBERS_RE.match(text)
        if _project_dates_shape(text):
            project.start, project.end = parse_date_range(text, " to ")
            state = ProjectState.DATES
        elif members:
            project.members = [member.strip() for member in members.group(1).split(",")]
            state = ProjectState.MEMBERS
        else:
            project.append_summary(text)
            state = ProjectState.SUMMARY

    if project is not None:
        projects.append(project)

    return projects


def extract_test_scores(lines: Sequence[TextToken]) -> List[TestScore]:
    scores: List[TestScore] = []
    score: Optional[TestScore] = None

    for line in lines:
        text = line.text
        if line.bold:
            if score is not None:
                scores.append(score)
            score = TestScore(name=text)
            continue

        match = SCORE_RE.search(text)
        if match:
            if score is None:
                raise ParseError(f"Score line before any test name: '{text}'", line=text)
            score.score = match.group(1).strip()

    if score is not None:
        scores.append(score)

    return scores
