"""
Pytest configuration and fixtures for profile parser tests.
"""
import pytest

from profile_parser.profiles.tokens import make_tokens


SAMPLE_PROFILE = [
    ("Jane Doe", True),
    "jane.doe@gmail.com",
    "Summary",
    "Product engineer who likes",
    " building tools.",
    "Experience",
    ("Senior Engineer at Acme Corp", True),
    "June 2019 - Present",
    "(4 years)",
    "Leads the platform team.",
    ("Engineer at Initech", True),
    "January 2015 - May 2019",
    "Built the billing system.",
    "Page ",
    "1",
    "Skills & Expertise",
    "Python",
    "Distributed Systems",
    "Education",
    "University of Somewhere",
    "Bachelor of Arts, Theatre Management, 2006 - 2010",
    "Grade:",
    "First Class",
    "Languages",
    "English",
    "(Native or bilingual proficiency)",
    "French",
    "Interests",
    "climbing, chess",
    ("Jane Doe", True),
    "2 people have recommended Jane",
    '"Jane is a great engineer.',
    'Would hire again."',
    ("John Smith", True),
    (", Staff Engineer", False, True),
    ", worked with Jane on the same team",
    "Contact Jane on LinkedIn",
]


@pytest.fixture
def tokens():
    """Build tokens from strings or (text, bold, italic) tuples."""
    return make_tokens


@pytest.fixture
def profile_tokens():
    """A complete profile export as a token stream."""
    return make_tokens(SAMPLE_PROFILE)


@pytest.fixture
def profile_pdf_bytes():
    """Raw file content carrying two link annotations."""
    return (
        b"%PDF-1.4\n"
        b"<< /A << /S /URI /URI (https://www.linkedin.com/company/acme) >> >>\n"
        b"<< /A << /S /URI /URI (https://www.linkedin.com/in/janedoe) >> >>\n"
        b"%%EOF"
    )
