"""
Per-section extractors. Each takes the (merged) lines of one region of the
profile and returns the records found there.
"""
from profile_parser.profiles.extractors.accomplishments import extract_courses, extract_projects, extract_test_scores
from profile_parser.profiles.extractors.certifications import extract_certifications
from profile_parser.profiles.extractors.education import extract_education
from profile_parser.profiles.extractors.endorsements import extract_endorsements
from profile_parser.profiles.extractors.identity import find_email, full_name, name_from_contact, split_full_name
from profile_parser.profiles.extractors.languages import extract_languages
from profile_parser.profiles.extractors.organizations import extract_honors_and_awards, extract_organizations
from profile_parser.profiles.extractors.roles import extract_roles, split_current_role

__all__ = [
    "extract_certifications",
    "extract_courses",
    "extract_education",
    "extract_endorsements",
    "extract_honors_and_awards",
    "extract_languages",
    "extract_organizations",
    "extract_projects",
    "extract_roles",
    "extract_test_scores",
    "find_email",
    "full_name",
    "name_from_contact",
    "split_current_role",
    "split_full_name",
]
