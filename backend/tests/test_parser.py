from datetime import date

import pytest

from profile_parser.core.exceptions import InputNotFoundError, ParseError
from profile_parser.profiles import parser as parser_module
from profile_parser.profiles.parser import ProfileParser, split_tail
from profile_parser.profiles.sections import Section


@pytest.fixture
def profile_parser():
    return ProfileParser()


def test_full_profile(profile_parser, profile_tokens, profile_pdf_bytes):
    profile = profile_parser.parse(profile_tokens, profile_pdf_bytes)

    assert profile.name == "Jane"
    assert profile.surname == "Doe"
    assert profile.email_address == "jane.doe@gmail.com"
    assert profile.summary == "Product engineer who likes building tools."
    assert profile.skills == ["Python", "Distributed Systems"]

    assert profile.current_role.title == "Senior Engineer"
    assert profile.current_role.organisation == "Acme Corp"
    assert profile.current_role.start == date(2019, 6, 1)
    assert profile.current_role.summary == "Leads the platform team.\n"
    assert [role.organisation for role in profile.previous_roles] == ["Initech"]
    assert profile.previous_roles[0].summary == "Built the billing system.\n"

    education = profile.education_entries[0]
    assert education.institution == "University of Somewhere"
    assert education.grade == "First Class"

    assert [(l.language, l.level) for l in profile.languages] == [
        ("English", "Native or bilingual"),
        ("French", None),
    ]
    assert profile.interests == "climbing, chess"

    assert len(profile.recommendations) == 1
    assert profile.recommendations[0].name == "John Smith"

    assert profile.url == "https://www.linkedin.com/in/janedoe"


def test_absent_sections_are_none(profile_parser, profile_tokens):
    profile = profile_parser.parse(profile_tokens)

    assert profile.certifications is None
    assert profile.courses is None
    assert profile.volunteer_experience_entries is None
    assert profile.url is None


def test_selective_parsing(profile_parser, profile_tokens):
    profile = profile_parser.parse(profile_tokens, sections=[Section.EDUCATION])

    assert profile.education_entries[0].level == "Bachelor of Arts"
    assert profile.name is None
    assert profile.email_address is None
    assert profile.current_role is None
    assert profile.recommendations is None


def test_sections_may_be_given_by_name(profile_parser, profile_tokens):
    profile = profile_parser.parse(profile_tokens, sections=["Languages", "email_address"])

    assert len(profile.languages) == 2
    assert profile.email_address == "jane.doe@gmail.com"
    assert profile.skills is None


def test_unrequested_broken_section_is_not_parsed(profile_parser, tokens):
    stream = tokens(["Jane Doe", "Certifications", "Python", "nonsense", "Interests", "chess"])

    profile = profile_parser.parse(stream, sections=[Section.INTERESTS])

    assert profile.interests == "chess"


def test_parse_error_names_the_section(profile_parser, tokens):
    stream = tokens(["Jane Doe", "Certifications", "Python", "nonsense"])

    with pytest.raises(ParseError) as excinfo:
        profile_parser.parse(stream)

    assert excinfo.value.section == "Certifications"
    assert excinfo.value.line == "nonsense"
    assert "Certifications" in str(excinfo.value)


def test_empty_document_is_rejected(profile_parser, tokens):
    with pytest.raises(ParseError):
        profile_parser.parse(tokens(["Page", "1"]))


def test_page_markers_do_not_leak_into_sections(profile_parser, tokens):
    stream = tokens(["Jane Doe", "Skills & Expertise", "Python", "Page", "2", "Go"])
    assert profile_parser.parse(stream).skills == ["Python", "Go"]


def test_split_tail_at_last_name(tokens):
    head, tail = split_tail(tokens(["Jane", "a", "Jane", "b", "Jane", "c"]), "Jane")

    assert [t.text for t in head] == ["Jane", "a", "Jane", "b"]
    assert [t.text for t in tail] == ["c"]


def test_split_tail_without_repeat(tokens):
    head, tail = split_tail(tokens(["Jane", "a"]), "Jane")

    assert [t.text for t in head] == ["Jane", "a"]
    assert tail == []


def test_parse_file_missing_path(profile_parser, tmp_path):
    with pytest.raises(InputNotFoundError):
        profile_parser.parse_file(str(tmp_path / "missing.pdf"))


def test_parse_file_reads_url_from_raw_content(profile_parser, profile_tokens, profile_pdf_bytes, tmp_path, monkeypatch):
    pdf_path = tmp_path / "profile.pdf"
    pdf_path.write_bytes(profile_pdf_bytes)
    monkeypatch.setattr(parser_module, "extract_tokens", lambda file_path: profile_tokens)

    profile = profile_parser.parse_file(str(pdf_path))

    assert profile.url == "https://www.linkedin.com/in/janedoe"
    assert profile.name == "Jane"


def test_name_token_with_leading_space(profile_parser, tokens):
    profile = profile_parser.parse(tokens([" Jane Doe", "Summary", "Hi"]))

    assert (profile.name, profile.surname) == ("Jane", "Doe")
    assert profile.summary == "Hi"


def test_empty_section_body_is_none(profile_parser, tokens):
    profile = profile_parser.parse(tokens(["Jane Doe", "Courses", "Projects", "Interests", "chess"]))

    assert profile.courses is None
    assert profile.projects is None
    assert profile.interests == "chess"


def test_section_without_records_is_empty_list(profile_parser, tokens):
    profile = profile_parser.parse(tokens(["Jane Doe", "Courses", ".", "Interests", "chess"]))

    assert profile.courses == []
