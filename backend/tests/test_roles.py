from datetime import date

import pytest

from profile_parser.core.exceptions import ParseError
from profile_parser.profiles.extractors.roles import extract_roles, split_current_role, split_role_line
from profile_parser.profiles.schemas import Role, VolunteerExperienceEntry


def test_title_dates_and_summary(tokens):
    lines = tokens([
        ("Engineer at Acme", True),
        "June 2019 - Present",
        "(4 years)",
        "Built things.",
    ])

    roles = extract_roles(lines, Role)

    assert len(roles) == 1
    role = roles[0]
    assert role.title == "Engineer"
    assert role.organisation == "Acme"
    assert role.start == date(2019, 6, 1)
    assert role.end is None
    assert role.summary == "Built things.\n"
    assert role.is_open


def test_first_and_last_parts_are_kept():
    assert split_role_line("Head of Research at Lab at Big Co") == ("Head of Research", "Big Co")


def test_line_without_separator_is_used_twice():
    assert split_role_line("Freelancer") == ("Freelancer", "Freelancer")


def test_plain_line_with_separator_is_summary(tokens):
    lines = tokens([("Engineer at Acme", True), "2018 - 2019", "Worked at night"])

    roles = extract_roles(lines, Role)

    assert len(roles) == 1
    assert roles[0].summary == "Worked at night\n"


def test_whitespace_in_date_line_is_collapsed(tokens):
    lines = tokens([("Engineer at Acme", True), "March 2016  -   April\x002018"])

    role = extract_roles(lines, Role)[0]

    assert role.start == date(2016, 3, 1)
    assert role.end == date(2018, 4, 1)


def test_short_and_page_lines_are_not_summary(tokens):
    lines = tokens([("Engineer at Acme", True), "-", "Page 3 of 4", "Shipped."])
    assert extract_roles(lines, Role)[0].summary == "Shipped.\n"


def test_content_before_first_title_gives_placeholder(tokens):
    lines = tokens(["Some preface", ("Engineer at Acme", True), "2020 - Present"])

    roles = extract_roles(lines, Role)

    assert len(roles) == 2
    assert roles[0].title is None
    assert roles[0].summary is None
    assert roles[1].organisation == "Acme"


def test_role_without_dates(tokens):
    role = extract_roles(tokens([("Advisor at Board", True)]), Role)[0]
    assert role.start is None
    assert role.end is None
    assert not role.is_open


def test_bad_date_line_is_fatal(tokens):
    with pytest.raises(ParseError):
        extract_roles(tokens([("Engineer at Acme", True), "2019 - Foo"]), Role)


def test_volunteer_entries_use_requested_class(tokens):
    entries = extract_roles(tokens([("Mentor at Code Club", True), "2017 - 2018"]), VolunteerExperienceEntry)
    assert isinstance(entries[0], VolunteerExperienceEntry)
    assert entries[0].title == "Mentor"


def test_current_role_is_first_open_entry():
    closed = Role(title="Intern", start=date(2014, 1, 1), end=date(2014, 6, 1))
    first_open = Role(title="Engineer", start=date(2019, 6, 1))
    second_open = Role(title="Advisor", start=date(2020, 1, 1))

    current, previous = split_current_role([closed, first_open, second_open])

    assert current is first_open
    assert previous == [closed, second_open]


def test_no_open_role():
    closed = Role(title="Intern", start=date(2014, 1, 1), end=date(2014, 6, 1))
    assert split_current_role([closed]) == (None, [closed])


def test_year_range_inside_summary_is_not_a_date_line(tokens):
    lines = tokens([
        ("Engineer at Acme", True),
        "June 2019 - Present",
        "Led the 2019 - 2020 migration.",
    ])

    role = extract_roles(lines, Role)[0]

    assert role.start == date(2019, 6, 1)
    assert role.end is None
    assert role.summary == "Led the 2019 - 2020 migration.\n"
