from datetime import date

import pytest

from profile_parser.core.exceptions import ParseError
from profile_parser.profiles.dates import parse_date, parse_date_range


def test_month_year_range_open_ended():
    assert parse_date_range("June 2019 - Present") == (date(2019, 6, 1), None)


def test_year_range():
    assert parse_date_range("2015 - 2017") == (date(2015, 1, 1), date(2017, 1, 1))


def test_to_separator():
    assert parse_date_range("March 2010 to June 2012", " to ") == (date(2010, 3, 1), date(2012, 6, 1))


def test_abbreviated_month():
    assert parse_date("Sep 2018") == date(2018, 9, 1)


def test_unparseable_end_is_fatal():
    with pytest.raises(ParseError) as excinfo:
        parse_date_range("2019 - Foo")
    assert excinfo.value.line == "Foo"


def test_present_is_only_accepted_as_end():
    with pytest.raises(ParseError):
        parse_date_range("Present - 2019")


@pytest.mark.parametrize("value", ["2015", "2015 - 2016 - 2017", "June 2019 to Present"])
def test_wrong_number_of_parts_is_fatal(value):
    with pytest.raises(ParseError):
        parse_date_range(value)


@pytest.mark.parametrize("value", ["Summer 2019", "19", "2019-06", ""])
def test_other_shapes_are_fatal(value):
    with pytest.raises(ParseError):
        parse_date(value)
