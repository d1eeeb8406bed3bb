from profile_parser.profiles.extractors.languages import extract_languages


def test_language_with_and_without_level(tokens):
    languages = extract_languages(tokens([
        "English",
        "(Native or bilingual proficiency)",
        "French",
        "German",
        "(Elementary proficiency)",
    ]))

    assert [(l.language, l.level) for l in languages] == [
        ("English", "Native or bilingual"),
        ("French", None),
        ("German", "Elementary"),
    ]


def test_level_line_must_be_parenthesised(tokens):
    languages = extract_languages(tokens(["Spanish", "Limited working proficiency"]))
    assert [l.language for l in languages] == ["Spanish", "Limited working proficiency"]
