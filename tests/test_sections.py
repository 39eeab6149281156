import pytest

from case_reference.reference.sections import DEFAULT_SECTION, index_sections, section_label


@pytest.mark.parametrize(
    "line, expected",
    [
        ("## SECTION Background", "Background"),
        ("## SECTION: Employment history", "Employment history"),
        ("  ## SECTION - Damages  ", "Damages"),
        ("## SECTION 2: Witnesses", "2: Witnesses"),
        ("## SECTION", DEFAULT_SECTION),
        ("## Background", None),
        ("### Question 1: Q?", None),
    ],
)
def test_section_label(line, expected):
    assert section_label(line) == expected


def test_index_sections(scenario):
    assert index_sections(scenario) == {1: "Background", 18: "Background"}


def test_questions_before_first_section_get_default():
    doc = "\n".join(
        [
            "### Question 1: Q?",
            "## SECTION Employment",
            "### Question 2: Q?",
            "## SECTION Damages",
            "### Question 3: Q?",
        ]
    )
    assert index_sections(doc, default="General") == {
        1: "General",
        2: "Employment",
        3: "Damages",
    }


def test_repeated_id_takes_last_section():
    doc = "\n".join(
        [
            "## SECTION A",
            "### Question 1: Q?",
            "## SECTION B",
            "### Question 1: Q again?",
        ]
    )
    assert index_sections(doc) == {1: "B"}


def test_overlong_id_is_not_indexed():
    doc = "\n".join(
        [
            "## SECTION A",
            "### Question " + "9" * 5000 + ": Q?",
            "### Question 2: Q?",
        ]
    )
    assert index_sections(doc) == {2: "A"}
