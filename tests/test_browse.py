from case_reference.browse import (
    DiscoveryStatus,
    QuestionRow,
    build_rows,
    filter_rows,
    group_by_section,
)
from case_reference.reference import index_sections, parse_reference_data


DOC = "\n".join(
    [
        "## SECTION Background",
        "### Question 2: Where do you work?",
        "At the depot.",
        "### Question 1: How does autism affect your work?",
        "Noise is a problem.",
        "*Evidence: GP letter*",
        "## SECTION Complaint",
        "### Question 18: What happened?",
        "A meeting on 3 March.",
    ]
)


def _rows(**kwargs):
    return build_rows(parse_reference_data(DOC), index_sections(DOC), **kwargs)


def test_build_rows_orders_by_id_and_adds_sections():
    rows = _rows()

    assert [r.id for r in rows] == [1, 2, 18]
    assert [r.section for r in rows] == ["Background", "Background", "Complaint"]
    assert rows[0].evidence == "GP letter"
    assert rows[0].confidence is None
    assert rows[0].need_discovery is False


def test_build_rows_side_band_data():
    rows = _rows(
        confidence_scores={1: 0.8},
        analysis_results={18: "Strong claim."},
        discovery_statuses={2: DiscoveryStatus(need_discovery=True, have_evidence=False)},
    )
    by_id = {r.id: r for r in rows}

    assert by_id[1].confidence == 0.8
    assert by_id[18].analysis == "Strong claim."
    assert by_id[2].need_discovery is True
    assert by_id[2].have_evidence is False


def test_build_rows_default_section():
    rows = build_rows(parse_reference_data(DOC), {}, default_section="Other")
    assert {r.section for r in rows} == {"Other"}


def test_filter_rows_matches_question_answer_and_section():
    rows = _rows()

    assert [r.id for r in filter_rows(rows, "AUTISM")] == [1]
    assert [r.id for r in filter_rows(rows, "depot")] == [2]
    assert [r.id for r in filter_rows(rows, "complaint")] == [18]
    assert filter_rows(rows, "") == rows
    assert filter_rows(rows, None) == rows
    assert filter_rows(rows, "nothing like this") == []


def test_group_by_section_keeps_first_appearance_order():
    rows = [
        QuestionRow(id=1, section="B", question="q", answer="a"),
        QuestionRow(id=2, section="A", question="q", answer="a"),
        QuestionRow(id=3, section="B", question="q", answer="a"),
    ]
    groups = group_by_section(rows)

    assert list(groups) == ["B", "A"]
    assert [r.id for r in groups["B"]] == [1, 3]
