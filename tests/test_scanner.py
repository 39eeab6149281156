import pytest

from case_reference.reference.models import QuestionRecord
from case_reference.reference.scanner import (
    OpenQuestion,
    QuestionScanner,
    flush_question,
    is_structural_line,
    match_question_marker,
    scan_questions,
)


@pytest.mark.parametrize(
    "line, expected",
    [
        ("---", True),
        ("  -----  ", True),
        ("## SECTION Background", True),
        ("\t## SECTION", True),
        ("--", False),
        ("## Section lowercase", False),
        ("text ---", False),
        ("", False),
    ],
)
def test_is_structural_line(line, expected):
    assert is_structural_line(line) is expected


def test_flush_question_splits_evidence():
    open_question = OpenQuestion(
        question_id=4,
        question="Q?",
        answer_lines=["", "  answer  ", "*Evidence: E*", ""],
    )
    assert flush_question(open_question) == QuestionRecord(
        id=4, question="Q?", answer="answer", evidence="E"
    )


def test_flush_question_without_lines():
    assert flush_question(OpenQuestion(question_id=1, question="Q?")) == QuestionRecord(
        id=1, question="Q?", answer="", evidence=""
    )


def test_scanner_states():
    scanner = QuestionScanner()
    assert scanner.open_question is None

    scanner.feed("preamble")
    assert scanner.open_question is None

    scanner.feed("### Question 9: Nine?")
    assert scanner.open_question == OpenQuestion(question_id=9, question="Nine?")

    scanner.feed("answer")
    scanner.feed("---")
    assert scanner.open_question.answer_lines == ["answer"]

    scanner.feed("### Question 10: Ten?")
    assert scanner.open_question.question_id == 10

    questions = scanner.finish()
    assert scanner.open_question is None
    assert questions == {
        9: QuestionRecord(id=9, question="Nine?", answer="answer"),
        10: QuestionRecord(id=10, question="Ten?", answer=""),
    }


def test_scan_questions_uses_fresh_state():
    lines = ["### Question 1: Q?", "a"]
    assert scan_questions(lines) == scan_questions(lines)
    assert scan_questions([]) == {}


def test_match_question_marker():
    assert match_question_marker("### Question 12:  Twelve?  ") == (12, "Twelve?")
    assert match_question_marker("### Question x: Q?") is None
    assert match_question_marker("### Question " + "9" * 5000 + ": Q?") is None


def test_finish_hands_out_an_independent_mapping():
    scanner = QuestionScanner()
    scanner.feed("### Question 1: One?")
    first = scanner.finish()

    scanner.feed("### Question 2: Two?")
    second = scanner.finish()

    assert list(first) == [1]
    assert list(second) == [2]
