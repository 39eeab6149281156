import pytest

from case_reference.reference.evidence import split_evidence
from case_reference.reference.scanner import is_structural_line
from case_reference.reference.text import trim


@pytest.mark.parametrize(
    "text, expected",
    [
        ("  a b  ", "a b"),
        ("\t\r\n\x0b\x0ca\n", "a"),
        ("\ufeff\u00a0\u2003a\u2028\u3000", "a"),
        ("\x1ca\x1f", "\x1ca\x1f"),
        ("\x85a\x85", "\x85a\x85"),
        ("", ""),
    ],
)
def test_trim(text, expected):
    assert trim(text) == expected


def test_structural_line_with_bom():
    assert is_structural_line("\ufeff---")
    assert not is_structural_line("\x1c---")


def test_evidence_content_trim():
    assert split_evidence("Body\u3000*Evidence:\u00a0A\x85*") == ("Body", "A\x85")
