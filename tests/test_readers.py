import pytest
from odfdo import Document, Paragraph

from case_reference.config import ConfigError
from case_reference.reference import parse_reference_data
from case_reference.reference.base import ParserError
from case_reference.reference.odt_reader import OdtDocumentReader
from case_reference.reference.registry import get_document_reader, read_reference_document
from case_reference.reference.text_reader import TextDocumentReader


def test_reader_selection(tmp_path):
    assert isinstance(get_document_reader(tmp_path / "a.md"), TextDocumentReader)
    assert isinstance(get_document_reader(tmp_path / "a.TXT"), TextDocumentReader)
    assert isinstance(get_document_reader(tmp_path / "a.odt"), OdtDocumentReader)

    with pytest.raises(ConfigError, match="Unsupported"):
        get_document_reader(tmp_path / "a.pdf")


def test_text_reader_normalizes_line_breaks(tmp_path):
    path = tmp_path / "reference.md"
    path.write_bytes("\ufeff### Question 1: Q?\r\nline one\rline two\r\n".encode("utf-8"))

    text = read_reference_document(path)

    assert text == "### Question 1: Q?\nline one\nline two\n"
    assert parse_reference_data(text).questions[1].answer == "line one\nline two"


def test_text_reader_rejects_invalid_utf8(tmp_path):
    path = tmp_path / "reference.txt"
    path.write_bytes(b"### Question 1: Q?\n\xff\xfe broken")

    with pytest.raises(ParserError):
        TextDocumentReader().read_text(path)

    with pytest.raises(ConfigError, match="UTF-8"):
        read_reference_document(path)


def test_missing_document(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        read_reference_document(tmp_path / "missing.md")


def test_odt_reader(tmp_path, scenario):
    path = tmp_path / "reference.odt"
    doc = Document.new("text")
    for line in scenario.split("\n"):
        doc.body.append(Paragraph(line))
    doc.save(path)

    case = parse_reference_data(read_reference_document(path))

    assert case.questions[1].answer == "Free text line one.\nFree text line two."
    assert case.questions[1].evidence == "See Exhibit A, p.3"
    assert case.complaint_text == "The incident occurred as described."


def test_broken_odt(tmp_path):
    path = tmp_path / "broken.odt"
    path.write_text("not a zip file", encoding="utf-8")

    with pytest.raises(ConfigError, match="ODT"):
        read_reference_document(path)


def test_parser_error_message(tmp_path):
    error = ParserError("Bad thing", path=tmp_path / "x.md", line=3, excerpt="a\nb")
    assert str(error) == f"{tmp_path / 'x.md'}:3: Bad thing\n> a b"
