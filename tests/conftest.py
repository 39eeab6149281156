from pathlib import Path

import pytest


SCENARIO = "\n".join(
    [
        "## SECTION Background",
        "### Question 1: How does X affect Y?",
        "Free text line one.",
        "Free text line two.",
        "*Evidence: See Exhibit A, p.3*",
        "---",
        "### Question 18: What happened on the date?",
        "The incident occurred as described.",
    ]
)


@pytest.fixture
def scenario() -> str:
    return SCENARIO


@pytest.fixture
def case_dir(tmp_path: Path) -> Path:
    """Directory with a reference document and a matching casefile.yaml."""

    (tmp_path / "reference.md").write_text(SCENARIO + "\n", encoding="utf-8")
    (tmp_path / "casefile.yaml").write_text(
        "document: reference.md\noutput: out/case.yaml\nreport: out/case.ods\n",
        encoding="utf-8",
    )
    return tmp_path
