from case_reference.smoke import main


def test_builtin_sample(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out

    assert "Questions: 2" in out
    assert "With evidence: 1" in out


def test_document_argument(case_dir, capsys):
    assert main([str(case_dir / "reference.md"), "--print-case"]) == 0
    assert '"evidence": "See Exhibit A, p.3"' in capsys.readouterr().out


def test_missing_document(tmp_path, capsys):
    assert main([str(tmp_path / "missing.md")]) == 2
    assert "CONFIG ERROR" in capsys.readouterr().out
