"""
Case reference CLI package.

This package turns a case reference document (numbered question/answer blocks
in markdown) into structured data and supports:
- parsing the document into question records and derived narrative fields,
- browsing and searching the parsed questions by section,
- writing a YAML case file or a spreadsheet report.
"""

from __future__ import annotations
