# Case Reference
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Reference document parser.

Turns a case markdown document into a CaseRecord in a single pass. The parser
never fails on document content: malformed markers are read as answer text,
text before the first question is ignored and missing annotations or source
questions degrade to empty strings.
"""

from typing import Sequence

from case_reference.reference.fields import DEFAULT_FIELD_MAPPING, DerivedFieldSpec, derive_fields
from case_reference.reference.models import CaseRecord
from case_reference.reference.scanner import scan_questions


def parse_reference_data(
    document: str,
    fields: Sequence[DerivedFieldSpec] = DEFAULT_FIELD_MAPPING,
) -> CaseRecord:
    """
    Parse a reference document.

    Args:
        document:
            Full document text. Lines are split on `\\n` only.
        fields:
            Derived field table used for the narrative fields.

    Returns:
        A new CaseRecord. Parsing the same text twice yields equal records.
    """

    questions = scan_questions(document.split("\n"))
    return CaseRecord(questions=questions, **derive_fields(questions, fields))
