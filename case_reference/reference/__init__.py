"""Reference document parsing.

A reference document ("case markdown") holds numbered question/answer blocks:

    ## SECTION Background
    ### Question 1: How does X affect Y?
    Free text answer.
    *Evidence: See Exhibit A, p.3*
    ---

`parse_reference_data` turns the document text into a CaseRecord. File loading
lives in `case_reference.reference.registry`.
"""

from case_reference.reference.fields import DEFAULT_FIELD_MAPPING, DerivedFieldSpec
from case_reference.reference.models import CaseRecord, QuestionRecord
from case_reference.reference.parser import parse_reference_data
from case_reference.reference.sections import index_sections

__all__ = [
    "CaseRecord",
    "DEFAULT_FIELD_MAPPING",
    "DerivedFieldSpec",
    "QuestionRecord",
    "index_sections",
    "parse_reference_data",
]
