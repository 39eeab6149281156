# Case Reference
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Derived narrative fields.

Some answers double as the case narratives (complaint, character profile, job
description, actual duties). Which question ids feed which narrative is a fixed
table rather than something read from the document. The defaults below match
the current questionnaire numbering and can be overridden in `casefile.yaml`
when a document is numbered differently.
"""

from dataclasses import dataclass
from typing import Mapping, Sequence

from case_reference.reference.models import QuestionRecord


DERIVED_FIELDS: tuple[str, ...] = (
    "complaint_text",
    "character_profile_text",
    "job_description_text",
    "actual_duties_text",
)


@dataclass(frozen=True)
class DerivedFieldSpec:
    """
    Mapping of one narrative field to its source questions.

    Attributes:
        field:
            CaseRecord attribute name (see `DERIVED_FIELDS`).
        question_ids:
            Source question ids, in output order.
        separator:
            Text placed between the answers of consecutive ids.
    """

    field: str
    question_ids: tuple[int, ...]
    separator: str = "\n\n"


DEFAULT_FIELD_MAPPING: tuple[DerivedFieldSpec, ...] = (
    DerivedFieldSpec(field="character_profile_text", question_ids=(1, 5, 150)),
    DerivedFieldSpec(field="complaint_text", question_ids=(18,)),
    DerivedFieldSpec(field="job_description_text", question_ids=(151,)),
    DerivedFieldSpec(field="actual_duties_text", question_ids=(152,)),
)


def derive_field(questions: Mapping[int, QuestionRecord], spec: DerivedFieldSpec) -> str:
    """
    Compose one narrative field.

    Absent ids and empty answers contribute nothing, so a field whose sources
    are all missing is an empty string.
    """

    parts = [
        questions[qid].answer
        for qid in spec.question_ids
        if qid in questions and questions[qid].answer
    ]
    return spec.separator.join(parts)


def derive_fields(
    questions: Mapping[int, QuestionRecord],
    mapping: Sequence[DerivedFieldSpec] = DEFAULT_FIELD_MAPPING,
) -> dict[str, str]:
    """
    Compose all narrative fields.

    Args:
        questions:
            Parsed question records by id.
        mapping:
            Field table. Fields not listed stay empty.

    Returns:
        A mapping with one entry for every name in `DERIVED_FIELDS`.

    Raises:
        ValueError:
            If the table names an unknown field.
    """

    values = {name: "" for name in DERIVED_FIELDS}
    for spec in mapping:
        if spec.field not in values:
            raise ValueError(f"Unknown derived field: {spec.field}")
        values[spec.field] = derive_field(questions, spec)
    return values
