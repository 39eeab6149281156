# Case Reference
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Parsed case data model."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping


@dataclass(frozen=True)
class QuestionRecord:
    """
    One numbered question with its answer.

    Attributes:
        id:
            Question number as declared by the document marker. Not renumbered.
        question:
            Question text (trimmed).
        answer:
            Answer text (trimmed) without the trailing evidence annotation.
        evidence:
            Content of the evidence annotation, or an empty string.
    """

    id: int
    question: str
    answer: str
    evidence: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "question": self.question,
            "answer": self.answer,
            "evidence": self.evidence,
        }


@dataclass(frozen=True)
class CaseRecord:
    """
    Result of parsing one reference document.

    The narrative fields are derived once from `questions` when the record is
    built and never change afterwards. `questions` is copied into a read-only
    mapping on construction so the two cannot drift apart.

    Attributes:
        questions:
            Question records keyed by their document id.
        complaint_text:
            Complaint narrative.
        character_profile_text:
            Character profile narrative (several answers joined by blank lines).
        job_description_text:
            Job description narrative.
        actual_duties_text:
            Actual duties narrative.
    """

    questions: Mapping[int, QuestionRecord] = field(default_factory=dict)
    complaint_text: str = ""
    character_profile_text: str = ""
    job_description_text: str = ""
    actual_duties_text: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "questions", MappingProxyType(dict(self.questions)))

    def __hash__(self) -> int:
        return hash(
            (
                tuple(sorted(self.questions.items())),
                self.complaint_text,
                self.character_profile_text,
                self.job_description_text,
                self.actual_duties_text,
            )
        )

    def to_dict(self) -> dict[str, Any]:
        """Return a plain mapping with questions ordered by id."""

        return {
            "complaint_text": self.complaint_text,
            "character_profile_text": self.character_profile_text,
            "job_description_text": self.job_description_text,
            "actual_duties_text": self.actual_duties_text,
            "questions": [self.questions[qid].to_dict() for qid in sorted(self.questions)],
        }
