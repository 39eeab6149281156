# Case Reference
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Question rows for browsing.

The question browser shows parsed questions grouped by section and lets the
user search them. It expects a flat list of rows carrying a section label plus
optional per-question annotations (confidence, analysis text, discovery
status) that are produced elsewhere. This module builds those rows and
implements the search and grouping rules; it keeps no UI state.
"""

from dataclasses import dataclass
from typing import Mapping, Sequence

from case_reference.reference.models import CaseRecord
from case_reference.reference.sections import DEFAULT_SECTION


@dataclass(frozen=True)
class DiscoveryStatus:
    """Discovery flags for one question."""

    need_discovery: bool = False
    have_evidence: bool = False


@dataclass(frozen=True)
class QuestionRow:
    """
    One question as displayed by the browser.

    Attributes:
        id:
            Question id.
        section:
            Section label.
        question, answer, evidence:
            Parsed texts.
        confidence:
            Optional confidence score.
        analysis:
            Optional analysis text.
        need_discovery, have_evidence:
            Discovery flags (False when unknown).
    """

    id: int
    section: str
    question: str
    answer: str
    evidence: str = ""
    confidence: float | None = None
    analysis: str | None = None
    need_discovery: bool = False
    have_evidence: bool = False


def build_rows(
    case: CaseRecord,
    sections: Mapping[int, str],
    *,
    default_section: str = DEFAULT_SECTION,
    confidence_scores: Mapping[int, float] | None = None,
    analysis_results: Mapping[int, str] | None = None,
    discovery_statuses: Mapping[int, DiscoveryStatus] | None = None,
) -> list[QuestionRow]:
    """
    Combine parsed questions with section labels and side-band annotations.

    Args:
        case:
            Parsed case.
        sections:
            Section label by question id (see `index_sections`).
        default_section:
            Label for questions without an entry in `sections`.
        confidence_scores, analysis_results, discovery_statuses:
            Optional annotations keyed by question id.

    Returns:
        Rows ordered by question id.
    """

    confidence_scores = confidence_scores or {}
    analysis_results = analysis_results or {}
    discovery_statuses = discovery_statuses or {}

    rows: list[QuestionRow] = []
    for qid in sorted(case.questions):
        q = case.questions[qid]
        status = discovery_statuses.get(qid, DiscoveryStatus())
        rows.append(
            QuestionRow(
                id=q.id,
                section=sections.get(qid, default_section),
                question=q.question,
                answer=q.answer,
                evidence=q.evidence,
                confidence=confidence_scores.get(qid),
                analysis=analysis_results.get(qid),
                need_discovery=status.need_discovery,
                have_evidence=status.have_evidence,
            )
        )
    return rows


def filter_rows(rows: Sequence[QuestionRow], term: str | None) -> list[QuestionRow]:
    """Return rows whose question, answer or section contains `term` (case-insensitive)."""

    if not term:
        return list(rows)

    needle = term.lower()
    return [
        r
        for r in rows
        if needle in r.question.lower() or needle in r.answer.lower() or needle in r.section.lower()
    ]


def group_by_section(rows: Sequence[QuestionRow]) -> dict[str, list[QuestionRow]]:
    """Group rows by section, keeping sections in order of first appearance."""

    groups: dict[str, list[QuestionRow]] = {}
    for r in rows:
        groups.setdefault(r.section, []).append(r)
    return groups
