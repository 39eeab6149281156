# Case Reference
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Line scanner for numbered question blocks.

The scanner is a two-state machine:

- Idle: no question has been opened yet. Lines are dropped (typically a title
  or the first section header).
- InQuestion: a `### Question N: ...` marker has been seen. Following lines
  are collected as answer text until the next marker.

A marker line always flushes the open question and opens a new one. The last
question is flushed by `finish()`. Horizontal rules (`---`) and section headers
(`## SECTION ...`) are structural and never become answer text.
"""

import re
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from case_reference.reference.evidence import EVIDENCE_RULES, EvidenceRule, split_evidence
from case_reference.reference.models import QuestionRecord
from case_reference.reference.text import trim


QUESTION_MARKER_RE = re.compile(r"^### Question (?P<id>[0-9]+): (?P<text>.*)")

_STRUCTURAL_PREFIXES = ("---", "## SECTION")


def is_structural_line(line: str) -> bool:
    """Return True for separator and section header lines."""

    return trim(line).startswith(_STRUCTURAL_PREFIXES)


def match_question_marker(line: str) -> tuple[int, str] | None:
    """
    Read a `### Question N: text` marker line.

    Returns:
        `(id, trimmed question text)`, or None if the line is not a marker.
        An id too long to convert to an int does not count as a marker.
    """

    marker = QUESTION_MARKER_RE.match(line)
    if marker is None:
        return None

    try:
        question_id = int(marker.group("id"))
    except ValueError:
        return None

    return question_id, trim(marker.group("text"))


@dataclass
class OpenQuestion:
    """
    Accumulator for the question currently being read.

    Attributes:
        question_id:
            Id from the marker line.
        question:
            Trimmed question text from the marker line.
        answer_lines:
            Raw answer lines collected so far.
    """

    question_id: int
    question: str
    answer_lines: list[str] = field(default_factory=list)


def flush_question(
    open_question: OpenQuestion,
    rules: Sequence[EvidenceRule] = EVIDENCE_RULES,
) -> QuestionRecord:
    """
    Turn an open question into a stored record.

    Args:
        open_question:
            Accumulated question state.
        rules:
            Evidence rules used to split off the trailing annotation.

    Returns:
        The finished QuestionRecord.
    """

    full_answer = trim("\n".join(open_question.answer_lines))
    answer, evidence = split_evidence(full_answer, rules)
    return QuestionRecord(
        id=open_question.question_id,
        question=open_question.question,
        answer=answer,
        evidence=evidence,
    )


class QuestionScanner:
    """Collect question records from document lines, one line at a time."""

    def __init__(self, rules: Sequence[EvidenceRule] = EVIDENCE_RULES) -> None:
        self._rules = rules
        self._open: OpenQuestion | None = None
        self._questions: dict[int, QuestionRecord] = {}

    @property
    def open_question(self) -> OpenQuestion | None:
        """The question being read, or None while idle."""

        return self._open

    def feed(self, line: str) -> None:
        """Process one line (without its line break)."""

        marker = match_question_marker(line)
        if marker is not None:
            self._flush()
            self._open = OpenQuestion(question_id=marker[0], question=marker[1])
            return

        if self._open is None:
            return

        if not is_structural_line(line):
            self._open.answer_lines.append(line)

    def finish(self) -> dict[int, QuestionRecord]:
        """
        Flush the last open question and return all records by id.

        The scanner starts over afterwards; the returned mapping is not
        touched by later `feed()` calls.
        """

        self._flush()
        self._open = None
        questions, self._questions = self._questions, {}
        return questions

    def _flush(self) -> None:
        if self._open is None:
            return
        record = flush_question(self._open, self._rules)
        # Repeated ids: the later block replaces the earlier one.
        self._questions[record.id] = record


def scan_questions(
    lines: Iterable[str],
    rules: Sequence[EvidenceRule] = EVIDENCE_RULES,
) -> dict[int, QuestionRecord]:
    """Run a fresh scanner over `lines` and return the collected records."""

    scanner = QuestionScanner(rules)
    for line in lines:
        scanner.feed(line)
    return scanner.finish()
