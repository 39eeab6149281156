# Case Reference
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Evidence annotation rules.

Answers may end with an annotation like `*Evidence: Exhibit A, p.3*` that names
the supporting material. The annotation is recovered by a small ordered rule
set:

1. `terminated`: `*Evidence: ...*` closing the text.
2. `unterminated`: `*Evidence: ...` running to the end of the text (the
   closing asterisk was forgotten).

The first rule that matches wins. Captured content may span several lines.
"""

import re
from dataclasses import dataclass
from typing import Sequence

from case_reference.reference.text import trim


@dataclass(frozen=True)
class EvidenceMatch:
    """
    Tagged result of an evidence rule.

    Attributes:
        found:
            True if an annotation was located.
        content:
            Raw captured content between the marker and the closing asterisk
            (or end of text). Not trimmed.
        span:
            `(start, end)` offsets of the whole annotation including markers.
    """

    found: bool
    content: str = ""
    span: tuple[int, int] | None = None


NO_EVIDENCE = EvidenceMatch(found=False)


@dataclass(frozen=True)
class EvidenceRule:
    """A single anchored pattern that captures the annotation content."""

    name: str
    pattern: re.Pattern[str]

    def match(self, text: str) -> EvidenceMatch:
        m = self.pattern.search(text)
        if m is None:
            return NO_EVIDENCE
        return EvidenceMatch(found=True, content=m.group("content"), span=m.span())


TERMINATED_RULE = EvidenceRule(
    name="terminated",
    pattern=re.compile(r"\*Evidence:(?P<content>.*?)\*\Z", re.DOTALL),
)

UNTERMINATED_RULE = EvidenceRule(
    name="unterminated",
    pattern=re.compile(r"\*Evidence:(?P<content>.*?)\Z", re.DOTALL),
)

EVIDENCE_RULES: tuple[EvidenceRule, ...] = (TERMINATED_RULE, UNTERMINATED_RULE)


def find_evidence(text: str, rules: Sequence[EvidenceRule] = EVIDENCE_RULES) -> EvidenceMatch:
    """
    Locate a trailing evidence annotation.

    Args:
        text:
            Full answer text, already trimmed.
        rules:
            Rules to try, in order.

    Returns:
        The first successful match, or `NO_EVIDENCE`.
    """

    for rule in rules:
        result = rule.match(text)
        if result.found:
            return result
    return NO_EVIDENCE


def split_evidence(text: str, rules: Sequence[EvidenceRule] = EVIDENCE_RULES) -> tuple[str, str]:
    """
    Split answer text into `(answer, evidence)`.

    The annotation (markers included) is cut out of the answer and both parts
    are trimmed. Without an annotation the text is returned unchanged together
    with an empty evidence string.
    """

    result = find_evidence(text, rules)
    if not result.found or result.span is None:
        return text, ""

    start, end = result.span
    answer = trim(text[:start] + text[end:])
    return answer, trim(result.content)
