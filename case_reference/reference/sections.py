# Case Reference
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Section labels for parsed questions.

The parser drops `## SECTION ...` headers. Consumers that group questions by
section get the labels from this separate pass over the same document.
"""

from case_reference.reference.scanner import match_question_marker
from case_reference.reference.text import trim


DEFAULT_SECTION = "Uncategorized"

_SECTION_PREFIX = "## SECTION"


def section_label(line: str, default: str = DEFAULT_SECTION) -> str | None:
    """
    Extract the label of a section header line.

    Args:
        line:
            Raw document line.
        default:
            Label used for a header without text (`## SECTION`).

    Returns:
        The label, or None if the line is not a section header.
    """

    stripped = trim(line)
    if not stripped.startswith(_SECTION_PREFIX):
        return None

    label = trim(stripped[len(_SECTION_PREFIX):].lstrip(" \t:-."))
    return label or default


def index_sections(document: str, default: str = DEFAULT_SECTION) -> dict[int, str]:
    """
    Map each question id to the section it appears in.

    Questions before the first section header get `default`. If an id occurs
    more than once, the section of its last occurrence is kept.
    """

    sections: dict[int, str] = {}
    current = default

    for line in document.split("\n"):
        marker = match_question_marker(line)
        if marker is not None:
            sections[marker[0]] = current
            continue

        label = section_label(line, default)
        if label is not None:
            current = label

    return sections
