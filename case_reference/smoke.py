# Case Reference
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Smoke-test helpers.

Run via:

    poetry run python -m case_reference.smoke

Parses a built-in sample document (or the given file) and prints a short
summary. No config file is needed.
"""

import argparse
import json
from pathlib import Path

from case_reference.config import ConfigError
from case_reference.reference import index_sections, parse_reference_data
from case_reference.reference.registry import read_reference_document


SAMPLE_DOCUMENT = "\n".join(
    [
        "# Case reference",
        "",
        "## SECTION Background",
        "### Question 1: How does X affect Y?",
        "Free text line one.",
        "Free text line two.",
        "*Evidence: See Exhibit A, p.3*",
        "---",
        "### Question 18: What happened on the date?",
        "The incident occurred as described.",
        "",
    ]
)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Case reference smoke test")
    parser.add_argument(
        "document",
        nargs="?",
        default=None,
        help="Reference document to parse (default: built-in sample)",
    )
    parser.add_argument(
        "--print-case",
        action="store_true",
        help="Print the parsed case as JSON",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)

    if args.document:
        try:
            text = read_reference_document(Path(str(args.document)))
        except ConfigError as exc:
            print(f"CONFIG ERROR: {exc}")
            return 2
    else:
        text = SAMPLE_DOCUMENT

    case = parse_reference_data(text)
    sections = index_sections(text)

    with_evidence = sum(1 for q in case.questions.values() if q.evidence)

    print(f"Questions: {len(case.questions)}")
    print(f"Sections: {len(set(sections.values()))}")
    print(f"With evidence: {with_evidence}")
    print(f"Complaint text: {len(case.complaint_text)} chars")
    print(f"Character profile text: {len(case.character_profile_text)} chars")
    print(f"Job description text: {len(case.job_description_text)} chars")
    print(f"Actual duties text: {len(case.actual_duties_text)} chars")

    # Parsing must be deterministic.
    if parse_reference_data(text) != case:
        print("INTERNAL ERROR: re-parsing produced a different result")
        return 3

    if bool(args.print_case):
        print(json.dumps(case.to_dict(), ensure_ascii=False, indent=2))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
