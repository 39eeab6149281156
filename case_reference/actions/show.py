from __future__ import annotations

"""
Show action.

Prints the parsed questions grouped by section, optionally filtered by a
search term, or prints the derived narrative fields.
"""

import argparse
import textwrap
from dataclasses import dataclass

from case_reference.actions.base import load_case
from case_reference.browse import build_rows, filter_rows, group_by_section
from case_reference.config import CaseConfig


@dataclass(frozen=True)
class ShowAction:
    """
    `show` subcommand.

    Read-only; nothing is written.
    """

    name: str = "show"
    help: str = "Print parsed questions or derived fields"
    requires_config: bool = True

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """
        Register CLI arguments for the `show` subcommand.

        Args:
            parser:
                Subparser for this command.

        Returns:
            None
        """

        parser.add_argument(
            "-s",
            "--search",
            default=None,
            help="Only show questions whose question, answer or section contains this text",
        )
        parser.add_argument(
            "--fields",
            action="store_true",
            help="Print the derived narrative fields instead of the questions",
        )

    def run(self, args: argparse.Namespace, config: CaseConfig | None) -> None:
        if config is None:
            raise RuntimeError("ShowAction requires a config, but none was provided")

        loaded = load_case(config)

        if bool(getattr(args, "fields", False)):
            for spec in config.field_mapping:
                ids = ", ".join(str(i) for i in spec.question_ids)
                print(f"\n## {spec.field} (questions: {ids})\n")
                print(getattr(loaded.case, spec.field) or "(empty)")
            return

        rows = build_rows(loaded.case, loaded.sections, default_section=config.default_section)
        matches = filter_rows(rows, getattr(args, "search", None))
        if not matches:
            print("No matching questions.")
            return

        for section, section_rows in group_by_section(matches).items():
            print(f"\n{section} ({len(section_rows)} Qs)")
            for r in section_rows:
                print(f"  Q{r.id}: {r.question}")
                if r.answer:
                    print(textwrap.indent(r.answer, "      "))
                if r.evidence:
                    print(f"      Evidence: {r.evidence}")

        print(f"\n{len(matches)} of {len(rows)} question(s) shown.")
