# Case Reference
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Template configuration generator.

This action writes a ready-to-edit `casefile.yaml` file into the current
directory (or a user-specified path).
"""

import argparse
from dataclasses import dataclass
from pathlib import Path

from case_reference.config import CaseConfig, ConfigError


@dataclass(frozen=True)
class TemplateAction:
    """
    `template` subcommand.

    This action does not require a YAML config because it produces one.
    """

    name: str = "template"
    help: str = "Write a template casefile.yaml config"
    requires_config: bool = False

    _TEMPLATE_YAML: str = "\n".join(
        [
            "# Reference document to parse (relative to this file)",
            "# Supported formats: .md, .markdown, .txt, .odt",
            "document: reference.md",
            "",
            "# YAML case file written by the 'parse' command",
            "output: case.yaml",
            "",
            "# Spreadsheet written by the 'export' command",
            "report: case.ods",
            "",
            "# Section label for questions before the first '## SECTION' header",
            "# default_section: Uncategorized",
            "",
            "# Source questions of the derived narrative fields (optional; defaults shown).",
            "# Each entry takes a single question id or a list of ids. Answers of",
            "# several ids are joined with a blank line, in the order given.",
            "# fields:",
            "#   character_profile: [1, 5, 150]",
            "#   complaint: 18",
            "#   job_description: 151",
            "#   actual_duties: 152",
            "",
        ]
    )

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """
        Register CLI arguments for the `template` subcommand.

        Args:
            parser:
                Subparser for this command.

        Returns:
            None
        """

        parser.add_argument(
            "path",
            nargs="?",
            default="casefile.yaml",
            help="Destination path for the template (default: ./casefile.yaml)",
        )
        parser.add_argument(
            "-f",
            "--force",
            action="store_true",
            help="Allow overwriting an existing file",
        )

    def run(self, args: argparse.Namespace, config: CaseConfig | None) -> None:
        """
        Execute the template writer.

        Raises:
            ConfigError:
                If the destination exists and `--force` is not set.
        """

        _ = config
        dest = Path(args.path)
        if dest.exists() and not args.force:
            raise ConfigError(f"Refusing to overwrite existing file: {dest} (use --force)")

        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_text(self._TEMPLATE_YAML, encoding="utf-8")
        print(f"Wrote template config to: {dest}")
