# Case Reference
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Parse action.

Reads the configured reference document and writes the parsed case as a YAML
case file: derived narrative fields first, then every question with its
section label, answer and evidence.
"""

import argparse
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from case_reference.actions.base import LoadedCase, load_case
from case_reference.cli_io import confirm_overwrite
from case_reference.config import CaseConfig
from case_reference.hash_utils import md5_text
from case_reference.yaml_io import write_yaml_mapping


@dataclass(frozen=True)
class ParseAction:
    """
    `parse` subcommand.

    Writes the YAML case file configured as `output`.
    """

    name: str = "parse"
    help: str = "Parse the reference document into a YAML case file"
    requires_config: bool = True

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """
        Register CLI arguments for the `parse` subcommand.

        Args:
            parser:
                Subparser for this command.

        Returns:
            None
        """

        parser.add_argument(
            "-f",
            "--force",
            action="store_true",
            help="Overwrite the case file if it already exists",
        )

    def run(self, args: argparse.Namespace, config: CaseConfig | None) -> None:
        """
        Execute parsing.

        Args:
            args:
                Parsed args for the subcommand.
            config:
                Loaded configuration.

        Returns:
            None

        Raises:
            ConfigError:
                If the document cannot be read or the case file may not be
                overwritten.
        """

        if config is None:
            raise RuntimeError("ParseAction requires a config, but none was provided")

        output = config.output
        if not confirm_overwrite(output, force=bool(getattr(args, "force", False))):
            print(f"Keeping existing file: {output}")
            return

        loaded = load_case(config)
        write_yaml_mapping(output, self._case_document(config, loaded))

        print(f"Parsed {len(loaded.case.questions)} question(s). Wrote case file: {output}")

    def _case_document(self, config: CaseConfig, loaded: LoadedCase) -> dict[str, Any]:
        """
        Build the YAML structure of the case file.

        Args:
            config:
                Loaded configuration.
            loaded:
                Parsed document.

        Returns:
            Mapping ready for YAML serialization.
        """

        case = loaded.case.to_dict()
        questions: list[dict[str, Any]] = []
        for q in case.pop("questions"):
            q["section"] = loaded.sections.get(q["id"], config.default_section)
            questions.append(q)

        return {
            "schema_version": 1,
            "generated_at": datetime.now(timezone.utc).isoformat(),
            "source": {
                "path": self._rel_posix(config.base_dir, config.document),
                "md5": md5_text(loaded.text),
            },
            "fields": {
                spec.field: {
                    "question_ids": list(spec.question_ids),
                    "text": case[spec.field],
                }
                for spec in config.field_mapping
            },
            "questions": questions,
        }

    def _rel_posix(self, base_dir: Path, path: Path) -> str:
        """Return `path` relative to `base_dir` if possible, as a POSIX string."""

        try:
            return path.relative_to(base_dir).as_posix()
        except ValueError:
            return path.as_posix()
