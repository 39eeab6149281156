from __future__ import annotations

"""
Shared action interface.

Actions implement a small protocol so the CLI can dynamically register arguments
and dispatch execution based on the selected subcommand.
"""

import argparse
from dataclasses import dataclass
from typing import Protocol

from case_reference.config import CaseConfig
from case_reference.reference import CaseRecord, index_sections, parse_reference_data
from case_reference.reference.registry import read_reference_document


class Action(Protocol):
    """
    Interface for a CLI action (subcommand).

    Implementations are expected to:
    - Provide a `name` used as the subcommand.
    - Provide a short `help` string for `--help`.
    - Declare whether they require a valid YAML config.
    """

    name: str
    help: str
    requires_config: bool

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """
        Register action-specific CLI arguments.

        Args:
            parser:
                The subparser dedicated to this action.

        Returns:
            None
        """

    def run(self, args: argparse.Namespace, config: CaseConfig | None) -> None:
        """
        Execute the action.

        Args:
            args:
                Parsed arguments for this subcommand.
            config:
                Loaded configuration, if `requires_config` is True.

        Returns:
            None
        """


@dataclass(frozen=True)
class LoadedCase:
    """Reference document text with its parse results."""

    text: str
    case: CaseRecord
    sections: dict[int, str]


def load_case(config: CaseConfig) -> LoadedCase:
    """
    Read and parse the configured reference document.

    Raises:
        ConfigError:
            If the document cannot be read.
    """

    print(f"Reading reference document: {config.document}")
    text = read_reference_document(config.document)
    case = parse_reference_data(text, config.field_mapping)
    sections = index_sections(text, config.default_section)
    return LoadedCase(text=text, case=case, sections=sections)
