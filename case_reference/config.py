# Case Reference
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Configuration loading and validation.

This module handles reading `casefile.yaml`, validating its keys, and
normalizing paths so that downstream actions can rely on a typed config object.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from case_reference.reference.fields import DEFAULT_FIELD_MAPPING, DERIVED_FIELDS, DerivedFieldSpec
from case_reference.reference.sections import DEFAULT_SECTION


CONFIG_ENV_VAR = "CASE_REFERENCE_CONFIG"

# Short names accepted in the `fields` section.
_FIELD_ALIASES = {
    "complaint": "complaint_text",
    "character_profile": "character_profile_text",
    "job_description": "job_description_text",
    "actual_duties": "actual_duties_text",
}


@dataclass(frozen=True)
class CaseConfig:
    """
    Parsed configuration for a case.

    Attributes:
        config_path:
            Path to the YAML config file used for this run.
        base_dir:
            Directory that relative paths are resolved against.
        document:
            Reference document to parse.
        output:
            YAML case file written by the `parse` command.
        report:
            ODS report written by the `export` command.
        field_mapping:
            Derived field table (question ids per narrative field).
        default_section:
            Section label for questions that precede any section header.
    """

    config_path: Path
    base_dir: Path
    document: Path
    output: Path
    report: Path
    field_mapping: tuple[DerivedFieldSpec, ...] = DEFAULT_FIELD_MAPPING
    default_section: str = DEFAULT_SECTION


class ConfigError(RuntimeError):
    """
    Raised when the YAML configuration is missing, invalid, or cannot be parsed.
    """

    pass


def find_config_path(cli_path: str | None) -> Path:
    """
    Determine which YAML config file to use.

    Args:
        cli_path:
            Optional config path provided on the command line.

    Returns:
        The resolved Path object (not necessarily existing). Order of
        precedence: command line, `CASE_REFERENCE_CONFIG`, ./casefile.yaml.
    """

    if cli_path:
        return Path(cli_path)

    env_path = os.environ.get(CONFIG_ENV_VAR, "").strip()
    if env_path:
        return Path(env_path)

    return Path.cwd() / "casefile.yaml"


def _parse_question_ids(value: Any, *, context: str) -> tuple[int, ...]:
    """Parse a single id or a list of ids."""

    items = value if isinstance(value, list) else [value]
    if not items:
        raise ConfigError(f"{context} must name at least one question id")

    ids: list[int] = []
    for idx, item in enumerate(items, start=1):
        # bool is a subclass of int; `true` is not a question id.
        if isinstance(item, bool) or not isinstance(item, int):
            raise ConfigError(f"{context} must contain integer question ids (problem at index {idx})")
        if item < 0:
            raise ConfigError(f"{context} must not contain negative question ids (problem at index {idx})")
        ids.append(item)

    return tuple(ids)


def _parse_fields(value: Any) -> tuple[DerivedFieldSpec, ...]:
    """
    Parse and validate the optional `fields` section.

    Each key names a derived field (`complaint` or `complaint_text`, ...) and
    maps to one question id or a list of ids. Fields that are not listed keep
    their default source questions.

    Args:
        value:
            Raw YAML value.

    Returns:
        The complete field table.

    Raises:
        ConfigError:
            If the structure does not match the expected schema.
    """

    if value is None:
        return DEFAULT_FIELD_MAPPING

    if not isinstance(value, dict):
        raise ConfigError("'fields' must be a mapping if provided")

    overrides: dict[str, tuple[int, ...]] = {}
    for key, ids in value.items():
        name = _FIELD_ALIASES.get(str(key), str(key))
        if name not in DERIVED_FIELDS:
            supported = ", ".join(sorted(_FIELD_ALIASES))
            raise ConfigError(f"Unknown derived field '{key}' (supported: {supported})")
        overrides[name] = _parse_question_ids(ids, context=f"fields.{key}")

    return tuple(
        DerivedFieldSpec(field=spec.field, question_ids=overrides.get(spec.field, spec.question_ids))
        for spec in DEFAULT_FIELD_MAPPING
    )


def _optional_path(raw: dict[str, Any], key: str, default: str) -> str:
    value = raw.get(key, default)
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"'{key}' must be a non-empty string if provided")
    return value.strip()


def load_config(path: Path) -> CaseConfig:
    """
    Load and validate a `casefile.yaml` configuration file.

    Args:
        path:
            Path to the YAML config file.

    Returns:
        A validated CaseConfig instance.

    Raises:
        ConfigError:
            If the file is missing, unreadable, cannot be parsed as YAML, or is
            missing required keys.
    """

    if not path.exists():
        raise ConfigError(
            "No casefile.yaml found in current directory and no --config provided. "
            "Use the 'template' command to create one or pass --config PATH."
        )
    if not path.is_file():
        raise ConfigError(f"Config path is not a file: {path}")

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except Exception as exc:  # noqa: BLE001
        raise ConfigError(f"Failed to read YAML config: {path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError("Config YAML must contain a mapping at the top level")

    if "document" not in raw:
        raise ConfigError("Config is missing required key: document")

    document = raw.get("document")
    if not isinstance(document, str) or not document.strip():
        raise ConfigError("'document' must be a non-empty string")

    output = _optional_path(raw, "output", "case.yaml")
    report = _optional_path(raw, "report", "case.ods")

    default_section = raw.get("default_section", DEFAULT_SECTION)
    if not isinstance(default_section, str) or not default_section.strip():
        raise ConfigError("'default_section' must be a non-empty string if provided")

    field_mapping = _parse_fields(raw.get("fields"))

    # Interpret paths relative to config file location.
    base_dir = path.parent.resolve()

    return CaseConfig(
        config_path=path.resolve(),
        base_dir=base_dir,
        document=(base_dir / document.strip()).resolve(),
        output=(base_dir / output).resolve(),
        report=(base_dir / report).resolve(),
        field_mapping=field_mapping,
        default_section=default_section.strip(),
    )
