# Case Reference
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""YAML output helpers."""

from pathlib import Path
from typing import Any

import yaml


def write_yaml_mapping(path: Path, data: dict[str, Any]) -> None:
    """Write a mapping as YAML.

    Key order is preserved and non-ASCII text is written as is.

    Args:
        path:
            Target file. Missing parent directories are created.
        data:
            Mapping to serialize.
    """

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        yaml.safe_dump(data, sort_keys=False, allow_unicode=True),
        encoding="utf-8",
    )
