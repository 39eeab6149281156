# Case Reference
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Reference document reader registry."""

from pathlib import Path

from case_reference.config import ConfigError
from case_reference.reference.base import DocumentReader, ParserError
from case_reference.reference.odt_reader import OdtDocumentReader
from case_reference.reference.text_reader import TextDocumentReader


_READERS: list[DocumentReader] = [
    OdtDocumentReader(),
    TextDocumentReader(),
]


def get_document_reader(path: Path) -> DocumentReader:
    """Select a reader based on the file suffix.

    Args:
        path:
            Reference document path.

    Returns:
        A reader instance.

    Raises:
        ConfigError:
            If no reader supports the file.
    """

    for reader in _READERS:
        if reader.can_read(path):
            return reader

    supported = ", ".join(sorted({".md", ".markdown", ".txt", ".odt"}))
    raise ConfigError(f"Unsupported document format: {path} (supported: {supported})")


def read_reference_document(path: Path) -> str:
    """Read a reference document and normalize errors to ConfigError."""

    if not path.is_file():
        raise ConfigError(f"Reference document not found: {path}")

    reader = get_document_reader(path)
    try:
        return reader.read_text(path)
    except ParserError as exc:
        raise ConfigError(str(exc)) from exc
