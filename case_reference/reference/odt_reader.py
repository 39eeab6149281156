# Case Reference
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""ODT reference document reader.

Case exports are sometimes pasted into a word processor before they reach us.
The markdown markers survive as literal paragraph text, so each ODT paragraph
or heading becomes one line of the reconstructed document.
"""

from pathlib import Path

from odfdo import Document

from case_reference.reference.base import ParserError


def _node_text(node: object) -> str:
    # Paragraphs with spans/links only expose their full text via
    # `inner_text` or `text_recursive`.
    for attr in ("inner_text", "text_recursive", "text"):
        value = getattr(node, attr, None)
        if callable(value):
            value = value()
        if value is not None:
            # One paragraph is one line; drop a trailing paragraph break.
            return str(value).rstrip("\n")
    return ""


class OdtDocumentReader:
    """Read .odt files as one line per paragraph."""

    def can_read(self, path: Path) -> bool:
        return path.suffix.lower() == ".odt"

    def read_text(self, path: Path) -> str:
        try:
            doc = Document(path)
            nodes = list(doc.body.xpath(".//text:p | .//text:h"))
        except Exception as exc:  # noqa: BLE001
            raise ParserError(f"Failed to open ODT file: {exc}", path=path) from exc

        lines = [_node_text(node).replace("\r\n", "\n").replace("\r", "\n") for node in nodes]
        return "\n".join(lines)
