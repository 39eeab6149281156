# Case Reference
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Markdown/TXT reference document reader."""

from pathlib import Path

from case_reference.reference.base import ParserError


class TextDocumentReader:
    """Read .md and .txt exports."""

    SUFFIXES = frozenset({".md", ".markdown", ".txt"})

    def can_read(self, path: Path) -> bool:
        return path.suffix.lower() in self.SUFFIXES

    def read_text(self, path: Path) -> str:
        """Read UTF-8 text and normalize line breaks to `\\n`.

        A leading byte order mark is dropped so the first line can still be a
        question marker.
        """

        try:
            raw = path.read_text(encoding="utf-8-sig")
        except UnicodeDecodeError as exc:
            raise ParserError(
                "File is not valid UTF-8",
                path=path,
                excerpt=exc.object[max(0, exc.start - 40):exc.end + 40].decode("utf-8", errors="replace"),
            ) from exc
        except OSError as exc:
            raise ParserError(f"Failed to read text file: {exc}", path=path) from exc

        return raw.replace("\r\n", "\n").replace("\r", "\n")
