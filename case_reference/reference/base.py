# Case Reference
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Reference document reader interface."""

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol


class DocumentReader(Protocol):
    """Interface for loading a reference document as text.

    Readers only extract text. Question parsing happens on the returned string.
    """

    def can_read(self, path: Path) -> bool:
        """Return True if this reader supports the given file."""

        raise NotImplementedError

    def read_text(self, path: Path) -> str:
        """Return the document text with `\\n` line breaks."""

        raise NotImplementedError


@dataclass(eq=False)
class ParserError(RuntimeError):
    """Raised when a reference document cannot be read."""

    message: str
    path: Path | None = None
    line: int | None = None
    excerpt: str | None = None

    def __str__(self) -> str:
        head = self.message
        if self.path is not None:
            location = f"{self.path}:{self.line}" if self.line is not None else str(self.path)
            head = f"{location}: {self.message}"

        if not (isinstance(self.excerpt, str) and self.excerpt.strip()):
            return head

        excerpt = " ".join(self.excerpt.split())
        if len(excerpt) > 160:
            excerpt = excerpt[:157] + "..."
        return f"{head}\n> {excerpt}"
