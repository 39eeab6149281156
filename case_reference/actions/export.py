# Case Reference
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Export action.

Writes the parsed case to an `.ods` spreadsheet with two sheets:
    - `Questions`: one row per question (id, section, question, answer,
      evidence), ordered by id.
    - `Case fields`: the derived narrative fields with their source questions.
"""

import argparse
import re
from dataclasses import dataclass
from typing import Any, cast

from odfdo import Document
from odfdo.cell import Cell
from odfdo.column import Column
from odfdo.element import Element
from odfdo.row import Row
from odfdo.style import Style
from odfdo.table import Table

from case_reference.actions.base import LoadedCase, load_case
from case_reference.browse import build_rows
from case_reference.cli_io import confirm_overwrite
from case_reference.config import CaseConfig
from case_reference.hash_utils import md5_text


QUESTIONS_SHEET = "Questions"
FIELDS_SHEET = "Case fields"

_XML_ILLEGAL_CHARS_RE = re.compile(
    # XML 1.0 disallows most C0 control chars except TAB, LF, CR.
    r"[\x00-\x08\x0B\x0C\x0E-\x1F]"
    r"|[\uD800-\uDFFF]"
    r"|[\uFFFE\uFFFF]"
)


def _xml_safe_text(value: Any) -> str:
    """Return `value` as text that lxml (used by odfdo) accepts."""

    if value is None:
        return ""
    return _XML_ILLEGAL_CHARS_RE.sub("", str(value))


def _style_name(prefix: str, scope: str, suffix: str = "") -> str:
    """Return a deterministic, ASCII-only style name."""

    scope_key = re.sub(r"[^A-Za-z0-9_]", "_", scope).strip("_")[:40] or "x"
    parts = [prefix, scope_key, md5_text(scope)[:8]]
    if suffix:
        parts.append(suffix)
    return "_".join(parts)


def _col_letters(index_1_based: int) -> str:
    """Convert 1-based column index to spreadsheet letters (A, B, ..., AA, ...)."""

    n = max(1, index_1_based)
    out: list[str] = []
    while n:
        n, rem = divmod(n - 1, 26)
        out.append(chr(ord("A") + rem))
    return "".join(reversed(out))


def _enable_autofilter(doc: Document, sheet_ranges: list[tuple[str, int, int]]) -> None:
    """Best-effort: add autofilter dropdowns to the header row of each sheet."""

    try:
        db_ranges = Element.from_tag("table:database-ranges")
        for sheet_name, ncols, nrows in sheet_ranges:
            quoted = "'" + sheet_name.replace("'", "''") + "'"
            db = Element.from_tag("table:database-range")
            db.set_attribute("table:name", _style_name("db", sheet_name))
            db.set_attribute(
                "table:target-range-address",
                f"{quoted}.A1:{_col_letters(ncols)}{max(1, nrows)}",
            )
            db.set_attribute("table:display-filter-buttons", "true")
            db.set_attribute("table:contains-header", "true")
            db_ranges.append(db)
        doc.body.append(db_ranges)
    except Exception:  # noqa: BLE001
        # Filters are a convenience; the sheets are complete without them.
        return


@dataclass(frozen=True)
class ExportAction:
    """
    `export` subcommand.

    Writes the spreadsheet configured as `report`.
    """

    name: str = "export"
    help: str = "Export the parsed case to a spreadsheet (.ods)"
    requires_config: bool = True

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """
        Register CLI arguments for the `export` subcommand.

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
            help="Overwrite the report if it already exists",
        )

    def run(self, args: argparse.Namespace, config: CaseConfig | None) -> None:
        """
        Execute the export.

        Raises:
            ConfigError:
                If the document cannot be read or the report may not be
                overwritten.
        """

        if config is None:
            raise RuntimeError("ExportAction requires a config, but none was provided")

        report = config.report
        if not confirm_overwrite(report, force=bool(getattr(args, "force", False))):
            print(f"Keeping existing file: {report}")
            return

        loaded = load_case(config)

        print(f"Building ODS report: {report}")
        doc = Document.new("spreadsheet")

        # odfdo creates a default empty sheet. Keep only our own sheets.
        for table in list(doc.body.tables):
            doc.body.delete(table)

        sheet_ranges = [
            self._append_sheet(doc, QUESTIONS_SHEET, *self._question_rows(config, loaded)),
            self._append_sheet(doc, FIELDS_SHEET, *self._field_rows(config, loaded)),
        ]
        _enable_autofilter(doc, sheet_ranges)

        report.parent.mkdir(parents=True, exist_ok=True)
        doc.save(report)
        print(f"Wrote ODS report: {report}")

    def _question_rows(
        self,
        config: CaseConfig,
        loaded: LoadedCase,
    ) -> tuple[list[tuple[str, str]], list[dict[str, Any]]]:
        columns = [
            ("id", "ID"),
            ("section", "Section"),
            ("question", "Question"),
            ("answer", "Answer"),
            ("evidence", "Evidence"),
        ]
        rows = [
            {
                "id": r.id,
                "section": r.section,
                "question": r.question,
                "answer": r.answer,
                "evidence": r.evidence,
            }
            for r in build_rows(loaded.case, loaded.sections, default_section=config.default_section)
        ]
        return columns, rows

    def _field_rows(
        self,
        config: CaseConfig,
        loaded: LoadedCase,
    ) -> tuple[list[tuple[str, str]], list[dict[str, Any]]]:
        columns = [
            ("field", "Field"),
            ("question_ids", "Source questions"),
            ("text", "Text"),
        ]
        rows = [
            {
                "field": spec.field,
                "question_ids": ", ".join(str(i) for i in spec.question_ids),
                "text": getattr(loaded.case, spec.field),
            }
            for spec in config.field_mapping
        ]
        return columns, rows

    def _append_sheet(
        self,
        doc: Document,
        name: str,
        columns: list[tuple[str, str]],
        rows: list[dict[str, Any]],
    ) -> tuple[str, int, int]:
        """
        Add one sheet with a bold header row to the ODS document.

        Args:
            doc:
                ODF spreadsheet document.
            name:
                Sheet name.
            columns:
                `(key, title)` pairs in column order.
            rows:
                Row mappings keyed by column key. Integer values are written
                as numeric cells.

        Returns:
            `(sheet name, column count, row count including header)`.
        """

        print(f"Writing sheet: {name}")
        table = Table(name)

        header_style: Style | None = cast(
            Style,
            Style("table-cell", name=_style_name("hdr", name), area="text", bold=True),
        )
        try:
            doc.insert_style(header_style, automatic=True)
        except Exception:  # noqa: BLE001
            header_style = None

        # Column widths: 0.12 cm per character of the longest line, 2-24 cm.
        for c_idx, (key, title) in enumerate(columns, start=1):
            longest = len(title)
            for r in rows:
                text = _xml_safe_text(r.get(key, ""))
                longest = max([longest, *(len(line) for line in text.split("\n"))])
            col_style = cast(
                Style,
                Style(
                    "table-column",
                    name=_style_name("col", name, str(c_idx)),
                    area="table-column",
                    width=f"{max(2.0, min(longest * 0.12, 24.0)):.2f}cm",
                ),
            )
            try:
                doc.insert_style(col_style, automatic=True)
                table.append(Column(style=col_style.name))
            except Exception:  # noqa: BLE001
                pass

        header = Row()
        for _key, title in columns:
            cell = Cell(text=title)
            if header_style is not None:
                cell.style = header_style.name
            header.append_cell(cell)
        table.append_row(header)

        for r in rows:
            row = Row()
            for key, _title in columns:
                value = r.get(key, "")
                if isinstance(value, int):
                    row.append_cell(Cell(value=value))
                else:
                    row.append_cell(Cell(text=_xml_safe_text(value)))
            table.append_row(row)

        doc.body.append(table)
        return (name, len(columns), 1 + len(rows))
