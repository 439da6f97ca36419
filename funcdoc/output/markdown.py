"""Markdown output generation for function documentation.

Renders extracted function records as a single Markdown reference
page, one section per function in source order.
"""

import logging
from collections.abc import Sequence
from pathlib import Path

from funcdoc.parsers.structure import DocRecord

logger = logging.getLogger(__name__)


class MarkdownWriter:
    """Renders function documentation as a Markdown page."""

    def render(
        self, records: Sequence[DocRecord], title: str = "Function Reference"
    ) -> str:
        """Render a Markdown page for the given records.

        Args:
            records: Records in source order.
            title: Title for the page heading.

        Returns:
            Markdown string for the page.
        """
        lines = [f"# {title}\n"]

        if not records:
            lines.append("_No documented functions._\n")

        for record in records:
            lines.append(self._render_record(record))

        return "\n".join(lines)

    def write(
        self,
        records: Sequence[DocRecord],
        output_path: str,
        title: str = "Function Reference",
    ) -> Path:
        """Write the Markdown page to a file.

        Args:
            records: Records in source order.
            output_path: Destination file. Parent directories are created.
            title: Title for the page heading.

        Returns:
            Path to the written Markdown file.
        """
        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.render(records, title), encoding="utf-8")

        logger.info("Wrote function reference: %s (%d functions)", path, len(records))
        return path

    def _render_record(self, record: DocRecord) -> str:
        """Render one function's section.

        Args:
            record: The function's documentation record.

        Returns:
            Markdown string for the function.
        """
        return f"### `{record.heading()}`\n\n{record.docstring}\n"
