"""Plain-text rendering of function documentation.

Each record renders as its signature line, its docstring, and a blank
separator line::

    Add(a int, b int) int
    adds a and b together.

"""

import io
import logging
from collections.abc import Iterable
from typing import TextIO

from funcdoc.parsers.structure import DocRecord

logger = logging.getLogger(__name__)


class TextWriter:
    """Writes DocRecords as plain text to an output stream."""

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream

    def write(self, records: Iterable[DocRecord]) -> int:
        """Write every record in the order given.

        Args:
            records: Records in source order.

        Returns:
            The number of records written.
        """
        count = 0
        for record in records:
            self.stream.write(f"{record.heading()}\n")
            self.stream.write(f"{record.docstring}\n\n")
            count += 1

        logger.debug("Wrote %d text records", count)
        return count


def render_text(records: Iterable[DocRecord]) -> str:
    """Render records to a string in the plain-text format."""
    buffer = io.StringIO()
    TextWriter(buffer).write(records)
    return buffer.getvalue()
