"""Python comment scanner using the tokenize and ast modules.

Validates that a Python source file is syntactically sound and
collects its ``#`` comments into comment groups.
"""

import ast
import io
import logging
import tokenize

from funcdoc.errors import ParseError
from funcdoc.parsers.source import group_comments, read_source
from funcdoc.parsers.structure import CommentGroup, CommentLine

logger = logging.getLogger(__name__)


class PythonParser:
    """Parses Python source files into comment groups.

    Uses the built-in ast module to reject malformed files and the
    tokenize module to find real comments, so ``#`` characters inside
    string literals are never mistaken for comments.
    """

    def parse_file(self, file_path: str) -> list[CommentGroup]:
        """Parse a Python source file and extract its comment groups.

        Args:
            file_path: Path to the Python file to parse.

        Returns:
            Comment groups in source order.

        Raises:
            ParseError: If the file cannot be read or is not valid Python.
        """
        source = read_source(file_path)
        return self.parse_source(source, file_path)

    def parse_source(
        self, source: str, file_path: str = "<string>"
    ) -> list[CommentGroup]:
        """Parse Python source code and extract its comment groups.

        Args:
            source: Python source code as a string.
            file_path: Optional file path used in error messages.

        Returns:
            Comment groups in source order.

        Raises:
            ParseError: If the source is not valid Python.
        """
        try:
            ast.parse(source, filename=file_path)
        except (SyntaxError, ValueError) as e:
            raise ParseError(f"{file_path}: {self._describe(e)}") from e

        comments: list[CommentLine] = []
        try:
            for token in tokenize.generate_tokens(io.StringIO(source).readline):
                if token.type != tokenize.COMMENT:
                    continue
                row, col = token.start
                comments.append(
                    CommentLine(
                        text=token.string,
                        line=row,
                        end_line=row,
                        inline=bool(token.line[:col].strip()),
                    )
                )
        except (tokenize.TokenError, SyntaxError) as e:
            raise ParseError(f"{file_path}: {self._describe(e)}") from e

        logger.debug("Scanned %s: %d comments", file_path, len(comments))
        return group_comments(comments)

    def _describe(self, error: Exception) -> str:
        """Format a syntax or tokenize error with its position."""
        if isinstance(error, SyntaxError) and error.lineno:
            return f"line {error.lineno}: {error.msg}"
        return str(error)
