"""JavaScript, TypeScript and Go comment scanner using tree-sitter.

Collects ``//`` and ``/* */`` comments from C-style source files into
comment groups, rejecting files the grammar cannot parse cleanly.
"""

import logging
from pathlib import Path
from typing import Optional

import tree_sitter
import tree_sitter_go as tsgo
import tree_sitter_javascript as tsjs
import tree_sitter_typescript as tsts

from funcdoc.errors import ParseError
from funcdoc.parsers.source import detect_language, group_comments, read_source
from funcdoc.parsers.structure import CommentGroup, CommentLine, Language

logger = logging.getLogger(__name__)

_JS_LANGUAGE = tree_sitter.Language(tsjs.language())
_TS_LANGUAGE = tree_sitter.Language(tsts.language_typescript())
_TSX_LANGUAGE = tree_sitter.Language(tsts.language_tsx())
_GO_LANGUAGE = tree_sitter.Language(tsgo.language())

_GRAMMARS = {
    Language.JAVASCRIPT: _JS_LANGUAGE,
    Language.TYPESCRIPT: _TS_LANGUAGE,
    Language.GO: _GO_LANGUAGE,
}


class TreeSitterParser:
    """Parses C-style source files into comment groups using tree-sitter.

    Every ``comment`` node in the syntax tree is collected, wherever it
    appears, so comments inside function bodies and type declarations
    are grouped the same way as top-level ones.
    """

    def parse_file(self, file_path: str) -> list[CommentGroup]:
        """Parse a JS, TS or Go file and extract its comment groups.

        Args:
            file_path: Path to the source file to parse.

        Returns:
            Comment groups in source order.

        Raises:
            ParseError: If the file cannot be read, has an unsupported
                type, or contains syntax errors.
        """
        language = detect_language(file_path)
        source = read_source(file_path)
        tsx = Path(file_path).suffix.lower() == ".tsx"
        return self.parse_source(source, file_path, language, tsx=tsx)

    def parse_source(
        self,
        source: str,
        file_path: str = "<string>",
        language: Language = Language.JAVASCRIPT,
        tsx: bool = False,
    ) -> list[CommentGroup]:
        """Parse C-style source code and extract its comment groups.

        Args:
            source: Source code as a string.
            file_path: Optional file path used in error messages.
            language: Grammar to parse with.
            tsx: Use the TSX grammar for TypeScript sources.

        Returns:
            Comment groups in source order.

        Raises:
            ParseError: If the language has no grammar or the source
                contains syntax errors.
        """
        grammar = _TSX_LANGUAGE if tsx else _GRAMMARS.get(language)
        if grammar is None:
            raise ParseError(f"No tree-sitter grammar for {language.value}")

        parser = tree_sitter.Parser(grammar)
        source_bytes = source.encode("utf-8")
        tree = parser.parse(source_bytes)
        root = tree.root_node

        if root.has_error:
            position = self._first_error_position(root)
            raise ParseError(f"{file_path}: syntax error at {position}")

        lines = source_bytes.split(b"\n")
        comments = [
            self._comment_line(node, source_bytes, lines)
            for node in self._iter_comments(root)
        ]

        logger.debug(
            "Scanned %s (%s): %d comments", file_path, language.value, len(comments)
        )
        return group_comments(comments)

    def _iter_comments(self, root: tree_sitter.Node) -> list[tree_sitter.Node]:
        """Collect every comment node in document order.

        Args:
            root: Root node of the syntax tree.

        Returns:
            Comment nodes ordered by position in the source.
        """
        found: list[tree_sitter.Node] = []
        stack = [root]
        while stack:
            node = stack.pop()
            if node.type == "comment":
                found.append(node)
                continue
            stack.extend(reversed(node.children))
        return found

    def _comment_line(
        self, node: tree_sitter.Node, source_bytes: bytes, lines: list[bytes]
    ) -> CommentLine:
        """Convert a comment node into a CommentLine.

        Args:
            node: A tree-sitter comment node.
            source_bytes: Source as bytes.
            lines: Source split into physical lines.

        Returns:
            The CommentLine for the node.
        """
        start_row, start_col = node.start_point.row, node.start_point.column
        end_row, end_col = node.end_point.row, node.end_point.column

        # Some grammars end line comments at column 0 of the next row
        if end_row > start_row and end_col == 0:
            end_row -= 1
            end_col = len(lines[end_row])

        before = lines[start_row][:start_col]
        after = lines[end_row][end_col:]

        return CommentLine(
            text=self._node_text(node, source_bytes).rstrip("\r\n"),
            line=start_row + 1,
            end_line=end_row + 1,
            inline=bool(before.strip() or after.strip()),
        )

    def _first_error_position(self, root: tree_sitter.Node) -> str:
        """Locate the first ERROR or missing node below the root.

        Args:
            root: Root node of a tree that reports errors.

        Returns:
            A ``line:column`` string (1-based), or ``"unknown position"``.
        """
        stack = [root]
        found: Optional[tree_sitter.Node] = None
        while stack:
            node = stack.pop()
            if node.type == "ERROR" or node.is_missing:
                found = node
                break
            stack.extend(reversed(node.children))

        if found is None:
            return "unknown position"
        return f"{found.start_point.row + 1}:{found.start_point.column + 1}"

    def _node_text(self, node: tree_sitter.Node, source_bytes: bytes) -> str:
        """Extract the text content of a tree-sitter node.

        Args:
            node: A tree-sitter Node.
            source_bytes: Source as bytes.

        Returns:
            The text content of the node.
        """
        return source_bytes[node.start_byte : node.end_byte].decode("utf-8")
