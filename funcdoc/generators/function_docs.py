"""Function documentation extraction from annotated comments.

Walks the comment groups of a source file and correlates each
``fn Name: docstring`` annotation with a function in the registry.
Within a group, lines following an accepted annotation continue its
docstring. A group that starts with ordinary prose, or whose annotated
function cannot be introspected, produces no documentation at all.
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from funcdoc.errors import SignatureError
from funcdoc.generators.annotations import (
    extract_argument_names,
    match_annotation,
    strip_comment_marker,
    strip_emphasis,
)
from funcdoc.generators.signature import synthesize_signature
from funcdoc.parsers.comments import scan_comment_groups
from funcdoc.parsers.structure import CommentGroup, DocRecord

logger = logging.getLogger(__name__)


class _State(Enum):
    INIT = "init"
    ACTIVE = "active"


@dataclass
class _PendingDoc:
    """Mutable record being built while a group is ACTIVE."""

    name: str
    docstring: str
    signature: str
    return_types: tuple[str, ...]
    continuation: list[str] = field(default_factory=list)

    def freeze(self, line_number: int) -> DocRecord:
        docstring = " ".join([self.docstring, *self.continuation])
        return DocRecord(
            name=self.name,
            docstring=docstring,
            signature=self.signature,
            return_types=self.return_types,
            line_number=line_number,
        )


class DocExtractor:
    """Extracts DocRecords for registered functions from comment groups.

    The registry is only read, never modified, and the extractor keeps
    no state between calls, so one instance can serve many files.
    """

    def __init__(self, registry: Mapping[str, Any]) -> None:
        """Initialize the extractor.

        Args:
            registry: Mapping of function names to callables or
                CallableShape descriptors.
        """
        self.registry = registry

    def extract_file(self, file_path: str) -> list[DocRecord]:
        """Extract documentation records from a source file.

        Args:
            file_path: Path to the annotated source file.

        Returns:
            Records in source order.

        Raises:
            ParseError: If the file cannot be read or parsed.
        """
        groups = scan_comment_groups(file_path)
        records = self.extract_groups(groups)
        logger.info(
            "Documented %d of %d registered functions from %s",
            len(records),
            len(self.registry),
            file_path,
        )
        return records

    def extract_groups(self, groups: Iterable[CommentGroup]) -> list[DocRecord]:
        """Correlate every comment group and collect the completed records."""
        records: list[DocRecord] = []
        for group in groups:
            record = self.correlate(group)
            if record is not None:
                records.append(record)
        return records

    def correlate(self, group: CommentGroup) -> Optional[DocRecord]:
        """Run the annotation state machine over one comment group.

        Args:
            group: The comment group to process.

        Returns:
            A DocRecord if the group ends with an accepted annotation,
            otherwise None.
        """
        state = _State.INIT
        pending: Optional[_PendingDoc] = None

        for line in group.lines:
            annotation = match_annotation(line.text)

            if annotation is None:
                if state is _State.INIT:
                    return None
                text = strip_emphasis(strip_comment_marker(line.text))
                if text:
                    pending.continuation.append(text)
                continue

            name, docstring = annotation.func_name, annotation.docstring
            if name not in self.registry or not docstring:
                logger.debug(
                    "Ignoring annotation for %r on line %d (%s)",
                    name,
                    line.line,
                    "empty docstring" if docstring else "not registered",
                )
                continue

            try:
                signature, return_types = synthesize_signature(
                    self.registry[name], extract_argument_names(docstring)
                )
            except SignatureError as e:
                logger.warning("Signature failed for %s: %s", name, e)
                return None

            pending = _PendingDoc(
                name=name,
                docstring=strip_emphasis(docstring),
                signature=signature,
                return_types=return_types,
            )
            state = _State.ACTIVE

        if state is _State.ACTIVE:
            return pending.freeze(group.start_line)
        return None


def generate_function_docs(
    registry: Mapping[str, Any], source_file: str
) -> list[DocRecord]:
    """Extract documentation for registered functions from a source file.

    Args:
        registry: Mapping of function names to callables or descriptors.
        source_file: Path to the annotated source file.

    Returns:
        DocRecords in source order.

    Raises:
        ParseError: If the file cannot be read or is malformed.
    """
    return DocExtractor(registry).extract_file(source_file)
