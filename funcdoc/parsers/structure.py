"""Data models for comment scanning and function documentation.

Defines dataclasses for comment lines, comment groups, parsed
annotations, callable shapes, and documentation records. These models
form the shared vocabulary between the source parsers, the doc
generators, and the output writers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class Language(str, Enum):
    """Supported source languages."""

    PYTHON = "python"
    JAVASCRIPT = "javascript"
    TYPESCRIPT = "typescript"
    GO = "go"


@dataclass
class CommentLine:
    """A single comment as it appears in the source file.

    Attributes:
        text: Raw comment text, including its comment marker.
        line: 1-based line number where the comment starts.
        end_line: 1-based line number where the comment ends.
        inline: Whether source code shares a line with the comment.
    """

    text: str
    line: int = 0
    end_line: int = 0
    inline: bool = False


@dataclass
class CommentGroup:
    """A contiguous run of comments treated as one correlation unit.

    Attributes:
        lines: Comment lines in source order.
    """

    lines: list[CommentLine] = field(default_factory=list)

    @property
    def start_line(self) -> int:
        """Line number of the first comment in the group."""
        return self.lines[0].line if self.lines else 0

    def texts(self) -> list[str]:
        """Return the raw text of every comment in the group."""
        return [line.text for line in self.lines]


@dataclass
class ParsedAnnotation:
    """The result of matching one `fn Name: docstring` comment line."""

    func_name: str
    docstring: str


@dataclass(frozen=True)
class CallableShape:
    """Structural description of a callable's parameters and results.

    Attributes:
        param_types: Rendered type name of each parameter, in order.
        variadic: Whether the last parameter accepts a variable number
            of arguments.
        return_types: Rendered type name of each return value, in order.
    """

    param_types: tuple[str, ...] = ()
    variadic: bool = False
    return_types: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a dictionary.

        Returns:
            Dictionary representation of this shape.
        """
        return {
            "params": list(self.param_types),
            "variadic": self.variadic,
            "returns": list(self.return_types),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CallableShape:
        """Deserialize from a dictionary.

        Args:
            data: Dictionary with ``params``, ``variadic`` and ``returns``
                keys. Missing keys mean no parameters, not variadic, and
                no return values.

        Returns:
            A new CallableShape instance.

        Raises:
            ValueError: If the type lists are not lists of strings,
                ``variadic`` is not a boolean, or a variadic shape declares
                no parameters.
        """
        params = data.get("params") or []
        returns = data.get("returns") or []
        variadic = data.get("variadic", False)
        if not isinstance(variadic, bool):
            raise ValueError(f"variadic must be true or false: {variadic!r}")

        for value in (params, returns):
            if not isinstance(value, (list, tuple)) or not all(
                isinstance(item, str) for item in value
            ):
                raise ValueError(f"type names must be a list of strings: {value!r}")

        if variadic and not params:
            raise ValueError("a variadic shape needs at least one parameter")

        return cls(
            param_types=tuple(params),
            variadic=variadic,
            return_types=tuple(returns),
        )


@dataclass(frozen=True)
class DocRecord:
    """Documentation for one registered function.

    Attributes:
        name: Registry name of the documented function.
        docstring: Prose collected from the annotation and its
            continuation lines.
        signature: Rendered parameter list, e.g. ``"a int, b int"``.
        return_types: Rendered type name of each return value.
        line_number: Line of the comment group the record came from.
    """

    name: str
    docstring: str
    signature: str
    return_types: tuple[str, ...] = ()
    line_number: int = 0

    @property
    def returns(self) -> str:
        """Return types joined into a single comma-separated string."""
        return ", ".join(self.return_types)

    def return_signature(self) -> Optional[str]:
        """Render the return part of the signature line.

        Returns:
            The bare type for one return value, a parenthesized list for
            several, or None when the function returns nothing.
        """
        if not self.return_types:
            return None
        if len(self.return_types) == 1:
            return self.return_types[0]
        return f"({self.returns})"

    def heading(self) -> str:
        """Render the ``Name(params) returns`` signature line."""
        returns = self.return_signature()
        suffix = f" {returns}" if returns else ""
        return f"{self.name}({self.signature}){suffix}"
