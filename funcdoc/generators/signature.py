"""Callable introspection and signature rendering.

Resolves a registry value into a CallableShape and renders the
human-readable parameter and return lists used in documentation
headings, e.g. ``a int, b int`` and ``int``.

Registry values may be plain Python callables (introspected through
their annotations), CallableShape descriptors, or the dict form of a
descriptor as loaded from YAML.
"""

import functools
import inspect
import logging
import typing
from collections.abc import Mapping, Sequence
from typing import Any

from funcdoc.errors import SignatureError
from funcdoc.parsers.structure import CallableShape

logger = logging.getLogger(__name__)

ANY_TYPE = "any"

# Spellings of the universal type that render as ``any``
_ANY_ALIASES = {"Any", "typing.Any", "object", "interface{}", "any"}

_POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)
_NONE_ANNOTATIONS = (None, type(None), "None")


def type_name(annotation: Any) -> str:
    """Render a type annotation as a short type name.

    Args:
        annotation: A parameter or return annotation. May be a class, a
            typing construct, an unresolved string, or missing.

    Returns:
        ``any`` for missing, ``Any`` and ``object`` annotations, a class's
        ``__name__``, or the annotation's repr without ``typing.``
        prefixes for parameterized types.
    """
    if annotation is inspect.Parameter.empty or annotation is Any:
        return ANY_TYPE
    if annotation is object:
        return ANY_TYPE
    if annotation in _NONE_ANNOTATIONS:
        return "None"
    if isinstance(annotation, str):
        return _normalize(annotation)
    if isinstance(annotation, type) and not typing.get_args(annotation):
        return annotation.__name__
    return repr(annotation).replace("typing.", "")


def _normalize(name: str) -> str:
    name = name.strip()
    return ANY_TYPE if name in _ANY_ALIASES else name


def _type_hints(value: Any) -> dict[str, Any]:
    """Resolve the evaluated annotations of a callable.

    Falls back to an empty mapping when the annotations cannot be
    evaluated, in which case the raw annotations from
    ``inspect.signature`` are used instead.
    """
    target = value
    if isinstance(value, functools.partial):
        target = value.func
    elif inspect.isclass(value):
        target = value.__init__
    elif not inspect.isroutine(value):
        target = type(value).__call__

    try:
        return typing.get_type_hints(target)
    except (NameError, TypeError, AttributeError, SyntaxError) as e:
        logger.debug("Could not evaluate annotations of %r: %s", value, e)
        return {}


def _return_types(annotation: Any) -> tuple[str, ...]:
    """Split a return annotation into one type name per return value."""
    if annotation is inspect.Signature.empty or annotation in _NONE_ANNOTATIONS:
        return ()

    if typing.get_origin(annotation) is tuple:
        members = typing.get_args(annotation)
        if len(members) >= 2 and Ellipsis not in members:
            return tuple(type_name(member) for member in members)

    return (type_name(annotation),)


def resolve_shape(value: Any) -> CallableShape:
    """Introspect a registry value into a CallableShape.

    Positional parameters and ``*args`` make up the shape; keyword-only
    parameters and ``**kwargs`` are not part of it. A class resolves to
    its constructor parameters and returns an instance of itself.

    Args:
        value: A callable, a CallableShape, or a descriptor mapping with
            ``params``, ``variadic`` and ``returns`` keys.

    Returns:
        The resolved CallableShape.

    Raises:
        SignatureError: If the value is not introspectable as a callable.
    """
    if isinstance(value, CallableShape):
        return value

    if isinstance(value, Mapping):
        try:
            return CallableShape.from_dict(dict(value))
        except ValueError as e:
            raise SignatureError(f"Invalid callable descriptor: {e}") from e

    if not callable(value):
        raise SignatureError(
            f"Must provide a function to get a signature, got {type(value).__name__}"
        )

    try:
        signature = inspect.signature(value)
    except (TypeError, ValueError) as e:
        raise SignatureError(f"Cannot inspect signature of {value!r}: {e}") from e

    hints = _type_hints(value)
    param_types: list[str] = []
    variadic = False

    for parameter in signature.parameters.values():
        annotation = hints.get(parameter.name, parameter.annotation)
        if parameter.kind in _POSITIONAL_KINDS:
            param_types.append(type_name(annotation))
        elif parameter.kind == inspect.Parameter.VAR_POSITIONAL:
            param_types.append(type_name(annotation))
            variadic = True

    if inspect.isclass(value):
        return_types: tuple[str, ...] = (value.__name__,)
    else:
        return_types = _return_types(hints.get("return", signature.return_annotation))

    return CallableShape(
        param_types=tuple(param_types),
        variadic=variadic,
        return_types=return_types,
    )


def render_parameters(shape: CallableShape, arg_names: Sequence[str] = ()) -> str:
    """Render a shape's parameter list.

    Args:
        shape: The callable's shape.
        arg_names: Argument names for the leading parameters. May be
            shorter than the parameter list; extra names are ignored.

    Returns:
        Comma-separated parameters such as ``"a int, b int"``. A variadic
        last parameter renders as ``...T``.
    """
    last = len(shape.param_types) - 1
    rendered: list[str] = []

    for index, name in enumerate(shape.param_types):
        typename = _normalize(name)
        if shape.variadic and index == last:
            typename = f"...{typename}"

        if index < len(arg_names):
            rendered.append(f"{arg_names[index]} {typename}")
        else:
            rendered.append(typename)

    return ", ".join(rendered)


def render_returns(shape: CallableShape) -> tuple[str, ...]:
    """Render each of a shape's return types."""
    return tuple(_normalize(name) for name in shape.return_types)


def synthesize_signature(
    value: Any, arg_names: Sequence[str] = ()
) -> tuple[str, tuple[str, ...]]:
    """Build the rendered signature of a registry value.

    Args:
        value: The registry value to describe.
        arg_names: Argument names taken from the docstring.

    Returns:
        A ``(parameters, return_types)`` pair, e.g.
        ``("a int, b int", ("int",))``.

    Raises:
        SignatureError: If the value is not introspectable as a callable.
    """
    shape = resolve_shape(value)
    return render_parameters(shape, arg_names), render_returns(shape)
