"""Standard helper functions available to templates.

Every function here is documented by the ``# fn`` comment directly
above it; ``STANDARD_FUNCTIONS`` maps the template-facing names to the
implementations. Running ``funcdoc extract`` with no arguments renders
the reference for this module.
"""

from datetime import datetime, timezone
from typing import Any


# fn upper: returns *s* converted to uppercase.
def upper(s: str) -> str:
    return s.upper()


# fn lower: returns *s* converted to lowercase.
def lower(s: str) -> str:
    return s.lower()


# fn trim: returns *s* with leading and trailing whitespace removed.
def trim(s: str) -> str:
    return s.strip()


# fn split: splits *s* on every occurrence of *sep*.
def split(s: str, sep: str) -> list[str]:
    return s.split(sep)


# fn join: joins the string form of each element of *items* with *sep*
# between them.
def join(items: list, sep: str) -> str:
    return sep.join(str(item) for item in items)


# fn replace: returns *s* with every occurrence of *old* replaced by *new*.
def replace(s: str, old: str, new: str) -> str:
    return s.replace(old, new)


# fn contains: returns whether *s* contains *substr*.
def contains(s: str, substr: str) -> bool:
    return substr in s


# fn hasPrefix: returns whether *s* starts with *prefix*.
def has_prefix(s: str, prefix: str) -> bool:
    return s.startswith(prefix)


# fn hasSuffix: returns whether *s* ends with *suffix*.
def has_suffix(s: str, suffix: str) -> bool:
    return s.endswith(suffix)


# fn concat: concatenates the string form of all *values*.
def concat(*values: Any) -> str:
    return "".join(str(value) for value in values)


# fn sprintf: renders the printf-style *format* string with *args*.
# Arguments are substituted in order.
def sprintf(format: str, *args: Any) -> str:
    return format % args


# fn length: returns the number of items in *value*.
# Strings count characters; None has length zero.
def length(value: Any) -> int:
    if value is None:
        return 0
    return len(value)


# fn add: adds *a* and *b* together.
def add(a: float, b: float) -> float:
    return a + b


# fn subtract: returns *a* minus *b*.
def subtract(a: float, b: float) -> float:
    return a - b


# fn multiply: multiplies *a* and *b*.
def multiply(a: float, b: float) -> float:
    return a * b


# fn divide: divides *a* by *b*.
# Raises an error when b is zero.
def divide(a: float, b: float) -> float:
    return a / b


# fn divmod: divides *a* by *b*, returning the quotient and the remainder.
def quotient(a: int, b: int) -> tuple[int, int]:
    return divmod(a, b)


# fn default: returns *value*, or *fallback* if value is None or empty.
def default(value: Any, fallback: Any) -> Any:
    if value is None or value == "" or value == [] or value == {}:
        return fallback
    return value


# fn isEmpty: returns whether *value* is None or has no items.
def is_empty(value: Any) -> bool:
    return value is None or length(value) == 0


# fn first: returns the first element of *items*, or None if it is empty.
def first(items: list) -> Any:
    return items[0] if items else None


# fn last: returns the last element of *items*, or None if it is empty.
def last(items: list) -> Any:
    return items[-1] if items else None


# fn unique: returns *items* with duplicates removed, keeping the first
# occurrence of each.
def unique(items: list) -> list:
    seen: list = []
    for item in items:
        if item not in seen:
            seen.append(item)
    return seen


# fn now: returns the current time in UTC.
def now() -> datetime:
    return datetime.now(timezone.utc)


# fn formatTime: formats *t* using the strftime *layout*.
def format_time(t: datetime, layout: str) -> str:
    return t.strftime(layout)


STANDARD_FUNCTIONS = {
    "upper": upper,
    "lower": lower,
    "trim": trim,
    "split": split,
    "join": join,
    "replace": replace,
    "contains": contains,
    "hasPrefix": has_prefix,
    "hasSuffix": has_suffix,
    "concat": concat,
    "sprintf": sprintf,
    "length": length,
    "add": add,
    "subtract": subtract,
    "multiply": multiply,
    "divide": divide,
    "divmod": quotient,
    "default": default,
    "isEmpty": is_empty,
    "first": first,
    "last": last,
    "unique": unique,
    "now": now,
    "formatTime": format_time,
}
