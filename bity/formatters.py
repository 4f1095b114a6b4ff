"""
Formatting helpers for exception messages.

Values are rendered as short, type-labelled tokens so a failed parse reports
exactly what it received, even when the input is long or has a broken __repr__.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any

# Classes --------------------------------------------------------------------------------------------------------------

PRIMITIVE_TYPES = (
    type(None),
    bool,  # Comes before int (is subclass of int)
    int,
    float,
    str,
    bytes,
)

MAX_REPR = 64
ELLIPSIS = "…"


# Methods --------------------------------------------------------------------------------------------------------------


def fmt_type(obj: Any) -> str:
    """Format type name of an object or a type.

    Examples:
        >>> fmt_type(42)
        'int'

        >>> fmt_type(int)
        'int'
    """
    cls = obj if isinstance(obj, type) else type(obj)
    return cls.__name__


def fmt_value(obj: Any) -> str:
    """
    Format a single value for exception messages.

    Primitives are shown as their repr, other objects as a type=value pair.
    Reprs longer than MAX_REPR characters are truncated.

    Examples:
        >>> fmt_value("12.3kb")
        "'12.3kb'"

        >>> fmt_value([1, 2])
        'list=[1, 2]'
    """
    r = _fmt_truncate(_safe_repr(obj), MAX_REPR)

    if type(obj) in PRIMITIVE_TYPES:
        return r

    return f"{type(obj).__name__}={r}"


# Private Methods ------------------------------------------------------------------------------------------------------


def _fmt_truncate(repr_: str, max_len: int) -> str:
    """
    Truncate repr_ to at most max_len visible characters before appending the ellipsis.

    Quoted reprs keep their quotes, the ellipsis goes inside the closing quote.
    """
    if len(repr_) <= max_len:
        return repr_

    if len(repr_) >= 2 and repr_[0] in ("'", '"') and repr_[-1] == repr_[0]:
        quote = repr_[0]
        return f"{quote}{repr_[1:1 + max_len]}{ELLIPSIS}{quote}"

    return repr_[:max_len] + ELLIPSIS


def _safe_repr(obj) -> str:
    """repr() that survives a broken __repr__."""
    try:
        return repr(obj)
    except Exception as e:
        return f"<{type(obj).__name__} object (repr failed: {type(e).__name__})>"
