#
# Formcheck Formatting Tools
#

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any


# Methods --------------------------------------------------------------------------------------------------------------

def fmt_type(obj: Any, *, max_repr: int = 120) -> str:
    """Format type information for exception and warning messages.

    Args:
        obj: Any object or type.
        max_repr: Maximum length of the type name before truncation.

    Returns:
        Formatted type string like "<type: int>".

    Examples:
        >>> fmt_type(42)
        '<type: int>'
        >>> fmt_type(dict)
        '<type: dict>'
    """
    target_type = obj if isinstance(obj, type) else type(obj)
    try:
        type_name = target_type.__name__
    except AttributeError:
        type_name = str(target_type)

    return _fmt_format_pair("type", _fmt_truncate(type_name, max_repr))


def fmt_value(x: Any, *, max_repr: int = 120) -> str:
    """
    Format a single value as a type-value pair for exception and warning messages.

    Broken __repr__ methods are handled gracefully, long reprs are truncated with the
    ellipsis placed outside the quotes of string reprs.

    Examples:
        >>> fmt_value(42)
        '<int: 42>'
        >>> fmt_value("hello world", max_repr=8)
        "<str: 'hell'...>"
    """
    t = type(x).__name__

    try:
        base_repr = repr(x)
    except Exception as e:
        base_repr = f"<{t} object (repr failed: {type(e).__name__})>"

    # Keep the closing bracket of the pair unambiguous
    base_repr = base_repr.replace(">", "\\>")
    return _fmt_format_pair(t, _fmt_truncate(base_repr, max_repr))


def fmt_exception(exc: Any, *, max_repr: int = 120) -> str:
    """Format an exception as a type-message pair.

    The exception type name is never truncated, only the message is.

    Examples:
        >>> fmt_exception(ValueError("bad input"))
        '<ValueError: bad input>'
        >>> fmt_exception(RuntimeError())
        '<RuntimeError>'
    """
    if not isinstance(exc, BaseException):
        return fmt_value(exc, max_repr=max_repr)

    exc_type = type(exc).__name__
    try:
        exc_msg = str(exc)
    except Exception:
        exc_msg = "<str failed>"

    if not exc_msg:
        return f"<{exc_type}>"

    return _fmt_format_pair(exc_type, _fmt_truncate(exc_msg, max_repr))


# Private Methods ------------------------------------------------------------------------------------------------------

def _fmt_truncate(s: str, max_len: int, ellipsis: str = "...") -> str:
    """
    Truncate s to at most max_len visible characters before appending the ellipsis.

    Quoted reprs keep their quotes, the ellipsis goes after the closing quote.
    """
    if max_len <= 0:
        return ""
    if len(s) <= max_len:
        return s

    if len(s) >= 2 and s[0] in ("'", '"') and s[-1] == s[0]:
        inner_budget = max(1, max_len - 4)
        return f"{s[0]}{s[1:1 + inner_budget]}{s[0]}{ellipsis}"

    return s[:max(1, max_len)] + ellipsis


def _fmt_format_pair(type_name: str, value_repr: str) -> str:
    return f"<{type_name}: {value_repr}>"
