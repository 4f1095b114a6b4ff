"""
Bity nested mapping helpers used by the serialization adapter.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import collections.abc as abc
from typing import Any, Sequence

# Local ----------------------------------------------------------------------------------------------------------------
from .formatters import fmt_type, fmt_value


# Classes --------------------------------------------------------------------------------------------------------------

class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


MISSING = _Missing()


# Methods --------------------------------------------------------------------------------------------------------------

def split_key(key: str | Sequence[str], separator: str = ".") -> list[str]:
    """
    Split a dot-separated key ('a.b.c') or a sequence of keys into a list of keys.

    Raises:
        TypeError: If key is neither str nor sequence.
        ValueError: If key is empty.
    """
    if isinstance(key, str):
        if not key.strip():
            raise ValueError("key string cannot be empty")
        return key.split(separator)
    elif isinstance(key, abc.Sequence) and not isinstance(key, bytes):
        keys = list(key)
        if not keys:
            raise ValueError("key sequence cannot be empty")
        return keys
    raise TypeError(f"key must be str or sequence, got {fmt_type(key)}")


def dict_get(source: abc.Mapping, key: str | Sequence[str], default: Any = None, *, separator: str = ".") -> Any:
    """
    Get a value from a nested mapping using dot-separated keys or a sequence of keys.

    Examples:
        >>> dict_get({'limits': {'bandwidth': '5.1Mb/s'}}, 'limits.bandwidth')
        '5.1Mb/s'
        >>> dict_get({'limits': {}}, 'limits.nic', 'default')
        'default'
    """
    if not isinstance(source, abc.Mapping):
        raise TypeError(f"source must be a Mapping, got {fmt_type(source)}")

    current = source
    for k in split_key(key, separator):
        if not isinstance(current, abc.Mapping) or k not in current:
            return default
        current = current[k]
    return current


def dict_set(dest: abc.MutableMapping, key: str | Sequence[str], value: Any, *, separator: str = ".") -> None:
    """
    Set a value in a nested mapping using dot-separated keys, creating intermediate dicts.

    Raises:
        TypeError: If an intermediate value exists but is not a MutableMapping.

    Examples:
        >>> data = {}
        >>> dict_set(data, 'limits.bandwidth', '5.1Mb/s')
        >>> data
        {'limits': {'bandwidth': '5.1Mb/s'}}
    """
    if not isinstance(dest, abc.MutableMapping):
        raise TypeError(f"dest must be a MutableMapping, got {fmt_type(dest)}")

    keys = split_key(key, separator)
    current = dest
    for k in keys[:-1]:
        if k not in current:
            current[k] = {}
        elif not isinstance(current[k], abc.MutableMapping):
            raise TypeError(f"cannot traverse through non-mapping value at key {fmt_value(k)}")
        current = current[k]

    current[keys[-1]] = value
