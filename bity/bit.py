"""
SI prefixed data (bit) parsing and formatting.

Parsing accepts bit (`b`) and byte (`B`) units, bytes are converted to bits.
Formatting is bit oriented and always emits `b`.

    >>> parse("12.34kb")
    12340
    >>> parse("12B")
    96
    >>> format(12_340)
    '12.34kb'
"""

# Local ----------------------------------------------------------------------------------------------------------------
from . import codec
from .units import BIT

DOMAIN = BIT


def parse(input: str) -> int:
    """
    Parse a data SI prefixed string into a number of bits.

    Examples:
        >>> parse("12kb")
        12000
        >>> parse("0.12kB")
        960
    """
    return codec.parse(input, DOMAIN)


def format(value: int) -> str:
    """
    Format a number of bits into a data SI prefixed string (bit oriented).

    Examples:
        >>> format(12)
        '12b'
        >>> format(1_200)
        '1.2kb'
    """
    return codec.format(value, DOMAIN)


def serialize(value: int) -> str:
    return codec.serialize(value, DOMAIN)


def deserialize(data: str | int) -> int:
    return codec.deserialize(data, DOMAIN)
