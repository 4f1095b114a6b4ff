"""
SI prefixed data-rate parsing and formatting.

The per-second suffix is mandatory, written `/s` or `ps`. Like bit counts, rates
given in bytes are converted to bits and formatting is bit oriented.

    >>> parse("8.65kB/s")
    69200
    >>> parse("100Mbps")
    100000000
    >>> format(69_200)
    '69.2kb/s'
"""

# Local ----------------------------------------------------------------------------------------------------------------
from . import codec
from .units import BPS

DOMAIN = BPS


def parse(input: str) -> int:
    """
    Parse a data-rate SI prefixed string into a number of bits per second.

    Examples:
        >>> parse("12b/s")
        12
        >>> parse("12.345kbps")
        12345
        >>> parse("1.5MB/s")
        12000000
    """
    return codec.parse(input, DOMAIN)


def format(value: int) -> str:
    """
    Format a number of bits per second into a data-rate SI prefixed string.

    Examples:
        >>> format(12_000)
        '12kb/s'
    """
    return codec.format(value, DOMAIN)


def serialize(value: int) -> str:
    return codec.serialize(value, DOMAIN)


def deserialize(data: str | int) -> int:
    return codec.deserialize(data, DOMAIN)
