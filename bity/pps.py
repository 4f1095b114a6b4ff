"""
SI prefixed packet-rate parsing and formatting.

Rates are written `<n>p/s` or `<n>pps`, formatting always uses `p/s`.

    >>> parse("2.44Mpps")
    2440000
    >>> format(2_440_000)
    '2.44Mp/s'
"""

# Local ----------------------------------------------------------------------------------------------------------------
from . import codec
from .units import PPS

DOMAIN = PPS


def parse(input: str) -> int:
    """Parse a packet-rate SI prefixed string into a number of packets per second."""
    return codec.parse(input, DOMAIN)


def format(value: int) -> str:
    """Format a number of packets per second into a packet-rate SI prefixed string."""
    return codec.format(value, DOMAIN)


def serialize(value: int) -> str:
    return codec.serialize(value, DOMAIN)


def deserialize(data: str | int) -> int:
    return codec.deserialize(data, DOMAIN)
