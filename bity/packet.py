"""
SI prefixed packet count parsing and formatting.

    >>> parse("3.4kp")
    3400
    >>> format(3_400)
    '3.4kp'
"""

# Local ----------------------------------------------------------------------------------------------------------------
from . import codec
from .units import PACKET

DOMAIN = PACKET


def parse(input: str) -> int:
    """Parse a packet count SI prefixed string, e.g. "12.345kp", into a number of packets."""
    return codec.parse(input, DOMAIN)


def format(value: int) -> str:
    """Format a number of packets into a SI prefixed string, e.g. "12kp"."""
    return codec.format(value, DOMAIN)


def serialize(value: int) -> str:
    return codec.serialize(value, DOMAIN)


def deserialize(data: str | int) -> int:
    return codec.deserialize(data, DOMAIN)
