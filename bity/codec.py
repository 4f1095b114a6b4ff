#
# Bity Domain Codec
#
# One parse/format pair driven by a UnitDomain descriptor. The bit, packet,
# bps and pps modules are thin bindings of these functions to their domain.
#

# Local ----------------------------------------------------------------------------------------------------------------
from . import si
from .errors import malformed
from .formatters import fmt_type
from .units import UnitDomain, strip_per_second


# Methods --------------------------------------------------------------------------------------------------------------

def parse(input: str, domain: UnitDomain) -> int:
    """
    Parse a magnitude of the given domain into an exact integer of base units.

    Rate domains strip a mandatory per-second suffix first, then the unit symbol
    and the SI magnitude are parsed by si.parse_with_units().

    Raises:
        TypeError: If input is not a str.
        MalformedInputError: On syntax errors, including a missing unit or rate suffix.
        PrecisionLossError: If the fraction cannot be represented exactly.
        SIOverflowError: If the value in base units is 10**18 or more.
    """
    if not isinstance(input, str):
        raise TypeError(f"Magnitude to parse must be a str, got {fmt_type(input)}")

    text = input.strip()
    if domain.is_rate:
        text = strip_per_second(text, domain.rate_suffixes)
        if text is None or text != text.rstrip():
            raise malformed(input, f"missing rate suffix, expected one of {list(domain.rate_suffixes)}")

    return si.parse_with_units(text, domain.units, input=input)


def format(value: int, domain: UnitDomain) -> str:
    """Format an integer of base units with the domain unit symbol and rate suffix."""
    return si.format_with_unit(value, domain.format_unit, domain.format_rate_suffix)


def deserialize(data: str | int, domain: UnitDomain) -> int:
    """
    Read a magnitude field value: strings are parsed, plain ints are taken as base units.

    Raises:
        TypeError: If data is neither str nor int (bool is rejected).
        ParseError: Any parse error of the string, or SIOverflowError for out of range ints.
    """
    if isinstance(data, str):
        return parse(data, domain)
    if isinstance(data, int) and not isinstance(data, bool):
        return si.check_magnitude(data)
    raise TypeError(f"Expected str or int {domain.name} magnitude, got {fmt_type(data)}")


def serialize(value: int, domain: UnitDomain) -> str:
    """Write a magnitude field value as its formatted string."""
    return format(value, domain)
