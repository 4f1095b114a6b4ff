#
# Bity Units of Measurement Tables
#

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

# Local ----------------------------------------------------------------------------------------------------------------
from .collections import BiDirectionalMap


# @formatter:off

class UnitsConf:
    PREFIX_STEP = 1000                  # SI steps, no IEC (1024) prefixes
    FRACTION_DIGITS = 3                 # Fractional digits one prefix step absorbs
    MAX_ORDER = 6                       # Exa, the largest supported prefix
    LIMIT = 10**18                      # Exclusive upper bound of any magnitude
    BYTE_BITS = 8
    DECIMAL_SEPARATOR = "."
    DIGITS = "0123456789"
    RATE_SUFFIX = "/s"


# Prefix order -> symbol, scale of order n is 1000**n
si_prefixes = BiDirectionalMap({
    0: "", 1: "k", 2: "M", 3: "G", 4: "T", 5: "P", 6: "E",
})

valid_orders = tuple(si_prefixes.keys())
valid_scales = tuple(UnitsConf.PREFIX_STEP ** order for order in valid_orders)
valid_si_prefixes = tuple(symbol for symbol in si_prefixes.values() if symbol)
# @formatter:on


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class UnitDomain:
    """
    Constant description of a magnitude domain layered on the SI core.

    Attributes:
        name (str)                : Domain name, also the module name - si, bit, packet, bps, pps
        units (Mapping[str, int]) : Accepted unit symbols and the multiplier each one applies on parse;
                                    empty for bare SI scalars, otherwise a unit symbol is mandatory
        format_unit (str)         : Unit symbol emitted on format
        rate_suffixes (tuple)     : Accepted per-second suffixes, stripped before unit parsing;
                                    empty for count domains
        format_rate_suffix (str)  : Per-second suffix emitted on format
    """
    name: str
    units: Mapping[str, int] = field(default_factory=dict)
    format_unit: str = ""
    rate_suffixes: tuple[str, ...] = ()
    format_rate_suffix: str = ""

    def __post_init__(self):
        object.__setattr__(self, "units", MappingProxyType(dict(self.units)))

        for symbol, multiplier in self.units.items():
            if not symbol or symbol[0] in UnitsConf.DIGITS or symbol in valid_si_prefixes:
                raise ValueError(f"Invalid unit symbol {symbol!r} in domain {self.name!r}")
            if not isinstance(multiplier, int) or multiplier < 1:
                raise ValueError(f"Unit multiplier must be a positive int, got {multiplier!r}")

        if self.format_unit and self.units.get(self.format_unit) != 1:
            raise ValueError(f"Format unit {self.format_unit!r} must be a base unit with multiplier 1")

        if bool(self.rate_suffixes) != bool(self.format_rate_suffix):
            raise ValueError("Rate suffixes and format rate suffix must be set together")

    @property
    def is_rate(self) -> bool:
        return bool(self.rate_suffixes)


# @formatter:off
SI = UnitDomain("si")
BIT = UnitDomain("bit", units={"b": 1, "B": UnitsConf.BYTE_BITS}, format_unit="b")
PACKET = UnitDomain("packet", units={"p": 1}, format_unit="p")
BPS = UnitDomain(
    "bps", units=BIT.units, format_unit="b",
    rate_suffixes=(UnitsConf.RATE_SUFFIX, "ps"), format_rate_suffix=UnitsConf.RATE_SUFFIX,
)
PPS = UnitDomain(
    "pps", units=PACKET.units, format_unit="p",
    rate_suffixes=(UnitsConf.RATE_SUFFIX, "ps"), format_rate_suffix=UnitsConf.RATE_SUFFIX,
)
# @formatter:on


# Methods --------------------------------------------------------------------------------------------------------------

def strip_per_second(text: str, suffixes: tuple[str, ...] = (UnitsConf.RATE_SUFFIX,)) -> str | None:
    """
    Strip exactly one per-second suffix from text.

    Returns:
        The text without the first matching suffix, or None if none of the suffixes match.

    Examples:
        >>> strip_per_second("12kb/s", ("/s", "ps"))
        '12kb'
        >>> strip_per_second("12kpps", ("/s", "ps"))
        '12kp'
        >>> strip_per_second("12kb", ("/s", "ps")) is None
        True
    """
    for suffix in suffixes:
        if suffix and text.endswith(suffix):
            return text[:-len(suffix)]
    return None


# Module Sanity Checks -------------------------------------------------------------------------------------------------

# Prefix orders must be contiguous from none up to exa.
if valid_orders != tuple(range(UnitsConf.MAX_ORDER + 1)):
    raise AssertionError(
        "Configuration Error: SI prefix orders must be contiguous from 0 to UnitsConf.MAX_ORDER."
    )

# The limit is one exa-step beyond the largest prefix and must fit unsigned 64-bit storage.
if UnitsConf.LIMIT != valid_scales[-1] or UnitsConf.LIMIT > 2**64:
    raise AssertionError(
        "Configuration Error: UnitsConf.LIMIT must equal the largest SI prefix scale."
    )
