"""
SI prefixed magnitude parsing and formatting.

Converts between strings like "5.1M" or "12.345k" and exact integer counts using
the k, M, G, T, P, E prefixes (steps of 1000). All arithmetic is done on digit
strings and Python ints, never on floats, so a parsed value is either exact or
rejected:

    >>> parse("5.1M")
    5100000
    >>> parse("1.2345k")
    Traceback (most recent call last):
        ...
    bity.errors.PrecisionLossError: Invalid magnitude '1.2345k': 4 fractional digits exceed the 3 digits prefix 'k' can hold
    >>> format(5_100_000)
    '5.1M'

Magnitudes are limited to the range [0, 10**18).
"""

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass
from typing import Mapping

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import PrecisionLossError, SIOverflowError, malformed
from .formatters import fmt_type, fmt_value
from .units import UnitsConf, si_prefixes, valid_si_prefixes


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class DecimalLiteral:
    """
    Syntactic parts of a magnitude literal, e.g. "12.34k" -> ("12", "34", "k").

    The fraction is kept as a digit string, most significant digit first, so its
    value is int(fraction) / 10**len(fraction) without any rounding.
    """
    integer: str
    fraction: str = ""
    prefix: str = ""

    @property
    def order(self) -> int:
        """Prefix order, 0 for no prefix up to 6 for exa."""
        return si_prefixes.get_key(self.prefix)

    @property
    def scale(self) -> int:
        return UnitsConf.PREFIX_STEP ** self.order

    @property
    def significant_fraction(self) -> str:
        """Fraction digits without trailing zeros, which carry no value."""
        return self.fraction.rstrip("0")


# Methods --------------------------------------------------------------------------------------------------------------

def parse(input: str) -> int:
    """
    Parse an SI prefixed string into an exact integer.

    Accepted form is `<digits>[.<digits>][k|M|G|T|P|E]`, surrounding whitespace is ignored.
    Prefixes are case-sensitive.

    Raises:
        TypeError: If input is not a str.
        MalformedInputError: If input does not match the grammar.
        PrecisionLossError: If the fraction has more significant digits than the prefix can absorb.
        SIOverflowError: If the magnitude is 10**18 or more.

    Examples:
        >>> parse("12.345k")
        12345
        >>> parse("0.12k")
        120
        >>> parse("012.340k")
        12340
        >>> parse("12.3P")
        12300000000000000
    """
    return parse_with_units(input, {})


def parse_with_units(text: str, units: Mapping[str, int], *, input: str | None = None) -> int:
    """
    Parse an SI prefixed string followed by one of the given unit symbols.

    The unit symbol is stripped from the end (longest symbol first), the rest is parsed as
    a bare SI magnitude and multiplied by the unit multiplier. When units is non-empty
    a unit symbol is mandatory; with an empty mapping this is the same as parse().

    Args:
        text: Text to parse.
        units: Unit symbol -> multiplier, e.g. {"b": 1, "B": 8} for bits and bytes.
        input: Original user input reported in errors, defaults to text.

    Raises:
        TypeError, MalformedInputError, PrecisionLossError, SIOverflowError: As parse().
            SIOverflowError is also raised when the unit multiplication leaves the range.

    Examples:
        >>> parse_with_units("12.345kb", {"b": 1, "B": 8})
        12345
        >>> parse_with_units("12kB", {"b": 1, "B": 8})
        96000
    """
    if not isinstance(text, str):
        raise TypeError(f"Magnitude to parse must be a str, got {fmt_type(text)}")

    input = text if input is None else input
    text = text.strip()
    if not text:
        raise malformed(input, "empty input")

    multiplier = 1
    if units:
        for symbol in sorted(units, key=len, reverse=True):
            if text.endswith(symbol):
                text = text[:-len(symbol)]
                multiplier = units[symbol]
                break
        else:
            raise malformed(input, f"missing or unknown unit, expected one of {sorted(units)}")

    literal = parse_literal(text, input=input)
    value = _literal_value(literal, input) * multiplier
    if value >= UnitsConf.LIMIT:
        raise _overflow(input)
    return value


def parse_literal(text: str, *, input: str | None = None) -> DecimalLiteral:
    """
    Split a bare magnitude into its integer digits, fraction digits and prefix.

    Only the syntax is checked, the value is not computed.

    Args:
        text: Magnitude text without unit, e.g. "12.34k".
        input: Original user input reported in errors, defaults to text.

    Raises:
        MalformedInputError: If text does not match `<digits>[.<digits>][prefix]`.

    Examples:
        >>> parse_literal("12.34k")
        DecimalLiteral(integer='12', fraction='34', prefix='k')
    """
    input = text if input is None else input

    prefix = ""
    if text and text[-1] in valid_si_prefixes:
        prefix = text[-1]
        text = text[:-1]
    elif text and text[-1] not in UnitsConf.DIGITS:
        raise malformed(input, f"unknown SI prefix {text[-1]!r}, expected one of {list(valid_si_prefixes)}")

    integer, separator, fraction = text.partition(UnitsConf.DECIMAL_SEPARATOR)

    if not integer:
        raise malformed(input, "missing integer digits")
    if separator and not fraction:
        raise malformed(input, "missing fraction digits after the decimal separator")
    if UnitsConf.DECIMAL_SEPARATOR in fraction:
        raise malformed(input, "more than one decimal separator")
    if not _is_digits(integer) or not _is_digits(fraction):
        raise malformed(input, "not a decimal number")

    return DecimalLiteral(integer=integer, fraction=fraction, prefix=prefix)


def format(value: int) -> str:
    """
    Format an integer into the most compact exact SI prefixed string.

    The largest prefix giving an integer part of at least 1 and at most three exact
    fractional digits wins; trailing fractional zeros are trimmed. The result always
    parses back to the same value.

    Raises:
        TypeError: If value is not an int.
        SIOverflowError: If value is outside [0, 10**18).

    Examples:
        >>> format(0)
        '0'
        >>> format(123)
        '123'
        >>> format(1_200)
        '1.2k'
        >>> format(12_345)
        '12.345k'
        >>> format(1_234_567)
        '1234.567k'
    """
    check_magnitude(value)

    for order in range(UnitsConf.MAX_ORDER, 0, -1):
        scale = UnitsConf.PREFIX_STEP ** order
        quotient, remainder = divmod(value, scale)
        if quotient == 0:
            continue

        digit_weight = scale // 10 ** UnitsConf.FRACTION_DIGITS
        if remainder % digit_weight:
            continue

        number = str(quotient)
        if remainder:
            fraction = str(remainder // digit_weight).zfill(UnitsConf.FRACTION_DIGITS).rstrip("0")
            number = f"{number}{UnitsConf.DECIMAL_SEPARATOR}{fraction}"
        return f"{number}{si_prefixes[order]}"

    return str(value)


def format_with_unit(value: int, unit: str = "", suffix: str = "") -> str:
    """
    Format value and append a unit symbol and a suffix.

    Examples:
        >>> format_with_unit(12_000, "b", "/s")
        '12kb/s'
    """
    return f"{format(value)}{unit}{suffix}"


def check_magnitude(value: int) -> int:
    """
    Validate value is an int magnitude in [0, 10**18) and return it.

    Raises:
        TypeError: If value is not an int, bool is rejected as well.
        SIOverflowError: If value is negative or 10**18 and above.
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"Magnitude must be an int, got {fmt_type(value)}")
    if not 0 <= value < UnitsConf.LIMIT:
        raise SIOverflowError(
            f"Magnitude {fmt_value(value)} is out of range [0, {UnitsConf.LIMIT})"
        )
    return value


# Private Methods ------------------------------------------------------------------------------------------------------

def _is_digits(text: str) -> bool:
    # str.isdigit() accepts non-ASCII digits such as "²" or "١"
    return all(char in UnitsConf.DIGITS for char in text)


def _literal_value(literal: DecimalLiteral, input: str) -> int:
    """Exact integer value of a literal, checked against the magnitude limit."""
    scale = literal.scale

    # Digit strings longer than the limit overflow anyway, skip int() on them
    if len(literal.integer.lstrip("0")) > len(str(UnitsConf.LIMIT)):
        raise _overflow(input)

    integer_value = int(literal.integer.lstrip("0") or "0") * scale
    if integer_value >= UnitsConf.LIMIT:
        raise _overflow(input)

    fraction = literal.significant_fraction
    if not fraction:
        return integer_value

    capacity = UnitsConf.FRACTION_DIGITS * literal.order
    if len(fraction) > capacity:
        where = f"prefix {literal.prefix!r}" if literal.prefix else "a value without prefix"
        raise PrecisionLossError(
            f"Invalid magnitude {fmt_value(input)}: {len(fraction)} fractional digits "
            f"exceed the {capacity} digits {where} can hold",
            input,
        )

    value = integer_value + int(fraction) * (scale // 10 ** len(fraction))
    if value >= UnitsConf.LIMIT:
        raise _overflow(input)
    return value


def _overflow(input: str) -> SIOverflowError:
    return SIOverflowError(
        f"Invalid magnitude {fmt_value(input)}: value must be less than {UnitsConf.LIMIT}", input
    )


# Serialization --------------------------------------------------------------------------------------------------------

def serialize(value: int) -> str:
    """Write a magnitude field value as its SI prefixed string, same as format()."""
    return format(value)


def deserialize(data: str | int) -> int:
    """
    Read a magnitude field value: strings are parsed, plain ints are taken as is.

    Raises:
        TypeError: If data is neither str nor int (bool is rejected).
        ParseError: Any parse error of the string, or SIOverflowError for out of range ints.
    """
    if isinstance(data, str):
        return parse(data)
    if isinstance(data, int) and not isinstance(data, bool):
        return check_magnitude(data)
    raise TypeError(f"Expected str or int si magnitude, got {fmt_type(data)}")
