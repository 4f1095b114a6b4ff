#
# Bity Parse Errors
#

# Local ----------------------------------------------------------------------------------------------------------------
from .formatters import fmt_value


# Classes --------------------------------------------------------------------------------------------------------------

class ParseError(ValueError):
    """
    Base class of all magnitude parsing failures.

    Attributes:
        input (str | None): The text that failed to parse, or None when the failure
                            comes from an already numeric value.
    """

    def __init__(self, message: str, input: str | None = None):
        super().__init__(message)
        self.input = input


class MalformedInputError(ParseError):
    """The input does not match the magnitude grammar."""


class PrecisionLossError(ParseError):
    """The fractional part cannot be represented exactly at the chosen prefix."""


class SIOverflowError(ParseError, OverflowError):
    """The magnitude or an intermediate scaling step exceeds the supported range."""


# Methods --------------------------------------------------------------------------------------------------------------

def malformed(input: str, reason: str) -> MalformedInputError:
    return MalformedInputError(f"Invalid magnitude {fmt_value(input)}: {reason}", input)
