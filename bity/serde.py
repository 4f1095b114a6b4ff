"""
Serialization adapter for magnitude fields.

Every domain module (si, bit, packet, bps, pps) exposes a serialize/deserialize
pair usable as a "via string" field transform by any (de)serialization framework.
This module bundles them as Codec objects and applies them to the fields of plain
mappings and TOML documents:

    >>> config = loads_toml('bandwidth = "5.1Mb/s"\\nnic = "180kB"\\n', {"bandwidth": "bps", "nic": "bit"})
    >>> config
    {'bandwidth': 5100000, 'nic': 1440000}
    >>> dumps_toml(config, {"bandwidth": "bps", "nic": "bit"})
    'bandwidth = "5.1Mb/s"\\nnic = "1.44Mb"\\n'

Strings are parsed with the domain grammar, plain integers are accepted as base
unit counts. Fields not listed pass through unchanged, listed fields missing from
the data are skipped.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import copy
from dataclasses import dataclass
from types import MappingProxyType, ModuleType
from typing import Any, Callable, Mapping, Self

# Third-party ----------------------------------------------------------------------------------------------------------
import toml

# Local ----------------------------------------------------------------------------------------------------------------
from . import bit, bps, packet, pps, si
from .errors import ParseError
from .formatters import fmt_type, fmt_value
from .tools import MISSING, dict_get, dict_set


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class Codec:
    """
    String field transform of one magnitude domain.

    Attributes:
        name (str)                        : Domain name - si, bit, packet, bps, pps
        serialize (Callable[[int], str])  : Integer to formatted string
        deserialize (Callable[[Any], int]): Formatted string or plain int to integer
    """
    name: str
    serialize: Callable[[int], str]
    deserialize: Callable[[Any], int]

    @classmethod
    def from_module(cls, module: ModuleType) -> Self:
        """Build a codec from a domain module exposing serialize() and deserialize()."""
        return cls(
            name=module.__name__.rpartition(".")[2],
            serialize=module.serialize,
            deserialize=module.deserialize,
        )


CODECS: Mapping[str, Codec] = MappingProxyType({
    c.name: c for c in map(Codec.from_module, (si, bit, packet, bps, pps))
})

FieldSpec = Codec | ModuleType | str


# Methods --------------------------------------------------------------------------------------------------------------

def codec(spec: FieldSpec) -> Codec:
    """
    Resolve a codec from a domain name, a domain module or a Codec.

    Raises:
        KeyError: If the domain is unknown.
        TypeError: If spec is of unsupported type.

    Examples:
        >>> codec("bps").deserialize("12kb/s")
        12000
    """
    if isinstance(spec, Codec):
        return spec
    if isinstance(spec, ModuleType):
        spec = spec.__name__.rpartition(".")[2]
    if isinstance(spec, str):
        try:
            return CODECS[spec]
        except KeyError:
            raise KeyError(f"Unknown magnitude domain {fmt_value(spec)}, expected one of {list(CODECS)}") from None
    raise TypeError(f"Codec spec must be a Codec, domain module or domain name, got {fmt_type(spec)}")


def load_fields(data: Mapping[str, Any], fields: Mapping[str, FieldSpec]) -> dict[str, Any]:
    """
    Deserialize the listed fields of a mapping into integers.

    Args:
        data: Source mapping, left unmodified.
        fields: Field key -> codec spec; keys may be dot-separated paths into nested tables.

    Returns:
        A deep copy of data with the listed fields converted.

    Raises:
        ParseError, TypeError: From the field codec, the message names the field.
    """
    return _transform(data, fields, lambda c, v: c.deserialize(v))


def dump_fields(data: Mapping[str, Any], fields: Mapping[str, FieldSpec]) -> dict[str, Any]:
    """
    Serialize the listed integer fields of a mapping into formatted strings.

    Args:
        data: Source mapping, left unmodified.
        fields: Field key -> codec spec; keys may be dot-separated paths into nested tables.

    Returns:
        A deep copy of data with the listed fields converted.
    """
    return _transform(data, fields, lambda c, v: c.serialize(v))


def loads_toml(text: str, fields: Mapping[str, FieldSpec]) -> dict[str, Any]:
    """Parse a TOML document and deserialize the listed magnitude fields."""
    return load_fields(toml.loads(text), fields)


def dumps_toml(data: Mapping[str, Any], fields: Mapping[str, FieldSpec]) -> str:
    """Serialize the listed magnitude fields and render the mapping as a TOML document."""
    return toml.dumps(dump_fields(data, fields))


# Private Methods ------------------------------------------------------------------------------------------------------

def _transform(
        data: Mapping[str, Any],
        fields: Mapping[str, FieldSpec],
        convert: Callable[[Codec, Any], Any],
) -> dict[str, Any]:
    if not isinstance(data, Mapping):
        raise TypeError(f"data must be a Mapping, got {fmt_type(data)}")

    result = copy.deepcopy(dict(data))
    for key, spec in fields.items():
        field_codec = codec(spec)
        value = dict_get(result, key, MISSING)
        if value is MISSING:
            continue
        try:
            converted = convert(field_codec, value)
        except ParseError as e:
            raise type(e)(f"Field {key!r}: {e}", e.input) from e
        except TypeError as e:
            raise TypeError(f"Field {key!r}: {e}") from e
        dict_set(result, key, converted)
    return result
