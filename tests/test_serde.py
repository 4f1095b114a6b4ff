#
# Bity - Serialization Adapter Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
from textwrap import dedent

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest
import toml

# Local ----------------------------------------------------------------------------------------------------------------
from bity import bps, serde
from bity.errors import MalformedInputError, PrecisionLossError, SIOverflowError
from bity.serde import CODECS, Codec, codec, dump_fields, dumps_toml, load_fields, loads_toml


# Tests ----------------------------------------------------------------------------------------------------------------

CONFIG_FIELDS = {
    "bandwidth": "bps",
    "nic": "bps",
    "highest": "bps",
    "quota.monthly": "packet",
    "quota.burst": "pps",
}


class TestCodec:

    def test_registry(self):
        assert list(CODECS) == ["si", "bit", "packet", "bps", "pps"]
        assert all(isinstance(c, Codec) for c in CODECS.values())

    @pytest.mark.parametrize(
        "spec",
        [
            pytest.param("bps", id="name"),
            pytest.param(bps, id="module"),
            pytest.param(CODECS["bps"], id="codec"),
        ],
    )
    def test_lookup(self, spec):
        assert codec(spec) is CODECS["bps"]

    def test_unknown(self):
        with pytest.raises(KeyError, match="Unknown magnitude domain 'byte'"):
            codec("byte")
        with pytest.raises(TypeError):
            codec(8)

    def test_custom_codec(self):
        upper = Codec("upper", serialize=lambda v: str(v), deserialize=lambda s: int(s))
        assert load_fields({"n": "12"}, {"n": upper}) == {"n": 12}

    def test_transform(self):
        c = codec("pps")
        assert c.name == "pps"
        assert c.serialize(2_440_000) == "2.44Mp/s"
        assert c.deserialize("2.44Mpps") == 2_440_000


class TestFields:

    def test_load(self):
        data = {"bandwidth": "5.1Mb/s", "nic": "180kB/s", "highest": 12_000, "name": "eth0"}
        assert load_fields(data, CONFIG_FIELDS) == {
            "bandwidth": 5_100_000,
            "nic": 1_440_000,
            "highest": 12_000,
            "name": "eth0",
        }

    def test_source_untouched(self):
        data = {"quota": {"monthly": "1.5kp"}}
        loaded = load_fields(data, CONFIG_FIELDS)
        assert loaded == {"quota": {"monthly": 1_500}}
        assert data == {"quota": {"monthly": "1.5kp"}}

    def test_dump(self):
        data = {"bandwidth": 5_100_000, "quota": {"monthly": 180, "burst": 12_000}}
        assert dump_fields(data, CONFIG_FIELDS) == {
            "bandwidth": "5.1Mb/s",
            "quota": {"monthly": "180p", "burst": "12kp/s"},
        }

    @pytest.mark.parametrize(
        "value, error",
        [
            pytest.param("5.1Mb", MalformedInputError, id="missing-rate"),
            pytest.param("1.2345kb/s", PrecisionLossError, id="precision"),
            pytest.param("2Eb/s", SIOverflowError, id="overflow"),
            pytest.param(10**18, SIOverflowError, id="int-overflow"),
            pytest.param("9" * 5000 + "kb/s", SIOverflowError, id="huge-digit-string"),
            pytest.param(1.5, TypeError, id="float"),
        ],
    )
    def test_load_errors_name_field(self, value, error):
        with pytest.raises(error, match="Field 'bandwidth'"):
            load_fields({"bandwidth": value}, CONFIG_FIELDS)

    def test_data_type(self):
        with pytest.raises(TypeError, match="Mapping"):
            load_fields([("bandwidth", "1kb/s")], CONFIG_FIELDS)


class TestToml:

    DOCUMENT = dedent("""\
        bandwidth = "5.1Mb/s"
        nic = "180kB/s"
        highest = 12000

        [quota]
        monthly = "1.5kp"
        burst = "2.44Mpps"
        """)

    def test_loads(self):
        assert loads_toml(self.DOCUMENT, CONFIG_FIELDS) == {
            "bandwidth": 5_100_000,
            "nic": 1_440_000,
            "highest": 12_000,
            "quota": {"monthly": 1_500, "burst": 2_440_000},
        }

    def test_dumps(self):
        text = dumps_toml({"bandwidth": 5_100_000, "nic": 1_440_000, "highest": 12_000}, CONFIG_FIELDS)
        assert text == 'bandwidth = "5.1Mb/s"\nnic = "1.44Mb/s"\nhighest = "12kb/s"\n'

    def test_round_trip(self):
        loaded = loads_toml(self.DOCUMENT, CONFIG_FIELDS)
        assert loads_toml(dumps_toml(loaded, CONFIG_FIELDS), CONFIG_FIELDS) == loaded

    def test_invalid_toml(self):
        with pytest.raises(toml.TomlDecodeError):
            loads_toml("bandwidth = ", CONFIG_FIELDS)

    def test_module_attributes(self):
        assert serde.loads_toml is loads_toml
