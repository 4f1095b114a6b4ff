#
# Bity - Packet-Rate Tests
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from bity import pps
from bity.errors import MalformedInputError


# Tests ----------------------------------------------------------------------------------------------------------------

class TestParse:

    @pytest.mark.parametrize(
        "text, expected",
        [
            pytest.param("12p/s", 12, id="slash"),
            pytest.param("12pps", 12, id="pps"),
            pytest.param("12.345kp/s", 12_345, id="kilo-slash"),
            pytest.param("12.345kpps", 12_345, id="kilo-pps"),
            pytest.param("2.44Mpps", 2_440_000, id="mega-pps"),
            pytest.param("2.44Mp/s", 2_440_000, id="mega-slash"),
        ],
    )
    def test_parse(self, text, expected):
        assert pps.parse(text) == expected

    @pytest.mark.parametrize(
        "text",
        [
            pytest.param("12p", id="missing-rate"),
            pytest.param("12", id="bare-number"),
            pytest.param("12ps", id="missing-unit"),
            pytest.param("12k/s", id="missing-unit-slash"),
            pytest.param("12kb/s", id="bit-unit"),
            pytest.param("12Kpps", id="uppercase-kilo"),
        ],
    )
    def test_malformed(self, text):
        with pytest.raises(MalformedInputError):
            pps.parse(text)


class TestFormat:

    @pytest.mark.parametrize(
        "value, expected",
        [
            pytest.param(0, "0p/s", id="zero"),
            pytest.param(12, "12p/s", id="plain"),
            pytest.param(12_000, "12kp/s", id="kilo"),
            pytest.param(2_440_000, "2.44Mp/s", id="mega"),
        ],
    )
    def test_format(self, value, expected):
        assert pps.format(value) == expected


class TestSerialization:

    def test_serialize(self):
        assert pps.serialize(180_000) == "180kp/s"

    def test_deserialize(self):
        assert pps.deserialize("5.1Mp/s") == 5_100_000
        assert pps.deserialize(12_000) == 12_000
