#
# Formcheck - Checksums Tests
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from formcheck.checksums import luhn_sum, luhn_valid


# Tests ----------------------------------------------------------------------------------------------------------------

class TestLuhn:
    @pytest.mark.parametrize(
        "digits, total",
        [
            pytest.param("79927398713", 70, id="reference"),
            pytest.param("0", 0, id="single-zero"),
            pytest.param("18", 10, id="doubled-over-nine"),
        ],
    )
    def test_sum(self, digits, total):
        assert luhn_sum(digits) == total

    @pytest.mark.parametrize(
        "digits, valid",
        [
            pytest.param("4532015112830366", True, id="visa"),
            pytest.param("4532015112830367", False, id="visa-bad-check"),
            pytest.param("046454286", True, id="sin"),
            pytest.param("79927398710", False, id="reference-bad-check"),
        ],
    )
    def test_valid(self, digits, valid):
        assert luhn_valid(digits) is valid

    @pytest.mark.parametrize(
        "digits",
        [
            pytest.param("", id="empty"),
            pytest.param("12a4", id="letter"),
            pytest.param("12 34", id="space"),
            pytest.param("١٢٣", id="non-ascii-digits"),
        ],
    )
    def test_value_errors(self, digits):
        with pytest.raises(ValueError, match=r"(?i)non-empty string of digits"):
            luhn_sum(digits)

    def test_type_error(self):
        with pytest.raises(TypeError, match=r"(?i)digits must be a string"):
            luhn_sum(1234)
