#
# Formcheck - Password Strength Tests
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from formcheck.options import PasswordOptions, StrongPasswordOptions
from formcheck.strength import BasicTally, WeightedTally, basic_strength, weighted_strength


# Tests ----------------------------------------------------------------------------------------------------------------

class TestBasicStrength:
    def test_all_satisfied(self):
        tally = basic_strength("Abc123!@", PasswordOptions())
        assert tally == BasicTally(True, True, True, True, True, True)
        assert tally.strength == 6

    def test_partial(self):
        tally = basic_strength("abc def", PasswordOptions())
        assert tally == BasicTally(
            length=False, spaces=False, uppercase=False, lowercase=True, numbers=False, symbols=False
        )
        assert tally.strength == 1

    def test_not_required_counts(self):
        opt = PasswordOptions(require_uppercase=False, require_numbers=False, require_symbols=False)
        assert basic_strength("abcdefgh", opt).strength == 6

    @pytest.mark.parametrize("symbol", list('!@#$%^&*(),.?":{}|<>'))
    def test_symbol_set(self, symbol):
        assert basic_strength("Abc123x" + symbol, PasswordOptions()).symbols

    @pytest.mark.parametrize("symbol", ["_", "-", "+", "=", "~"])
    def test_outside_symbol_set(self, symbol):
        assert not basic_strength("Abc123x" + symbol, PasswordOptions()).symbols


class TestWeightedStrength:
    def test_full_score(self):
        tally = weighted_strength("Abc123!@xyz", StrongPasswordOptions())
        assert tally == WeightedTally(strength=100, errors=[])
        assert tally.is_valid

    def test_errors_in_order(self):
        tally = weighted_strength("ABCDEFGH", StrongPasswordOptions())
        assert tally.strength == 40
        assert tally.errors == [
            "Password must contain at least one lowercase letter",
            "Password must contain at least one number",
            "Password must contain at least one special character",
        ]

    def test_raw_score_below_zero(self):
        """Keep the raw score and clamp on demand."""
        opt = StrongPasswordOptions(banned_passwords=["aaaa"], custom_regex=r"\d")
        tally = weighted_strength("aaaa", opt)
        assert tally.strength == -30
        assert tally.clamped == 0

    def test_banned_is_case_insensitive_on_input(self):
        tally = weighted_strength("QWERTY12!x", StrongPasswordOptions(banned_passwords=["qwerty12!x"]))
        assert tally.strength == 0
        assert tally.errors == ["This password is not allowed"]

    @pytest.mark.parametrize(
        "password, max_repeating, penalized",
        [
            pytest.param("Abc1!xxx", 3, False, id="three-allowed"),
            pytest.param("Abc1!xxxx", 3, True, id="four-rejected"),
            pytest.param("Abc1!xx", 1, True, id="two-rejected-at-one"),
            pytest.param("Abc1!\n\n\n\n", 3, True, id="newlines-count"),
        ],
    )
    def test_repeating(self, password, max_repeating, penalized):
        tally = weighted_strength(password, StrongPasswordOptions(max_repeating_chars=max_repeating))
        message = f"Password cannot contain {max_repeating + 1} or more repeating characters"
        assert (message in tally.errors) is penalized
