#
# Formcheck - Options Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
import re

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from formcheck.options import (
    ArrayOptions,
    EmailOptions,
    ErrorPolicy,
    ObjectOptions,
    PasswordOptions,
    StrongPasswordOptions,
    URLOptions,
    UsernameOptions,
    merge_options,
)
from formcheck.validators import is_email, is_username


# Tests ----------------------------------------------------------------------------------------------------------------

class TestMergeOptions:
    def test_defaults(self):
        assert merge_options(UsernameOptions) == UsernameOptions()

    def test_mapping_keeps_defaults(self):
        """Leave fields absent from the mapping at their defaults."""
        opt = merge_options(PasswordOptions, {"min_length": 12})
        assert opt.min_length == 12
        assert opt.max_length == 128
        assert opt.require_symbols is True

    def test_overrides_win(self):
        opt = merge_options(UsernameOptions, {"min_length": 5, "max_length": 10}, min_length=2)
        assert (opt.min_length, opt.max_length) == (2, 10)

    def test_instance_not_mutated(self):
        original = UsernameOptions(max_length=10)
        merged = merge_options(UsernameOptions, original, min_length=1)
        assert merged is not original
        assert original.min_length == 3
        assert merged == UsernameOptions(min_length=1, max_length=10)

    def test_list_defaults_independent(self):
        assert URLOptions().allowed_protocols is not URLOptions().allowed_protocols

    @pytest.mark.parametrize(
        "options, overrides",
        [
            pytest.param({"min_len": 3}, {}, id="mapping"),
            pytest.param(None, {"minLength": 3}, id="override"),
        ],
    )
    def test_unknown_names(self, options, overrides):
        with pytest.raises(TypeError, match=r"(?i)unknown option\(s\): min"):
            merge_options(UsernameOptions, options, **overrides)

    def test_wrong_options_type(self):
        with pytest.raises(TypeError, match=r"(?i)options must be UsernameOptions, a mapping or None"):
            merge_options(UsernameOptions, EmailOptions())

    def test_cls_must_be_dataclass(self):
        with pytest.raises(TypeError, match=r"(?i)cls must be an options dataclass"):
            merge_options(dict, {})

    def test_checks_accept_mapping(self):
        assert not is_username("abc", {"min_length": 4}).is_valid
        assert is_email("a@b.co", {"max_length": 6}).is_valid

    def test_checks_reject_unknown(self):
        with pytest.raises(TypeError, match=r"(?i)unknown option"):
            is_email("user@example.com", allow_unicode=True)


class TestLengthFields:
    @pytest.mark.parametrize(
        "cls, kwargs",
        [
            pytest.param(UsernameOptions, {"min_length": -1}, id="username"),
            pytest.param(PasswordOptions, {"min_strength": -3}, id="password"),
            pytest.param(ArrayOptions, {"max_length": -1}, id="array"),
            pytest.param(ObjectOptions, {"min_properties": -1}, id="object"),
        ],
    )
    def test_negative(self, cls, kwargs):
        with pytest.raises(ValueError, match=r"(?i)must be >=0"):
            cls(**kwargs)

    @pytest.mark.parametrize("value", [True, "3", None], ids=["bool", "str", "none"])
    def test_not_a_number(self, value):
        with pytest.raises(TypeError, match=r"(?i)min_length must be a number"):
            UsernameOptions(min_length=value)

    @pytest.mark.parametrize(
        "cls, kwargs",
        [
            pytest.param(UsernameOptions, {"min_length": 10, "max_length": 5}, id="username"),
            pytest.param(PasswordOptions, {"min_length": 200}, id="password"),
            pytest.param(ArrayOptions, {"min_length": 3, "max_length": 2}, id="array"),
            pytest.param(ObjectOptions, {"min_properties": 2, "max_properties": 1}, id="object"),
        ],
    )
    def test_min_exceeds_max(self, cls, kwargs):
        with pytest.raises(ValueError, match=r"(?i)must not exceed"):
            cls(**kwargs)

    def test_unbounded_default(self):
        assert ArrayOptions().max_length == float("inf")


class TestCallbackOptions:
    @pytest.mark.parametrize(
        "value, expected",
        [
            pytest.param("raise", ErrorPolicy.RAISE, id="raise"),
            pytest.param("ignore", ErrorPolicy.IGNORE, id="ignore"),
            pytest.param(ErrorPolicy.WARN, ErrorPolicy.WARN, id="member"),
        ],
    )
    def test_policy_coerced(self, value, expected):
        assert ArrayOptions(on_error=value).on_error is expected
        assert ObjectOptions(on_error=value).on_error is expected

    def test_policy_unknown(self):
        with pytest.raises(ValueError, match=r"(?i)on_error must be one of: raise, warn, ignore"):
            ArrayOptions(on_error="log")

    def test_item_validator_callable(self):
        with pytest.raises(TypeError, match=r"(?i)item_validator must be callable"):
            ArrayOptions(item_validator="is_number")

    def test_field_validators_mapping(self):
        with pytest.raises(TypeError, match=r"(?i)field_validators must be a mapping"):
            ObjectOptions(field_validators=[is_email])

    def test_field_validators_callable(self):
        with pytest.raises(TypeError, match=r"(?i)field validator for 'email' must be callable"):
            ObjectOptions(field_validators={"email": None})

    @pytest.mark.parametrize("pattern", [r"\d", re.compile(r"\d")], ids=["str", "compiled"])
    def test_custom_regex_types(self, pattern):
        assert StrongPasswordOptions(custom_regex=pattern).custom_regex is pattern

    def test_custom_regex_wrong_type(self):
        with pytest.raises(TypeError, match=r"(?i)custom_regex must be a str or compiled pattern"):
            StrongPasswordOptions(custom_regex=42)
