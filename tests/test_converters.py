#
# Formcheck - Converters Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from formcheck.converters import decimal_places, resolve_now, to_24_hour, to_datetime, to_dms


# Tests ----------------------------------------------------------------------------------------------------------------

class TestTo24Hour:
    @pytest.mark.parametrize(
        "value, expected",
        [
            pytest.param("12:00 AM", "00:00", id="midnight"),
            pytest.param("12:00 PM", "12:00", id="noon"),
            pytest.param("1:05 pm", "13:05", id="lowercase-pm"),
            pytest.param("9:05AM", "09:05", id="no-space-padded"),
            pytest.param("11:59:59 PM", "23:59:59", id="seconds"),
            pytest.param(" 7:30 am ", "07:30", id="surrounding-space"),
        ],
    )
    def test_convert(self, value, expected):
        assert to_24_hour(value) == expected

    @pytest.mark.parametrize(
        "value",
        [
            pytest.param("14:30", id="no-meridiem"),
            pytest.param("2:30 XM", id="bad-meridiem"),
            pytest.param("2 PM", id="no-minutes"),
            pytest.param("", id="empty"),
        ],
    )
    def test_value_error(self, value):
        with pytest.raises(ValueError, match=r"(?i)invalid 12-hour time"):
            to_24_hour(value)

    def test_type_error(self):
        with pytest.raises(TypeError, match=r"(?i)time must be a string"):
            to_24_hour(1430)


class TestToDMS:
    @pytest.mark.parametrize(
        "value, axis, expected",
        [
            pytest.param(0, "lat", "0°0'0.00\"N", id="zero-lat"),
            pytest.param(0, "lng", "0°0'0.00\"E", id="zero-lng"),
            pytest.param(-0.5, "lat", "0°30'0.00\"S", id="south"),
            pytest.param(10.5, "lng", "10°30'0.00\"E", id="east"),
            pytest.param(-122.654321, "lng", "122°39'15.56\"W", id="west"),
        ],
    )
    def test_render(self, value, axis, expected):
        assert to_dms(value, axis) == expected

    def test_bad_axis(self):
        with pytest.raises(ValueError, match=r"(?i)axis must be"):
            to_dms(1.0, "alt")


class TestDecimalPlaces:
    @pytest.mark.parametrize(
        "value, expected",
        [
            pytest.param(0.1, 1, id="tenth"),
            pytest.param(2.50, 1, id="trailing-zero"),
            pytest.param(5.0, 0, id="integral-float"),
            pytest.param(100, 0, id="int"),
            pytest.param(1e-07, 7, id="exponent-notation"),
            pytest.param(Decimal("1.230"), 2, id="decimal"),
            pytest.param(float("inf"), 0, id="inf"),
        ],
    )
    def test_count(self, value, expected):
        assert decimal_places(value) == expected

    @pytest.mark.parametrize("value", [True, "1.5", None], ids=["bool", "str", "none"])
    def test_type_error(self, value):
        with pytest.raises(TypeError, match=r"(?i)value must be a number"):
            decimal_places(value)


class TestToDatetime:
    def test_date_is_local_midnight(self):
        dt = to_datetime(date(2024, 1, 1))
        assert dt.tzinfo is not None
        assert (dt.date(), dt.hour, dt.minute) == (date(2024, 1, 1), 0, 0)

    def test_aware_kept(self):
        value = datetime(2024, 1, 15, 10, 0, tzinfo=timezone(timedelta(hours=2)))
        assert to_datetime(value) is value

    def test_iso_zulu(self):
        assert to_datetime("2024-01-15T10:00:00Z") == datetime(2024, 1, 15, 10, 0, tzinfo=timezone.utc)

    def test_custom_format(self):
        dt = to_datetime("15/01/2024", "%d/%m/%Y")
        assert (dt.year, dt.month, dt.day) == (2024, 1, 15)

    @pytest.mark.parametrize(
        "value, fmt",
        [
            pytest.param("2024-02-30", None, id="impossible-date"),
            pytest.param("yesterday", None, id="text"),
            pytest.param("2024-01-15", "%d/%m/%Y", id="format-mismatch"),
            pytest.param(42, None, id="int"),
            pytest.param(None, None, id="none"),
            pytest.param("9999-12-31T23:59:59-14:00", None, id="aware-after-local-max"),
            pytest.param(datetime(1, 1, 1, tzinfo=timezone(timedelta(hours=14))), None, id="aware-before-local-min"),
        ],
    )
    def test_none(self, value, fmt):
        assert to_datetime(value, fmt) is None


class TestResolveNow:
    def test_default_is_aware(self):
        assert resolve_now().tzinfo is not None

    def test_given(self, now):
        assert resolve_now(now) == now

    @pytest.mark.parametrize("value", ["garbage", 42, "2024-02-30"], ids=["text", "int", "impossible-date"])
    def test_unparseable(self, value):
        with pytest.raises(ValueError, match=r"(?i)now must be a date, datetime or ISO 8601 string"):
            resolve_now(value)
