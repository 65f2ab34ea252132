"""
Formcheck Field Validators

This module contains checks for form and record fields including usernames, emails,
passwords, phone numbers, URLs, dates, card numbers, postal codes, files, addresses,
amounts, colors, IP addresses, SSNs, times, coordinates, and generic numbers, arrays
and objects.

Every check is a pure function of the shape check(value, options=None, **overrides)
returning a ValidationResult. Malformed input is reported as a failed result, never
raised. Guards run in a fixed order and the first failing one supplies the message.

Misconfigured options (unknown names, wrong option types) are programming errors and
raise TypeError or ValueError.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import ipaddress
import math
import re
import warnings

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum, unique
from typing import Any, Callable, TypeVar
from urllib.parse import urlsplit

# Local ----------------------------------------------------------------------------------------------------------------
from .checksums import luhn_valid
from .converters import decimal_places, resolve_now, to_24_hour, to_datetime, to_dms
from .options import (
    MiB,
    AddressOptions,
    ArrayOptions,
    ColorFormat,
    ColorOptions,
    CoordinateFormat,
    DateOptions,
    DateRangeOptions,
    EmailOptions,
    ErrorPolicy,
    FileOptions,
    FileTypeOptions,
    IPAddressOptions,
    IPVersion,
    LatLngOptions,
    MoneyOptions,
    NumberOptions,
    ObjectOptions,
    PasswordOptions,
    PhoneOptions,
    PostalCodeOptions,
    SortOrder,
    SSNFormat,
    SSNOptions,
    StrongPasswordOptions,
    TimeFormat,
    TimeOptions,
    URLOptions,
    UsernameOptions,
    merge_options,
)
from .results import ValidationResult
from .strength import basic_strength, weighted_strength
from .tools import fmt_exception, fmt_type, fmt_value


# Constants ------------------------------------------------------------------------------------------------------------

E = TypeVar("E", bound=Enum)

_EMAIL_INTERNATIONAL = re.compile(
    r'(([^<>()\[\]\\.,;:\s@"]+(\.[^<>()\[\]\\.,;:\s@"]+)*)|(".+"))'
    r"@((\[[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\])|(([a-zA-Z\-0-9]+\.)+[a-zA-Z]{2,}))"
)
_EMAIL_ASCII = re.compile(
    r"[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+"
    r"@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*"
)

_PHONE_INTERNATIONAL = re.compile(r"\+?[1-9]\d{1,14}", re.ASCII)
_PHONE_FORMATS = {
    "US": re.compile(r"\+?1?\d{10}", re.ASCII),
    "UK": re.compile(r"\+?44\d{10}", re.ASCII),
    "IN": re.compile(r"\+?91\d{10}", re.ASCII),
    "INTERNATIONAL": _PHONE_INTERNATIONAL,
}

_POSTAL_FORMATS = {
    "US": re.compile(r"\d{5}(-\d{4})?", re.ASCII),
    "UK": re.compile(r"[A-Z]{1,2}\d[A-Z\d]? ?\d[A-Z]{2}", re.ASCII | re.IGNORECASE),
    "CA": re.compile(r"[ABCEGHJKLMNPRSTVXY]\d[ABCEGHJKLMNPRSTVWXYZ] ?\d[ABCEGHJKLMNPRSTVWXYZ]\d", re.ASCII | re.IGNORECASE),
    "IN": re.compile(r"\d{6}", re.ASCII),
}

# Schemes that cannot be parsed without a host
_URL_HOST_SCHEMES = frozenset({"http", "https", "ftp", "ws", "wss"})

_PO_BOX = re.compile(r"\bp\.?\s*o\.?\s*box\b", re.IGNORECASE)

_COLOR_FORMATS = {
    ColorFormat.HEX: (re.compile(r"#([A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})"), "Invalid hex color format"),
    ColorFormat.RGB: (re.compile(r"rgb\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*\)", re.ASCII), "Invalid RGB color format"),
    ColorFormat.RGBA: (
        re.compile(r"rgba\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*,\s*([01]|0?\.\d+)\s*\)", re.ASCII),
        "Invalid RGBA color format",
    ),
    ColorFormat.HSL: (re.compile(r"hsl\(\s*(\d+)\s*,\s*(\d+)%\s*,\s*(\d+)%\s*\)", re.ASCII), "Invalid HSL color format"),
}

_IPV4 = re.compile(r"(\d{1,3}\.){3}\d{1,3}", re.ASCII)
# Full form only, "::" compression is not recognized
_IPV6 = re.compile(r"([0-9a-fA-F]{1,4}:){7}[0-9a-fA-F]{1,4}")
_IPV4_PRIVATE = tuple(ipaddress.IPv4Network(n) for n in ("10.0.0.0/8", "172.16.0.0/12", "192.168.0.0/16"))
_IPV4_RESERVED = tuple(ipaddress.IPv4Network(n) for n in ("0.0.0.0/8", "127.0.0.0/8", "224.0.0.0/3"))

_SSN_MASKED = re.compile(r"\d{3}-\d{2}-\d{4}", re.ASCII)
_SIN_MASKED = re.compile(r"\d{3}-\d{3}-\d{3}", re.ASCII)

_TIME_FORMATS = {
    (TimeFormat.H24, True): (re.compile(r"([01]\d|2[0-3]):([0-5]\d):([0-5]\d)", re.ASCII), " (HH:MM:SS)"),
    (TimeFormat.H24, False): (re.compile(r"([01]\d|2[0-3]):([0-5]\d)", re.ASCII), " (HH:MM)"),
    (TimeFormat.H12, True): (
        re.compile(r"(0?\d|1[0-2]):([0-5]\d):([0-5]\d)\s*(?i:AM|PM)", re.ASCII), " (HH:MM:SS AM/PM)"
    ),
    (TimeFormat.H12, False): (re.compile(r"(0?\d|1[0-2]):([0-5]\d)\s*(?i:AM|PM)", re.ASCII), " (HH:MM AM/PM)"),
}

_WHITESPACE = re.compile(r"\s")

_LEADING_FLOAT = re.compile(r"\s*([+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|[+-]?Infinity)")


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class FileInfo:
    """Already-decoded file metadata accepted by is_file().

    Any mapping or object exposing `size` and `type` works as well.

    Attributes:
        name: File name.
        size: Size in bytes.
        type: Declared MIME type, e.g. 'image/png'.
    """
    name: str
    size: int
    type: str = ""


@unique
class Check(str, Enum):
    """Names of the registered checks, see VALIDATORS and validate()."""
    USERNAME = "username"
    EMAIL = "email"
    PASSWORD_MATCH = "password_match"
    PASSWORD = "password"
    PHONE = "phone"
    URL = "url"
    DATE = "date"
    CREDIT_CARD = "credit_card"
    POSTAL_CODE = "postal_code"
    FILE = "file"
    ADDRESS = "address"
    MONEY = "money"
    COLOR = "color"
    IP_ADDRESS = "ip_address"
    SSN = "ssn"
    TIME = "time"
    LAT_LNG = "lat_lng"
    STRONG_PASSWORD = "strong_password"
    NUMBER = "number"
    ARRAY = "array"
    OBJECT = "object"
    DATE_IN_RANGE = "date_in_range"
    FILE_TYPE = "file_type"


# Methods --------------------------------------------------------------------------------------------------------------

def is_username(username: str, options: UsernameOptions | Mapping | None = None, **kwargs) -> ValidationResult:
    """
    Check a username against length and character-class rules.

    Letters are always allowed. Digits are allowed unless allow_numbers=False. With
    allow_special_chars=True the class is letters and digits, plus '_' and '-' only when
    allow_numbers=False.

    Examples:
        >>> is_username("ab").message
        'Username must be at least 3 characters'
        >>> is_username("john_doe", allow_special_chars=True, allow_numbers=False).is_valid
        True
    """
    opt = merge_options(UsernameOptions, options, **kwargs)

    if not isinstance(username, str) or not username:
        return ValidationResult.fail("Username is required")

    if len(username) < opt.min_length:
        return ValidationResult.fail(f"Username must be at least {opt.min_length} characters")

    if len(username) > opt.max_length:
        return ValidationResult.fail(f"Username cannot exceed {opt.max_length} characters")

    if opt.allow_special_chars:
        chars = "a-zA-Z0-9" + ("" if opt.allow_numbers else "_-")
        allowed = "letters, numbers, and special characters"
    else:
        chars = "a-zA-Z" + ("0-9" if opt.allow_numbers else "")
        allowed = "letters" + (" and numbers" if opt.allow_numbers else "")

    if not re.fullmatch(f"[{chars}]+", username):
        return ValidationResult.fail(f"Username can only contain {allowed}")

    return ValidationResult.ok("Valid username")


def is_email(email: str, options: EmailOptions | Mapping | None = None, **kwargs) -> ValidationResult:
    """
    Check an email address against one of two grammars.

    allow_international=True selects a permissive grammar that also accepts quoted local
    parts and bracketed IPv4 domains; False selects the ASCII dot-atom grammar.

    Note:
        allow_subdomains=False rejects any address containing more than one '.' in total,
        local part included, so 'first.last@example.com' is rejected as well.

    Examples:
        >>> is_email("user@example.com").is_valid
        True
        >>> is_email("user@mail.example.com", allow_subdomains=False).message
        'Subdomains are not allowed'
    """
    opt = merge_options(EmailOptions, options, **kwargs)

    if not isinstance(email, str) or not email:
        return ValidationResult.fail("Email is required")

    if len(email) > opt.max_length:
        return ValidationResult.fail(f"Email cannot exceed {opt.max_length} characters")

    pattern = _EMAIL_INTERNATIONAL if opt.allow_international else _EMAIL_ASCII
    if not pattern.fullmatch(email):
        return ValidationResult.fail("Invalid email format")

    if not opt.allow_subdomains and email.count(".") > 1:
        return ValidationResult.fail("Subdomains are not allowed")

    return ValidationResult.ok("Valid email")


def is_password_match(password: str, confirm_password: str) -> ValidationResult:
    if not password or not confirm_password:
        return ValidationResult.fail("Both passwords are required")

    if password != confirm_password:
        return ValidationResult.fail("Passwords do not match")

    return ValidationResult.ok("Passwords match")


def is_password(password: str, options: PasswordOptions | Mapping | None = None, **kwargs) -> ValidationResult:
    """
    Check a password against composition rules and a minimum strength.

    Six checks are scored (length in range, spaces, uppercase, lowercase, numbers,
    symbols); a check counts when it is satisfied or not required. The first violated
    rule is reported in that order, followed by the min_strength rule. On success the
    result carries the 0-6 strength.

    Examples:
        >>> is_password("Abc123!@").strength
        6
        >>> is_password("abc").message
        'Password must be between 8 and 128 characters'
    """
    opt = merge_options(PasswordOptions, options, **kwargs)

    if not isinstance(password, str) or not password:
        return ValidationResult.fail("Password is required")

    tally = basic_strength(password, opt)

    if not tally.length:
        return ValidationResult.fail(f"Password must be between {opt.min_length} and {opt.max_length} characters")
    if not tally.spaces:
        return ValidationResult.fail("Password cannot contain spaces")
    if not tally.uppercase:
        return ValidationResult.fail("Password must contain at least one uppercase letter")
    if not tally.lowercase:
        return ValidationResult.fail("Password must contain at least one lowercase letter")
    if not tally.numbers:
        return ValidationResult.fail("Password must contain at least one number")
    if not tally.symbols:
        return ValidationResult.fail("Password must contain at least one special character")
    if tally.strength < opt.min_strength:
        return ValidationResult.fail("Password is too weak")

    return ValidationResult.ok("Strong password", strength=tally.strength)


def is_phone(phone: str, options: PhoneOptions | Mapping | None = None, **kwargs) -> ValidationResult:
    """
    Check a phone number for a country.

    Whitespace is stripped before matching. Unknown country codes fall back to the
    international E.164-like pattern.
    """
    opt = merge_options(PhoneOptions, options, **kwargs)
    if not opt.allow_spaces:
        _warn_unenforced("is_phone", "allow_spaces")

    if not isinstance(phone, str) or not phone:
        return ValidationResult.fail("Phone number is required")

    clean_phone = _WHITESPACE.sub("", phone)
    pattern = _PHONE_FORMATS.get(opt.country, _PHONE_INTERNATIONAL)

    if not pattern.fullmatch(clean_phone):
        return ValidationResult.fail("Invalid phone number format")

    if opt.require_country_code and not phone.startswith("+"):
        return ValidationResult.fail("Country code is required")

    return ValidationResult.ok("Valid phone number")


def is_url(url: str, options: URLOptions | Mapping | None = None, **kwargs) -> ValidationResult:
    """
    Check an absolute URL.

    A URL without a scheme, a web URL without a host, or one that urllib cannot split
    (bad port, unbalanced brackets) is reported as "Invalid URL format". Protocols are
    compared with their trailing colon, e.g. 'https:'.

    Examples:
        >>> is_url("https://example.com/path?q=1#top").is_valid
        True
        >>> is_url("ftp://example.com").message
        'URL must use one of these protocols: http:, https:'
        >>> is_url("example.com").message
        'Invalid URL format'
    """
    opt = merge_options(URLOptions, options, **kwargs)

    if not isinstance(url, str) or not url:
        return ValidationResult.fail("URL is required")

    try:
        parts = urlsplit(url.strip())
        parts.port  # Raises ValueError on a non-numeric or out-of-range port
    except ValueError:
        return ValidationResult.fail("Invalid URL format")

    if not parts.scheme:
        return ValidationResult.fail("Invalid URL format")
    if parts.scheme in _URL_HOST_SCHEMES and (not parts.hostname or _WHITESPACE.search(parts.netloc)):
        return ValidationResult.fail("Invalid URL format")

    protocol = f"{parts.scheme}:"
    if opt.require_protocol and protocol not in opt.allowed_protocols:
        return ValidationResult.fail(f"URL must use one of these protocols: {', '.join(opt.allowed_protocols)}")

    if not opt.allow_query_params and parts.query:
        return ValidationResult.fail("Query parameters are not allowed")

    if not opt.allow_fragments and parts.fragment:
        return ValidationResult.fail("URL fragments are not allowed")

    return ValidationResult.ok("Valid URL")


def is_date(value: Any, options: DateOptions | Mapping | None = None, **kwargs) -> ValidationResult:
    """
    Check a date or datetime, optionally relative to now and to fixed bounds.

    Strings are parsed with options.format (strptime) when given, as ISO 8601 otherwise.
    Naive values are taken as local time. Bounds are inclusive.
    """
    opt = merge_options(DateOptions, options, **kwargs)

    if not value:
        return ValidationResult.fail("Date is required")

    dt = to_datetime(value, opt.format)
    if dt is None:
        return ValidationResult.fail("Invalid date format")

    now = resolve_now(opt.now)

    if not opt.allow_future and dt > now:
        return ValidationResult.fail("Future dates are not allowed")

    if not opt.allow_past and dt < now:
        return ValidationResult.fail("Past dates are not allowed")

    min_dt = to_datetime(opt.min_date) if opt.min_date else None
    if min_dt is not None and dt < min_dt:
        return ValidationResult.fail(f"Date must be after {opt.min_date}")

    max_dt = to_datetime(opt.max_date) if opt.max_date else None
    if max_dt is not None and dt > max_dt:
        return ValidationResult.fail(f"Date must be before {opt.max_date}")

    return ValidationResult.ok("Valid date")


def is_credit_card(card_number: str) -> ValidationResult:
    """
    Check a card number with the Luhn checksum.

    Spaces and dashes are stripped first; any other non-digit is rejected.

    Examples:
        >>> is_credit_card("4532 0151 1283 0366").is_valid
        True
        >>> is_credit_card("4532015112830367").message
        'Invalid credit card number'
    """
    if not isinstance(card_number, str) or not card_number:
        return ValidationResult.fail("Credit card number is required")

    digits = re.sub(r"[\s-]+", "", card_number)

    if not (digits.isascii() and digits.isdigit()):
        return ValidationResult.fail("Credit card number can only contain digits")

    if not luhn_valid(digits):
        return ValidationResult.fail("Invalid credit card number")

    return ValidationResult.ok("Valid credit card number")


def is_postal_code(code: str, options: PostalCodeOptions | Mapping | None = None, **kwargs) -> ValidationResult:
    """Check a postal code for one of the supported countries: US, UK, CA, IN."""
    opt = merge_options(PostalCodeOptions, options, **kwargs)

    if not isinstance(code, str) or not code:
        return ValidationResult.fail("Postal code is required")

    pattern = _POSTAL_FORMATS.get(opt.country)
    if pattern is None:
        return ValidationResult.fail("Unsupported country code")

    if not pattern.fullmatch(code):
        return ValidationResult.fail("Invalid postal code format")

    return ValidationResult.ok("Valid postal code")


def is_file(file: Any, options: FileOptions | Mapping | None = None, **kwargs) -> ValidationResult:
    """
    Check declared file metadata against a size limit and allowed MIME types.

    file is a FileInfo, a mapping or any object with `size` and `type`. The declared type
    is trusted, content is not sniffed. Image dimension options are accepted but not
    enforced, setting them emits a UserWarning.
    """
    opt = merge_options(FileOptions, options, **kwargs)
    unenforced = [name for name in ("min_width", "min_height", "max_width", "max_height", "aspect_ratio")
                  if getattr(opt, name) is not None]
    if unenforced:
        _warn_unenforced("is_file", *unenforced)

    if not file:
        return ValidationResult.fail("File is required")

    size = _field(file, "size")
    if _is_real(size) and size > opt.max_size:
        return ValidationResult.fail(f"File size must not exceed {opt.max_size / MiB:g}MB")

    if opt.allowed_types and _field(file, "type") not in opt.allowed_types:
        return ValidationResult.fail(f"File type must be one of: {', '.join(opt.allowed_types)}")

    return ValidationResult.ok("Valid file")


def is_address(address: Any, options: AddressOptions | Mapping | None = None, **kwargs) -> ValidationResult:
    """
    Check that the required address parts are present.

    address is a mapping or an object with street, city, state, zip and country. Parts
    are checked in that order; the P.O. box rule runs right after the street check and
    reads street even when it is not required.
    """
    opt = merge_options(AddressOptions, options, **kwargs)

    if not address:
        return ValidationResult.fail("Address is required")

    street = _field(address, "street")
    if opt.require_street and not street:
        return ValidationResult.fail("Street address is required")

    if not opt.allow_po_box and _PO_BOX.search("" if street is None else str(street)):
        return ValidationResult.fail("P.O. Box addresses are not allowed")

    if opt.require_city and not _field(address, "city"):
        return ValidationResult.fail("City is required")

    if opt.require_state and not _field(address, "state"):
        return ValidationResult.fail("State is required")

    if opt.require_zip and not _field(address, "zip"):
        return ValidationResult.fail("ZIP code is required")

    if opt.require_country and not _field(address, "country"):
        return ValidationResult.fail("Country is required")

    return ValidationResult.ok("Valid address")


def is_money(amount: str | float | int | Decimal, options: MoneyOptions | Mapping | None = None,
             **kwargs) -> ValidationResult:
    """
    Check a monetary amount.

    Strings are read up to the end of their leading number, so "12abc" is 12. Decimal
    places are counted on the shortest decimal representation of the value, without
    rounding.

    Examples:
        >>> is_money("19.99").is_valid
        True
        >>> is_money(19.999).message
        'Amount cannot have more than 2 decimal places'
        >>> is_money(-5).message
        'Negative values are not allowed'
    """
    opt = merge_options(MoneyOptions, options, **kwargs)
    if opt.currency != "USD":
        _warn_unenforced("is_money", "currency")

    value = _to_number(amount)
    if value is None or math.isnan(value):
        return ValidationResult.fail("Invalid monetary value")

    if not opt.allow_negative and value < 0:
        return ValidationResult.fail("Negative values are not allowed")

    if value < opt.min_amount:
        return ValidationResult.fail(f"Amount must be at least {opt.min_amount}")

    if value > opt.max_amount:
        return ValidationResult.fail(f"Amount must not exceed {opt.max_amount}")

    if decimal_places(value) > opt.decimals:
        return ValidationResult.fail(f"Amount cannot have more than {opt.decimals} decimal places")

    return ValidationResult.ok("Valid amount")


def is_color(color: str, options: ColorOptions | Mapping | None = None, **kwargs) -> ValidationResult:
    """
    Check a CSS-like color: '#rgb', '#rrggbb', 'rgb(r, g, b)', 'rgba(r, g, b, a)' or
    'hsl(h, s%, l%)'.

    With format='any', rgba is accepted only when allow_alpha is True.
    """
    opt = merge_options(ColorOptions, options, **kwargs)

    if not isinstance(color, str) or not color:
        return ValidationResult.fail("Color value is required")

    color_format = _member(ColorFormat, opt.format)
    if color_format is None:
        return ValidationResult.fail("Unsupported color format")

    if color_format is ColorFormat.ANY:
        matches = {fmt: pattern.fullmatch(color) for fmt, (pattern, _) in _COLOR_FORMATS.items()}
        if not (matches[ColorFormat.HEX] or matches[ColorFormat.RGB] or matches[ColorFormat.HSL]
                or (opt.allow_alpha and matches[ColorFormat.RGBA])):
            return ValidationResult.fail("Invalid color format")
        return ValidationResult.ok("Valid color")

    pattern, message = _COLOR_FORMATS[color_format]
    if not pattern.fullmatch(color):
        return ValidationResult.fail(message)

    return ValidationResult.ok("Valid color")


def is_ip_address(ip: str, options: IPAddressOptions | Mapping | None = None, **kwargs) -> ValidationResult:
    """
    Check an IPv4 or IPv6 address.

    IPv4 is dotted-quad with octets in 0-255. Private ranges are 10/8, 172.16/12 and
    192.168/16; reserved ranges are 0/8, 127/8 and everything from 224.0.0.0 up.
    IPv6 must be written in full, eight groups of one to four hex digits; '::'
    compression is not recognized.

    With version='any', IPv4 is tried first and IPv6 only when the IPv4 pattern fails.

    Examples:
        >>> is_ip_address("10.0.0.1").is_valid
        True
        >>> is_ip_address("10.0.0.1", allow_private=False).message
        'Private IP addresses are not allowed'
        >>> is_ip_address("2001:0db8:85a3:0000:0000:8a2e:0370:7334").message
        'Valid IPv6 address'
    """
    opt = merge_options(IPAddressOptions, options, **kwargs)

    if not isinstance(ip, str) or not ip:
        return ValidationResult.fail("IP address is required")

    version = _member(IPVersion, opt.version)

    if version in (IPVersion.V4, IPVersion.ANY):
        if _IPV4.fullmatch(ip):
            octets = [int(part) for part in ip.split(".")]
            if all(0 <= octet <= 255 for octet in octets):
                address = ipaddress.IPv4Address(bytes(octets))
                if not opt.allow_private and any(address in net for net in _IPV4_PRIVATE):
                    return ValidationResult.fail("Private IP addresses are not allowed")
                if not opt.allow_reserved and any(address in net for net in _IPV4_RESERVED):
                    return ValidationResult.fail("Reserved IP addresses are not allowed")
                return ValidationResult.ok("Valid IPv4 address")
        if version is IPVersion.V4:
            return ValidationResult.fail("Invalid IPv4 address")

    if version in (IPVersion.V6, IPVersion.ANY):
        if _IPV6.fullmatch(ip):
            return ValidationResult.ok("Valid IPv6 address")
        return ValidationResult.fail("Invalid IPv6 address")

    return ValidationResult.fail("Invalid IP address")


def is_ssn(ssn: str, options: SSNOptions | Mapping | None = None, **kwargs) -> ValidationResult:
    """
    Check a national identification number.

    US (Social Security Number): 9 digits; area 000, 666 and 900-999, group 00 and
    serial 0000 are rejected. CA (Social Insurance Number): 9 digits passing the Luhn
    checksum. With format='masked' the original string must be grouped with dashes,
    XXX-XX-XXXX (US) or XXX-XXX-XXX (CA).

    Examples:
        >>> is_ssn("123-45-6789").is_valid
        True
        >>> is_ssn("123456789").message
        'SSN must be in format XXX-XX-XXXX'
        >>> is_ssn("046 454 286", country="CA", format="unmasked").is_valid
        True
    """
    opt = merge_options(SSNOptions, options, **kwargs)

    if not isinstance(ssn, str) or not ssn:
        return ValidationResult.fail("SSN is required")

    digits = re.sub(r"\D", "", ssn, flags=re.ASCII)
    masked = _member(SSNFormat, opt.format) is SSNFormat.MASKED

    if opt.country == "US":
        if len(digits) != 9:
            return ValidationResult.fail("SSN must be 9 digits")

        area, group, serial = digits[:3], digits[3:5], digits[5:]
        if area == "000" or group == "00" or serial == "0000":
            return ValidationResult.fail("Invalid SSN format")
        if area == "666" or area[0] == "9":
            return ValidationResult.fail("Invalid SSN format")

        if masked and not _SSN_MASKED.fullmatch(ssn):
            return ValidationResult.fail("SSN must be in format XXX-XX-XXXX")

        return ValidationResult.ok("Valid SSN")

    if opt.country == "CA":
        if len(digits) != 9:
            return ValidationResult.fail("SIN must be 9 digits")

        if not luhn_valid(digits):
            return ValidationResult.fail("Invalid SIN checksum")

        if masked and not _SIN_MASKED.fullmatch(ssn):
            return ValidationResult.fail("SIN must be in format XXX-XXX-XXX")

        return ValidationResult.ok("Valid SIN")

    return ValidationResult.fail("Unsupported country code")


def is_time(time: str, options: TimeOptions | Mapping | None = None, **kwargs) -> ValidationResult:
    """
    Check a clock time and optional bounds.

    The accepted shape is fixed by format and allow_seconds: '24h' expects 'HH:MM:SS'
    ('HH:MM' without seconds), '12h' expects 'H:MM:SS AM' ('H:MM AM' without seconds).
    Bounds are 24-hour strings compared lexicographically after 12-hour input is
    normalized with to_24_hour().

    Examples:
        >>> is_time("14:30:00").is_valid
        True
        >>> is_time("2:30 PM", format="12h", allow_seconds=False, min_time="13:00").is_valid
        True
    """
    opt = merge_options(TimeOptions, options, **kwargs)

    if not isinstance(time, str) or not time:
        return ValidationResult.fail("Time is required")

    time_format = _member(TimeFormat, opt.format)
    if time_format is None:
        return ValidationResult.fail("Unsupported time format")

    pattern, hint = _TIME_FORMATS[(time_format, bool(opt.allow_seconds))]
    if not pattern.fullmatch(time):
        label = "24-hour" if time_format is TimeFormat.H24 else "12-hour"
        return ValidationResult.fail(f"Invalid {label} time format{hint}")

    if opt.min_time or opt.max_time:
        value = to_24_hour(time) if time_format is TimeFormat.H12 else time

        if opt.min_time and value < opt.min_time:
            return ValidationResult.fail(f"Time must be after {opt.min_time}")

        if opt.max_time and value > opt.max_time:
            return ValidationResult.fail(f"Time must be before {opt.max_time}")

    return ValidationResult.ok("Valid time")


def is_lat_lng(coords: Any, options: LatLngOptions | Mapping | None = None, **kwargs) -> ValidationResult:
    """
    Check a latitude/longitude pair.

    coords is a mapping or object with `lat` and `lng`, or a (lat, lng) pair. Both must
    be real numbers other than NaN; infinities fail the range rules. With
    format='decimal' each coordinate may have at most `precision` decimal places. With
    format='dms' the result details carry both coordinates rendered by to_dms().

    Examples:
        >>> is_lat_lng({"lat": 91, "lng": 0}).message
        'Latitude must be between -90 and 90 degrees'
        >>> is_lat_lng({"lat": 45.123456, "lng": -122.654321}, format="dms").details["lat"]
        '45°7\\'24.44"N'
    """
    opt = merge_options(LatLngOptions, options, **kwargs)

    if isinstance(coords, Sequence) and not isinstance(coords, str) and len(coords) == 2:
        lat, lng = coords
    else:
        lat, lng = _field(coords, "lat"), _field(coords, "lng")

    if not (_is_real(lat) and _is_real(lng)):
        return ValidationResult.fail("Invalid coordinates format")

    lat, lng = _to_number(lat), _to_number(lng)
    if math.isnan(lat) or math.isnan(lng):
        return ValidationResult.fail("Invalid coordinates format")

    if not -90 <= lat <= 90:
        return ValidationResult.fail("Latitude must be between -90 and 90 degrees")

    if not -180 <= lng <= 180:
        return ValidationResult.fail("Longitude must be between -180 and 180 degrees")

    coord_format = _member(CoordinateFormat, opt.format)
    if coord_format is None:
        return ValidationResult.fail("Unsupported coordinate format")

    if coord_format is CoordinateFormat.DECIMAL:
        if decimal_places(lat) > opt.precision or decimal_places(lng) > opt.precision:
            return ValidationResult.fail(f"Coordinates cannot have more than {opt.precision} decimal places")
        return ValidationResult.ok("Valid coordinates")

    return ValidationResult.ok("Valid coordinates", details={"lat": to_dms(lat, "lat"), "lng": to_dms(lng, "lng")})


def is_strong_password(password: str, options: StrongPasswordOptions | Mapping | None = None,
                       **kwargs) -> ValidationResult:
    """
    Score a password on a 0-100 scale and report every violated rule.

    Unlike the other checks, all rules are evaluated: the message joins every error with
    '. ' and the result always carries the strength (see strength.weighted_strength()).

    Examples:
        >>> result = is_strong_password("Abc123!@xyz")
        >>> result.is_valid, result.strength
        (True, 100)
        >>> is_strong_password("password", banned_passwords=["password"]).strength
        0
    """
    opt = merge_options(StrongPasswordOptions, options, **kwargs)

    if not isinstance(password, str) or not password:
        return ValidationResult.fail("Password is required", strength=0)

    tally = weighted_strength(password, opt)
    message = ". ".join(tally.errors) if tally.errors else "Password meets all requirements"
    return ValidationResult(tally.is_valid, message, strength=tally.clamped)


def is_number(value: str | float | int | Decimal, options: NumberOptions | Mapping | None = None,
              **kwargs) -> ValidationResult:
    """
    Check a number or numeric string.

    Strings have ',' thousands separators removed when allowed, are rejected when they
    contain 'e'/'E' and scientific notation is not allowed, then are read up to the end
    of their leading number ("1_000" is 1). Booleans are not numbers.

    Examples:
        >>> is_number("1,234.5", precision=1).is_valid
        True
        >>> is_number("1e3").message
        'Scientific notation is not allowed'
        >>> is_number(2.5, integer=True).message
        'Value must be an integer'
    """
    opt = merge_options(NumberOptions, options, **kwargs)

    if isinstance(value, str):
        clean_value = value.replace(",", "") if opt.allow_thousands_separator else value
        if not opt.allow_scientific_notation and re.search(r"[eE]", clean_value):
            return ValidationResult.fail("Scientific notation is not allowed")
        num = _to_number(clean_value)
    else:
        num = _to_number(value)

    if num is None or math.isnan(num):
        return ValidationResult.fail("Invalid number format")

    if opt.integer and not (math.isfinite(num) and num == int(num)):
        return ValidationResult.fail("Value must be an integer")

    if opt.positive and num <= 0:
        return ValidationResult.fail("Value must be positive")
    if opt.negative and num >= 0:
        return ValidationResult.fail("Value must be negative")

    if opt.min is not None and num < opt.min:
        return ValidationResult.fail(f"Value must be greater than or equal to {opt.min}")
    if opt.max is not None and num > opt.max:
        return ValidationResult.fail(f"Value must be less than or equal to {opt.max}")

    if opt.precision is not None and decimal_places(num) > opt.precision:
        return ValidationResult.fail(f"Value cannot have more than {opt.precision} decimal places")

    return ValidationResult.ok("Valid number")


def is_array(array: Any, options: ArrayOptions | Mapping | None = None, **kwargs) -> ValidationResult:
    """
    Check a list or tuple: nulls, size, uniqueness, items and ordering.

    Uniqueness compares values (hashable items through a set, unhashable ones by
    equality). item_validator is applied in index order and the first failure is
    reported with its index. A validator that raises is handled per options.on_error.

    Examples:
        >>> is_array([1, 2, 2], unique=True).message
        'Array must contain unique values'
        >>> is_array([3, 1], sort_order="asc").message
        'Array must be sorted in ascending order'
    """
    opt = merge_options(ArrayOptions, options, **kwargs)

    if not isinstance(array, (list, tuple)):
        return ValidationResult.fail("Value must be an array")

    if not opt.allow_null and any(item is None for item in array):
        return ValidationResult.fail("Array cannot contain null values")

    if not opt.allow_empty and not array:
        return ValidationResult.fail("Array cannot be empty")

    if len(array) < opt.min_length:
        return ValidationResult.fail(f"Array must contain at least {opt.min_length} items")

    if len(array) > opt.max_length:
        return ValidationResult.fail(f"Array cannot contain more than {opt.max_length} items")

    if opt.unique and _has_duplicates(array):
        return ValidationResult.fail("Array must contain unique values")

    if opt.item_validator is not None:
        for i, item in enumerate(array):
            result = _apply_validator(opt.item_validator, item, opt.on_error, f"item_validator at index {i}")
            if not result.is_valid:
                return ValidationResult.fail(f"Invalid item at index {i}: {result.message}")

    sort_order = _member(SortOrder, opt.sort_order)
    if sort_order is None:
        return ValidationResult.fail("Unsupported sort order")

    if sort_order is not SortOrder.NONE:
        for prev, curr in zip(array, array[1:]):
            try:
                if sort_order is SortOrder.ASC and prev > curr:
                    return ValidationResult.fail("Array must be sorted in ascending order")
                if sort_order is SortOrder.DESC and prev < curr:
                    return ValidationResult.fail("Array must be sorted in descending order")
            except TypeError:
                return ValidationResult.fail("Array items are not comparable")

    return ValidationResult.ok("Valid array")


def is_object(obj: Any, options: ObjectOptions | Mapping | None = None, **kwargs) -> ValidationResult:
    """
    Check a mapping's keys and, optionally, its values.

    Required fields are checked in listed order. Unless allow_extra, every key must be
    a required or optional field. field_validators run in their mapping order, only for
    keys present in obj.

    Examples:
        >>> is_object({"a": 1, "b": 2}, required_fields=["a"]).message
        'Unknown fields: b'
        >>> is_object({"a": 1, "b": 2}, required_fields=["a"], optional_fields=["b"]).is_valid
        True
    """
    opt = merge_options(ObjectOptions, options, **kwargs)

    if not isinstance(obj, Mapping):
        return ValidationResult.fail("Value must be an object")

    keys = list(obj.keys())

    if len(keys) < opt.min_properties:
        return ValidationResult.fail(f"Object must have at least {opt.min_properties} properties")
    if len(keys) > opt.max_properties:
        return ValidationResult.fail(f"Object cannot have more than {opt.max_properties} properties")

    for name in opt.required_fields:
        if name not in obj:
            return ValidationResult.fail(f"Missing required field: {name}")

    if not opt.allow_extra:
        allowed = {*opt.required_fields, *opt.optional_fields}
        extra = [str(key) for key in keys if key not in allowed]
        if extra:
            return ValidationResult.fail(f"Unknown fields: {', '.join(extra)}")

    for name, validator in opt.field_validators.items():
        if name not in obj:
            continue
        result = _apply_validator(validator, obj[name], opt.on_error, f"field validator for {name!r}")
        if not result.is_valid:
            return ValidationResult.fail(f"Invalid value for field {name}: {result.message}")

    return ValidationResult.ok("Valid object")


def is_date_in_range(value: Any, options: DateRangeOptions | Mapping | None = None, **kwargs) -> ValidationResult:
    """
    Check a date against now, fixed bounds, weekends and an age range.

    Strings are parsed with options.format (strptime) when given, as ISO 8601 otherwise.
    Age is the number of whole years between the date and now, one less when the
    date's month and day have not come yet this year. Weekdays and ages use local time.

    allow_holidays and timezone are accepted but not enforced, setting them emits a
    UserWarning.
    """
    opt = merge_options(DateRangeOptions, options, **kwargs)
    unenforced = [name for name, is_set in (("allow_holidays", not opt.allow_holidays),
                                            ("timezone", opt.timezone is not None)) if is_set]
    if unenforced:
        _warn_unenforced("is_date_in_range", *unenforced)

    dt = to_datetime(value, opt.format)
    if dt is None:
        return ValidationResult.fail("Invalid date format")

    now = resolve_now(opt.now)

    if not opt.allow_future and dt > now:
        return ValidationResult.fail("Future dates are not allowed")
    if not opt.allow_past and dt < now:
        return ValidationResult.fail("Past dates are not allowed")

    min_dt = to_datetime(opt.min_date) if opt.min_date else None
    if min_dt is not None and dt < min_dt:
        return ValidationResult.fail(f"Date must be after {min_dt.isoformat()}")

    max_dt = to_datetime(opt.max_date) if opt.max_date else None
    if max_dt is not None and dt > max_dt:
        return ValidationResult.fail(f"Date must be before {max_dt.isoformat()}")

    local = dt.astimezone()
    if not opt.allow_weekends and local.weekday() >= 5:
        return ValidationResult.fail("Weekends are not allowed")

    if opt.min_age is not None or opt.max_age is not None:
        today = now.astimezone()
        age = today.year - local.year
        if (today.month, today.day) < (local.month, local.day):
            age -= 1

        if opt.min_age is not None and age < opt.min_age:
            return ValidationResult.fail(f"Age must be at least {opt.min_age} years")
        if opt.max_age is not None and age > opt.max_age:
            return ValidationResult.fail(f"Age cannot be more than {opt.max_age} years")

    return ValidationResult.ok("Valid date")


def is_valid_file_type(file_name: str, options: FileTypeOptions | Mapping | None = None,
                       **kwargs) -> ValidationResult:
    """
    Check a file name: length, hidden files, whitespace and extension.

    The extension is the text after the last '.', lowercased; a name without a dot has
    no extension. MIME options are accepted but not enforced.

    Examples:
        >>> is_valid_file_type("Report.PDF", allowed_extensions=["pdf"]).is_valid
        True
        >>> is_valid_file_type(".env").message
        'Hidden files are not allowed'
    """
    opt = merge_options(FileTypeOptions, options, **kwargs)
    if opt.allowed_mime_types and opt.check_mime_type:
        _warn_unenforced("is_valid_file_type", "allowed_mime_types")

    if not isinstance(file_name, str) or not file_name:
        return ValidationResult.fail("Filename is required")

    if len(file_name) > opt.max_file_name_length:
        return ValidationResult.fail(f"Filename cannot be longer than {opt.max_file_name_length} characters")

    if not opt.allow_hidden and file_name.startswith("."):
        return ValidationResult.fail("Hidden files are not allowed")

    if not opt.allow_spaces and _WHITESPACE.search(file_name):
        return ValidationResult.fail("Spaces are not allowed in filename")

    if opt.allowed_extensions:
        _, dot, ext = file_name.rpartition(".")
        ext = ext.lower() if dot else ""
        if not ext or ext not in opt.allowed_extensions:
            return ValidationResult.fail(f"File extension must be one of: {', '.join(opt.allowed_extensions)}")

    return ValidationResult.ok("Valid file type")


# Registry -------------------------------------------------------------------------------------------------------------

VALIDATORS: dict[Check, Callable[..., ValidationResult]] = {
    Check.USERNAME: is_username,
    Check.EMAIL: is_email,
    Check.PASSWORD_MATCH: is_password_match,
    Check.PASSWORD: is_password,
    Check.PHONE: is_phone,
    Check.URL: is_url,
    Check.DATE: is_date,
    Check.CREDIT_CARD: is_credit_card,
    Check.POSTAL_CODE: is_postal_code,
    Check.FILE: is_file,
    Check.ADDRESS: is_address,
    Check.MONEY: is_money,
    Check.COLOR: is_color,
    Check.IP_ADDRESS: is_ip_address,
    Check.SSN: is_ssn,
    Check.TIME: is_time,
    Check.LAT_LNG: is_lat_lng,
    Check.STRONG_PASSWORD: is_strong_password,
    Check.NUMBER: is_number,
    Check.ARRAY: is_array,
    Check.OBJECT: is_object,
    Check.DATE_IN_RANGE: is_date_in_range,
    Check.FILE_TYPE: is_valid_file_type,
}


def validate(check: Check | str, *args, **kwargs) -> ValidationResult:
    """
    Run a registered check by name.

    Args:
        check: A Check member or its string value, e.g. "email".
        *args: Positional arguments of the check (the value, and the confirmation for
            "password_match").
        **kwargs: Options of the check.

    Raises:
        ValueError: If check is not a registered name.

    Examples:
        >>> validate("email", "user@example.com").is_valid
        True
        >>> validate(Check.USERNAME, "ab", min_length=2).message
        'Valid username'
    """
    name = _member(Check, check)
    if name is None:
        allowed = ", ".join(c.value for c in Check)
        raise ValueError(f"unknown check {fmt_value(check)}. Allowed: {allowed}")
    return VALIDATORS[name](*args, **kwargs)


# Private Methods ------------------------------------------------------------------------------------------------------

def _member(enum_cls: type[E], value: Any) -> E | None:
    """Return the enum member for value, or None for an unsupported key."""
    try:
        return enum_cls(value)
    except ValueError:
        return None


def _field(obj: Any, name: str) -> Any:
    """Read name from a mapping key or an attribute, None when absent."""
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def _is_real(x: Any) -> bool:
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def _to_number(value: Any) -> float | int | Decimal | None:
    """Convert value to a number, None when it is not numeric.

    Ints beyond the float range become signed infinities. Strings are read with
    _parse_leading_float().
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        try:
            float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf
        return value
    if isinstance(value, (float, Decimal)):
        return value
    if isinstance(value, str):
        return _parse_leading_float(value)
    return None


def _parse_leading_float(text: str) -> float | None:
    """
    Read the longest leading decimal literal of text, ignoring whatever follows.

    Leading whitespace is skipped; "Infinity" is the only non-numeric literal. Returns
    None when text does not start with a number.

    Examples:
        >>> _parse_leading_float("12abc")
        12.0
        >>> _parse_leading_float("1_000")
        1.0
        >>> _parse_leading_float("nan") is None
        True
    """
    m = _LEADING_FLOAT.match(text)
    if not m:
        return None
    return float(m.group(1))


def _has_duplicates(items: Sequence) -> bool:
    # Booleans never equal numbers here, 1 and True are distinct values
    keys = [(isinstance(item, bool), item) for item in items]
    try:
        return len(set(keys)) != len(keys)
    except TypeError:
        # Unhashable items
        seen = []
        for key in keys:
            if key in seen:
                return True
            seen.append(key)
        return False


def _apply_validator(validator: Callable[[Any], ValidationResult], value: Any, on_error: ErrorPolicy,
                     where: str) -> ValidationResult:
    """Run a caller-supplied validator, turning a raised exception into a failed result."""
    try:
        result = validator(value)
    except Exception as e:
        if on_error is ErrorPolicy.RAISE:
            raise
        if on_error is ErrorPolicy.WARN:
            warnings.warn(f"{where} raised {fmt_exception(e)}", RuntimeWarning, stacklevel=3)
        return ValidationResult.fail(fmt_exception(e))

    if not isinstance(result, ValidationResult):
        raise TypeError(f"{where} must return a ValidationResult, got {fmt_type(result)}")
    return result


def _warn_unenforced(check: str, *names: str) -> None:
    warnings.warn(
        f"{check}: option(s) {', '.join(names)} are accepted but not enforced",
        UserWarning,
        stacklevel=3,
    )
