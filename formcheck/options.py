"""
Formcheck Check Options

One dataclass per check, every field carrying its documented default. Checks build their
effective options with merge_options(), so a partially supplied configuration only
overrides the fields it sets.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import re

from collections.abc import Mapping
from dataclasses import dataclass, field, fields, is_dataclass, replace as dataclasses_replace
from datetime import date, datetime
from enum import Enum, unique
from typing import Any, Callable, Literal, TypeVar

# Local ----------------------------------------------------------------------------------------------------------------
from .results import ValidationResult
from .tools import fmt_type, fmt_value


# Constants ------------------------------------------------------------------------------------------------------------

MAX_SAFE_INTEGER = 2 ** 53 - 1

MiB = 1024 * 1024

T = TypeVar("T")

DateLike = date | datetime | str


# Enums ----------------------------------------------------------------------------------------------------------------

@unique
class ErrorPolicy(str, Enum):
    """
    What to do when a caller-supplied item or field validator raises:
        - "raise": propagate the exception
        - "warn": emit a RuntimeWarning and report a failed check
        - "ignore": report a failed check
    """
    RAISE = "raise"
    WARN = "warn"
    IGNORE = "ignore"


@unique
class ColorFormat(str, Enum):
    ANY = "any"
    HEX = "hex"
    RGB = "rgb"
    RGBA = "rgba"
    HSL = "hsl"


@unique
class TimeFormat(str, Enum):
    H12 = "12h"
    H24 = "24h"


@unique
class IPVersion(str, Enum):
    ANY = "any"
    V4 = "v4"
    V6 = "v6"


@unique
class SSNFormat(str, Enum):
    MASKED = "masked"
    UNMASKED = "unmasked"


@unique
class CoordinateFormat(str, Enum):
    DECIMAL = "decimal"
    DMS = "dms"


@unique
class SortOrder(str, Enum):
    NONE = "none"
    ASC = "asc"
    DESC = "desc"


# Options --------------------------------------------------------------------------------------------------------------

@dataclass
class UsernameOptions:
    min_length: int = 3
    max_length: int = 30
    allow_special_chars: bool = False
    allow_numbers: bool = True

    def __post_init__(self) -> None:
        _check_lengths(self, "min_length", "max_length")
        _check_range(self, "min_length", "max_length")


@dataclass
class EmailOptions:
    """
    Attributes:
        allow_subdomains: If False, reject addresses with more than one '.' in total.
        allow_international: Select the permissive grammar (quoted local parts,
            bracketed IPv4 domains) instead of the ASCII dot-atom grammar.
        max_length: Maximum address length, RFC 5321 limit by default.
    """
    allow_subdomains: bool = True
    allow_international: bool = True
    max_length: int = 254

    def __post_init__(self) -> None:
        _check_lengths(self, "max_length")


@dataclass
class PasswordOptions:
    min_length: int = 8
    max_length: int = 128
    require_uppercase: bool = True
    require_lowercase: bool = True
    require_numbers: bool = True
    require_symbols: bool = True
    allow_spaces: bool = False
    min_strength: int = 3

    def __post_init__(self) -> None:
        _check_lengths(self, "min_length", "max_length", "min_strength")
        _check_range(self, "min_length", "max_length")


@dataclass
class PhoneOptions:
    """
    Attributes:
        country: "US", "UK", "IN" or "INTERNATIONAL". Unknown codes use the international pattern.
        allow_spaces: Accepted but not enforced, whitespace is always stripped before matching.
        require_country_code: Require a leading '+' in the original input.
    """
    country: Literal["US", "UK", "IN", "INTERNATIONAL"] | str = "INTERNATIONAL"
    allow_spaces: bool = True
    require_country_code: bool = False


@dataclass
class URLOptions:
    require_protocol: bool = True
    allowed_protocols: list[str] = field(default_factory=lambda: ["http:", "https:"])
    allow_query_params: bool = True
    allow_fragments: bool = True


@dataclass
class DateOptions:
    """
    Attributes:
        format: strptime pattern for string input. ISO 8601 is parsed when None.
        min_date: Earliest accepted date, inclusive.
        max_date: Latest accepted date, inclusive.
        allow_future: Accept dates after now.
        allow_past: Accept dates before now.
        now: Reference instant for future/past checks. Current time when None.
    """
    format: str | None = None
    min_date: DateLike | None = None
    max_date: DateLike | None = None
    allow_future: bool = True
    allow_past: bool = True
    now: datetime | None = None


@dataclass
class PostalCodeOptions:
    country: Literal["US", "UK", "CA", "IN"] | str = "US"


@dataclass
class FileOptions:
    """
    Attributes:
        max_size: Maximum size in bytes (5 MiB by default).
        allowed_types: Accepted MIME types as declared by the file. Empty accepts any.
        min_width: Accepted but not enforced.
        min_height: Accepted but not enforced.
        max_width: Accepted but not enforced.
        max_height: Accepted but not enforced.
        aspect_ratio: Accepted but not enforced.
    """
    max_size: int = 5 * MiB
    allowed_types: list[str] = field(default_factory=list)
    min_width: int | None = None
    min_height: int | None = None
    max_width: int | None = None
    max_height: int | None = None
    aspect_ratio: float | None = None

    def __post_init__(self) -> None:
        _check_lengths(self, "max_size")


@dataclass
class AddressOptions:
    require_street: bool = True
    require_city: bool = True
    require_state: bool = True
    require_zip: bool = True
    require_country: bool = True
    allow_po_box: bool = True


@dataclass
class MoneyOptions:
    currency: str = "USD"  # Not enforced
    min_amount: float = 0
    max_amount: float = MAX_SAFE_INTEGER
    allow_negative: bool = False
    decimals: int = 2

    def __post_init__(self) -> None:
        _check_lengths(self, "decimals")


@dataclass
class ColorOptions:
    format: ColorFormat | str = ColorFormat.ANY
    allow_alpha: bool = True


@dataclass
class IPAddressOptions:
    version: IPVersion | str = IPVersion.ANY
    allow_private: bool = True
    allow_reserved: bool = False


@dataclass
class SSNOptions:
    country: Literal["US", "CA"] | str = "US"
    format: SSNFormat | str = SSNFormat.MASKED


@dataclass
class TimeOptions:
    """
    Attributes:
        format: "24h" (HH:MM) or "12h" (H:MM AM/PM).
        allow_seconds: Expect a seconds field (HH:MM:SS). Times without seconds are
            rejected when True, times with seconds are rejected when False.
        min_time: Earliest accepted time as a 24-hour "HH:MM[:SS]" string, inclusive.
        max_time: Latest accepted time as a 24-hour "HH:MM[:SS]" string, inclusive.
    """
    format: TimeFormat | str = TimeFormat.H24
    allow_seconds: bool = True
    min_time: str | None = None
    max_time: str | None = None


@dataclass
class LatLngOptions:
    precision: int = 6
    format: CoordinateFormat | str = CoordinateFormat.DECIMAL

    def __post_init__(self) -> None:
        _check_lengths(self, "precision")


@dataclass
class StrongPasswordOptions:
    min_length: int = 8
    require_uppercase: bool = True
    require_lowercase: bool = True
    require_numbers: bool = True
    require_special_chars: bool = True
    banned_passwords: list[str] = field(default_factory=list)
    max_repeating_chars: int = 3
    custom_regex: re.Pattern | str | None = None

    def __post_init__(self) -> None:
        _check_lengths(self, "min_length", "max_repeating_chars")
        if self.custom_regex is not None and not isinstance(self.custom_regex, (str, re.Pattern)):
            raise TypeError(f"custom_regex must be a str or compiled pattern, got {fmt_type(self.custom_regex)}")


@dataclass
class NumberOptions:
    min: float | None = None
    max: float | None = None
    integer: bool = False
    positive: bool = False
    negative: bool = False
    precision: int | None = None
    allow_thousands_separator: bool = True
    allow_scientific_notation: bool = False


@dataclass
class ArrayOptions:
    """
    Attributes:
        min_length: Minimum number of items.
        max_length: Maximum number of items, unbounded by default.
        unique: Reject duplicate values.
        item_validator: Callable applied to each item, returning a ValidationResult.
            Expected to be pure, faults are handled according to on_error.
        allow_null: Accept None items.
        allow_empty: Accept an empty sequence.
        sort_order: "none", "asc" or "desc".
        on_error: ErrorPolicy for item_validator faults.
    """
    min_length: int = 0
    max_length: float = float("inf")
    unique: bool = False
    item_validator: Callable[[Any], ValidationResult] | None = None
    allow_null: bool = False
    allow_empty: bool = True
    sort_order: SortOrder | str = SortOrder.NONE
    on_error: ErrorPolicy | str = ErrorPolicy.WARN

    def __post_init__(self) -> None:
        _check_lengths(self, "min_length", "max_length")
        _check_range(self, "min_length", "max_length")
        _check_callable(self, "item_validator")
        self.on_error = _coerce_policy(self.on_error)


@dataclass
class ObjectOptions:
    """
    Attributes:
        required_fields: Keys that must be present, checked in listed order.
        optional_fields: Keys that may be present.
        allow_extra: Accept keys outside required_fields and optional_fields.
        field_validators: Mapping of key to a callable returning a ValidationResult.
            Applied in the mapping's order, only for keys present in the object.
        min_properties: Minimum number of keys.
        max_properties: Maximum number of keys, unbounded by default.
        on_error: ErrorPolicy for field validator faults.
    """
    required_fields: list[str] = field(default_factory=list)
    optional_fields: list[str] = field(default_factory=list)
    allow_extra: bool = False
    field_validators: dict[str, Callable[[Any], ValidationResult]] = field(default_factory=dict)
    min_properties: int = 0
    max_properties: float = float("inf")
    on_error: ErrorPolicy | str = ErrorPolicy.WARN

    def __post_init__(self) -> None:
        _check_lengths(self, "min_properties", "max_properties")
        _check_range(self, "min_properties", "max_properties")
        if not isinstance(self.field_validators, Mapping):
            raise TypeError(f"field_validators must be a mapping, got {fmt_type(self.field_validators)}")
        for name, validator in self.field_validators.items():
            if not callable(validator):
                raise TypeError(f"field validator for {name!r} must be callable, got {fmt_type(validator)}")
        self.on_error = _coerce_policy(self.on_error)


@dataclass
class DateRangeOptions:
    """
    Attributes:
        min_date: Earliest accepted date, inclusive.
        max_date: Latest accepted date, inclusive.
        allow_weekends: Accept Saturdays and Sundays.
        allow_holidays: Accepted but not enforced, no holiday calendar is defined.
        format: strptime pattern for string input. ISO 8601 is parsed when None.
        timezone: Accepted but not enforced.
        allow_future: Accept dates after now.
        allow_past: Accept dates before now.
        min_age: Minimum age in whole years between the date and now.
        max_age: Maximum age in whole years between the date and now.
        now: Reference instant. Current time when None.
    """
    min_date: DateLike | None = None
    max_date: DateLike | None = None
    allow_weekends: bool = True
    allow_holidays: bool = True
    format: str | None = None
    timezone: str | None = None
    allow_future: bool = True
    allow_past: bool = True
    min_age: int | None = None
    max_age: int | None = None
    now: datetime | None = None


@dataclass
class FileTypeOptions:
    allowed_extensions: list[str] = field(default_factory=list)
    allowed_mime_types: list[str] = field(default_factory=list)  # Not enforced
    max_file_name_length: int = 255
    allow_spaces: bool = True
    check_mime_type: bool = True  # Not enforced
    allow_hidden: bool = False

    def __post_init__(self) -> None:
        _check_lengths(self, "max_file_name_length")


# Methods --------------------------------------------------------------------------------------------------------------

def merge_options(cls: type[T], options: T | Mapping[str, Any] | None = None, **overrides: Any) -> T:
    """
    Build effective options of type cls.

    Starts from the fully defaulted cls and applies the supplied configuration on top,
    leaving omitted fields at their defaults.

    Args:
        cls: Options dataclass.
        options: None, an instance of cls, or a mapping of field names to values.
        **overrides: Field values applied last.

    Returns:
        A new cls instance; the supplied options object is never mutated.

    Raises:
        TypeError: If options is neither None, a cls instance nor a mapping, or if a
            field name is not recognized by cls.

    Examples:
        >>> merge_options(UsernameOptions, {"min_length": 5})
        UsernameOptions(min_length=5, max_length=30, allow_special_chars=False, allow_numbers=True)
        >>> merge_options(UsernameOptions, UsernameOptions(max_length=10), min_length=2).min_length
        2
    """
    if not (isinstance(cls, type) and is_dataclass(cls)):
        raise TypeError(f"cls must be an options dataclass, got {fmt_value(cls)}")

    _check_names(cls, overrides)

    if options is None:
        return cls(**overrides)
    if isinstance(options, cls):
        return dataclasses_replace(options, **overrides)
    if isinstance(options, Mapping):
        _check_names(cls, options)
        return cls(**{**options, **overrides})

    raise TypeError(f"options must be {cls.__name__}, a mapping or None, got {fmt_type(options)}")


# Private Methods ------------------------------------------------------------------------------------------------------

def _check_names(cls: type, names: Mapping[str, Any]) -> None:
    known = {f.name for f in fields(cls)}
    unknown = [name for name in names if name not in known]
    if unknown:
        raise TypeError(
            f"{cls.__name__} got unknown option(s): {', '.join(map(str, unknown))}. "
            f"Allowed: {', '.join(sorted(known))}"
        )


def _check_lengths(obj: Any, *names: str) -> None:
    """Validate that the named fields are non-negative numbers."""
    cls_name = obj.__class__.__name__
    for name in names:
        val = getattr(obj, name)
        if isinstance(val, bool) or not isinstance(val, (int, float)):
            raise TypeError(f"{cls_name}.{name} must be a number, got {fmt_type(val)}")
        if val < 0:
            raise ValueError(f"{cls_name}.{name} must be >=0, but got {fmt_value(val)}")


def _check_range(obj: Any, lo: str, hi: str) -> None:
    lo_val, hi_val = getattr(obj, lo), getattr(obj, hi)
    if lo_val > hi_val:
        raise ValueError(
            f"{obj.__class__.__name__}.{lo} must not exceed {hi}, but got {fmt_value(lo_val)} > {fmt_value(hi_val)}"
        )


def _check_callable(obj: Any, name: str) -> None:
    val = getattr(obj, name)
    if val is not None and not callable(val):
        raise TypeError(f"{obj.__class__.__name__}.{name} must be callable, got {fmt_type(val)}")


def _coerce_policy(value: Any) -> ErrorPolicy:
    try:
        return ErrorPolicy(value)
    except ValueError:
        allowed = ", ".join(p.value for p in ErrorPolicy)
        raise ValueError(f"on_error must be one of: {allowed}, got {fmt_value(value)}") from None
