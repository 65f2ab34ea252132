"""
Formcheck Validation Results

Every check in formcheck.validators returns a ValidationResult: a pass/fail flag, a
human-readable message, and optional strength score or details payload.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass, asdict
from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from .tools import fmt_type


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a single check.

    Attributes:
        is_valid: Whether the input satisfies the check under the given options.
        message: Fixed affirmative phrase on success, description of the first violated
            rule on failure (or all violated rules for aggregating checks).
        strength: Password strength score, set only by password checks.
        details: Derived data, e.g. DMS-rendered coordinates.

    Examples:
        >>> ValidationResult.ok("Valid email")
        ValidationResult(is_valid=True, message='Valid email', strength=None, details=None)
        >>> bool(ValidationResult.fail("Email is required"))
        False
    """

    is_valid: bool
    message: str
    strength: int | None = None
    details: dict[str, Any] | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.is_valid, bool):
            raise TypeError(f"ValidationResult.is_valid must be a bool, got {fmt_type(self.is_valid)}")
        if not isinstance(self.message, str):
            raise TypeError(f"ValidationResult.message must be a str, got {fmt_type(self.message)}")

    def __bool__(self) -> bool:
        return self.is_valid

    @classmethod
    def ok(cls, message: str, **extra: Any) -> "ValidationResult":
        return cls(True, message, **extra)

    @classmethod
    def fail(cls, message: str, **extra: Any) -> "ValidationResult":
        return cls(False, message, **extra)

    def to_dict(self, include_none: bool = False) -> dict[str, Any]:
        """Convert the result to a dictionary.

        Args:
            include_none: If True, optional fields with None values are included.
        """
        dict_ = asdict(self)
        if include_none:
            return dict_
        return {k: v for k, v in dict_.items() if v is not None}
