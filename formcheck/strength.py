"""
Formcheck Password Strength Scoring

Two scoring schemes, each computing a full tally of satisfied and violated criteria
before a verdict is derived:

    - basic_strength(): 0-6, one point per satisfied check (used by is_password)
    - weighted_strength(): 0-100, weighted criteria with penalties (used by is_strong_password)
"""

# Standard library -----------------------------------------------------------------------------------------------------
import re

from dataclasses import dataclass, field

# Local ----------------------------------------------------------------------------------------------------------------
from .options import PasswordOptions, StrongPasswordOptions


# Constants ------------------------------------------------------------------------------------------------------------

SYMBOLS = '!@#$%^&*(),.?":{}|<>'

_UPPER = re.compile(r"[A-Z]")
_LOWER = re.compile(r"[a-z]")
_DIGIT = re.compile(r"[0-9]")
_SYMBOL = re.compile("[" + re.escape(SYMBOLS) + "]")
_SPACE = re.compile(r"\s")

CRITERION_POINTS = 20
REPEAT_PENALTY = 20
CUSTOM_REGEX_PENALTY = 10


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class BasicTally:
    """Outcome of the six basic password checks.

    Each flag is True when the criterion is satisfied or not required.
    """
    length: bool
    spaces: bool
    uppercase: bool
    lowercase: bool
    numbers: bool
    symbols: bool

    @property
    def strength(self) -> int:
        return sum((self.length, self.spaces, self.uppercase, self.lowercase, self.numbers, self.symbols))


@dataclass
class WeightedTally:
    """Running score and collected error messages of the weighted scheme."""
    strength: int = 0
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def clamped(self) -> int:
        return max(0, min(100, self.strength))


# Methods --------------------------------------------------------------------------------------------------------------

def basic_strength(password: str, opt: PasswordOptions) -> BasicTally:
    """Evaluate the six checks of is_password against password."""
    return BasicTally(
        length=opt.min_length <= len(password) <= opt.max_length,
        spaces=opt.allow_spaces or not _SPACE.search(password),
        uppercase=not opt.require_uppercase or bool(_UPPER.search(password)),
        lowercase=not opt.require_lowercase or bool(_LOWER.search(password)),
        numbers=not opt.require_numbers or bool(_DIGIT.search(password)),
        symbols=not opt.require_symbols or bool(_SYMBOL.search(password)),
    )


def weighted_strength(password: str, opt: StrongPasswordOptions) -> WeightedTally:
    """
    Score password on a 0-100 scale and collect every violated rule.

    Scoring:
        - +20 for length >= min_length, always scored
        - +20 for each required character class present (uppercase, lowercase,
          numbers, special characters); classes that are not required score nothing
        - banned password: strength reset to 0
        - max_repeating_chars + 1 identical consecutive characters: -20
        - custom_regex not matching: -10

    The tally keeps the raw score, use WeightedTally.clamped for the 0-100 value.
    """
    tally = WeightedTally()

    if len(password) < opt.min_length:
        tally.errors.append(f"Password must be at least {opt.min_length} characters long")
    else:
        tally.strength += CRITERION_POINTS

    classes = (
        (opt.require_uppercase, _UPPER, "Password must contain at least one uppercase letter"),
        (opt.require_lowercase, _LOWER, "Password must contain at least one lowercase letter"),
        (opt.require_numbers, _DIGIT, "Password must contain at least one number"),
        (opt.require_special_chars, _SYMBOL, "Password must contain at least one special character"),
    )
    for required, pattern, message in classes:
        if not required:
            continue
        if pattern.search(password):
            tally.strength += CRITERION_POINTS
        else:
            tally.errors.append(message)

    if password.lower() in opt.banned_passwords:
        tally.errors.append("This password is not allowed")
        tally.strength = 0

    repeating = re.compile(r"(.)\1{%d,}" % opt.max_repeating_chars, re.DOTALL)
    if repeating.search(password):
        tally.errors.append(f"Password cannot contain {opt.max_repeating_chars + 1} or more repeating characters")
        tally.strength -= REPEAT_PENALTY

    if opt.custom_regex is not None and not re.search(opt.custom_regex, password):
        tally.errors.append("Password does not meet custom pattern requirements")
        tally.strength -= CUSTOM_REGEX_PENALTY

    return tally
