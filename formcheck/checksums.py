"""
Formcheck Checksums

Check-digit algorithms shared by card number and national identifier checks.
"""

# Local ----------------------------------------------------------------------------------------------------------------
from .tools import fmt_type, fmt_value


# Methods --------------------------------------------------------------------------------------------------------------

def luhn_sum(digits: str) -> int:
    """
    Compute the Luhn (mod 10) weighted digit sum.

    Digits are traversed from the rightmost one; every second digit, starting with the
    second from the right, is doubled and reduced by 9 when the result exceeds 9.

    Args:
        digits: Non-empty string of ASCII digits.

    Returns:
        The weighted sum; the number is Luhn-valid when it is divisible by 10.

    Raises:
        TypeError: If digits is not a string.
        ValueError: If digits is empty or contains anything but ASCII digits.

    Examples:
        >>> luhn_sum("79927398713")
        70
    """
    if not isinstance(digits, str):
        raise TypeError(f"digits must be a string, got {fmt_type(digits)}")
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise ValueError(f"digits must be a non-empty string of digits, got {fmt_value(digits)}")

    total = 0
    double = False
    for ch in reversed(digits):
        n = ord(ch) - 48
        if double:
            n *= 2
            if n > 9:
                n -= 9
        total += n
        double = not double
    return total


def luhn_valid(digits: str) -> bool:
    """Return True if digits pass the Luhn checksum.

    Examples:
        >>> luhn_valid("4532015112830366")
        True
        >>> luhn_valid("4532015112830367")
        False
    """
    return luhn_sum(digits) % 10 == 0
