"""Password rules for the six-digit container password."""

from collections import Counter


def is_valid_password(password: int) -> bool:
    """Six digits, never decreasing, with some digit occurring exactly twice."""
    if not 100000 <= password <= 999999:
        return False
    digits = str(password)
    if any(left > right for left, right in zip(digits, digits[1:])):
        return False
    return 2 in Counter(digits).values()