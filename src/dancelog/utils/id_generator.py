"""Record id generation."""

import secrets
import time

_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"


def to_base36(value: int) -> str:
    """Render a non-negative integer in lowercase base 36."""
    if value < 0:
        raise ValueError("Cannot encode a negative number")
    if value == 0:
        return "0"
    digits = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(_ALPHABET[remainder])
    return "".join(reversed(digits))


def generate_record_id(random_length: int = 8) -> str:
    """Generate a compact record id.

    The id is a base-36 microsecond timestamp followed by ``random_length``
    random base-36 characters.
    """
    time_part = to_base36(time.time_ns() // 1000)
    random_part = "".join(secrets.choice(_ALPHABET) for _ in range(random_length))
    return time_part + random_part
