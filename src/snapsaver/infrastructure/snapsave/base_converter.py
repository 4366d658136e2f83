"""Digit-string conversion between bases 2..64."""

from __future__ import annotations

ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ+/"

MIN_BASE = 2
MAX_BASE = len(ALPHABET)


def _check_base(base: int) -> None:
    if not MIN_BASE <= base <= MAX_BASE:
        raise ValueError(f"base must be in [{MIN_BASE}, {MAX_BASE}], got {base}")


def convert_base(digits: str, from_base: int, to_base: int) -> str:
    """Convert *digits* written in *from_base* into a *to_base* digit string.

    Symbols outside the first *from_base* alphabet characters are tolerated
    and count as zero, but still take up a position.
    """
    _check_base(from_base)
    _check_base(to_base)

    from_digits = ALPHABET[:from_base]
    value = 0
    for position, char in enumerate(reversed(digits)):
        digit = from_digits.find(char)
        if digit != -1:
            value += digit * from_base**position

    if value == 0:
        return "0"

    out: list[str] = []
    while value > 0:
        value, rem = divmod(value, to_base)
        out.append(ALPHABET[rem])
    return "".join(reversed(out))
