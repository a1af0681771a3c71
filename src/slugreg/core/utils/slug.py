"""Deterministic hash-based slug generation for non-Latin display names"""

import re


ASCII_RUN_RE = re.compile(r'[A-Za-z0-9]+')
BASE36_DIGITS = '0123456789abcdefghijklmnopqrstuvwxyz'
HASH_PREFIX_LEN = 6
FALLBACK_PREFIX = 'slug'


def _utf16_units(text: str) -> list[int]:
    """Return the UTF-16 code units of text (surrogate pairs for astral chars)."""
    data = text.encode('utf-16-le', 'surrogatepass')
    return [int.from_bytes(data[i:i + 2], 'little') for i in range(0, len(data), 2)]


def string_hash(text: str) -> int:
    """Polynomial rolling hash (h * 31 + c) with signed 32-bit wraparound, seeded at 0."""
    h = 0
    for unit in _utf16_units(text):
        h = (h * 31 + unit) & 0xFFFFFFFF
    return h - 0x100000000 if h & 0x80000000 else h


def to_base36(value: int) -> str:
    """Render a non-negative integer in lowercase base-36."""
    if value < 0:
        raise ValueError(f"to_base36 expects a non-negative integer, got {value}")
    if value == 0:
        return '0'
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(BASE36_DIGITS[rem])
    return ''.join(reversed(digits))


def ascii_parts(text: str) -> list[str]:
    """Return maximal runs of ASCII letters/digits in text, in order."""
    return ASCII_RUN_RE.findall(text)


def generate_slug(name: str) -> str:
    """Return a stable URL-safe slug for name.

    Embedded ASCII words and numbers are reused ('Zara 2' -> 'zara-2-<hash6>');
    names without any fall back to 'slug-<base36 hash>'.
    """
    hashed = to_base36(abs(string_hash(name)))
    parts = ascii_parts(name)
    if parts:
        return f"{'-'.join(parts).lower()}-{hashed[:HASH_PREFIX_LEN]}"
    return f"{FALLBACK_PREFIX}-{hashed}"
