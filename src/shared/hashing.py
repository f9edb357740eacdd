"""Process-independent string hashing.

Python's built-in `hash()` for strings is salted per interpreter, so the
simulated stations use this polynomial hash instead; the same identifier
always lands in the same bucket, across processes and restarts.
"""

_MODULUS = 2**32


def stable_hash(text: str) -> int:
    """Return an unsigned 32-bit polynomial (base 31) hash of `text`."""
    value = 0
    for char in text:
        value = (value * 31 + ord(char)) % _MODULUS
    return value
