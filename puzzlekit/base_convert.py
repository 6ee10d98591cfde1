"""Hexadecimal and base-36 renderings of squares and cubes."""

_DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def _check(n):
    if n < 0:
        raise ValueError(f"negative numbers are not supported: {n}")


def _render(n, base):
    digits = []
    while True:
        n, remainder = divmod(n, base)
        digits.append(_DIGITS[remainder])
        if n == 0:
            break
    return "".join(reversed(digits))


def to_hex(n):
    """Return ``n`` in upper-case hexadecimal; zero is ``"0"``."""
    _check(n)
    return _render(n, 16)


def to_base36(n):
    """Return ``n`` in upper-case base 36 without leading zeros.

    Zero has every digit stripped and so yields ``""``.
    """
    _check(n)
    return _render(n, 36).lstrip("0")


def concat_hex36(n):
    """Return the hexadecimal of ``n**2`` followed by the base 36 of ``n**3``."""
    _check(n)
    return to_hex(n * n) + to_base36(n * n * n)