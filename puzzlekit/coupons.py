"""Validation and ordering of coupon codes by business line."""

import string

_BUSINESS_LINES = ("electronics", "grocery", "pharmacy", "restaurant")
_CODE_CHARACTERS = frozenset(string.ascii_letters + string.digits + "_")


def is_valid_code(code):
    """Return whether ``code`` is non-empty ASCII letters, digits and ``_``."""
    return bool(code) and all(c in _CODE_CHARACTERS for c in code)


def validate_coupons(code, business_line, is_active):
    """Return the valid, active coupon codes.

    Codes are grouped by business line in the order electronics, grocery,
    pharmacy, restaurant, and sorted within each group. Codes with any
    other business line are dropped.
    """
    groups = {line: [] for line in _BUSINESS_LINES}
    for coupon, line, active in zip(code, business_line, is_active, strict=True):
        if active and is_valid_code(coupon) and line in groups:
            groups[line].append(coupon)
    return [coupon for line in _BUSINESS_LINES for coupon in sorted(groups[line])]