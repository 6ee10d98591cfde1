"""Conversion of Roman numerals to integers."""

_SYMBOL_VALUES = {
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
}


def roman_to_int(s):
    """Return the integer value of the Roman numeral ``s``.

    A symbol is subtracted when the next symbol is larger and added
    otherwise. Unknown characters contribute nothing, and a symbol followed
    by an unknown character contributes nothing either.
    """
    total = 0
    followers = list(s[1:]) + [None]
    for current, following in zip(s, followers):
        value = _SYMBOL_VALUES.get(current)
        if value is None:
            continue
        if following is None:
            total += value
            continue
        next_value = _SYMBOL_VALUES.get(following)
        if next_value is None:
            continue
        total += value if next_value <= value else -value
    return total