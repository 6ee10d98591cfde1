"""Conversion of sentences to Goat Latin."""

_VOWELS = frozenset("aeiouAEIOU")


def _goat_word(word, position):
    if not word:
        raise ValueError("sentence contains an empty word")
    if word[0] not in _VOWELS:
        word = word[1:] + word[0]
    return word + "ma" + "a" * position


def to_goat_latin(sentence):
    """Return ``sentence`` in Goat Latin.

    Words are separated by single spaces. A word starting with a consonant
    has its first letter moved to the end; every word then gets ``"ma"``
    and one ``"a"`` per its 1-based position.
    """
    return " ".join(
        _goat_word(word, position)
        for position, word in enumerate(sentence.split(" "), start=1)
    )