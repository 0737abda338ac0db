"""
Small starter word lists, one per letter.
"""

from wordbank.core.errors import NotFound


WORD_LISTS = {
    "a": [
        "abandon", "ability", "able", "about", "above",
        "abroad", "absence", "absolute", "absorb", "abstract",
    ],
    "b": [
        "baby", "back", "background", "bad", "badly",
        "bag", "balance", "ball", "band", "bank",
    ],
}


def words_for_letter(letter: str) -> list[str]:
    words = WORD_LISTS.get((letter or "").lower())
    if words is None:
        raise NotFound(f"Invalid letter: {letter!r}")
    return list(words)
