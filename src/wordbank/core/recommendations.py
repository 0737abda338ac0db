"""
Word suggestions based on what is already in the word bank.
"""

from collections import Counter

from wordbank.core.models import SavedWord, part_of_speech_label


def most_common_part_of_speech(words: list[SavedWord]) -> str | None:
    counts = Counter(w.part_of_speech for w in words if w.part_of_speech)
    if not counts:
        return None
    # first seen wins ties
    return counts.most_common(1)[0][0]


def recommend(words: list[SavedWord]) -> list[dict]:
    pos = most_common_part_of_speech(words)
    pos_reason = part_of_speech_label(pos) if pos else "word type"
    suggestions = [
        {"word": "ephemeral", "reason": "Based on your interests"},
        {"word": "serendipity", "reason": "Similar to words in your collection"},
        {"word": "paradigm", "reason": f"Common {pos_reason}"},
    ]
    saved = {w.word for w in words}
    return [s for s in suggestions if s["word"] not in saved]
