"""Keyword extraction for feedback text."""

import re
from collections import Counter
from typing import List

from .constants import KeywordConstants

_NON_WORD = re.compile(r"[^a-z0-9_ ]")


def extract(text: str) -> List[str]:
    """Return the most frequent salient terms in ``text``.

    Tokens are lower-cased, stripped of punctuation and filtered against the
    stop-word list and the minimum length. Ties keep first-seen order.
    """
    if not text:
        return []

    cleaned = _NON_WORD.sub(" ", text.lower())
    words = [
        w for w in cleaned.split()
        if len(w) >= KeywordConstants.MIN_TOKEN_LENGTH and w not in KeywordConstants.STOP_WORDS
    ]

    # Counter keeps insertion order and most_common() sorts stably
    freq = Counter(words)
    return [w for w, _ in freq.most_common(KeywordConstants.MAX_KEYWORDS)]
