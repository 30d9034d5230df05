"""Heuristic polarity classifier used when AI insights are unavailable."""

import logging
from typing import Iterable, List, Sequence, Tuple

from .constants import KeywordConstants, LexiconConstants, SummaryConstants
from .keywords import extract
from .models import PolarityResult

logger = logging.getLogger(__name__)


def lexicon_scores(comment: str) -> Tuple[int, int]:
    """Count positive and negative lexicon words contained in ``comment``."""
    text = comment.lower()
    pos = sum(1 for word in LexiconConstants.POSITIVE_WORDS if word in text)
    neg = sum(1 for word in LexiconConstants.NEGATIVE_WORDS if word in text)
    return pos, neg


def is_negative(comment: str) -> bool:
    """Negative only when negative words outnumber positive ones."""
    pos, neg = lexicon_scores(comment)
    return neg > pos


def _themes_sentence(keywords: Sequence[str]) -> str:
    themes = ", ".join(keywords[:KeywordConstants.MAX_SUMMARY_THEMES])
    return SummaryConstants.THEMES_PREFIX + (themes or SummaryConstants.NO_THEMES)


def classify(comments: Iterable[str]) -> PolarityResult:
    """Partition comments by polarity and summarize each bucket."""
    positive: List[str] = []
    negative: List[str] = []

    for comment in comments:
        if is_negative(comment):
            negative.append(comment)
        else:
            positive.append(comment)

    positive_keywords = extract(" ".join(positive))
    negative_keywords = extract(" ".join(negative))

    logger.debug(f"Heuristic split: {len(positive)} positive, {len(negative)} negative")

    return PolarityResult(
        positive_count=len(positive),
        negative_count=len(negative),
        positive_keywords=tuple(positive_keywords),
        negative_keywords=tuple(negative_keywords),
        positive_summary=(SummaryConstants.POSITIVE_INTRO, _themes_sentence(positive_keywords)),
        negative_summary=(SummaryConstants.NEGATIVE_INTRO, _themes_sentence(negative_keywords)),
    )
