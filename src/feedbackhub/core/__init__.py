"""Core modules for FeedbackHub."""

from .models import *
from .config import settings
from .keywords import extract
from .polarity import classify
from .decoder import decode

__all__ = [
    "settings",
    "extract",
    "classify",
    "decode",
    "AnalysisMode",
    "FeedbackItem",
    "FeedbackRecord",
    "PolarityResult",
    "InsightResult",
]
