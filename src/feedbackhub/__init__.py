"""FeedbackHub - AI-powered product feedback insights."""

__version__ = "1.0.0"
__author__ = "FeedbackHub Team"

from .core.models import *
from .core.config import settings
from .services.inference import InferenceServiceFactory
from .services.feedback_store import FeedbackStore
from .services.insights import InsightOrchestrator, InsightService

__all__ = [
    "settings",
    "InferenceServiceFactory",
    "FeedbackStore",
    "InsightOrchestrator",
    "InsightService",
]
