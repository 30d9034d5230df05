"""Services for FeedbackHub."""

from .inference import InferenceServiceFactory, InferenceError
from .feedback_store import FeedbackStore
from .insights import InsightOrchestrator, InsightService

__all__ = [
    "InferenceServiceFactory",
    "InferenceError",
    "FeedbackStore",
    "InsightOrchestrator",
    "InsightService",
]
