"""Data models for FeedbackHub."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Dict, Any


class AnalysisMode(str, Enum):
    """How an insight result was produced."""
    EMPTY = "empty"
    WORKERS_AI = "workers_ai"
    SIMULATED_FALLBACK = "simulated_fallback"


@dataclass(frozen=True)
class FeedbackItem:
    """A single feedback comment as seen by the analyzer."""
    source: str
    comment: str


@dataclass(frozen=True)
class FeedbackRecord:
    """A row of the feedback store."""
    id: int
    product: str
    source: str
    comment: str
    created_at: Optional[str] = None

    def to_item(self) -> FeedbackItem:
        return FeedbackItem(source=self.source, comment=self.comment)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "product": self.product,
            "source": self.source,
            "comment": self.comment,
            "created_at": self.created_at,
        }


@dataclass(frozen=True)
class PolarityResult:
    """Output of the heuristic polarity classifier."""
    positive_count: int
    negative_count: int
    positive_keywords: Tuple[str, ...]
    negative_keywords: Tuple[str, ...]
    positive_summary: Tuple[str, ...]
    negative_summary: Tuple[str, ...]


@dataclass(frozen=True)
class InsightResult:
    """Structured insights for one product.

    ``analysis_mode`` decides which optional fields are set: counts for
    ``empty`` and ``simulated_fallback``, ``fallback_reason`` only for
    ``simulated_fallback``.
    """
    analysis_mode: AnalysisMode
    positive_keywords: Tuple[str, ...] = ()
    negative_keywords: Tuple[str, ...] = ()
    positive_summary: Tuple[str, ...] = ()
    negative_summary: Tuple[str, ...] = ()
    fallback_reason: Optional[str] = None
    positive_count: Optional[int] = None
    negative_count: Optional[int] = None

    @classmethod
    def from_polarity(cls, polarity: PolarityResult, fallback_reason: str) -> "InsightResult":
        """Build a fallback result from a classifier result."""
        return cls(
            analysis_mode=AnalysisMode.SIMULATED_FALLBACK,
            fallback_reason=fallback_reason,
            positive_count=polarity.positive_count,
            negative_count=polarity.negative_count,
            positive_keywords=polarity.positive_keywords,
            negative_keywords=polarity.negative_keywords,
            positive_summary=polarity.positive_summary,
            negative_summary=polarity.negative_summary,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serializable form; unset optional fields are omitted."""
        data: Dict[str, Any] = {"analysis_mode": self.analysis_mode.value}
        if self.fallback_reason is not None:
            data["fallback_reason"] = self.fallback_reason
        if self.positive_count is not None:
            data["positive_count"] = self.positive_count
        if self.negative_count is not None:
            data["negative_count"] = self.negative_count
        data["positive_keywords"] = list(self.positive_keywords)
        data["negative_keywords"] = list(self.negative_keywords)
        data["positive_summary"] = list(self.positive_summary)
        data["negative_summary"] = list(self.negative_summary)
        return data
