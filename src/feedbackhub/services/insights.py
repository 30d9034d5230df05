"""Insight generation: AI-first with a deterministic heuristic fallback."""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, Iterable, List, Optional, Sequence

from ..core.config import settings
from ..core.constants import KeywordConstants, PromptConstants, SummaryConstants
from ..core.decoder import decode
from ..core.models import AnalysisMode, FeedbackItem, FeedbackRecord, InsightResult
from ..core.polarity import classify
from .feedback_store import ALL_PRODUCTS, FeedbackStore
from .inference import InferenceService, InferenceServiceFactory

logger = logging.getLogger(__name__)

INSIGHT_FIELDS = ("positive_summary", "negative_summary", "positive_keywords", "negative_keywords")

INSIGHT_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {name: {"type": "array", "items": {"type": "string"}} for name in INSIGHT_FIELDS},
    "required": list(INSIGHT_FIELDS),
}


def build_prompt(product: str, items: Sequence[FeedbackItem]) -> str:
    """Prompt listing every comment, numbered and tagged with its source."""
    comments = "\n".join(
        PromptConstants.COMMENT_LINE.format(index=i, source=item.source, comment=item.comment)
        for i, item in enumerate(items, 1)
    )
    return PromptConstants.USER_PROMPT.format(product=product, comments=comments)


def _string_list(value: Any) -> List[str]:
    """Coerce a payload field to a list of non-empty strings."""
    if value is None:
        return []
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, (list, tuple)):
        return []
    out = []
    for item in value:
        if isinstance(item, (str, int, float)) and not isinstance(item, bool):
            text = str(item).strip()
            if text:
                out.append(text)
    return out


def _keyword_list(value: Any) -> List[str]:
    return list(dict.fromkeys(_string_list(value)))[:KeywordConstants.MAX_KEYWORDS]


def empty_result() -> InsightResult:
    return InsightResult(
        analysis_mode=AnalysisMode.EMPTY,
        positive_count=0,
        negative_count=0,
        positive_summary=(SummaryConstants.NO_FEEDBACK,),
        negative_summary=(SummaryConstants.NO_FEEDBACK,),
    )


def ai_result(payload: Dict[str, Any]) -> InsightResult:
    """Normalize a decoded model payload; missing fields become empty lists."""
    return InsightResult(
        analysis_mode=AnalysisMode.WORKERS_AI,
        positive_summary=tuple(_string_list(payload.get("positive_summary"))),
        negative_summary=tuple(_string_list(payload.get("negative_summary"))),
        positive_keywords=tuple(_keyword_list(payload.get("positive_keywords"))),
        negative_keywords=tuple(_keyword_list(payload.get("negative_keywords"))),
    )


def fallback_result(items: Sequence[FeedbackItem], reason: str) -> InsightResult:
    return InsightResult.from_polarity(classify(item.comment for item in items), reason)


def _failure_reason(exc: Exception) -> str:
    return str(exc) or type(exc).__name__


class InsightOrchestrator:
    """Produces an InsightResult per product from its feedback items."""

    def __init__(self, inference: Optional[InferenceService] = None,
                 max_workers: Optional[int] = None):
        self.inference = inference or InferenceServiceFactory.create()
        self.max_workers = max(1, max_workers or settings.max_workers)

    def analyze(self, product: str, items: Sequence[FeedbackItem]) -> InsightResult:
        """Analyze one product. Never raises."""
        if not items:
            return empty_result()

        prompt = build_prompt(product, items)
        try:
            raw = self.inference.infer(
                prompt,
                INSIGHT_SCHEMA,
                max_output_tokens=settings.max_output_tokens,
                temperature=settings.temperature,
            )
        except Exception as e:
            logger.warning(f"Inference failed for '{product}': {e}. Using heuristic fallback.")
            return fallback_result(items, _failure_reason(e))

        payload = decode(raw)
        if payload is None:
            logger.warning(f"Inference output for '{product}' was not JSON. Using heuristic fallback.")
            return fallback_result(items, PromptConstants.NO_PAYLOAD_REASON)

        logger.info(f"AI insights generated for '{product}' from {len(items)} comments")
        return ai_result(payload)

    def analyze_all(self, records: Iterable[FeedbackRecord]) -> Dict[str, InsightResult]:
        """Analyze every product independently; one entry per distinct product."""
        grouped: Dict[str, List[FeedbackItem]] = {}
        for record in records:
            grouped.setdefault(record.product, []).append(record.to_item())

        if not grouped:
            return {}

        workers = min(self.max_workers, len(grouped))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = {
                product: executor.submit(self.analyze, product, items)
                for product, items in grouped.items()
            }
            return {product: future.result() for product, future in futures.items()}


class InsightService:
    """Insight query: a product name or "all" in, a serializable payload out."""

    def __init__(self, store: FeedbackStore, orchestrator: Optional[InsightOrchestrator] = None):
        self.store = store
        self.orchestrator = orchestrator or InsightOrchestrator()

    def query(self, product: str = ALL_PRODUCTS) -> Dict[str, Any]:
        product = (product or ALL_PRODUCTS).strip().lower() or ALL_PRODUCTS
        records = self.store.fetch_feedback(product)

        if product == ALL_PRODUCTS:
            insights = self.orchestrator.analyze_all(records)
            return {
                "scope": ALL_PRODUCTS,
                "insights_by_product": {name: result.to_dict() for name, result in insights.items()},
            }

        result = self.orchestrator.analyze(product, [r.to_item() for r in records])
        return {"scope": product, **result.to_dict()}
