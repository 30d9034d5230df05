"""Basic usage examples for FeedbackHub."""

from pathlib import Path

from feedbackhub import FeedbackItem, FeedbackStore, InsightOrchestrator, InsightService
from feedbackhub.core import classify, extract

SAMPLE_FILE = Path(__file__).parent / "sample_feedback.json"


def example_heuristics():
    """Example: keyword extraction and the heuristic classifier."""
    print("🔍 Heuristic analysis of three comments")

    comments = [
        "Deploys are fast and the dashboard is easy to use",
        "The onboarding is confusing and the docs are outdated",
        "Pricing page works",
    ]
    print(f"🏷️ Keywords: {extract(' '.join(comments))}")

    result = classify(comments)
    print(f"👍 {result.positive_count} positive, 👎 {result.negative_count} negative")
    for line in result.positive_summary + result.negative_summary:
        print(f"  {line}")


def example_single_product():
    """Example: insights for one product."""
    print("\n🔍 Insights for a single product")

    orchestrator = InsightOrchestrator()
    items = [
        FeedbackItem(source="email", comment="This is fast and easy to use"),
        FeedbackItem(source="discord", comment="The onboarding is confusing and the docs are outdated"),
    ]
    result = orchestrator.analyze("workers", items)
    print(f"🎯 Mode: {result.analysis_mode.value}")
    if result.fallback_reason:
        print(f"⚠️ Fallback reason: {result.fallback_reason}")
    print(f"👍 {list(result.positive_keywords)}")
    print(f"👎 {list(result.negative_keywords)}")


def example_all_products():
    """Example: seed an in-memory store and query every product."""
    print("\n🔍 Insights for all products")

    store = FeedbackStore("sqlite://")
    store.load_json(str(SAMPLE_FILE))
    payload = InsightService(store).query("all")
    for product, insights in payload["insights_by_product"].items():
        print(f"  {product}: {insights['analysis_mode']} {insights['positive_keywords'][:3]}")


if __name__ == "__main__":
    print("🚀 FeedbackHub Examples")
    print("=" * 50)

    example_heuristics()
    example_single_product()
    example_all_products()
    print("\n✅ All examples completed successfully!")
