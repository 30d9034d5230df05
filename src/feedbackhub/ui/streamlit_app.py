"""Simple Streamlit UI for FeedbackHub."""

import html
import logging

import streamlit as st

from feedbackhub.core.config import settings
from feedbackhub.services.feedback_store import ALL_PRODUCTS, FeedbackStore
from feedbackhub.services.insights import InsightService

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def _pills(keywords):
    if not keywords:
        return "<span style='color:#6b7280'>No keywords</span>"
    return " ".join(
        f"<span style='display:inline-block;padding:4px 10px;border-radius:999px;"
        f"border:1px solid #e5e7eb;margin:6px 6px 0 0'>{html.escape(k)}</span>"
        for k in keywords
    )


def _render_polarity(column, title, keywords, summary, empty_text):
    with column:
        st.subheader(title)
        st.markdown(_pills(keywords), unsafe_allow_html=True)
        if summary:
            for line in summary:
                st.markdown(f"- {line}")
        else:
            st.caption(empty_text)


def render_insights(data):
    """Render one product's insight payload."""
    mode = data.get("analysis_mode", "unknown")
    st.caption(f"Done ({mode})")
    if data.get("fallback_reason"):
        st.info(f"AI insights unavailable, showing heuristic analysis: {data['fallback_reason']}")

    left, right = st.columns(2)
    _render_polarity(left, "Positive", data.get("positive_keywords"),
                     data.get("positive_summary"), "No positive summary")
    _render_polarity(right, "Negative", data.get("negative_keywords"),
                     data.get("negative_summary"), "No negative summary")


# Page configuration
st.set_page_config(
    page_title="FeedbackHub — Feedback Insights",
    page_icon="💬",
    layout="wide"
)

store = FeedbackStore()
store.create_schema()
service = InsightService(store)

st.title("💬 Feedback Insights Agent")
st.write("The feedback store provides the data. The configured model generates structured insights.")

products = store.list_products()
product = st.selectbox("Product", products + [ALL_PRODUCTS])
run_analysis = st.button("Generate insights")

if run_analysis and product:
    with st.spinner("Running..."):
        try:
            payload = service.query(product)
        except Exception as e:
            logger.error(f"Insight query failed: {e}")
            st.error("Error")
            payload = None

    if payload and payload["scope"] == ALL_PRODUCTS:
        for name, insights in payload["insights_by_product"].items():
            st.header(name)
            render_insights(insights)
    elif payload:
        render_insights(payload)

st.caption(f"Database: {settings.database_url}")
