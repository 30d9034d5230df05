"""Streamlit UI for FeedbackHub."""
