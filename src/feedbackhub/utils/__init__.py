"""Utility modules for FeedbackHub."""

from .data_prep import export_to_json, prepare_export, to_json

__all__ = [
    "export_to_json",
    "prepare_export",
    "to_json",
]
