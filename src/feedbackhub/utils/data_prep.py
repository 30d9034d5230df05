"""Data preparation for export."""

import datetime
import json
from typing import Any, Dict

from .. import __version__


def to_json(data: Any) -> str:
    """Pretty JSON used for stdout output."""
    return json.dumps(data, indent=2, ensure_ascii=False)


def prepare_export(payload: Dict[str, Any]) -> Dict[str, Any]:
    """Wrap an insight payload with export metadata."""
    return {
        **payload,
        "metadata": {
            "export_timestamp": None,  # Will be set by export_to_json
            "version": __version__,
        },
    }


def export_to_json(data: Dict[str, Any], filename: str) -> None:
    """Export data to JSON file."""
    data = prepare_export(data)
    data["metadata"]["export_timestamp"] = datetime.datetime.now().isoformat()

    with open(filename, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
