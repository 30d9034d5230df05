"""Lenient decoding of model output into a JSON object."""

import json
import logging
import re
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

_JSON_FENCE = re.compile(r"```json\s*", re.IGNORECASE)


def _strip_code_fences(s: str) -> str:
    return _JSON_FENCE.sub("", s).replace("```", "").strip()


def _loads_object(s: str) -> Optional[Dict[str, Any]]:
    """Parse ``s`` and keep the result only if it is a JSON object."""
    try:
        data = json.loads(s)
    except (ValueError, RecursionError):
        return None
    return data if isinstance(data, dict) else None


def decode(raw: Any) -> Optional[Dict[str, Any]]:
    """Decode an inference response into a dict, or return None.

    Dicts pass straight through. Strings are tried as plain JSON, then with
    Markdown code fences removed, then as the span between the first ``{``
    and the last ``}``. Never raises.
    """
    if isinstance(raw, dict):
        return raw
    if not isinstance(raw, str) or not raw.strip():
        return None

    data = _loads_object(raw)
    if data is not None:
        return data

    unfenced = _strip_code_fences(raw)
    data = _loads_object(unfenced)
    if data is not None:
        return data

    start = unfenced.find("{")
    end = unfenced.rfind("}")
    if start >= 0 and end > start:
        data = _loads_object(unfenced[start:end + 1])
        if data is not None:
            return data

    logger.debug(f"Could not decode JSON from: {raw[:200]}...")
    return None
