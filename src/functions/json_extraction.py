"""Recover a JSON array from a loosely formatted LLM response."""

from __future__ import annotations

import json
import logging
import re
from typing import Any

logger = logging.getLogger(__name__)

_FENCE_PATTERN = re.compile(r"^```json|```$")


def extract_json_array(text: str) -> list[Any]:
    """Parse the first-to-last bracketed JSON array found in text.

    Handles code fences and explanatory text around the array. Any failure
    is logged and yields an empty list.

    Args:
        text: Raw model response text.

    Returns:
        The parsed list, or [] if no valid array was found.
    """
    try:
        text = _FENCE_PATTERN.sub("", (text or "").strip())

        start = text.find("[")
        end = text.rfind("]") + 1
        if start == -1 or start >= end:
            raise ValueError("Valid JSON array not found.")

        parsed = json.loads(text[start:end])
        if not isinstance(parsed, list):
            raise ValueError("Extracted JSON is not an array.")
        return parsed
    except ValueError as e:
        logger.error("Failed to extract JSON: %s", e)
        return []
