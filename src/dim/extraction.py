"""Extract a single numeric score from a raw model response."""

from __future__ import annotations

import ast
import json
import math
import re
from collections.abc import Callable
from typing import Any

from dim.errors import ExtractionError

_CODE_FENCE = re.compile(r"^```[A-Za-z0-9_-]*\s*(.*?)\s*```$", re.DOTALL)


def _strip_code_fences(text: str) -> str:
    t = text.strip()
    match = _CODE_FENCE.match(t)
    if match:
        return match.group(1).strip()
    return t


def _reject_duplicate_keys(raw: str) -> Callable[[list[tuple[str, Any]]], dict[str, Any]]:
    def hook(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
        data = dict(pairs)
        if len(data) != len(pairs):
            raise ExtractionError("duplicate key in object", raw)
        return data

    return hook


def _parse_literal(text: str, raw: str) -> Any:
    try:
        node = ast.parse(text, mode="eval")
        data = ast.literal_eval(node)
    except (ValueError, SyntaxError, TypeError, MemoryError, RecursionError):
        raise ExtractionError("response is not a JSON object", raw) from None
    if isinstance(node.body, ast.Dict) and len(node.body.keys) != len(data):
        raise ExtractionError("duplicate key in object", raw)
    return data


def _parse_object(raw: str) -> Any:
    text = _strip_code_fences(raw)
    if not text:
        raise ExtractionError("empty response", raw)
    try:
        return json.loads(text, object_pairs_hook=_reject_duplicate_keys(raw))
    except ValueError:
        # JSONDecodeError, or an integer past the digit limit
        pass
    # Prompts commonly show {'key': 7} as the answer format
    return _parse_literal(text, raw)


def extract_score(raw: str) -> float:
    """Decode exactly one number from ``raw``.

    The response must be an object with a single key whose value is a
    finite number, e.g. ``{"offensiveness": 7.5}``. The key name is ignored.

    Raises:
        ExtractionError: For malformed text, zero or several fields (a
            repeated key counts as several), or a non-numeric or
            out-of-range value.
    """
    data = _parse_object(raw)
    if not isinstance(data, dict):
        raise ExtractionError(
            f"expected an object, got {type(data).__name__}", raw
        )
    if len(data) != 1:
        raise ExtractionError(
            f"expected exactly one field, got {len(data)}", raw
        )

    (value,) = data.values()
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ExtractionError(
            f"value is not a number: {value!r}", raw
        )
    try:
        score = float(value)
    except OverflowError:
        raise ExtractionError(f"value is out of range: {value!r}", raw) from None
    if not math.isfinite(score):
        raise ExtractionError(f"value is not finite: {value!r}", raw)
    return score
