"""Strict coercion of the model's free-text reply into ResultEntry objects.

The reply must be a bare JSON array of objects carrying ``expr`` and
``result``. Anything else (prose, code fences, a single object) is a format
violation; no partial recovery is attempted.
"""

from __future__ import annotations

import json
import logging

from inkcalc.models.responses import ResultEntry

logger = logging.getLogger(__name__)


class ResponseFormatError(ValueError):
    """The model reply is not a JSON array of result objects."""


def _reject_constant(name: str) -> None:
    raise ResponseFormatError(f"reply contains non-JSON constant {name}")


def parse_result_entries(text: str) -> list[ResultEntry]:
    try:
        parsed = json.loads(text, parse_constant=_reject_constant)
    except (TypeError, json.JSONDecodeError) as e:
        raise ResponseFormatError(f"reply is not valid JSON: {e}") from e

    if not isinstance(parsed, list):
        raise ResponseFormatError(f"reply is a JSON {type(parsed).__name__}, expected an array")

    entries: list[ResultEntry] = []
    for i, item in enumerate(parsed):
        if not isinstance(item, dict):
            raise ResponseFormatError(f"item {i} is not an object")
        if "expr" not in item or "result" not in item:
            raise ResponseFormatError(f"item {i} is missing expr or result")
        if isinstance(item["expr"], bool) or not isinstance(item["expr"], (str, int, float)):
            raise ResponseFormatError(f"item {i} has non-scalar expr")

        assign = item.get("assign")
        if assign is None:
            assign = False
        elif not isinstance(assign, bool):
            raise ResponseFormatError(f"item {i} has non-boolean assign {assign!r}")

        entries.append(ResultEntry(expr=item["expr"], result=item["result"], assign=assign))

    return entries
