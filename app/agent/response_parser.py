# app/agent/response_parser.py

import json
import re
from typing import Any, Dict

from app.errors import AIResponseParseError

_FENCE_OPEN = re.compile(r"```json\s*")
_FENCE = re.compile(r"```\s*")
_JSON_OBJECT = re.compile(r"\{[\s\S]*\}")


def strip_code_fences(text: str) -> str:
    return _FENCE.sub("", _FENCE_OPEN.sub("", text)).strip()


def parse_ai_response(response_text: str) -> Dict[str, Any]:
    """
    Decode the JSON object returned by the model.

    Markdown code fences are removed first. If the remaining text is not
    valid JSON, the span from the first "{" to the last "}" is tried instead.
    """
    if not isinstance(response_text, str):
        raise AIResponseParseError("Failed to parse AI response: empty response")

    clean_text = strip_code_fences(response_text)

    try:
        data = json.loads(clean_text)
    except json.JSONDecodeError:
        match = _JSON_OBJECT.search(clean_text)
        if not match:
            raise AIResponseParseError(
                "Failed to parse AI response: No JSON object found in response"
            )
        try:
            data = json.loads(match.group(0))
        except json.JSONDecodeError as e:
            raise AIResponseParseError(f"Failed to parse AI response: {e}") from e

    if not isinstance(data, dict):
        raise AIResponseParseError(
            "Failed to parse AI response: expected a JSON object"
        )

    return data
