# backend/generate/parser.py

import json
import re

from errors import ResponseUnparseable

JSON_OBJECT_RE = re.compile(r"\{[\s\S]*\}")


def parse_ai_response(response):
    """Decode a model reply, tolerating prose around the JSON object.

    The whole reply is tried first, then the span from the first ``{`` to the
    last ``}``. The decoded value is not checked against any schema.
    """
    try:
        return json.loads(response)
    except (TypeError, ValueError):
        pass

    match = JSON_OBJECT_RE.search(response or "")
    if not match:
        raise ResponseUnparseable("AI response does not contain valid JSON")
    try:
        return json.loads(match.group(0))
    except ValueError as e:
        raise ResponseUnparseable("Failed to parse AI response", details=str(e))
