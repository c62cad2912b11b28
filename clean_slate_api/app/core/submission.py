"""
Reading survey submissions from request bodies.

The participant tool posts either JSON or classic
``application/x-www-form-urlencoded`` forms.  ``read_submission`` turns
both into a plain field mapping for the store:

* a missing or empty body, or any other content type, is an empty
  submission;
* a JSON object is used as is and a JSON array becomes
  ``{"0": ..., "1": ...}``;
* form keys ending in ``[]`` and keys that repeat collect their values
  into lists (``selectedTraits[]=a&selectedTraits[]=b``).  Other
  bracketed keys are stored verbatim.

A body that is not valid JSON, or JSON that is neither an object nor
an array, raises and ends up as a 500 response.
"""

import json
from typing import Any, Dict, Iterable, Tuple

from fastapi import Request

FORM_MEDIA_TYPE = "application/x-www-form-urlencoded"
JSON_MEDIA_TYPE = "application/json"
LIST_SUFFIX = "[]"


def _media_type(request: Request) -> str:
    return request.headers.get("content-type", "").split(";", 1)[0].strip().lower()


def json_fields(payload: Any) -> Dict[str, Any]:
    if isinstance(payload, dict):
        return payload
    if isinstance(payload, list):
        return {str(index): value for index, value in enumerate(payload)}
    raise ValueError(f"JSON submission must be an object or an array, got {type(payload).__name__}")


def form_fields(items: Iterable[Tuple[str, Any]]) -> Dict[str, Any]:
    fields: Dict[str, Any] = {}
    for key, value in items:
        if key.endswith(LIST_SUFFIX):
            fields.setdefault(key[: -len(LIST_SUFFIX)], []).append(value)
        elif key not in fields:
            fields[key] = value
        elif isinstance(fields[key], list):
            fields[key].append(value)
        else:
            fields[key] = [fields[key], value]
    return fields


async def read_submission(request: Request) -> Dict[str, Any]:
    """FastAPI dependency returning the submitted fields."""
    media_type = _media_type(request)
    if media_type == FORM_MEDIA_TYPE:
        form = await request.form()
        return form_fields(form.multi_items())
    if media_type == JSON_MEDIA_TYPE or media_type.endswith("+json"):
        body = await request.body()
        if not body.strip():
            return {}
        return json_fields(json.loads(body))
    return {}
