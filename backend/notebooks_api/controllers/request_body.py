"""
Notebooks API — Request Body Helpers
=====================================

What:  Raw JSON body reading and the first-missing-field check shared by
       both controllers.
"""

import logging
from typing import Any, Dict, Optional, Sequence

from starlette.requests import Request

logger = logging.getLogger(__name__)


async def read_json_object(request: Request) -> Dict[str, Any]:
    """
    Return the request body as a dict.

    An empty, non-JSON or non-object body is treated as `{}` so that the
    field check reports the first required field as missing.
    """
    try:
        body = await request.json()
    except ValueError:
        logger.debug("Request body is not valid JSON: %s %s", request.method, request.url.path)
        return {}
    return body if isinstance(body, dict) else {}


def first_missing_field(body: Dict[str, Any], fields: Sequence[str]) -> Optional[str]:
    """
    Return the first of `fields` whose value is absent, null, empty or not a
    string, or None when every field is present.
    """
    for field in fields:
        value = body.get(field)
        if not isinstance(value, str) or not value:
            return field
    return None


def missing_value_message(field: str) -> Dict[str, str]:
    return {"msg": f"missing {field} value"}
