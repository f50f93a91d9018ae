"""
Helper Functions

Contains request utilities used by the controllers.
"""

from typing import Any, Optional
from flask import request


def get_request_value(name: str, request_obj=None) -> Optional[Any]:
    """Read a parameter from the query string, falling back to a JSON body."""
    if request_obj is None:
        request_obj = request

    value = request_obj.args.get(name)
    if value is not None:
        return value

    body = request_obj.get_json(silent=True)
    if isinstance(body, dict):
        return body.get(name)
    return None
