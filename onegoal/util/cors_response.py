"""CORS handling for callable and HTTP functions."""

from typing import Dict, Iterable, Optional, Tuple, Any

from flask import Response, jsonify
from firebase_functions import https_fn

ALLOWED_HEADERS = "Content-Type, Authorization, User-Id"


def _cors_headers(methods: Iterable[str]) -> Dict[str, str]:
    return {
        "Access-Control-Allow-Origin": "*",
        "Access-Control-Allow-Methods": ", ".join(methods),
        "Access-Control-Allow-Headers": ALLOWED_HEADERS,
        "Access-Control-Max-Age": "3600",
    }


def cors_response_on_call(raw_request) -> Optional[Tuple[str, int, Dict[str, str]]]:
    """Preflight answer for callable functions, None for any other method."""
    if raw_request is not None and raw_request.method == "OPTIONS":
        return ("", 204, _cors_headers(["POST", "OPTIONS"]))
    return None


def preflight_response(req: https_fn.Request, allowed_methods: Iterable[str]) -> Optional[Response]:
    """Preflight answer for HTTP functions, None for any other method."""
    if req.method != "OPTIONS":
        return None
    response = Response("", status=204)
    response.headers.update(_cors_headers(allowed_methods))
    return response


def create_cors_response(data: Dict[str, Any], status: int = 200) -> Response:
    """JSON response with CORS headers."""
    response = jsonify(data)
    response.status_code = status
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Headers"] = ALLOWED_HEADERS
    return response
