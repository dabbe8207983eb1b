"""Response payloads shared by the Library Desk MCP tools.

Tools answer with human-readable text content plus structured ``data`` for
follow-up calls. Failures set ``isError`` and report the error kind so a
client can tell a missing id from a business rule rejection.
"""

from typing import Any

from ..results import Failure


def text_response(text: str, data: dict[str, Any] | None = None) -> dict[str, Any]:
    response: dict[str, Any] = {"content": [{"type": "text", "text": text}]}
    if data is not None:
        response["data"] = data
    return response


def error_response(text: str, kind: str) -> dict[str, Any]:
    return {
        "isError": True,
        "content": [{"type": "text", "text": text}],
        "data": {"error": kind},
    }


def failure_response(failure: Failure) -> dict[str, Any]:
    return error_response(failure.message, failure.kind.value)
