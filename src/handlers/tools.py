"""API Gateway proxy handler — routes POST /tools/{tool} to the tool registry."""

import json
import logging
from typing import Any

from core.clients import get_store
from core.config import get_config
from core.errors import ErrorCode, RosterError
from core.result import Err
from core.tools import invoke

logger = logging.getLogger(__name__)

STATUS_BY_CODE: dict[ErrorCode, int] = {
    ErrorCode.AUTH_FAILED: 401,
    ErrorCode.INVALID_TOKEN: 401,
    ErrorCode.NOT_FOUND: 404,
    ErrorCode.VALIDATION_ERROR: 400,
    ErrorCode.INVALID_REQUEST: 400,
    ErrorCode.UNKNOWN_TOOL: 400,
    ErrorCode.GENERATION_FAILED: 502,
    ErrorCode.STORE_ERROR: 500,
    ErrorCode.INTERNAL_ERROR: 500,
}


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    tool_name = (event.get("pathParameters") or {}).get("tool", "")

    try:
        payload = json.loads(event.get("body") or "{}")
    except json.JSONDecodeError:
        return _error_response(RosterError("Request body is not valid JSON", code=ErrorCode.INVALID_REQUEST))
    if not isinstance(payload, dict):
        return _error_response(RosterError("Request body must be a JSON object", code=ErrorCode.INVALID_REQUEST))

    try:
        logging.getLogger().setLevel(get_config().log_level)
        result = invoke(tool_name, payload, store=get_store(), token=_bearer_token(event))
    except Exception:
        logger.exception("Tool %s failed unexpectedly", tool_name)
        return _error_response(RosterError(f"Tool {tool_name} failed"))

    if isinstance(result, Err):
        logger.info("Tool %s returned %s: %s", tool_name, result.error.code.value, result.error.message)
        return _error_response(result.error)
    return _response(200, result.value)


def _bearer_token(event: dict[str, Any]) -> str | None:
    headers = {k.lower(): v for k, v in (event.get("headers") or {}).items()}
    auth = headers.get("authorization", "")
    if not auth.lower().startswith("bearer "):
        return None
    return auth[len("bearer ") :].strip() or None


def _error_response(error: RosterError) -> dict[str, Any]:
    status = STATUS_BY_CODE.get(error.code, 500)
    # Store and internal failures only expose the generic message.
    message = error.user_message if status >= 500 and error.code != ErrorCode.GENERATION_FAILED else error.message
    return _response(status, {"error": {"code": error.code.value, "message": message}})


def _response(status: int, body: dict[str, Any]) -> dict[str, Any]:
    return {
        "statusCode": status,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body),
    }
