"""
Response envelope helpers.

Every endpoint answers with the same envelope:

    {"success": true,  "data": ..., "message": ...}
    {"success": false, "error": {"message": ..., "code": ..., "errors": [...]}}

The error builders are also what the application's exception handlers use,
so raised APIExceptions and returned errors look identical on the wire.
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional


def success_response(
    data: Any = None,
    message: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Wrap a successful result.

    data is omitted from the envelope when None; False and empty
    collections are kept.
    """
    response: Dict[str, Any] = {"success": True}
    if data is not None:
        response["data"] = data
    if message:
        response["message"] = message
    return response


def list_response(
    items: List[Any],
    message: Optional[str] = None,
) -> Dict[str, Any]:
    """Wrap a list result together with its length."""
    response = success_response(message=message)
    response["data"] = items
    response["count"] = len(items)
    return response


def error_response(
    message: str,
    code: Optional[str] = None,
    details: Optional[Any] = None,
    errors: Optional[list] = None,
) -> Dict[str, Any]:
    """
    Build an error envelope.

    Args:
        message: Human-readable error message
        code: Machine-readable error code (e.g. "INVALID_CREDENTIALS")
        details: Extra structured context
        errors: Per-field problems, for validation failures
    """
    error: Dict[str, Any] = {"message": message}
    if code:
        error["code"] = code
    if details is not None:
        error["details"] = details
    if errors:
        error["errors"] = errors
    return {"success": False, "error": error}


def detail_error_response(detail: Any) -> Dict[str, Any]:
    """
    Build an error envelope from an HTTPException detail.

    APIException stores {"message", "code", "details"} as its detail; plain
    HTTPExceptions (e.g. FastAPI's own 404/405) carry a string.
    """
    if isinstance(detail, Mapping):
        return error_response(
            detail.get("message", "Error"),
            code=detail.get("code"),
            details=detail.get("details"),
        )
    return error_response(str(detail))


def validation_error_response(errors: Iterable[Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Build the envelope for a rejected request body or query.

    Only the field path and message of each pydantic error are kept. The
    submitted value is dropped so passwords never come back in a response.
    """
    fields = []
    for err in errors:
        # First loc element is the source ("body", "query", ...)
        location = err.get("loc", ())[1:]
        fields.append({
            "field": ".".join(str(part) for part in location),
            "message": err.get("msg", "Invalid value"),
        })
    return error_response("Invalid data", code="VALIDATION_ERROR", errors=fields)
