from typing import Any, Dict, Optional, Tuple, Type
from flask import request, jsonify
from marshmallow import Schema, ValidationError

def ok(data: Any = None, message: str = "", status: int = 200):
    return jsonify({"success": True, "data": data, "message": message}), status


def error(code: str, message: str, status: int = 400, **extra):
    body: Dict[str, Any] = {"success": False, "error": {"code": code, "message": message}}
    if extra:
        body["error"].update(extra)
    return jsonify(body), status


def validation_error(details: Any):
    return error("VALIDATION_ERROR", "Invalid input data", 400, details=details)


def json_body() -> Dict[str, Any]:
    # Try parsing as JSON first (force=True allows missing Content-Type header)
    data = request.get_json(force=True, silent=True)
    if isinstance(data, dict):
        return data
    # Fallback to form data (converted to dict) if JSON parsing fails
    return request.form.to_dict() if request.form else {}


def query_args() -> Dict[str, Any]:
    return request.args.to_dict()


def validate_schema(schema_cls: Type[Schema], data: Dict[str, Any], partial: bool = False) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
    """Load ``data`` through ``schema_cls``; returns ``(data, None)`` or ``(None, errors)``."""
    try:
        return schema_cls().load(data, partial=partial), None
    except ValidationError as e:
        return None, e.messages
