"""
JSON envelopes shared by every endpoint.

Success: {success, message, data, request_id, timestamp}
Error:   {success: false, message, error: {code, details}, request_id, timestamp}
"""
from datetime import datetime
from typing import Any, Optional

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from datifyy.middleware.request_context import get_request_id


def success(request: Request, data: Any = None, message: str = "OK") -> dict:
	return {
		"success": True,
		"message": message,
		"data": jsonable_encoder(data),
		"request_id": get_request_id(request),
		"timestamp": datetime.utcnow().isoformat(),
	}


def error_response(request: Request, status_code: int, code: str, message: str, details: Optional[Any] = None) -> JSONResponse:
	return JSONResponse(
		status_code=status_code,
		content={
			"success": False,
			"message": message,
			"error": {"code": code, "details": jsonable_encoder(details)},
			"request_id": get_request_id(request),
			"timestamp": datetime.utcnow().isoformat(),
		},
	)
