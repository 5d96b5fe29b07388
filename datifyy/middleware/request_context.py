import logging
import time
import uuid

from fastapi import Request

logger = logging.getLogger("datifyy.requests")

REQUEST_ID_HEADER = "X-Request-ID"

async def request_context_middleware(request: Request, call_next):
	request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
	request.state.request_id = request_id
	started = time.monotonic()

	response = await call_next(request)

	duration_ms = int((time.monotonic() - started) * 1000)
	response.headers[REQUEST_ID_HEADER] = request_id
	logger.info(f"{request.method} {request.url.path} -> {response.status_code} in {duration_ms}ms [{request_id}]")
	return response

def get_request_id(request: Request) -> str:
	return getattr(request.state, "request_id", None) or str(uuid.uuid4())
