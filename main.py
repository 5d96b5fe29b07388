import logging
import os

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from datifyy.config import LOG_LEVEL, SUPABASE_URL
from datifyy.errors import DomainError
from datifyy.middleware.request_context import request_context_middleware
from datifyy.responses import error_response
from datifyy.routers import admin, partner_preferences, user_profile
from supabase_client import get_supabase_client, masked_key

logging.basicConfig(
	level=LOG_LEVEL,
	format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="datifyy-profile-service")

app.add_middleware(
	CORSMiddleware,
	allow_origins=["*"],
	allow_credentials=True,
	allow_methods=["*"],
	allow_headers=["*"],
	expose_headers=["X-Request-ID"],
)

app.middleware("http")(request_context_middleware)

@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError):
	if exc.status_code >= 500:
		logger.error(f"{exc.code} on {request.method} {request.url.path}: {exc.message}")
	else:
		logger.info(f"{exc.code} on {request.method} {request.url.path}: {exc.message}")
	return error_response(request, exc.status_code, exc.code, exc.message, exc.details)

@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
	details = []
	for err in exc.errors():
		loc = [str(part) for part in err.get("loc", ()) if part != "body"]
		details.append({
			"field": ".".join(loc) or "body",
			"value": err.get("input"),
			"constraints": [err.get("msg")],
		})
	return error_response(request, 400, "VALIDATION_ERROR", "Request validation failed", details)

@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
	codes = {401: "UNAUTHORIZED", 403: "FORBIDDEN", 404: "NOT_FOUND", 405: "METHOD_NOT_ALLOWED"}
	return error_response(request, exc.status_code, codes.get(exc.status_code, "HTTP_ERROR"), str(exc.detail))

@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
	logger.exception(f"Unhandled error on {request.method} {request.url.path}")
	return error_response(request, 500, "INTERNAL_ERROR", "Internal server error")

app.include_router(user_profile.router)
app.include_router(partner_preferences.router)
app.include_router(admin.router)

@app.get("/health")
def health():
	return {"status": "ok"}

@app.get("/supabase-info")
def supabase_info(check: bool = False):
	key = masked_key()
	if not SUPABASE_URL or not key:
		return {"configured": False, "SUPABASE_URL": SUPABASE_URL, "SUPABASE_KEY": key}

	if not check:
		return {"configured": True, "SUPABASE_URL": SUPABASE_URL, "SUPABASE_KEY": key}

	try:
		get_supabase_client()
	except Exception as e:
		raise HTTPException(status_code=500, detail=f"Supabase check failed: {e}")
	return {"configured": True, "SUPABASE_URL": SUPABASE_URL, "SUPABASE_KEY": key, "check": "client-created"}


if __name__ == "__main__":
	import uvicorn

	uvicorn.run("main:app", host="0.0.0.0", port=int(os.getenv("PORT", 8000)), reload=False)
