import json

import httpx
import pytest

from datifyy.client import ApiError, DatifyyClient


def envelope(data):
	return {"success": True, "message": "OK", "data": data, "request_id": "req-1", "timestamp": "2024-01-01T00:00:00"}


def test_unwraps_success_envelope_and_sends_token():
	seen = {}

	def handler(request):
		seen["auth"] = request.headers["Authorization"]
		seen["path"] = request.url.path
		return httpx.Response(200, json=envelope({"id": "1", "first_name": "Jess"}))

	with DatifyyClient("http://api.test", "tok", transport=httpx.MockTransport(handler)) as client:
		profile = client.get_profile()

	assert profile == {"id": "1", "first_name": "Jess"}
	assert seen == {"auth": "Bearer tok", "path": "/user-profile"}


def test_update_sends_if_match_and_body():
	seen = {}

	def handler(request):
		seen["if_match"] = request.headers.get("If-Match")
		seen["body"] = json.loads(request.content)
		seen["method"] = request.method
		return httpx.Response(200, json=envelope({"preferences": {"min_age": 25}}))

	client = DatifyyClient("http://api.test", "tok", transport=httpx.MockTransport(handler))
	client.update_partner_preferences({"min_age": 25}, if_match="2024-01-01T00:00:00")

	assert seen == {"if_match": "2024-01-01T00:00:00", "body": {"min_age": 25}, "method": "PUT"}


def test_error_envelope_raises_api_error():
	def handler(request):
		return httpx.Response(400, json={
			"success": False,
			"message": "Partner preferences failed validation",
			"error": {"code": "INVALID_PREFERENCES", "details": [{"code": "INVALID_AGE_RANGE"}]},
			"request_id": "req-2",
			"timestamp": "2024-01-01T00:00:00",
		})

	client = DatifyyClient("http://api.test", "tok", transport=httpx.MockTransport(handler))
	with pytest.raises(ApiError) as exc_info:
		client.update_partner_preferences({"min_age": 30, "max_age": 25})

	assert exc_info.value.status_code == 400
	assert exc_info.value.code == "INVALID_PREFERENCES"
	assert exc_info.value.details == [{"code": "INVALID_AGE_RANGE"}]


def test_non_json_error():
	def handler(request):
		return httpx.Response(502, text="bad gateway")

	client = DatifyyClient("http://api.test", "tok", transport=httpx.MockTransport(handler))
	with pytest.raises(ApiError) as exc_info:
		client.validate_partner_preferences({})

	assert exc_info.value.status_code == 502
	assert exc_info.value.code == "HTTP_ERROR"
