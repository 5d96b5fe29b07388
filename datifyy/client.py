"""
Typed HTTP client for the profile and partner preference endpoints.
Unwraps the success envelope and raises ApiError for anything that isn't 2xx.
"""
import logging
from typing import Any, Dict, Optional

import httpx

logger = logging.getLogger(__name__)


class ApiError(Exception):
	def __init__(self, status_code: int, code: str, message: str, details: Optional[Any] = None):
		super().__init__(f"{status_code} {code}: {message}")
		self.status_code = status_code
		self.code = code
		self.message = message
		self.details = details


class DatifyyClient:
	def __init__(self, base_url: str, token: str, transport: Optional[httpx.BaseTransport] = None, timeout: float = 10.0):
		self._http = httpx.Client(
			base_url=base_url,
			headers={"Authorization": f"Bearer {token}"},
			transport=transport,
			timeout=timeout,
		)

	def close(self) -> None:
		self._http.close()

	def __enter__(self):
		return self

	def __exit__(self, *exc_info):
		self.close()

	def _request(self, method: str, path: str, json: Optional[Dict[str, Any]] = None, if_match: Optional[str] = None) -> Any:
		headers = {"If-Match": if_match} if if_match else None
		resp = self._http.request(method, path, json=json, headers=headers)

		try:
			body = resp.json()
		except ValueError:
			body = {}

		if resp.is_error:
			error = body.get("error") or {}
			logger.warning(f"{method} {path} failed with {resp.status_code} [{body.get('request_id')}]")
			raise ApiError(
				resp.status_code,
				error.get("code", "HTTP_ERROR"),
				body.get("message") or resp.reason_phrase,
				error.get("details"),
			)
		return body.get("data")

	def get_profile(self) -> Dict[str, Any]:
		return self._request("GET", "/user-profile")

	def update_profile(self, changes: Dict[str, Any], if_match: Optional[str] = None) -> Dict[str, Any]:
		return self._request("PUT", "/user-profile", json=changes, if_match=if_match)

	def get_partner_preferences(self) -> Optional[Dict[str, Any]]:
		return self._request("GET", "/partner-preferences")

	def update_partner_preferences(self, changes: Dict[str, Any], if_match: Optional[str] = None) -> Dict[str, Any]:
		return self._request("PUT", "/partner-preferences", json=changes, if_match=if_match)

	def validate_partner_preferences(self, data: Dict[str, Any]) -> Dict[str, Any]:
		return self._request("POST", "/partner-preferences/validate", json=data)
