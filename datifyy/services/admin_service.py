"""
Admin operations over user profiles: search, verification flags and suspension.
Every mutation is written to the audit log table.
"""
import logging
from datetime import datetime
from typing import Any, Dict, Optional

from datifyy.config import AUDIT_LOG_TABLE, PROFILE_TABLE
from datifyy.errors import UserNotFoundError
from datifyy.schemas import UserProfileResponse
from datifyy.services import profile_service
from datifyy.services.profile_mapper import to_summary
from datifyy.services.profile_service import find_profile, run_query

logger = logging.getLogger(__name__)


def quote_filter_value(value: str) -> str:
	"""Wrap a value in PostgREST double quotes so commas and parentheses stay literal"""
	escaped = value.replace("\\", "\\\\").replace('"', '\\"')
	return f'"{escaped}"'


def search_users(
	client,
	query: str = "",
	gender: Optional[str] = None,
	city: Optional[str] = None,
	verified: Optional[bool] = None,
	include_deleted: bool = False,
	limit: int = 50,
	offset: int = 0,
) -> Dict[str, Any]:
	builder = client.table(PROFILE_TABLE).select("*")
	if query:
		pattern = quote_filter_value(f"%{query}%")
		builder = builder.or_(
			f"first_name.ilike.{pattern},last_name.ilike.{pattern},official_email.ilike.{pattern}"
		)
	if gender:
		builder = builder.eq("gender", gender.lower())
	if city:
		builder = builder.ilike("current_city", f"%{city}%")
	if verified is not None:
		builder = builder.eq("is_official_email_verified", verified)
	if not include_deleted:
		builder = builder.is_("deleted_at", None)

	rows = run_query(builder.order("id"), "search users").data or []
	page = rows[offset:offset + limit]

	logger.debug(f"Admin user search matched {len(rows)} row(s), returning {len(page)}")
	return {
		"users": [to_summary(row) for row in page],
		"total": len(rows),
		"limit": limit,
		"offset": offset,
	}


def _audit(client, admin_id: str, action: str, target_user_id: str, details: Optional[Dict[str, Any]] = None) -> None:
	run_query(
		client.table(AUDIT_LOG_TABLE).insert({
			"admin_id": admin_id,
			"action": action,
			"target_user_id": target_user_id,
			"details": {**(details or {}), "timestamp": datetime.utcnow().isoformat()},
		}),
		"write audit log",
	)


def update_verification(client, admin_id: str, user_id: str, verification_type: str, status: bool, reason: Optional[str] = None) -> UserProfileResponse:
	profile = profile_service.update_verification_status(client, user_id, verification_type, status, admin_id, reason)
	_audit(client, admin_id, "verification", user_id, {"type": verification_type, "status": status, "reason": reason})
	return profile


def set_suspended(client, admin_id: str, user_id: str, suspended: bool) -> Dict[str, str]:
	"""Suspension is the soft-delete flag; unsuspending restores the profile"""
	if not find_profile(client, user_id):
		raise UserNotFoundError()

	now = datetime.utcnow().isoformat()
	changes = {"is_deleted": True, "deleted_at": now} if suspended else {"is_deleted": False, "deleted_at": None}
	run_query(
		client.table(PROFILE_TABLE).update({**changes, "updated_at": now}).eq("user_login_id", user_id),
		"suspend user" if suspended else "unsuspend user",
	)

	action = "suspend" if suspended else "unsuspend"
	_audit(client, admin_id, action, user_id)
	logger.warning(f"Admin {admin_id} performed {action} on user {user_id}")
	return {"status": "suspended" if suspended else "unsuspended"}
