"""
User profile service
Reads and writes rows in the profile table and applies update-time business rules.
"""
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from datifyy.config import PROFILE_TABLE
from datifyy.errors import DatabaseConnectionError, StaleWriteError, UserNotFoundError, ValidationError
from datifyy.schemas import (
	ProfileCompleteness,
	UpdateUserProfileRequest,
	UserProfileResponse,
	UserProfileStats,
	ValidationIssue,
)
from datifyy.services.profile_completeness import build_profile_stats, calculate_completeness
from datifyy.services.profile_mapper import from_update_request, to_response
from datifyy.services.profile_validation import validate_age, validate_image_urls, validate_profile_section

logger = logging.getLogger(__name__)

MAX_IMAGES = 6

VERIFICATION_COLUMNS = {
	"email": "is_official_email_verified",
	"phone": "is_phone_verified",
	"aadhar": "is_aadhar_verified",
}


def run_query(query, action: str):
	"""Execute a PostgREST query, turning driver failures into DatabaseConnectionError"""
	try:
		return query.execute()
	except Exception as e:
		logger.error(f"Database error while trying to {action}: {e}")
		raise DatabaseConnectionError(f"Failed to {action}") from e


def find_profile(client, user_id: str) -> Optional[Dict[str, Any]]:
	resp = run_query(
		client.table(PROFILE_TABLE).select("*").eq("user_login_id", user_id).limit(1),
		"load user profile",
	)
	return resp.data[0] if resp.data else None


def get_active_profile(client, user_id: str) -> Dict[str, Any]:
	profile = find_profile(client, user_id)
	if not profile or profile.get("is_deleted"):
		logger.warning(f"User profile not found for user {user_id}")
		raise UserNotFoundError()
	return profile


def _write_profile(client, user_id: str, data: Dict[str, Any], if_match: Optional[str] = None) -> Dict[str, Any]:
	data["updated_at"] = datetime.utcnow().isoformat()
	query = client.table(PROFILE_TABLE).update(data).eq("user_login_id", user_id)
	if if_match:
		query = query.eq("updated_at", if_match)

	resp = run_query(query, "update user profile")
	if not resp.data:
		if if_match:
			logger.warning(f"Stale profile write rejected for user {user_id}")
			raise StaleWriteError("Profile was modified since it was last read")
		raise UserNotFoundError()
	return resp.data[0]


def get_user_profile(client, user_id: str) -> UserProfileResponse:
	profile = get_active_profile(client, user_id)
	logger.info(f"User profile retrieved for user {user_id}")
	return to_response(profile)


def validate_update_data(update_data: Dict[str, Any]) -> Tuple[Dict[str, Any], List[ValidationIssue]]:
	"""
	Business rules that go beyond the request schema

	Returns:
		(update_data, warnings); any error-level issue raises ValidationError
	"""
	if "official_email" in update_data:
		update_data.pop("official_email")
		logger.debug("Stripped official_email from profile update payload")

	if update_data.get("dob"):
		age_check = validate_age(update_data["dob"])
		if not age_check["is_valid"]:
			raise ValidationError(age_check["error"], details=[{"field": "dob", "value": update_data["dob"], "constraints": [age_check["error"]]}])

	if update_data.get("images"):
		is_valid, errors = validate_image_urls(update_data["images"])
		if not is_valid:
			raise ValidationError(f"Invalid images: {', '.join(errors)}", details=[{"field": "images", "value": update_data["images"], "constraints": errors}])

	issues = validate_profile_section(update_data)
	errors = [issue for issue in issues if issue.type == "error"]
	if errors:
		raise ValidationError(
			errors[0].message,
			details=[{"field": e.field, "value": update_data.get(e.field), "constraints": [e.message]} for e in errors],
		)

	return update_data, [issue for issue in issues if issue.type == "warning"]


def check_profile_update(client, user_id: str, dto: UpdateUserProfileRequest) -> Dict[str, Any]:
	"""Dry run of the profile field rules; nothing is stored"""
	get_active_profile(client, user_id)
	data = from_update_request(dto)
	data.pop("official_email", None)
	issues = validate_profile_section(data)
	errors = [issue for issue in issues if issue.type == "error"]
	return {
		"is_valid": not errors,
		"errors": errors,
		"warnings": [issue for issue in issues if issue.type == "warning"],
	}


def update_user_profile(
	client,
	user_id: str,
	dto: UpdateUserProfileRequest,
	if_match: Optional[str] = None,
) -> UserProfileResponse:
	existing = get_active_profile(client, user_id)
	update_data, warnings = validate_update_data(from_update_request(dto))

	if not update_data:
		return to_response(existing)

	updated = _write_profile(client, user_id, update_data, if_match)
	logger.info(f"User profile updated for user {user_id}: {sorted(update_data)}")
	return to_response(updated).model_copy(update={"warnings": warnings})


def delete_user_profile(client, user_id: str) -> None:
	get_active_profile(client, user_id)
	now = datetime.utcnow().isoformat()
	run_query(
		client.table(PROFILE_TABLE).update({"is_deleted": True, "deleted_at": now, "updated_at": now}).eq("user_login_id", user_id),
		"delete user profile",
	)
	logger.info(f"User profile soft-deleted for user {user_id}")


def update_user_avatar(client, user_id: str, image_url: str, set_as_primary: bool = True) -> UserProfileResponse:
	profile = get_active_profile(client, user_id)

	is_valid, errors = validate_image_urls([image_url])
	if not is_valid:
		raise ValidationError(f"Invalid image: {', '.join(errors)}", details=[{"field": "image_url", "value": image_url, "constraints": errors}])

	current = [image for image in (profile.get("images") or []) if image != image_url]
	if set_as_primary:
		images = [image_url] + current
	else:
		images = current[:1] + [image_url] + current[1:]

	updated = _write_profile(client, user_id, {"images": images[:MAX_IMAGES]})
	logger.info(f"Avatar updated for user {user_id}, {len(updated.get('images') or [])} image(s) stored")
	return to_response(updated)


def get_user_profile_stats(client, user_id: str) -> UserProfileStats:
	profile = get_active_profile(client, user_id)
	stats = build_profile_stats(profile)
	logger.info(f"Profile stats for user {user_id}: {stats.completion_percentage}% ({stats.profile_strength})")
	return stats


def does_user_profile_exist(client, user_id: str) -> bool:
	try:
		profile = find_profile(client, user_id)
	except DatabaseConnectionError:
		return False
	return bool(profile and not profile.get("is_deleted"))


def validate_profile_completeness(client, user_id: str) -> ProfileCompleteness:
	profile = get_active_profile(client, user_id)
	completeness = calculate_completeness(profile)
	logger.debug(
		f"Profile completeness for user {user_id}: {completeness.completion_percentage}%, "
		f"{len(completeness.missing_fields)} missing field(s)"
	)
	return completeness


def update_verification_status(client, user_id: str, verification_type: str, status: bool, admin_id: str, reason: Optional[str] = None) -> UserProfileResponse:
	get_active_profile(client, user_id)
	column = VERIFICATION_COLUMNS[verification_type]
	updated = _write_profile(client, user_id, {column: status})
	logger.warning(
		f"Admin {admin_id} set {verification_type} verification to {status} for user {user_id}"
		+ (f" ({reason})" if reason else "")
	)
	return to_response(updated)
