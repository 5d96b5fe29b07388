import logging
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional

from datifyy.schemas import UpdateUserProfileRequest, UserProfileResponse, UserProfileSummary
from datifyy.services.profile_completeness import calculate_completion_percentage
from datifyy.services.profile_validation import calculate_age, is_valid_url

logger = logging.getLogger(__name__)

MAX_IMAGES = 6
MAX_STRUCTURED_ENTRIES = 5
SUMMARY_BIO_LENGTH = 150

RESPONSE_FIELDS = [
	"gender", "bio", "height", "current_city", "hometown", "exercise", "education_level",
	"drinking", "smoking", "looking_for", "settle_down_in_months", "have_kids", "wants_kids",
	"star_sign", "religion", "pronoun", "fav_interest", "causes_you_support", "quality_you_value",
]


def safe_age(dob: Any) -> Optional[int]:
	if not dob:
		return None
	try:
		age = calculate_age(dob)
	except (TypeError, ValueError):
		return None
	return age if 0 <= age <= 150 else None


def sanitize_images(images: Any) -> Optional[List[str]]:
	if not isinstance(images, list):
		return None
	valid = [image for image in images if is_valid_url(image)]
	return valid[:MAX_IMAGES] or None


def sanitize_entries(entries: Any) -> Optional[List[Dict[str, Any]]]:
	"""Keep non-empty objects only (prompts, education)"""
	if not isinstance(entries, list):
		return None
	valid = [entry for entry in entries if isinstance(entry, dict) and entry]
	return valid[:MAX_STRUCTURED_ENTRIES] or None


def truncate_bio(bio: Optional[str], max_length: int = SUMMARY_BIO_LENGTH) -> Optional[str]:
	if not bio:
		return None
	if len(bio) <= max_length:
		return bio
	return bio[:max_length].strip() + "..."


def is_profile_verified(row: Mapping[str, Any]) -> bool:
	return bool(row.get("is_official_email_verified") and (row.get("is_phone_verified") or row.get("is_aadhar_verified")))


def to_response(row: Mapping[str, Any]) -> UserProfileResponse:
	data = {field: row.get(field) for field in RESPONSE_FIELDS}
	dob = row.get("dob")
	return UserProfileResponse(
		id=str(row["id"]),
		first_name=row.get("first_name") or "",
		last_name=row.get("last_name") or "",
		email=row.get("official_email"),
		images=sanitize_images(row.get("images")),
		dob=str(dob) if dob else None,
		age=safe_age(dob),
		is_official_email_verified=bool(row.get("is_official_email_verified")),
		is_aadhar_verified=bool(row.get("is_aadhar_verified")),
		is_phone_verified=bool(row.get("is_phone_verified")),
		prompts=sanitize_entries(row.get("prompts")),
		education=sanitize_entries(row.get("education")),
		profile_completion_percentage=calculate_completion_percentage(row),
		last_updated=row.get("updated_at") or datetime.utcnow().isoformat(),
		**data,
	)


def to_summary(row: Mapping[str, Any]) -> UserProfileSummary:
	return UserProfileSummary(
		id=str(row["id"]),
		first_name=row.get("first_name") or "",
		last_name=row.get("last_name") or "",
		age=safe_age(row.get("dob")),
		current_city=row.get("current_city"),
		images=sanitize_images(row.get("images")),
		bio=truncate_bio(row.get("bio")),
		looking_for=row.get("looking_for"),
		is_verified=is_profile_verified(row),
		is_deleted=bool(row.get("is_deleted")),
		profile_completion_percentage=calculate_completion_percentage(row),
	)


def from_update_request(dto: UpdateUserProfileRequest) -> Dict[str, Any]:
	"""Only the fields the client actually sent, ready for the profile table"""
	update_data = dto.model_dump(mode="json", exclude_unset=True)
	logger.debug(f"Mapped profile update fields: {sorted(update_data)}")
	return update_data
