"""
Profile completeness scoring
Computes completion percentage, strength label and recommendations from a profile row.
"""
import math
from datetime import datetime
from typing import Any, Dict, List, Mapping

from datifyy.schemas import ProfileCompleteness, UserProfileStats, VerificationStatus

REQUIRED_FIELDS = [
	"first_name",
	"last_name",
	"gender",
	"dob",
	"current_city",
	"looking_for",
]

OPTIONAL_FIELDS = [
	"bio",
	"images",
	"height",
	"hometown",
	"exercise",
	"education_level",
	"drinking",
	"smoking",
	"settle_down_in_months",
	"have_kids",
	"wants_kids",
	"star_sign",
	"religion",
	"pronoun",
	"fav_interest",
	"causes_you_support",
	"quality_you_value",
]

# Stats and the response percentage also count the structured sections
EXTENDED_OPTIONAL_FIELDS = OPTIONAL_FIELDS + ["prompts", "education"]

STRENGTH_THRESHOLDS = [
	(95, "complete"),
	(80, "strong"),
	(60, "moderate"),
]

MAX_PROFILE_RECOMMENDATIONS = 3


def is_field_filled(value: Any) -> bool:
	if value is None:
		return False
	if isinstance(value, bool):
		return True
	if isinstance(value, str):
		return len(value.strip()) > 0
	if isinstance(value, (list, tuple)):
		return len(value) > 0
	if isinstance(value, float):
		return not math.isnan(value)
	if isinstance(value, dict):
		return len(value) > 0
	return True


def _percentage(filled: int, total: int) -> int:
	return int(math.floor(filled / total * 100 + 0.5))


def _score(profile: Mapping[str, Any], optional_fields: List[str]) -> Dict[str, Any]:
	all_fields = REQUIRED_FIELDS + optional_fields
	missing = [f for f in all_fields if not is_field_filled(profile.get(f))]
	filled = len(all_fields) - len(missing)
	return {
		"completion_percentage": _percentage(filled, len(all_fields)),
		"missing_fields": missing,
	}


def calculate_completeness(profile: Mapping[str, Any]) -> ProfileCompleteness:
	"""
	Completion over required + optional fields.
	Only required gaps block completeness; optional gaps only lower the percentage.
	"""
	scored = _score(profile, OPTIONAL_FIELDS)
	missing_required = [f for f in scored["missing_fields"] if f in REQUIRED_FIELDS]
	return ProfileCompleteness(
		is_complete=not missing_required,
		missing_fields=scored["missing_fields"],
		completion_percentage=scored["completion_percentage"],
	)


def calculate_completion_percentage(profile: Mapping[str, Any]) -> int:
	return _score(profile, EXTENDED_OPTIONAL_FIELDS)["completion_percentage"]


def analyze_profile_completeness(profile: Mapping[str, Any]) -> Dict[str, Any]:
	scored = _score(profile, EXTENDED_OPTIONAL_FIELDS)
	scored["required_fields"] = list(REQUIRED_FIELDS)
	scored["optional_fields"] = list(EXTENDED_OPTIONAL_FIELDS)
	return scored


def determine_profile_strength(completion_percentage: int) -> str:
	for threshold, label in STRENGTH_THRESHOLDS:
		if completion_percentage >= threshold:
			return label
	return "weak"


def generate_profile_recommendations(profile: Mapping[str, Any], missing_fields: List[str]) -> List[str]:
	recommendations = []

	if "images" in missing_fields:
		recommendations.append("Add profile photos to increase your visibility by 300%")

	if "bio" in missing_fields:
		recommendations.append("Write a compelling bio to attract compatible matches")

	if "fav_interest" in missing_fields:
		recommendations.append("Add your interests to find people with similar hobbies")

	if "height" in missing_fields:
		recommendations.append("Adding your height helps with better matching")

	if "education" in missing_fields:
		recommendations.append("Share your educational background to connect with like-minded people")

	if not profile.get("is_official_email_verified"):
		recommendations.append("Verify your email address for enhanced security and trust")

	if not profile.get("is_phone_verified"):
		recommendations.append("Verify your phone number to unlock premium features")

	return recommendations[:MAX_PROFILE_RECOMMENDATIONS]


def build_profile_stats(profile: Mapping[str, Any]) -> UserProfileStats:
	analysis = analyze_profile_completeness(profile)
	return UserProfileStats(
		completion_percentage=analysis["completion_percentage"],
		missing_fields=analysis["missing_fields"],
		required_fields=analysis["required_fields"],
		optional_fields=analysis["optional_fields"],
		verification_status=VerificationStatus(
			email=bool(profile.get("is_official_email_verified")),
			phone=bool(profile.get("is_phone_verified")),
			aadhar=bool(profile.get("is_aadhar_verified")),
		),
		profile_strength=determine_profile_strength(analysis["completion_percentage"]),
		recommendations=generate_profile_recommendations(profile, analysis["missing_fields"]),
		last_updated=profile.get("updated_at") or datetime.utcnow().isoformat(),
	)
