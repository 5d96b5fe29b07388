"""
Profile field validation
Real-time, one-issue-per-field checks used while a user edits their own profile,
plus the stricter helpers the service layer applies before persisting an update.
"""
import re
from datetime import date, datetime
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union
from urllib.parse import urlparse

from datifyy.schemas import ValidationIssue

EMAIL_REGEX = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

# Lower bound differs from the preference form (120 cm); see DESIGN.md
PROFILE_HEIGHT_RANGE = (100, 250)

PROFILE_LIMITS = {
	"NAME_MIN_LENGTH": 2,
	"NAME_MAX_LENGTH": 50,
	"BIO_MIN_LENGTH": 10,
	"BIO_MAX_LENGTH": 500,
	"MAX_IMAGES": 6,
	"MAX_LIST_ITEMS": 10,
	"MIN_AGE": 18,
	"MAX_AGE": 100,
}

REQUIRED_PROFILE_FIELDS = [
	"first_name", "last_name", "gender", "dob", "current_city", "looking_for", "official_email",
]

LIST_FIELDS = ["fav_interest", "causes_you_support", "quality_you_value"]

IMAGE_EXTENSIONS = (".jpg", ".jpeg", ".png", ".webp", ".gif")

DISPLAY_NAMES = {
	"first_name": "First Name",
	"last_name": "Last Name",
	"dob": "Date of Birth",
	"official_email": "Email Address",
	"current_city": "Current City",
	"looking_for": "Looking For",
}


def display_name(field: str) -> str:
	return DISPLAY_NAMES.get(field) or field.replace("_", " ").capitalize()


def parse_dob(dob: Union[str, date, datetime]) -> date:
	if isinstance(dob, datetime):
		return dob.date()
	if isinstance(dob, date):
		return dob
	return date.fromisoformat(str(dob)[:10])


def calculate_age(dob: Union[str, date, datetime], today: Optional[date] = None) -> int:
	"""Whole years between dob and today, not counting a birthday that hasn't happened yet this year"""
	birth = parse_dob(dob)
	today = today or date.today()
	age = today.year - birth.year
	if (today.month, today.day) < (birth.month, birth.day):
		age -= 1
	return age


def is_valid_email(email: str) -> bool:
	return bool(EMAIL_REGEX.match(email))


def _error(field: str, message: str, code: str) -> ValidationIssue:
	return ValidationIssue(field=field, message=message, type="error", priority="high", code=code)


def _warning(field: str, message: str, code: str) -> ValidationIssue:
	return ValidationIssue(field=field, message=message, type="warning", priority="low", code=code)


def validate_profile_field(field: str, value: Any, today: Optional[date] = None) -> Optional[ValidationIssue]:
	"""Return the first failing rule for one profile field, or None"""
	if field in REQUIRED_PROFILE_FIELDS:
		if not value or (isinstance(value, str) and not value.strip()):
			return _error(field, f"{display_name(field)} is required", "REQUIRED_FIELD")

	if field in ("first_name", "last_name") and isinstance(value, str) and value:
		if len(value) < PROFILE_LIMITS["NAME_MIN_LENGTH"]:
			return _error(field, f"{display_name(field)} must be at least {PROFILE_LIMITS['NAME_MIN_LENGTH']} characters", "NAME_TOO_SHORT")
		if len(value) > PROFILE_LIMITS["NAME_MAX_LENGTH"]:
			return _error(field, f"{display_name(field)} cannot exceed {PROFILE_LIMITS['NAME_MAX_LENGTH']} characters", "NAME_TOO_LONG")

	elif field == "dob" and value:
		try:
			age = calculate_age(value, today)
		except ValueError:
			return _error(field, "Please enter a valid date of birth", "INVALID_DOB")
		if age < PROFILE_LIMITS["MIN_AGE"]:
			return _error(field, f"You must be at least {PROFILE_LIMITS['MIN_AGE']} years old", "UNDERAGE")
		if age > PROFILE_LIMITS["MAX_AGE"]:
			return _error(field, "Please enter a valid date of birth", "INVALID_DOB")

	elif field == "height" and value is not None:
		low, high = PROFILE_HEIGHT_RANGE
		if not isinstance(value, (int, float)) or value < low or value > high:
			return _error(field, f"Height must be between {low}-{high} cm", "HEIGHT_OUT_OF_RANGE")

	elif field == "bio" and isinstance(value, str) and value:
		if len(value) > PROFILE_LIMITS["BIO_MAX_LENGTH"]:
			return _error(field, f"Bio cannot exceed {PROFILE_LIMITS['BIO_MAX_LENGTH']} characters", "BIO_TOO_LONG")
		if len(value) < PROFILE_LIMITS["BIO_MIN_LENGTH"]:
			return _warning(field, f"Bio should be at least {PROFILE_LIMITS['BIO_MIN_LENGTH']} characters for better matches", "BIO_TOO_SHORT")

	elif field == "images" and isinstance(value, list):
		if len(value) > PROFILE_LIMITS["MAX_IMAGES"]:
			return _error(field, f"Maximum {PROFILE_LIMITS['MAX_IMAGES']} images allowed", "TOO_MANY_IMAGES")
		if not value:
			return _warning(field, "Adding photos increases profile views by 300%", "NO_IMAGES")

	elif field == "official_email" and value:
		if not isinstance(value, str) or not is_valid_email(value):
			return _error(field, "Please enter a valid email address", "INVALID_EMAIL")

	elif field in LIST_FIELDS and isinstance(value, list):
		if len(value) > PROFILE_LIMITS["MAX_LIST_ITEMS"]:
			return _error(field, f"Maximum {PROFILE_LIMITS['MAX_LIST_ITEMS']} items allowed", "TOO_MANY_ITEMS")

	return None


def validate_profile_section(data: Mapping[str, Any], today: Optional[date] = None) -> List[ValidationIssue]:
	issues = []
	for field, value in data.items():
		issue = validate_profile_field(field, value, today)
		if issue:
			issues.append(issue)
	return issues


def validate_age(dob: Union[str, date, datetime], today: Optional[date] = None) -> Dict[str, Any]:
	try:
		age = calculate_age(dob, today)
	except ValueError:
		return {"is_valid": False, "age": None, "error": "Invalid date format"}

	if age < PROFILE_LIMITS["MIN_AGE"]:
		return {"is_valid": False, "age": age, "error": f"User must be at least {PROFILE_LIMITS['MIN_AGE']} years old"}
	if age > PROFILE_LIMITS["MAX_AGE"]:
		return {"is_valid": False, "age": age, "error": "Invalid age"}
	return {"is_valid": True, "age": age, "error": None}


def is_valid_url(url: Any) -> bool:
	if not isinstance(url, str):
		return False
	parsed = urlparse(url)
	return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def validate_image_urls(urls: List[str]) -> Tuple[bool, List[str]]:
	"""
	Check each image URL is an http(s) URL pointing at a supported image type

	Returns:
		(is_valid, errors)
	"""
	errors = []
	for index, url in enumerate(urls, start=1):
		if not is_valid_url(url):
			errors.append(f"Image {index}: Invalid URL format")
		elif not urlparse(url).path.lower().endswith(IMAGE_EXTENSIONS):
			errors.append(f"Image {index}: Invalid image format")
	return len(errors) == 0, errors
