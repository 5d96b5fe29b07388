"""
Partner preference validation engine

Three passes over a (possibly partial) preferences record:
- field checks: configured rule, then field-specific rules, then field-kind checks
- cross-field checks: range ordering/span, currency and location dependencies
- business rules: soft, warning-only quality hints

Each PreferenceValidator owns its own ValidationCache, so one instance should be
created per form session or request.
"""
import logging
import math
import time
from typing import Any, Dict, List, Mapping, Optional, Sequence

from datifyy.schemas import ValidationIssue, ValidationResult, ValidationSummary
from datifyy.services.preference_form import (
	BaseField,
	PREFERENCE_HEIGHT_RANGE,
	all_fields,
	check_kind,
	check_rule,
	get_required_field_names,
)
from datifyy.services.validation_cache import MISS, ValidationCache

logger = logging.getLogger(__name__)

BUSINESS_RULES = {
	"AGE_RANGE_MAX_SPAN": 20,
	"HEIGHT_RANGE_MAX_SPAN": 50,  # cm
	"INCOME_RANGE_MAX_MULTIPLIER": 10,
	"MAX_HOBBIES": 10,
	"MAX_INTERESTS": 10,
	"MAX_PROFESSIONS": 8,
	"MIN_DESCRIPTION_LENGTH": 20,
	"MAX_DESCRIPTION_LENGTH": 1000,
	# Placeholder until the user's own age is passed in; see DESIGN.md
	"REFERENCE_AGE": 25,
	"AGE_PREFERENCE_MAX_DISTANCE": 15,
}

ESSENTIAL_FIELDS = ["gender_preference", "min_age", "max_age", "location_preference"]
IMPORTANT_FIELDS = ["relationship_goals", "personality_traits", "hobbies", "interests"]

MAX_RECOMMENDATIONS = 5


def is_filled(value: Any) -> bool:
	if value is None or value == "":
		return False
	if isinstance(value, (list, tuple)):
		return len(value) > 0
	return True


def round_half_up(value: float) -> int:
	return int(math.floor(value + 0.5))


def _issue(field: str, message: str, code: str, type: str = "error", priority: str = "medium") -> ValidationIssue:
	return ValidationIssue(field=field, message=message, type=type, priority=priority, code=code)


def _bound(data: Mapping[str, Any], name: str) -> Optional[float]:
	# Zero and non-numeric bounds count as unset
	value = data.get(name)
	if isinstance(value, bool) or not isinstance(value, (int, float)) or not value:
		return None
	return value


class PreferenceValidator:
	def __init__(self, cache: Optional[ValidationCache] = None, reference_age: Optional[int] = None):
		self.cache = cache if cache is not None else ValidationCache()
		self.reference_age = reference_age if reference_age is not None else BUSINESS_RULES["REFERENCE_AGE"]
		self._errors: List[ValidationIssue] = []
		self._warnings: List[ValidationIssue] = []

	@property
	def errors(self) -> List[ValidationIssue]:
		return list(self._errors)

	@property
	def warnings(self) -> List[ValidationIssue]:
		return list(self._warnings)

	@property
	def is_valid(self) -> bool:
		return not self._errors

	@property
	def has_errors(self) -> bool:
		return bool(self._errors)

	@property
	def has_warnings(self) -> bool:
		return bool(self._warnings)

	def validate_field(self, field: BaseField, value: Any) -> Optional[ValidationIssue]:
		cached = self.cache.get(field.name, value)
		if cached is not MISS:
			logger.debug(f"Using cached validation result for {field.name}")
			return cached

		try:
			result = None
			message = check_rule(field, value)
			if message:
				result = _issue(
					field.name,
					message,
					"FIELD_VALIDATION_ERROR",
					priority="high" if field.priority == "high" else "medium",
				)

			if result is None:
				result = self._validate_specific_field(field, value)

			if result is None:
				message = check_kind(field, value)
				if message:
					result = _issue(field.name, message, "FIELD_VALIDATION_ERROR", priority="medium")
		except Exception as e:
			logger.error(f"Field validation raised for {field.name}: {e}")
			result = _issue(field.name, "Validation failed due to internal error", "VALIDATION_EXCEPTION", priority="high")

		self.cache.set(field.name, value, result)

		if result is not None:
			logger.debug(f"Field validation failed for {field.name}: {result.message}")

		return result

	def _validate_specific_field(self, field: BaseField, value: Any) -> Optional[ValidationIssue]:
		name = field.name
		numeric = isinstance(value, (int, float)) and not isinstance(value, bool)

		if name == "min_age" and numeric and value and (value < 18 or value > 80):
			return _issue(name, "Minimum age should be between 18 and 80", "AGE_OUT_OF_RANGE", priority="high")

		if name == "max_age" and numeric and value and (value < 18 or value > 100):
			return _issue(name, "Maximum age should be between 18 and 100", "AGE_OUT_OF_RANGE", priority="high")

		if name in ("min_height", "max_height") and numeric and value:
			low, high = PREFERENCE_HEIGHT_RANGE
			if value < low or value > high:
				return _issue(name, f"Height should be between {low}cm and {high}cm", "HEIGHT_OUT_OF_RANGE")

		if name in ("min_income", "max_income") and numeric and value < 0:
			return _issue(name, "Income cannot be negative", "NEGATIVE_INCOME")

		if name == "location_preference_radius" and numeric and value and (value < 1 or value > 1000):
			return _issue(name, "Search radius should be between 1km and 1000km", "RADIUS_OUT_OF_RANGE")

		if isinstance(value, (list, tuple)):
			if name == "hobbies" and len(value) > BUSINESS_RULES["MAX_HOBBIES"]:
				return _issue(name, f"Maximum {BUSINESS_RULES['MAX_HOBBIES']} hobbies allowed", "TOO_MANY_HOBBIES")
			if name == "interests" and len(value) > BUSINESS_RULES["MAX_INTERESTS"]:
				return _issue(name, f"Maximum {BUSINESS_RULES['MAX_INTERESTS']} interests allowed", "TOO_MANY_INTERESTS")
			if name == "profession" and len(value) > BUSINESS_RULES["MAX_PROFESSIONS"]:
				return _issue(name, f"Maximum {BUSINESS_RULES['MAX_PROFESSIONS']} professions allowed", "TOO_MANY_PROFESSIONS")

		if name == "what_other_person_should_know" and isinstance(value, str) and value:
			if len(value) < BUSINESS_RULES["MIN_DESCRIPTION_LENGTH"]:
				return _issue(
					name,
					f"Description should be at least {BUSINESS_RULES['MIN_DESCRIPTION_LENGTH']} characters",
					"DESCRIPTION_TOO_SHORT",
					type="warning",
					priority="low",
				)
			if len(value) > BUSINESS_RULES["MAX_DESCRIPTION_LENGTH"]:
				return _issue(
					name,
					f"Description should not exceed {BUSINESS_RULES['MAX_DESCRIPTION_LENGTH']} characters",
					"DESCRIPTION_TOO_LONG",
				)

		return None

	def validate_section(self, fields: Sequence[BaseField], data: Mapping[str, Any]) -> List[ValidationIssue]:
		issues = []
		for field in fields:
			issue = self.validate_field(field, data.get(field.name))
			if issue:
				issues.append(issue)
		logger.debug(f"Section validation completed for {[f.name for f in fields]}: {len(issues)} issue(s)")
		return issues

	def validate_cross_field(self, data: Mapping[str, Any]) -> List[ValidationIssue]:
		issues = []
		min_age, max_age = _bound(data, "min_age"), _bound(data, "max_age")
		min_height, max_height = _bound(data, "min_height"), _bound(data, "max_height")
		min_income, max_income = _bound(data, "min_income"), _bound(data, "max_income")

		if min_age and max_age:
			if min_age >= max_age:
				issues.append(_issue("max_age", "Maximum age must be greater than minimum age", "INVALID_AGE_RANGE", priority="high"))
			if max_age - min_age > BUSINESS_RULES["AGE_RANGE_MAX_SPAN"]:
				issues.append(_issue(
					"max_age",
					f"Age range span should not exceed {BUSINESS_RULES['AGE_RANGE_MAX_SPAN']} years",
					"AGE_RANGE_TOO_WIDE",
					type="warning",
				))

		if min_height and max_height:
			if min_height >= max_height:
				issues.append(_issue("max_height", "Maximum height must be greater than minimum height", "INVALID_HEIGHT_RANGE", priority="high"))
			if max_height - min_height > BUSINESS_RULES["HEIGHT_RANGE_MAX_SPAN"]:
				issues.append(_issue(
					"max_height",
					f"Height range span should not exceed {BUSINESS_RULES['HEIGHT_RANGE_MAX_SPAN']}cm",
					"HEIGHT_RANGE_TOO_WIDE",
					type="warning",
				))

		if min_income and max_income:
			if min_income >= max_income:
				issues.append(_issue("max_income", "Maximum income must be greater than minimum income", "INVALID_INCOME_RANGE", priority="high"))
			ratio = max_income / min_income
			if ratio > BUSINESS_RULES["INCOME_RANGE_MAX_MULTIPLIER"]:
				issues.append(_issue(
					"max_income",
					f"Income range is very wide ({ratio:.1f}x). Consider narrowing it.",
					"INCOME_RANGE_TOO_WIDE",
					type="warning",
					priority="low",
				))

		if (min_income or max_income) and not data.get("currency"):
			issues.append(_issue("currency", "Currency is required when income range is specified", "MISSING_CURRENCY", priority="high"))

		if data.get("location_preference_radius") and not data.get("location_preference"):
			issues.append(_issue("location_preference", "Location preference is required when radius is specified", "MISSING_LOCATION", priority="high"))

		logger.debug(f"Cross-field validation completed: {[i.code for i in issues]}")
		return issues

	def validate_business_rules(self, data: Mapping[str, Any]) -> List[ValidationIssue]:
		issues = []

		missing_essentials = [name for name in ESSENTIAL_FIELDS if not data.get(name)]
		if missing_essentials:
			issues.append(_issue(
				missing_essentials[0],
				"Complete essential preferences for better matches",
				"MISSING_ESSENTIAL_PREFERENCES",
				type="warning",
				priority="high",
			))

		filled_important = [name for name in IMPORTANT_FIELDS if is_filled(data.get(name))]
		if len(filled_important) < 2:
			issues.append(_issue(
				"hobbies",
				"Add more preferences to improve match quality",
				"INCOMPLETE_PREFERENCES",
				type="warning",
			))

		hobbies = data.get("hobbies")
		if isinstance(hobbies, (list, tuple)) and len(hobbies) == 1:
			issues.append(_issue(
				"hobbies",
				"Consider adding more hobbies for better matches",
				"LIMITED_HOBBY_DIVERSITY",
				type="warning",
				priority="low",
			))

		min_age, max_age = _bound(data, "min_age"), _bound(data, "max_age")
		if min_age and max_age:
			max_distance = BUSINESS_RULES["AGE_PREFERENCE_MAX_DISTANCE"]
			if abs(min_age - self.reference_age) > max_distance or abs(max_age - self.reference_age) > max_distance:
				issues.append(_issue(
					"min_age",
					"Consider age ranges closer to your own age for better compatibility",
					"AGE_PREFERENCE_DISTANT",
					type="warning",
					priority="low",
				))

		logger.debug(f"Business rules validation completed: {[i.code for i in issues]}")
		return issues

	def validate_all_preferences(self, data: Mapping[str, Any]) -> ValidationResult:
		started = time.monotonic()
		fields = all_fields()
		logger.info(f"Starting preference validation over {len(data)} submitted field(s)")

		errors: List[ValidationIssue] = []
		warnings: List[ValidationIssue] = []

		issues = [self.validate_field(f, data.get(f.name)) for f in fields]
		issues += self.validate_cross_field(data)
		issues += self.validate_business_rules(data)

		for issue in issues:
			if issue is None:
				continue
			if issue.type == "error":
				errors.append(issue)
			else:
				warnings.append(issue)

		field_errors: Dict[str, ValidationIssue] = {}
		for issue in errors + warnings:
			existing = field_errors.get(issue.field)
			if existing is None or (issue.type == "error" and existing.type != "error"):
				field_errors[issue.field] = issue

		configured = {f.name for f in fields}
		filled = [name for name, value in data.items() if name in configured and is_filled(value)]
		completion_score = round_half_up(len(filled) / len(fields) * 100)

		missing_required = [
			name for name in get_required_field_names()
			if not data.get(name) or (isinstance(data.get(name), (list, tuple)) and len(data.get(name)) == 0)
		]

		summary = ValidationSummary(
			total_errors=len(errors),
			total_warnings=len(warnings),
			critical_errors=len([e for e in errors if e.priority == "high"]),
			completion_score=completion_score,
			missing_required_fields=missing_required,
			recommendations=self.generate_recommendations(data, warnings),
		)

		self._errors = errors
		self._warnings = warnings

		result = ValidationResult(
			is_valid=not errors,
			errors=errors,
			warnings=warnings,
			field_errors=field_errors,
			summary=summary,
		)

		duration_ms = int((time.monotonic() - started) * 1000)
		logger.info(
			f"Preference validation completed in {duration_ms}ms: "
			f"{len(errors)} error(s), {len(warnings)} warning(s), completion {completion_score}%"
		)
		return result

	def generate_recommendations(self, data: Mapping[str, Any], warnings: Sequence[ValidationIssue]) -> List[str]:
		recommendations = []

		if len(data.get("hobbies") or []) < 3:
			recommendations.append("Add more hobbies to find better matches")

		if len(data.get("interests") or []) < 3:
			recommendations.append("Add more interests to improve compatibility")

		if len(data.get("personality_traits") or []) < 3:
			recommendations.append("Select personality traits for deeper connections")

		if not data.get("relationship_goals"):
			recommendations.append("Specify your relationship goals")

		if not data.get("what_other_person_should_know"):
			recommendations.append("Add a personal note to stand out")

		if any(w.code == "AGE_RANGE_TOO_WIDE" for w in warnings):
			recommendations.append("Consider narrowing your age range for better matches")

		return recommendations[:MAX_RECOMMENDATIONS]

	def get_field_error(self, field_name: str) -> Optional[ValidationIssue]:
		for issue in self._errors + self._warnings:
			if issue.field == field_name:
				return issue
		return None

	def get_field_errors(self) -> Dict[str, str]:
		messages: Dict[str, str] = {}
		types: Dict[str, str] = {}
		for issue in self._errors + self._warnings:
			if issue.field not in messages or (issue.type == "error" and types[issue.field] != "error"):
				messages[issue.field] = issue.message
				types[issue.field] = issue.type
		return messages

	def clear_errors(self, field_names: Sequence[str]) -> None:
		names = set(field_names)
		self._errors = [e for e in self._errors if e.field not in names]
		self._warnings = [w for w in self._warnings if w.field not in names]
		self.cache.invalidate(names)
		logger.debug(f"Cleared validation state for {sorted(names)}")

	def clear_all_errors(self) -> None:
		self._errors = []
		self._warnings = []
		self.cache.clear()
		logger.debug("Cleared all validation state")
