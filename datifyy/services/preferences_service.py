"""
Partner preferences service
Stored preferences are always re-validated as a whole: updates are merged with the
existing record first, so cross-field rules see both halves of a range.
"""
import logging
from datetime import datetime
from typing import Any, Dict, Mapping, Optional

from datifyy.config import PREFERENCES_TABLE
from datifyy.errors import InvalidPreferencesError, PreferencesNotFoundError, StaleWriteError
from datifyy.schemas import (
	PartnerPreferencesResponse,
	PartnerPreferencesUpdate,
	PreferencesCompleteness,
	ValidationResult,
)
from datifyy.services.preference_form import all_fields, get_required_field_names
from datifyy.services.preference_validation import PreferenceValidator, is_filled, round_half_up
from datifyy.services.profile_mapper import safe_age
from datifyy.services.profile_service import get_active_profile, run_query

logger = logging.getLogger(__name__)


def find_preferences(client, user_id: str) -> Optional[Dict[str, Any]]:
	resp = run_query(
		client.table(PREFERENCES_TABLE).select("*").eq("user_id", user_id).limit(1),
		"load partner preferences",
	)
	return resp.data[0] if resp.data else None


def preference_values(row: Mapping[str, Any]) -> Dict[str, Any]:
	"""Strip bookkeeping columns, leaving only configured preference fields"""
	configured = {f.name for f in all_fields()}
	return {key: value for key, value in row.items() if key in configured}


def validator_for(profile: Optional[Mapping[str, Any]]) -> PreferenceValidator:
	# Age-distance hints are measured from the user's own age when we know it
	age = safe_age(profile.get("dob")) if profile else None
	return PreferenceValidator(reference_age=age)


def calculate_preferences_completeness(preferences: Mapping[str, Any]) -> PreferencesCompleteness:
	fields = all_fields()
	filled = [f.name for f in fields if is_filled(preferences.get(f.name))]
	missing_required = [name for name in get_required_field_names() if not is_filled(preferences.get(name))]
	return PreferencesCompleteness(
		is_complete=not missing_required,
		missing_fields=missing_required,
		completion_percentage=round_half_up(len(filled) / len(fields) * 100),
	)


def _to_response(row: Mapping[str, Any], result: ValidationResult) -> PartnerPreferencesResponse:
	return PartnerPreferencesResponse(
		preferences=preference_values(row),
		completion_percentage=result.summary.completion_score,
		validation=result.summary,
		warnings=result.warnings,
		last_updated=row.get("updated_at"),
	)


def get_partner_preferences(client, user_id: str) -> Optional[PartnerPreferencesResponse]:
	profile = get_active_profile(client, user_id)
	row = find_preferences(client, user_id)
	if not row:
		logger.info(f"No partner preferences stored for user {user_id}")
		return None

	result = validator_for(profile).validate_all_preferences(preference_values(row))
	return _to_response(row, result)


def update_partner_preferences(
	client,
	user_id: str,
	dto: PartnerPreferencesUpdate,
	if_match: Optional[str] = None,
) -> PartnerPreferencesResponse:
	profile = get_active_profile(client, user_id)
	existing = find_preferences(client, user_id)
	changes = dto.model_dump(mode="json", exclude_unset=True)

	merged = preference_values(existing) if existing else {}
	merged.update(changes)

	result = validator_for(profile).validate_all_preferences(merged)
	if not result.is_valid:
		logger.warning(f"Rejected partner preferences update for user {user_id}: {[e.code for e in result.errors]}")
		raise InvalidPreferencesError([e.model_dump() for e in result.errors])

	now = datetime.utcnow().isoformat()
	if existing:
		query = client.table(PREFERENCES_TABLE).update({**changes, "updated_at": now}).eq("user_id", user_id)
		if if_match:
			query = query.eq("updated_at", if_match)
		resp = run_query(query, "update partner preferences")
		if not resp.data:
			logger.warning(f"Stale partner preferences write rejected for user {user_id}")
			raise StaleWriteError("Partner preferences were modified since they were last read")
	else:
		if if_match:
			raise StaleWriteError("Partner preferences were deleted since they were last read")
		resp = run_query(
			client.table(PREFERENCES_TABLE).insert({**changes, "user_id": user_id, "created_at": now, "updated_at": now}),
			"create partner preferences",
		)

	logger.info(
		f"Partner preferences {'updated' if existing else 'created'} for user {user_id}: "
		f"{sorted(changes)}, completion {result.summary.completion_score}%"
	)
	return _to_response(resp.data[0], result)


def delete_partner_preferences(client, user_id: str) -> None:
	get_active_profile(client, user_id)
	if not find_preferences(client, user_id):
		raise PreferencesNotFoundError(user_id)

	run_query(client.table(PREFERENCES_TABLE).delete().eq("user_id", user_id), "delete partner preferences")
	logger.info(f"Partner preferences deleted for user {user_id}")


def validate_partner_preferences(client, user_id: str, data: Mapping[str, Any]) -> ValidationResult:
	"""Dry run of the full validation pass; nothing is stored"""
	profile = get_active_profile(client, user_id)
	return validator_for(profile).validate_all_preferences(data)


def get_preferences_completeness(client, user_id: str) -> PreferencesCompleteness:
	get_active_profile(client, user_id)
	row = find_preferences(client, user_id)
	if not row:
		raise PreferencesNotFoundError(user_id)

	completeness = calculate_preferences_completeness(row)
	logger.debug(
		f"Preferences completeness for user {user_id}: {completeness.completion_percentage}%, "
		f"complete={completeness.is_complete}"
	)
	return completeness
