import pytest

from datifyy.services.profile_completeness import (
	OPTIONAL_FIELDS,
	REQUIRED_FIELDS,
	build_profile_stats,
	calculate_completeness,
	calculate_completion_percentage,
	determine_profile_strength,
	is_field_filled,
)

REQUIRED_ONLY = {
	"first_name": "Jess",
	"last_name": "Lee",
	"gender": "Female",
	"dob": "1995-05-05",
	"current_city": "Pune",
	"looking_for": "Relationship",
}


def test_required_fields_make_profile_complete():
	result = calculate_completeness(REQUIRED_ONLY)

	assert result.is_complete
	assert set(result.missing_fields) == set(OPTIONAL_FIELDS)
	assert result.completion_percentage == 26  # 6 of 23, rounded


def test_missing_required_field_blocks_completeness():
	profile = dict(REQUIRED_ONLY, current_city="  ")
	result = calculate_completeness(profile)

	assert not result.is_complete
	assert "current_city" in result.missing_fields


def test_empty_profile_scores_zero():
	result = calculate_completeness({})
	assert result.completion_percentage == 0
	assert result.missing_fields == REQUIRED_FIELDS + OPTIONAL_FIELDS


def test_full_profile_scores_hundred():
	profile = dict(REQUIRED_ONLY)
	for field in OPTIONAL_FIELDS:
		profile[field] = ["x"] if field in ("images", "fav_interest", "causes_you_support", "quality_you_value") else "x"
	assert calculate_completeness(profile).completion_percentage == 100


def test_percentage_never_decreases_when_filling_fields():
	profile = {}
	previous = calculate_completeness(profile).completion_percentage
	for field in REQUIRED_FIELDS + OPTIONAL_FIELDS:
		profile[field] = "value"
		current = calculate_completeness(profile).completion_percentage
		assert 0 <= current <= 100
		assert current >= previous
		previous = current


@pytest.mark.parametrize("value,filled", [
	(None, False),
	("", False),
	("   ", False),
	([], False),
	(False, True),
	(0, True),
	(float("nan"), False),
	({"city": "Pune"}, True),
])
def test_is_field_filled(value, filled):
	assert is_field_filled(value) is filled


@pytest.mark.parametrize("percentage,strength", [
	(100, "complete"),
	(95, "complete"),
	(94, "strong"),
	(80, "strong"),
	(60, "moderate"),
	(59, "weak"),
	(0, "weak"),
])
def test_profile_strength(percentage, strength):
	assert determine_profile_strength(percentage) == strength


def test_stats_include_structured_sections():
	stats = build_profile_stats(dict(REQUIRED_ONLY, updated_at="2024-01-01T00:00:00"))

	assert "prompts" in stats.optional_fields
	assert "education" in stats.missing_fields
	assert stats.completion_percentage == calculate_completion_percentage(REQUIRED_ONLY) == 24
	assert stats.profile_strength == "weak"
	assert len(stats.recommendations) == 3
	assert stats.recommendations[0].startswith("Add profile photos")
	assert stats.verification_status.email is False
	assert stats.last_updated == "2024-01-01T00:00:00"
