from datetime import date
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from datifyy.enums import (
	Gender, Exercise, ProfileEducationLevel, DrinkingHabit, SmokingHabit,
	LookingFor, SettleDownTimeframe, StarSign, Pronoun, VerificationType,
)

# Validation results

class ValidationIssue(BaseModel):
	model_config = ConfigDict(frozen=True)

	field: str
	message: str
	type: Literal["error", "warning"]
	priority: Literal["high", "medium", "low"]
	code: Optional[str] = None

class ValidationSummary(BaseModel):
	total_errors: int
	total_warnings: int
	critical_errors: int
	completion_score: int
	missing_required_fields: List[str]
	recommendations: List[str]

class ValidationResult(BaseModel):
	is_valid: bool
	errors: List[ValidationIssue]
	warnings: List[ValidationIssue]
	field_errors: Dict[str, ValidationIssue]
	summary: ValidationSummary

# Profile

class UpdateUserProfileRequest(BaseModel):
	model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

	first_name: Optional[str] = Field(None, min_length=1, max_length=50)
	last_name: Optional[str] = Field(None, min_length=1, max_length=50)
	gender: Optional[Gender] = None
	bio: Optional[str] = Field(None, max_length=500)
	images: Optional[List[str]] = Field(None, max_length=6)
	dob: Optional[date] = None
	height: Optional[int] = Field(None, ge=100, le=250)
	current_city: Optional[str] = Field(None, max_length=100)
	hometown: Optional[str] = Field(None, max_length=100)
	exercise: Optional[Exercise] = None
	education_level: Optional[ProfileEducationLevel] = None
	drinking: Optional[DrinkingHabit] = None
	smoking: Optional[SmokingHabit] = None
	looking_for: Optional[LookingFor] = None
	settle_down_in_months: Optional[SettleDownTimeframe] = None
	have_kids: Optional[bool] = None
	wants_kids: Optional[bool] = None
	star_sign: Optional[StarSign] = None
	religion: Optional[str] = Field(None, max_length=50)
	pronoun: Optional[Pronoun] = None
	fav_interest: Optional[List[str]] = Field(None, max_length=10)
	causes_you_support: Optional[List[str]] = Field(None, max_length=10)
	quality_you_value: Optional[List[str]] = Field(None, max_length=10)
	prompts: Optional[List[Dict[str, Any]]] = Field(None, max_length=5)
	education: Optional[List[Dict[str, Any]]] = Field(None, max_length=5)
	# Accepted so clients can send a full profile back, but never written
	official_email: Optional[str] = None

	@field_validator("gender", mode="before")
	@classmethod
	def normalize_gender(cls, value):
		if isinstance(value, str):
			return value.strip().lower()
		return value

class UpdateUserAvatarRequest(BaseModel):
	model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

	image_url: str = Field(..., min_length=1)
	set_as_primary: Optional[bool] = True

class UpdateVerificationStatusRequest(BaseModel):
	model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

	verification_type: VerificationType
	status: bool
	reason: Optional[str] = Field(None, max_length=200)

class UserProfileResponse(BaseModel):
	id: str
	first_name: str
	last_name: str
	email: Optional[str] = None
	gender: Optional[str] = None
	bio: Optional[str] = None
	images: Optional[List[str]] = None
	dob: Optional[str] = None
	age: Optional[int] = None
	is_official_email_verified: bool = False
	is_aadhar_verified: bool = False
	is_phone_verified: bool = False
	height: Optional[int] = None
	current_city: Optional[str] = None
	hometown: Optional[str] = None
	exercise: Optional[str] = None
	education_level: Optional[str] = None
	drinking: Optional[str] = None
	smoking: Optional[str] = None
	looking_for: Optional[str] = None
	settle_down_in_months: Optional[str] = None
	have_kids: Optional[bool] = None
	wants_kids: Optional[bool] = None
	star_sign: Optional[str] = None
	religion: Optional[str] = None
	pronoun: Optional[str] = None
	fav_interest: Optional[List[str]] = None
	causes_you_support: Optional[List[str]] = None
	quality_you_value: Optional[List[str]] = None
	prompts: Optional[List[Dict[str, Any]]] = None
	education: Optional[List[Dict[str, Any]]] = None
	profile_completion_percentage: int = 0
	last_updated: Optional[str] = None
	# Soft issues from the last update; never block the save
	warnings: List[ValidationIssue] = []

class UserProfileSummary(BaseModel):
	id: str
	first_name: str
	last_name: str
	age: Optional[int] = None
	current_city: Optional[str] = None
	images: Optional[List[str]] = None
	bio: Optional[str] = None
	looking_for: Optional[str] = None
	is_verified: bool = False
	is_deleted: bool = False
	profile_completion_percentage: int = 0

class VerificationStatus(BaseModel):
	email: bool = False
	phone: bool = False
	aadhar: bool = False

class UserProfileStats(BaseModel):
	completion_percentage: int
	missing_fields: List[str]
	required_fields: List[str]
	optional_fields: List[str]
	verification_status: VerificationStatus
	profile_strength: Literal["weak", "moderate", "strong", "complete"]
	recommendations: List[str]
	last_updated: Optional[str] = None

class ProfileCompleteness(BaseModel):
	is_complete: bool
	missing_fields: List[str]
	completion_percentage: int

# Partner preferences

class PartnerPreferencesUpdate(BaseModel):
	"""
	Partial partner preferences payload.
	Types are enforced here; value rules (ranges, options, cross-field) are
	left to the preference validator so they surface as ValidationIssues.
	"""
	model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

	gender_preference: Optional[str] = None
	min_age: Optional[int] = None
	max_age: Optional[int] = None
	min_height: Optional[int] = None
	max_height: Optional[int] = None
	location_preference: Optional[Union[str, Dict[str, Any]]] = None
	location_preference_radius: Optional[int] = None
	education_level: Optional[List[str]] = None
	profession: Optional[List[str]] = None
	min_income: Optional[float] = None
	max_income: Optional[float] = None
	currency: Optional[str] = None
	smoking_preference: Optional[str] = None
	drinking_preference: Optional[str] = None
	marital_status: Optional[str] = None
	children_preference: Optional[str] = None
	hobbies: Optional[List[str]] = None
	interests: Optional[List[str]] = None
	books_reading: Optional[List[str]] = None
	music: Optional[List[str]] = None
	movies: Optional[List[str]] = None
	travel: Optional[List[str]] = None
	sports: Optional[List[str]] = None
	personality_traits: Optional[List[str]] = None
	relationship_goals: Optional[str] = None
	activity_level: Optional[str] = None
	pet_preference: Optional[str] = None
	lifestyle_preference: Optional[List[str]] = None
	what_other_person_should_know: Optional[str] = None
	religion: Optional[str] = None

class PartnerPreferencesResponse(BaseModel):
	preferences: Dict[str, Any]
	completion_percentage: int
	validation: ValidationSummary
	warnings: List[ValidationIssue] = []
	last_updated: Optional[str] = None

class PreferencesCompleteness(BaseModel):
	is_complete: bool
	missing_fields: List[str]
	completion_percentage: int
