"""
Partner preferences form configuration
Single source of truth for the preference sections, their fields and per-field rules.

Field kinds are a closed set of dataclasses; check_kind dispatches on the
variant class, so adding a kind means adding a case there.
"""
import re
from dataclasses import dataclass, field as dc_field
from numbers import Real
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from datifyy.enums import (
	GenderPreference, SmokingPreference, DrinkingPreference, MaritalStatus,
	ChildrenPreference, Currency, EducationLevel, Profession, Sports,
	Hobbies, Interests, PersonalityTraits, RelationshipGoals,
	ActivityLevel, PetPreference,
)

# Lower bound differs from the profile form (100 cm)
PREFERENCE_HEIGHT_RANGE = (120, 250)


@dataclass(frozen=True)
class ValidationRule:
	required: bool = False
	min: Optional[float] = None
	max: Optional[float] = None
	min_length: Optional[int] = None
	max_length: Optional[int] = None
	pattern: Optional[str] = None
	custom: Optional[Callable[[Any], Optional[str]]] = None


@dataclass(frozen=True)
class BaseField:
	name: str
	label: str
	priority: str = "medium"  # high | medium | low
	validation: Optional[ValidationRule] = None
	placeholder: Optional[str] = None
	help_text: Optional[str] = None


@dataclass(frozen=True)
class TextField(BaseField):
	pass


@dataclass(frozen=True)
class TextAreaField(BaseField):
	pass


@dataclass(frozen=True)
class NumberField(BaseField):
	pass


@dataclass(frozen=True)
class SliderRangeField(BaseField):
	pass


@dataclass(frozen=True)
class SelectField(BaseField):
	options: Tuple[str, ...] = ()


@dataclass(frozen=True)
class MultiSelectField(BaseField):
	options: Tuple[str, ...] = ()
	max_items: Optional[int] = None


@dataclass(frozen=True)
class MultiSelectTextField(BaseField):
	max_items: Optional[int] = None


@dataclass(frozen=True)
class CitySearchField(BaseField):
	pass


@dataclass(frozen=True)
class ToggleField(BaseField):
	pass


FormField = Union[
	TextField, TextAreaField, NumberField, SliderRangeField, SelectField,
	MultiSelectField, MultiSelectTextField, CitySearchField, ToggleField,
]


@dataclass(frozen=True)
class FormSection:
	id: str
	title: str
	description: str
	priority: str  # essential | important | optional
	fields: List[BaseField] = dc_field(default_factory=list)
	estimated_time: Optional[int] = None  # minutes


def _values(enum_cls) -> Tuple[str, ...]:
	return tuple(member.value for member in enum_cls)


def _min_age_rule(value):
	if isinstance(value, Real) and value < 18:
		return "Minimum age must be 18 or older"
	return None


def _basic_fields() -> List[BaseField]:
	return [
		SelectField(
			name="gender_preference",
			label="Gender Preference",
			placeholder="Select preferred gender",
			help_text="Who would you like to meet?",
			options=_values(GenderPreference),
			validation=ValidationRule(required=True),
			priority="high",
		),
		NumberField(
			name="min_age",
			label="Minimum Age",
			placeholder="18",
			validation=ValidationRule(required=True, min=18, max=100, custom=_min_age_rule),
			priority="high",
		),
		NumberField(
			name="max_age",
			label="Maximum Age",
			placeholder="35",
			validation=ValidationRule(required=True, min=18, max=100),
			priority="high",
		),
		NumberField(
			name="min_height",
			label="Minimum Height (cm)",
			placeholder="150",
			help_text="Height preference in centimeters",
			validation=ValidationRule(min=PREFERENCE_HEIGHT_RANGE[0], max=PREFERENCE_HEIGHT_RANGE[1]),
		),
		NumberField(
			name="max_height",
			label="Maximum Height (cm)",
			placeholder="180",
			validation=ValidationRule(min=PREFERENCE_HEIGHT_RANGE[0], max=PREFERENCE_HEIGHT_RANGE[1]),
		),
	]


def _location_fields() -> List[BaseField]:
	return [
		CitySearchField(
			name="location_preference",
			label="Preferred Location",
			placeholder="Search for a city...",
			help_text="Where would you like to meet people?",
			validation=ValidationRule(required=True),
			priority="high",
		),
		SliderRangeField(
			name="location_preference_radius",
			label="Search Radius (km)",
			help_text="How far are you willing to travel?",
			validation=ValidationRule(min=1, max=1000),
		),
	]


def _education_career_fields() -> List[BaseField]:
	return [
		MultiSelectField(
			name="education_level",
			label="Education Level",
			placeholder="Select education levels",
			help_text="What education backgrounds interest you?",
			options=_values(EducationLevel),
			max_items=5,
		),
		MultiSelectField(
			name="profession",
			label="Preferred Professions",
			placeholder="Select professions",
			help_text="What careers do you find attractive?",
			options=_values(Profession),
			max_items=10,
		),
		NumberField(
			name="min_income",
			label="Minimum Income",
			placeholder="0",
			help_text="Minimum annual income preference",
			validation=ValidationRule(min=0),
			priority="low",
		),
		NumberField(
			name="max_income",
			label="Maximum Income",
			placeholder="1000",
			validation=ValidationRule(min=0),
			priority="low",
		),
		# Required only once an income bound is set; enforced by the cross-field pass
		SelectField(
			name="currency",
			label="Currency",
			options=_values(Currency),
			priority="low",
		),
	]


def _lifestyle_fields() -> List[BaseField]:
	return [
		SelectField(
			name="smoking_preference",
			label="Smoking Preference",
			placeholder="Select smoking preference",
			options=_values(SmokingPreference),
		),
		SelectField(
			name="drinking_preference",
			label="Drinking Preference",
			placeholder="Select drinking preference",
			options=_values(DrinkingPreference),
		),
		SelectField(
			name="marital_status",
			label="Preferred Marital Status",
			placeholder="Select marital status",
			options=_values(MaritalStatus),
			priority="high",
		),
		SelectField(
			name="children_preference",
			label="Children Preference",
			placeholder="Select children preference",
			help_text="Your preference about partners with children",
			options=_values(ChildrenPreference),
			priority="high",
		),
	]


def _interest_fields() -> List[BaseField]:
	return [
		MultiSelectField(
			name="hobbies",
			label="Hobbies",
			placeholder="Select hobbies",
			help_text="What hobbies do you want your partner to enjoy?",
			options=_values(Hobbies),
		),
		MultiSelectField(
			name="interests",
			label="Interests",
			placeholder="Select interests",
			options=_values(Interests),
		),
		MultiSelectTextField(
			name="books_reading",
			label="Favorite Books/Genres",
			placeholder="Add books or genres...",
			help_text="Books or genres you'd like to discuss",
			priority="low",
		),
		MultiSelectTextField(
			name="music",
			label="Music Preferences",
			placeholder="Add artists or genres...",
			priority="low",
		),
		MultiSelectTextField(
			name="movies",
			label="Movie Preferences",
			placeholder="Add movies or genres...",
			priority="low",
		),
		MultiSelectTextField(
			name="travel",
			label="Travel Destinations",
			placeholder="Add countries or cities...",
			help_text="Places you've been or want to visit",
			priority="low",
		),
		MultiSelectField(
			name="sports",
			label="Sports",
			placeholder="Select sports",
			options=_values(Sports),
			priority="low",
		),
	]


def _personality_fields() -> List[BaseField]:
	return [
		MultiSelectField(
			name="personality_traits",
			label="Personality Traits",
			placeholder="Select traits",
			help_text="What personality traits do you value?",
			options=_values(PersonalityTraits),
			max_items=8,
			priority="high",
		),
		SelectField(
			name="relationship_goals",
			label="Relationship Goals",
			placeholder="Select relationship goal",
			help_text="What are you looking for?",
			options=_values(RelationshipGoals),
			validation=ValidationRule(required=True),
			priority="high",
		),
		SelectField(
			name="activity_level",
			label="Activity Level",
			placeholder="Select activity level",
			options=_values(ActivityLevel),
		),
		SelectField(
			name="pet_preference",
			label="Pet Preference",
			placeholder="Select pet preference",
			options=_values(PetPreference),
			priority="low",
		),
		MultiSelectTextField(
			name="lifestyle_preference",
			label="Lifestyle Preferences",
			placeholder="Add lifestyle preferences...",
			help_text="Describe your ideal lifestyle together",
		),
	]


def _additional_fields() -> List[BaseField]:
	return [
		TextAreaField(
			name="what_other_person_should_know",
			label="What Should They Know About You?",
			placeholder="Share something meaningful about yourself...",
			help_text="A personal note that helps others understand you better",
			validation=ValidationRule(max_length=1000),
		),
		TextField(
			name="religion",
			label="Religious Preference",
			placeholder="Your religious preference (optional)",
			priority="low",
		),
	]


PARTNER_PREFERENCES_FORM_CONFIG: List[FormSection] = [
	FormSection(
		id="basic-preferences",
		title="Basic Preferences",
		description="Essential criteria for your ideal partner",
		priority="essential",
		fields=_basic_fields(),
		estimated_time=2,
	),
	FormSection(
		id="location-preferences",
		title="Location & Distance",
		description="Where would you like to meet people?",
		priority="essential",
		fields=_location_fields(),
		estimated_time=1,
	),
	FormSection(
		id="education-career",
		title="Education & Career",
		description="Professional and educational preferences",
		priority="important",
		fields=_education_career_fields(),
		estimated_time=3,
	),
	FormSection(
		id="lifestyle-habits",
		title="Lifestyle & Habits",
		description="Important lifestyle compatibility factors",
		priority="important",
		fields=_lifestyle_fields(),
		estimated_time=2,
	),
	FormSection(
		id="interests-hobbies",
		title="Interests & Hobbies",
		description="Shared interests and activities",
		priority="optional",
		fields=_interest_fields(),
		estimated_time=5,
	),
	FormSection(
		id="personality-goals",
		title="Personality & Goals",
		description="Deep compatibility and relationship goals",
		priority="important",
		fields=_personality_fields(),
		estimated_time=3,
	),
	FormSection(
		id="additional-info",
		title="Additional Information",
		description="Personal touches and special preferences",
		priority="optional",
		fields=_additional_fields(),
		estimated_time=2,
	),
]


def all_fields() -> List[BaseField]:
	return [f for section in PARTNER_PREFERENCES_FORM_CONFIG for f in section.fields]


def get_field_by_name(name: str) -> Optional[BaseField]:
	for f in all_fields():
		if f.name == name:
			return f
	return None


def get_high_priority_fields() -> List[BaseField]:
	return [f for f in all_fields() if f.priority == "high"]


def get_essential_sections() -> List[FormSection]:
	return [s for s in PARTNER_PREFERENCES_FORM_CONFIG if s.priority == "essential"]


def get_total_estimated_time() -> int:
	return sum(s.estimated_time or 0 for s in PARTNER_PREFERENCES_FORM_CONFIG)


def get_required_field_names() -> List[str]:
	return [f.name for f in all_fields() if f.validation and f.validation.required]


def _is_number(value: Any) -> bool:
	return isinstance(value, Real) and not isinstance(value, bool)


def _is_empty(value: Any) -> bool:
	return value is None or value == "" or (isinstance(value, (list, tuple)) and len(value) == 0)


def check_rule(f: BaseField, value: Any) -> Optional[str]:
	rule = f.validation
	if rule is None:
		return None

	if rule.required and _is_empty(value):
		return f"{f.label} is required"

	if rule.min is not None and _is_number(value) and value < rule.min:
		return f"{f.label} must be at least {rule.min:g}"

	if rule.max is not None and _is_number(value) and value > rule.max:
		return f"{f.label} must be at most {rule.max:g}"

	if rule.min_length is not None and isinstance(value, str) and len(value) < rule.min_length:
		return f"{f.label} must be at least {rule.min_length} characters"

	if rule.max_length is not None and isinstance(value, str) and len(value) > rule.max_length:
		return f"{f.label} must be at most {rule.max_length} characters"

	if rule.pattern and isinstance(value, str):
		if not re.search(rule.pattern, value):
			return f"{f.label} format is invalid"

	if rule.custom:
		return rule.custom(value)

	return None


def check_kind(f: BaseField, value: Any) -> Optional[str]:
	if _is_empty(value):
		return None

	match f:
		case NumberField() | SliderRangeField():
			if not _is_number(value):
				return f"{f.label} must be a number"
		case SelectField(options=options):
			if options and value not in options:
				return f"{f.label} must be one of: {', '.join(options)}"
		case MultiSelectField(options=options, max_items=max_items):
			if not isinstance(value, (list, tuple)):
				return f"{f.label} must be a list"
			if max_items is not None and len(value) > max_items:
				return f"Maximum {max_items} {f.label.lower()} allowed"
			unknown = [v for v in value if options and v not in options]
			if unknown:
				return f"{f.label} contains unsupported values: {', '.join(map(str, unknown))}"
		case MultiSelectTextField(max_items=max_items):
			if not isinstance(value, (list, tuple)) or not all(isinstance(v, str) for v in value):
				return f"{f.label} must be a list of text entries"
			if max_items is not None and len(value) > max_items:
				return f"Maximum {max_items} {f.label.lower()} allowed"
		case CitySearchField():
			if isinstance(value, dict):
				if not value.get("city"):
					return f"{f.label} must include a city"
			elif not isinstance(value, str):
				return f"{f.label} must be a city name"
		case TextField() | TextAreaField():
			if not isinstance(value, str):
				return f"{f.label} must be text"
		case ToggleField():
			if not isinstance(value, bool):
				return f"{f.label} must be true or false"
		case _:
			raise TypeError(f"Unsupported field kind: {type(f).__name__}")
	return None


def validate_field_value(f: BaseField, value: Any) -> Optional[str]:
	"""
	Check a value against the field's configured rule and its kind.
	Returns the first failure message, or None.
	"""
	return check_rule(f, value) or check_kind(f, value)


def field_kind(f: BaseField) -> str:
	match f:
		case TextAreaField():
			return "textarea"
		case TextField():
			return "text"
		case SliderRangeField():
			return "slider-range"
		case NumberField():
			return "number"
		case SelectField():
			return "select"
		case MultiSelectField():
			return "multi-select"
		case MultiSelectTextField():
			return "multi-select-text"
		case CitySearchField():
			return "city-search"
		case ToggleField():
			return "toggle"
		case _:
			raise TypeError(f"Unsupported field kind: {type(f).__name__}")


def serialize_form_config() -> List[Dict[str, Any]]:
	sections = []
	for section in PARTNER_PREFERENCES_FORM_CONFIG:
		fields = []
		for f in section.fields:
			rule = f.validation or ValidationRule()
			entry = {
				"name": f.name,
				"label": f.label,
				"type": field_kind(f),
				"priority": f.priority,
				"placeholder": f.placeholder,
				"help_text": f.help_text,
				"validation": {
					"required": rule.required,
					"min": rule.min,
					"max": rule.max,
					"min_length": rule.min_length,
					"max_length": rule.max_length,
				},
			}
			if isinstance(f, (SelectField, MultiSelectField)):
				entry["options"] = list(f.options)
			if isinstance(f, (MultiSelectField, MultiSelectTextField)):
				entry["max_items"] = f.max_items
			fields.append(entry)
		sections.append({
			"id": section.id,
			"title": section.title,
			"description": section.description,
			"priority": section.priority,
			"estimated_time": section.estimated_time,
			"fields": fields,
		})
	return sections
