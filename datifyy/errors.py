"""
Domain errors raised by the service layer.
Translated to the JSON error envelope by the handlers registered in main.py
"""
from typing import Any, List, Optional


class DomainError(Exception):
	status_code = 500
	code = "INTERNAL_ERROR"

	def __init__(self, message: str, details: Optional[Any] = None):
		super().__init__(message)
		self.message = message
		self.details = details


class UserNotFoundError(DomainError):
	status_code = 404
	code = "USER_NOT_FOUND"

	def __init__(self, message: str = "User profile not found"):
		super().__init__(message)


class PreferencesNotFoundError(DomainError):
	status_code = 404
	code = "PREFERENCES_NOT_FOUND"

	def __init__(self, user_id: str):
		super().__init__(f"Partner preferences not found for user {user_id}")
		self.user_id = user_id


class ValidationError(DomainError):
	status_code = 400
	code = "VALIDATION_ERROR"


class InvalidPreferencesError(ValidationError):
	code = "INVALID_PREFERENCES"

	def __init__(self, issues: List[Any]):
		super().__init__("Partner preferences failed validation", details=issues)
		self.issues = issues


class DuplicateEmailError(DomainError):
	"""Reserved for account signup; profile updates never write official_email"""
	status_code = 409
	code = "DUPLICATE_EMAIL"


class StaleWriteError(DomainError):
	status_code = 409
	code = "STALE_WRITE"

	def __init__(self, message: str = "Record was modified by another request"):
		super().__init__(message)


class DatabaseConnectionError(DomainError):
	status_code = 500
	code = "DATABASE_ERROR"

	def __init__(self, message: str = "Database operation failed"):
		super().__init__(message)
