from typing import Optional

from fastapi import APIRouter, Depends, Header, Request

from datifyy.auth import verify_token
from datifyy.responses import success
from datifyy.schemas import PartnerPreferencesUpdate
from datifyy.services import preferences_service
from datifyy.services.preference_form import get_total_estimated_time, serialize_form_config
from supabase_client import get_supabase_client

router = APIRouter(prefix="/partner-preferences", tags=["partner-preferences"])

@router.get("")
async def get_preferences(request: Request, user_id: str = Depends(verify_token), client=Depends(get_supabase_client)):
	preferences = preferences_service.get_partner_preferences(client, user_id)
	if preferences is None:
		return success(request, None, "No partner preferences set")
	return success(request, preferences, "Partner preferences retrieved successfully")

@router.put("")
async def update_preferences(
	body: PartnerPreferencesUpdate,
	request: Request,
	user_id: str = Depends(verify_token),
	client=Depends(get_supabase_client),
	if_match: Optional[str] = Header(None, alias="If-Match"),
):
	preferences = preferences_service.update_partner_preferences(client, user_id, body, if_match)
	return success(request, preferences, "Partner preferences updated successfully")

@router.delete("")
async def delete_preferences(request: Request, user_id: str = Depends(verify_token), client=Depends(get_supabase_client)):
	preferences_service.delete_partner_preferences(client, user_id)
	return success(request, None, "Partner preferences deleted successfully")

@router.post("/validate")
async def validate_preferences(
	body: PartnerPreferencesUpdate,
	request: Request,
	user_id: str = Depends(verify_token),
	client=Depends(get_supabase_client),
):
	result = preferences_service.validate_partner_preferences(client, user_id, body.model_dump(mode="json", exclude_unset=True))
	return success(request, result, "Validation completed")

@router.get("/completeness")
async def get_completeness(request: Request, user_id: str = Depends(verify_token), client=Depends(get_supabase_client)):
	completeness = preferences_service.get_preferences_completeness(client, user_id)
	return success(request, completeness, "Preferences completeness calculated")

@router.get("/form-config")
async def get_form_config(request: Request, user_id: str = Depends(verify_token)):
	return success(request, {
		"sections": serialize_form_config(),
		"estimated_time": get_total_estimated_time(),
	})
