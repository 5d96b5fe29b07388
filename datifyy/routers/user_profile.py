from typing import Optional

from fastapi import APIRouter, Depends, Header, Request

from datifyy.auth import verify_token
from datifyy.responses import success
from datifyy.schemas import UpdateUserAvatarRequest, UpdateUserProfileRequest
from datifyy.services import profile_service
from supabase_client import get_supabase_client

router = APIRouter(prefix="/user-profile", tags=["user-profile"])

@router.get("")
async def get_profile(request: Request, user_id: str = Depends(verify_token), client=Depends(get_supabase_client)):
	profile = profile_service.get_user_profile(client, user_id)
	return success(request, profile, "User profile retrieved successfully")

@router.put("")
async def update_profile(
	body: UpdateUserProfileRequest,
	request: Request,
	user_id: str = Depends(verify_token),
	client=Depends(get_supabase_client),
	if_match: Optional[str] = Header(None, alias="If-Match"),
):
	"""Partial update; send If-Match with the last seen last_updated to reject stale writes"""
	profile = profile_service.update_user_profile(client, user_id, body, if_match)
	return success(request, profile, "User profile updated successfully")

@router.delete("")
async def delete_profile(request: Request, user_id: str = Depends(verify_token), client=Depends(get_supabase_client)):
	profile_service.delete_user_profile(client, user_id)
	return success(request, None, "User profile deleted successfully")

@router.patch("/avatar")
async def update_avatar(
	body: UpdateUserAvatarRequest,
	request: Request,
	user_id: str = Depends(verify_token),
	client=Depends(get_supabase_client),
):
	profile = profile_service.update_user_avatar(client, user_id, body.image_url, body.set_as_primary is not False)
	return success(request, profile, "Avatar updated successfully")

@router.get("/stats")
async def get_profile_stats(request: Request, user_id: str = Depends(verify_token), client=Depends(get_supabase_client)):
	stats = profile_service.get_user_profile_stats(client, user_id)
	return success(request, stats, "Profile statistics retrieved successfully")

@router.get("/completeness")
async def get_profile_completeness(request: Request, user_id: str = Depends(verify_token), client=Depends(get_supabase_client)):
	completeness = profile_service.validate_profile_completeness(client, user_id)
	return success(request, completeness, "Profile completeness calculated")

@router.get("/exists")
async def profile_exists(request: Request, user_id: str = Depends(verify_token), client=Depends(get_supabase_client)):
	exists = profile_service.does_user_profile_exist(client, user_id)
	return success(request, {"exists": exists})

@router.post("/validate")
async def validate_profile(
	body: UpdateUserProfileRequest,
	request: Request,
	user_id: str = Depends(verify_token),
	client=Depends(get_supabase_client),
):
	result = profile_service.check_profile_update(client, user_id, body)
	return success(request, result, "Validation completed")
