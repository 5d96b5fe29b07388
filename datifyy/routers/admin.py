from typing import Optional

from fastapi import APIRouter, Depends, Query, Request

from datifyy.auth import require_admin
from datifyy.responses import success
from datifyy.schemas import UpdateVerificationStatusRequest
from datifyy.services import admin_service
from supabase_client import get_supabase_client

router = APIRouter(prefix="/admin", tags=["admin"])

@router.get("/users")
async def search_users(
	request: Request,
	admin_id: str = Depends(require_admin),
	client=Depends(get_supabase_client),
	query: str = Query(""),
	gender: Optional[str] = Query(None),
	city: Optional[str] = Query(None),
	verified: Optional[bool] = Query(None),
	include_deleted: bool = Query(False),
	limit: int = Query(50, ge=1, le=100),
	offset: int = Query(0, ge=0)
):
	page = admin_service.search_users(
		client,
		query=query,
		gender=gender,
		city=city,
		verified=verified,
		include_deleted=include_deleted,
		limit=limit,
		offset=offset,
	)
	return success(request, page)

@router.patch("/users/{user_id}/verification")
async def update_verification(
	user_id: str,
	body: UpdateVerificationStatusRequest,
	request: Request,
	admin_id: str = Depends(require_admin),
	client=Depends(get_supabase_client),
):
	profile = admin_service.update_verification(
		client, admin_id, user_id, body.verification_type.value, body.status, body.reason
	)
	return success(request, profile, "Verification status updated")

@router.post("/users/{user_id}/suspend")
async def suspend_user(
	user_id: str,
	request: Request,
	admin_id: str = Depends(require_admin),
	client=Depends(get_supabase_client),
):
	return success(request, admin_service.set_suspended(client, admin_id, user_id, True), "User suspended")

@router.post("/users/{user_id}/unsuspend")
async def unsuspend_user(
	user_id: str,
	request: Request,
	admin_id: str = Depends(require_admin),
	client=Depends(get_supabase_client),
):
	return success(request, admin_service.set_suspended(client, admin_id, user_id, False), "User unsuspended")
