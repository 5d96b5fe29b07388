import logging

from fastapi import HTTPException, Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
import jwt
from jwt import PyJWTError

from datifyy import config
from datifyy.config import PROFILE_TABLE
from supabase_client import get_supabase_client

logger = logging.getLogger(__name__)

security = HTTPBearer()

async def verify_token(credentials: HTTPAuthorizationCredentials = Depends(security)) -> str:
	token = credentials.credentials
	try:
		payload = jwt.decode(token, config.JWT_SECRET, algorithms=config.JWT_ALGORITHMS)
	except PyJWTError as e:
		logger.warning(f"Rejected bearer token: {e}")
		raise HTTPException(status_code=401, detail="Invalid token")

	user_id = payload.get("sub")
	if user_id is None:
		raise HTTPException(status_code=401, detail="Invalid token")
	return str(user_id)

def require_admin(user_id: str = Depends(verify_token), client=Depends(get_supabase_client)) -> str:
	resp = client.table(PROFILE_TABLE).select("is_admin").eq("user_login_id", user_id).limit(1).execute()
	if not resp.data or not resp.data[0].get("is_admin"):
		logger.warning(f"Admin access denied for user {user_id}")
		raise HTTPException(status_code=403, detail="Admin access required")
	return user_id
