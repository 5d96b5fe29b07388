from typing import Optional

from supabase import create_client, Client

from datifyy.config import SUPABASE_URL, SUPABASE_KEY

_client: Optional[Client] = None


def get_supabase_client() -> Client:
	global _client
	if not SUPABASE_URL or not SUPABASE_KEY:
		raise RuntimeError("SUPABASE_URL and SUPABASE_KEY must be set in env")
	if _client is None:
		_client = create_client(SUPABASE_URL, SUPABASE_KEY)
	return _client


def masked_key() -> Optional[str]:
	if not SUPABASE_KEY:
		return None
	if len(SUPABASE_KEY) <= 8:
		return "*" * len(SUPABASE_KEY)
	return SUPABASE_KEY[:4] + "..." + SUPABASE_KEY[-4:]
