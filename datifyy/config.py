import os

from dotenv import load_dotenv

load_dotenv()

SUPABASE_URL = os.getenv("SUPABASE_URL")
SUPABASE_KEY = os.getenv("SUPABASE_KEY")

# Tokens are HS256-signed; the Supabase key doubles as the secret when no dedicated one is set
JWT_SECRET = os.getenv("JWT_SECRET") or SUPABASE_KEY
JWT_ALGORITHMS = ["HS256"]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

VALIDATION_CACHE_TTL_SECONDS = int(os.getenv("VALIDATION_CACHE_TTL_SECONDS", 300))

# Table names
PROFILE_TABLE = "datifyy_users_information"
PREFERENCES_TABLE = "datifyy_user_partner_preferences"
AUDIT_LOG_TABLE = "audit_logs"
