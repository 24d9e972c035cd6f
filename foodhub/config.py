import os

# Restaurant local time (Nairobi)
TIMEZONE_OFFSET = os.getenv("TIMEZONE_OFFSET", "+03:00")
TIMEZONE_NAME = os.getenv("TIMEZONE_NAME", "Africa/Nairobi")

# Hosted backend (Supabase)
SUPABASE_URL = os.getenv("SUPABASE_URL", "").rstrip("/")
SUPABASE_ANON_KEY = os.getenv("SUPABASE_ANON_KEY", "")
SUPABASE_JWT_SECRET = os.getenv("SUPABASE_JWT_SECRET", "")
BACKEND_TIMEOUT = float(os.getenv("BACKEND_TIMEOUT", "10"))

# AWS Secrets Manager lookup for the keys above
AWS_DEFAULT_REGION = os.getenv("AWS_DEFAULT_REGION", "us-east-1")
SECRETS_PREFIX = os.getenv("SECRETS_PREFIX", "foodhub")

LOGLEVEL = os.getenv("LOGLEVEL", "INFO").upper()
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8080"))
