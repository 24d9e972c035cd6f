import logging

from foodhub.handlers.session import SIGN_IN_REQUIRED, current_user
from foodhub.supabase_client import BackendError, get_backend

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


def _session_payload(session):
    user = session.get("user") or {}
    return {
        "access_token": session.get("access_token"),
        "refresh_token": session.get("refresh_token"),
        "expires_in": session.get("expires_in"),
        "user": {"id": user.get("id"), "email": user.get("email")},
    }


async def sign_up(params):
    email = (params.get("email") or "").strip()
    password = params.get("password") or ""
    if not email or len(password) < MIN_PASSWORD_LENGTH:
        return {"error": f"Email and a password of at least {MIN_PASSWORD_LENGTH} characters are required"}

    data = {"full_name": params["full_name"]} if params.get("full_name") else {}
    try:
        result = get_backend().sign_up(email, password, data)
    except BackendError as e:
        logger.info(f"[AUTH] Sign up rejected: {e.message}")
        return {"error": e.message, "title": "Sign up failed"}

    logger.info("[AUTH] New account created")
    if result.get("access_token"):
        return {"success": True, **_session_payload(result)}
    return {
        "success": True,
        "message": "Check your email to confirm your account.",
    }


async def sign_in(params):
    email = (params.get("email") or "").strip()
    password = params.get("password") or ""
    if not email or not password:
        return {"error": "Email and password are required"}
    try:
        session = get_backend().sign_in_with_password(email, password)
    except BackendError as e:
        logger.info(f"[AUTH] Sign in rejected: {e.message}")
        return {"error": "Invalid email or password", "title": "Sign in failed", "code": "unauthorized"}
    return {"success": True, **_session_payload(session)}


async def refresh_session(params):
    """Exchange a refresh token for a new session"""
    refresh_token = params.get("refresh_token")
    if not refresh_token:
        return {"error": "Refresh token is required"}
    try:
        session = get_backend().refresh_session(refresh_token)
    except BackendError as e:
        logger.info(f"[AUTH] Refresh rejected: {e.message}")
        return {
            "error": "Your session has expired. Please sign in again.",
            "title": "Session expired",
            "code": "unauthorized",
        }
    return {"success": True, **_session_payload(session)}


async def sign_out(params):
    user = current_user(params)
    if not user:
        return SIGN_IN_REQUIRED
    try:
        get_backend().sign_out(user["access_token"])
    except BackendError as e:
        # Token may already be revoked
        logger.info(f"[AUTH] Sign out: {e.message}")
    return {"success": True}
