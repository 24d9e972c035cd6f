import logging

import jwt
from jwt.exceptions import InvalidTokenError

from foodhub import config
from foodhub.supabase_client import BackendError, get_backend

logger = logging.getLogger(__name__)


def verify_access_token(token, jwt_secret):
    """Verify a backend-issued access token signature"""
    try:
        decoded = jwt.decode(
            token,
            jwt_secret,
            algorithms=["HS256"],
            audience="authenticated",
        )
        return True, decoded
    except InvalidTokenError as e:
        return False, str(e)


def bearer_token(authorization):
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def resolve_user(authorization):
    """Return the signed-in user for an Authorization header, or None"""
    token = bearer_token(authorization)
    if not token:
        return None

    if config.SUPABASE_JWT_SECRET:
        valid, claims = verify_access_token(token, config.SUPABASE_JWT_SECRET)
        if not valid:
            logger.info(f"[AUTH] Rejected token: {claims}")
            return None
        return {"id": claims.get("sub"), "email": claims.get("email"), "access_token": token}

    # No local secret: ask the auth API who owns the token
    try:
        user = get_backend().get_user(token)
    except BackendError as e:
        logger.info(f"[AUTH] Token lookup failed: {e.message}")
        return None
    return {"id": user.get("id"), "email": user.get("email"), "access_token": token}
