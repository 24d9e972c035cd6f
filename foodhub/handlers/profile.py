import logging

from foodhub.handlers.session import SIGN_IN_REQUIRED, backend_error, current_user
from foodhub.restaurant_data import (
    DEFAULT_NOTIFICATION_SETTINGS, DIETARY_OPTIONS, NOTIFICATION_SETTINGS,
)
from foodhub.supabase_client import BackendError, get_backend

logger = logging.getLogger(__name__)

PROFILE_FIELDS = ["full_name", "phone", "dietary_preferences"]


def toggle_dietary_preference(preferences, preference):
    if preference in preferences:
        return [p for p in preferences if p != preference]
    return [*preferences, preference]


def fetch_profile(backend, user_id):
    rows = backend.table("profiles").select("*").eq("user_id", user_id).execute() or []
    return rows[0] if rows else None


async def get_profile(params):
    user = current_user(params)
    if not user:
        return SIGN_IN_REQUIRED
    try:
        profile = fetch_profile(get_backend(user["access_token"]), user["id"])
    except BackendError as e:
        logger.error(f"[PROFILE] Load failed: {e.message}")
        return backend_error("There was an issue loading your information.", title="Error loading data")
    return {
        "profile": profile,
        "email": user.get("email"),
        "dietary_options": DIETARY_OPTIONS,
        "display_initial": ((profile or {}).get("full_name") or user.get("email") or "?")[0].upper(),
    }


async def update_profile(params):
    """Save name, phone and dietary preferences"""
    user = current_user(params)
    if not user:
        return SIGN_IN_REQUIRED

    changes = {f: params[f] for f in PROFILE_FIELDS if f in params}
    toggled = params.get("toggle_dietary_preference")
    if not changes and not toggled:
        return {"error": f"Nothing to update. Editable fields: {', '.join(PROFILE_FIELDS)}"}

    backend = get_backend(user["access_token"])
    try:
        profile = fetch_profile(backend, user["id"])
        if not profile:
            return {"error": "Profile not found", "code": "not_found"}

        if toggled:
            base = changes.get("dietary_preferences")
            if base is None:
                base = profile.get("dietary_preferences") or []
            changes["dietary_preferences"] = toggle_dietary_preference(base, toggled)

        preferences = changes.get("dietary_preferences")
        if preferences is not None:
            if not isinstance(preferences, list):
                return {"error": "Dietary preferences must be a list"}
            unknown = [p for p in preferences if p not in DIETARY_OPTIONS]
            if unknown:
                return {"error": f"Unknown dietary preferences: {', '.join(unknown)}"}

        rows = (
            backend.table("profiles")
            .update(changes)
            .eq("id", profile["id"])
            .select("*")
            .execute()
        ) or []
    except BackendError as e:
        logger.error(f"[PROFILE] Update failed: {e.message}")
        return backend_error("Failed to update profile. Please try again.")

    logger.info(f"[PROFILE] Updated {', '.join(changes)} for {user['id']}")
    return {
        "success": True,
        "profile": rows[0] if rows else {**profile, **changes},
        "title": "Profile updated",
        "message": "Your profile has been updated successfully.",
    }


def settings_for(user_id):
    return {**DEFAULT_NOTIFICATION_SETTINGS, **NOTIFICATION_SETTINGS.get(user_id, {})}


async def get_notification_settings(params):
    user = current_user(params)
    if not user:
        return SIGN_IN_REQUIRED
    return {"settings": settings_for(user["id"])}


async def update_notification_settings(params):
    user = current_user(params)
    if not user:
        return SIGN_IN_REQUIRED

    changes = {k: params[k] for k in DEFAULT_NOTIFICATION_SETTINGS if k in params}
    if not changes:
        return {"error": f"Known settings: {', '.join(DEFAULT_NOTIFICATION_SETTINGS)}"}
    invalid = [k for k, v in changes.items() if not isinstance(v, bool)]
    if invalid:
        return {"error": f"Settings must be true or false: {', '.join(invalid)}"}

    NOTIFICATION_SETTINGS.setdefault(user["id"], {}).update(changes)
    return {"success": True, "settings": settings_for(user["id"])}
