SIGN_IN_REQUIRED = {
    "error": "Please sign in to continue.",
    "title": "Sign in required",
    "code": "unauthorized",
}


def current_user(params):
    """Signed-in user attached by the server, or None"""
    user = params.get("user")
    if user and user.get("id"):
        return user
    return None


def backend_error(description, title="Error"):
    return {"error": description, "title": title, "code": "backend_error"}
