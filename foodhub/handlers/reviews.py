import logging

from foodhub.handlers.session import SIGN_IN_REQUIRED, backend_error, current_user
from foodhub.restaurant_data import FEATURED_REVIEWS
from foodhub.supabase_client import BackendError, get_backend

logger = logging.getLogger(__name__)


def parse_rating(value, default=None):
    if value is None or value == "":
        return default
    try:
        rating = int(value)
    except (TypeError, ValueError):
        return None
    return rating if 1 <= rating <= 5 else None


def review_stats(reviews):
    """Total, average rating and most recent date (reviews ordered newest first)"""
    total = len(reviews)
    average = round(sum(r["rating"] for r in reviews) / total, 1) if total else 0
    return {
        "total": total,
        "average_rating": average,
        "latest": reviews[0].get("created_at") if reviews else None,
    }


def fetch_user_reviews(backend, user_id):
    return (
        backend.table("reviews")
        .select("*")
        .eq("user_id", user_id)
        .order("created_at", desc=True)
        .execute()
    ) or []


async def get_featured_reviews(params):
    return {"reviews": FEATURED_REVIEWS, "count": len(FEATURED_REVIEWS)}


async def submit_review(params):
    """Post a review from the public reviews section"""
    name = (params.get("name") or "").strip()
    comment = (params.get("review") or "").strip()
    rating = parse_rating(params.get("rating"), default=5)

    if not name or not comment:
        return {"error": "Name and review are required"}
    if rating is None:
        return {"error": "Rating must be between 1 and 5"}

    user = current_user(params)
    backend = get_backend(user["access_token"] if user else None)
    try:
        backend.table("reviews").insert({
            "user_id": user["id"] if user else None,
            "reviewer_name": name,
            "rating": rating,
            "comment": comment,
        }).execute()
    except BackendError as e:
        logger.error(f"[REVIEWS] Submit failed: {e.message}")
        return backend_error("Failed to submit review. Please try again.")

    logger.info(f"[REVIEWS] {rating}-star review from {name}")
    return {
        "success": True,
        "title": "Review submitted",
        "message": "Thank you for sharing your experience!",
    }


async def list_user_reviews(params):
    user = current_user(params)
    if not user:
        return SIGN_IN_REQUIRED
    try:
        reviews = fetch_user_reviews(get_backend(user["access_token"]), user["id"])
    except BackendError as e:
        logger.error(f"[REVIEWS] Listing failed: {e.message}")
        return backend_error("There was an issue loading your information.", title="Error loading data")
    return {"reviews": reviews, "stats": review_stats(reviews)}


async def update_review(params):
    user = current_user(params)
    if not user:
        return SIGN_IN_REQUIRED

    rating = parse_rating(params.get("rating"))
    comment = (params.get("comment") or "").strip()
    if rating is None:
        return {"error": "Rating must be between 1 and 5"}
    if not comment:
        return {"error": "Review text cannot be empty"}

    review_id = params.get("review_id")
    try:
        rows = (
            get_backend(user["access_token"]).table("reviews")
            .update({"rating": rating, "comment": comment})
            .eq("id", review_id)
            .eq("user_id", user["id"])
            .select("*")
            .execute()
        )
    except BackendError as e:
        logger.error(f"[REVIEWS] Update {review_id} failed: {e.message}")
        return backend_error("Failed to update review. Please try again.")
    if not rows:
        return {"error": f"Review {review_id} not found", "code": "not_found"}

    return {
        "success": True,
        "review": rows[0],
        "title": "Review updated",
        "message": "Your review has been updated successfully.",
    }


async def delete_review(params):
    user = current_user(params)
    if not user:
        return SIGN_IN_REQUIRED

    review_id = params.get("review_id")
    try:
        rows = (
            get_backend(user["access_token"]).table("reviews")
            .delete()
            .eq("id", review_id)
            .eq("user_id", user["id"])
            .select("id")
            .execute()
        )
    except BackendError as e:
        logger.error(f"[REVIEWS] Delete {review_id} failed: {e.message}")
        return backend_error("Failed to delete review. Please try again.")
    if not rows:
        return {"error": f"Review {review_id} not found", "code": "not_found"}

    logger.info(f"[REVIEWS] Deleted {review_id}")
    return {
        "success": True,
        "review_id": review_id,
        "title": "Review deleted",
        "message": "Your review has been deleted successfully.",
    }
