"""
FoodHub website service
FastAPI app serving the public page content, cart, reservations, reviews and the customer dashboard
"""
import logging
import uuid

from fastapi import Body, Depends, FastAPI, Header, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from opentelemetry import baggage, context, trace

from foodhub import __version__, config
from foodhub.auth import resolve_user
from foodhub.aws_secrets import setup_credentials
from foodhub.handlers import execute_handler

# Configure logging
logging.basicConfig(level=config.LOGLEVEL, format="%(asctime)s %(message)s")
logger = logging.getLogger(__name__)

logging.getLogger("botocore").setLevel(logging.WARNING)
logging.getLogger("boto3").setLevel(logging.WARNING)

tracer = trace.get_tracer("foodhub.server", __version__)

SESSION_HEADER = "X-Cart-Session"

ERROR_STATUS = {
    "unauthorized": 401,
    "not_found": 404,
    "backend_error": 502,
}

app = FastAPI(title="FoodHub Restaurant Service", version=__version__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=[SESSION_HEADER],
)


@app.on_event("startup")
async def startup_event():
    if config.SUPABASE_URL and config.SUPABASE_ANON_KEY:
        return  # Using settings from environment
    loaded = setup_credentials()
    if loaded:
        logger.info(f"Loaded backend settings from Secrets Manager: {', '.join(loaded)}")
    else:
        logger.error("❌ Backend settings missing: set SUPABASE_URL and SUPABASE_ANON_KEY")


@app.middleware("http")
async def trace_requests(request: Request, call_next):
    # Browsers without a cart session get a fresh one
    session_id = request.headers.get(SESSION_HEADER) or f"session-{uuid.uuid4()}"
    request.state.session_id = session_id

    ctx = baggage.set_baggage("session.id", session_id)
    token = context.attach(ctx)
    try:
        with tracer.start_as_current_span(
            f"{request.method} {request.url.path}",
            kind=trace.SpanKind.SERVER
        ) as span:
            span.set_attribute("http.method", request.method)
            span.set_attribute("http.target", request.url.path)
            span.set_attribute("session.id", session_id)
            try:
                response = await call_next(request)
            except Exception as e:
                logger.error(f"Error: {e}")
                span.set_status(trace.Status(trace.StatusCode.ERROR, str(e)))
                span.record_exception(e)
                raise
            span.set_attribute("http.status_code", response.status_code)
    finally:
        context.detach(token)

    response.headers[SESSION_HEADER] = session_id
    return response


def optional_user(authorization: str = Header(None)):
    return resolve_user(authorization)


def respond(result):
    """Turn a handler result into an HTTP response"""
    if isinstance(result, dict) and "error" in result:
        status = ERROR_STATUS.get(result.get("code"), 400)
        return JSONResponse(result, status_code=status)
    return JSONResponse(result)


async def run(handler_name, params, request=None, user=None):
    params = dict(params or {})
    if request is not None:
        params["session_id"] = request.state.session_id
    if user is not None:
        params["user"] = user
    return respond(await execute_handler(handler_name, params))


@app.get("/ping")
@app.get("/")
async def health_check():
    return JSONResponse({"status": "healthy"})


# Public page

@app.get("/api/site")
async def site_content():
    return await run("get_site_content", {})


@app.get("/api/datetime")
async def current_datetime():
    return await run("get_current_datetime", {})


@app.get("/api/menu")
async def menu(search: str = "", category: str = "all"):
    return await run("get_menu", {"search": search, "category": category})


@app.get("/api/menu/{item_id}")
async def menu_item(item_id: str):
    return await run("get_menu_item", {"item_id": item_id})


@app.get("/api/reviews/featured")
async def featured_reviews():
    return await run("get_featured_reviews", {})


@app.post("/api/reviews")
async def post_review(payload: dict = Body(default={}), user=Depends(optional_user)):
    return await run("submit_review", payload, user=user)


@app.post("/api/newsletter")
async def newsletter(payload: dict = Body(default={})):
    return await run("subscribe_newsletter", payload)


# Cart

@app.get("/api/cart")
async def cart(request: Request):
    return await run("get_cart", {}, request)


@app.post("/api/cart/items")
async def cart_add(request: Request, payload: dict = Body(default={})):
    return await run("add_to_cart", payload, request)


@app.patch("/api/cart/items/{key:path}")
async def cart_update(key: str, request: Request, payload: dict = Body(default={})):
    return await run("update_cart_item", {**payload, "key": key}, request)


@app.delete("/api/cart/items/{key:path}")
async def cart_remove(key: str, request: Request):
    return await run("remove_from_cart", {"key": key}, request)


@app.delete("/api/cart")
async def cart_clear(request: Request):
    return await run("clear_cart", {}, request)


# Reservations

@app.get("/api/reservations/time-slots")
async def time_slots():
    return await run("get_time_slots", {})


@app.post("/api/reservations/request")
async def reservation_request(payload: dict = Body(default={}), user=Depends(optional_user)):
    return await run("request_reservation", payload, user=user)


@app.post("/api/reservations/checkout")
async def reservation_checkout(request: Request, payload: dict = Body(default={}), user=Depends(optional_user)):
    return await run("checkout_reservation", payload, request, user=user)


# Auth

@app.post("/api/auth/signup")
async def auth_sign_up(payload: dict = Body(default={})):
    return await run("sign_up", payload)


@app.post("/api/auth/signin")
async def auth_sign_in(payload: dict = Body(default={})):
    return await run("sign_in", payload)


@app.post("/api/auth/refresh")
async def auth_refresh(payload: dict = Body(default={})):
    return await run("refresh_session", payload)


@app.post("/api/auth/signout")
async def auth_sign_out(user=Depends(optional_user)):
    return await run("sign_out", {}, user=user)


# Customer dashboard

@app.get("/api/dashboard")
async def dashboard(user=Depends(optional_user)):
    return await run("load_dashboard", {}, user=user)


@app.get("/api/dashboard/reservations")
async def dashboard_reservations(search: str = "", status: str = "all", user=Depends(optional_user)):
    return await run("list_reservations", {"search": search, "status": status}, user=user)


@app.post("/api/dashboard/reservations/{reservation_id}/cancel")
async def dashboard_cancel_reservation(reservation_id: str, user=Depends(optional_user)):
    return await run("cancel_reservation", {"reservation_id": reservation_id}, user=user)


@app.get("/api/dashboard/reviews")
async def dashboard_reviews(user=Depends(optional_user)):
    return await run("list_user_reviews", {}, user=user)


@app.patch("/api/dashboard/reviews/{review_id}")
async def dashboard_update_review(review_id: str, payload: dict = Body(default={}), user=Depends(optional_user)):
    return await run("update_review", {**payload, "review_id": review_id}, user=user)


@app.delete("/api/dashboard/reviews/{review_id}")
async def dashboard_delete_review(review_id: str, user=Depends(optional_user)):
    return await run("delete_review", {"review_id": review_id}, user=user)


@app.get("/api/dashboard/profile")
async def dashboard_profile(user=Depends(optional_user)):
    return await run("get_profile", {}, user=user)


@app.patch("/api/dashboard/profile")
async def dashboard_update_profile(payload: dict = Body(default={}), user=Depends(optional_user)):
    return await run("update_profile", payload, user=user)


@app.get("/api/dashboard/profile/notification-settings")
async def dashboard_notification_settings(user=Depends(optional_user)):
    return await run("get_notification_settings", {}, user=user)


@app.patch("/api/dashboard/profile/notification-settings")
async def dashboard_update_notification_settings(payload: dict = Body(default={}), user=Depends(optional_user)):
    return await run("update_notification_settings", payload, user=user)


@app.get("/api/dashboard/notifications")
async def dashboard_notifications(show_all: bool = False, user=Depends(optional_user)):
    return await run("list_notifications", {"show_all": show_all}, user=user)


@app.post("/api/dashboard/notifications/read-all")
async def dashboard_read_all(user=Depends(optional_user)):
    return await run("mark_all_notifications_read", {}, user=user)


@app.post("/api/dashboard/notifications/{notification_id}/read")
async def dashboard_read_notification(notification_id: str, user=Depends(optional_user)):
    return await run("mark_notification_read", {"notification_id": notification_id}, user=user)


@app.get("/api/dashboard/activity")
async def dashboard_activity(user=Depends(optional_user)):
    return await run("get_activity", {}, user=user)


def main():
    import uvicorn
    uvicorn.run(app, host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    main()
