"""
OpenTelemetry instrumentation for FoodHub handlers
"""
from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode
import json
import functools
import logging

tracer = trace.get_tracer("foodhub.handlers", "0.1.0")
logger = logging.getLogger(__name__)

# Never copied into span events
SENSITIVE_PARAMS = {"password", "user", "access_token", "refresh_token"}


def _summarize(value):
    return json.dumps(value, default=str)[:500]


def _safe_params(params):
    return {k: v for k, v in (params or {}).items() if k not in SENSITIVE_PARAMS}


def instrument_handler(handler_name):
    """Decorator to instrument handler calls with OpenTelemetry spans"""
    def decorator(func):
        @functools.wraps(func)
        async def wrapper(params):
            with tracer.start_as_current_span(
                f"handle {handler_name}",
                kind=trace.SpanKind.INTERNAL
            ) as span:
                span.set_attribute("handler.name", handler_name)
                user = (params or {}).get("user")
                if user:
                    span.set_attribute("enduser.id", str(user.get("id")))
                span.add_event("handler_started", {
                    "handler.name": handler_name,
                    "handler.input": _summarize(_safe_params(params))
                })

                try:
                    result = await func(params)
                except Exception as e:
                    span.add_event("handler_failed", {
                        "handler.name": handler_name,
                        "error": str(e),
                        "error_type": type(e).__name__
                    })
                    span.set_attribute("handler.status", "error")
                    span.set_status(Status(StatusCode.ERROR, str(e)))
                    span.record_exception(e)
                    logger.error(f"[HANDLER_ERROR] {handler_name} - Error: {str(e)}")
                    raise

                failed = isinstance(result, dict) and "error" in result
                span.add_event("handler_completed", {
                    "handler.name": handler_name,
                    "handler.output": _summarize(_safe_params(result) if isinstance(result, dict) else result),
                    "success": not failed
                })
                span.set_attribute("handler.status", "rejected" if failed else "success")
                span.set_status(Status(StatusCode.OK))
                return result
        return wrapper
    return decorator
