"""AWS Lambda entry point serving MCP JSON-RPC over HTTP.

Each request passes the same gates in order: health check, origin check,
API key authentication, rate limiting, then JSON-RPC handling. Tool calls go
through the shared dispatcher; successful results are cached.
"""

from __future__ import annotations

import base64
import json
import logging
import time
import uuid
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, ClassVar

import anyio

from uswds_mcp.server import MCPServer
from uswds_mcp_server.auth import (
    InMemoryUserStore,
    StaticKeyUserStore,
    UserStore,
    authenticate,
    get_header,
    redact_key,
)
from uswds_mcp_server.cache import ResponseCache
from uswds_mcp_server.config import SERVER_NAME, SERVER_VERSION, Settings, get_settings
from uswds_mcp_server.logging_setup import configure_logging
from uswds_mcp_server.origin import validate_origin
from uswds_mcp_server.rate_limiter import RateLimiter, RateLimitResult
from uswds_mcp_server.services import ServiceBag, build_services_from_settings
from uswds_mcp_server.tools import build_server

logger = logging.getLogger(__name__)

PROTOCOL_VERSION = "2025-03-26"

PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603

CORS_HEADERS = {
    "Access-Control-Allow-Headers": "Content-Type, Authorization, x-api-key",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
}

LambdaResponse = dict[str, Any]


class JSONRPCError(Exception):
    """A request that gets a JSON-RPC error response."""

    def __init__(self, code: int, message: str, status_code: int = 400) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.status_code = status_code


@dataclass
class ExecutionContext:
    """State shared by every invocation that lands on a warm container."""

    settings: Settings
    services: ServiceBag
    server: MCPServer
    rate_limiter: RateLimiter
    cache: ResponseCache
    user_store: UserStore

    _current: ClassVar[ExecutionContext | None] = None

    @classmethod
    def create(
        cls,
        settings: Settings | None = None,
        *,
        services: ServiceBag | None = None,
        user_store: UserStore | None = None,
        rate_limiter: RateLimiter | None = None,
        cache: ResponseCache | None = None,
    ) -> ExecutionContext:
        """Build a fresh context; unspecified parts come from ``settings``."""
        settings = settings or get_settings()
        services = services or build_services_from_settings(settings)
        if user_store is None:
            user_store = (
                StaticKeyUserStore(settings.api_key)
                if settings.api_key
                else InMemoryUserStore()
            )
        return cls(
            settings=settings,
            services=services,
            server=build_server(services),
            rate_limiter=rate_limiter
            or RateLimiter(settings.rate_limit_per_minute, settings.rate_limit_per_day),
            cache=cache
            or ResponseCache(settings.cache_dir, settings.cache_ttl_seconds),
            user_store=user_store,
        )

    @classmethod
    def get_or_create(cls) -> ExecutionContext:
        """Return the container-wide context, creating it on a cold start."""
        if cls._current is None:
            settings = get_settings()
            configure_logging(settings.log_level)
            logger.info("Initializing execution context")
            cls._current = cls.create(settings)
        else:
            logger.debug("Reusing execution context (warm start)")
        return cls._current

    @classmethod
    def reset(cls) -> None:
        """Forget the container-wide context."""
        cls._current = None


def _json_response(
    status_code: int, body: Any, headers: Mapping[str, str] | None = None
) -> LambdaResponse:
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json", **(headers or {})},
        "body": json.dumps(body),
    }


def _rpc_error(
    request_id: Any, error: JSONRPCError, data: Any | None = None
) -> LambdaResponse:
    payload: dict[str, Any] = {"code": error.code, "message": error.message}
    if data is not None:
        payload["data"] = data
    return _json_response(
        error.status_code, {"jsonrpc": "2.0", "id": request_id, "error": payload}
    )


def _rate_limit_headers(result: RateLimitResult) -> dict[str, str]:
    return {
        "X-RateLimit-Limit": str(result.limit),
        "X-RateLimit-Remaining": str(result.remaining),
        "X-RateLimit-Reset": str(result.reset_seconds),
    }


def _request_path(event: Mapping[str, Any]) -> str:
    http = event.get("requestContext", {}).get("http", {})
    return http.get("path") or event.get("rawPath") or event.get("path") or "/"


def _request_method(event: Mapping[str, Any]) -> str:
    http = event.get("requestContext", {}).get("http", {})
    return (http.get("method") or event.get("httpMethod") or "POST").upper()


def parse_body(event: Mapping[str, Any]) -> dict[str, Any]:
    """Decode and validate the JSON-RPC envelope of a request.

    Raises:
        JSONRPCError: If the body is not JSON or not a JSON-RPC 2.0 request.
    """
    raw = event.get("body") or ""
    if raw and event.get("isBase64Encoded"):
        raw = base64.b64decode(raw).decode("utf-8")
    try:
        body = json.loads(raw) if raw else {}
    except ValueError as error:
        raise JSONRPCError(PARSE_ERROR, "Parse error: Invalid JSON") from error

    if not isinstance(body, dict) or body.get("jsonrpc") != "2.0":
        raise JSONRPCError(INVALID_REQUEST, 'Invalid Request: jsonrpc must be "2.0"')
    if not isinstance(body.get("method"), str) or not body["method"]:
        raise JSONRPCError(INVALID_REQUEST, "Invalid Request: method is required")
    return body


async def call_tool(context: ExecutionContext, params: Any) -> dict[str, Any]:
    """Run ``tools/call`` through the dispatcher, using the response cache."""
    if not isinstance(params, dict) or not isinstance(params.get("name"), str):
        raise JSONRPCError(INVALID_PARAMS, "Invalid params: name is required")
    name = params["name"]
    arguments = params.get("arguments") or {}

    key = ResponseCache.cache_key(name, arguments)
    cached = context.cache.get(key)
    if cached is not None:
        return cached

    result = await context.server.call_tool(name, arguments)
    envelope = result.to_dict()
    # Error envelopes are not cached so that a retry runs the tool again.
    if not result.is_error:
        context.cache.set(key, envelope)
    return envelope


async def handle_rpc(context: ExecutionContext, body: dict[str, Any]) -> Any:
    """Return the ``result`` member for a validated JSON-RPC request."""
    method = body["method"]
    params = body.get("params") or {}

    if method == "initialize":
        requested = params.get("protocolVersion") if isinstance(params, dict) else None
        return {
            "protocolVersion": requested or PROTOCOL_VERSION,
            "capabilities": {"tools": {}},
            "serverInfo": {"name": SERVER_NAME, "version": SERVER_VERSION},
        }
    if method == "ping":
        return {}
    if method == "tools/list":
        return {"tools": context.server.list_tools()}
    if method == "tools/call":
        return await call_tool(context, params)
    raise JSONRPCError(METHOD_NOT_FOUND, f"Method not found: {method}")


async def handle_event(
    event: Mapping[str, Any],
    context: ExecutionContext,
    request_id: str | None = None,
) -> LambdaResponse:
    """Process one API Gateway / Function URL event."""
    started = time.perf_counter()
    request_id = (
        request_id
        or event.get("requestContext", {}).get("requestId")
        or str(uuid.uuid4())
    )
    path = _request_path(event)
    method = _request_method(event)
    logger.info("Request: %s %s %s", request_id, method, path)

    if path == "/health":
        return _json_response(
            200,
            {
                "status": "healthy",
                "version": SERVER_VERSION,
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "cache": context.cache.stats(),
                "rateLimit": context.rate_limiter.stats(),
            },
        )

    headers = event.get("headers") or {}
    origin_check = validate_origin(headers, context.settings.is_development)
    if not origin_check.valid:
        logger.warning("Invalid origin rejected: %s", get_header(headers, "origin"))
        return _json_response(
            403, {"error": "Forbidden", "message": origin_check.error}
        )

    cors = {
        "Access-Control-Allow-Origin": get_header(headers, "origin") or "*",
        **CORS_HEADERS,
    }
    if method == "OPTIONS":
        return {"statusCode": 204, "headers": cors, "body": ""}

    auth = await authenticate(event, context.user_store)
    if not auth.authenticated or auth.api_key is None:
        return _json_response(
            401,
            {"error": "Unauthorized", "message": auth.error or "Authentication failed"},
        )

    rate = context.rate_limiter.check(auth.api_key)
    if not rate.allowed:
        logger.warning(
            "Rate limit exceeded for API key %s (%s window, retry in %ss)",
            redact_key(auth.api_key),
            rate.limit_type,
            rate.retry_after,
        )
        window = "per minute" if rate.limit_type == "minute" else "per day"
        return _json_response(
            429,
            {
                "error": "Too Many Requests",
                "message": (
                    f"Rate limit exceeded. You can make {rate.limit} requests "
                    f"{window}. Try again in {rate.retry_after} seconds."
                ),
                "retryAfter": rate.retry_after,
            },
            {
                **_rate_limit_headers(rate),
                "X-RateLimit-Reset": str(rate.retry_after),
                "Retry-After": str(rate.retry_after),
            },
        )

    rpc_id: Any = None
    try:
        body = parse_body(event)
        rpc_id = body.get("id")
        result = await handle_rpc(context, body)
    except JSONRPCError as error:
        return _rpc_error(rpc_id, error)
    except Exception:
        logger.exception("Request failed: %s", request_id)
        return _rpc_error(
            rpc_id,
            JSONRPCError(INTERNAL_ERROR, "Internal error", status_code=500),
            {"requestId": request_id},
        )

    elapsed_ms = round((time.perf_counter() - started) * 1000)
    logger.info(
        "Response: %s %s 200 in %dms (%s)",
        request_id,
        body["method"],
        elapsed_ms,
        auth.user.email if auth.user else "unknown",
    )
    return _json_response(
        200,
        {"jsonrpc": "2.0", "id": rpc_id, "result": result},
        {
            "X-Request-Id": request_id,
            "X-Processing-Time": f"{elapsed_ms}ms",
            **_rate_limit_headers(rate),
            **cors,
        },
    )


def handler(event: dict[str, Any], lambda_context: Any = None) -> LambdaResponse:
    """Synchronous Lambda entry point."""
    request_id = getattr(lambda_context, "aws_request_id", None)
    return anyio.run(handle_event, event, ExecutionContext.get_or_create(), request_id)
