# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets
import time

from flask import Flask, Response, g, request

from taskhub.shared.logging import clear_correlation_id, logger, set_correlation_id

REQUEST_ID_HEADER = "X-Request-ID"
_MAX_REQUEST_ID_LEN = 64


def _client_ip() -> str:
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.remote_addr or "unknown"


def _incoming_request_id() -> str:
    supplied = (request.headers.get(REQUEST_ID_HEADER) or "").strip()
    if supplied and len(supplied) <= _MAX_REQUEST_ID_LEN and supplied.isprintable():
        return supplied
    return secrets.token_urlsafe(8)


def configure_request_logging(app: Flask, *, debug_mode: bool = False) -> None:
    """One line when a request arrives and one when it is answered.

    Bodies, headers and query strings are never logged; with ``debug_mode``
    only the client address and body size are added.
    """

    @app.before_request
    def _start() -> None:
        g.request_id = _incoming_request_id()
        g.request_started = time.perf_counter()
        set_correlation_id(g.request_id)

        if debug_mode:
            logger.debug(
                f"--> {request.method} {request.path} from {_client_ip()} "
                f"body_size={request.content_length or 0}"
            )
        else:
            logger.info(f"--> {request.method} {request.path}")

    @app.after_request
    def _finish(response: Response) -> Response:
        elapsed_ms = (time.perf_counter() - g.get("request_started", time.perf_counter())) * 1000
        response.headers.setdefault(REQUEST_ID_HEADER, g.get("request_id", "-"))
        logger.info(
            f"<-- {request.method} {request.path} {response.status_code} "
            f"({elapsed_ms:.1f}ms) account={g.get('user_id')}"
        )
        return response

    @app.teardown_request
    def _teardown(exc: BaseException | None) -> None:
        if exc is not None:
            logger.error(f"Request aborted: {type(exc).__name__} on {request.method} {request.path}")
        clear_correlation_id()


__all__ = ["REQUEST_ID_HEADER", "configure_request_logging"]
