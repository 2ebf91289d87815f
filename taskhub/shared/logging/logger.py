# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Loguru setup with per-request context and redaction on every sink."""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from pathlib import Path
from typing import Any

from loguru import logger as _loguru

from .sensitive_filter import sanitize_record

_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<lvl>{level:<8}</lvl> | "
    "<magenta>req={extra[request_id]} acct={extra[account_id]}</magenta> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> | "
    "<lvl>{message}</lvl>"
)

_request_id: ContextVar[str] = ContextVar("request_id", default="-")
_account_id: ContextVar[str] = ContextVar("account_id", default="-")


def _attach_request_context(record: dict[str, Any]) -> None:
    record["extra"]["request_id"] = _request_id.get()
    record["extra"]["account_id"] = _account_id.get()


_loguru.configure(extra={"request_id": "-", "account_id": "-"})
logger = _loguru.patch(_attach_request_context)


class _InterceptHandler(logging.Handler):
    """Route stdlib records (werkzeug, sqlalchemy) into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def set_correlation_id(value: str | None) -> None:
    _request_id.set(value or "-")


def bind_account(account_id: str | None) -> None:
    _account_id.set(account_id or "-")


def clear_correlation_id() -> None:
    _request_id.set("-")
    _account_id.set("-")


def setup_logging(level: str | None = None, log_file: str | Path | None = None) -> None:
    level = (level or "INFO").upper()
    # diagnose=False keeps local variable values (passwords) out of tracebacks.
    sink_options: dict[str, Any] = {
        "level": level,
        "format": _FORMAT,
        "filter": sanitize_record,
        "backtrace": False,
        "diagnose": False,
    }

    logger.remove()
    logger.add(sys.stderr, colorize=True, **sink_options)
    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            path,
            colorize=False,
            enqueue=True,
            encoding="utf-8",
            rotation="10 MB",
            retention=5,
            **sink_options,
        )

    logging.basicConfig(handlers=[_InterceptHandler()], level=0, force=True)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


__all__ = [
    "bind_account",
    "clear_correlation_id",
    "logger",
    "set_correlation_id",
    "setup_logging",
]
