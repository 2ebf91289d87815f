# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Redaction applied to every log record before it reaches a sink."""

from __future__ import annotations

import re
from typing import Any

_MASK = "***REDACTED***"

_RULES: list[tuple[re.Pattern[str], str]] = [
    # Signing keys
    (re.compile(r"((?:jwt[_-]?)?secret(?:[_-]?key)?\s*[:=]\s*['\"]?)[^\s'\",}]+", re.I), rf"\1{_MASK}"),
    # Authorization headers and bearer tokens
    (re.compile(r"(authorization\s*:\s*['\"]?)[^'\"\n]{10,}", re.I), rf"\1{_MASK}"),
    (re.compile(r"(bearer\s+)[\w\-.]{10,}", re.I), rf"\1{_MASK}"),
    (re.compile(r"(token\s*[:=]\s*['\"]?)[\w\-.]{20,}", re.I), rf"\1{_MASK}"),
    # Any JWT-shaped string: three base64url segments, header starts with {"
    (re.compile(r"\beyJ[\w\-]+\.[\w\-]+\.[\w\-]+"), "***REDACTED_JWT***"),
    # Passwords in key=value or JSON form, and bcrypt digests
    (re.compile(r"((?:password(?:_hash)?|pwd)['\"]?\s*[:=]\s*['\"]?)[^'\"\s,}]+", re.I), rf"\1{_MASK}"),
    (re.compile(r"\$2[aby]?\$\d{2}\$[./A-Za-z0-9]{53}"), "***REDACTED_HASH***"),
    # Credentials embedded in database URLs
    (re.compile(r"((?:postgres(?:ql)?(?:\+\w+)?|mysql)://[^:/\s]+:)[^@\s]+@"), rf"\1{_MASK}@"),
    # E-mail local parts
    (re.compile(r"[\w.%+-]+@([\w-]+(?:\.[\w-]+)*\.[A-Za-z]{2,})"), r"***@\1"),
]


def sanitize_message(message: str) -> str:
    for pattern, replacement in _RULES:
        message = pattern.sub(replacement, message)
    return message


def sanitize_record(record: dict[str, Any]) -> bool:
    """Loguru filter: rewrites the message in place and never drops a record."""
    record["message"] = sanitize_message(record["message"])
    return True


__all__ = ["sanitize_message", "sanitize_record"]
