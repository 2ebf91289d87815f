# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import NoReturn

from pydantic import ValidationError as PydanticValidationError

from .base import ValidationError


def invalid_fields(exc: PydanticValidationError) -> list[str]:
    """Dotted names of the request fields pydantic rejected, sorted."""
    names = {".".join(str(part) for part in err["loc"]) for err in exc.errors() if err["loc"]}
    return sorted(names)


def raise_validation_error(
    exc: PydanticValidationError, message: str = "Invalid request payload"
) -> NoReturn:
    # Field names only; rejected values are never echoed.
    raise ValidationError(message, context={"fields": invalid_fields(exc)}) from exc


__all__ = ["invalid_fields", "raise_validation_error"]
