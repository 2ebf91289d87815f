# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import datetime

from sqlalchemy import text
from sqlalchemy.engine import Engine


def check_database(engine: Engine) -> datetime | str:
    with engine.connect() as connection:
        return connection.execute(text("SELECT CURRENT_TIMESTAMP")).scalar_one()


__all__ = ["check_database"]
