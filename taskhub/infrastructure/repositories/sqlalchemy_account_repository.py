# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Credential store adapter backed by SQLAlchemy.

All statements are built with the SQLAlchemy expression language, so
e-mail and hash values always travel as bound parameters.
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from taskhub.domain.accounts.entities import Account
from taskhub.domain.accounts.exceptions import AccountAlreadyExistsError
from taskhub.domain.accounts.repositories import AccountRepository
from taskhub.infrastructure.db import SessionFactory, session_scope
from taskhub.infrastructure.db.models import AccountRow
from taskhub.shared.errors.base import StoreError
from taskhub.shared.logging import logger


def _to_domain(row: AccountRow) -> Account:
    return Account(
        id=row.id,
        email=row.email,
        password_hash=row.password_hash,
        name=row.name,
        created_at=row.created_at,
    )


class SqlAlchemyAccountRepository(AccountRepository):
    def __init__(self, session_factory: SessionFactory) -> None:
        self._session_factory = session_factory

    def find_by_email(self, email: str) -> Account | None:
        return self._find_one(select(AccountRow).where(AccountRow.email == email))

    def find_by_id(self, account_id: str) -> Account | None:
        return self._find_one(select(AccountRow).where(AccountRow.id == account_id))

    def add(self, *, email: str, password_hash: str, name: str | None = None) -> Account:
        try:
            with session_scope(self._session_factory) as session:
                row = AccountRow(email=email, password_hash=password_hash, name=name)
                session.add(row)
                session.flush()
                account = _to_domain(row)
        except IntegrityError as exc:
            logger.info("accounts.store: unique e-mail constraint rejected insert")
            raise AccountAlreadyExistsError() from exc
        except SQLAlchemyError as exc:
            logger.error(f"accounts.store: insert failed ({type(exc).__name__})")
            raise StoreError() from exc
        return account

    def _find_one(self, stmt) -> Account | None:
        try:
            with session_scope(self._session_factory) as session:
                row = session.execute(stmt).scalar_one_or_none()
                return _to_domain(row) if row is not None else None
        except SQLAlchemyError as exc:
            logger.error(f"accounts.store: lookup failed ({type(exc).__name__})")
            raise StoreError() from exc
