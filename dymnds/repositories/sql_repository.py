"""High-level data access helpers backed by SQLAlchemy."""
from __future__ import annotations

import secrets
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import select, delete, text

from dymnds.db.models import (
    AdminSession,
    CustomerNote,
    Order,
    Product,
    User,
    WaitlistEntry,
)
from dymnds.db.session import get_session


class SQLRepository:
    """Read helpers for the store plus the admin account/session writes."""

    def ping(self) -> None:
        with get_session() as session:
            session.execute(text("SELECT 1"))

    # -------------------------- products --------------------------
    def list_products(self) -> list[Product]:
        with get_session() as session:
            return session.execute(select(Product)).scalars().all()

    def add_product(
        self,
        product_id: str,
        slug: str,
        title: str,
        *,
        is_active: bool = True,
        is_deleted: bool = False,
        deleted_at: datetime | None = None,
    ) -> Product:
        entity = Product(
            id=product_id,
            slug=slug,
            title=title,
            is_active=is_active,
            is_deleted=is_deleted,
            deleted_at=deleted_at,
        )
        with get_session() as session:
            session.add(entity)
            session.commit()
            session.refresh(entity)
            return entity

    # -------------------------- orders --------------------------
    def list_orders(self) -> list[Order]:
        with get_session() as session:
            return session.execute(select(Order)).scalars().all()

    def add_order(
        self,
        order_id: str,
        customer_email: str | None,
        items: list,
        *,
        is_deleted: bool = False,
        deleted_at: datetime | None = None,
    ) -> Order:
        entity = Order(
            id=order_id,
            customer_email=customer_email,
            items=items,
            is_deleted=is_deleted,
            deleted_at=deleted_at,
        )
        with get_session() as session:
            session.add(entity)
            session.commit()
            session.refresh(entity)
            return entity

    # -------------------------- customer notes --------------------------
    def list_customer_notes(self) -> list[CustomerNote]:
        with get_session() as session:
            return session.execute(select(CustomerNote)).scalars().all()

    def upsert_customer_note(self, email: str, note: str) -> None:
        with get_session() as session:
            entity = session.get(CustomerNote, email)
            if not entity:
                session.add(CustomerNote(email=email, note=note))
            else:
                entity.note = note
            session.commit()

    # -------------------------- waitlist --------------------------
    def list_waitlist_entries(self) -> list[WaitlistEntry]:
        with get_session() as session:
            return session.execute(select(WaitlistEntry)).scalars().all()

    def add_waitlist_entry(self, email: str | None, signed_up_at: datetime | None) -> WaitlistEntry:
        entity = WaitlistEntry(email=email, signed_up_at=signed_up_at)
        with get_session() as session:
            session.add(entity)
            session.commit()
            session.refresh(entity)
            return entity

    # -------------------------- users --------------------------
    def get_user(self, email: str) -> Optional[User]:
        with get_session() as session:
            return session.get(User, email)

    def upsert_user(self, email: str, password_hash: str, email_verified_at: datetime | None = None) -> User:
        now = datetime.now(timezone.utc)
        with get_session() as session:
            user = session.get(User, email)
            if not user:
                user = User(
                    email=email,
                    password_hash=password_hash,
                    email_verified_at=email_verified_at,
                    created_at=now,
                    updated_at=now,
                )
                session.add(user)
            else:
                user.password_hash = password_hash or user.password_hash
                if email_verified_at is not None:
                    user.email_verified_at = email_verified_at
                user.updated_at = now
            session.commit()
            session.refresh(user)
            return user

    # -------------------------- admin sessions --------------------------
    def create_admin_session(self, email: str, csrf_token: str, expires_at: datetime) -> str:
        token = secrets.token_urlsafe(32)
        entity = AdminSession(token=token, email=email, csrf_token=csrf_token, expires_at=expires_at)
        with get_session() as session:
            session.add(entity)
            session.commit()
        return token

    def get_admin_session(self, token: str) -> Optional[AdminSession]:
        with get_session() as session:
            return session.get(AdminSession, token)

    def delete_admin_session(self, token: str) -> None:
        with get_session() as session:
            session.execute(delete(AdminSession).where(AdminSession.token == token))
            session.commit()
