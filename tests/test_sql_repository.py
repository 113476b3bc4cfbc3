"""
Smoke tests for the SQLRepository against a temporary SQLite database.
"""
from __future__ import annotations

from datetime import timedelta

from dymnds.core.utils import utcnow
from dymnds.repositories.sql_repository import SQLRepository


def test_add_and_list_products(temp_db):
    repo = SQLRepository()
    repo.add_product("p1", "core-tee", "Core Tee")
    repo.add_product("p2", "gone-tee", "Gone Tee", is_deleted=True, deleted_at=utcnow())
    products = {p.id: p for p in repo.list_products()}
    assert set(products) == {"p1", "p2"}
    assert products["p1"].is_active and not products["p1"].is_deleted
    assert products["p2"].is_deleted


def test_customer_note_upsert(temp_db):
    repo = SQLRepository()
    repo.upsert_customer_note("a@example.com", "first")
    repo.upsert_customer_note("a@example.com", "second")
    notes = repo.list_customer_notes()
    assert len(notes) == 1
    assert notes[0].note == "second"


def test_admin_session(temp_db):
    repo = SQLRepository()
    tok = repo.create_admin_session("ops@dymnds.ca", csrf_token="csrf123", expires_at=utcnow() + timedelta(hours=1))
    sess = repo.get_admin_session(tok)
    assert sess is not None
    assert sess.csrf_token == "csrf123"
    repo.delete_admin_session(tok)
    assert repo.get_admin_session(tok) is None


def test_ping(temp_db):
    SQLRepository().ping()
