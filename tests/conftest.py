from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make the dymnds package importable when running tests from a checkout.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from dymnds.core import config as core_config  # noqa: E402
from dymnds.core.rate_limiter import reset_rate_limits  # noqa: E402
from dymnds.db import models  # noqa: E402
from dymnds.db import session as db_session  # noqa: E402


def _clear_caches() -> None:
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]


@pytest.fixture()
def temp_db(tmp_path, monkeypatch):
    """Point DATABASE_URL at a throwaway SQLite file and build the schema."""
    db_file = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    monkeypatch.delenv("ADMIN_EMAILS", raising=False)
    _clear_caches()
    reset_rate_limits()

    engine = db_session.get_engine()
    models.Base.metadata.drop_all(bind=engine)
    models.Base.metadata.create_all(bind=engine)

    yield db_file

    models.Base.metadata.drop_all(bind=engine)
    engine.dispose()
    _clear_caches()


@pytest.fixture()
def no_db(monkeypatch):
    """Run with DATABASE_URL unset so every store access fails."""
    monkeypatch.delenv("DATABASE_URL", raising=False)
    _clear_caches()
    yield
    _clear_caches()
