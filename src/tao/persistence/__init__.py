"""Database backends behind the IDatabase Protocol."""

from __future__ import annotations

from tao.core.config import AppSettings, load_settings
from tao.persistence.postgres import PostgresDatabase


def create_database(settings: AppSettings | None = None) -> PostgresDatabase:
    """Create the production database backend from settings.

    The connection itself is opened on first use.
    """
    if settings is None:
        settings = load_settings()

    db = settings.database
    return PostgresDatabase(
        dsn=db.dsn,
        username=db.username,
        password=db.password,
        connect_timeout=db.connect_timeout,
    )
