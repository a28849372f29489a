# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker
from sqlalchemy.pool import StaticPool

from mini_linkedin.shared.config import DatabaseConfig
from mini_linkedin.shared.logging import logger


class Base(DeclarativeBase):
    pass


def _is_memory_sqlite(url: str) -> bool:
    return url in ("sqlite://", "sqlite:///:memory:") or "mode=memory" in url


def _set_sqlite_pragmas(dbapi_conn, _) -> None:
    cur = dbapi_conn.cursor()
    try:
        cur.execute("PRAGMA foreign_keys=ON;")
    finally:
        cur.close()


def build_engine(config: DatabaseConfig) -> Engine:
    engine = _create_engine(config)
    if engine.dialect.name == "sqlite":
        # SQLite leaves foreign keys, and with them ON DELETE CASCADE, off by default.
        event.listen(engine, "connect", _set_sqlite_pragmas)
    return engine


def _create_engine(config: DatabaseConfig) -> Engine:
    url = config.url
    if _is_memory_sqlite(url):
        # One shared connection so every session sees the same in-memory database.
        return create_engine(
            url,
            echo=config.echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    connect_args: dict[str, object] = {}
    if url.startswith("sqlite"):
        connect_args = {
            "check_same_thread": False,
            "timeout": int(config.pool_timeout),
        }

    return create_engine(
        url,
        echo=config.echo,
        pool_pre_ping=True,
        pool_size=config.pool_size,
        max_overflow=config.max_overflow,
        pool_timeout=config.pool_timeout,
        connect_args=connect_args,
    )


class Database:
    """Owns the engine and session factory for one application instance.

    Lifecycle: construct from config, ``create_all()`` once at startup,
    ``dispose()`` on shutdown.
    """

    def __init__(self, config: DatabaseConfig) -> None:
        self.engine: Engine = build_engine(config)
        self.session_factory = sessionmaker(
            bind=self.engine, autoflush=False, autocommit=False, expire_on_commit=False
        )

    def create_all(self) -> None:
        # Importing models registers the tables on Base.metadata.
        from mini_linkedin.infrastructure.db import models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)
        logger.info("Database schema ensured")

    def dispose(self) -> None:
        self.engine.dispose()
        logger.info("Database engine disposed")

    def ping(self) -> bool:
        with self.engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        return True
