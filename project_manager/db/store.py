# project_manager/db/store.py
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine, text
from sqlalchemy.engine import URL, make_url
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from project_manager.config import Settings
from project_manager.db.base import Base
from project_manager.db.models import Client, Package, Project
from project_manager.db.repository import Repository
from project_manager.errors import ConflictError, StartupError, StoreError

logger = logging.getLogger(__name__)


def normalize_database_url(database_url: str) -> URL:
    """
    Parse a database URL, defaulting bare postgres URLs to the psycopg driver.

    Hosting providers hand out `postgres://` / `postgresql://` URLs; SQLAlchemy
    would map those to psycopg2, which is not installed.
    """
    url = make_url(database_url)
    if url.drivername in ("postgres", "postgresql"):
        url = url.set(drivername="postgresql+psycopg")
    return url


class Store:
    """
    Owns the single engine / session factory used for the life of the process.

    Per-entity tables are exposed as `projects`, `packages` and `clients`
    repositories. Every repository call runs in its own session, i.e. one
    round trip and one transaction per operation.
    """

    def __init__(self, database_url: str, *, echo: bool = False):
        url = normalize_database_url(database_url)

        engine_kwargs: dict = {"future": True, "pool_pre_ping": True, "echo": echo}
        if url.get_backend_name() == "sqlite":
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if url.database in (None, "", ":memory:"):
                # one shared connection, otherwise each thread sees an empty database
                engine_kwargs["poolclass"] = StaticPool

        self.url = url
        self.engine = create_engine(url, **engine_kwargs)
        self._sessionmaker = sessionmaker(
            bind=self.engine,
            autoflush=False,
            expire_on_commit=False,
            future=True,
        )

        self.projects: Repository[Project] = Repository(self, Project, label="Project")
        self.packages: Repository[Package] = Repository(self, Package, label="Package")
        self.clients: Repository[Client] = Repository(self, Client, label="Client")

    def create_schema(self) -> None:
        """Create any missing tables. Existing tables are left untouched."""
        Base.metadata.create_all(self.engine)
        logger.info("Schema ready on %s", self.url.render_as_string(hide_password=True))

    @contextmanager
    def session(self) -> Iterator[Session]:
        db = self._sessionmaker()
        try:
            yield db
            db.commit()
        except IntegrityError as exc:
            db.rollback()
            logger.warning("Integrity error: %s", exc.orig)
            raise ConflictError("Record conflicts with an existing record") from exc
        except SQLAlchemyError as exc:
            db.rollback()
            logger.exception("Database operation failed")
            raise StoreError(f"Database error: {exc.__class__.__name__}") from exc
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def ping(self) -> bool:
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except SQLAlchemyError:
            logger.warning("Database ping failed", exc_info=True)
            return False
        return True

    def dispose(self) -> None:
        self.engine.dispose()
        logger.info("Database engine disposed")


def open_store(settings: Settings) -> Store:
    """
    Build the process-wide store and create the schema.

    Any failure is fatal: there is no retry policy.
    """
    logger.info("Opening database connection")
    try:
        store = Store(settings.database_url, echo=settings.db_echo)
        store.create_schema()
    except Exception as exc:
        logger.error("Failed to open database: %s", exc)
        raise StartupError(f"Failed to connect to the database: {exc}") from exc
    return store
