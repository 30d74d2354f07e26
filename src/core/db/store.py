"""Relational store handle — engine and session management for the roster tables."""

import json
from contextlib import contextmanager
from typing import Iterator

import boto3
from sqlalchemy import Engine, URL, create_engine, make_url, text
from sqlalchemy.orm import Session, sessionmaker

from core.config import Config
from core.errors import StoreError
from core.db.schemas.base import Base


def _secret_credentials(config: Config) -> dict[str, str]:
    client = boto3.client("secretsmanager", region_name=config.aws_region)
    secret = client.get_secret_value(SecretId=config.aurora_secret_arn)
    return json.loads(secret["SecretString"])


def resolve_database_url(config: Config) -> URL:
    """DATABASE_URL wins; otherwise build a psycopg URL from Aurora settings or its secret."""
    if config.database_url:
        return make_url(config.database_url)

    creds: dict[str, str] = {}
    if config.aurora_secret_arn:
        creds = _secret_credentials(config)
    return URL.create(
        "postgresql+psycopg",
        username=creds.get("username", creds.get("user", config.aurora_user)),
        password=creds.get("password", config.aurora_password),
        host=creds.get("host", config.aurora_host),
        port=int(creds.get("port", config.aurora_port)),
        database=creds.get("dbname", config.aurora_database),
    )


class Store:
    """Owns the engine; every operation opens its own session through ``session()``."""

    def __init__(self, url: URL | str) -> None:
        self._url = make_url(url)
        self._engine: Engine | None = None
        self._sessions: sessionmaker[Session] | None = None

    @classmethod
    def from_config(cls, config: Config) -> "Store":
        return cls(resolve_database_url(config))

    @property
    def url(self) -> URL:
        return self._url

    def connect(self) -> Engine:
        connect_args = {"check_same_thread": False} if self._url.get_backend_name() == "sqlite" else {}
        self._engine = create_engine(self._url, connect_args=connect_args, pool_pre_ping=True)
        self._sessions = sessionmaker(bind=self._engine, expire_on_commit=False)
        return self._engine

    def disconnect(self) -> None:
        if self._engine is not None:
            self._engine.dispose()
        self._engine = None
        self._sessions = None

    def _require_engine(self) -> Engine:
        if self._engine is None:
            return self.connect()
        return self._engine

    def _require_sessions(self) -> sessionmaker[Session]:
        if self._sessions is None:
            self.connect()
        if self._sessions is None:
            raise StoreError("Store has no session factory after connect")
        return self._sessions

    @contextmanager
    def session(self) -> Iterator[Session]:
        with self._require_sessions()() as session:
            yield session

    def create_schema(self) -> None:
        """Create both tables directly; deployed databases go through Alembic instead."""
        Base.metadata.create_all(self._require_engine())

    def health_check(self) -> bool:
        try:
            with self._require_engine().connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except Exception:
            return False

    def __enter__(self) -> "Store":
        self.connect()
        return self

    def __exit__(self, *args: object) -> None:
        self.disconnect()
