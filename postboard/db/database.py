# Copyright 2019-2020 SURF.
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any
from uuid import uuid4

import structlog
from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import DeclarativeBase, Session, scoped_session, sessionmaker
from sqlalchemy.pool import StaticPool
from starlette.middleware.base import BaseHTTPMiddleware, DispatchFunction, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp
from structlog.stdlib import BoundLogger

logger = structlog.get_logger(__name__)

ENGINE_ARGUMENTS: dict[str, Any] = {"pool_pre_ping": True}
SESSION_ARGUMENTS: dict[str, Any] = {"autoflush": True, "expire_on_commit": False}


class BaseModel(DeclarativeBase):
    __abstract__ = True

    def __repr__(self) -> str:
        inst_state = self.__mapper__.primary_key
        pk = ", ".join(f"{column.name}={getattr(self, column.key, None)!r}" for column in inst_state)
        return f"{self.__class__.__name__}({pk})"


def engine_arguments(db_url: str) -> dict[str, Any]:
    """Return the engine arguments for the given database url.

    In-memory SQLite databases only exist for the lifetime of a single connection, so they are shared
    between threads through a static pool.
    """
    url = make_url(db_url)
    if url.get_backend_name() != "sqlite":
        return ENGINE_ARGUMENTS
    arguments: dict[str, Any] = {"connect_args": {"check_same_thread": False}}
    if url.database in (None, "", ":memory:"):
        arguments["poolclass"] = StaticPool
    return arguments


class Database:
    def __init__(self, db_url: str) -> None:
        self.request_context: ContextVar[str] = ContextVar("request_context", default="")
        self.engine = create_engine(db_url, **engine_arguments(db_url))
        self.session_factory = sessionmaker(bind=self.engine, **SESSION_ARGUMENTS)
        self.scoped_session = scoped_session(self.session_factory, self._scopefunc)

    def _scopefunc(self) -> str:
        return self.request_context.get()

    @property
    def session(self) -> Session:
        return self.scoped_session()

    @contextmanager
    def database_scope(self, **kwargs: Any) -> Iterator["Database"]:
        """Create a new database session (scope).

        This creates a new database session to handle all the database connection from a single scope (request or
        command). Sessions are scoped on the `request_context` context var, so nested scopes never share a session.
        """
        token = self.request_context.set(str(uuid4()))
        self.scoped_session(**kwargs)
        try:
            yield self
        finally:
            self.scoped_session.remove()
            self.request_context.reset(token)


class DBSessionMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: ASGIApp, dispatch: DispatchFunction | None = None, *, database: Database) -> None:
        super().__init__(app, dispatch)
        self.database = database

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        with self.database.database_scope():
            return await call_next(request)


@contextmanager
def transactional(db: Database, log: BoundLogger) -> Iterator[None]:
    """Run a step function in an implicit transaction with automatic rollback or commit.

    It will rollback in case of error, commit otherwise.

    Args:
        db: The database to run the transaction on
        log: The logger to report commit and rollback on

    """
    try:
        yield
        log.debug("Committing transaction.")
        db.session.commit()
    except Exception:
        log.warning("Rolling back transaction.")
        db.session.rollback()
        raise
