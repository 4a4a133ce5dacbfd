import os

import pytest
import structlog
from starlette.testclient import TestClient

from postboard import PostboardCore
from postboard.db import MemberTable, PostBodyTable, PostTable, db
from postboard.db.database import BaseModel
from postboard.settings import app_settings

logger = structlog.getLogger(__name__)


@pytest.fixture(scope="session")
def db_uri():
    """Database uri to run the tests against.

    Defaults to an in-memory SQLite database; set DATABASE_URI to test against another backend.
    """
    return os.environ.get("DATABASE_URI", "sqlite://")


@pytest.fixture(scope="session", autouse=True)
def fastapi_app(db_uri):
    app_settings.DATABASE_URI = db_uri
    app = PostboardCore(base_settings=app_settings)
    yield app
    db.wrapped_database.engine.dispose()


@pytest.fixture(autouse=True)
def db_session(fastapi_app):
    """Ensure every test starts with empty tables and cleans up after itself."""
    BaseModel.metadata.create_all(db.engine)
    try:
        yield
    finally:
        db.scoped_session.remove()
        BaseModel.metadata.drop_all(db.engine)


@pytest.fixture(scope="session")
def test_client(fastapi_app):
    return TestClient(fastapi_app)


@pytest.fixture
def generic_members():
    """Members with ids 1 to 6; `Bob` is the nickname of two of them."""
    members = [
        MemberTable(username="system", nickname="System"),
        MemberTable(username="admin", nickname="Admin"),
        MemberTable(username="user1", nickname="Bob"),
        MemberTable(username="user2", nickname="Carol"),
        MemberTable(username="user3", nickname="Bob"),
        MemberTable(username="user4", nickname="Dave"),
    ]
    for member in members:
        db.session.add(member)
        db.session.flush()
    db.session.commit()
    return members


@pytest.fixture
def generic_posts(generic_members):
    """Posts with ids 1 to 5; post 3 is not listed."""
    _, _, user1, user2, user3, _ = generic_members
    posts = [
        PostTable(author=user1, title="Hello world", listed=True, body=PostBodyTable(content="first post")),
        PostTable(author=user2, title="Python tips", listed=True, body=PostBodyTable(content="use structlog")),
        PostTable(author=user1, title="Draft", listed=False, body=PostBodyTable(content="secret")),
        PostTable(author=user3, title="Another hello", listed=True, body=PostBodyTable(content="greetings")),
        PostTable(author=user2, title="Sorting", listed=True, body=PostBodyTable(content="order by")),
    ]
    for post in posts:
        db.session.add(post)
        db.session.flush()
    db.session.commit()
    return posts
