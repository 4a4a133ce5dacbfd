from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import select

from postboard.db import MemberTable, PostBodyTable, PostTable, UtcTimestampError, db

LONG_AGO = datetime(2020, 1, 1, tzinfo=timezone.utc)


def test_timestamps_are_set_on_insert():
    before = datetime.now(timezone.utc)
    member = MemberTable(username="john", nickname="John")
    db.session.add(member)
    db.session.commit()
    db.session.refresh(member)

    assert member.create_date.tzinfo is not None
    assert member.create_date.utcoffset() == timedelta(0)
    assert member.create_date >= before - timedelta(seconds=1)
    assert member.modify_date >= member.create_date


def test_modify_date_is_refreshed_on_update():
    member = MemberTable(username="john", nickname="John", create_date=LONG_AGO, modify_date=LONG_AGO)
    db.session.add(member)
    db.session.commit()

    member.nickname = "Johnny"
    db.session.commit()
    db.session.refresh(member)

    assert member.create_date == LONG_AGO
    assert member.modify_date > LONG_AGO


def test_timestamps_are_returned_in_utc():
    amsterdam = timezone(timedelta(hours=2))
    member = MemberTable(
        username="john", nickname="John", create_date=datetime(2023, 5, 24, 14, 0, tzinfo=amsterdam)
    )
    db.session.add(member)
    db.session.commit()
    db.session.expire_all()

    member = db.session.scalars(select(MemberTable)).one()
    assert member.create_date == datetime(2023, 5, 24, 12, 0, tzinfo=timezone.utc)
    assert member.create_date.utcoffset() == timedelta(0)


def test_naive_timestamps_are_rejected():
    db.session.add(MemberTable(username="john", nickname="John", create_date=datetime(2023, 5, 24)))

    with pytest.raises(UtcTimestampError):
        db.session.commit()
    db.session.rollback()


def test_post_properties(generic_posts):
    post = db.session.get(PostTable, 2)

    assert post.author_nickname == "Carol"
    assert post.content == "use structlog"
    assert repr(post) == "PostTable(id=2)"


def test_post_modify(generic_posts):
    post = db.session.get(PostTable, 3)

    post.modify(title="Published draft", content="no longer secret", published=True, listed=True)
    db.session.commit()
    db.session.expire_all()

    post = db.session.get(PostTable, 3)
    assert (post.title, post.content, post.published, post.listed) == ("Published draft", "no longer secret", True, True)


def test_deleting_post_removes_body(generic_posts):
    db.session.delete(db.session.get(PostTable, 1))
    db.session.commit()

    assert db.session.get(PostTable, 1) is None
    assert sorted(db.session.scalars(select(PostBodyTable.content)).all()) == [
        "greetings",
        "order by",
        "secret",
        "use structlog",
    ]


def test_deleting_member_removes_posts_and_bodies(generic_posts):
    db.session.delete(db.session.get(MemberTable, 3))
    db.session.commit()
    db.session.expire_all()

    assert sorted(db.session.scalars(select(PostTable.id)).all()) == [2, 4, 5]
    assert sorted(db.session.scalars(select(PostBodyTable.content)).all()) == [
        "greetings",
        "order by",
        "use structlog",
    ]
