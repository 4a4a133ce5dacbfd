# Copyright 2019-2020 SURF, GÉANT.
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

from __future__ import annotations

from datetime import datetime, timezone

import sqlalchemy
import structlog
from sqlalchemy import Boolean, ForeignKey, Integer, String, Text, TypeDecorator
from sqlalchemy.engine import Dialect
from sqlalchemy.exc import DontWrapMixin
from sqlalchemy.orm import Mapped, mapped_column, relationship

from postboard.db.database import BaseModel
from postboard.utils.datetime import nowtz

logger = structlog.get_logger(__name__)

USERNAME_LENGTH = 50
NICKNAME_LENGTH = 50
TITLE_LENGTH = 255


class UtcTimestampError(Exception, DontWrapMixin):
    pass


class UtcTimestamp(TypeDecorator):
    """Timestamps in UTC.

    This column type always returns timestamps with the UTC timezone, regardless of the database/connection time zone
    configuration. It also guards against accidentally trying to store Python naive timestamps (those without a time
    zone). Backends without timezone support hand back naive values, which are stored as UTC.
    """

    impl = sqlalchemy.types.TIMESTAMP(timezone=True)
    cache_ok = False
    python_type = datetime

    def process_bind_param(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        if value is not None:
            if value.tzinfo is None:
                raise UtcTimestampError(f"Expected timestamp with tzinfo. Got naive timestamp {value!r} instead")
            return value.astimezone(timezone.utc)
        return value

    def process_result_value(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        if value is None:
            return value
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


class TimestampedModel(BaseModel):
    """Base for entities with an integer id and audited creation/modification timestamps."""

    __abstract__ = True

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    create_date: Mapped[datetime] = mapped_column(UtcTimestamp, default=nowtz, nullable=False)
    modify_date: Mapped[datetime] = mapped_column(UtcTimestamp, default=nowtz, onupdate=nowtz, nullable=False)


class MemberTable(TimestampedModel):
    __tablename__ = "members"

    username: Mapped[str] = mapped_column(String(USERNAME_LENGTH), nullable=False, unique=True, index=True)
    nickname: Mapped[str] = mapped_column(String(NICKNAME_LENGTH), nullable=False)

    posts: Mapped[list[PostTable]] = relationship(back_populates="author", cascade="all, delete-orphan")


class PostBodyTable(TimestampedModel):
    __tablename__ = "post_bodies"

    content: Mapped[str] = mapped_column(Text(), nullable=False)


class PostTable(TimestampedModel):
    __tablename__ = "posts"

    author_id: Mapped[int] = mapped_column(ForeignKey("members.id", ondelete="CASCADE"), nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(TITLE_LENGTH), nullable=False)
    published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    listed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    body_id: Mapped[int] = mapped_column(ForeignKey("post_bodies.id"), nullable=False, unique=True)

    author: Mapped[MemberTable] = relationship(back_populates="posts", lazy="joined")
    body: Mapped[PostBodyTable] = relationship(lazy="joined", cascade="all, delete-orphan", single_parent=True)

    @property
    def author_nickname(self) -> str:
        return self.author.nickname

    @property
    def content(self) -> str:
        return self.body.content

    def modify(self, title: str, content: str, published: bool, listed: bool) -> None:
        self.title = title
        self.body.content = content
        self.published = published
        self.listed = listed
