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
from typing import Any, Optional, cast

from structlog import get_logger

from postboard.db.database import Database, transactional
from postboard.db.models import (
    MemberTable,
    PostBodyTable,
    PostTable,
    TimestampedModel,
    UtcTimestamp,
    UtcTimestampError,
)
from postboard.settings import AppSettings

logger = get_logger(__name__)


class WrappedDatabase:
    def __init__(self, wrappee: Optional[Database] = None) -> None:
        self.wrapped_database = wrappee

    def update(self, wrappee: Database) -> None:
        self.wrapped_database = wrappee
        logger.warning("Database object configured, all methods referencing `db` should work.")

    def __getattr__(self, attr: str) -> Any:
        if not isinstance(self.wrapped_database, Database):
            if "_" in attr:
                logger.warning("No database configured, but attempting to access class methods")
                return
            raise RuntimeWarning(
                "No database configured at this time. Please pass database configuration to PostboardCore base_settings"
            )

        return getattr(self.wrapped_database, attr)


# Pass a modified AppSettings instance to PostboardCore to point the database elsewhere
wrapped_db = WrappedDatabase()
db = cast(Database, wrapped_db)


# The global database is set after calling this function
def init_database(settings: AppSettings) -> Database:
    wrapped_db.update(Database(settings.DATABASE_URI))
    return db


__all__ = [
    "transactional",
    "MemberTable",
    "PostTable",
    "PostBodyTable",
    "TimestampedModel",
    "UtcTimestamp",
    "UtcTimestampError",
    "db",
    "init_database",
]
