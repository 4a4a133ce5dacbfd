# Copyright 2019-2020 SURF, ESnet
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

import typer
from structlog import get_logger

from postboard.db.database import BaseModel, Database
from postboard.settings import app_settings

logger = get_logger(__name__)

app: typer.Typer = typer.Typer()


def _database() -> Database:
    return Database(app_settings.DATABASE_URI)


@app.command(help="Create all tables that do not exist yet.")
def create() -> None:
    """Create the tables of all postboard models.

    Existing tables are left untouched.
    """
    database = _database()
    BaseModel.metadata.create_all(database.engine)
    logger.info("Created tables", tables=sorted(BaseModel.metadata.tables))
    database.engine.dispose()


@app.command(help="Drop all postboard tables.")
def drop(
    force: bool = typer.Option(False, "--force", "-f", help="Do not ask for confirmation"),
) -> None:
    if not force:
        typer.confirm("This removes all members and posts. Continue?", abort=True)
    database = _database()
    BaseModel.metadata.drop_all(database.engine)
    logger.info("Dropped tables", tables=sorted(BaseModel.metadata.tables))
    database.engine.dispose()
