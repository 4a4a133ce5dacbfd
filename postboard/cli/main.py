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

import typer
import uvicorn

from postboard.app import PostboardCore
from postboard.cli import database
from postboard.settings import app_settings

app = typer.Typer()
app.add_typer(database.app, name="db", help="Interact with the application database")


@app.command(help="Run the postboard API with uvicorn")
def run(
    host: str = typer.Option(app_settings.HOST, help="Interface to bind to"),
    port: int = typer.Option(app_settings.PORT, help="Port to listen on"),
) -> None:
    uvicorn.run(PostboardCore(), host=host, port=port)


if __name__ == "__main__":
    app()
