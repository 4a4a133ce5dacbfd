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
from http import HTTPStatus
from typing import NoReturn

from starlette.exceptions import HTTPException


class ProblemDetailException(HTTPException):
    def __init__(
        self,
        status: int,
        detail: str | None = None,
        title: str | None = None,
        type: str | None = None,  # noqa: A002
        headers: dict[str, str] | None = None,
    ) -> None:
        super().__init__(status_code=status, detail=detail, headers=headers)
        self.title = title
        self.type = type


def raise_status(status: int, detail: str | None = None, headers: dict[str, str] | None = None) -> NoReturn:
    status = HTTPStatus(status)
    raise ProblemDetailException(status=status, detail=detail, title=status.phrase, headers=headers)
