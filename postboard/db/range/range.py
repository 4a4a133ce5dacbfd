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

import typing
from typing import Any

import structlog
from pydantic import BaseModel, Field, field_validator
from sqlalchemy import GenerativeSelect

from postboard.db.sorting import Sort
from postboard.settings import app_settings

logger = structlog.get_logger(__name__)

# OFFSET and LIMIT are bound as signed 64 bit integers
MAX_OFFSET = 2**63 - 1

Selectable = typing.TypeVar("Selectable", bound=GenerativeSelect)


def _as_int(value: Any) -> int | None:
    """Interpret a page parameter as an integer, None when it is missing or not a whole number."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


class PageRequest(BaseModel):
    """A requested page, numbered from 1, with the sort items to apply.

    Invalid values are replaced instead of rejected: a missing, non-numeric or below 1 page becomes the first page,
    a page whose offset would not fit a 64 bit integer becomes the last addressable page, and a page size that is
    missing, non-numeric or outside `[1, MAX_PAGE_SIZE]` becomes `DEFAULT_PAGE_SIZE`.
    """

    page: int = 1
    page_size: int = Field(default_factory=lambda: app_settings.DEFAULT_PAGE_SIZE)
    sort: list[Sort] = []

    @field_validator("page", mode="before")
    @classmethod
    def clamp_page(cls, value: Any) -> int:
        page = _as_int(value)
        if page is None or page < 1:
            logger.debug("Clamping page number", page=value)
            return 1
        if page > (last_page := MAX_OFFSET // app_settings.MAX_PAGE_SIZE):
            logger.debug("Clamping page number", page=value, last_page=last_page)
            return last_page
        return page

    @field_validator("page_size", mode="before")
    @classmethod
    def clamp_page_size(cls, value: Any) -> int:
        page_size = _as_int(value)
        if page_size is None or not 1 <= page_size <= app_settings.MAX_PAGE_SIZE:
            logger.debug("Replacing page size with default", page_size=value)
            return app_settings.DEFAULT_PAGE_SIZE
        return page_size

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size


def apply_range_to_statement(stmt: Selectable, range_start: int, range_end: int) -> Selectable:
    """Apply range to the statement.

    Args:
        stmt: The sqlalchemy statement. (e.g. a Select) to add offset and limit to.
        range_start: the index of the first item to get.
        range_end: the index of the first item to be excluded after range_start.

    returns statement with offset and limit applied.
    """
    if range_start >= range_end:
        msg = "range start must be lower than end"
        logger.warning(msg, range_start=range_start, range_end=range_end)
        raise ValueError(msg)

    return stmt.slice(range_start, range_end)


def apply_page_to_statement(stmt: Selectable, page_request: PageRequest) -> Selectable:
    return apply_range_to_statement(stmt, page_request.offset, page_request.offset + page_request.page_size)
