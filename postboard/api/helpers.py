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

from collections.abc import Callable, Iterable, Sequence
from http import HTTPStatus
from typing import Any

from sqlalchemy import Select, func, select
from structlog import get_logger

from postboard.api.error_handling import raise_status
from postboard.db import db
from postboard.db.range.range import PageRequest, apply_page_to_statement
from postboard.db.sorting import QueryType, Sort

logger = get_logger(__name__)

SortFunction = Callable[[QueryType, Iterable[Sort]], QueryType]
SortValidator = Callable[[Iterable[Sort]], tuple[Iterable[Sort], Iterable[Sort]]]


def count_statement(stmt: Select) -> int:
    return db.session.scalar(select(func.count()).select_from(stmt.order_by(None).subquery())) or 0


def fetch_page(
    stmt: Select,
    page_request: PageRequest,
    sort_fn: SortFunction,
    validate_sorts: SortValidator,
    default_sort: list[Sort],
) -> tuple[Sequence[Any], int, bool]:
    """Count, sort and slice a search statement.

    When none of the requested sort items are supported the default sort is used instead.

    Returns the rows of the requested page, the total number of rows and whether a requested sort was applied.
    """
    total = count_statement(stmt)

    invalid_sorts, valid_sorts = validate_sorts(page_request.sort)
    if ignored := [item.field for item in invalid_sorts]:
        logger.debug("Ignoring unsupported sort fields", fields=ignored)
    is_sorted = any(True for _ in valid_sorts)

    stmt = sort_fn(stmt, page_request.sort if is_sorted else default_sort)
    stmt = apply_page_to_statement(stmt, page_request)
    return db.session.scalars(stmt).unique().all(), total, is_sorted


def get_or_404(table: type, id_: int) -> Any:
    if not (row := db.session.get(table, id_)):
        raise_status(HTTPStatus.NOT_FOUND, f"{table.__name__.removesuffix('Table')} id {id_} not found")
    return row
