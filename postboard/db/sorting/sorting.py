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

from collections.abc import Callable, Iterable, Mapping
from enum import Enum
from functools import cache
from typing import Any

import structlog
from more_itertools import chunked, partition
from pydantic import BaseModel
from sqlalchemy import ColumnElement, Select
from sqlalchemy.inspection import inspect
from sqlalchemy.sql import expression

from postboard.db.database import BaseModel as DbBaseModel
from postboard.utils.helpers import to_camel

logger = structlog.get_logger(__name__)


class SortOrder(Enum):
    ASC = "asc"
    DESC = "desc"


class Sort(BaseModel):
    field: str
    order: SortOrder = SortOrder.ASC


QueryType = Select
ColumnResolver = Callable[[str], ColumnElement | None]
SortColumnsType = Mapping[str, ColumnElement]


def column_resolver(columns: SortColumnsType) -> ColumnResolver:
    """Create a resolver that maps a requested field name onto one of the given columns.

    Unknown field names resolve to None.
    """

    def resolve(field: str) -> ColumnElement | None:
        return columns.get(field)

    return resolve


def order_clause(column: ColumnElement, order: SortOrder) -> ColumnElement:
    sa_sort = expression.desc if order == SortOrder.DESC else expression.asc
    return sa_sort(column)


def apply_sorting(query: QueryType, sort_by: Iterable[Sort], resolve: ColumnResolver) -> QueryType:
    """Append an ordering clause to the query for every sort item the resolver supports.

    Args:
        query: The select to extend. Existing ordering clauses are kept and take precedence.
        sort_by: The requested sort items; the first one becomes the primary sort key.
        resolve: Maps a field name onto a column, or None when the field is not sortable.

    Returns the select with the ordering clauses appended in input order. Unsupported fields are skipped.
    """
    for item in sort_by:
        column = resolve(item.field)
        if column is None:
            logger.debug("Skipping unsupported sort field", field=item.field, order=item.order.value)
            continue
        query = query.order_by(order_clause(column, item.order))
    return query


def generic_sorts_validate(resolve: ColumnResolver) -> Callable[[Iterable[Sort]], tuple[Iterable[Sort], Iterable[Sort]]]:
    """Create a function that splits sort items into unsupported and supported ones."""

    def validate_sort_items(sort_by: Iterable[Sort]) -> tuple[Iterable[Sort], Iterable[Sort]]:
        def _is_valid_sort(item: Sort) -> bool:
            return resolve(item.field) is not None

        return partition(_is_valid_sort, sort_by)

    return validate_sort_items


def generic_sort(columns: SortColumnsType) -> Callable[[QueryType, Iterable[Sort]], QueryType]:
    resolve = column_resolver(columns)

    def _sort(query: QueryType, sort_by: Iterable[Sort]) -> QueryType:
        return apply_sorting(query, sort_by, resolve)

    return _sort


def table_sort_columns(base_table: type[DbBaseModel]) -> dict[str, ColumnElement]:
    """Map the camelCased column names of a table onto its columns."""
    return {to_camel(key): value for key, value in inspect(base_table).columns.items()}


def create_memoized_field_list(column_mappings: Mapping[str, Any]) -> Callable[[], list[str]]:
    """Used to evaluate the list of keys for sorting once on first invocation.

    This is necessary to get the fully initialized list values, which can be updated during module importing.
    It works because Python closures are late-binding.
    """

    @cache
    def _sort_fields() -> list[str]:
        return sorted(column_mappings.keys())

    return _sort_fields


def _to_order(value: str | None) -> SortOrder:
    if value and value.strip().lower() == SortOrder.DESC.value:
        return SortOrder.DESC
    return SortOrder.ASC


def parse_sort_params(values: Iterable[str] | None) -> list[Sort]:
    """Parse repeated `sort=field,direction` query parameters.

    A single value may hold several `field,direction` pairs. A missing or unknown direction means ascending and
    blank field names are dropped.

    >>> [(s.field, s.order.value) for s in parse_sort_params(["username,asc", "id,desc"])]
    [('username', 'asc'), ('id', 'desc')]
    >>> [(s.field, s.order.value) for s in parse_sort_params(["nickname", ",desc"])]
    [('nickname', 'asc')]
    """
    sorts: list[Sort] = []
    for value in values or []:
        for pair in chunked(value.split(","), 2):
            field = pair[0].strip()
            if not field:
                continue
            sorts.append(Sort(field=field, order=_to_order(pair[1] if len(pair) == 2 else None)))
    return sorts
