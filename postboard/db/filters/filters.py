# Copyright 2019-2023 SURF.
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
from collections.abc import Callable, Mapping, Sequence
from enum import Enum

import structlog
from sqlalchemy import ColumnElement, Select, func, or_

logger = structlog.get_logger(__name__)

QueryType = Select
KeywordColumnsType = Mapping[Enum, Sequence[ColumnElement]]


def generic_keyword_filter(
    columns_by_keyword_type: KeywordColumnsType,
) -> Callable[[QueryType, Enum, str | None], QueryType]:
    """Create a keyword filter that searches the columns registered for a keyword type.

    The keyword matches case-insensitively anywhere in the column value; multiple columns are OR-ed together.
    A blank keyword leaves the query untouched.
    """

    def _filter(query: QueryType, kw_type: Enum, kw: str | None) -> QueryType:
        keyword = (kw or "").strip()
        if not keyword:
            return query

        columns = columns_by_keyword_type[kw_type]
        logger.debug("Applying keyword filter", kw_type=kw_type.value, kw=keyword)
        conditions = [func.lower(column).contains(keyword.lower(), autoescape=True) for column in columns]
        return query.where(or_(*conditions))

    return _filter
