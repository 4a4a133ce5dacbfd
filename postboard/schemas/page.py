# Copyright 2022-2023 SURF.
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
from math import ceil
from typing import Generic, TypeVar

from postboard.db.range.range import PageRequest
from postboard.schemas.base import PostboardBaseModel

GenericType = TypeVar("GenericType")


class Pageable(PostboardBaseModel):
    """Pagination context of a page of search results.

    `page_number` is 1-based, as requested by the client.
    """

    page_number: int
    page_size: int
    total_elements: int
    total_pages: int
    sorted: bool


class Page(PostboardBaseModel, Generic[GenericType]):
    content: list[GenericType]
    pageable: Pageable


def to_result_page(
    items: list[GenericType],
    page_request: PageRequest,
    total: int | None,
    is_sorted: bool = False,
) -> Page[GenericType]:
    total_elements = total if total else 0
    return Page(
        content=items,
        pageable=Pageable(
            page_number=page_request.page,
            page_size=page_request.page_size,
            total_elements=total_elements,
            total_pages=ceil(total_elements / page_request.page_size),
            sorted=is_sorted,
        ),
    )
