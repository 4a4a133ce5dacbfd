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

"""Module that implements member related API endpoints."""

from http import HTTPStatus

import structlog
from fastapi.param_functions import Query
from fastapi.routing import APIRouter
from sqlalchemy import select

from postboard.api.error_handling import raise_status
from postboard.api.helpers import fetch_page, get_or_404
from postboard.db import MemberTable, db, transactional
from postboard.db.filters.member import filter_members
from postboard.db.range.range import PageRequest
from postboard.db.sorting import parse_sort_params
from postboard.db.sorting.member import DEFAULT_MEMBER_SORT, sort_members, validate_member_sorts
from postboard.schemas import MemberCreateSchema, MemberSchema, Page, to_result_page
from postboard.types import MemberSearchKeywordType

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.get("/", response_model=Page[MemberSchema])
def search_members(
    page: str | None = None,
    page_size: str | None = Query(None, alias="pageSize"),
    sort: list[str] = Query([]),
    kw_type: MemberSearchKeywordType = Query(MemberSearchKeywordType.ALL, alias="kwType"),
    kw: str = "",
) -> Page[MemberSchema]:
    page_request = PageRequest(page=page, page_size=page_size, sort=parse_sort_params(sort))
    logger.info(
        "search_members() called",
        page=page_request.page,
        page_size=page_request.page_size,
        sort=sort,
        kw_type=kw_type.value,
        kw=kw,
    )

    stmt = filter_members(select(MemberTable), kw_type, kw)
    members, total, is_sorted = fetch_page(
        stmt, page_request, sort_members, validate_member_sorts, DEFAULT_MEMBER_SORT
    )
    return to_result_page([MemberSchema.model_validate(m) for m in members], page_request, total, is_sorted)


@router.get("/{member_id}", response_model=MemberSchema)
def member_by_id(member_id: int) -> MemberTable:
    return get_or_404(MemberTable, member_id)


@router.post("/", response_model=MemberSchema, status_code=HTTPStatus.CREATED)
def join(data: MemberCreateSchema) -> MemberTable:
    if db.session.scalars(select(MemberTable).filter(MemberTable.username == data.username)).first():
        raise_status(HTTPStatus.CONFLICT, f"Username {data.username} is already in use")

    member = MemberTable(username=data.username, nickname=data.nickname)
    with transactional(db, logger):
        db.session.add(member)
    logger.info("Member joined", member_id=member.id, username=member.username)
    return member
