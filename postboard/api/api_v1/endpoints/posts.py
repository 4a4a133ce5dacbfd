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

"""Module that implements post related API endpoints."""

from http import HTTPStatus

import structlog
from fastapi.param_functions import Query
from fastapi.routing import APIRouter

from postboard.api.helpers import fetch_page, get_or_404
from postboard.db import MemberTable, PostBodyTable, PostTable, db, transactional
from postboard.db.filters.post import filter_posts, select_listed_posts
from postboard.db.range.range import PageRequest
from postboard.db.sorting import parse_sort_params
from postboard.db.sorting.post import DEFAULT_POST_SORT, sort_posts, validate_post_sorts
from postboard.schemas import Page, PostCreateSchema, PostDetailSchema, PostSchema, PostUpdateSchema, to_result_page
from postboard.types import PostSearchKeywordType

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.get("/", response_model=Page[PostSchema])
def search_posts(
    page: str | None = None,
    page_size: str | None = Query(None, alias="pageSize"),
    sort: list[str] = Query([]),
    kw_type: PostSearchKeywordType = Query(PostSearchKeywordType.ALL, alias="kwType"),
    kw: str = "",
) -> Page[PostSchema]:
    page_request = PageRequest(page=page, page_size=page_size, sort=parse_sort_params(sort))
    logger.info(
        "search_posts() called",
        page=page_request.page,
        page_size=page_request.page_size,
        sort=sort,
        kw_type=kw_type.value,
        kw=kw,
    )

    stmt = filter_posts(select_listed_posts(), kw_type, kw)
    posts, total, is_sorted = fetch_page(stmt, page_request, sort_posts, validate_post_sorts, DEFAULT_POST_SORT)
    return to_result_page([PostSchema.model_validate(p) for p in posts], page_request, total, is_sorted)


@router.get("/{post_id}", response_model=PostDetailSchema)
def post_by_id(post_id: int) -> PostTable:
    return get_or_404(PostTable, post_id)


@router.post("/", response_model=PostDetailSchema, status_code=HTTPStatus.CREATED)
def write(data: PostCreateSchema) -> PostTable:
    author = get_or_404(MemberTable, data.author_id)
    post = PostTable(
        author=author,
        title=data.title,
        published=data.published,
        listed=data.listed,
        body=PostBodyTable(content=data.content),
    )
    with transactional(db, logger):
        db.session.add(post)
    logger.info("Post written", post_id=post.id, author_id=author.id)
    return post


@router.put("/{post_id}", response_model=PostDetailSchema)
def modify(post_id: int, data: PostUpdateSchema) -> PostTable:
    post = get_or_404(PostTable, post_id)
    with transactional(db, logger):
        post.modify(title=data.title, content=data.content, published=data.published, listed=data.listed)
    logger.info("Post modified", post_id=post.id)
    return post


@router.delete("/{post_id}", status_code=HTTPStatus.NO_CONTENT)
def delete(post_id: int) -> None:
    post = get_or_404(PostTable, post_id)
    with transactional(db, logger):
        db.session.delete(post)
    logger.info("Post deleted", post_id=post_id)
