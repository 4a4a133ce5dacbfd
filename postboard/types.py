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
from pydantic_forms.types import strEnum

__all__ = [
    "strEnum",
    "MemberSortField",
    "PostSortField",
    "MemberSearchKeywordType",
    "PostSearchKeywordType",
]


class MemberSortField(strEnum):
    ID = "id"
    USERNAME = "username"
    NICKNAME = "nickname"
    CREATE_DATE = "createDate"
    MODIFY_DATE = "modifyDate"


class PostSortField(strEnum):
    ID = "id"
    TITLE = "title"
    AUTHOR_ID = "authorId"
    CREATE_DATE = "createDate"
    MODIFY_DATE = "modifyDate"


class MemberSearchKeywordType(strEnum):
    USERNAME = "username"
    NICKNAME = "nickname"
    ALL = "all"


class PostSearchKeywordType(strEnum):
    TITLE = "title"
    CONTENT = "content"
    AUTHOR_NICKNAME = "authorNickname"
    ALL = "all"
