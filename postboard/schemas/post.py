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
from datetime import datetime

from pydantic import Field

from postboard.db.models import TITLE_LENGTH
from postboard.schemas.base import PostboardBaseModel


class PostSchema(PostboardBaseModel):
    id: int
    create_date: datetime
    modify_date: datetime
    author_id: int
    author_nickname: str
    title: str
    published: bool
    listed: bool


class PostDetailSchema(PostSchema):
    content: str


class PostUpdateSchema(PostboardBaseModel):
    title: str = Field(min_length=1, max_length=TITLE_LENGTH)
    content: str = Field(min_length=1)
    published: bool = False
    listed: bool = False


class PostCreateSchema(PostUpdateSchema):
    author_id: int
