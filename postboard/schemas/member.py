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

from postboard.db.models import NICKNAME_LENGTH, USERNAME_LENGTH
from postboard.schemas.base import PostboardBaseModel


class MemberSchema(PostboardBaseModel):
    id: int
    create_date: datetime
    modify_date: datetime
    username: str
    nickname: str


class MemberCreateSchema(PostboardBaseModel):
    username: str = Field(min_length=1, max_length=USERNAME_LENGTH)
    nickname: str = Field(min_length=1, max_length=NICKNAME_LENGTH)
