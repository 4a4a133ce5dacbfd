# Copyright 2019-2020 SURF, GÉANT.
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

"""Module that combines the API endpoint routers."""

from fastapi.routing import APIRouter

from postboard.api.api_v1.endpoints import health, members, posts

api_router = APIRouter()

api_router.include_router(members.router, prefix="/members", tags=["Core", "Members"])
api_router.include_router(posts.router, prefix="/posts", tags=["Core", "Posts"])
api_router.include_router(health.router, prefix="/health", tags=["Core"])
