#!/usr/bin/env python3
"""The main application module.

This module contains the main `PostboardCore` class for the `FastAPI` backend.
"""

# Copyright 2019-2020 SURF, ESnet
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
from typing import Any

import structlog
from fastapi.applications import FastAPI
from starlette.middleware.cors import CORSMiddleware
from starlette.responses import JSONResponse, Response

from nwastdlib.logging import ClearStructlogContextASGIMiddleware, initialise_logging
from postboard import __version__
from postboard.api.api_v1.api import api_router
from postboard.api.error_handling import ProblemDetailException
from postboard.db import db, init_database
from postboard.db.database import DBSessionMiddleware
from postboard.exception_handlers import problem_detail_handler
from postboard.log_config import LOGGER_OVERRIDES
from postboard.settings import AppSettings, app_settings

logger = structlog.get_logger(__name__)


class PostboardCore(FastAPI):
    def __init__(
        self,
        title: str = "Postboard",
        description: str = "Paged search over the members and posts of a bulletin board.",
        openapi_url: str = "/api/openapi.json",
        docs_url: str = "/api/docs",
        redoc_url: str = "/api/redoc",
        version: str = __version__,
        default_response_class: type[Response] = JSONResponse,
        base_settings: AppSettings = app_settings,
        **kwargs: Any,
    ) -> None:
        self.base_settings = base_settings

        super().__init__(
            title=title,
            description=description,
            openapi_url=openapi_url,
            docs_url=docs_url,
            redoc_url=redoc_url,
            version=version,
            default_response_class=default_response_class,
            **kwargs,
        )

        initialise_logging(LOGGER_OVERRIDES)

        self.include_router(api_router, prefix="/api")

        init_database(base_settings)

        self.add_middleware(ClearStructlogContextASGIMiddleware)
        self.add_middleware(DBSessionMiddleware, database=db)
        origins = base_settings.CORS_ORIGINS.split(",")
        self.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_methods=base_settings.CORS_ALLOW_METHODS,
            allow_headers=base_settings.CORS_ALLOW_HEADERS,
            expose_headers=base_settings.CORS_EXPOSE_HEADERS,
        )

        self.add_exception_handler(ProblemDetailException, problem_detail_handler)  # type: ignore[arg-type]

        @self.router.get("/", response_model=str, response_class=JSONResponse, include_in_schema=False)
        def _index() -> str:
            return "Postboard"

        logger.info("Postboard initialised", environment=base_settings.ENVIRONMENT, version=version)
