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

"""Paged member and post search service."""

__version__ = "0.1.0"


from structlog import get_logger

logger = get_logger(__name__)

logger.debug("Loading postboard", version=__version__)

from postboard.settings import app_settings  # noqa: E402
from postboard.app import PostboardCore  # noqa: E402

__all__ = [
    "PostboardCore",
    "app_settings",
]
