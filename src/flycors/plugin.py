# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Host plugin entry points.

A reverse proxy or application host discovers the CORS stage through these
functions: ``create_config()`` for the default configuration, ``new()`` to wrap
the next stage, and ``load()`` to do both from a configuration file.
"""

from __future__ import annotations

from pathlib import Path

import structlog
from starlette.types import ASGIApp

from flycors.core.config import Config
from flycors.web.adapters.starlette.cors_middleware import CORSMiddleware
from flycors.web.properties import CORSProperties

logger = structlog.get_logger("flycors.plugin")


def create_config() -> CORSProperties:
    """Return the default plugin configuration."""
    return CORSProperties()


def new(next_app: ASGIApp, config: CORSProperties, name: str = "cors") -> CORSMiddleware:
    """Create the CORS stage in front of *next_app*.

    The policy and its precomputed headers are built here, before the
    returned middleware serves its first request.
    """
    middleware = CORSMiddleware(next_app, policy=config.to_policy())
    logger.info(
        "cors_plugin_created",
        name=name,
        allow_origins=config.allow_origins,
        allow_credentials=config.allow_credentials,
    )
    return middleware


def load(
    path: str | Path,
    next_app: ASGIApp,
    active_profiles: list[str] | None = None,
    name: str = "cors",
) -> CORSMiddleware:
    """Read ``flycors.cors`` from a YAML/TOML file and create the CORS stage."""
    config = Config.from_file(path, active_profiles=active_profiles)
    return new(next_app, config.bind(CORSProperties), name=name)
