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
"""structlog setup driven by the ``flycors.logging`` configuration section.

::

    flycors:
      logging:
        format: console        # or json
        level:
          root: INFO
          flycors.cors: DEBUG  # per-decision events
"""

from __future__ import annotations

import logging
import sys

import structlog

from flycors.core.config import Config

CORS_LOGGER = "flycors.cors"


def _renderer(fmt: str) -> structlog.types.Processor:
    if fmt == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def configure_logging(config: Config) -> None:
    """Route structlog through stdlib logging on stderr at the configured levels.

    Unknown level names fall back to ``INFO``.
    """
    levels = {str(name): str(level).upper() for name, level in config.get_section("flycors.logging.level").items()}
    root_level = levels.pop("root", "INFO")
    fmt = str(config.get("flycors.logging.format", "console")).lower()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
            _renderer(fmt),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, root_level, logging.INFO),
        force=True,
    )
    for name, level in levels.items():
        logging.getLogger(name).setLevel(getattr(logging, level, logging.INFO))
