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
"""Options and configuration loading shared by CLI commands."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

import click

from flycors.core.config import Config
from flycors.kernel.exceptions import ConfigurationException
from flycors.logging import configure_logging
from flycors.web.properties import CORSProperties

F = TypeVar("F", bound=Callable[..., Any])


def config_options(func: F) -> F:
    """Add ``--config`` and ``--profile`` to a command."""
    func = click.option(
        "--profile",
        "profiles",
        multiple=True,
        help="Active profile overlay (repeatable).",
    )(func)
    func = click.option(
        "--config",
        "config_path",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        default=None,
        help="YAML or TOML file with a flycors.cors section.",
    )(func)
    return func


def load_properties(config_path: Path | None, profiles: tuple[str, ...]) -> CORSProperties:
    """Load CORS properties, falling back to defaults when no file is given.

    Also configures logging from the same file.
    """
    try:
        if config_path is None:
            config = Config({})
        else:
            config = Config.from_file(config_path, active_profiles=list(profiles))
        configure_logging(config)
        return config.bind(CORSProperties)
    except ConfigurationException as exc:
        raise click.ClickException(str(exc)) from exc
