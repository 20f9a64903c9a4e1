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
"""'flycors policy' — Show the effective CORS policy."""

from __future__ import annotations

from pathlib import Path

import click

from flycors.cli.console import console, policy_table, precomputed_table
from flycors.cli.options import config_options, load_properties


@click.command()
@config_options
def policy_command(config_path: Path | None, profiles: tuple[str, ...]) -> None:
    """Display the configured policy and its precomputed headers."""
    properties = load_properties(config_path, profiles)
    console.print(policy_table(properties))
    console.print(precomputed_table(properties))
