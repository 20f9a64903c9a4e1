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
"""FlyCors CLI — inspect CORS policies and negotiations."""

from __future__ import annotations

import click

from flycors.cli.negotiate import negotiate_command
from flycors.cli.policy import policy_command


@click.group()
@click.version_option(package_name="flycors")
def cli() -> None:
    """FlyCors — Fetch standard CORS negotiation."""


cli.add_command(policy_command, name="policy")
cli.add_command(negotiate_command, name="negotiate")
