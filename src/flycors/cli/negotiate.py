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
"""'flycors negotiate' — Show how a single request would be answered."""

from __future__ import annotations

from pathlib import Path

import click

from flycors.cli.console import print_decision
from flycors.cli.options import config_options, load_properties
from flycors.cors.negotiator import CORSNegotiator
from flycors.cors.request import CORSRequest


@click.command()
@config_options
@click.option("--method", "-X", default="GET", show_default=True, help="HTTP method of the request.")
@click.option("--origin", default="", help="Origin request header.")
@click.option("--request-method", default="", help="Access-Control-Request-Method request header.")
@click.option("--request-headers", default="", help="Access-Control-Request-Headers request header.")
def negotiate_command(
    config_path: Path | None,
    profiles: tuple[str, ...],
    method: str,
    origin: str,
    request_method: str,
    request_headers: str,
) -> None:
    """Negotiate one request against the policy and print the result."""
    policy = load_properties(config_path, profiles).to_policy()
    request = CORSRequest(
        method=method,
        origin=origin,
        request_method=request_method,
        request_headers=request_headers,
    )
    decision = CORSNegotiator(policy).negotiate(request)

    print_decision(request, decision)
