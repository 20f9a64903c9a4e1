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
"""Rich rendering of CORS policies and decisions.

Every value that comes from a config file or the command line goes through
:func:`rich.markup.escape` before it is printed, so origins or header names
that look like markup (``[red]``) are shown literally.
"""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.theme import Theme

from flycors.cors.headers import HEADER_VARY
from flycors.cors.negotiator import CORSDecision
from flycors.cors.request import CORSRequest
from flycors.web.properties import CORSProperties

FLYCORS_THEME = Theme({
    "header": "cyan",
    "preflight": "bold magenta",
    "status": "bold green",
    "omitted": "dim",
    "warning": "bold yellow",
})

console = Console(theme=FLYCORS_THEME)


def _values(values: Sequence[str]) -> str:
    return escape(", ".join(values)) if values else "[omitted](none)[/omitted]"


def policy_table(properties: CORSProperties) -> Table:
    table = Table(title="Policy", show_header=False, border_style="dim")
    table.add_column("Option", style="header")
    table.add_column("Value")
    table.add_row("allowOrigins", _values(properties.allow_origins))
    table.add_row("allowMethods", _values(properties.allow_methods))
    table.add_row("allowHeaders", _values(properties.allow_headers))
    table.add_row("exposeHeaders", _values(properties.expose_headers))
    table.add_row("allowCredentials", str(properties.allow_credentials).lower())
    table.add_row("maxAge", str(properties.max_age))
    return table


def precomputed_table(properties: CORSProperties) -> Table:
    """Request-independent headers, as the policy caches them."""
    table = Table(title="\nPrecomputed headers", border_style="dim")
    table.add_column("Header", style="header")
    table.add_column("Value")
    for name, value in properties.to_policy().precomputed.items():
        table.add_row(name, escape(value) if value else "[omitted](omitted)[/omitted]")
    return table


def print_decision(request: CORSRequest, decision: CORSDecision) -> None:
    """Print the outcome line followed by the headers the decision sets."""
    if decision.preflight:
        console.print(
            f"\n[preflight]Preflight[/preflight] from {escape(request.origin)}: "
            f"answered with [status]{decision.status_code}[/status]\n"
        )
    else:
        console.print(
            f"\n[preflight]Not a preflight[/preflight] ({escape(request.method)}): forwarded to the next stage\n"
        )

    table = Table(title="Response headers", border_style="dim")
    table.add_column("Header", style="header")
    table.add_column("Value")
    if decision.vary:
        table.add_row(HEADER_VARY, decision.vary)
    for name, value in decision.headers.items():
        table.add_row(name, escape(value))

    if table.row_count == 0:
        console.print("[warning]No CORS headers emitted[/warning]")
    else:
        console.print(table)
