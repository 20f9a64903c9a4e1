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
"""CORSNegotiator: framework-agnostic per-request CORS orchestration.

Web adapters (ASGI middleware, WebFilter) ask the negotiator for a
:class:`CORSDecision` and then apply it: write the headers, and either answer
the preflight or forward to the next stage.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

import structlog

from flycors.cors.headers import (
    HEADER_ALLOW_CREDENTIALS,
    HEADER_ALLOW_HEADERS,
    HEADER_ALLOW_METHODS,
    HEADER_ALLOW_ORIGIN,
    HEADER_EXPOSE_HEADERS,
    HEADER_MAX_AGE,
    PREFLIGHT_STATUS_CODE,
)
from flycors.cors.policy import CORSPolicy
from flycors.cors.request import CORSRequest, is_preflight

logger = structlog.get_logger("flycors.cors")


@dataclass(frozen=True)
class CORSDecision:
    """Outcome of negotiating one request.

    Attributes:
        preflight: ``True`` when the request must be answered immediately.
        headers: Response headers to set, overwriting any existing value.
        vary: Value to append to the ``Vary`` header; empty means leave it alone.
    """

    preflight: bool
    headers: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    vary: str = ""

    @property
    def status_code(self) -> int | None:
        """204 for an answered preflight, ``None`` when the next stage owns the status."""
        return PREFLIGHT_STATUS_CODE if self.preflight else None


class CORSNegotiator:
    """Classifies requests and decides their CORS response headers.

    Holds no per-request state, so one instance serves concurrent requests.
    """

    __slots__ = ("_policy",)

    def __init__(self, policy: CORSPolicy) -> None:
        self._policy = policy

    @property
    def policy(self) -> CORSPolicy:
        return self._policy

    def negotiate(self, request: CORSRequest) -> CORSDecision:
        policy = self._policy
        headers: dict[str, str] = {}

        vary = policy.resolve_vary()
        allow_origin = policy.resolve_allow_origin(request)
        if allow_origin:
            headers[HEADER_ALLOW_ORIGIN] = allow_origin
        allow_credentials = policy.resolve_allow_credentials()
        if allow_credentials:
            headers[HEADER_ALLOW_CREDENTIALS] = allow_credentials

        preflight = is_preflight(request)
        if preflight:
            for name in (HEADER_ALLOW_METHODS, HEADER_ALLOW_HEADERS, HEADER_MAX_AGE):
                value = policy.cached(name)
                if value:
                    headers[name] = value
            logger.debug(
                "cors_preflight",
                origin=request.origin,
                request_method=request.request_method,
                allow_origin=allow_origin,
            )
        else:
            expose = policy.cached(HEADER_EXPOSE_HEADERS)
            if expose:
                headers[HEADER_EXPOSE_HEADERS] = expose
            logger.debug(
                "cors_request",
                method=request.method,
                origin=request.origin,
                allow_origin=allow_origin,
            )

        return CORSDecision(preflight=preflight, headers=MappingProxyType(headers), vary=vary)
