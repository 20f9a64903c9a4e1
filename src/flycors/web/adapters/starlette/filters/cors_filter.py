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
"""The CORS negotiator as a WebFilter."""

from __future__ import annotations

from starlette.requests import Request
from starlette.responses import Response

from flycors.cors.negotiator import CORSNegotiator
from flycors.cors.policy import CORSPolicy
from flycors.cors.request import CORSRequest
from flycors.web.adapters.starlette.cors_middleware import apply_decision, preflight_response
from flycors.web.ports.filter import CORS_FILTER_ORDER, CallNext


class CORSFilter:
    """Answers preflights without calling the rest of the chain; decorates everything else."""

    order = CORS_FILTER_ORDER

    def __init__(self, policy: CORSPolicy) -> None:
        self._negotiator = CORSNegotiator(policy)

    @property
    def policy(self) -> CORSPolicy:
        return self._negotiator.policy

    async def do_filter(self, request: Request, call_next: CallNext) -> Response:
        decision = self._negotiator.negotiate(CORSRequest.from_headers(request.method, request.headers))

        if decision.preflight:
            return preflight_response(decision)

        response: Response = await call_next(request)
        apply_decision(response.headers, decision)
        return response
