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
"""Read-only view over the parts of an HTTP request that CORS looks at."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from flycors.cors.headers import (
    HEADER_ORIGIN,
    HEADER_REQUEST_HEADERS,
    HEADER_REQUEST_METHOD,
    METHOD_OPTIONS,
)


@dataclass(frozen=True)
class CORSRequest:
    """The HTTP method plus the three CORS request headers.

    Missing headers are represented by the empty string, so an absent header
    and an empty one are indistinguishable.
    """

    method: str
    origin: str = ""
    request_method: str = ""
    request_headers: str = ""

    @classmethod
    def from_headers(cls, method: str, headers: Mapping[str, str]) -> CORSRequest:
        """Build a view from any header mapping, matching names case-insensitively."""
        lowered: dict[str, str] = {}
        for name, value in headers.items():
            lowered.setdefault(name.lower(), value)
        return cls(
            method=method,
            origin=lowered.get(HEADER_ORIGIN.lower(), ""),
            request_method=lowered.get(HEADER_REQUEST_METHOD.lower(), ""),
            request_headers=lowered.get(HEADER_REQUEST_HEADERS.lower(), ""),
        )


def is_preflight(request: CORSRequest) -> bool:
    """Return ``True`` if *request* is a CORS preflight request (Fetch 3.2.2).

    All four conditions are required. A plain ``OPTIONS`` request without the
    ``Access-Control-Request-*`` headers is an ordinary request and must reach
    the application.
    """
    return (
        request.method == METHOD_OPTIONS
        and request.origin != ""
        and request.request_method != ""
        and request.request_headers != ""
    )
