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
"""CORSPolicy: the server's sharing rules and the per-header decisions they imply."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType

import structlog

from flycors.cors.headers import (
    DEFAULT_MAX_AGE,
    HEADER_ALLOW_HEADERS,
    HEADER_ALLOW_METHODS,
    HEADER_EXPOSE_HEADERS,
    HEADER_MAX_AGE,
    HEADER_ORIGIN,
    WILDCARD,
)
from flycors.cors.request import CORSRequest

logger = structlog.get_logger("flycors.cors")


def _join_or_wildcard(values: Sequence[str]) -> str:
    """Return ``*`` if the wildcard is listed anywhere, else the comma-space joined list."""
    if WILDCARD in values:
        return WILDCARD
    return ", ".join(values)


@dataclass(frozen=True)
class CORSPolicy:
    """Immutable CORS sharing policy.

    The request-independent header values are computed once, when the policy
    is constructed, and kept in a read-only mapping. A policy can therefore be
    shared between any number of concurrent requests without locking. To change
    the rules at runtime build a new policy and swap the reference.

    Every ``resolve_*`` method returns the header value to emit, or the empty
    string when the header must be omitted. Omission is how CORS denies sharing,
    so none of them raise.

    Clients whose credentials mode is ``"include"`` treat a wildcard value as a
    literal and fail the request. Returning the wildcard in that case is still
    the correct answer (Fetch 3.2.5).
    """

    allow_credentials: bool = False
    allow_origins: Sequence[str] = ()
    allow_methods: Sequence[str] = ()
    allow_headers: Sequence[str] = ()
    expose_headers: Sequence[str] = ()
    max_age: int = DEFAULT_MAX_AGE
    _cache: Mapping[str, str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "allow_origins", tuple(self.allow_origins))
        object.__setattr__(self, "allow_methods", tuple(self.allow_methods))
        object.__setattr__(self, "allow_headers", tuple(self.allow_headers))
        object.__setattr__(self, "expose_headers", tuple(self.expose_headers))
        object.__setattr__(self, "max_age", int(self.max_age))
        object.__setattr__(self, "_cache", MappingProxyType(self._build_cache()))

        logger.debug(
            "cors_policy_built",
            allow_origins=list(self.allow_origins),
            allow_credentials=self.allow_credentials,
            allow_methods=self.cached(HEADER_ALLOW_METHODS),
            allow_headers=self.cached(HEADER_ALLOW_HEADERS),
            expose_headers=self.cached(HEADER_EXPOSE_HEADERS),
            max_age=self.cached(HEADER_MAX_AGE),
        )
        if self.allow_credentials and WILDCARD in self.allow_origins:
            logger.warning(
                "cors_wildcard_with_credentials",
                detail="clients sending credentials will reject a wildcard Access-Control-Allow-Origin",
            )

    def _build_cache(self) -> dict[str, str]:
        return {
            HEADER_ALLOW_METHODS: self.resolve_allow_methods(),
            HEADER_ALLOW_HEADERS: self.resolve_allow_headers(),
            HEADER_EXPOSE_HEADERS: self.resolve_expose_headers(),
            HEADER_MAX_AGE: self.resolve_max_age(),
        }

    # ------------------------------------------------------------------
    # Precomputed values
    # ------------------------------------------------------------------

    @property
    def precomputed(self) -> Mapping[str, str]:
        """Read-only mapping of header name to its request-independent value."""
        return self._cache

    def cached(self, header: str) -> str:
        """Return the precomputed value for *header*, or ``""`` if it is not cached."""
        return self._cache.get(header, "")

    # ------------------------------------------------------------------
    # Decision rules
    # ------------------------------------------------------------------

    def resolve_allow_origin(self, request: CORSRequest) -> str:
        """Value for ``Access-Control-Allow-Origin``.

        The wildcard wins wherever it appears in the list. Otherwise the
        request's ``Origin`` is echoed back if it equals a configured origin
        exactly (no scheme, host, or port normalization).
        """
        result = ""
        for allowed in self.allow_origins:
            if allowed == WILDCARD:
                return WILDCARD
            if allowed == request.origin:
                result = request.origin
        return result

    def resolve_allow_credentials(self) -> str:
        """Value for ``Access-Control-Allow-Credentials``."""
        return "true" if self.allow_credentials else ""

    def resolve_allow_methods(self) -> str:
        """Value for ``Access-Control-Allow-Methods`` (preflight only)."""
        return _join_or_wildcard(self.allow_methods)

    def resolve_allow_headers(self) -> str:
        """Value for ``Access-Control-Allow-Headers`` (preflight only)."""
        return _join_or_wildcard(self.allow_headers)

    def resolve_expose_headers(self) -> str:
        """Value for ``Access-Control-Expose-Headers`` (non-preflight only)."""
        return _join_or_wildcard(self.expose_headers)

    def resolve_max_age(self) -> str:
        """Value for ``Access-Control-Max-Age``. Negative values disable caching."""
        return str(self.max_age)

    def resolve_vary(self) -> str:
        """Value to append to ``Vary``.

        Emitted whenever more than one origin is configured. This is a length
        check, so a list mixing the wildcard with literal origins still yields
        ``Origin`` even though the answer is always ``*``.
        """
        if len(self.allow_origins) > 1:
            return HEADER_ORIGIN
        return ""
