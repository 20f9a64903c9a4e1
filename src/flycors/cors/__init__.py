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
"""CORS negotiation core: request classification, policy rules, and the negotiator."""

from flycors.cors.headers import (
    DEFAULT_MAX_AGE,
    HEADER_ALLOW_CREDENTIALS,
    HEADER_ALLOW_HEADERS,
    HEADER_ALLOW_METHODS,
    HEADER_ALLOW_ORIGIN,
    HEADER_EXPOSE_HEADERS,
    HEADER_MAX_AGE,
    HEADER_ORIGIN,
    HEADER_REQUEST_HEADERS,
    HEADER_REQUEST_METHOD,
    HEADER_VARY,
    WILDCARD,
)
from flycors.cors.negotiator import CORSDecision, CORSNegotiator
from flycors.cors.policy import CORSPolicy
from flycors.cors.request import CORSRequest, is_preflight

__all__ = [
    "CORSDecision",
    "CORSNegotiator",
    "CORSPolicy",
    "CORSRequest",
    "DEFAULT_MAX_AGE",
    "HEADER_ALLOW_CREDENTIALS",
    "HEADER_ALLOW_HEADERS",
    "HEADER_ALLOW_METHODS",
    "HEADER_ALLOW_ORIGIN",
    "HEADER_EXPOSE_HEADERS",
    "HEADER_MAX_AGE",
    "HEADER_ORIGIN",
    "HEADER_REQUEST_HEADERS",
    "HEADER_REQUEST_METHOD",
    "HEADER_VARY",
    "WILDCARD",
    "is_preflight",
]
