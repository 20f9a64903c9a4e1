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
"""CORS configuration properties, bound from the ``flycors.cors`` section."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from flycors.core.config import config_properties
from flycors.cors.headers import DEFAULT_MAX_AGE
from flycors.cors.policy import CORSPolicy


@config_properties(prefix="flycors.cors")
class CORSProperties(BaseModel):
    """Recognized CORS options and their defaults.

    Keys may be written camelCase (``allowOrigins``) or snake_case
    (``allow_origins``)::

        flycors:
          cors:
            allowOrigins: ["https://example.com"]
            allowMethods: ["GET", "POST"]
            maxAge: 600
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="forbid",
    )

    allow_credentials: bool = False
    allow_headers: list[str] = Field(default_factory=list)
    allow_methods: list[str] = Field(default_factory=lambda: ["HEAD", "GET", "POST"])
    allow_origins: list[str] = Field(default_factory=lambda: ["*"])
    expose_headers: list[str] = Field(default_factory=list)
    max_age: int = DEFAULT_MAX_AGE

    def to_policy(self) -> CORSPolicy:
        """Build the immutable policy these properties describe."""
        return CORSPolicy(
            allow_credentials=self.allow_credentials,
            allow_origins=self.allow_origins,
            allow_methods=self.allow_methods,
            allow_headers=self.allow_headers,
            expose_headers=self.expose_headers,
            max_age=self.max_age,
        )
