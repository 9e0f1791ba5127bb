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
"""DI container configuration properties."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pybean.container.stereotypes import STEREOTYPES, Stereotype, stereotype_by_name
from pybean.core.config import config_properties


@config_properties(prefix="pybean.container")
class ContainerProperties(BaseModel):
    """Configuration for container construction (pybean.container.*)."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    parallel: bool = False
    max_workers: int | None = Field(default=None, ge=1, alias="max-workers")
    role_markers: list[str] = Field(default_factory=lambda: ["service", "repository"], alias="role-markers")
    scan_package: str | None = Field(default=None, alias="scan-package")

    @field_validator("role_markers", mode="before")
    @classmethod
    def _split_markers(cls, value: object) -> object:
        if isinstance(value, str):
            return [part.strip() for part in value.split(",") if part.strip()]
        return value

    @field_validator("role_markers")
    @classmethod
    def _known_markers(cls, value: list[str]) -> list[str]:
        unknown = [name for name in value if name not in STEREOTYPES]
        if unknown:
            raise ValueError(f"unknown stereotypes {unknown}; expected any of {sorted(STEREOTYPES)}")
        return value

    def stereotypes(self) -> frozenset[Stereotype]:
        """The configured role markers as stereotype decorators."""
        return frozenset(stereotype_by_name(name) for name in self.role_markers)
