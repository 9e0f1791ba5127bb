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
"""Spring-style stereotype decorators that tag classes as injectable.

Each stereotype is a role marker the package-scanning container can filter on:
- @component: generic managed bean
- @service: business logic layer
- @repository: data access layer

Markers are recorded on the decorated class only; subclasses do not inherit
them.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, TypeVar, overload

T = TypeVar("T", bound=type)

_STEREOTYPES_ATTR = "__pybean_stereotypes__"

Stereotype = Callable[..., Any]


def _make_stereotype(stereotype_name: str) -> Stereotype:
    """Factory that creates a stereotype decorator with the given name."""

    @overload
    def stereotype(cls: T) -> T: ...

    @overload
    def stereotype() -> Callable[[T], T]: ...

    def stereotype(cls: T | None = None) -> T | Callable[[T], T]:
        def decorator(cls: T) -> T:
            existing = cls.__dict__.get(_STEREOTYPES_ATTR, frozenset())
            setattr(cls, _STEREOTYPES_ATTR, existing | {stereotype_name})
            return cls

        if cls is not None:
            return decorator(cls)
        return decorator

    stereotype.__name__ = stereotype_name
    stereotype.__qualname__ = stereotype_name
    return stereotype


component = _make_stereotype("component")
service = _make_stereotype("service")
repository = _make_stereotype("repository")

STEREOTYPES: dict[str, Stereotype] = {
    "component": component,
    "service": service,
    "repository": repository,
}

DEFAULT_ROLE_MARKERS: frozenset[Stereotype] = frozenset({service, repository})


def stereotypes_of(cls: type) -> frozenset[str]:
    """Names of the stereotypes declared directly on *cls*."""
    return cls.__dict__.get(_STEREOTYPES_ATTR, frozenset())


def stereotype_by_name(name: str) -> Stereotype:
    """Look up a stereotype decorator by its name (``"service"``, ...)."""
    try:
        return STEREOTYPES[name]
    except KeyError:
        raise ValueError(
            f"Unknown stereotype '{name}'. Known stereotypes: {', '.join(sorted(STEREOTYPES))}"
        ) from None


def is_injectable_type(cls: type, role_markers: Iterable[Stereotype] = DEFAULT_ROLE_MARKERS) -> bool:
    """Return ``True`` if *cls* carries at least one of *role_markers*."""
    declared = stereotypes_of(cls)
    return any(marker.__name__ in declared for marker in role_markers)
