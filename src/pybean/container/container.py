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
"""Reflective DI container with field wiring by type assignability."""

from __future__ import annotations

import time
from collections.abc import Iterable, Iterator
from typing import Any, TypeVar

import structlog

from pybean.container.descriptor import (
    ALL_FIELDS,
    AUTOWIRED_FIELDS,
    InjectionPointPolicy,
    TypeDescriptor,
)
from pybean.container.instantiator import BeanInstantiator
from pybean.container.registry import BeanRegistry
from pybean.container.scanner import PackageScanner, TypeDiscoveryService, discover_candidates
from pybean.container.stereotypes import DEFAULT_ROLE_MARKERS, Stereotype
from pybean.container.wirer import FieldWirer

T = TypeVar("T")

logger = structlog.get_logger("pybean.container")


class Container:
    """Dependency injection container.

    Building a container runs the whole pipeline eagerly:

    1. resolve each class into a :class:`TypeDescriptor`
    2. construct one instance per class with its zero-argument constructor
    3. wire every injection point with each assignable bean (last match wins)
    4. freeze the result into a :class:`BeanRegistry`

    Any failure aborts the build and propagates; a ``Container`` object only
    exists once every step succeeded.

    Args:
        types: Classes to register. Duplicates are registered once.
        injection_points: Which declared fields to wire. Defaults to all of them.
        parallel: Run construction and wiring on a thread pool.
        max_workers: Thread pool size when ``parallel`` is set.
    """

    def __init__(
        self,
        types: Iterable[type],
        *,
        injection_points: InjectionPointPolicy = ALL_FIELDS,
        parallel: bool = False,
        max_workers: int | None = None,
    ) -> None:
        candidates = list(dict.fromkeys(types))
        start = time.perf_counter()
        logger.debug("container_building", candidates=len(candidates), parallel=parallel)

        descriptors = [TypeDescriptor.resolve(cls, injection_points) for cls in candidates]
        instances = BeanInstantiator(parallel=parallel, max_workers=max_workers).instantiate(descriptors)
        registry = BeanRegistry.from_candidates((d.bean_type for d in descriptors), instances)
        assignments = FieldWirer(registry, parallel=parallel, max_workers=max_workers).wire_all(descriptors)

        self._descriptors = {d.bean_type: d for d in descriptors}
        self._registry = registry
        logger.info(
            "container_ready",
            beans=len(registry),
            assignments=assignments,
            elapsed_ms=round((time.perf_counter() - start) * 1000, 3),
        )

    @classmethod
    def for_package(
        cls,
        root_package: str,
        *,
        discovery: TypeDiscoveryService | None = None,
        role_markers: Iterable[Stereotype] = DEFAULT_ROLE_MARKERS,
        parallel: bool = False,
        max_workers: int | None = None,
    ) -> Container:
        """Build a container from the stereotype-tagged classes under *root_package*.

        Only fields declared with ``Autowired()`` are wired.
        """
        candidates = discover_candidates(root_package, discovery or PackageScanner(), role_markers)
        return cls(
            candidates,
            injection_points=AUTOWIRED_FIELDS,
            parallel=parallel,
            max_workers=max_workers,
        )

    def get_bean(self, target_type: type[T]) -> T:
        """Return a bean assignable to *target_type*.

        Raises:
            NoSuchBeanError: If no bean is assignable to *target_type*.
        """
        return self._registry.get_bean(target_type)

    def descriptor_of(self, bean_type: type) -> TypeDescriptor:
        """The resolved descriptor for a registered class."""
        return self._descriptors[bean_type]

    @property
    def registry(self) -> BeanRegistry:
        return self._registry

    @property
    def beans(self) -> list[Any]:
        """All beans, in registry order."""
        return list(self._registry)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._registry)

    def __len__(self) -> int:
        return len(self._registry)

    def __contains__(self, bean_type: object) -> bool:
        return bean_type in self._registry

    def __repr__(self) -> str:
        return f"Container(beans={len(self._registry)})"
