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
"""Field wiring — fills injection points from the complete bean registry."""

from __future__ import annotations

from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import Any

import structlog

from pybean.container.descriptor import FieldDescriptor, TypeDescriptor
from pybean.container.exceptions import FieldAssignmentError
from pybean.container.registry import BeanRegistry

logger = structlog.get_logger("pybean.container.wirer")


class FieldWirer:
    """Assigns beans into the injection points of every other bean.

    For each injection point the registry is scanned in order and every
    assignable bean is written into the field in turn, so when several beans
    match, the last one scanned is what the field ends up holding. A field
    with no match is left untouched.

    Must only run once the registry holds every bean.
    """

    def __init__(self, registry: BeanRegistry, *, parallel: bool = False, max_workers: int | None = None) -> None:
        self._registry = registry
        self._parallel = parallel
        self._max_workers = max_workers

    def wire_all(self, descriptors: Sequence[TypeDescriptor]) -> int:
        """Wire every registered bean; return the number of assignments made.

        Raises:
            FieldAssignmentError: If a matched bean cannot be written into a field.
        """
        pairs = [(self._registry.instance_of(d.bean_type), d) for d in descriptors]
        if self._parallel and len(pairs) > 1:
            with ThreadPoolExecutor(
                max_workers=self._max_workers,
                thread_name_prefix="pybean-wire",
            ) as executor:
                counts = list(executor.map(lambda pair: self.wire(*pair), pairs))
            return sum(counts)
        return sum(self.wire(bean, descriptor) for bean, descriptor in pairs)

    def wire(self, bean: Any, descriptor: TypeDescriptor) -> int:
        """Wire the injection points of a single bean."""
        assigned = 0
        for field in descriptor.injection_points:
            assigned += self._assign(bean, descriptor.bean_type, field)
        return assigned

    def _assign(self, bean: Any, bean_type: type, field: FieldDescriptor) -> int:
        matches = self._registry.find_assignable(field.declared_type)
        for match in matches:
            try:
                setattr(bean, field.name, match)
            except (AttributeError, TypeError) as exc:
                raise FieldAssignmentError(bean_type=bean_type, field_name=field.name, cause=exc) from exc
        if matches:
            logger.debug(
                "field_wired",
                bean=bean_type.__qualname__,
                field=field.name,
                value=type(matches[-1]).__qualname__,
                candidates=len(matches),
            )
        return len(matches)
