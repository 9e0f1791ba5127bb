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
"""Bean instantiation — one ``construct()`` call per descriptor."""

from __future__ import annotations

import time
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import Any

import structlog

from pybean.container.descriptor import TypeDescriptor
from pybean.container.exceptions import InstantiationError

logger = structlog.get_logger("pybean.container.instantiator")


class BeanInstantiator:
    """Creates one live instance per :class:`TypeDescriptor`.

    Constructors are independent of each other, so when ``parallel`` is set
    they run on a thread pool. Each result lands in its own pre-sized slot,
    keeping the output aligned with the input order.

    Args:
        parallel: Run constructors on a ``ThreadPoolExecutor``.
        max_workers: Pool size; ``None`` lets the executor decide.
    """

    def __init__(self, *, parallel: bool = False, max_workers: int | None = None) -> None:
        self._parallel = parallel
        self._max_workers = max_workers

    def instantiate(self, descriptors: Sequence[TypeDescriptor]) -> list[Any]:
        """Construct every descriptor once; return instances in input order.

        Raises:
            InstantiationError: If any constructor raises or returns an object
                that is not an instance of its class. No instances are returned.
        """
        if self._parallel and len(descriptors) > 1:
            return self._instantiate_parallel(descriptors)
        return [self._create(d) for d in descriptors]

    def _instantiate_parallel(self, descriptors: Sequence[TypeDescriptor]) -> list[Any]:
        slots: list[Any] = [None] * len(descriptors)
        with ThreadPoolExecutor(
            max_workers=self._max_workers,
            thread_name_prefix="pybean-instantiate",
        ) as executor:
            futures = [executor.submit(self._create, d) for d in descriptors]
            # Leaving the block joins every worker; slots are only read afterwards.
        for index, future in enumerate(futures):
            slots[index] = future.result()
        return slots

    @staticmethod
    def _create(descriptor: TypeDescriptor) -> Any:
        start = time.perf_counter_ns()
        try:
            instance = descriptor.construct()
        except Exception as exc:
            raise InstantiationError(bean_type=descriptor.bean_type, cause=exc) from exc
        if not isinstance(instance, descriptor.bean_type):
            # A __new__ that hands back some unrelated object.
            raise InstantiationError(
                bean_type=descriptor.bean_type,
                cause=TypeError(
                    f"constructor returned {type(instance).__qualname__}, "
                    f"not an instance of {descriptor.bean_type.__qualname__}"
                ),
            )
        logger.debug(
            "bean_instantiated",
            bean=descriptor.bean_type.__qualname__,
            elapsed_us=(time.perf_counter_ns() - start) // 1000,
        )
        return instance
