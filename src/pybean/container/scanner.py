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
"""Type discovery and stereotype filtering for package-scanned containers."""

from __future__ import annotations

import importlib
import inspect
import pkgutil
import types
from collections.abc import Iterable
from typing import Protocol, runtime_checkable

import structlog

from pybean.container.stereotypes import DEFAULT_ROLE_MARKERS, Stereotype, is_injectable_type

logger = structlog.get_logger("pybean.container.scanner")


@runtime_checkable
class TypeDiscoveryService(Protocol):
    """Returns every loadable class beneath a root package, without duplicates."""

    def discover(self, root_package: str) -> set[type]: ...


class PackageScanner:
    """Discovers classes by importing a package and walking its submodules."""

    def discover(self, root_package: str) -> set[type]:
        """Import *root_package* and every submodule; collect the classes they define.

        Raises:
            ModuleNotFoundError: If *root_package* itself cannot be imported.
        """
        module = importlib.import_module(root_package)
        found: set[type] = set(scan_module_classes(module))

        # If it's a package, scan submodules
        if hasattr(module, "__path__"):
            for _importer, modname, _ispkg in pkgutil.walk_packages(module.__path__, prefix=module.__name__ + "."):
                try:
                    submodule = importlib.import_module(modname)
                except ImportError as exc:
                    logger.warning("scan_module_skipped", module=modname, error=str(exc))
                    continue
                found.update(scan_module_classes(submodule))

        logger.debug("package_scanned", package=root_package, classes=len(found))
        return found


class StaticTypeDiscovery:
    """In-memory discovery over a fixed set of classes, filtered by module prefix."""

    def __init__(self, classes: Iterable[type]) -> None:
        self._classes = tuple(classes)

    def discover(self, root_package: str) -> set[type]:
        return {
            cls
            for cls in self._classes
            if cls.__module__ == root_package or cls.__module__.startswith(root_package + ".")
        }


def scan_module_classes(module: types.ModuleType) -> list[type]:
    """Extract the classes defined (not merely imported) in *module*."""
    return [
        obj
        for _name, obj in inspect.getmembers(module, inspect.isclass)
        if obj.__module__ == module.__name__
    ]


def discover_candidates(
    root_package: str,
    discovery: TypeDiscoveryService,
    role_markers: Iterable[Stereotype] = DEFAULT_ROLE_MARKERS,
) -> list[type]:
    """Discover classes under *root_package* carrying any of *role_markers*.

    The result is sorted by qualified name so container builds are repeatable.
    """
    markers = frozenset(role_markers)
    discovered = discovery.discover(root_package)
    candidates = [cls for cls in discovered if is_injectable_type(cls, markers)]
    candidates.sort(key=lambda c: (c.__module__, c.__qualname__))
    logger.info(
        "candidates_discovered",
        package=root_package,
        discovered=len(discovered),
        candidates=len(candidates),
        markers=sorted(m.__name__ for m in markers),
    )
    return candidates
