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
"""ApplicationContext — configured front door to a PyBean container."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import TypeVar

from pybean.config.properties.container import ContainerProperties
from pybean.container.container import Container
from pybean.container.scanner import TypeDiscoveryService
from pybean.core.config import Config
from pybean.kernel.exceptions import ContextNotRefreshedError
from pybean.logging.port import LoggingPort
from pybean.logging.structlog_adapter import StructlogAdapter

T = TypeVar("T")


class ApplicationContext:
    """Builds a container from configuration and exposes bean lookup.

    ``refresh()`` configures logging, binds :class:`ContainerProperties`
    and builds the container, either from an explicit set of classes or by
    scanning a package (``pybean.container.scan-package`` when none is given).
    """

    def __init__(self, config: Config | None = None, logging_port: LoggingPort | None = None) -> None:
        self._config = config or Config()
        self._logging = logging_port or StructlogAdapter()
        self._logger = self._logging.get_logger("pybean.context")
        self._properties: ContainerProperties | None = None
        self._container: Container | None = None

    @classmethod
    def from_file(cls, path: str | Path, active_profiles: list[str] | None = None) -> ApplicationContext:
        return cls(Config.from_file(path, active_profiles=active_profiles))

    def refresh(
        self,
        types: Iterable[type] | None = None,
        *,
        package: str | None = None,
        discovery: TypeDiscoveryService | None = None,
    ) -> Container:
        """Build the container; a failed build leaves the context unrefreshed.

        Raises:
            ValueError: If neither classes nor a package to scan are available,
                or the container configuration is invalid.
            BeanCreationException: If container construction fails.
        """
        self._logging.configure(self._config)
        props = self._config.bind(ContainerProperties)

        if types is not None:
            container = Container(types, parallel=props.parallel, max_workers=props.max_workers)
        else:
            root = package or props.scan_package
            if not root:
                raise ValueError("No classes given and no 'pybean.container.scan-package' configured")
            container = Container.for_package(
                root,
                discovery=discovery,
                role_markers=props.stereotypes(),
                parallel=props.parallel,
                max_workers=props.max_workers,
            )

        self._properties = props
        self._container = container
        self._logger.info("context_refreshed", beans=len(container), sources=self._config.loaded_sources)
        return container

    def get_bean(self, bean_type: type[T]) -> T:
        """Resolve a bean by type from the refreshed container."""
        return self.container.get_bean(bean_type)

    @property
    def container(self) -> Container:
        if self._container is None:
            raise ContextNotRefreshedError()
        return self._container

    @property
    def config(self) -> Config:
        return self._config

    @property
    def properties(self) -> ContainerProperties | None:
        """Container properties bound by the last successful refresh."""
        return self._properties

    @property
    def is_active(self) -> bool:
        return self._container is not None
