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
"""PyBean DI Container — reflective field wiring by type."""

from pybean.container.autowired import Autowired, is_injection_point
from pybean.container.container import Container
from pybean.container.descriptor import (
    ALL_FIELDS,
    AUTOWIRED_FIELDS,
    FieldDescriptor,
    TypeDescriptor,
)
from pybean.container.exceptions import (
    BeanCreationException,
    FieldAssignmentError,
    InstantiationError,
    NoDefaultConstructorError,
    NoSuchBeanError,
)
from pybean.container.registry import BeanRegistry
from pybean.container.scanner import PackageScanner, StaticTypeDiscovery, TypeDiscoveryService
from pybean.container.stereotypes import (
    DEFAULT_ROLE_MARKERS,
    component,
    is_injectable_type,
    repository,
    service,
)

__all__ = [
    "ALL_FIELDS",
    "AUTOWIRED_FIELDS",
    "Autowired",
    "BeanCreationException",
    "BeanRegistry",
    "Container",
    "DEFAULT_ROLE_MARKERS",
    "FieldAssignmentError",
    "FieldDescriptor",
    "InstantiationError",
    "NoDefaultConstructorError",
    "NoSuchBeanError",
    "PackageScanner",
    "StaticTypeDiscovery",
    "TypeDescriptor",
    "TypeDiscoveryService",
    "component",
    "is_injectable_type",
    "is_injection_point",
    "repository",
    "service",
]
