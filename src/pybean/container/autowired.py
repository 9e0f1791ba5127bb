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
"""Autowired descriptor for field-level dependency injection."""

from __future__ import annotations

from typing import Any


class Autowired:
    """Marks a class attribute as an injection point.

    Usage::

        @service
        class OrderService:
            repo: OrderRepository = Autowired()

    The package-scanning container only wires attributes declared with
    ``Autowired()``. Until a bean has been assigned, the attribute reads as
    ``None`` on instances; on the class it returns the marker itself so the
    container can find it.

    The annotation is required: it is the type the container matches beans
    against. A bare ``repo = Autowired()`` fails the build with
    :class:`~pybean.container.exceptions.FieldAssignmentError`.
    """

    __slots__ = ("name",)

    def __init__(self) -> None:
        self.name: str | None = None

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        try:
            return instance.__dict__.get(self.name)
        except AttributeError:
            return None

    def __set__(self, instance: Any, value: Any) -> None:
        instance.__dict__[self.name] = value

    def __repr__(self) -> str:
        return "Autowired()"


def is_injection_point(cls: type, field_name: str) -> bool:
    """Return ``True`` if *field_name* is declared on *cls* as ``Autowired()``."""
    return isinstance(cls.__dict__.get(field_name), Autowired)
