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
"""Bean registry — the completed, read-only set of bean instances."""

from __future__ import annotations

import difflib
from collections.abc import Iterable, Iterator
from typing import Any, TypeVar, cast

from pybean.container.descriptor import is_assignable
from pybean.container.exceptions import NoSuchBeanError

T = TypeVar("T")


class BeanRegistry:
    """Holds exactly one bean per candidate class, keyed by class identity.

    A bean's key is the class it was built from; assignability is checked
    against the bean's concrete class, which may be a subclass of its key.
    Iteration follows registration order. Lookups return the first assignable
    bean; which one that is when several qualify is not part of the contract.
    """

    __slots__ = ("_beans",)

    def __init__(self, beans: Iterable[Any] = ()) -> None:
        self._beans: dict[type, Any] = {}
        for bean in beans:
            self._register(type(bean), bean)

    @classmethod
    def from_candidates(cls, bean_types: Iterable[type], beans: Iterable[Any]) -> BeanRegistry:
        """Build a registry keyed by the classes *beans* were constructed from."""
        registry = cls()
        for bean_type, bean in zip(bean_types, beans, strict=True):
            registry._register(bean_type, bean)
        return registry

    def _register(self, bean_type: type, bean: Any) -> None:
        if bean_type in self._beans:
            raise ValueError(f"Duplicate bean for type '{bean_type.__qualname__}'")
        self._beans[bean_type] = bean

    def get_bean(self, target_type: type[T]) -> T:
        """Return the first bean assignable to *target_type*.

        Raises:
            NoSuchBeanError: If no registered bean is assignable.
        """
        for bean in self._beans.values():
            if is_assignable(type(bean), target_type):
                return cast(T, bean)
        raise NoSuchBeanError(
            bean_type=target_type,
            suggestions=self._similar_type_names(getattr(target_type, "__name__", "")),
        )

    def instance_of(self, bean_type: type[T]) -> T:
        """The bean registered for exactly *bean_type*, ignoring subclasses."""
        return cast(T, self._beans[bean_type])

    def find_assignable(self, target_type: Any) -> list[Any]:
        """All beans assignable to *target_type*, in registry order."""
        return [bean for bean in self._beans.values() if is_assignable(type(bean), target_type)]

    @property
    def bean_types(self) -> tuple[type, ...]:
        return tuple(self._beans)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._beans.values())

    def __len__(self) -> int:
        return len(self._beans)

    def __contains__(self, bean_type: object) -> bool:
        return bean_type in self._beans

    def __repr__(self) -> str:
        names = ", ".join(t.__qualname__ for t in self._beans)
        return f"BeanRegistry([{names}])"

    def _similar_type_names(self, name: str) -> list[str]:
        """Return registered type names similar to *name* using fuzzy matching."""
        if not name:
            return []
        registered_names = [t.__name__ for t in self._beans]
        return difflib.get_close_matches(name, registered_names, n=5, cutoff=0.4)
