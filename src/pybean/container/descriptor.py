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
"""Type descriptors — the container's only view of a class.

A :class:`TypeDescriptor` exposes a zero-argument ``construct()`` handle and
the class's own declared fields. The rest of the container never touches
``inspect`` or ``typing`` directly.
"""

from __future__ import annotations

import inspect
import sys
import types
import typing
from collections.abc import Callable
from dataclasses import dataclass
from typing import Annotated, Any, ClassVar, Union, get_args, get_origin

import structlog

from pybean.container.autowired import Autowired, is_injection_point
from pybean.container.exceptions import FieldAssignmentError, NoDefaultConstructorError

logger = structlog.get_logger("pybean.container.descriptor")

InjectionPointPolicy = Callable[[type, str], bool]


def all_fields(cls: type, field_name: str) -> bool:
    """Every declared field is an injection point."""
    return True


ALL_FIELDS: InjectionPointPolicy = all_fields
AUTOWIRED_FIELDS: InjectionPointPolicy = is_injection_point

_REQUIRED_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
    inspect.Parameter.KEYWORD_ONLY,
)


@dataclass(frozen=True)
class FieldDescriptor:
    """A declared field: its name, declared type, and injection eligibility."""

    name: str
    declared_type: Any
    injectable: bool

    def accepts(self, bean: object) -> bool:
        """Return ``True`` if *bean* is assignable to this field's declared type."""
        return is_assignable(type(bean), self.declared_type)


@dataclass(frozen=True)
class TypeDescriptor:
    """Resolved view of a bean class."""

    bean_type: type
    fields: tuple[FieldDescriptor, ...] = ()

    @property
    def injection_points(self) -> tuple[FieldDescriptor, ...]:
        return tuple(f for f in self.fields if f.injectable)

    def construct(self) -> Any:
        """Invoke the zero-argument constructor."""
        return self.bean_type()

    @classmethod
    def resolve(
        cls,
        bean_type: type,
        injection_points: InjectionPointPolicy = ALL_FIELDS,
    ) -> TypeDescriptor:
        """Resolve *bean_type* into a descriptor.

        Raises:
            TypeError: If *bean_type* is not a class.
            NoDefaultConstructorError: If constructing *bean_type* requires arguments.
            FieldAssignmentError: If an ``Autowired()`` attribute has no annotation.
        """
        if not isinstance(bean_type, type):
            raise TypeError(f"Expected a class, got {bean_type!r}")
        _check_default_constructor(bean_type)
        fields = tuple(
            FieldDescriptor(name=name, declared_type=declared, injectable=injection_points(bean_type, name))
            for name, declared in _declared_fields(bean_type)
        )
        _check_autowired_annotated(bean_type, fields)
        return cls(bean_type=bean_type, fields=fields)


def is_assignable(bean_type: type, target: Any) -> bool:
    """Return ``True`` if instances of *bean_type* can be stored in a *target*-typed slot."""
    if not isinstance(target, type):
        return False
    try:
        return issubclass(bean_type, target)
    except TypeError:
        # Non runtime-checkable Protocols refuse issubclass().
        return False


def _check_default_constructor(bean_type: type) -> None:
    try:
        sig = inspect.signature(bean_type)
    except (TypeError, ValueError):
        # Not introspectable (some builtins); construct() reports real failures.
        return
    required = [
        name
        for name, param in sig.parameters.items()
        if param.kind in _REQUIRED_KINDS and param.default is inspect.Parameter.empty
    ]
    if required:
        raise NoDefaultConstructorError(bean_type=bean_type, required=required)


def _declared_fields(bean_type: type) -> list[tuple[str, Any]]:
    """Own (non-inherited) annotated instance fields, with hints resolved.

    An annotation that cannot be evaluated (a ``TYPE_CHECKING``-only import,
    a class local to a function) is kept as written. It is not a class, so
    it never matches a bean.
    """
    own = _own_annotations(bean_type)
    if not own:
        return []
    try:
        hints = typing.get_type_hints(bean_type, include_extras=True)
    except (NameError, AttributeError, TypeError, SyntaxError):
        hints = {name: _resolve_hint(bean_type, name, raw) for name, raw in own.items()}

    fields: list[tuple[str, Any]] = []
    for name, raw in own.items():
        hint = hints.get(name, raw)
        if hint is ClassVar or get_origin(hint) is ClassVar:
            continue
        fields.append((name, _unwrap(hint)))
    return fields


def _own_annotations(bean_type: type) -> dict[str, Any]:
    try:
        return inspect.get_annotations(bean_type)
    except NameError:
        # Lazily evaluated annotations (PEP 649) naming something undefined.
        import annotationlib

        return annotationlib.get_annotations(bean_type, format=annotationlib.Format.FORWARDREF)


def _resolve_hint(bean_type: type, name: str, raw: Any) -> Any:
    """Evaluate one string annotation in the scope of its class, or return it unchanged."""
    if not isinstance(raw, str):
        return raw
    module = sys.modules.get(bean_type.__module__)
    globalns = dict(vars(module)) if module is not None else {}
    try:
        return eval(raw, globalns, dict(vars(bean_type)))
    except (NameError, AttributeError, TypeError, SyntaxError):
        logger.debug(
            "field_annotation_unresolved",
            bean=bean_type.__qualname__,
            field=name,
            annotation=raw,
        )
        return raw


def _check_autowired_annotated(bean_type: type, fields: tuple[FieldDescriptor, ...]) -> None:
    declared = {f.name for f in fields}
    for name, value in vars(bean_type).items():
        if isinstance(value, Autowired) and name not in declared:
            raise FieldAssignmentError(
                bean_type=bean_type,
                field_name=name,
                cause=TypeError("Autowired() field has no type annotation"),
                fix=f"Annotate the field with the type to inject, e.g. '{name}: SomeType = Autowired()'",
            )


def _unwrap(hint: Any) -> Any:
    """Strip ``Annotated`` and ``Optional`` wrappers down to the underlying type."""
    if get_origin(hint) is Annotated:
        return _unwrap(get_args(hint)[0])
    if get_origin(hint) is Union or isinstance(hint, types.UnionType):
        non_none = [a for a in get_args(hint) if a is not type(None)]
        if len(non_none) == 1:
            return _unwrap(non_none[0])
    return hint
