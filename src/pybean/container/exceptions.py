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
"""Container exceptions — fatal errors during container construction and lookup misses."""

from __future__ import annotations

from pybean.kernel.exceptions import InfrastructureException


def _type_name(bean_type: object) -> str:
    return getattr(bean_type, "__qualname__", None) or getattr(bean_type, "__name__", repr(bean_type))


class BeanCreationException(InfrastructureException):
    """Fatal error while building a container — no container is produced.

    Analogous to Spring's BeanCreationException.
    """

    def __init__(self, subsystem: str, provider: str, reason: str) -> None:
        self.subsystem = subsystem
        self.provider = provider
        self.reason = reason
        message = f"Failed to build container during {subsystem} of '{provider}': {reason}"
        super().__init__(message=message, code=f"BEAN_CREATION_{subsystem.upper()}")

    def _set_message(self, lines: list[str]) -> None:
        self.args = ("\n".join(lines),)

    def __str__(self) -> str:
        return self.args[0] if self.args else ""


class NoDefaultConstructorError(BeanCreationException):
    """A registered class cannot be constructed without arguments."""

    def __init__(self, *, bean_type: type, required: list[str] | None = None) -> None:
        self.bean_type = bean_type
        self.required = required or []

        type_name = _type_name(bean_type)
        headline = f"Class '{type_name}' has no zero-argument constructor"

        BeanCreationException.__init__(
            self,
            subsystem="resolution",
            provider=type_name,
            reason=headline,
        )

        lines = [f"NoDefaultConstructorError: {headline}"]
        if self.required:
            lines.append("")
            lines.append(f"  Required parameters: {', '.join(self.required)}")
        lines.append("")
        lines.append("  Fix: Give every __init__ parameter a default, or use Autowired() fields instead")
        self._set_message(lines)


class InstantiationError(BeanCreationException):
    """Invoking a bean class's constructor raised an exception."""

    def __init__(self, *, bean_type: type, cause: BaseException) -> None:
        self.bean_type = bean_type
        self.cause = cause

        type_name = _type_name(bean_type)
        headline = f"Constructor of '{type_name}' raised {type(cause).__name__}: {cause}"

        BeanCreationException.__init__(
            self,
            subsystem="instantiation",
            provider=type_name,
            reason=headline,
        )
        self._set_message([f"InstantiationError: {headline}"])


class FieldAssignmentError(BeanCreationException):
    """A matched bean could not be written into an injection point."""

    def __init__(
        self,
        *,
        bean_type: type,
        field_name: str,
        cause: BaseException,
        fix: str | None = None,
    ) -> None:
        self.bean_type = bean_type
        self.field_name = field_name
        self.cause = cause

        type_name = _type_name(bean_type)
        headline = f"Cannot assign field '{type_name}.{field_name}': {cause}"

        BeanCreationException.__init__(
            self,
            subsystem="wiring",
            provider=type_name,
            reason=headline,
        )
        lines = [f"FieldAssignmentError: {headline}"]
        lines.append("")
        lines.append(
            f"  Fix: {fix}"
            if fix
            else "  Fix: Make the attribute writable (no read-only property, frozen dataclass or missing slot)"
        )
        self._set_message(lines)


class NoSuchBeanError(BeanCreationException):
    """No bean in the registry is assignable to the requested type."""

    def __init__(
        self,
        *,
        bean_type: type | None = None,
        suggestions: list[str] | None = None,
    ) -> None:
        self.bean_type = bean_type
        self.suggestions = suggestions or []

        if bean_type is not None:
            headline = f"No bean of type '{_type_name(bean_type)}' is registered"
        else:
            headline = "No matching bean is registered"

        BeanCreationException.__init__(
            self,
            subsystem="lookup",
            provider="container",
            reason=headline,
        )

        lines = [f"NoSuchBeanError: {headline}"]
        lines.append("")
        lines.append("  Suggestions:")
        lines.append("    - Pass the class (or a subclass) when building the container")
        lines.append("    - Add @service or @repository to the class and check the scanned package")
        if self.suggestions:
            lines.append("")
            lines.append(f"  Similar registered types: {', '.join(self.suggestions)}")
        self._set_message(lines)
