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
"""Exception hierarchy shared by every PyBean subsystem.

All PyBean exceptions inherit from :class:`PyBeanException`, so callers can
catch the root to handle every framework error, or a subclass for targeted
handling.

Hierarchy::

    PyBeanException
    ├── ContextNotRefreshedError
    └── InfrastructureException
        └── (container errors, see pybean.container.exceptions)
"""

from __future__ import annotations

# =============================================================================
# Base Exception
# =============================================================================


class PyBeanException(Exception):
    """Base exception for all PyBean errors.

    Carries an optional error code and context dict for structured error data.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "BEAN_CREATION_WIRING").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Infrastructure Exceptions
# =============================================================================


class InfrastructureException(PyBeanException):
    """Failures of the framework machinery itself rather than of user input."""


# =============================================================================
# Context Exceptions
# =============================================================================


class ContextNotRefreshedError(PyBeanException):
    """A bean was requested from an application context that was never refreshed."""

    def __init__(self) -> None:
        super().__init__(
            message="ApplicationContext has not been refreshed; call refresh() before get_bean()",
            code="CONTEXT_NOT_REFRESHED",
        )
