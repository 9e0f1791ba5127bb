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
"""Tests for stereotype decorators and role-marker filtering."""

import pytest

from pybean.container import DEFAULT_ROLE_MARKERS, component, is_injectable_type, repository, service
from pybean.container.stereotypes import stereotype_by_name, stereotypes_of


@service
class PaymentService:
    pass


@repository()
class PaymentRepository:
    pass


@component
class Clock:
    pass


@service
@repository
class HybridBean:
    pass


class SubPaymentService(PaymentService):
    pass


class Untagged:
    pass


class TestStereotypeDecorators:
    def test_decorator_returns_class(self):
        assert PaymentService.__name__ == "PaymentService"

    def test_bare_and_called_forms(self):
        assert stereotypes_of(PaymentService) == frozenset({"service"})
        assert stereotypes_of(PaymentRepository) == frozenset({"repository"})

    def test_stacked_stereotypes(self):
        assert stereotypes_of(HybridBean) == frozenset({"service", "repository"})

    def test_not_inherited(self):
        assert stereotypes_of(SubPaymentService) == frozenset()

    def test_decorator_names(self):
        assert service.__name__ == "service"
        assert repository.__name__ == "repository"
        assert component.__name__ == "component"


class TestRoleMarkers:
    def test_default_markers(self):
        assert DEFAULT_ROLE_MARKERS == frozenset({service, repository})

    def test_any_marker_is_sufficient(self):
        assert is_injectable_type(PaymentService)
        assert is_injectable_type(PaymentRepository)
        assert is_injectable_type(HybridBean)

    def test_component_needs_explicit_marker(self):
        assert not is_injectable_type(Clock)
        assert is_injectable_type(Clock, {component})

    def test_untagged_and_subclass_rejected(self):
        assert not is_injectable_type(Untagged)
        assert not is_injectable_type(SubPaymentService)

    def test_empty_marker_set_rejects_everything(self):
        assert not is_injectable_type(PaymentService, set())

    def test_lookup_by_name(self):
        assert stereotype_by_name("service") is service
        with pytest.raises(ValueError, match="Unknown stereotype"):
            stereotype_by_name("controller")
