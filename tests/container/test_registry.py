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
"""Tests for BeanRegistry lookups and FieldWirer assignment policy."""

import pytest

from pybean.container import BeanRegistry, NoSuchBeanError, TypeDescriptor
from pybean.container.wirer import FieldWirer


class Shape:
    pass


class Circle(Shape):
    pass


class Square(Shape):
    pass


class Canvas:
    shape: Shape
    background: "Paint"


class Paint:
    pass


class TestBeanRegistry:
    def test_rejects_two_beans_of_same_type(self):
        with pytest.raises(ValueError):
            BeanRegistry([Circle(), Circle()])

    def test_get_bean_returns_first_assignable(self):
        circle, square = Circle(), Square()
        registry = BeanRegistry([circle, square])
        assert registry.get_bean(Shape) is circle
        assert registry.get_bean(Square) is square

    def test_get_bean_missing(self):
        registry = BeanRegistry([Circle()])
        with pytest.raises(NoSuchBeanError):
            registry.get_bean(Square)

    def test_instance_of_ignores_subclasses(self):
        registry = BeanRegistry([Circle()])
        with pytest.raises(KeyError):
            registry.instance_of(Shape)

    def test_find_assignable_in_registry_order(self):
        square, canvas, circle = Square(), Canvas(), Circle()
        registry = BeanRegistry([square, canvas, circle])
        assert registry.find_assignable(Shape) == [square, circle]
        assert registry.find_assignable(Paint) == []

    def test_from_candidates_keys_by_candidate_class(self):
        first, second = Circle(), Circle()
        registry = BeanRegistry.from_candidates([Shape, Circle], [first, second])
        assert registry.bean_types == (Shape, Circle)
        assert registry.instance_of(Shape) is first
        assert registry.find_assignable(Circle) == [first, second]

    def test_read_only_views(self):
        circle = Circle()
        registry = BeanRegistry([circle])
        assert len(registry) == 1
        assert list(registry) == [circle]
        assert Circle in registry
        assert registry.bean_types == (Circle,)
        assert "Circle" in repr(registry)


class TestFieldWirer:
    def _wire(self, beans):
        registry = BeanRegistry(beans)
        descriptors = [TypeDescriptor.resolve(type(b)) for b in beans]
        count = FieldWirer(registry).wire_all(descriptors)
        return registry, count

    def test_every_match_is_assigned_last_one_kept(self):
        canvas, circle, square = Canvas(), Circle(), Square()
        _, count = self._wire([canvas, circle, square])
        assert canvas.shape is square
        assert count == 2

    def test_no_match_leaves_field_unset(self):
        canvas = Canvas()
        self._wire([canvas])
        assert not hasattr(canvas, "shape")
        assert not hasattr(canvas, "background")

    def test_forward_reference_field_is_wired(self):
        canvas, paint = Canvas(), Paint()
        self._wire([canvas, paint])
        assert canvas.background is paint

    def test_parallel_wiring(self):
        canvas, circle, paint = Canvas(), Circle(), Paint()
        registry = BeanRegistry([canvas, circle, paint])
        descriptors = [TypeDescriptor.resolve(type(b)) for b in (canvas, circle, paint)]
        count = FieldWirer(registry, parallel=True, max_workers=2).wire_all(descriptors)
        assert count == 2
        assert canvas.shape is circle
        assert canvas.background is paint
