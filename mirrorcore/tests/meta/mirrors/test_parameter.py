"""
MIT License

Copyright (c) 2025 Sébastien Gachoud

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
SOFTWARE.

-------------------------------------------------------------------------------

Author: Sébastien Gachoud
Created: 2026-10-18
Description: Tests for the parameter mirrors and the parameter decorators.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"


import pytest

from mirrorcore.exceptions import InvalidParameterIndexError, InvalidTargetError
from mirrorcore.mirrors import (
    ClassMirror,
    MethodMirror,
    MirrorKind,
    ParameterMetadata,
    ParameterMirror,
    declaration_store,
)


class Inject(ParameterMetadata):
    """Test parameter metadata."""

    def __init__(self, token: str) -> None:
        super().__init__()
        self.token = token


inject = ParameterMirror.create_decorator


# =============================================================================
# Constructor Parameter Tests
# =============================================================================


class TestConstructorParameters:
    """Test decorating constructor parameters."""

    def test_decorate_constructor_parameter(self):
        """Constructor parameters are held by the class mirror."""

        class Service:
            """Test"""

            def __init__(self, db: str, cache: str) -> None:
                self.db = db
                self.cache = cache

        metadata = Inject("cache")
        mirror = ParameterMirror.decorate(Service, 1, metadata)

        class_mirror = ClassMirror.reflect(Service)
        assert class_mirror.get_parameter(1) is mirror
        assert class_mirror.get_parameters() == {1: mirror}
        assert mirror.index == 1
        assert mirror.method is None
        assert mirror.owner_mirror is class_mirror
        assert mirror.kind is MirrorKind.PARAMETER
        assert metadata.mirror is mirror
        assert declaration_store().get(metadata, Service) is mirror

    def test_class_decorator(self):
        """Applied to a class the decorator targets the constructor."""
        db, cache = Inject("db"), Inject("cache")

        @inject(1, cache)
        @inject(0, db)
        class Service:
            """Test"""

            def __init__(self, db: str, cache: str) -> None:
                self.db = db
                self.cache = cache

        parameters = ClassMirror.reflect(Service).get_parameters()
        assert sorted(parameters) == [0, 1]
        assert parameters[0].get_metadata() == [db]
        assert parameters[1].get_metadata() == [cache]
        assert Service("a", "b").cache == "b"

    def test_same_position_accumulates(self):
        """Metadata on the same position share one mirror."""

        class Service:
            """Test"""

        first = ParameterMirror.decorate(Service, 0, Inject("a"))
        second = ParameterMirror.decorate(Service, 0, {"optional": True})

        assert first is second
        assert len(first.get_metadata()) == 2

    @pytest.mark.parametrize("index", [-1, 1.5, "0", True])
    def test_invalid_index(self, index):
        """Positions are non-negative ints."""

        class Service:
            """Test"""

        with pytest.raises(InvalidParameterIndexError):
            ParameterMirror.decorate(Service, index, Inject("a"))

        with pytest.raises(InvalidParameterIndexError):
            inject(index, Inject("a"))

    def test_set_parameter_validates_index(self):
        """The class mirror rejects invalid positions too."""
        with pytest.raises(InvalidParameterIndexError):
            ClassMirror().set_parameter(-2, ParameterMirror(0))


# =============================================================================
# Method Parameter Tests
# =============================================================================


class TestMethodParameters:
    """Test decorating method parameters."""

    def test_method_parameter_decorator(self):
        """Applied to a method the decorator targets that method."""
        metadata = Inject("request")

        class Handler:
            """Test"""

            @inject(0, metadata)
            def handle(self, request: str) -> str:
                """Test"""
                return request

        class_mirror = ClassMirror.reflect(Handler)
        method = class_mirror.get_methods()["handle"]
        assert isinstance(method, MethodMirror)
        assert method.get_metadata() == []
        assert method.get_parameter(0).get_metadata() == [metadata]
        assert method.get_parameter(0).method == "handle"
        assert method.get_parameter(0).owner_mirror is method
        assert class_mirror.get_parameters() == {}
        assert Handler().handle("r") == "r"

    def test_mixed_with_method_decorator(self):
        """Method and parameter decorators share one method mirror."""
        route = {"route": "/items"}

        class Handler:
            """Test"""

            @MethodMirror.create_decorator(route)
            @inject(0, Inject("item"))
            def items(self, item: str) -> None:
                """Test"""

        method = ClassMirror.reflect(Handler).get_mirror("items")
        assert method.get_metadata() == [route]
        assert list(method.get_parameters()) == [0]

    def test_static_method_parameter(self):
        """Parameters of static methods belong to the static method mirror."""

        class Handler:
            """Test"""

            @inject(0, Inject("value"))
            @staticmethod
            def parse(value: str) -> str:
                """Test"""
                return value

        class_mirror = ClassMirror.reflect(Handler)
        assert list(class_mirror.get_static_methods()) == ["parse"]
        assert class_mirror.get_static_methods()["parse"].get_parameter(0) is not None

    def test_static_method_wrapping_parameter_decorator(self):
        """staticmethod may be applied over the parameter decorator."""

        class Handler:
            """Test"""

            @staticmethod
            @inject(0, Inject("value"))
            def parse(value: str) -> str:
                """Test"""
                return value

        assert Handler.parse("a") == "a"
        method = ClassMirror.reflect(Handler).get_static_methods()["parse"]
        assert [i.token for i in method.get_parameter(0).get_metadata()] == ["value"]

    def test_invalid_target(self):
        """Parameter decorators only apply to classes and callables."""
        with pytest.raises(InvalidTargetError):
            inject(0, Inject("a"))(42)


# =============================================================================
# Representation Tests
# =============================================================================


class TestParameterRepr:
    """Test string representations."""

    def test_repr(self):
        """The representation names the callable and the position."""

        class Service:
            """Test"""

        mirror = ParameterMirror.decorate(Service, 2, {}, method="run")

        assert "Service.run[2]" in repr(mirror)
