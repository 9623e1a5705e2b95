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
Description: Tests for the type annotation utilities.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"


from typing import Any, ClassVar, Final, Optional, Union

import pytest

from mirrorcore.typing_utilities import (
    constructor_param_types,
    is_class_var,
    is_union,
    resolve_annotation_types,
    strip_qualifiers,
)


class TestAnnotationPredicates:
    """Test is_union and is_class_var."""

    @pytest.mark.parametrize(
        "annotation, expected",
        [
            (int | str, True),
            (Union[int, str], True),
            (Optional[int], True),
            (int, False),
            (list[int], False),
        ],
    )
    def test_is_union(self, annotation: Any, expected: bool):
        """Unions are Union and UnionType annotations."""
        assert is_union(annotation) is expected

    @pytest.mark.parametrize(
        "annotation, expected",
        [
            (ClassVar, True),
            (ClassVar[int], True),
            ("ClassVar[int]", True),
            ("typing.ClassVar", True),
            ("ClassVarious", False),
            (Final[int], False),
            (int, False),
            (None, False),
        ],
    )
    def test_is_class_var(self, annotation: Any, expected: bool):
        """ClassVar annotations, evaluated or not."""
        assert is_class_var(annotation) is expected


class TestStripQualifiers:
    """Test strip_qualifiers."""

    @pytest.mark.parametrize(
        "annotation, expected",
        [
            (Final[int], int),
            (ClassVar[list[int]], list[int]),
            (ClassVar, Any),
            (int, int),
        ],
    )
    def test_strip(self, annotation: Any, expected: Any):
        """Wrappers are removed, bare wrappers become Any."""
        assert strip_qualifiers(annotation) == expected


class TestResolveAnnotationTypes:
    """Test resolve_annotation_types."""

    def test_forward_references(self):
        """String annotations are evaluated."""
        assert resolve_annotation_types({"a": "int", "b": list[str]}) == {
            "a": int,
            "b": list[str],
        }


class TestConstructorParamTypes:
    """Test constructor_param_types."""

    def test_annotated_parameters(self):
        """Parameters after self in declaration order."""

        class A:
            """Test"""

            def __init__(self, a: int, b: "str", c=None, *, d: bytes = b"") -> None:
                pass

        assert constructor_param_types(A) == [int, str, Any, bytes]

    def test_variadic_parameters_skipped(self):
        """*args and **kwargs are not parameter types."""

        class A:
            """Test"""

            def __init__(self, *args: int, **kwargs: str) -> None:
                pass

        assert constructor_param_types(A) == []

    def test_inherited_constructor(self):
        """A class without its own constructor uses the one it inherits."""

        class A:
            """Test"""

            def __init__(self, a: int) -> None:
                pass

        class B(A):
            """Test"""

        assert constructor_param_types(B) == [int]

    def test_unresolvable_forward_reference(self):
        """Unresolvable names are kept as written."""

        class A:
            """Test"""

            def __init__(self, a: "Missing") -> None:  # type: ignore # noqa: F821
                pass

        assert constructor_param_types(A) == ["Missing"]

    def test_default_constructor(self):
        """object.__init__ has no parameters."""
        assert constructor_param_types(object) == []
