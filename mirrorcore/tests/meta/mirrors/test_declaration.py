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
Description: Tests for the declaration mirror envelope and the metadata payloads.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"


from mirrorcore.mirrors import (
    ClassMetadata,
    DeclarationMetadata,
    DeclarationMirror,
    PropertyMetadata,
)


class Label(ClassMetadata):
    """Test metadata."""

    def __init__(self, text: str) -> None:
        super().__init__()
        self.text = text


# =============================================================================
# Metadata Collection Tests
# =============================================================================


class TestDeclarationMirror:
    """Test the ordered metadata of a declaration."""

    def test_empty(self):
        """A new mirror has no target and no metadata."""
        mirror = DeclarationMirror()

        assert mirror.target is None
        assert mirror.metadata == ()
        assert mirror.get_metadata() == []

    def test_insertion_order(self):
        """Metadata are kept in application order."""
        mirror = DeclarationMirror()
        first, second, third = Label("1"), {"x": 1}, Label("3")

        for metadata in (first, second, third):
            mirror.add_metadata(metadata)

        assert mirror.metadata == (first, second, third)

    def test_identity_set(self):
        """Adding the same object twice keeps it once, equal objects are all kept."""
        mirror = DeclarationMirror()
        metadata = {"x": 1}

        mirror.add_metadata(metadata)
        mirror.add_metadata(metadata)
        mirror.add_metadata({"x": 1})

        assert len(mirror.metadata) == 2
        assert mirror.has_metadata(metadata)

    def test_remove(self):
        """Removing detaches the object, removing an unknown object does nothing."""
        mirror = DeclarationMirror()
        metadata = Label("a")
        mirror.add_metadata(metadata)

        mirror.remove_metadata(metadata)
        mirror.remove_metadata(metadata)

        assert not mirror.has_metadata(metadata)
        assert mirror.get_metadata() == []

    def test_filter_by_type(self):
        """Type filtering keeps instances, subclasses included."""
        mirror = DeclarationMirror()
        label, column, opaque = Label("a"), PropertyMetadata(), "opaque"
        for metadata in (label, column, opaque):
            mirror.add_metadata(metadata)

        assert mirror.get_metadata(Label) == [label]
        assert mirror.get_metadata(DeclarationMetadata) == [label, column]
        assert mirror.get_metadata(str) == ["opaque"]


class TestDeclarationMetadata:
    """Test the base metadata payload."""

    def test_defaults(self):
        """Back-references are unset until decoration."""
        label = Label("a")

        assert label.target is None
        assert label.mirror is None

    def test_repr(self):
        """The representation lists the payload fields only."""
        assert repr(Label("a")) == "Label(text='a')"
