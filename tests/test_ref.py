"""
Reference cell tests

Tests single assignment, tag matching, batch declaration and the debug
label/origin metadata of references.
"""

import pytest

from prosetree.config import appsettings
from prosetree.lib.errors import (
    ProseError,
    ReferenceAlreadyAssignedError,
    ReferenceTypeMismatchError,
)
from prosetree.lib.ref import Reference, define_ref, define_refs, to_element, to_elements
from prosetree.lib.tags import Blocks, Paragraph, Text
from prosetree.models.elements import create_element


class TestAssignment:
    """Test the get/assign protocol"""

    def test_unassigned_get_returns_none(self):
        """Reading before assignment never raises"""
        ref = define_ref(Paragraph)

        assert ref.get() is None
        assert not ref.is_assigned

    def test_bind_to_assigns_element(self):
        """Tag invocation with bind_to assigns the new element"""
        ref = define_ref(Paragraph)

        Blocks(
            Paragraph("Block Paragraph 1"),
            Paragraph("Block Paragraph 2", bind_to=ref),
        )

        element = to_element(ref)
        assert element is not None
        assert element.name == "paragraph"
        assert element.payload[0].payload == "Block Paragraph 2"
        assert ref.is_assigned

    def test_bind_to_returns_same_instance(self):
        """The reference holds the very element the tag returned"""
        ref = define_ref(Text)
        text = Text("there", bind_to=ref)

        assert ref.get() is text

    def test_reassignment_rejected(self):
        """A second binding fails instead of overwriting"""
        ref = define_ref(Paragraph)
        first = Paragraph("First assignment", bind_to=ref)

        with pytest.raises(
            ReferenceAlreadyAssignedError,
            match="Reference for tag <paragraph> is already assigned and cannot be reassigned!",
        ):
            Paragraph("Second assignment", bind_to=ref)

        assert ref.get() is first

    def test_assigning_same_element_twice_rejected(self):
        """Assignment is a one-shot commit, not idempotent"""
        ref = define_ref(Paragraph, "intro")
        paragraph = Paragraph("Hello")
        ref.assign(paragraph)

        with pytest.raises(ReferenceAlreadyAssignedError, match='"intro"'):
            ref.assign(paragraph)

    def test_wrong_name_rejected(self):
        """An element of another tag is refused and nothing is stored"""
        ref = define_ref(Paragraph)

        with pytest.raises(
            ReferenceTypeMismatchError,
            match="does not match expected tag <paragraph>!",
        ):
            ref.assign(create_element("inliner", "text", "wrong type"))

        assert ref.get() is None

    def test_wrong_category_rejected(self):
        """Same name but other category is still a mismatch"""
        ref = define_ref(Text)

        with pytest.raises(ReferenceTypeMismatchError):
            ref.assign(create_element("block", "text", "wrong category"))

    def test_non_element_rejected(self):
        """Only elements can be assigned"""
        ref = define_ref(Text)

        with pytest.raises(ReferenceTypeMismatchError):
            ref.assign("plain string")

    def test_errors_share_base_class(self):
        """Reference errors are catchable as ProseError"""
        ref = define_ref(Paragraph)
        with pytest.raises(ProseError):
            ref.assign(Text("x"))

    def test_two_references_may_share_an_element(self):
        """Two names may resolve to one identity"""
        first = define_ref(Paragraph, "first")
        second = define_ref(Paragraph, "second")

        paragraph = Paragraph("Shared", bind_to=first)
        second.assign(paragraph)

        assert first.get() is second.get() is paragraph


class TestMetadata:
    """Test tag, slug and origin metadata"""

    def test_ref_with_slug(self):
        """Test reference with a debug label"""
        ref = define_ref(Paragraph, "my-paragraph")

        assert ref.slug == "my-paragraph"
        assert ref.tag is Paragraph

    def test_ref_without_slug(self):
        """Test reference without a label"""
        ref = define_ref(Paragraph)

        assert ref.slug is None
        assert ref.tag is Paragraph

    def test_origin_points_at_declaring_file(self):
        """Origin names the file and line of the declaration"""
        ref = define_ref(Paragraph, "test-slug")

        assert ref.origin is not None
        assert ref.origin.startswith("test_ref.py:")

    def test_origin_capture_disabled(self, monkeypatch):
        """No origin when PROSETREE_CAPTURE_ORIGIN is off"""
        monkeypatch.setattr(appsettings, "capture_origin", False)
        ref = define_ref(Paragraph)

        assert ref.origin is None

    def test_repr_shows_state(self):
        """Test repr before and after assignment"""
        ref = define_ref(Text, "greet")
        assert repr(ref) == "<Reference 'greet' to <text> unassigned>"

        Text("hi", bind_to=ref)
        assert repr(ref) == "<Reference 'greet' to <text> assigned>"


class TestDefineRefs:
    """Test batch declaration"""

    def test_creates_refs_from_tags(self):
        """Test one reference per declared tag"""
        refs = define_refs({"title": Paragraph, "content": Paragraph, "link": Text})

        assert set(refs) == {"title", "content", "link"}
        assert all(isinstance(ref, Reference) for ref in refs.values())
        assert refs["title"].tag is Paragraph
        assert refs["link"].tag is Text

    def test_slug_matches_key(self):
        """Each reference is labelled with its key"""
        refs = define_refs({"header": Paragraph, "footer": Text})

        assert refs["header"].slug == "header"
        assert refs["footer"].slug == "footer"

    def test_origin_recorded_for_batch(self):
        """Batch declarations point at the caller, not the helper"""
        refs = define_refs({"main": Paragraph})
        assert refs["main"].origin.startswith("test_ref.py:")

    def test_empty_definitions(self):
        """Test empty declaration mapping"""
        assert define_refs({}) == {}

    def test_assign_each(self):
        """Test resolving several references in declaration order"""
        refs = define_refs({"p1": Paragraph, "p2": Paragraph, "t1": Text})

        Paragraph("Content 1", bind_to=refs["p1"])
        Paragraph("Content 2", bind_to=refs["p2"])
        Text("Text content", bind_to=refs["t1"])

        elements = to_elements(refs.values())
        assert [element.category.value for element in elements] == ["block", "block", "inliner"]

    def test_to_elements_keeps_unassigned_as_none(self):
        """Unassigned references read as None"""
        refs = define_refs({"a": Text, "b": Text})
        Text("a", bind_to=refs["a"])

        assert to_elements([refs["a"], refs["b"]])[1] is None
