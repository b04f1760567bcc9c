"""
Tests for tag sets — ordering, de-duplication, protected tags.
"""

from archmodel.core.models import TagSet, Tags


class TestTagSet:
    """TagSet behaviour."""

    def test_keeps_insertion_order(self):
        """Tags come back in the order they were added."""
        tags = TagSet("b", "a", "c")
        assert tags.as_list() == ["b", "a", "c"]
        assert str(tags) == "b,a,c"

    def test_ignores_duplicates_and_blanks(self):
        tags = TagSet("a", None, "", "  ", "a", "b")
        assert tags.as_list() == ["a", "b"]

    def test_strips_whitespace(self):
        tags = TagSet(" a ")
        assert "a" in tags
        assert tags.as_list() == ["a"]

    def test_enum_members_stored_as_plain_strings(self):
        """Tags enum members are stored as str, not as enum members."""
        tags = TagSet(Tags.ELEMENT)
        assert tags.as_list() == ["Element"]
        assert type(tags.as_list()[0]) is str

    def test_remove(self):
        tags = TagSet("a", "b")
        assert tags.remove("a") is True
        assert tags.as_list() == ["b"]

    def test_remove_missing_is_noop(self):
        """Removing an absent or None tag returns False."""
        tags = TagSet("a")
        assert tags.remove("z") is False
        assert tags.remove(None) is False
        assert len(tags) == 1

    def test_protected_tags_survive_removal(self):
        """Protected tags stay, other tags can go."""
        tags = TagSet(Tags.ELEMENT, "custom", protected=(Tags.ELEMENT,))
        assert tags.remove("Element") is False
        assert tags.remove("custom") is True
        assert tags.as_list() == ["Element"]
        assert tags.protected == {"Element"}

    def test_iteration_is_a_snapshot(self):
        """Removing while iterating is safe."""
        tags = TagSet("a", "b")
        for tag in tags:
            tags.remove(tag)
        assert len(tags) == 0

    def test_empty(self):
        tags = TagSet()
        assert str(tags) == ""
        assert len(tags) == 0
