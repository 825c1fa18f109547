"""
Tag registry for prosetree

Maps tag names to Tag objects so tooling can look tags up, list them by
category, and find the tag that produced a given element.
"""

from typing import Any, Dict, List, Optional

from ..models.elements import ElementCategory
from .tag import Tag
from .tags import Blocks, Inliners, Link, Paragraph, Text
from .utils import is_tag_element


class TagRegistry:
    """
    Registry of tags keyed by name

    The built-in tag set is registered on construction; custom tags are
    added with register().
    """

    def __init__(self) -> None:
        """Initialize the tag registry and register all built-in tags"""
        self.tags: Dict[str, Tag] = {}
        self.coreTags_register()

    def register(self, tag: Tag) -> None:
        """
        Register a tag under its name.

        Re-registering a name is allowed only for the same category, so a
        name never identifies a block in one place and an inliner in another.

        Raises:
            ValueError: If the name is registered with the other category
        """
        existing = self.tags.get(tag.name)
        if existing is not None and existing.category is not tag.category:
            raise ValueError(
                f"Tag <{tag.name}> is already registered as {existing.category.value}, "
                f"cannot register it as {tag.category.value}"
            )
        self.tags[tag.name] = tag

    def get(self, name: str) -> Optional[Tag]:
        """Get tag by name, or None if not registered"""
        return self.tags.get(name)

    def tag_forElement(self, element: Any) -> Optional[Tag]:
        """Get the registered tag whose category and name match element"""
        tag = self.tags.get(getattr(element, 'name', None))
        if tag is not None and is_tag_element(element, tag):
            return tag
        return None

    def tags_listByCategory(self, category: ElementCategory) -> List[Tag]:
        """Get all tags in a category"""
        return [tag for tag in self.tags.values() if tag.category is category]

    def coreTags_register(self) -> None:
        """Register the built-in tag set"""
        for tag in (Text, Paragraph, Blocks, Inliners, Link):
            self.register(tag)
