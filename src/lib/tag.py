"""
Tag factory

A tag is a named constructor: it fixes a category and a name, and owns a
payload rule that validates the normalized children and props. Calling a
tag runs normalization, the payload rule, element construction and the
optional reference binding as one synchronous step.

Example:
    >>> Shout = define_inliner_tag('shout', lambda props: props['children'][0].payload.upper())
    >>> Shout("hey").payload
    'HEY'
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Union

from ..models.elements import Element, ElementCategory, create_element
from .children import normalize_children
from .errors import InvalidPropError
from .log import LOG
from .ref import Reference
from .utils import is_tag_element

PayloadBuilder = Callable[[Dict[str, Any]], Any]


@dataclass(frozen=True, eq=False)
class Tag:
    """
    Specification and constructor of one kind of element

    Attributes:
        category: Category of every element this tag produces
        name: Name of every element this tag produces
        build_payload: Rule (props) -> payload; receives props with
                       children already normalized, raises on invalid content
        description: Human-readable description
        examples: Example usage strings
    """
    category: ElementCategory
    name: str
    build_payload: PayloadBuilder
    description: str = ""
    examples: List[str] = field(default_factory=list)

    def __call__(self, *children: Any, bind_to: Optional[Reference] = None, **props: Any) -> Element:
        """
        Build an element of this tag.

        Args:
            *children: Raw children; a single argument is passed through as
                       one raw item, several form a sequence
            bind_to: Reference to assign the new element to
            **props: Tag-specific props (a children= keyword may replace
                     the positional form)

        Returns:
            The new element, already assigned to bind_to if given

        Raises:
            InvalidPropError: If children are given both ways, or bind_to
                              is not a Reference
            ProseError: Whatever the payload rule or the binding raises
        """
        if children:
            if props.get('children') is not None:
                raise InvalidPropError(
                    self.name, 'children',
                    f"<{self.name}> children given both positionally and as a keyword!",
                )
            props['children'] = children[0] if len(children) == 1 else list(children)

        if props.get('children') is not None:
            props['children'] = normalize_children(props['children'])
        else:
            props.pop('children', None)

        payload = self.build_payload(props)
        element = create_element(self.category, self.name, payload)
        LOG(f"Built <{self.name}> ({self.category.value})", level=3)

        if bind_to is not None:
            if not isinstance(bind_to, Reference):
                raise InvalidPropError(
                    self.name, 'bind_to',
                    f'<{self.name}> "bind_to" prop must be a valid reference!',
                )
            bind_to.assign(element)

        return element

    def is_instance(self, obj: Any) -> bool:
        """Check whether obj is an element of this tag"""
        return is_tag_element(obj, self)

    def __repr__(self) -> str:
        return f"<Tag {self.name} ({self.category.value})>"


def define_tag(
    category: Union[ElementCategory, str],
    name: str,
    build_payload: PayloadBuilder,
    description: str = "",
    examples: Optional[List[str]] = None,
) -> Tag:
    """
    Define a tag from its category, name and payload rule.

    Raises:
        ValueError: If category is neither block nor inliner
    """
    return Tag(
        category=ElementCategory(category),
        name=name,
        build_payload=build_payload,
        description=description,
        examples=list(examples or []),
    )


def define_block_tag(name: str, build_payload: PayloadBuilder, **kwargs: Any) -> Tag:
    return define_tag(ElementCategory.BLOCK, name, build_payload, **kwargs)


def define_inliner_tag(name: str, build_payload: PayloadBuilder, **kwargs: Any) -> Tag:
    return define_tag(ElementCategory.INLINER, name, build_payload, **kwargs)
