"""
Built-in tag set

Reference implementations of the tag protocol. Each payload rule receives
the normalized children (and declared props) and returns the payload or
raises. Container rules share the category check in utils.

Example:
    >>> p = Paragraph("Hello ", Text("world"))
    >>> [child.payload for child in p.payload]
    ['Hello ', 'world']
"""

from typing import Any, Dict

from ..models.elements import ElementCategory, LinkData
from .children import TEXT_NAME
from .errors import (
    InvalidChildCountError,
    InvalidChildTypeError,
    InvalidPropError,
    MissingPropError,
)
from .tag import define_block_tag, define_inliner_tag
from .utils import children_requireCategory, children_requireNonEmpty, is_ref


#
# Text
#

def text_build(props: Dict[str, Any]) -> str:
    """Concatenate string leaves and nested Text elements in order"""
    children = props.get('children', [])
    children_requireNonEmpty('Text', children)

    concatenated = []
    for child in children:
        if not Text.is_instance(child):
            raise InvalidChildTypeError(
                'Text',
                child.name,
                f"<Text> can only contain <Text> elements or pure strings! <{child.name}> found!",
            )
        concatenated.append(child.payload)

    return ''.join(concatenated)


Text = define_inliner_tag(
    TEXT_NAME,
    text_build,
    description='Run of plain text',
    examples=['Text("Hello ", Text("world"))'],
)


#
# Paragraph
#

def paragraph_build(props: Dict[str, Any]) -> tuple:
    children = props.get('children', [])
    children_requireNonEmpty('Paragraph', children)
    children_requireCategory('Paragraph', children, ElementCategory.INLINER)
    return tuple(children)


Paragraph = define_block_tag(
    'paragraph',
    paragraph_build,
    description='Paragraph of inline content',
    examples=['Paragraph("See: ", Link(Text("intro"), target=intro))'],
)


#
# Blocks
#

def blocks_build(props: Dict[str, Any]) -> tuple:
    children = props.get('children', [])
    children_requireNonEmpty('Blocks', children)
    children_requireCategory('Blocks', children, ElementCategory.BLOCK)
    return tuple(children)


Blocks = define_block_tag(
    'blocks',
    blocks_build,
    description='Sequence of block elements',
    examples=['Blocks(Paragraph("One"), Paragraph("Two"))'],
)


#
# Inliners
#

def inliners_build(props: Dict[str, Any]) -> tuple:
    children = props.get('children', [])
    children_requireNonEmpty('Inliners', children)
    children_requireCategory('Inliners', children, ElementCategory.INLINER)
    return tuple(children)


Inliners = define_inliner_tag(
    'inliners',
    inliners_build,
    description='Group of inline elements',
    examples=['Inliners("a", Text("b"))'],
)


#
# Link
#

def link_build(props: Dict[str, Any]) -> LinkData:
    """Validate the target reference and the single Text label"""
    target = props.get('target')
    children = props.get('children', [])

    if target is None:
        raise MissingPropError('Link', 'target')

    if not is_ref(target):
        raise InvalidPropError('Link', 'target', '<Link> "target" prop must be a valid reference!')

    if len(children) != 1:
        raise InvalidChildCountError(
            'Link', 1, len(children), '<Link> must have exactly one <Text> child!'
        )

    child = children[0]
    if not Text.is_instance(child):
        raise InvalidChildTypeError('Link', child.name, '<Link> child must be a <Text> element!')

    return LinkData(target=target, label=child.payload)


Link = define_inliner_tag(
    'link',
    link_build,
    description='Inline link to a referenced element',
    examples=['Link("the intro", target=intro)'],
)
