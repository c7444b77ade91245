"""
Data model of the blockliquid compiler.

This module defines the records flowing through the compiler: the
breakpoints of the responsive size model, the elements of a block tree and
the content document wrapping them. The records mirror the content schema
produced by the editing layer, but with explicit optional fields instead
of loosely typed mappings.

Classes
-------
Breakpoint
    Named viewport-width range of the responsive size model.
Element
    One node of the block tree: tag, attributes, children and
    per-breakpoint styles.
Document
    A content entry: identity, model name and its top-level blocks.

Notes
-----
- Records are plain inputs; the compiler never mutates them and builds
  fresh strings on every call.
- `Element.from_dict` and `Document.from_dict` accept the camelCase keys of
  the content schema (``tagName``, ``responsiveStyles``, ``modelName``,
  ``data.blocks``). Keys the compiler has no use for are ignored.
- Only the root passed to `from_dict` is type-checked. Inside the tree,
  blocks and children that are not mappings are skipped with a warning,
  and style or property maps of the wrong shape are treated as absent.
- An element `id` is used both as a DOM attribute and as a CSS selector
  key, so it must be unique within a document.

Examples
--------
>>> from blockliquid.types import Document
>>> doc = Document.from_dict({
...     "id": "abc123",
...     "modelName": "page",
...     "data": {"blocks": [{
...         "id": "builder-1",
...         "tagName": "section",
...         "responsiveStyles": {"large": {"color": "red"}},
...     }]},
... })
>>> doc.blocks[0].tag_name
'section'
>>> doc.blocks[0].responsive_styles
{'large': {'color': 'red'}}
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from ._utils.readers import read_config

logger = logging.getLogger(__name__)

_MESSAGES = read_config("messages")
ERR_MSG_UNSUPPORTED_TYPE_F = _MESSAGES["errors"]["unsupported_type_f"]
WARN_MSG_SKIPPED_NODE_F = _MESSAGES["warnings"]["skipped_node_f"]


@dataclass(frozen=True)
class Breakpoint:
    """
    Named viewport-width range of the responsive size model.

    Attributes
    ----------
    name : str
        One of ``xsmall``, ``small``, ``medium``, ``large``.
    min : int
        Lower bound of the range in pixels.
    max : int
        Upper bound of the range in pixels. Media queries are emitted as
        ``max-width: <max>px``.
    default : int
        Representative width of the range in pixels.
    """

    name: str
    min: int
    max: int
    default: int


@dataclass
class Element:
    """
    One node of a block tree.

    Attributes
    ----------
    id : str
        Element identity. Used as the ``builder-id`` attribute and as the
        CSS class the element's styles are scoped to.
    tag_name : str, optional
        Markup tag. ``None`` means the default ``div``.
    properties : dict[str, str | None]
        Arbitrary HTML attributes, emitted in insertion order before the
        generated ones.
    class_name : str, optional
        Extra CSS class appended to the generated ``builder-block <id>``.
    children : list of Element
        Child nodes in document order. Empty for leaves.
    responsive_styles : dict[str, dict[str, str]]
        CSS declarations per breakpoint name. ``large`` is the base style,
        the others are narrowing overrides.
    """

    id: str
    tag_name: Optional[str] = None
    properties: dict[str, Optional[str]] = field(default_factory=dict)
    class_name: Optional[str] = None
    children: list["Element"] = field(default_factory=list)
    responsive_styles: dict[str, dict[str, str]] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Element":
        """
        Build an element (and its subtree) from a content-schema mapping.

        Parameters
        ----------
        data : Mapping
            Mapping with the keys ``id``, ``tagName``, ``properties``,
            ``class``, ``children`` and ``responsiveStyles``. All but ``id``
            are optional; ``None`` values are treated as absent. Children
            may be mappings or `Element` instances; any other child is
            skipped with a warning.

        Returns
        -------
        Element
            A new element; the input mapping is not retained.

        Raises
        ------
        TypeError
            If `data` is not a mapping.
        """
        if not isinstance(data, Mapping):
            raise TypeError(
                ERR_MSG_UNSUPPORTED_TYPE_F.format(
                    "Element or mapping", type(data).__name__
                )
            )
        responsive_styles = data.get("responsiveStyles")
        if not isinstance(responsive_styles, Mapping):
            responsive_styles = {}
        properties = data.get("properties")
        if not isinstance(properties, Mapping):
            properties = {}
        return cls(
            id=data.get("id"),
            tag_name=data.get("tagName"),
            properties=dict(properties),
            class_name=data.get("class"),
            children=_convert_nodes(data.get("children"), "child"),
            responsive_styles={
                size: dict(styles)
                for size, styles in responsive_styles.items()
                if isinstance(styles, Mapping)
            },
        )


@dataclass
class Document:
    """
    A content entry holding a block tree.

    Attributes
    ----------
    id : str
        Content identity, written to the container's identity attributes.
    model_name : str, optional
        Logical content type name.
    blocks : list of Element
        Top-level elements of the block tree.
    """

    id: Optional[str] = None
    model_name: Optional[str] = None
    blocks: list[Element] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Document":
        """
        Build a document from a content-schema mapping.

        Parameters
        ----------
        data : Mapping
            Mapping with the keys ``id``, ``modelName`` and ``data``, where
            ``data["blocks"]`` holds the top-level blocks. Missing ``data``
            or ``blocks`` yield a document without blocks, and blocks that
            are not mappings are skipped with a warning.

        Returns
        -------
        Document

        Raises
        ------
        TypeError
            If `data` is not a mapping.
        """
        if not isinstance(data, Mapping):
            raise TypeError(
                ERR_MSG_UNSUPPORTED_TYPE_F.format(
                    "Document or mapping", type(data).__name__
                )
            )
        content_data = data.get("data")
        blocks = None
        if isinstance(content_data, Mapping):
            blocks = content_data.get("blocks")
        return cls(
            id=data.get("id"),
            model_name=data.get("modelName"),
            blocks=_convert_nodes(blocks, "block"),
        )


def _convert_nodes(nodes, kind: str) -> list[Element]:
    """
    Convert a list of blocks or children, skipping malformed entries.

    Anything other than a list or tuple gives an empty list. Entries that
    are neither `Element` records nor mappings are logged and dropped.
    """
    # malformed block data degrades to an empty tree
    if not isinstance(nodes, (list, tuple)):
        return []
    elements = []
    for node in nodes:
        if isinstance(node, Element):
            elements.append(node)
        elif isinstance(node, Mapping):
            elements.append(Element.from_dict(node))
        else:
            logger.warning(WARN_MSG_SKIPPED_NODE_F, kind, type(node).__name__)
    return elements


def to_element(data: Element | Mapping[str, Any]) -> Element:
    """
    Return `data` as an `Element`, converting mappings with `Element.from_dict`.

    Parameters
    ----------
    data : Element or Mapping
        Element record or content-schema mapping.

    Returns
    -------
    Element

    Raises
    ------
    TypeError
        If `data` is neither an `Element` nor a mapping.
    """
    if isinstance(data, Element):
        return data
    return Element.from_dict(data)


def to_document(data: Document | Mapping[str, Any]) -> Document:
    """
    Return `data` as a `Document`, converting mappings with `Document.from_dict`.

    Parameters
    ----------
    data : Document or Mapping
        Document record or content-schema mapping.

    Returns
    -------
    Document

    Raises
    ------
    TypeError
        If `data` is neither a `Document` nor a mapping.
    """
    if isinstance(data, Document):
        return data
    return Document.from_dict(data)
