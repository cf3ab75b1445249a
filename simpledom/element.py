"""Object-oriented wrapper around a single node of a parsed markup tree."""

from __future__ import annotations

import copy
import logging
from typing import Any, Callable, Dict, Iterator, Optional, Union

from bs4 import BeautifulSoup, CData, Comment, Tag
from bs4.element import PageElement

from .config import DEFAULT_OPTIONS, DomOptions
from .document import Document
from .errors import DetachedNodeError
from .node_list import NodeList

logger = logging.getLogger(__name__)

ElementResult = Union["Element", NodeList, None]

# Pseudo-properties that exist on every element regardless of its attributes.
COMPUTED_PROPERTIES = frozenset({"outertext", "innertext", "plaintext", "tag"})


def node_name(node: PageElement) -> str:
    if isinstance(node, BeautifulSoup):
        return "#document"
    if isinstance(node, Tag):
        return node.name
    if isinstance(node, Comment):
        return "#comment"
    if isinstance(node, CData):
        return "#cdata-section"
    return "#text"


def _wrap(node: Optional[PageElement], options: DomOptions) -> Optional["Element"]:
    if node is None:
        return None
    return Element(node, options)


class Element:
    """A view over one node in a tree owned by a :class:`Document`.

    Navigation always builds new wrappers, so several ``Element`` objects may
    point at the same node. Mutations through any of them are visible to all.
    After :meth:`replace_node` the receiver is consumed and every further call
    raises :class:`DetachedNodeError`.
    """

    def __init__(
        self, node: Optional[PageElement], options: Optional[DomOptions] = None
    ) -> None:
        self._node = node
        self._consumed = False
        self.options = options or DEFAULT_OPTIONS

    @property
    def node(self) -> Optional[PageElement]:
        """The wrapped tree node. ``None`` only for a missing parent."""

        if self._consumed:
            raise DetachedNodeError("Element was replaced and can no longer be used")
        return self._node

    def get_node(self) -> Optional[PageElement]:
        return self.node

    def _require_node(self) -> PageElement:
        node = self.node
        if node is None:
            raise DetachedNodeError("Element does not wrap any node")
        return node

    def _require_tag(self) -> Tag:
        node = self._require_node()
        if not isinstance(node, Tag):
            raise DetachedNodeError(f"{node_name(node)} node is not an element")
        return node

    # Navigation

    def first_child(self) -> Optional["Element"]:
        node = self._require_node()
        if not isinstance(node, Tag) or not node.contents:
            return None
        return Element(node.contents[0], self.options)

    def last_child(self) -> Optional["Element"]:
        node = self._require_node()
        if not isinstance(node, Tag) or not node.contents:
            return None
        return Element(node.contents[-1], self.options)

    def next_sibling(self) -> Optional["Element"]:
        return _wrap(self._require_node().next_sibling, self.options)

    def previous_sibling(self) -> Optional["Element"]:
        return _wrap(self._require_node().previous_sibling, self.options)

    def parent(self) -> Optional["Element"]:
        """Wrap the parent node.

        With ``null_parent`` enabled (the default) a node without a parent
        still yields an ``Element``, one that wraps ``None``.
        """

        parent = self._require_node().parent
        if parent is None and not self.options.null_parent:
            return None
        return Element(parent, self.options)

    def child_nodes(self, index: Optional[int] = None) -> ElementResult:
        """Return all direct children, or only the one at ``index``.

        The list is rebuilt from the tree on every call.
        """

        nodes = self._collect_children()
        if index is None:
            return nodes
        return nodes.item(index)

    def children(self, index: Optional[int] = None) -> ElementResult:
        return self.child_nodes(index)

    def _collect_children(self) -> NodeList:
        node = self._require_node()
        elements = NodeList()
        if isinstance(node, Tag):
            for child in node.contents:
                elements.append(Element(child, self.options))
        return elements

    def __iter__(self) -> Iterator["Element"]:
        return iter(self._collect_children())

    # Query

    def get_dom(self) -> Document:
        return Document(self, self.options)

    def find(self, selector: str, index: Optional[int] = None) -> ElementResult:
        """Find nodes matching a CSS selector within this element's subtree."""

        return self.get_dom().find(selector, index)

    def get_element_by_id(self, element_id: str) -> Optional["Element"]:
        return self.find(f"#{element_id}", 0)

    def get_elements_by_id(
        self, element_id: str, index: Optional[int] = None
    ) -> ElementResult:
        return self.find(f"#{element_id}", index)

    def get_element_by_tag_name(self, name: str) -> Optional["Element"]:
        return self.find(name, 0)

    def get_elements_by_tag_name(
        self, name: str, index: Optional[int] = None
    ) -> ElementResult:
        return self.find(name, index)

    # Serialization

    def html(self) -> str:
        """Outer markup of this node."""
        return self.get_dom().html()

    def inner_html(self) -> str:
        """Markup of this node's children."""
        return self.get_dom().inner_html()

    def text(self) -> str:
        return self.get_dom().text()

    def outertext(self) -> str:
        # Legacy callers read inner markup under this name.
        if self.options.legacy_text_properties:
            return self.inner_html()
        return self.html()

    def innertext(self) -> str:
        if self.options.legacy_text_properties:
            return self.html()
        return self.inner_html()

    @property
    def tag(self) -> str:
        return node_name(self._require_node())

    # Attributes

    def get_all_attributes(self) -> Optional[Dict[str, str]]:
        """Return attributes in document order, or ``None`` if there are none."""

        node = self._require_node()
        if not isinstance(node, Tag) or not node.attrs:
            return None
        return dict(node.attrs)

    def get_attribute(self, name: str) -> Optional[str]:
        node = self._require_node()
        if not isinstance(node, Tag):
            return None
        return node.get(name)

    def has_attribute(self, name: str) -> bool:
        node = self._require_node()
        return isinstance(node, Tag) and node.has_attr(name)

    def set_attribute(self, name: str, value: Any) -> "Element":
        """Set ``name`` to ``value``; an empty value removes the attribute.

        Empty means falsy or the string ``"0"``.
        """

        node = self._require_tag()
        if not value or value == "0":
            if node.has_attr(name):
                del node[name]
        else:
            node[name] = str(value)
        return self

    def remove_attribute(self, name: str) -> "Element":
        node = self._require_tag()
        if node.has_attr(name):
            del node[name]
        return self

    # Replacement

    def _import_fragment(self, markup: str) -> PageElement:
        fragment = Document(markup, self.options).content_node()
        # Detach a deep copy so nothing references the scratch tree.
        return copy.copy(fragment)

    def replace_node(self, markup: str) -> "Element":
        """Replace this node with the node parsed from ``markup``.

        Returns a wrapper for the inserted node. The receiver is consumed.
        """

        node = self._require_node()
        if node.parent is None:
            raise DetachedNodeError("Cannot replace a node that has no parent")
        imported = self._import_fragment(markup)
        logger.debug("Replacing <%s> with <%s>", node_name(node), node_name(imported))
        node.replace_with(imported)
        self._consumed = True
        return Element(imported, self.options)

    def replace_children(self, markup: str) -> "Element":
        """Replace every child of this node with the node parsed from ``markup``."""

        node = self._require_tag()
        imported = self._import_fragment(markup)
        logger.debug(
            "Replacing %d children of <%s>", len(node.contents), node_name(node)
        )
        node.clear()
        node.append(imported)
        return self

    # Virtual properties

    _GETTERS: Dict[str, Callable[["Element"], Any]] = {
        "outertext": lambda self: self.outertext(),
        "innertext": lambda self: self.innertext(),
        "plaintext": lambda self: self.text(),
        "tag": lambda self: self.tag,
        "attr": lambda self: self.get_all_attributes(),
    }

    _SETTERS: Dict[str, Callable[["Element", Any], "Element"]] = {
        "outertext": lambda self, value: self.replace_node(value),
        "innertext": lambda self, value: self.replace_children(value),
    }

    def get(self, name: str) -> Any:
        """Read a pseudo-property, falling back to the attribute of that name."""

        getter = self._GETTERS.get(name)
        if getter is None:
            return self.get_attribute(name)
        return getter(self)

    def set(self, name: str, value: Any) -> "Element":
        """Write a pseudo-property, falling back to :meth:`set_attribute`."""

        setter = self._SETTERS.get(name)
        if setter is None:
            return self.set_attribute(name, value)
        return setter(self, value)

    def has(self, name: str) -> bool:
        if name in COMPUTED_PROPERTIES:
            return True
        return self.has_attribute(name)

    def __getitem__(self, name: str) -> Any:
        return self.get(name)

    def __setitem__(self, name: str, value: Any) -> None:
        self.set(name, value)

    def __delitem__(self, name: str) -> None:
        self.remove_attribute(name)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has(name)

    # Identity

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Element):
            return NotImplemented
        return self._node is other._node

    def __hash__(self) -> int:
        return id(self._node)

    def __str__(self) -> str:
        return self.html()

    def __repr__(self) -> str:
        if self._consumed:
            return "<Element (replaced)>"
        if self._node is None:
            return "<Element None>"
        return f"<Element {node_name(self._node)}>"

    # Aliases kept for callers used to DOM-style and simple_html_dom names.
    getNode = get_node
    firstChild = first_child
    lastChild = last_child
    nextSibling = next_sibling
    previousSibling = previous_sibling
    prev_sibling = previous_sibling
    parentNode = parent
    parent_node = parent
    childNodes = child_nodes
    getDom = get_dom
    getElementById = get_element_by_id
    getElementsById = get_elements_by_id
    getElementByTagName = get_element_by_tag_name
    getElementsByTagName = get_elements_by_tag_name
    innerHtml = inner_html
    getAllAttributes = get_all_attributes
    getAttribute = get_attribute
    setAttribute = set_attribute
    hasAttribute = has_attribute
    removeAttribute = remove_attribute


__all__ = ["COMPUTED_PROPERTIES", "Element", "node_name"]
