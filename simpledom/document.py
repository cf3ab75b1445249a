"""Parsed markup trees and scoped views over them."""

from __future__ import annotations

import copy
import logging
from typing import TYPE_CHECKING, Dict, List, Optional, Union

import soupsieve
from bs4 import BeautifulSoup, Doctype, FeatureNotFound, NavigableString, Tag
from bs4.dammit import EntitySubstitution
from bs4.element import PageElement
from bs4.formatter import HTMLFormatter

from .config import DEFAULT_OPTIONS, DomOptions
from .errors import (
    ConfigError,
    DetachedNodeError,
    InvalidSelectorError,
    MalformedInputError,
)
from .node_list import NodeList, select_index

if TYPE_CHECKING:
    from .element import Element

logger = logging.getLogger(__name__)


def parse_markup(markup: str, options: DomOptions = DEFAULT_OPTIONS) -> BeautifulSoup:
    """Parse ``markup`` into a new, independent tree."""

    if not isinstance(markup, str):
        raise MalformedInputError(
            f"Markup must be a string, got {type(markup).__name__}"
        )
    try:
        # Keep class/rel and friends as plain strings.
        soup = BeautifulSoup(markup, options.parser, multi_valued_attributes=None)
    except FeatureNotFound as exc:
        raise ConfigError(f"Parser {options.parser!r} is not installed") from exc
    logger.debug("Parsed %d characters with %s", len(markup), options.parser)
    return soup


class _SourceOrderFormatter(HTMLFormatter):
    """Minimal HTML formatter that writes attributes in source order."""

    def attributes(self, tag: Tag):
        if tag.attrs is None:
            return []
        return list(tag.attrs.items())


SOURCE_ORDER = _SourceOrderFormatter(entity_substitution=EntitySubstitution.substitute_xml)


def outer_markup(node: PageElement) -> str:
    if isinstance(node, Tag):
        return node.decode(formatter=SOURCE_ORDER)
    return node.output_ready(formatter=SOURCE_ORDER)


def inner_markup(node: PageElement) -> str:
    if isinstance(node, Tag):
        return node.decode_contents(formatter=SOURCE_ORDER)
    return ""


def text_content(node: PageElement) -> str:
    if isinstance(node, Tag):
        return node.get_text()
    return str(node)


def _child_tag(container: Tag, name: str) -> Optional[Tag]:
    for child in container.contents:
        if isinstance(child, Tag) and child.name == name:
            return child
    return None


def _is_content(node: PageElement) -> bool:
    if isinstance(node, Tag):
        return True
    if isinstance(node, Doctype):
        return False
    return isinstance(node, NavigableString) and bool(node.strip())


class Document:
    """A parsed tree, or a view scoped to one node of an existing tree.

    ``Document("<p>hi</p>")`` parses a fresh tree. ``Document(element)`` wraps
    the live node: serialization reads it directly, and queries only see the
    node and its descendants.
    """

    def __init__(
        self,
        source: Union[str, "Element", PageElement, None] = None,
        options: Optional[DomOptions] = None,
    ) -> None:
        from .element import Element

        if isinstance(source, Element):
            options = options or source.options
            if source.node is None:
                raise DetachedNodeError("Element does not wrap any node")
            self._tree: PageElement = source.node
        elif isinstance(source, PageElement):
            self._tree = source
        elif source is None:
            self._tree = parse_markup("", options or DEFAULT_OPTIONS)
        else:
            self._tree = parse_markup(source, options or DEFAULT_OPTIONS)
        self.options = options or DEFAULT_OPTIONS

    @property
    def tree(self) -> PageElement:
        """Root node handle of this document or view."""

        return self._tree

    @property
    def root(self) -> "Element":
        from .element import Element

        return Element(self._tree, self.options)

    @property
    def is_scoped(self) -> bool:
        return not isinstance(self._tree, BeautifulSoup)

    def content_node(self) -> PageElement:
        """Return the node standing for the markup the caller supplied.

        Unwraps document > html > body > node. Scaffolding parsers always add
        the html and body levels; ``html.parser`` only keeps them when the
        markup spells them out.
        """

        container = self._tree
        if isinstance(container, Tag):
            html = _child_tag(container, "html")
            if html is not None:
                container = html
            body = _child_tag(container, "body")
            if body is not None:
                container = body
            for child in container.contents:
                if _is_content(child):
                    return child
        raise MalformedInputError("Markup did not produce any content node")

    def _select(self, selector: str) -> List[Tag]:
        root = self._tree
        if not isinstance(root, Tag):
            return []
        if not self.is_scoped:
            return self._run_selector(root, selector, include_root=False)
        # Query a detached copy so ancestors of the scope cannot take part in
        # matching, then map the hits back onto the live nodes.
        scratch = copy.copy(root)
        live_by_copy: Dict[int, PageElement] = {
            id(copied): live
            for copied, live in zip([scratch, *scratch.descendants], [root, *root.descendants])
        }
        return [
            live_by_copy[id(match)]
            for match in self._run_selector(scratch, selector, include_root=True)
        ]

    @staticmethod
    def _run_selector(root: Tag, selector: str, *, include_root: bool) -> List[Tag]:
        try:
            matches = root.select(selector)
            if include_root and root.css.match(selector):
                matches.insert(0, root)
        except soupsieve.SelectorSyntaxError as exc:
            raise InvalidSelectorError(selector, str(exc)) from exc
        return matches

    def find(
        self, selector: str, index: Optional[int] = None
    ) -> Union[NodeList, "Element", None]:
        """Query the document with a CSS selector.

        Returns every match as a :class:`NodeList` when ``index`` is ``None``,
        otherwise the match at ``index`` or ``None`` when there is none.
        """

        from .element import Element

        nodes = NodeList(Element(node, self.options) for node in self._select(selector))
        return select_index(nodes, index)

    def get_element_by_id(self, element_id: str) -> Optional["Element"]:
        return self.find(f"#{element_id}", 0)

    def get_elements_by_id(self, element_id: str, index: Optional[int] = None):
        return self.find(f"#{element_id}", index)

    def get_element_by_tag_name(self, name: str) -> Optional["Element"]:
        return self.find(name, 0)

    def get_elements_by_tag_name(self, name: str, index: Optional[int] = None):
        return self.find(name, index)

    def html(self) -> str:
        return outer_markup(self._tree)

    def inner_html(self) -> str:
        return inner_markup(self._tree)

    def text(self) -> str:
        return text_content(self._tree)

    def __str__(self) -> str:
        return self.html()

    def __repr__(self) -> str:
        kind = "scoped" if self.is_scoped else "parsed"
        return f"<Document {kind} parser={self.options.parser!r}>"


__all__ = [
    "Document",
    "inner_markup",
    "outer_markup",
    "parse_markup",
    "text_content",
]
