"""Ordered collection of wrapped nodes returned by navigation and queries."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Union

if TYPE_CHECKING:
    from .element import Element


class NodeList(list):
    """A plain list of :class:`Element` with a few markup helpers.

    Navigation results keep document order; query results keep selector match
    order.
    """

    def item(self, index: int) -> Optional["Element"]:
        """Return the element at ``index`` or ``None`` when out of range."""

        if isinstance(index, bool) or not isinstance(index, int):
            return None
        if 0 <= index < len(self):
            return self[index]
        return None

    def find(
        self, selector: str, index: Optional[int] = None
    ) -> Union["NodeList", "Element", None]:
        """Run ``selector`` against every member and merge the results."""

        matches = NodeList()
        for element in self:
            matches.extend(element.find(selector))
        return select_index(matches, index)

    def text(self) -> str:
        return "".join(element.text() for element in self)

    def html(self) -> str:
        return "".join(element.html() for element in self)

    def inner_html(self) -> str:
        return "".join(element.inner_html() for element in self)

    def __repr__(self) -> str:
        return f"NodeList({list.__repr__(self)})"


def select_index(
    nodes: NodeList, index: Optional[int]
) -> Union[NodeList, "Element", None]:
    """Apply the shared index rule: ``None`` returns the list, ints pick one."""

    if index is None:
        return nodes
    return nodes.item(index)


__all__ = ["NodeList", "select_index"]
