import pytest

from simpledom import DetachedNodeError, Document, DomOptions, Element, NodeList

PAGE = (
    '<div id="root">'
    '<ul class="list"><li class="item">a</li><li class="item">b</li><li class="item">c</li></ul>'
    '<p id="x">old</p>'
    "</div>"
)


def _root() -> Element:
    return Document(PAGE).get_element_by_id("root")


def test_child_nodes_lists_direct_children_in_order() -> None:
    root = _root()
    children = root.child_nodes()

    assert isinstance(children, NodeList)
    assert [child.tag for child in children] == ["ul", "p"]
    for index, child in enumerate(children):
        assert root.child_nodes(index) == child


@pytest.mark.parametrize("index", [2, 10, -1])
def test_child_nodes_out_of_range_is_none(index: int) -> None:
    assert _root().child_nodes(index) is None


def test_children_is_alias_of_child_nodes() -> None:
    root = _root()
    assert root.children() == root.child_nodes()
    assert root.children(1) == root.child_nodes(1)


def test_first_and_last_child() -> None:
    root = _root()
    assert root.first_child() == root.child_nodes(0)
    assert root.last_child().tag == "p"


def test_first_child_is_none_without_children() -> None:
    empty = Document("<section><span></span></section>").find("span", 0)
    assert empty.first_child() is None
    assert empty.last_child() is None
    assert empty.child_nodes() == []


def test_text_nodes_are_children() -> None:
    item = _root().find("li", 0)
    text = item.first_child()

    assert text.tag == "#text"
    assert text.text() == "a"
    assert text.first_child() is None
    assert text.child_nodes() == []


def test_siblings() -> None:
    ul = _root().find("ul", 0)
    p = ul.next_sibling()

    assert p.tag == "p"
    assert p.previous_sibling() == ul
    assert p.next_sibling() is None
    assert ul.previous_sibling() is None


def test_parent_wraps_parent_node() -> None:
    root = _root()
    ul = root.find("ul", 0)

    assert ul.parent() == root
    assert root.parent().tag == "#document"


def test_parent_of_parentless_node_wraps_none() -> None:
    doc = Document(PAGE)
    orphan_parent = doc.root.parent()

    assert isinstance(orphan_parent, Element)
    assert orphan_parent.node is None
    with pytest.raises(DetachedNodeError):
        orphan_parent.html()


def test_parent_returns_none_when_null_parent_disabled() -> None:
    doc = Document(PAGE, DomOptions(null_parent=False))
    assert doc.root.parent() is None
    assert doc.find("ul", 0).parent().get("id") == "root"


def test_navigation_wrappers_share_the_node() -> None:
    root = _root()
    first = root.first_child()
    again = root.child_nodes(0)

    assert first is not again
    assert first == again
    first.set_attribute("data-seen", "yes")
    assert again.get_attribute("data-seen") == "yes"


def test_iteration_rebuilds_children_each_time() -> None:
    root = _root()
    assert [child.tag for child in root] == ["ul", "p"]

    root.find("ul", 0).replace_node("<ol><li>z</li></ol>")

    assert [child.tag for child in root] == ["ol", "p"]
    assert len(root.child_nodes()) == 2


def test_element_is_truthy_even_without_children() -> None:
    span = Document("<span></span>").find("span", 0)
    assert span


def test_camel_case_aliases() -> None:
    root = _root()
    assert root.firstChild() == root.first_child()
    assert root.lastChild() == root.last_child()
    assert root.childNodes(0) == root.child_nodes(0)
    assert root.firstChild().nextSibling() == root.last_child()
    assert root.lastChild().previousSibling() == root.first_child()
    assert root.first_child().parentNode() == root
    assert root.last_child().prev_sibling() == root.first_child()
    assert root.getNode() is root.node
