import pytest

from simpledom import DetachedNodeError, Document, DomOptions, MalformedInputError


def _target(options=None):
    return Document('<body><div id="x" class="c">old <b>bold</b></div></body>', options).find("#x", 0)


def test_innertext_write_then_read_returns_outer_markup() -> None:
    element = Document('<div id="x">old</div>').find("#x", 0)
    element.set("innertext", "<span>new</span>")

    assert element.get("innertext") == '<div id="x"><span>new</span></div>'
    assert element.get("outertext") == "<span>new</span>"


def test_read_table() -> None:
    element = _target()

    assert element.get("outertext") == "old <b>bold</b>"
    assert element.get("innertext") == '<div id="x" class="c">old <b>bold</b></div>'
    assert element.get("plaintext") == "old bold"
    assert element.get("tag") == "div"
    assert element.get("attr") == {"id": "x", "class": "c"}
    assert element.get("class") == "c"
    assert element.get("data-missing") is None


def test_read_table_without_legacy_text_properties() -> None:
    element = _target(DomOptions(legacy_text_properties=False))

    assert element.get("outertext") == element.html()
    assert element.get("innertext") == "old <b>bold</b>"
    assert element.outertext() == element.html()
    assert element.innertext() == element.inner_html()


def test_text_methods_follow_legacy_mapping() -> None:
    element = _target()
    assert element.outertext() == element.inner_html()
    assert element.innertext() == element.html()


def test_write_falls_back_to_attributes() -> None:
    element = _target()

    assert element.set("title", "hello") is element
    assert element.get("title") == "hello"
    element.set("title", "")
    assert not element.has_attribute("title")


def test_has_reports_computed_properties() -> None:
    element = Document("<span></span>").find("span", 0)

    for name in ("outertext", "innertext", "plaintext", "tag"):
        assert element.has(name)
    assert not element.has("attr")
    assert not element.has("id")
    element.set_attribute("id", "s")
    assert element.has("id")


def test_mapping_sugar() -> None:
    element = _target()

    assert element["tag"] == "div"
    assert "plaintext" in element
    assert "title" not in element
    element["title"] = "t"
    assert element.get_attribute("title") == "t"
    del element["title"]
    assert "title" not in element


def test_mapping_sugar_replaces_children() -> None:
    element = _target()
    element["innertext"] = "<i>it</i>"
    assert element.inner_html() == "<i>it</i>"


def test_dispatch_propagates_replacement_errors() -> None:
    element = _target()
    before = element.html()

    with pytest.raises(MalformedInputError):
        element.set("innertext", "")
    with pytest.raises(MalformedInputError):
        element.set("outertext", None)
    assert element.html() == before

    root = Document("<p>x</p>").root
    with pytest.raises(DetachedNodeError):
        root.set("outertext", "<p>y</p>")


def test_tag_names_of_non_element_nodes() -> None:
    doc = Document("<div>text<!--note--></div>")
    div = doc.find("div", 0)

    assert doc.root.get("tag") == "#document"
    assert div.first_child().get("tag") == "#text"
    assert div.last_child().get("tag") == "#comment"
