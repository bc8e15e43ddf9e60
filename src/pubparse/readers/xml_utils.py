"""Helpers for pulling text out of lxml elements."""

from lxml import etree

XLINK_NS = "http://www.w3.org/1999/xlink"

PARSER_OPTIONS = {
    "resolve_entities": False,
    "no_network": True,
    "load_dtd": False,
    "remove_comments": True,
    "remove_pis": True,
    "huge_tree": True,
}


def parse_xml(data: bytes) -> etree._Element:
    """Parse raw bytes into an element tree without touching the network.

    Raises:
        etree.XMLSyntaxError: If the bytes are not well-formed XML
    """
    parser = etree.XMLParser(**PARSER_OPTIONS)
    return etree.fromstring(data, parser=parser)


def text_of(element: etree._Element | None) -> str:
    """Return all text inside an element, including nested markup."""
    if element is None:
        return ""
    return "".join(element.itertext()).strip()


def child_text(parent: etree._Element | None, path: str) -> str:
    """Return the text of the first element matching ``path``, or ""."""
    if parent is None:
        return ""
    return text_of(parent.find(path))


def child_texts(parent: etree._Element | None, path: str) -> list[str]:
    """Return the text of every element matching ``path``."""
    if parent is None:
        return []
    return [text_of(el) for el in parent.findall(path)]


def attr(element: etree._Element | None, name: str) -> str:
    if element is None:
        return ""
    return element.get(name, "")


def xlink_href(element: etree._Element | None) -> str:
    return attr(element, f"{{{XLINK_NS}}}href")


def inner_xml(element: etree._Element) -> str:
    """Serialize an element's content (text and children) without its own tag."""
    parts = [element.text or ""]
    for child in element:
        parts.append(etree.tostring(child, encoding="unicode"))
    return "".join(parts)
