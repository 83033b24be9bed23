from typing import Iterator, Optional

from bs4 import BeautifulSoup, CData, NavigableString, Tag
from lxml import etree

from pygateway.exceptions import MalformedResponseError

def parse_xml(content: bytes) -> BeautifulSoup:
    """
    Parses an XML document, element names are exposed without their namespace prefix

    Raises MalformedResponseError if the content is not well-formed XML
    """

    try:
        # well-formedness check, entities and network access stay off
        etree.fromstring(content, parser=etree.XMLParser(resolve_entities=False, no_network=True))
    except (etree.XMLSyntaxError, ValueError) as e:
        raise MalformedResponseError(f"Response is not an XML document: {e}") from e

    return BeautifulSoup(content, "lxml-xml")

def children(tag: Tag) -> Iterator[Tag]:
    """
    Immediate child elements of tag
    """

    return (child for child in tag.contents if isinstance(child, Tag))

def first_text(tag: Tag) -> Optional[str]:
    """
    Stripped text of the first node of tag if that node is text, otherwise None

    Whitespace-only text between elements is not counted as a node
    """

    for node in tag.contents:
        if type(node) in (NavigableString, CData):
            if not node.strip():
                continue
            return node.strip()
        # element, comment or processing instruction
        return None
    return None
