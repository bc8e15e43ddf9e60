"""Format discrimination across the supported article families.

The families share enough tag names that a document cannot be identified by
whether it parses; instead each reader in ``DEFAULT_READERS`` is tried in
order and the first one whose acceptance rule holds wins.
"""

import logging
from collections.abc import Sequence

from lxml import etree

from pubparse.exceptions import UnrecognizedFormatError
from schemas import ParsedArticle

from .book_reader import PubmedBookReader
from .pmc_reader import PMCReader
from .pubmed_reader import PubmedReader
from .reader import ArticleReader
from .xml_utils import parse_xml

logger = logging.getLogger(__name__)

DEFAULT_READERS: tuple[ArticleReader, ...] = (
    PubmedReader(),
    PubmedBookReader(),
    PMCReader(),
)


def discriminate(
    data: bytes,
    readers: Sequence[ArticleReader] = DEFAULT_READERS,
) -> ParsedArticle:
    """Identify the article family of a document and parse it.

    Args:
        data: Raw bytes of one XML document
        readers: Readers to try, in order

    Returns:
        The parsed model of the first accepting reader

    Raises:
        UnrecognizedFormatError: If the bytes are not well-formed XML or no
            reader accepts the document
    """
    try:
        root = parse_xml(data)
    except etree.XMLSyntaxError as e:
        raise UnrecognizedFormatError(f"malformed XML: {e}") from e

    for reader in readers:
        article = reader.read(root)
        if reader.accepts(root, article):
            logger.debug(f"Document accepted by {reader!r}")
            return article

    raise UnrecognizedFormatError(
        f"unrecognized document structure (root element <{etree.QName(root).localname}>)"
    )
