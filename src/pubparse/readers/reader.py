"""Base class for article readers.

A reader turns a parsed XML element tree into one of the article-family
models and decides whether the result is an acceptable match for its family.
Readers are tried in order by ``pubparse.readers.discriminator``.
"""

from abc import ABC, abstractmethod

from lxml import etree

from schemas import ParsedArticle


class ArticleReader(ABC):
    """Abstract base class for article-family readers.

    Attributes:
        family: Article family tag produced by this reader
        root_tag: Expected local name of the document element
    """

    family: str
    root_tag: str

    @abstractmethod
    def read(self, root: etree._Element) -> ParsedArticle:
        """Build the family model from a document element.

        Args:
            root: Document element of the parsed XML

        Returns:
            The populated model; it may be empty if the document is not of
            this family
        """
        pass

    def accepts(self, root: etree._Element, article: ParsedArticle) -> bool:
        """Return True if ``article`` is a genuine match for this family."""
        return etree.QName(root).localname == self.root_tag

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.family})"
