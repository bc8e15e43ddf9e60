"""PubMed book schemas (PubmedBookArticleSet documents).

Book records come from NCBI Bookshelf and share many building blocks with
regular citations (ArticleIdList, Abstract, Reference, ...), which are reused
from ``schemas.pubmed``.
"""

from typing import ClassVar

from pydantic import Field

from .base import XMLRecord
from .pubmed import (
    Abstract,
    ArticleIdList,
    Author,
    GrantList,
    Object,
    PubMedPubDate,
    Reference,
)


class Keyword(XMLRecord):
    text: str = ""
    major_topic_yn: str = Field("", alias="MajorTopicYN")


class Publisher(XMLRecord):
    publisher_name: str = ""
    publisher_location: str = ""


class Book(XMLRecord):
    """The book a BookDocument belongs to."""

    publisher: Publisher = Publisher()
    book_title: str = ""
    pub_date: PubMedPubDate = PubMedPubDate()
    volume: str = ""
    edition: str = ""
    medium: str = ""
    isbn: list[str] = Field([], alias="ISBN")


class ItemList(XMLRecord):
    items: list[str] = []
    list_type: str = ""


class BookDocument(XMLRecord):
    """Metadata of one book, chapter or section."""

    pmid: str = Field("", alias="PMID")
    article_id_list: ArticleIdList = ArticleIdList()
    book: Book = Book()
    article_title: str = ""
    author_list: list[Author] = []
    language: list[str] = []
    abstract: Abstract = Abstract()
    keyword_list: list[Keyword] | None = None
    grant_list: GrantList = GrantList()
    reference_list: list[Reference] | None = None
    publication_type: str = ""
    investigator_list: str = ""
    contribution_date: PubMedPubDate = PubMedPubDate()
    date_revised: PubMedPubDate = PubMedPubDate()
    item_list: ItemList = ItemList()
    location_label: str = ""


class PubmedBookData(XMLRecord):
    history: list[PubMedPubDate] = []
    publication_status: str = ""
    article_id_list: ArticleIdList = ArticleIdList()
    object_list: list[Object] | None = None


class PubmedBookArticle(XMLRecord):
    book_document: BookDocument = BookDocument()
    pubmed_book_data: PubmedBookData = PubmedBookData()


class PubmedBookArticleSet(XMLRecord):
    """Root of a PubMed book document."""

    family: ClassVar[str] = "pubmed_book"
    schema_name: ClassVar[str] = "pubmed"

    pubmed_book_articles: list[PubmedBookArticle] = []
