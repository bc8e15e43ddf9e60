"""Reader for PubMed book documents (PubmedBookArticleSet)."""

from lxml import etree

from schemas.pubmed_book import (
    Book,
    BookDocument,
    ItemList,
    Keyword,
    PubmedBookArticle,
    PubmedBookArticleSet,
    PubmedBookData,
    Publisher,
)

from .pubmed_reader import (
    read_abstract,
    read_article_id_list,
    read_author,
    read_grant_list,
    read_history,
    read_objects,
    read_pub_date,
    read_references,
)
from .reader import ArticleReader
from .xml_utils import attr, child_text, child_texts, text_of


class PubmedBookReader(ArticleReader):
    """Read PubmedBookArticleSet documents into ``PubmedBookArticleSet`` models.

    Accepted under the same rule as regular citations: expected root element
    and at least one ``<PubmedBookArticle>``.
    """

    family = "pubmed_book"
    root_tag = "PubmedBookArticleSet"

    def read(self, root: etree._Element) -> PubmedBookArticleSet:
        return PubmedBookArticleSet(
            pubmed_book_articles=[
                PubmedBookArticle(
                    book_document=self._read_document(el.find("BookDocument")),
                    pubmed_book_data=self._read_book_data(el.find("PubmedBookData")),
                )
                for el in root.findall("PubmedBookArticle")
            ]
        )

    def accepts(self, root: etree._Element, article: PubmedBookArticleSet) -> bool:
        return super().accepts(root, article) and len(article.pubmed_book_articles) > 0

    def _read_document(self, element: etree._Element | None) -> BookDocument:
        if element is None:
            return BookDocument()

        item_list = element.find("ItemList")
        return BookDocument(
            pmid=child_text(element, "PMID"),
            article_id_list=read_article_id_list(element),
            book=self._read_book(element.find("Book")),
            article_title=child_text(element, "ArticleTitle"),
            author_list=[read_author(el) for el in element.findall("AuthorList/Author")],
            language=child_texts(element, "Language"),
            abstract=read_abstract(element.find("Abstract")),
            keyword_list=[
                Keyword(text=text_of(el), major_topic_yn=attr(el, "MajorTopicYN"))
                for el in element.findall("KeywordList/Keyword")
            ]
            or None,
            grant_list=read_grant_list(element.find("GrantList")),
            reference_list=read_references(element),
            publication_type=child_text(element, "PublicationType"),
            investigator_list=child_text(element, "InvestigatorList"),
            contribution_date=read_pub_date(element.find("ContributionDate")),
            date_revised=read_pub_date(element.find("DateRevised")),
            item_list=ItemList(
                items=child_texts(item_list, "Item"),
                list_type=attr(item_list, "ListType"),
            ),
            location_label=child_text(element, "LocationLabel"),
        )

    def _read_book(self, element: etree._Element | None) -> Book:
        if element is None:
            return Book()
        return Book(
            publisher=Publisher(
                publisher_name=child_text(element, "Publisher/PublisherName"),
                publisher_location=child_text(element, "Publisher/PublisherLocation"),
            ),
            book_title=child_text(element, "BookTitle"),
            pub_date=read_pub_date(element.find("PubDate")),
            volume=child_text(element, "Volume"),
            edition=child_text(element, "Edition"),
            medium=child_text(element, "Medium"),
            isbn=child_texts(element, "Isbn"),
        )

    def _read_book_data(self, element: etree._Element | None) -> PubmedBookData:
        if element is None:
            return PubmedBookData()
        return PubmedBookData(
            history=read_history(element),
            publication_status=child_text(element, "PublicationStatus"),
            article_id_list=read_article_id_list(element),
            object_list=read_objects(element) or None,
        )
