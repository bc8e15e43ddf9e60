"""Normalization of parsed articles.

Readers leave a collection as ``None`` when the source document had no such
elements, and leave optional blocks (body, back, floats-group, ...) as
``None`` when they were absent. The JSON schemas reject ``null`` for every
array-typed field, so before serialization each collection is replaced with
an empty list and each absent block with an empty-but-present record.

Normalization only fills gaps: it never fails, never removes data, and
running it more than once has no further effect.
"""

from schemas import ParsedArticle
from schemas.pmc import (
    PMCAbstract,
    PMCAcknowledgments,
    PMCAff,
    PMCArticle,
    PMCBack,
    PMCBody,
    PMCFloatsGroup,
    PMCReferences,
    PMCSection,
)
from schemas.pubmed import PubmedArticleSet
from schemas.pubmed_book import PubmedBookArticleSet


def normalize(article: ParsedArticle) -> ParsedArticle:
    """Normalize a parsed article in place.

    Args:
        article: Model produced by ``pubparse.readers.discriminate``

    Returns:
        The same object, for chaining

    Raises:
        TypeError: If ``article`` is not one of the article-family models
    """
    if isinstance(article, PubmedArticleSet):
        normalize_pubmed_article_set(article)
    elif isinstance(article, PubmedBookArticleSet):
        normalize_pubmed_book_article_set(article)
    elif isinstance(article, PMCArticle):
        normalize_pmc_article(article)
    else:
        raise TypeError(f"cannot normalize {type(article).__name__}")
    return article


def normalize_pubmed_article_set(article_set: PubmedArticleSet) -> None:
    for article in article_set.pubmed_articles:
        citation = article.medline_citation
        if citation.keyword_list is None:
            citation.keyword_list = []
        if article.pubmed_data.reference_list is None:
            article.pubmed_data.reference_list = []
        if article.unknown is None:
            article.unknown = []


def normalize_pubmed_book_article_set(article_set: PubmedBookArticleSet) -> None:
    """Apply the citation rules to book documents as well."""
    for article in article_set.pubmed_book_articles:
        document = article.book_document
        if document.keyword_list is None:
            document.keyword_list = []
        if document.reference_list is None:
            document.reference_list = []
        if article.pubmed_book_data.object_list is None:
            article.pubmed_book_data.object_list = []


def normalize_pmc_article(article: PMCArticle) -> None:
    if article.floats_group is None:
        article.floats_group = PMCFloatsGroup()

    if article.back is None:
        article.back = PMCBack()
    _normalize_back(article.back)

    if article.body is None:
        article.body = PMCBody()
    for section in article.body.sections:
        _normalize_section(section)

    meta = article.front.article_meta
    for group in meta.contrib_group:
        for contrib in group.contrib:
            if contrib.aff is None:
                contrib.aff = PMCAff()

    if meta.abstract is not None:
        _normalize_abstract(meta.abstract)


def _normalize_back(back: PMCBack) -> None:
    if back.acknowledgments is None:
        back.acknowledgments = PMCAcknowledgments()
    if back.acknowledgments.paragraphs is None:
        back.acknowledgments.paragraphs = []

    if back.references is None:
        back.references = PMCReferences()
    if back.references.references is None:
        back.references.references = []


def _normalize_section(section: PMCSection) -> None:
    if section.paragraphs is None:
        section.paragraphs = []
    for sub_section in section.sub_sections:
        _normalize_section(sub_section)


def _normalize_abstract(abstract: PMCAbstract) -> None:
    if abstract.paragraphs is None:
        abstract.paragraphs = []
    for sec in abstract.sec:
        if sec.paragraphs is None:
            sec.paragraphs = []
