"""Reader for PMC full-text documents (JATS ``<article>``)."""

from lxml import etree

from schemas.pmc import (
    PMCAbstract,
    PMCAbstractSec,
    PMCAcknowledgments,
    PMCAff,
    PMCArticle,
    PMCArticleID,
    PMCArticleMeta,
    PMCAuthorNotes,
    PMCBack,
    PMCBody,
    PMCCaption,
    PMCContrib,
    PMCContribGroup,
    PMCCorresp,
    PMCCustomMeta,
    PMCCustomMetaGroup,
    PMCDate,
    PMCElementCitation,
    PMCFigure,
    PMCFloatsGroup,
    PMCFnGroup,
    PMCFootnote,
    PMCFront,
    PMCGraphic,
    PMCISSN,
    PMCJournalID,
    PMCJournalMeta,
    PMCMixedCitation,
    PMCName,
    PMCPermissions,
    PMCPublisher,
    PMCPubDate,
    PMCReference,
    PMCReferences,
    PMCRelatedArticle,
    PMCSection,
    PMCSelfURI,
    PMCSubjectGroup,
    PMCTableWrap,
    PMCTitleGroup,
    PMCXRef,
)

from .reader import ArticleReader
from .xml_utils import attr, child_text, child_texts, text_of, xlink_href


def _name(element: etree._Element | None) -> PMCName:
    return PMCName(
        surname=child_text(element, "surname"),
        given_names=child_text(element, "given-names"),
    )


def _aff(element: etree._Element) -> PMCAff:
    return PMCAff(id=attr(element, "id"), text=text_of(element))


def _caption(element: etree._Element | None) -> PMCCaption:
    return PMCCaption(paragraphs=child_texts(element, "caption/p"))


def _figure(element: etree._Element) -> PMCFigure:
    return PMCFigure(
        id=attr(element, "id"),
        label=child_text(element, "label"),
        caption=_caption(element),
        graphic=PMCGraphic(href=xlink_href(element.find("graphic"))),
    )


def _table(element: etree._Element) -> PMCTableWrap:
    return PMCTableWrap(
        id=attr(element, "id"),
        label=child_text(element, "label"),
        caption=_caption(element),
        graphic=PMCGraphic(href=xlink_href(element.find("graphic"))),
    )


class PMCReader(ArticleReader):
    """Read JATS full-text articles into ``PMCArticle`` models.

    Any well-formed document can be read field by field, so acceptance rests
    on the root element being ``<article>``.
    """

    family = "pmc"
    root_tag = "article"

    def read(self, root: etree._Element) -> PMCArticle:
        body = root.find("body")
        back = root.find("back")
        floats = root.find("floats-group")
        return PMCArticle(
            article_type=attr(root, "article-type"),
            front=self._read_front(root.find("front")),
            body=self._read_body(body) if body is not None else None,
            back=self._read_back(back) if back is not None else None,
            floats_group=(
                PMCFloatsGroup(
                    figures=[_figure(el) for el in floats.findall("fig")],
                    tables=[_table(el) for el in floats.findall("table-wrap")],
                )
                if floats is not None
                else None
            ),
        )

    # -- front ------------------------------------------------------------

    def _read_front(self, element: etree._Element | None) -> PMCFront:
        if element is None:
            return PMCFront()
        return PMCFront(
            journal_meta=self._read_journal_meta(element.find("journal-meta")),
            article_meta=self._read_article_meta(element.find("article-meta")),
        )

    def _read_journal_meta(self, element: etree._Element | None) -> PMCJournalMeta:
        if element is None:
            return PMCJournalMeta()
        return PMCJournalMeta(
            journal_id=[
                PMCJournalID(id_type=attr(el, "journal-id-type"), value=text_of(el))
                for el in element.findall("journal-id")
            ],
            journal_title=child_text(element, "journal-title-group/journal-title"),
            issn=[
                PMCISSN(pub_type=attr(el, "pub-type"), value=text_of(el))
                for el in element.findall("issn")
            ],
            publisher=PMCPublisher(
                publisher_name=child_text(element, "publisher/publisher-name"),
                publisher_loc=child_text(element, "publisher/publisher-loc"),
            ),
        )

    def _read_article_meta(self, element: etree._Element | None) -> PMCArticleMeta:
        if element is None:
            return PMCArticleMeta()

        author_notes = element.find("author-notes")
        abstract = element.find("abstract")
        permissions = element.find("permissions")
        self_uri = element.find("self-uri")
        related = element.find("related-article")
        custom_meta = element.find("custom-meta-group")

        return PMCArticleMeta(
            article_id=[
                PMCArticleID(id_type=attr(el, "pub-id-type"), value=text_of(el))
                for el in element.findall("article-id")
            ],
            article_categories=[
                PMCSubjectGroup(
                    subject_group_type=attr(el, "subj-group-type"),
                    subjects=child_texts(el, "subject"),
                )
                for el in element.findall("article-categories/subj-group")
            ],
            title_group=PMCTitleGroup(
                article_title=child_text(element, "title-group/article-title")
            ),
            contrib_group=[
                PMCContribGroup(contrib=[self._read_contrib(c) for c in el.findall("contrib")])
                for el in element.findall("contrib-group")
            ],
            author_notes=(
                PMCAuthorNotes(
                    corresp=[
                        PMCCorresp(
                            id=attr(el, "id"),
                            email=child_text(el, "email"),
                            text=text_of(el),
                        )
                        for el in author_notes.findall("corresp")
                    ]
                )
                if author_notes is not None
                else None
            ),
            pub_date=[
                PMCPubDate(
                    pub_type=attr(el, "pub-type") or attr(el, "date-type"),
                    year=child_text(el, "year"),
                    month=child_text(el, "month"),
                    day=child_text(el, "day"),
                )
                for el in element.findall("pub-date")
            ],
            history=[
                PMCDate(
                    date_type=attr(el, "date-type"),
                    year=child_text(el, "year"),
                    month=child_text(el, "month"),
                    day=child_text(el, "day"),
                )
                for el in element.findall("history/date")
            ],
            abstract=self._read_abstract(abstract) if abstract is not None else None,
            permissions=(
                PMCPermissions(
                    copyright_statement=child_text(permissions, "copyright-statement")
                )
                if permissions is not None
                else None
            ),
            self_uri=PMCSelfURI(href=xlink_href(self_uri)) if self_uri is not None else None,
            related_article=(
                PMCRelatedArticle(
                    type=attr(related, "related-article-type"),
                    id=attr(related, "id"),
                    href=xlink_href(related),
                )
                if related is not None
                else None
            ),
            custom_meta_group=(
                PMCCustomMetaGroup(
                    custom_meta=[
                        PMCCustomMeta(
                            name=child_text(el, "meta-name"),
                            value=child_text(el, "meta-value"),
                        )
                        for el in custom_meta.findall("custom-meta")
                    ]
                )
                if custom_meta is not None
                else None
            ),
            volume=child_text(element, "volume"),
            issue=child_text(element, "issue"),
            f_page=child_text(element, "fpage"),
            l_page=child_text(element, "lpage"),
            aff_list=[_aff(el) for el in element.findall("aff")],
        )

    def _read_contrib(self, element: etree._Element) -> PMCContrib:
        aff = element.find("aff")
        return PMCContrib(
            contrib_type=attr(element, "contrib-type"),
            name=_name(element.find("name")),
            degrees=child_text(element, "degrees"),
            aff=_aff(aff) if aff is not None else None,
            corresp=attr(element, "corresp"),
        )

    def _read_abstract(self, element: etree._Element) -> PMCAbstract:
        return PMCAbstract(
            title=child_text(element, "title"),
            paragraphs=child_texts(element, "p") or None,
            sec=[
                PMCAbstractSec(
                    title=child_text(el, "title"),
                    paragraphs=child_texts(el, "p") or None,
                )
                for el in element.findall("sec")
            ],
        )

    # -- body -------------------------------------------------------------

    def _read_body(self, element: etree._Element) -> PMCBody:
        return PMCBody(sections=[self._read_section(el) for el in element.findall("sec")])

    def _read_section(self, element: etree._Element) -> PMCSection:
        return PMCSection(
            id=attr(element, "id"),
            sec_type=attr(element, "sec-type"),
            title=child_text(element, "title"),
            paragraphs=child_texts(element, "p") or None,
            sub_sections=[self._read_section(el) for el in element.findall("sec")],
            figures=[_figure(el) for el in element.findall("fig")],
            tables=[_table(el) for el in element.findall("table-wrap")],
            x_refs=[
                PMCXRef(
                    ref_type=attr(el, "ref-type"),
                    rid=attr(el, "rid"),
                    text=text_of(el),
                )
                for el in element.findall("p//xref")
            ],
        )

    # -- back -------------------------------------------------------------

    def _read_back(self, element: etree._Element) -> PMCBack:
        ack = element.find("ack")
        ref_list = element.find("ref-list")
        fn_group = element.find("fn-group")
        return PMCBack(
            acknowledgments=(
                PMCAcknowledgments(paragraphs=child_texts(ack, "p") or None)
                if ack is not None
                else None
            ),
            references=(
                PMCReferences(
                    references=[self._read_reference(el) for el in ref_list.findall("ref")]
                    or None
                )
                if ref_list is not None
                else None
            ),
            fn_group=(
                PMCFnGroup(
                    footnotes=[
                        PMCFootnote(type=attr(el, "fn-type"), text=child_texts(el, "p"))
                        for el in fn_group.findall("fn")
                    ]
                )
                if fn_group is not None
                else None
            ),
        )

    def _read_reference(self, element: etree._Element) -> PMCReference:
        element_citation = element.find("element-citation")
        mixed_citation = element.find("mixed-citation")
        return PMCReference(
            id=attr(element, "id"),
            element_citation=(
                PMCElementCitation(
                    publication_type=attr(element_citation, "publication-type"),
                    article_title=child_text(element_citation, "article-title"),
                    source=child_text(element_citation, "source"),
                    year=child_text(element_citation, "year"),
                    volume=child_text(element_citation, "volume"),
                    f_page=child_text(element_citation, "fpage"),
                    l_page=child_text(element_citation, "lpage"),
                    pub_id=child_text(element_citation, "pub-id"),
                    name=[_name(el) for el in element_citation.findall(".//name")],
                )
                if element_citation is not None
                else None
            ),
            mixed_citation=(
                PMCMixedCitation(
                    publication_type=attr(mixed_citation, "publication-type"),
                    article_title=child_text(mixed_citation, "article-title"),
                    source=child_text(mixed_citation, "source"),
                    year=child_text(mixed_citation, "year"),
                    volume=child_text(mixed_citation, "volume"),
                    f_page=child_text(mixed_citation, "fpage"),
                    l_page=child_text(mixed_citation, "lpage"),
                    pub_id=child_text(mixed_citation, "pub-id"),
                )
                if mixed_citation is not None
                else None
            ),
        )
