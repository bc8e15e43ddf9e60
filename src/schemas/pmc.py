"""PMC full-text schemas (JATS ``<article>`` documents).

Mirrors the parts of the JATS tag set that PMC open-access articles use:

    article
    ├── front
    │   ├── journal-meta
    │   └── article-meta (ids, titles, contributors, abstract, ...)
    ├── body (nested sec elements)
    ├── back (ack, ref-list, fn-group)
    └── floats-group (fig, table-wrap)

Optional blocks (body, back, floats-group, a contributor's aff, ...) are
``None`` when the source lacks them until the document is normalized.
"""

from typing import ClassVar

from pydantic import Field

from .base import XMLRecord


class PMCJournalID(XMLRecord):
    id_type: str = Field("", alias="IDType")
    value: str = ""


class PMCISSN(XMLRecord):
    pub_type: str = ""
    value: str = ""


class PMCPublisher(XMLRecord):
    publisher_name: str = ""
    publisher_loc: str = ""


class PMCJournalMeta(XMLRecord):
    journal_id: list[PMCJournalID] = Field([], alias="JournalID")
    journal_title: str = ""
    issn: list[PMCISSN] = Field([], alias="ISSN")
    publisher: PMCPublisher = PMCPublisher()


class PMCArticleID(XMLRecord):
    id_type: str = Field("", alias="IDType")
    value: str = ""


class PMCSubjectGroup(XMLRecord):
    subject_group_type: str = ""
    subjects: list[str] = []


class PMCTitleGroup(XMLRecord):
    article_title: str = ""


class PMCName(XMLRecord):
    surname: str = ""
    given_names: str = ""


class PMCAff(XMLRecord):
    """An affiliation, either inline in a contrib or listed in article-meta."""

    id: str = Field("", alias="ID")
    text: str = ""


class PMCContrib(XMLRecord):
    contrib_type: str = ""
    name: PMCName = PMCName()
    degrees: str = ""
    aff: PMCAff | None = None
    corresp: str = ""


class PMCContribGroup(XMLRecord):
    contrib: list[PMCContrib] = []


class PMCCorresp(XMLRecord):
    id: str = Field("", alias="ID")
    email: str = ""
    text: str = ""


class PMCAuthorNotes(XMLRecord):
    corresp: list[PMCCorresp] = []


class PMCPubDate(XMLRecord):
    pub_type: str = ""
    year: str = ""
    month: str = ""
    day: str = ""


class PMCDate(XMLRecord):
    date_type: str = ""
    year: str = ""
    month: str = ""
    day: str = ""


class PMCAbstractSec(XMLRecord):
    title: str = ""
    paragraphs: list[str] | None = None


class PMCAbstract(XMLRecord):
    title: str = ""
    paragraphs: list[str] | None = None
    sec: list[PMCAbstractSec] = []


class PMCPermissions(XMLRecord):
    copyright_statement: str = ""


class PMCSelfURI(XMLRecord):
    href: str = ""


class PMCRelatedArticle(XMLRecord):
    type: str = ""
    id: str = Field("", alias="ID")
    href: str = ""


class PMCCustomMeta(XMLRecord):
    name: str = ""
    value: str = ""


class PMCCustomMetaGroup(XMLRecord):
    custom_meta: list[PMCCustomMeta] = []


class PMCArticleMeta(XMLRecord):
    article_id: list[PMCArticleID] = Field([], alias="ArticleID")
    article_categories: list[PMCSubjectGroup] = []
    title_group: PMCTitleGroup = PMCTitleGroup()
    contrib_group: list[PMCContribGroup] = []
    author_notes: PMCAuthorNotes | None = None
    pub_date: list[PMCPubDate] = []
    history: list[PMCDate] = []
    abstract: PMCAbstract | None = None
    permissions: PMCPermissions | None = None
    self_uri: PMCSelfURI | None = Field(None, alias="SelfURI")
    related_article: PMCRelatedArticle | None = None
    custom_meta_group: PMCCustomMetaGroup | None = None
    volume: str = ""
    issue: str = ""
    f_page: str = Field("", alias="FPage")
    l_page: str = Field("", alias="LPage")
    aff_list: list[PMCAff] = []


class PMCFront(XMLRecord):
    journal_meta: PMCJournalMeta = PMCJournalMeta()
    article_meta: PMCArticleMeta = PMCArticleMeta()


class PMCXRef(XMLRecord):
    ref_type: str = ""
    rid: str = Field("", alias="RID")
    text: str = ""


class PMCCaption(XMLRecord):
    paragraphs: list[str] = []


class PMCGraphic(XMLRecord):
    href: str = ""


class PMCFigure(XMLRecord):
    id: str = Field("", alias="ID")
    label: str = ""
    caption: PMCCaption = PMCCaption()
    graphic: PMCGraphic = PMCGraphic()


class PMCTableWrap(XMLRecord):
    id: str = Field("", alias="ID")
    label: str = ""
    caption: PMCCaption = PMCCaption()
    graphic: PMCGraphic = PMCGraphic()


class PMCSection(XMLRecord):
    """A body section; sections nest through ``sub_sections``."""

    id: str = Field("", alias="ID")
    sec_type: str = ""
    title: str = ""
    paragraphs: list[str] | None = None
    sub_sections: list["PMCSection"] = []
    figures: list[PMCFigure] = []
    tables: list[PMCTableWrap] = []
    x_refs: list[PMCXRef] = Field([], alias="XRefs")


class PMCBody(XMLRecord):
    sections: list[PMCSection] = []


class PMCAcknowledgments(XMLRecord):
    paragraphs: list[str] | None = None


class PMCElementCitation(XMLRecord):
    publication_type: str = ""
    article_title: str = ""
    source: str = ""
    year: str = ""
    volume: str = ""
    f_page: str = Field("", alias="FPage")
    l_page: str = Field("", alias="LPage")
    pub_id: str = Field("", alias="PubID")
    name: list[PMCName] = []


class PMCMixedCitation(XMLRecord):
    publication_type: str = ""
    article_title: str = ""
    source: str = ""
    year: str = ""
    volume: str = ""
    f_page: str = Field("", alias="FPage")
    l_page: str = Field("", alias="LPage")
    pub_id: str = Field("", alias="PubID")


class PMCReference(XMLRecord):
    id: str = Field("", alias="ID")
    element_citation: PMCElementCitation | None = None
    mixed_citation: PMCMixedCitation | None = None


class PMCReferences(XMLRecord):
    references: list[PMCReference] | None = None


class PMCFootnote(XMLRecord):
    type: str = ""
    text: list[str] = []


class PMCFnGroup(XMLRecord):
    footnotes: list[PMCFootnote] = []


class PMCBack(XMLRecord):
    acknowledgments: PMCAcknowledgments | None = None
    references: PMCReferences | None = None
    fn_group: PMCFnGroup | None = None


class PMCFloatsGroup(XMLRecord):
    figures: list[PMCFigure] = []
    tables: list[PMCTableWrap] = []


class PMCArticle(XMLRecord):
    """Root of a JATS full-text article."""

    family: ClassVar[str] = "pmc"
    schema_name: ClassVar[str] = "pmc"

    article_type: str = ""
    front: PMCFront = PMCFront()
    body: PMCBody | None = None
    back: PMCBack | None = None
    floats_group: PMCFloatsGroup | None = None
