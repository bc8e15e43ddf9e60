"""PubMed citation schemas (PubmedArticleSet documents).

A PubmedArticleSet holds one or more PubmedArticle elements, each pairing a
MedlineCitation with PubmedData:

    PubmedArticleSet
    └── PubmedArticle
        ├── MedlineCitation
        │   ├── Article (Journal, Abstract, AuthorList, ...)
        │   ├── MeshHeadingList, ChemicalList, KeywordList, ...
        └── PubmedData
            ├── History, ArticleIdList
            └── ReferenceList

Fields left as ``None`` mark collections that were absent from the source
document; see ``pubparse.normalizers`` for how they are filled in.
"""

from typing import ClassVar

from pydantic import Field

from .base import XMLRecord


class ArticleId(XMLRecord):
    """One identifier (DOI, PMID, PMC, ...) with its IdType attribute."""

    id: str = Field("", alias="ID")
    id_type: str = ""


class ArticleIdList(XMLRecord):
    article_ids: list[ArticleId] = []


class PubMedPubDate(XMLRecord):
    """A date in PubMed's Year/Month/Day[/Hour/Minute] form.

    Used for DateCompleted, DateRevised, ArticleDate and History entries.
    """

    year: str = ""
    month: str = ""
    day: str = ""
    hour: str = ""
    minute: str = ""
    pub_status: str = ""


class Abstract(XMLRecord):
    """Abstract text; structured abstracts are joined one segment per line."""

    abstract_text: str = ""
    copyright_information: str = ""


class AffiliationInfo(XMLRecord):
    affiliation: str = ""
    identifier: str = ""


class Author(XMLRecord):
    """A personal or collective author."""

    last_name: str = ""
    fore_name: str = ""
    initials: str = ""
    suffix: str = ""
    collective_name: str = ""
    affiliation_info: list[AffiliationInfo] = []
    valid_yn: str = Field("", alias="ValidYN")


class PublicationType(XMLRecord):
    text: str = ""
    ui: str = Field("", alias="UI")


class JournalPubDate(XMLRecord):
    year: str = ""
    month: str = ""
    day: str = ""
    medline_date: str = ""


class JournalIssue(XMLRecord):
    volume: str = ""
    issue: str = ""
    pub_date: JournalPubDate = JournalPubDate()
    cited_medium: str = ""


class Journal(XMLRecord):
    issn: str = Field("", alias="ISSN")
    journal_issue: JournalIssue = JournalIssue()
    title: str = ""
    iso_abbreviation: str = Field("", alias="ISOAbbreviation")


class MedlineJournalInfo(XMLRecord):
    country: str = ""
    medline_ta: str = Field("", alias="MedlineTA")
    nlm_unique_id: str = Field("", alias="NlmUniqueID")
    issn_linking: str = Field("", alias="ISSNLinking")


class Article(XMLRecord):
    """Core bibliographic metadata of a citation."""

    journal: Journal = Journal()
    article_title: str = ""
    pagination: str = ""
    abstract: Abstract = Abstract()
    author_list: list[Author] = []
    language: list[str] = []
    publication_type_list: list[PublicationType] = []
    article_date: PubMedPubDate = PubMedPubDate()


class Chemical(XMLRecord):
    registry_number: str = ""
    name_of_substance: str = ""


class QualifierName(XMLRecord):
    text: str = ""
    ui: str = Field("", alias="UI")
    major_topic_yn: str = Field("", alias="MajorTopicYN")


class MeshHeading(XMLRecord):
    descriptor_name: str = ""
    descriptor_ui: str = Field("", alias="DescriptorUI")
    major_topic_yn: str = Field("", alias="MajorTopicYN")
    qualifiers: list[QualifierName] = []


class MeshHeadingList(XMLRecord):
    mesh_headings: list[MeshHeading] = []


class GeneSymbolList(XMLRecord):
    gene_symbols: list[str] = []


class SupplMeshList(XMLRecord):
    suppl_mesh_names: list[str] = []


class Grant(XMLRecord):
    grant_id: str = Field("", alias="GrantID")
    acronym: str = ""
    agency: str = ""
    country: str = ""


class GrantList(XMLRecord):
    grants: list[Grant] = []
    complete_yn: str = Field("", alias="CompleteYN")


class Reference(XMLRecord):
    """A cited publication from a ReferenceList."""

    citation: str = ""
    article_id_list: ArticleIdList = ArticleIdList()


class Object(XMLRecord):
    param: str = ""
    type: str = ""


class MedlineCitation(XMLRecord):
    """The MEDLINE record: bibliographic content plus indexing terms."""

    pmid: str = Field("", alias="PMID")
    date_completed: PubMedPubDate = PubMedPubDate()
    date_revised: PubMedPubDate = PubMedPubDate()
    article: Article = Article()
    medline_journal_info: MedlineJournalInfo = MedlineJournalInfo()
    chemical_list: list[Chemical] = []
    suppl_mesh_list: SupplMeshList = SupplMeshList()
    citation_subset: str = ""
    comments_corrections_list: str = ""
    gene_symbol_list: GeneSymbolList = GeneSymbolList()
    mesh_heading_list: MeshHeadingList = MeshHeadingList()
    number_of_references: str = ""
    personal_name_subject_list: str = ""
    other_id: str = Field("", alias="OtherID")
    other_abstract: Abstract = Abstract()
    keyword_list: list[str] | None = None
    coi_statement: str = ""
    space_flight_mission: str = ""
    investigator_list: str = ""
    general_note: str = ""

    # Attributes of <MedlineCitation>
    owner: str = ""
    status: str = ""
    medline: str = ""
    version_id: str = Field("", alias="VersionID")
    version_date: str = ""
    indexing_method: str = ""


class PubmedData(XMLRecord):
    history: list[PubMedPubDate] = []
    publication_status: str = ""
    article_id_list: ArticleIdList = ArticleIdList()
    object_list: list[Object] = []
    reference_list: list[Reference] | None = None


class UnknownElement(XMLRecord):
    """A child element of PubmedArticle with no mapping, kept verbatim."""

    name: str = ""
    content: str = ""


class PubmedArticle(XMLRecord):
    medline_citation: MedlineCitation = MedlineCitation()
    pubmed_data: PubmedData = PubmedData()
    unknown: list[UnknownElement] | None = None


class PubmedArticleSet(XMLRecord):
    """Root of a regular PubMed citation document."""

    family: ClassVar[str] = "pubmed"
    schema_name: ClassVar[str] = "pubmed"

    pubmed_articles: list[PubmedArticle] = []
