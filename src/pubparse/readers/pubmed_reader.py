"""Reader for PubMed citation documents (PubmedArticleSet).

Also provides the record builders shared with the book reader, since both
PubMed dialects use the same ArticleIdList, Abstract, Author, Reference, ...
elements.
"""

import logging

from lxml import etree

from schemas.pubmed import (
    Abstract,
    AffiliationInfo,
    Article,
    ArticleId,
    ArticleIdList,
    Author,
    Chemical,
    GeneSymbolList,
    Grant,
    GrantList,
    Journal,
    JournalIssue,
    JournalPubDate,
    MedlineCitation,
    MedlineJournalInfo,
    MeshHeading,
    MeshHeadingList,
    Object,
    PublicationType,
    PubmedArticle,
    PubmedArticleSet,
    PubmedData,
    PubMedPubDate,
    QualifierName,
    Reference,
    SupplMeshList,
    UnknownElement,
)

from .reader import ArticleReader
from .xml_utils import attr, child_text, child_texts, inner_xml, text_of

logger = logging.getLogger(__name__)

KNOWN_ARTICLE_CHILDREN = {"MedlineCitation", "PubmedData"}


def read_article_id_list(parent: etree._Element | None) -> ArticleIdList:
    if parent is None:
        return ArticleIdList()
    return ArticleIdList(
        article_ids=[
            ArticleId(id=text_of(el), id_type=attr(el, "IdType"))
            for el in parent.findall("ArticleIdList/ArticleId")
        ]
    )


def read_pub_date(element: etree._Element | None) -> PubMedPubDate:
    if element is None:
        return PubMedPubDate()
    return PubMedPubDate(
        year=child_text(element, "Year"),
        month=child_text(element, "Month"),
        day=child_text(element, "Day"),
        hour=child_text(element, "Hour"),
        minute=child_text(element, "Minute"),
        pub_status=attr(element, "PubStatus"),
    )


def read_abstract(element: etree._Element | None) -> Abstract:
    """Build an Abstract; structured abstracts keep one segment per line."""
    if element is None:
        return Abstract()
    return Abstract(
        abstract_text="\n".join(child_texts(element, "AbstractText")),
        copyright_information=child_text(element, "CopyrightInformation"),
    )


def read_author(element: etree._Element) -> Author:
    return Author(
        last_name=child_text(element, "LastName"),
        fore_name=child_text(element, "ForeName"),
        initials=child_text(element, "Initials"),
        suffix=child_text(element, "Suffix"),
        collective_name=child_text(element, "CollectiveName"),
        affiliation_info=[
            AffiliationInfo(
                affiliation=child_text(el, "Affiliation"),
                identifier=child_text(el, "Identifier"),
            )
            for el in element.findall("AffiliationInfo")
        ],
        valid_yn=attr(element, "ValidYN"),
    )


def read_grant_list(element: etree._Element | None) -> GrantList:
    if element is None:
        return GrantList()
    return GrantList(
        grants=[
            Grant(
                grant_id=child_text(el, "GrantID"),
                acronym=child_text(el, "Acronym"),
                agency=child_text(el, "Agency"),
                country=child_text(el, "Country"),
            )
            for el in element.findall("Grant")
        ],
        complete_yn=attr(element, "CompleteYN"),
    )


def read_references(parent: etree._Element) -> list[Reference] | None:
    """Read every Reference under any ReferenceList; None if there are none."""
    references = [
        Reference(
            citation=child_text(el, "Citation"),
            article_id_list=read_article_id_list(el),
        )
        for el in parent.findall("ReferenceList/Reference")
    ]
    return references or None


def read_objects(parent: etree._Element) -> list[Object]:
    return [
        Object(param=child_text(el, "Param"), type=attr(el, "Type"))
        for el in parent.findall("ObjectList/Object")
    ]


def read_history(parent: etree._Element) -> list[PubMedPubDate]:
    return [read_pub_date(el) for el in parent.findall("History/PubMedPubDate")]


class PubmedReader(ArticleReader):
    """Read PubmedArticleSet documents into ``PubmedArticleSet`` models.

    The document is accepted only if its root is ``<PubmedArticleSet>`` and it
    holds at least one ``<PubmedArticle>``. An empty set is not treated as a
    match so that an unrelated document never reads as an empty citation set.
    """

    family = "pubmed"
    root_tag = "PubmedArticleSet"

    def read(self, root: etree._Element) -> PubmedArticleSet:
        return PubmedArticleSet(
            pubmed_articles=[
                self._read_article(el) for el in root.findall("PubmedArticle")
            ]
        )

    def accepts(self, root: etree._Element, article: PubmedArticleSet) -> bool:
        return super().accepts(root, article) and len(article.pubmed_articles) > 0

    def _read_article(self, element: etree._Element) -> PubmedArticle:
        unknown = [
            UnknownElement(name=etree.QName(child).localname, content=inner_xml(child))
            for child in element
            if etree.QName(child).localname not in KNOWN_ARTICLE_CHILDREN
        ]
        if unknown:
            logger.debug(
                f"Kept {len(unknown)} unmapped element(s) in PubmedArticle: "
                f"{', '.join(u.name for u in unknown)}"
            )

        return PubmedArticle(
            medline_citation=self._read_citation(element.find("MedlineCitation")),
            pubmed_data=self._read_pubmed_data(element.find("PubmedData")),
            unknown=unknown or None,
        )

    def _read_citation(self, element: etree._Element | None) -> MedlineCitation:
        if element is None:
            return MedlineCitation()

        return MedlineCitation(
            pmid=child_text(element, "PMID"),
            date_completed=read_pub_date(element.find("DateCompleted")),
            date_revised=read_pub_date(element.find("DateRevised")),
            article=self._read_article_metadata(element.find("Article")),
            medline_journal_info=self._read_journal_info(
                element.find("MedlineJournalInfo")
            ),
            chemical_list=[
                Chemical(
                    registry_number=child_text(el, "RegistryNumber"),
                    name_of_substance=child_text(el, "NameOfSubstance"),
                )
                for el in element.findall("ChemicalList/Chemical")
            ],
            suppl_mesh_list=SupplMeshList(
                suppl_mesh_names=child_texts(element, "SupplMeshList/SupplMeshName")
            ),
            citation_subset=child_text(element, "CitationSubset"),
            comments_corrections_list=child_text(element, "CommentsCorrectionsList"),
            gene_symbol_list=GeneSymbolList(
                gene_symbols=child_texts(element, "GeneSymbolList/GeneSymbol")
            ),
            mesh_heading_list=self._read_mesh_headings(element.find("MeshHeadingList")),
            number_of_references=child_text(element, "NumberOfReferences"),
            personal_name_subject_list=child_text(element, "PersonalNameSubjectList"),
            other_id=child_text(element, "OtherID"),
            other_abstract=read_abstract(element.find("OtherAbstract")),
            keyword_list=child_texts(element, "KeywordList/Keyword") or None,
            coi_statement=child_text(element, "CoiStatement"),
            space_flight_mission=child_text(element, "SpaceFlightMission"),
            investigator_list=child_text(element, "InvestigatorList"),
            general_note=child_text(element, "GeneralNote"),
            owner=attr(element, "Owner"),
            status=attr(element, "Status"),
            medline=attr(element, "MEDLINE"),
            version_id=attr(element, "VersionID"),
            version_date=attr(element, "VersionDate"),
            indexing_method=attr(element, "IndexingMethod"),
        )

    def _read_article_metadata(self, element: etree._Element | None) -> Article:
        if element is None:
            return Article()
        return Article(
            journal=self._read_journal(element.find("Journal")),
            article_title=child_text(element, "ArticleTitle"),
            pagination=child_text(element, "Pagination/MedlinePgn"),
            abstract=read_abstract(element.find("Abstract")),
            author_list=[read_author(el) for el in element.findall("AuthorList/Author")],
            language=child_texts(element, "Language"),
            publication_type_list=[
                PublicationType(text=text_of(el), ui=attr(el, "UI"))
                for el in element.findall("PublicationTypeList/PublicationType")
            ],
            article_date=read_pub_date(element.find("ArticleDate")),
        )

    def _read_journal(self, element: etree._Element | None) -> Journal:
        if element is None:
            return Journal()
        issue = element.find("JournalIssue")
        pub_date = issue.find("PubDate") if issue is not None else None
        return Journal(
            issn=child_text(element, "ISSN"),
            journal_issue=JournalIssue(
                volume=child_text(issue, "Volume"),
                issue=child_text(issue, "Issue"),
                pub_date=JournalPubDate(
                    year=child_text(pub_date, "Year"),
                    month=child_text(pub_date, "Month"),
                    day=child_text(pub_date, "Day"),
                    medline_date=child_text(pub_date, "MedlineDate"),
                ),
                cited_medium=attr(issue, "CitedMedium"),
            ),
            title=child_text(element, "Title"),
            iso_abbreviation=child_text(element, "ISOAbbreviation"),
        )

    def _read_journal_info(self, element: etree._Element | None) -> MedlineJournalInfo:
        if element is None:
            return MedlineJournalInfo()
        return MedlineJournalInfo(
            country=child_text(element, "Country"),
            medline_ta=child_text(element, "MedlineTA"),
            nlm_unique_id=child_text(element, "NlmUniqueID"),
            issn_linking=child_text(element, "ISSNLinking"),
        )

    def _read_mesh_headings(self, element: etree._Element | None) -> MeshHeadingList:
        if element is None:
            return MeshHeadingList()
        headings = []
        for el in element.findall("MeshHeading"):
            descriptor = el.find("DescriptorName")
            headings.append(
                MeshHeading(
                    descriptor_name=text_of(descriptor),
                    descriptor_ui=attr(descriptor, "UI"),
                    major_topic_yn=attr(descriptor, "MajorTopicYN"),
                    qualifiers=[
                        QualifierName(
                            text=text_of(q),
                            ui=attr(q, "UI"),
                            major_topic_yn=attr(q, "MajorTopicYN"),
                        )
                        for q in el.findall("QualifierName")
                    ],
                )
            )
        return MeshHeadingList(mesh_headings=headings)

    def _read_pubmed_data(self, element: etree._Element | None) -> PubmedData:
        if element is None:
            return PubmedData()
        return PubmedData(
            history=read_history(element),
            publication_status=child_text(element, "PublicationStatus"),
            article_id_list=read_article_id_list(element),
            object_list=read_objects(element),
            reference_list=read_references(element),
        )
