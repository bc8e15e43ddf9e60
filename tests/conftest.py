"""Pytest fixtures for pubparse tests."""

import pytest

PUBMED_XML = b"""<?xml version="1.0" encoding="UTF-8"?>
<PubmedArticleSet>
  <PubmedArticle>
    <MedlineCitation Status="MEDLINE" Owner="NLM" IndexingMethod="Automated">
      <PMID Version="1">31452104</PMID>
      <DateRevised>
        <Year>2020</Year>
        <Month>03</Month>
        <Day>09</Day>
      </DateRevised>
      <Article PubModel="Print">
        <Journal>
          <ISSN IssnType="Electronic">1476-4687</ISSN>
          <JournalIssue CitedMedium="Internet">
            <Volume>572</Volume>
            <Issue>7768</Issue>
            <PubDate>
              <Year>2019</Year>
              <Month>Aug</Month>
            </PubDate>
          </JournalIssue>
          <Title>Nature</Title>
          <ISOAbbreviation>Nature</ISOAbbreviation>
        </Journal>
        <ArticleTitle>Cell-type <i>specific</i> regulation of gene expression.</ArticleTitle>
        <Pagination>
          <MedlinePgn>199-204</MedlinePgn>
        </Pagination>
        <Abstract>
          <AbstractText Label="BACKGROUND">Background text.</AbstractText>
          <AbstractText Label="RESULTS">Results text.</AbstractText>
          <CopyrightInformation>(c) 2019 The Authors</CopyrightInformation>
        </Abstract>
        <AuthorList CompleteYN="Y">
          <Author ValidYN="Y">
            <LastName>Curie</LastName>
            <ForeName>Marie</ForeName>
            <Initials>M</Initials>
            <AffiliationInfo>
              <Affiliation>Institut du Radium, Paris.</Affiliation>
            </AffiliationInfo>
          </Author>
          <Author ValidYN="Y">
            <CollectiveName>Genome Consortium</CollectiveName>
          </Author>
        </AuthorList>
        <Language>eng</Language>
        <PublicationTypeList>
          <PublicationType UI="D016428">Journal Article</PublicationType>
        </PublicationTypeList>
      </Article>
      <MedlineJournalInfo>
        <Country>England</Country>
        <MedlineTA>Nature</MedlineTA>
        <NlmUniqueID>0410462</NlmUniqueID>
        <ISSNLinking>0028-0836</ISSNLinking>
      </MedlineJournalInfo>
      <MeshHeadingList>
        <MeshHeading>
          <DescriptorName UI="D005786" MajorTopicYN="N">Gene Expression Regulation</DescriptorName>
          <QualifierName UI="Q000502" MajorTopicYN="Y">physiology</QualifierName>
        </MeshHeading>
      </MeshHeadingList>
      <KeywordList Owner="NOTNLM">
        <Keyword MajorTopicYN="N">chromatin</Keyword>
        <Keyword MajorTopicYN="N">enhancers</Keyword>
      </KeywordList>
    </MedlineCitation>
    <PubmedData>
      <History>
        <PubMedPubDate PubStatus="received">
          <Year>2019</Year>
          <Month>01</Month>
          <Day>15</Day>
        </PubMedPubDate>
      </History>
      <PublicationStatus>ppublish</PublicationStatus>
      <ArticleIdList>
        <ArticleId IdType="pubmed">31452104</ArticleId>
        <ArticleId IdType="doi">10.1038/s41586-019-1506-7</ArticleId>
      </ArticleIdList>
    </PubmedData>
  </PubmedArticle>
</PubmedArticleSet>
"""

PUBMED_WITH_REFERENCES_XML = b"""<?xml version="1.0"?>
<PubmedArticleSet>
  <PubmedArticle>
    <MedlineCitation Status="PubMed-not-MEDLINE" Owner="NLM">
      <PMID Version="1">100</PMID>
      <Article>
        <Journal>
          <JournalIssue>
            <PubDate><MedlineDate>2001 Spring</MedlineDate></PubDate>
          </JournalIssue>
          <Title>Journal of Tests</Title>
        </Journal>
        <ArticleTitle>Referenced article</ArticleTitle>
      </Article>
    </MedlineCitation>
    <PubmedData>
      <PublicationStatus>epublish</PublicationStatus>
      <ArticleIdList>
        <ArticleId IdType="pubmed">100</ArticleId>
      </ArticleIdList>
      <ReferenceList>
        <Reference>
          <Citation>Smith J. An earlier study. 1999.</Citation>
          <ArticleIdList>
            <ArticleId IdType="pubmed">99</ArticleId>
          </ArticleIdList>
        </Reference>
      </ReferenceList>
    </PubmedData>
    <DeleteCitation>
      <PMID>98</PMID>
    </DeleteCitation>
  </PubmedArticle>
</PubmedArticleSet>
"""

BOOK_XML = b"""<?xml version="1.0"?>
<PubmedBookArticleSet>
  <PubmedBookArticle>
    <BookDocument>
      <PMID Version="1">20301295</PMID>
      <ArticleIdList>
        <ArticleId IdType="bookaccession">NBK1116</ArticleId>
      </ArticleIdList>
      <Book>
        <Publisher>
          <PublisherName>University of Washington, Seattle</PublisherName>
          <PublisherLocation>Seattle (WA)</PublisherLocation>
        </Publisher>
        <BookTitle book="gene">GeneReviews</BookTitle>
        <PubDate>
          <Year>1993</Year>
        </PubDate>
        <Medium>Internet</Medium>
        <Isbn>0000-0000</Isbn>
      </Book>
      <ArticleTitle>Example Syndrome</ArticleTitle>
      <Language>eng</Language>
      <AuthorList Type="authors">
        <Author ValidYN="Y">
          <LastName>Doe</LastName>
          <ForeName>Jane</ForeName>
          <Initials>J</Initials>
        </Author>
      </AuthorList>
      <Abstract>
        <AbstractText>Clinical characteristics.</AbstractText>
      </Abstract>
      <ItemList ListType="Keywords">
        <Item>first item</Item>
      </ItemList>
    </BookDocument>
    <PubmedBookData>
      <History>
        <PubMedPubDate PubStatus="pubmed">
          <Year>2010</Year>
          <Month>3</Month>
          <Day>20</Day>
        </PubMedPubDate>
      </History>
      <PublicationStatus>ppublish</PublicationStatus>
      <ArticleIdList>
        <ArticleId IdType="pubmed">20301295</ArticleId>
      </ArticleIdList>
    </PubmedBookData>
  </PubmedBookArticle>
</PubmedBookArticleSet>
"""

PMC_XML = b"""<?xml version="1.0"?>
<article xmlns:xlink="http://www.w3.org/1999/xlink" article-type="research-article">
  <front>
    <journal-meta>
      <journal-id journal-id-type="nlm-ta">PLoS One</journal-id>
      <journal-title-group>
        <journal-title>PLoS ONE</journal-title>
      </journal-title-group>
      <issn pub-type="epub">1932-6203</issn>
      <publisher>
        <publisher-name>Public Library of Science</publisher-name>
        <publisher-loc>San Francisco, USA</publisher-loc>
      </publisher>
    </journal-meta>
    <article-meta>
      <article-id pub-id-type="pmid">20000001</article-id>
      <article-id pub-id-type="doi">10.1371/journal.pone.0000001</article-id>
      <article-categories>
        <subj-group subj-group-type="heading">
          <subject>Research Article</subject>
        </subj-group>
      </article-categories>
      <title-group>
        <article-title>A full-text article</article-title>
      </title-group>
      <contrib-group>
        <contrib contrib-type="author" corresp="yes">
          <name>
            <surname>Lovelace</surname>
            <given-names>Ada</given-names>
          </name>
          <aff id="aff1">Analytical Engine Lab</aff>
        </contrib>
        <contrib contrib-type="author">
          <name>
            <surname>Babbage</surname>
            <given-names>Charles</given-names>
          </name>
        </contrib>
      </contrib-group>
      <pub-date pub-type="epub">
        <day>12</day>
        <month>5</month>
        <year>2010</year>
      </pub-date>
      <volume>5</volume>
      <issue>5</issue>
      <fpage>e1</fpage>
      <history>
        <date date-type="received">
          <day>1</day>
          <month>1</month>
          <year>2010</year>
        </date>
      </history>
      <permissions>
        <copyright-statement>Lovelace et al.</copyright-statement>
      </permissions>
      <abstract>
        <sec>
          <title>Background</title>
          <p>Structured abstract text.</p>
        </sec>
      </abstract>
    </article-meta>
  </front>
  <body>
    <sec id="s1">
      <title>Introduction</title>
      <p>See <xref ref-type="bibr" rid="ref1">1</xref> for details.</p>
      <sec id="s1a">
        <title>Subsection without paragraphs</title>
      </sec>
      <fig id="f1">
        <label>Figure 1</label>
        <caption><p>A figure.</p></caption>
        <graphic xlink:href="pone.0000001.g001"/>
      </fig>
    </sec>
  </body>
  <back>
    <ack>
      <p>We thank the reviewers.</p>
    </ack>
    <ref-list>
      <ref id="ref1">
        <element-citation publication-type="journal">
          <person-group person-group-type="author">
            <name>
              <surname>Turing</surname>
              <given-names>A</given-names>
            </name>
          </person-group>
          <article-title>Computing machinery and intelligence</article-title>
          <source>Mind</source>
          <year>1950</year>
          <volume>59</volume>
          <fpage>433</fpage>
          <lpage>460</lpage>
        </element-citation>
      </ref>
    </ref-list>
  </back>
</article>
"""

PMC_WITHOUT_BACK_XML = b"""<?xml version="1.0"?>
<article article-type="brief-report">
  <front>
    <journal-meta>
      <journal-title-group>
        <journal-title>Short Reports</journal-title>
      </journal-title-group>
    </journal-meta>
    <article-meta>
      <title-group>
        <article-title>No back matter here</article-title>
      </title-group>
      <contrib-group>
        <contrib contrib-type="author">
          <name>
            <surname>Hopper</surname>
            <given-names>Grace</given-names>
          </name>
        </contrib>
      </contrib-group>
    </article-meta>
  </front>
  <body>
    <sec>
      <title>Findings</title>
      <p>Only a body.</p>
    </sec>
  </body>
</article>
"""

FOREIGN_XML = b"""<?xml version="1.0"?>
<catalog>
  <book id="bk101">
    <title>XML Developer's Guide</title>
  </book>
</catalog>
"""

EMPTY_PUBMED_SET_XML = b"""<?xml version="1.0"?>
<PubmedArticleSet></PubmedArticleSet>
"""

MALFORMED_XML = b"<PubmedArticleSet><PubmedArticle></PubmedArticleSet"


@pytest.fixture
def pubmed_xml():
    """PubMed citation set with keywords and no references."""
    return PUBMED_XML


@pytest.fixture
def pubmed_with_references_xml():
    """PubMed citation set with references and an unmapped element."""
    return PUBMED_WITH_REFERENCES_XML


@pytest.fixture
def book_xml():
    """PubMed book article set without keywords, references or objects."""
    return BOOK_XML


@pytest.fixture
def pmc_xml():
    """JATS article with front, body and back matter."""
    return PMC_XML


@pytest.fixture
def pmc_without_back_xml():
    """JATS article with no back matter or floats group."""
    return PMC_WITHOUT_BACK_XML


@pytest.fixture
def foreign_xml():
    """Well-formed XML that belongs to none of the article families."""
    return FOREIGN_XML


@pytest.fixture
def write_xml(tmp_path):
    """Write XML bytes into tmp_path/input and return the file path."""
    input_dir = tmp_path / "input"
    input_dir.mkdir(exist_ok=True)

    def _write(name: str, data: bytes):
        path = input_dir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        return path

    return _write


@pytest.fixture
def mixed_batch(write_xml):
    """Five inputs, one of which has an unrecognized structure."""
    return [
        write_xml("a_pubmed.xml", PUBMED_XML),
        write_xml("b_references.xml", PUBMED_WITH_REFERENCES_XML),
        write_xml("c_book.xml", BOOK_XML),
        write_xml("d_pmc.xml", PMC_XML),
        write_xml("e_catalog.xml", FOREIGN_XML),
    ]


@pytest.fixture
def empty_pubmed_set_xml():
    """PubmedArticleSet root with no articles."""
    return EMPTY_PUBMED_SET_XML


@pytest.fixture
def malformed_xml():
    """Truncated, not well-formed XML."""
    return MALFORMED_XML
