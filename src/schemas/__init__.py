"""Schema definitions for pubparse."""

from .base import XMLRecord
from .pmc import PMCArticle
from .pubmed import PubmedArticle, PubmedArticleSet
from .pubmed_book import PubmedBookArticle, PubmedBookArticleSet
from .result import BatchResult, ConversionResult, Stage

ParsedArticle = PubmedArticleSet | PubmedBookArticleSet | PMCArticle

__all__ = [
    "BatchResult",
    "ConversionResult",
    "ParsedArticle",
    "PMCArticle",
    "PubmedArticle",
    "PubmedArticleSet",
    "PubmedBookArticle",
    "PubmedBookArticleSet",
    "Stage",
    "XMLRecord",
]
