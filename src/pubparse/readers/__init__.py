"""Readers that turn XML documents into article-family models."""

from .book_reader import PubmedBookReader
from .discriminator import DEFAULT_READERS, discriminate
from .pmc_reader import PMCReader
from .pubmed_reader import PubmedReader
from .reader import ArticleReader

__all__ = [
    "ArticleReader",
    "DEFAULT_READERS",
    "PMCReader",
    "PubmedBookReader",
    "PubmedReader",
    "discriminate",
]
