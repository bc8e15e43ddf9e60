"""Normalization of parsed articles ahead of serialization."""

from .normalizer import (
    normalize,
    normalize_pmc_article,
    normalize_pubmed_article_set,
    normalize_pubmed_book_article_set,
)

__all__ = [
    "normalize",
    "normalize_pmc_article",
    "normalize_pubmed_article_set",
    "normalize_pubmed_book_article_set",
]
