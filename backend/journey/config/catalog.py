"""
Reading Catalog

The fixed set of SAL books that reading progress is measured against.
Chapter totals come from the catalog, never from the progress records, so
a reader who has touched two chapters of a twelve-chapter book is not
counted as having finished it.

The defaults below can be replaced through config/default.yaml:

    catalog:
      books:
        - id: book-1
          title: Life Leadership & Education
          total_chapters: 5

Usage:
    from journey.config.catalog import get_book_catalog

    books = get_book_catalog()
    total = sum(book.total_chapters for book in books)
"""

import logging
from functools import lru_cache

from pydantic import ValidationError

from journey.config.settings import yaml_config
from journey.models.records import BookCatalogEntry

logger = logging.getLogger(__name__)


DEFAULT_BOOKS: tuple[BookCatalogEntry, ...] = (
    BookCatalogEntry(id="book-1", title="Life Leadership & Education", total_chapters=5),
    BookCatalogEntry(id="book-2", title="Change, Growth & Freedom", total_chapters=12),
    BookCatalogEntry(id="book-3", title="SAL Philosophy", total_chapters=7),
    BookCatalogEntry(id="book-4", title="SAL Theory", total_chapters=21),
    BookCatalogEntry(id="book-5", title="SAL Model", total_chapters=9),
    BookCatalogEntry(id="book-6", title="Success Stories", total_chapters=12),
    BookCatalogEntry(id="book-7", title="Pedagogy", total_chapters=10),
    BookCatalogEntry(id="book-8", title="Sovereignty", total_chapters=5),
)


@lru_cache()
def get_book_catalog() -> tuple[BookCatalogEntry, ...]:
    """
    Get the reading catalog.

    Books configured under ``catalog.books`` in config/default.yaml take
    precedence. An invalid configured catalog is logged and the built-in
    defaults are used instead.

    Returns:
        Tuple of catalog entries in display order.
    """
    configured = (yaml_config.get("catalog") or {}).get("books")
    if not configured:
        return DEFAULT_BOOKS

    try:
        return tuple(BookCatalogEntry.model_validate(book) for book in configured)
    except ValidationError as e:
        logger.warning(f"Invalid book catalog in config, using defaults: {e}")
        return DEFAULT_BOOKS
