"""
Query engine over the catalog.

Every function is pure: it reads the catalog, never modifies it, and returns
matches in catalog order. Filters compare with plain lowercase folding; only
the load-time sort uses locale collation.
"""

from typing import List, Optional, Union

from catalog.errors import MissingParameterError
from catalog.models import Author, Work
from catalog.store import Catalog


def normalize_year(value: Union[int, str, None]) -> Optional[int]:
    """
    Convert an edition year to an int.

    Ints are returned as-is. Strings are stripped and converted when they
    hold only ASCII digits. Anything else yields None, which matches no year.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        stripped = value.strip()
        if stripped.isascii() and stripped.isdigit():
            return int(stripped)
    return None


def list_authors(catalog: Catalog) -> List[Author]:
    """Return every author, in catalog order."""
    return list(catalog)


def filter_by_surname(catalog: Catalog, fragment: str) -> List[Author]:
    """Authors whose surname contains ``fragment``, ignoring case."""
    needle = fragment.lower()
    return [author for author in catalog if needle in author.surname.lower()]


def find_by_full_name(catalog: Catalog, name: str, surname: str) -> List[Author]:
    """Authors whose name and surname both equal the inputs, ignoring case."""
    name = name.lower()
    surname = surname.lower()
    return [
        author for author in catalog
        if author.name.lower() == name and author.surname.lower() == surname
    ]


def filter_by_name_and_surname_prefix(
    catalog: Catalog,
    name: str,
    prefix: Optional[str]
) -> List[Author]:
    """
    Authors with exactly ``name`` whose surname starts with ``prefix``.

    Args:
        catalog: Catalog to search
        name: Exact first name, compared ignoring case
        prefix: Start of the surname, compared ignoring case

    Returns:
        Matching authors in catalog order

    Raises:
        MissingParameterError: If no prefix was supplied
    """
    if prefix is None:
        raise MissingParameterError("apellido")

    name = name.lower()
    prefix = prefix.lower()
    return [
        author for author in catalog
        if author.name.lower() == name and author.surname.lower().startswith(prefix)
    ]


def works_by_edition_year(catalog: Catalog, year: Union[int, str]) -> List[Work]:
    """
    Works edited in ``year`` across every author.

    Results are flattened: author order first, then each author's work order.
    """
    wanted = normalize_year(year)
    if wanted is None:
        return []

    return [
        work
        for author in catalog
        for work in author.works
        if normalize_year(work.edition_year) == wanted
    ]
