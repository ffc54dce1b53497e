"""
Immutable in-memory catalog store.

The catalog is read once from a JSON document, sorted by surname with
Spanish collation and never modified afterwards. Request handlers share a
single instance by reference.
"""

import json
from pathlib import Path
from typing import Iterable, Iterator, List, Tuple, Union

from pydantic import ValidationError

from catalog.collation import collation_key
from catalog.errors import CatalogLoadError
from catalog.models import Author


class Catalog:
    """Ordered, read-only collection of authors."""

    def __init__(self, authors: Iterable[Author]):
        # sorted() is stable, so equal surnames keep their source order
        self._authors: Tuple[Author, ...] = tuple(
            sorted(authors, key=lambda author: collation_key(author.surname))
        )

    @property
    def authors(self) -> Tuple[Author, ...]:
        return self._authors

    def __iter__(self) -> Iterator[Author]:
        return iter(self._authors)

    def __len__(self) -> int:
        return len(self._authors)

    def __repr__(self) -> str:
        return f"Catalog(authors={len(self._authors)})"

    @classmethod
    def from_records(cls, records: List[dict]) -> "Catalog":
        """
        Build a catalog from raw author records.

        Args:
            records: Author objects as found in the source document

        Returns:
            Sorted catalog

        Raises:
            ValidationError: If a record does not describe an author
        """
        return cls(Author.model_validate(record) for record in records)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "Catalog":
        """
        Load the catalog from a JSON document holding an array of authors.

        Args:
            path: Location of the document

        Returns:
            Sorted catalog

        Raises:
            CatalogLoadError: If the document is missing or malformed
        """
        path = Path(path)

        try:
            with path.open("r", encoding="utf-8") as f:
                raw = json.load(f)
        except FileNotFoundError:
            raise CatalogLoadError(path, "file not found")
        except json.JSONDecodeError as e:
            raise CatalogLoadError(path, f"invalid JSON: {e}")

        if not isinstance(raw, list):
            raise CatalogLoadError(path, "expected a JSON array of authors")

        try:
            return cls.from_records(raw)
        except ValidationError as e:
            raise CatalogLoadError(path, f"invalid author record: {e}")
