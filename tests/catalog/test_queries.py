"""
Unit tests for the catalog query engine.
"""

import pytest

from catalog import queries
from catalog.errors import LookupMiss, MissingParameterError
from catalog.models import Work


def _surnames(authors):
    return [author.surname for author in authors]


class TestNormalizeYear:
    """Test cases for edition year normalization."""

    @pytest.mark.parametrize("value,expected", [
        (1844, 1844),
        ("1844", 1844),
        (" 1844 ", 1844),
        ("18a4", None),
        ("", None),
        ("-1844", None),
        ("\u0661\u0668\u0664\u0664", None),
        (None, None),
        (True, None),
    ])
    def test_normalize_year(self, value, expected):
        """Test conversion of stored and requested years."""
        assert queries.normalize_year(value) == expected


class TestListAuthors:
    """Test cases for the full listing."""

    def test_returns_whole_catalog_in_order(self, catalog):
        """Test that every author is returned in catalog order."""
        assert queries.list_authors(catalog) == list(catalog.authors)


class TestFilterBySurname:
    """Test cases for the surname substring filter."""

    def test_substring_match_ignores_case(self, catalog):
        """Test that a lowercase fragment matches capitalized surnames."""
        assert _surnames(queries.filter_by_surname(catalog, "dumas")) == ["Dumas", "Dumas hijo"]

    def test_filter_is_sound_and_complete(self, catalog):
        """Test that exactly the containing surnames are returned."""
        fragment = "U"
        matched = queries.filter_by_surname(catalog, fragment)

        for author in catalog:
            contains = fragment.lower() in author.surname.lower()
            assert (author in matched) == contains

    def test_match_in_middle_of_surname(self, catalog):
        """Test that the fragment need not be a prefix."""
        assert _surnames(queries.filter_by_surname(catalog, "quin")) == ["Álvarez Quintero"]

    def test_accents_are_not_folded(self, catalog):
        """Test that filters compare accents literally."""
        assert queries.filter_by_surname(catalog, "alvarez") == []
        assert _surnames(queries.filter_by_surname(catalog, "álvarez")) == ["Álvarez Quintero"]

    def test_absent_fragment(self, catalog):
        """Test that an unknown fragment yields an empty list."""
        assert queries.filter_by_surname(catalog, "Zzzqx") == []


class TestFindByFullName:
    """Test cases for the exact name and surname lookup."""

    def test_exact_match_ignores_case(self, catalog):
        """Test that case-varied input finds the author."""
        authors = queries.find_by_full_name(catalog, "alexandre", "DUMAS")

        assert len(authors) == 1
        assert authors[0].name == "Alexandre"
        assert authors[0].surname == "Dumas"

    def test_surname_must_match_entirely(self, catalog):
        """Test that a partial surname does not match."""
        assert queries.find_by_full_name(catalog, "Alexandre", "Dum") == []

    def test_name_must_match(self, catalog):
        """Test that the right surname with the wrong name does not match."""
        assert queries.find_by_full_name(catalog, "Victor", "Dumas") == []


class TestFilterByNameAndSurnamePrefix:
    """Test cases for the name plus surname prefix lookup."""

    def test_prefix_match(self, catalog):
        """Test that every Alexandre whose surname starts with Du is returned."""
        authors = queries.filter_by_name_and_surname_prefix(catalog, "Alexandre", "Du")
        assert _surnames(authors) == ["Dumas", "Dumas hijo"]

    def test_prefix_ignores_case(self, catalog):
        """Test case-insensitive name and prefix."""
        authors = queries.filter_by_name_and_surname_prefix(catalog, "ALEXANDRE", "dumas h")
        assert _surnames(authors) == ["Dumas hijo"]

    def test_prefix_must_start_surname(self, catalog):
        """Test that a fragment from the middle of the surname does not match."""
        assert queries.filter_by_name_and_surname_prefix(catalog, "Alexandre", "umas") == []

    def test_other_name_excluded(self, catalog):
        """Test that the name must match exactly."""
        assert queries.filter_by_name_and_surname_prefix(catalog, "Victor", "Du") == []

    def test_empty_prefix_matches_every_surname(self, catalog):
        """Test that an empty prefix keeps all authors with the name."""
        authors = queries.filter_by_name_and_surname_prefix(catalog, "Alexandre", "")
        assert _surnames(authors) == ["Dumas", "Dumas hijo"]

    def test_missing_prefix_raises(self, catalog):
        """Test that a missing prefix is distinct from no matches."""
        with pytest.raises(MissingParameterError) as exc_info:
            queries.filter_by_name_and_surname_prefix(catalog, "Alexandre", None)

        assert exc_info.value.parameter == "apellido"
        assert exc_info.value.message == "Falta el parámetro apellido"
        assert isinstance(exc_info.value, LookupMiss)


class TestWorksByEditionYear:
    """Test cases for the edition year lookup."""

    def test_returns_flat_list_of_works(self, catalog):
        """Test that works, not authors, are returned across authors."""
        works = queries.works_by_edition_year(catalog, "1844")

        assert all(isinstance(work, Work) for work in works)
        assert [work.titulo for work in works] == [
            "Los tres mosqueteros",
            "El conde de Montecristo",
            "El roble de la Jarosa",
        ]

    def test_int_and_str_years_are_equivalent(self, catalog):
        """Test that stored ints and strings both match either request type."""
        assert queries.works_by_edition_year(catalog, 1844) == queries.works_by_edition_year(catalog, "1844")

    def test_stored_year_with_whitespace(self, catalog):
        """Test that stored years are normalized too."""
        works = queries.works_by_edition_year(catalog, "1884")
        assert [work.titulo for work in works] == ["La Regenta"]

    def test_non_numeric_year(self, catalog):
        """Test that a non-numeric year matches nothing."""
        assert queries.works_by_edition_year(catalog, "mil") == []

    def test_year_without_works(self, catalog):
        """Test that a year no work has yields an empty list."""
        assert queries.works_by_edition_year(catalog, "2024") == []


class TestQueriesDoNotMutate:
    """Test that queries leave the catalog untouched."""

    def test_catalog_unchanged_after_queries(self, catalog):
        """Test that running every query keeps the same snapshot."""
        before = catalog.authors

        queries.filter_by_surname(catalog, "a")
        queries.find_by_full_name(catalog, "Alexandre", "Dumas")
        queries.filter_by_name_and_surname_prefix(catalog, "Alexandre", "D")
        queries.works_by_edition_year(catalog, "1844")

        assert catalog.authors is before
