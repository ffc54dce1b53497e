"""
Pytest configuration and shared fixtures.
"""

import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from api.config import APIConfig
from api.main import create_app
from catalog.store import Catalog

PROJECT_ROOT = Path(__file__).resolve().parents[1]


@pytest.fixture
def sample_author_records():
    """Raw author records in the source document's shape, deliberately unsorted."""
    return [
        {
            "autor_nombre": "Victor",
            "autor_apellido": "Hugo",
            "obras": [
                {"titulo": "Nuestra Señora de París", "edicion": 1831},
                {"titulo": "Los miserables", "edicion": 1862}
            ]
        },
        {
            "autor_nombre": "Alexandre",
            "autor_apellido": "Dumas",
            "nacionalidad": "francesa",
            "obras": [
                {"titulo": "Los tres mosqueteros", "edicion": 1844},
                {"titulo": "El conde de Montecristo", "edicion": "1844"}
            ]
        },
        {
            "autor_nombre": "Serafín",
            "autor_apellido": "Álvarez Quintero",
            "obras": [
                {"titulo": "El patio", "edicion": 1900}
            ]
        },
        {
            "autor_nombre": "Leopoldo",
            "autor_apellido": "Alas",
            "obras": [
                {"titulo": "La Regenta", "edicion": " 1884 "}
            ]
        },
        {
            "autor_nombre": "Alexandre",
            "autor_apellido": "Dumas hijo",
            "obras": [
                {"titulo": "La dama de las camelias", "edicion": 1848}
            ]
        },
        {
            "autor_nombre": "José",
            "autor_apellido": "Muñoz Seca",
            "obras": [
                {"titulo": "La venganza de Don Mendo", "edicion": "1918"},
                {"titulo": "El roble de la Jarosa", "edicion": 1844}
            ]
        },
        {
            "autor_nombre": "Juan",
            "autor_apellido": "Murillo",
            "obras": []
        }
    ]


@pytest.fixture
def catalog(sample_author_records):
    """Catalog built from the sample records."""
    return Catalog.from_records(sample_author_records)


@pytest.fixture
def catalog_file(tmp_path, sample_author_records):
    """Sample records written to a JSON document."""
    path = tmp_path / "ebooks.json"
    path.write_text(json.dumps(sample_author_records, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def api_settings(catalog_file):
    """API settings pointing at the sample catalog and the bundled static pages."""
    return APIConfig(
        data_file=str(catalog_file),
        static_dir=str(PROJECT_ROOT / "public"),
        debug=False
    )


@pytest.fixture
def client(api_settings):
    """Test client with the lifespan running, so the catalog is loaded."""
    with TestClient(create_app(api_settings)) as test_client:
        yield test_client
